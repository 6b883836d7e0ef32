"""Type effectiveness chart and lookups.

Effectiveness is fixed point: 0 immune, 1 quarter, 2 half, 4 neutral, 8 double, 16 quadruple.
"""

from __future__ import annotations

from .domain import Type

IMMUNE = 0
QUARTER = 1
HALF = 2
NEUTRAL = 4
DOUBLE = 8
QUADRUPLE = 16

_CHART_SIZE = 18

# Rows are attacking types, columns defending types, both in Type order.
TYPE_CHART: tuple[tuple[int, ...], ...] = (
    (4, 4, 4, 4, 4, 2, 4, 0, 2, 4, 4, 4, 4, 4, 4, 4, 4, 4),  # Normal
    (8, 4, 2, 2, 4, 8, 2, 0, 8, 4, 4, 4, 4, 4, 2, 8, 4, 8),  # Fighting
    (4, 8, 4, 4, 4, 2, 8, 4, 2, 4, 4, 4, 8, 2, 4, 4, 4, 4),  # Flying
    (4, 4, 4, 2, 2, 2, 4, 2, 0, 4, 4, 4, 8, 4, 4, 4, 4, 4),  # Poison
    (4, 4, 0, 8, 4, 8, 2, 4, 8, 4, 8, 4, 2, 8, 4, 4, 4, 4),  # Ground
    (4, 2, 8, 4, 2, 4, 8, 4, 2, 4, 8, 4, 4, 4, 4, 8, 4, 4),  # Rock
    (4, 2, 2, 2, 4, 4, 4, 2, 2, 4, 2, 4, 8, 4, 8, 4, 4, 8),  # Bug
    (0, 4, 4, 4, 4, 4, 4, 8, 2, 4, 4, 4, 4, 4, 8, 4, 4, 2),  # Ghost
    (4, 4, 4, 4, 4, 8, 4, 4, 2, 4, 2, 2, 4, 2, 4, 8, 4, 4),  # Steel
    (4, 4, 4, 4, 4, 4, 4, 4, 4, 4, 4, 4, 4, 4, 4, 4, 4, 4),  # Mystery
    (4, 4, 4, 4, 4, 2, 8, 4, 8, 4, 2, 2, 8, 4, 4, 8, 2, 4),  # Fire
    (4, 4, 4, 4, 8, 8, 4, 4, 4, 4, 8, 2, 2, 4, 4, 4, 2, 4),  # Water
    (4, 4, 2, 2, 8, 8, 2, 4, 2, 4, 2, 8, 2, 4, 4, 4, 2, 4),  # Grass
    (4, 4, 8, 4, 0, 4, 4, 4, 4, 4, 4, 8, 2, 2, 4, 4, 2, 4),  # Electric
    (4, 8, 4, 8, 4, 4, 4, 4, 2, 4, 4, 4, 4, 4, 2, 4, 4, 0),  # Psychic
    (4, 4, 8, 4, 8, 4, 4, 4, 2, 4, 2, 2, 8, 4, 4, 2, 8, 4),  # Ice
    (4, 4, 4, 4, 4, 4, 4, 4, 2, 4, 4, 4, 4, 4, 4, 4, 8, 4),  # Dragon
    (4, 2, 4, 4, 4, 4, 4, 8, 2, 4, 4, 4, 4, 4, 8, 4, 4, 2),  # Dark
)


def get_single_type_effectiveness(attack_type: Type, defender_type: Type) -> int:
    """Effectiveness of one attacking type against one defending type.

    Types outside the chart (such as ``Type.NONE``) count as neutral.
    """
    attack, defend = int(attack_type), int(defender_type)
    if attack >= _CHART_SIZE or defend >= _CHART_SIZE:
        return NEUTRAL
    return TYPE_CHART[attack][defend]


def get_type_effectiveness(attack_type: Type, defender_type1: Type, defender_type2: Type) -> int:
    """Combined effectiveness against a defender with up to two types."""
    eff1 = get_single_type_effectiveness(attack_type, defender_type1)
    eff2 = get_single_type_effectiveness(attack_type, defender_type2)
    return min(eff1 * eff2 // NEUTRAL, 255)