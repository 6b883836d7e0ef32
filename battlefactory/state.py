"""Runtime battle state: Pokemon, per-side and field conditions."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import IntEnum
from typing import List, Optional

from .domain import NUM_BATTLE_STATS, Ability, Move, Species, Status1, Type, Weather


class SemiInvulnerableType(IntEnum):
    """Which semi-invulnerable state a Pokemon is in."""

    NONE = 0
    ON_AIR = 1
    UNDERGROUND = 2
    UNDERWATER = 3


def _neutral_stages() -> List[int]:
    return [0] * NUM_BATTLE_STATS


@dataclass
class Pokemon:
    """A Pokemon's state during battle.

    ``current_hp`` defaults to ``max_hp`` when not given.
    """

    species: Species = Species.NONE
    ability: Ability = Ability.NONE
    type1: Type = Type.NORMAL
    type2: Type = Type.NONE
    level: int = 50

    attack: int = 0
    defense: int = 0
    sp_attack: int = 0
    sp_defense: int = 0
    speed: int = 0

    max_hp: int = 0
    current_hp: Optional[int] = None
    is_fainted: bool = False

    status1: int = Status1.NONE

    stat_stages: List[int] = field(default_factory=_neutral_stages)

    is_protected: bool = False
    protect_count: int = 0

    is_charging: bool = False
    charging_move: Move = Move.NONE

    is_semi_invulnerable: bool = False
    semi_invulnerable_type: SemiInvulnerableType = SemiInvulnerableType.NONE

    has_substitute: bool = False
    substitute_hp: int = 0

    is_seeded: bool = False
    seeded_by: Optional["Pokemon"] = field(default=None, compare=False, repr=False)

    def __post_init__(self) -> None:
        if self.current_hp is None:
            self.current_hp = self.max_hp
        if len(self.stat_stages) != NUM_BATTLE_STATS:
            raise ValueError(
                f"stat_stages must hold {NUM_BATTLE_STATS} entries, got {len(self.stat_stages)}"
            )
        self.stat_stages = list(self.stat_stages)


@dataclass
class Field:
    """Conditions affecting the whole battlefield."""

    weather: Weather = Weather.NONE
    weather_duration: int = 0


@dataclass
class Side:
    """Conditions affecting one side of the battlefield."""

    stealth_rock: bool = False