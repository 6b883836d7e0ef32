"""Entry hazard damage applied when a Pokemon switches in."""

from __future__ import annotations

from .domain import Type
from .state import Pokemon, Side
from .typechart import get_type_effectiveness


def apply_stealth_rock_damage(pokemon: Pokemon, side: Side) -> None:
    """Deal Stealth Rock damage: max HP / 8 scaled by Rock effectiveness."""
    if not side.stealth_rock or pokemon.is_fainted:
        return
    effectiveness = get_type_effectiveness(Type.ROCK, pokemon.type1, pokemon.type2)
    damage = pokemon.max_hp * effectiveness // 32
    if effectiveness > 0 and damage == 0 and pokemon.max_hp >= 32:
        damage = 1
    if damage >= pokemon.current_hp:
        pokemon.current_hp = 0
        pokemon.is_fainted = True
    else:
        pokemon.current_hp -= damage


def apply_switch_in_hazards(pokemon: Pokemon, side: Side) -> None:
    """Apply every entry hazard on ``side`` to a Pokemon switching in."""
    apply_stealth_rock_damage(pokemon, side)