"""Battle commands: the small steps that move effects are built from."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from .domain import Ability, MoveData, Stat, Status1
from .state import Pokemon

MIN_STAGE = -6
MAX_STAGE = 6

_BASE_STAT_FIELDS = {
    Stat.ATK: "attack",
    Stat.DEF: "defense",
    Stat.SPATK: "sp_attack",
    Stat.SPDEF: "sp_defense",
    Stat.SPEED: "speed",
}


@dataclass
class BattleContext:
    """Working state shared by the commands of one move execution."""

    attacker: Pokemon
    defender: Pokemon
    move: Optional[MoveData] = None
    move_failed: bool = False
    damage_dealt: int = 0
    critical_hit: bool = False
    effectiveness: int = 4
    override_power: int = 0
    override_type: int = 0
    recoil_dealt: int = 0
    drain_received: int = 0
    hit_count: int = 0


def get_modified_stat(pokemon: Pokemon, stat: Stat) -> int:
    """Return a stat with its stage multiplier and burn applied.

    Stats without stages (HP, accuracy, evasion) yield 0.
    """
    field_name = _BASE_STAT_FIELDS.get(Stat(stat))
    if field_name is None:
        return 0
    base = getattr(pokemon, field_name)
    stage = pokemon.stat_stages[stat]
    if stage >= 0:
        modified = base * (2 + stage) // 2
    else:
        modified = base * 2 // (2 - stage)
    if stat == Stat.ATK and pokemon.status1 & Status1.BURN:
        modified //= 2
    return modified


def calculate_damage(ctx: BattleContext) -> None:
    """Compute level-50 damage into ``ctx.damage_dealt`` without applying it."""
    if ctx.move_failed:
        return
    if ctx.override_power > 0:
        power = ctx.override_power
    elif ctx.move is not None:
        power = ctx.move.power
    else:
        raise ValueError("calculate_damage needs a move or an override power")
    attack = get_modified_stat(ctx.attacker, Stat.ATK)
    defense = get_modified_stat(ctx.defender, Stat.DEF)
    damage = (22 * power * attack // defense) // 50 + 2
    ctx.damage_dealt = max(damage, 1)


def apply_damage(ctx: BattleContext) -> None:
    """Subtract the calculated damage from the defender, stopping at 0 HP."""
    if ctx.move_failed:
        return
    defender = ctx.defender
    defender.current_hp = max(defender.current_hp - ctx.damage_dealt, 0)


def apply_drain(ctx: BattleContext, drain_percent: int = 50) -> None:
    """Heal the attacker by a share of the damage dealt, up to its max HP.

    75 drains three quarters; any other percentage drains half.
    """
    if ctx.move_failed or ctx.damage_dealt == 0:
        return
    if drain_percent == 75:
        amount = ctx.damage_dealt * 3 // 4
    else:
        amount = ctx.damage_dealt // 2
    amount = max(amount, 1)
    attacker = ctx.attacker
    attacker.current_hp = min(attacker.current_hp + amount, attacker.max_hp)
    ctx.drain_received = amount


def check_faint(ctx: BattleContext, check_attacker: bool = False) -> None:
    """Mark the defender (or the attacker) fainted when its HP is 0."""
    target = ctx.attacker if check_attacker else ctx.defender
    if target.current_hp == 0:
        target.is_fainted = True


def accuracy_check(ctx: BattleContext) -> None:
    """Fail the move when the defender is protected; otherwise it hits."""
    if ctx.move_failed:
        return
    if ctx.defender.is_protected:
        ctx.move_failed = True


def modify_stat_stage(
    ctx: BattleContext, stat: Stat, change: int, affects_user: bool = False
) -> None:
    """Shift a stat stage of the defender (or attacker), clamped to -6..+6.

    Targeting a protected defender fails the move; self-targeting ignores protection.
    """
    if ctx.move_failed:
        return
    if not affects_user and ctx.defender.is_protected:
        ctx.move_failed = True
        return
    target = ctx.attacker if affects_user else ctx.defender
    current = target.stat_stages[stat]
    new_stage = max(MIN_STAGE, min(MAX_STAGE, current + change))
    if new_stage != current:
        target.stat_stages[stat] = new_stage


def trigger_switch_in_abilities(ctx: BattleContext) -> None:
    """Run the switch-in ability of the attacker (the Pokemon coming in)."""
    if ctx.attacker.ability == Ability.INTIMIDATE:
        modify_stat_stage(ctx, Stat.ATK, -1, False)