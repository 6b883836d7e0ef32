# battlefactory

Building blocks for a Gen III style, turn-based monster battle: the vocabulary of a
battle, the state of the combatants, the type chart, the small commands that moves are
built from, entry hazards and a seeded random number generator. Plain Python, no
runtime dependencies.

## Modules

### `battlefactory.domain`

Enums and data shared by everything else:

- `Type` (in type-chart order, `NORMAL` to `DARK`, plus `NONE = 255` for an unused slot)
- `Species`, `Move`, `Ability` (`NONE`, `INTIMIDATE`), `Weather`
- `Stat` (`HP`, `ATK`, `DEF`, `SPEED`, `SPATK`, `SPDEF`, `ACC`, `EVASION`) and
  `NUM_BATTLE_STATS`
- `Status1`, an `IntFlag` of primary status bits (`SLEEP`, `POISON`, `BURN`, `FREEZE`,
  `PARALYSIS`, `TOXIC`)
- `MoveData`, a frozen dataclass: `move`, `type`, `power`, `accuracy`, `pp`,
  `effect_chance` (default 0) and `priority` (default 0)

### `battlefactory.state`

- `Pokemon`, a dataclass holding species, ability, types, level, base stats, HP,
  faint flag, `status1`, eight `stat_stages` (all 0 by default), protection,
  two-turn charging, semi-invulnerability, substitute and Leech Seed state.
  `current_hp` defaults to `max_hp`; a `stat_stages` list of the wrong length raises
  `ValueError`.
- `SemiInvulnerableType` (`NONE`, `ON_AIR`, `UNDERGROUND`, `UNDERWATER`)
- `Field` (`weather`, `weather_duration`) and `Side` (`stealth_rock`)

### `battlefactory.typechart`

The Gen III type chart, `TYPE_CHART`, in fixed point: 0 immune, 2 half, 4 neutral,
8 double (constants `IMMUNE`, `QUARTER`, `HALF`, `NEUTRAL`, `DOUBLE`, `QUADRUPLE`).

- `get_single_type_effectiveness(attack_type, defender_type)`: types outside the chart,
  such as `Type.NONE`, count as neutral.
- `get_type_effectiveness(attack_type, defender_type1, defender_type2)`: the product of
  both, normalised, so 1 means ¼× and 16 means 4×.

### `battlefactory.commands`

Commands that read and update a `BattleContext` (attacker, defender, move,
`move_failed`, `damage_dealt`, `drain_received` and a few more counters). Every
command except `check_faint` does nothing once `move_failed` is set.

- `accuracy_check(ctx)`: the move always hits, unless the defender is protected.
- `get_modified_stat(pokemon, stat)`: base stat × stage multiplier, halved for a burned
  Pokemon's Attack; 0 for stats without stages.
- `calculate_damage(ctx)`: level 50 formula
  `(22 * power * Atk // Def) // 50 + 2`, minimum 1, using `override_power` when it is
  above 0. Raises `ValueError` when there is neither a move nor an override.
- `apply_damage(ctx)`: subtracts the damage, stopping at 0 HP.
- `apply_drain(ctx, drain_percent=50)`: heals the attacker by half the damage
  (three quarters for 75), at least 1, never above max HP.
- `check_faint(ctx, check_attacker=False)`: marks the target fainted at 0 HP.
- `modify_stat_stage(ctx, stat, change, affects_user=False)`: clamps to
  `MIN_STAGE`..`MAX_STAGE` (-6..+6). Targeting a protected defender fails the move;
  self-targeting ignores protection.
- `trigger_switch_in_abilities(ctx)`: Intimidate lowers the defender's Attack by one.

### `battlefactory.hazards`

- `apply_stealth_rock_damage(pokemon, side)`: `max_hp * rock_effectiveness // 32`,
  at least 1 when not immune and max HP is 32 or more; faints the Pokemon at 0 HP.
- `apply_switch_in_hazards(pokemon, side)`: applies every hazard on the side
  (currently Stealth Rock).

### `battlefactory.rng`

`Pcg32`, a PCG32 (XSH RR 64/32) generator. Without a seed it starts from the
reference default state.

- `seed(seed)`: a 32-bit seed; 0 seeds from the clock. Other values out of range raise
  `ValueError`.
- `next_u32()`: the next 32-bit output.
- `below(maximum)`: a number in `[0, maximum)`, 0 when `maximum` is 0; `maximum` must
  fit in 16 bits.

Module-level `initialize(seed=0)` and `random(maximum)` use a shared generator.

## Install

```
pip install .
pip install ".[test]"   # with pytest
```

## Example

```python
from battlefactory.domain import Move, MoveData, Type
from battlefactory.state import Pokemon
from battlefactory.commands import (
    BattleContext, accuracy_check, calculate_damage, apply_damage, check_faint,
)

tackle = MoveData(move=Move.TACKLE, type=Type.NORMAL, power=35, accuracy=95, pp=35)
attacker = Pokemon(type1=Type.FIRE, max_hp=39, attack=52, defense=43)
defender = Pokemon(type1=Type.GRASS, type2=Type.POISON, max_hp=45, attack=49, defense=49)

ctx = BattleContext(attacker=attacker, defender=defender, move=tackle)
accuracy_check(ctx)
calculate_damage(ctx)
apply_damage(ctx)
check_faint(ctx)
print(ctx.damage_dealt, defender.current_hp)   # 18 27
```

For deterministic rolls, seed the generator:

```python
from battlefactory import rng

rng.initialize(0x12345678)
roll = rng.random(100)   # 0..99
```

## What it does not do

There is no battle engine: nothing here runs whole turns, orders the two sides by
speed or priority, maps a `Move` to its effect, or handles end-of-turn status and
weather damage. The commands are the parts such an engine would call, and the caller
strings them together. There is no accuracy roll, critical hit, STAB, type modifier or
random variance in damage, and there is no command-line program or user interface.

## Tests

```
pytest
```