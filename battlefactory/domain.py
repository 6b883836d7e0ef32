"""Core game vocabulary: types, species, moves, abilities, stats, status and weather."""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum, IntFlag


class Ability(IntEnum):
    """Passive abilities; each Pokemon has exactly one."""

    NONE = 0
    INTIMIDATE = 1


class Type(IntEnum):
    """Elemental types, in type-chart order."""

    NORMAL = 0
    FIGHTING = 1
    FLYING = 2
    POISON = 3
    GROUND = 4
    ROCK = 5
    BUG = 6
    GHOST = 7
    STEEL = 8
    MYSTERY = 9
    FIRE = 10
    WATER = 11
    GRASS = 12
    ELECTRIC = 13
    PSYCHIC = 14
    ICE = 15
    DRAGON = 16
    DARK = 17
    NONE = 255


class Species(IntEnum):
    """Known species."""

    NONE = 0
    CHARMANDER = 1
    CHARIZARD = 2
    BULBASAUR = 3
    PIKACHU = 4
    PIDGEY = 5
    GEODUDE = 6
    SANDSHREW = 7
    SKARMORY = 8


class Move(IntEnum):
    """Known moves."""

    NONE = 0
    TACKLE = 1
    EMBER = 2
    THUNDER_WAVE = 3
    GROWL = 4
    TAIL_WHIP = 5
    SWORDS_DANCE = 6
    DOUBLE_EDGE = 7
    GIGA_DRAIN = 8
    IRON_DEFENSE = 9
    STRING_SHOT = 10
    AGILITY = 11
    TAIL_GLOW = 12
    FAKE_TEARS = 13
    AMNESIA = 14
    FURY_ATTACK = 15
    PROTECT = 16
    SOLAR_BEAM = 17
    FLY = 18
    SUBSTITUTE = 19
    BATON_PASS = 20
    SANDSTORM = 21
    QUICK_ATTACK = 22
    STEALTH_ROCK = 23
    LEECH_SEED = 24


@dataclass(frozen=True)
class MoveData:
    """Static data describing a move."""

    move: Move
    type: Type
    power: int
    accuracy: int
    pp: int
    effect_chance: int = 0
    priority: int = 0


class Stat(IntEnum):
    """Stat indices; ACC and EVASION exist only in battle."""

    HP = 0
    ATK = 1
    DEF = 2
    SPEED = 3
    SPATK = 4
    SPDEF = 5
    ACC = 6
    EVASION = 7


NUM_BATTLE_STATS = len(Stat)


class Status1(IntFlag):
    """Primary status condition bits; a Pokemon holds at most one."""

    NONE = 0
    SLEEP = 0x07
    POISON = 0x08
    BURN = 0x10
    FREEZE = 0x20
    PARALYSIS = 0x40
    TOXIC = 0x80


class Weather(IntEnum):
    """Battlefield weather conditions."""

    NONE = 0
    SANDSTORM = 1
    RAIN = 2
    SUN = 3
    HAIL = 4