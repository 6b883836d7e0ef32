import dataclasses

import pytest

from battlefactory.domain import (
    NUM_BATTLE_STATS,
    Ability,
    Move,
    MoveData,
    Species,
    Stat,
    Status1,
    Type,
    Weather,
)


@pytest.mark.parametrize(
    "value, expected",
    [
        (0x07, "SLEEP"),
        (0x08, "POISON"),
        (0x10, "BURN"),
        (0x20, "FREEZE"),
        (0x40, "PARALYSIS"),
        (0x80, "TOXIC"),
    ],
)
def test_status_bits_match_documented_flags(value, expected):
    assert Status1(value) is Status1[expected]


def test_status_flags_do_not_overlap():
    flags = [Status1(v) for v in (0x07, 0x08, 0x10, 0x20, 0x40, 0x80)]
    for i, a in enumerate(flags):
        for b in flags[i + 1:]:
            assert int(a) & int(b) == 0


def test_status_none_is_falsy_and_burn_detected_in_combined():
    assert Status1(0) is Status1.NONE
    assert not Status1(0)
    combined = int(Status1(0x10)) | int(Status1(0x40))
    assert combined & Status1.BURN
    assert not combined & Status1.POISON


def test_type_none_sentinel():
    assert Type(255) is Type.NONE
    assert Type(0) is Type.NORMAL
    assert Type(17) is Type.DARK


def test_stat_indices():
    assert Stat(0) is Stat.HP
    assert Stat(1) is Stat.ATK
    assert Stat(7) is Stat.EVASION
    assert len(list(Stat)) == NUM_BATTLE_STATS


@pytest.mark.parametrize("enum_cls", [Ability, Move, Species, Type, Weather, Stat])
def test_enum_round_trip(enum_cls):
    for member in enum_cls:
        assert enum_cls(int(member)) is member


@pytest.mark.parametrize("enum_cls", [Ability, Move, Species, Weather])
def test_none_members_are_zero(enum_cls):
    assert enum_cls(0) is enum_cls.NONE


def test_move_data_defaults_and_frozen():
    tackle = MoveData(Move.TACKLE, Type.NORMAL, power=35, accuracy=95, pp=35)
    assert tackle.priority == 0
    assert tackle.effect_chance == 0
    assert tackle.power == 35
    with pytest.raises(dataclasses.FrozenInstanceError):
        tackle.power = 40  # type: ignore[misc]


def test_move_data_equality():
    a = MoveData(Move.QUICK_ATTACK, Type.NORMAL, 40, 100, 30, 0, 1)
    b = MoveData(Move.QUICK_ATTACK, Type.NORMAL, 40, 100, 30, 0, 1)
    assert a == b
    assert a.priority == 1