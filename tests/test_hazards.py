from battlefactory.domain import Type
from battlefactory.hazards import apply_stealth_rock_damage, apply_switch_in_hazards
from battlefactory.state import Pokemon, Side


def mon(type1, type2=Type.NONE, hp=64):
    return Pokemon(type1=type1, type2=type2, max_hp=hp, attack=10, defense=10)


def damage_taken(pokemon, side):
    before = pokemon.current_hp
    apply_stealth_rock_damage(pokemon, side)
    return before - pokemon.current_hp


ROCKS = Side(stealth_rock=True)


def test_no_rocks_no_damage():
    p = mon(Type.FIRE, Type.FLYING)
    apply_stealth_rock_damage(p, Side())
    assert p.current_hp == p.max_hp


def test_neutral_takes_one_eighth():
    p = mon(Type.ELECTRIC)
    apply_stealth_rock_damage(p, ROCKS)
    assert p.current_hp == 56


def test_quadruple_weakness_takes_half():
    p = mon(Type.FIRE, Type.FLYING)
    apply_stealth_rock_damage(p, ROCKS)
    assert p.current_hp == p.max_hp // 2


def test_quadruple_is_twice_double():
    assert damage_taken(mon(Type.FIRE, Type.FLYING), ROCKS) == 2 * damage_taken(
        mon(Type.FIRE), ROCKS
    )


def test_double_is_twice_neutral():
    assert damage_taken(mon(Type.FIRE), ROCKS) == 2 * damage_taken(mon(Type.ELECTRIC), ROCKS)


def test_resist_is_half_neutral():
    assert 2 * damage_taken(mon(Type.GROUND), ROCKS) == damage_taken(mon(Type.ELECTRIC), ROCKS)


def test_steel_flying_is_neutral():
    assert damage_taken(mon(Type.STEEL, Type.FLYING), ROCKS) == damage_taken(
        mon(Type.ELECTRIC), ROCKS
    )


def test_double_resist_is_quarter_neutral():
    assert 4 * damage_taken(mon(Type.FIGHTING, Type.STEEL), ROCKS) == damage_taken(
        mon(Type.NORMAL), ROCKS
    )


def test_lethal_damage_faints():
    p = mon(Type.FIRE, Type.FLYING)
    p.current_hp = 3
    apply_stealth_rock_damage(p, ROCKS)
    assert p.current_hp == 0
    assert p.is_fainted is True


def test_fainted_pokemon_untouched():
    p = mon(Type.FIRE)
    p.current_hp = 10
    p.is_fainted = True
    apply_stealth_rock_damage(p, ROCKS)
    assert p.current_hp == 10


def test_tiny_hp_double_resist_takes_nothing():
    p = mon(Type.FIGHTING, Type.STEEL, hp=20)
    apply_stealth_rock_damage(p, ROCKS)
    assert p.current_hp == 20
    assert p.is_fainted is False


def test_damage_never_exceeds_max_hp():
    p = mon(Type.FIRE, Type.FLYING, hp=1)
    apply_stealth_rock_damage(p, ROCKS)
    assert 0 <= p.current_hp <= p.max_hp


def test_switch_in_hazards_matches_stealth_rock():
    a = mon(Type.BUG)
    b = mon(Type.BUG)
    apply_switch_in_hazards(a, ROCKS)
    apply_stealth_rock_damage(b, ROCKS)
    assert a.current_hp == b.current_hp
    assert a.current_hp < a.max_hp


def test_switch_in_hazards_without_rocks():
    p = mon(Type.ICE)
    apply_switch_in_hazards(p, Side())
    assert p.current_hp == p.max_hp