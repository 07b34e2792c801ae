import random

import pytest

from ck3perso.models import (
    STAT_NAMES,
    Age,
    Bonus,
    Education,
    Parameters,
    Personality,
    Personnage,
    Signe,
    Statistique,
    Statistiques,
)


def test_parameters_default_to_none():
    params = Parameters()
    assert (params.education, params.level, params.age) == (None, None, None)


def test_bonus_from_dict_reads_apttitudes_key():
    bonus = Bonus.from_dict({"name": "intrigue", "apttitudes": 3})
    assert bonus == Bonus("intrigue", 3)


def test_education_from_dict():
    data = {
        "name": "diplomatie",
        "level": 2,
        "points": 30,
        "bonus": [{"name": "diplomatie", "apttitudes": 4}],
    }
    educ = Education.from_dict(data)
    assert educ.name == "diplomatie"
    assert educ.level == 2
    assert educ.points == 30
    assert educ.bonus == [Bonus("diplomatie", 4)]


def test_education_default_is_empty():
    educ = Education()
    assert educ == Education(name="", level=0, points=0, bonus=[])


def test_personality_from_dict():
    data = {
        "name": "brave",
        "points": 20,
        "bonus": [{"name": "prouesse", "apttitudes": 3}],
        "incompatible": ["craven"],
    }
    pers = Personality.from_dict(data)
    assert pers.name == "brave"
    assert pers.points == 20
    assert pers.bonus == [Bonus("prouesse", 3)]
    assert pers.incompatible == ["craven"]


def test_personality_from_dict_missing_key_raises():
    with pytest.raises(KeyError):
        Personality.from_dict({"name": "brave", "points": 1, "bonus": []})


def test_age_default_and_str():
    assert Age() == Age(25)
    assert str(Age(42)) == "42"


def test_age_ordering():
    assert Age(2) < Age(16)
    assert Age(16) >= Age(16)
    assert not Age(15) >= Age(16)


@pytest.mark.parametrize(
    "years, expected",
    [(0, 0), (9, 18), (10, 22), (16, 40), (25, 67), (31, 65), (50, 10), (65, 6), (70, 0)],
)
def test_age_score_table(years, expected):
    assert Age(years).score() == expected


def test_age_score_young_ages_are_doubled():
    for years in range(10):
        assert Age(years).score() == years + years


def test_age_score_defined_for_all_valid_ages():
    for years in range(71):
        assert Age(years).score() >= 0


@pytest.mark.parametrize("years", [-1, 71, 120])
def test_age_score_out_of_range(years):
    with pytest.raises(ValueError):
        Age(years).score()


def test_age_random_is_in_range_and_reproducible():
    first = [Age.random(random.Random(7)) for _ in range(3)]
    second = [Age.random(random.Random(7)) for _ in range(3)]
    assert first == second
    rng = random.Random(1)
    for _ in range(200):
        assert 0 <= Age.random(rng).value <= 70


def test_statistique_defaults_and_total():
    stat = Statistique()
    assert (stat.base, stat.bonus) == (5, 0)
    assert stat.total() == 5
    assert Statistique(base=7, bonus=2).total() == 9


def test_statistiques_start_at_five():
    stats = Statistiques()
    for name in STAT_NAMES:
        assert getattr(stats, name).base == 5


def test_increment_cost_regular_and_prowess():
    stats = Statistiques()
    assert stats.increment_cost("diplomatie") == 4
    assert stats.increment_cost("prouesse") == 2


@pytest.mark.parametrize("name", STAT_NAMES)
def test_adjust_increment_matches_increment_cost(name):
    stats = Statistiques()
    for _ in range(20):
        expected = stats.increment_cost(name)
        before = getattr(stats, name).base
        assert stats.adjust(name, Signe.INCREMENT) == expected
        assert getattr(stats, name).base == before + 1


def test_adjust_cost_brackets():
    stats = Statistiques()
    costs = [stats.adjust("intrigue", Signe.INCREMENT) for _ in range(4)]
    assert stats.intrigue.base == 9
    assert costs == [4, 4, 4, 7]


def test_adjust_decrement_never_below_zero():
    stats = Statistiques()
    for _ in range(10):
        stats.adjust("erudition", Signe.DECREMENT)
    assert stats.erudition.base == 0
    assert stats.adjust("erudition", Signe.DECREMENT) == 2
    assert stats.erudition.base == 0


def test_adjust_only_touches_named_stat():
    stats = Statistiques()
    stats.adjust("martialite", Signe.INCREMENT)
    assert stats.martialite.base == 6
    assert all(getattr(stats, n).base == 5 for n in STAT_NAMES if n != "martialite")


def test_add_bonus_accumulates():
    stats = Statistiques()
    stats.add_bonus(Bonus("intendance", 3))
    stats.add_bonus(Bonus("intendance", -1))
    assert stats.intendance.bonus == 2
    assert stats.intendance.total() == 7
    assert stats.intendance.base == 5


@pytest.mark.parametrize("name", ["charisme", "", "Intrigue"])
def test_unknown_stat_rejected(name):
    stats = Statistiques()
    with pytest.raises(ValueError):
        stats.adjust(name, Signe.INCREMENT)
    with pytest.raises(ValueError):
        stats.increment_cost(name)
    with pytest.raises(ValueError):
        stats.add_bonus(Bonus(name, 1))


def test_personnage_defaults():
    perso = Personnage()
    assert perso.age == Age(25)
    assert perso.education == Education()
    assert perso.personalities == []
    assert perso.total_points == 0
    assert perso.statistiques.prouesse.total() == 5