"""Random character generation from education and personality trait data."""

from __future__ import annotations

import copy
import json
import random
from os import PathLike
from pathlib import Path
from typing import Sequence, TypeVar

from .models import (
    STAT_NAMES,
    Age,
    Education,
    Parameters,
    Personality,
    Personnage,
    Signe,
    Statistiques,
)

EDUCATION_NAMES: tuple[str, ...] = (
    "diplomatie",
    "martialite",
    "intrigue",
    "intendance",
    "erudition",
)
EDUCATION_LEVELS = range(1, 6)

POINT_LIMIT = 400
# Every character starts with 5 in each statistic, worth 65 points.
BASE_POINTS = 65
# Once this close to the limit, try every statistic before giving up.
FILL_THRESHOLD = 390
PERSONALITY_COUNT = 3

_EDUCATION_FOCUS_CHANCE = 10
_MARTIAL_OVER_PROWESS_CHANCE = 80
_BONUS_PERSONALITY_CHANCE = 60
_VERY_GOOD_EDUCATION_CHANCE = 10
_GOOD_EDUCATION_CHANCE = 90

_CHILDHOOD_START = Age(2)
_ADULTHOOD = Age(16)

T = TypeVar("T")


class GenerationError(ValueError):
    """Raised when the parameters or the data do not allow a character to be generated."""


def load_data(
    educations_path: str | PathLike[str],
    personalities_path: str | PathLike[str],
) -> tuple[list[Education], list[Personality]]:
    """Read the education and personality lists from two JSON files."""
    try:
        raw_educations = json.loads(Path(educations_path).read_text(encoding="utf-8"))
        educations = [Education.from_dict(item) for item in raw_educations]
    except (json.JSONDecodeError, KeyError, TypeError, ValueError) as exc:
        raise GenerationError(f"error while parsing education data: {exc}") from exc

    try:
        raw_personalities = json.loads(
            Path(personalities_path).read_text(encoding="utf-8")
        )
        personalities = [Personality.from_dict(item) for item in raw_personalities]
    except (json.JSONDecodeError, KeyError, TypeError, ValueError) as exc:
        raise GenerationError(f"error while parsing personality data: {exc}") from exc

    return educations, personalities


def _remove_first_named(pool: list[Personality], name: str) -> None:
    for index, personality in enumerate(pool):
        if personality.name == name:
            del pool[index]
            return


def remove_personality(
    incompatible: Sequence[str],
    bonus_pool: list[Personality],
    neutral_pool: list[Personality],
) -> None:
    """Drop the first trait of each incompatible name from both pools, in place."""
    for name in incompatible:
        _remove_first_named(bonus_pool, name)
        _remove_first_named(neutral_pool, name)


def _choose(rng: random.Random, pool: Sequence[T], what: str) -> T:
    if not pool:
        raise GenerationError(f"no {what} available")
    return rng.choice(pool)


def _candidate_educations(
    parameters: Parameters, age: Age, educations: Sequence[Education]
) -> list[Education]:
    candidates = list(educations)

    if parameters.education is not None:
        chosen = parameters.education
        if chosen not in EDUCATION_NAMES:
            raise GenerationError(f"unknown education: {chosen!r}")
        if _CHILDHOOD_START < age < _ADULTHOOD:
            candidates = [e for e in candidates if e.level == 0 and e.name == chosen]
        elif age >= _ADULTHOOD:
            candidates = [e for e in candidates if e.name == chosen]
        else:
            raise GenerationError(
                f"no education can be chosen at age {age}"
            )

    if parameters.level is not None and age >= _ADULTHOOD:
        if parameters.level not in EDUCATION_LEVELS:
            raise GenerationError(f"unknown education level: {parameters.level!r}")
        candidates = [e for e in candidates if e.level == parameters.level]

    return candidates


def _pick_education(
    parameters: Parameters,
    age: Age,
    candidates: list[Education],
    rng: random.Random,
) -> Education | None:
    if _CHILDHOOD_START < age < _ADULTHOOD:
        if parameters.education is None:
            candidates = [e for e in candidates if e.level == 0]
        return _choose(rng, candidates, "education")

    if age >= _ADULTHOOD:
        if parameters.level is not None or parameters.education is not None:
            return _choose(rng, candidates, "education")
        percentage = rng.randrange(100)
        if percentage < _VERY_GOOD_EDUCATION_CHANCE:
            pool = [e for e in candidates if e.level == 5]
        elif percentage < _GOOD_EDUCATION_CHANCE:
            pool = [e for e in candidates if 3 <= e.level < 5]
        else:
            pool = [e for e in candidates if e.level < 3]
        return _choose(rng, pool, "education")

    return None


def _boosts_education(personality: Personality, education: Education) -> bool:
    for bonus in personality.bonus:
        if bonus.aptitudes <= 0:
            continue
        if bonus.name == education.name:
            return True
        # A war leader who cannot fight is of little use: prowess counts too.
        if education.name == "martialite" and bonus.name == "prouesse":
            return True
    return False


def _split_personalities(
    personalities: Sequence[Personality], education: Education | None
) -> tuple[list[Personality], list[Personality]]:
    if education is None:
        return [], list(personalities)
    bonus_pool: list[Personality] = []
    neutral_pool: list[Personality] = []
    for personality in personalities:
        if _boosts_education(personality, education):
            bonus_pool.append(personality)
        else:
            neutral_pool.append(personality)
    return bonus_pool, neutral_pool


def _take_personality(pool: list[Personality], rng: random.Random) -> Personality:
    if not pool:
        raise GenerationError("no personality trait available")
    return pool.pop(rng.randrange(len(pool)))


def _pick_personalities(
    personalities: Sequence[Personality],
    education: Education | None,
    rng: random.Random,
) -> list[Personality]:
    bonus_pool, neutral_pool = _split_personalities(personalities, education)
    picked: list[Personality] = []
    while len(picked) < PERSONALITY_COUNT:
        if education is not None and rng.randrange(100) < _BONUS_PERSONALITY_CHANCE:
            personality = _take_personality(bonus_pool, rng)
        else:
            personality = _take_personality(neutral_pool, rng)
        picked.append(copy.deepcopy(personality))
        remove_personality(personality.incompatible, bonus_pool, neutral_pool)
    return picked


def _next_stat(
    education: Education | None, stat_names: Sequence[str], rng: random.Random
) -> str:
    if education is not None and rng.randrange(100) < _EDUCATION_FOCUS_CHANCE:
        if education.name == "martialite" and (
            rng.randrange(100) >= _MARTIAL_OVER_PROWESS_CHANCE
        ):
            return "prouesse"
        return education.name
    return _choose(rng, stat_names, "statistic")


def _spend_points(
    statistiques: Statistiques,
    points: int,
    education: Education | None,
    rng: random.Random,
) -> int:
    stat_names = [name for name in STAT_NAMES if education is None or name != education.name]

    while points < POINT_LIMIT:
        stat_name = _next_stat(education, stat_names, rng)
        cost = statistiques.increment_cost(stat_name)
        if points + cost <= POINT_LIMIT:
            points += statistiques.adjust(stat_name, Signe.INCREMENT)
        elif FILL_THRESHOLD <= points < POINT_LIMIT - 1:
            blocked = False
            for name in stat_names:
                if points + statistiques.increment_cost(name) <= POINT_LIMIT:
                    points += statistiques.adjust(name, Signe.INCREMENT)
                    blocked = False
                else:
                    blocked = True
            if blocked:
                break
        else:
            break
    return points


def generate_personnage(
    parameters: Parameters,
    educations: Sequence[Education],
    personalities: Sequence[Personality],
    rng: random.Random | None = None,
) -> Personnage:
    """Generate a random character honouring the given parameters."""
    if rng is None:
        rng = random.Random()

    age = Age(parameters.age) if parameters.age is not None else Age.random(rng)

    candidates = _candidate_educations(parameters, age, educations)
    points = age.score() + BASE_POINTS
    statistiques = Statistiques()

    education = _pick_education(parameters, age, candidates, rng)
    if education is not None:
        education = copy.deepcopy(education)
        points += education.points
        for bonus in education.bonus:
            statistiques.add_bonus(bonus)

    chosen_personalities = _pick_personalities(personalities, education, rng)
    for personality in chosen_personalities:
        points += personality.points
        for bonus in personality.bonus:
            statistiques.add_bonus(bonus)

    points = _spend_points(statistiques, points, education, rng)

    return Personnage(
        age=age,
        education=education if education is not None else Education(),
        personalities=chosen_personalities,
        statistiques=statistiques,
        total_points=points,
    )