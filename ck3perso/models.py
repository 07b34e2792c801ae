"""Data model for generated characters: parameters, traits, educations and skills."""

from __future__ import annotations

import random
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Mapping

STAT_NAMES: tuple[str, ...] = (
    "intrigue",
    "diplomatie",
    "martialite",
    "intendance",
    "erudition",
    "prouesse",
)

MIN_AGE = 0
MAX_AGE = 70

# (first age, last age, score) for ages ten and over; younger ages score twice their age.
_AGE_SCORES: tuple[tuple[int, int, int], ...] = (
    (10, 10, 22),
    (11, 11, 24),
    (12, 12, 27),
    (13, 13, 29),
    (14, 14, 31),
    (15, 15, 33),
    (16, 16, 40),
    (17, 17, 42),
    (18, 18, 48),
    (19, 19, 51),
    (20, 20, 58),
    (21, 21, 60),
    (22, 23, 66),
    (24, 28, 67),
    (29, 30, 66),
    (31, 31, 65),
    (32, 32, 64),
    (33, 33, 62),
    (34, 34, 61),
    (35, 35, 59),
    (36, 36, 57),
    (37, 37, 55),
    (38, 38, 53),
    (39, 39, 50),
    (40, 40, 48),
    (41, 41, 45),
    (42, 42, 42),
    (43, 43, 38),
    (44, 44, 35),
    (45, 45, 31),
    (46, 46, 27),
    (47, 47, 23),
    (48, 48, 19),
    (49, 49, 14),
    (50, 54, 10),
    (55, 59, 11),
    (60, 69, 6),
    (70, 70, 0),
)

# (first value, last value, cost) brackets for regular skills and for prowess.
_SKILL_COSTS: tuple[tuple[int, int, int], ...] = (
    (0, 4, 2),
    (5, 8, 4),
    (9, 12, 7),
    (13, 16, 11),
    (17, 100, 17),
)
_PROWESS_COSTS: tuple[tuple[int, int, int], ...] = (
    (0, 4, 1),
    (5, 8, 2),
    (9, 12, 4),
    (13, 16, 7),
    (17, 100, 11),
)


def _bracket(value: int, table: tuple[tuple[int, int, int], ...]) -> int | None:
    for low, high, result in table:
        if low <= value <= high:
            return result
    return None


def _skill_cost(stat_name: str, value: int) -> int:
    table = _PROWESS_COSTS if stat_name == "prouesse" else _SKILL_COSTS
    cost = _bracket(value, table)
    return 0 if cost is None else cost


def _check_stat_name(stat_name: str) -> None:
    if stat_name not in STAT_NAMES:
        raise ValueError(f"unknown statistic: {stat_name!r}")


@dataclass
class Parameters:
    """User choices for a generation; None means 'pick at random'."""

    education: str | None = None
    level: int | None = None
    age: int | None = None


@dataclass
class Bonus:
    """A modifier applied to one statistic."""

    name: str
    aptitudes: int

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> Bonus:
        return cls(name=str(data["name"]), aptitudes=int(data["apttitudes"]))


@dataclass
class Education:
    """An education trait with its level, point cost and bonuses."""

    name: str = ""
    level: int = 0
    points: int = 0
    bonus: list[Bonus] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> Education:
        return cls(
            name=str(data["name"]),
            level=int(data["level"]),
            points=int(data["points"]),
            bonus=[Bonus.from_dict(item) for item in data["bonus"]],
        )


@dataclass
class Personality:
    """A personality trait with its cost, bonuses and incompatible traits."""

    name: str
    points: int
    bonus: list[Bonus] = field(default_factory=list)
    incompatible: list[str] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> Personality:
        return cls(
            name=str(data["name"]),
            points=int(data["points"]),
            bonus=[Bonus.from_dict(item) for item in data["bonus"]],
            incompatible=[str(name) for name in data["incompatible"]],
        )


@dataclass(frozen=True, order=True)
class Age:
    """A character's age in years."""

    value: int = 25

    @classmethod
    def random(cls, rng: random.Random | None = None) -> Age:
        """Draw an age uniformly between 0 and 70 inclusive."""
        rng = rng or random.Random()
        return cls(rng.randint(MIN_AGE, MAX_AGE))

    def score(self) -> int:
        """Point value the age contributes to a character."""
        if MIN_AGE <= self.value <= 9:
            return self.value * 2
        result = _bracket(self.value, _AGE_SCORES)
        if result is None:
            raise ValueError(f"age out of range: {self.value}")
        return result

    def __str__(self) -> str:
        return str(self.value)


class Signe(Enum):
    """Direction of a statistic change."""

    INCREMENT = 1
    DECREMENT = -1


@dataclass
class Statistique:
    """One statistic: the base value bought with points and the trait bonus."""

    base: int = 5
    bonus: int = 0

    def total(self) -> int:
        return self.base + self.bonus


@dataclass
class Statistiques:
    """The six statistics of a character."""

    diplomatie: Statistique = field(default_factory=Statistique)
    martialite: Statistique = field(default_factory=Statistique)
    intendance: Statistique = field(default_factory=Statistique)
    intrigue: Statistique = field(default_factory=Statistique)
    erudition: Statistique = field(default_factory=Statistique)
    prouesse: Statistique = field(default_factory=Statistique)

    def _stat(self, stat_name: str) -> Statistique:
        _check_stat_name(stat_name)
        return getattr(self, stat_name)

    def adjust(self, stat_name: str, signe: Signe) -> int:
        """Move a base value by one (never below zero) and return its point value."""
        stat = self._stat(stat_name)
        stat.base = max(stat.base + signe.value, 0)
        return _skill_cost(stat_name, stat.base)

    def increment_cost(self, stat_name: str) -> int:
        """Points that raising the base value by one would cost."""
        stat = self._stat(stat_name)
        return _skill_cost(stat_name, stat.base + 1)

    def add_bonus(self, bonus: Bonus) -> None:
        self._stat(bonus.name).bonus += bonus.aptitudes


@dataclass
class Personnage:
    """A generated character."""

    age: Age = field(default_factory=Age)
    education: Education = field(default_factory=Education)
    personalities: list[Personality] = field(default_factory=list)
    statistiques: Statistiques = field(default_factory=Statistiques)
    total_points: int = 0