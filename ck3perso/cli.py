"""Command-line entry point: generate one character and print it."""

from __future__ import annotations

import argparse
import sys
from typing import Sequence

from .generator import GenerationError, generate_personnage, load_data
from .models import Parameters, Personnage

DEFAULT_EDUCATIONS_FILE = "educations.json"
DEFAULT_PERSONALITIES_FILE = "personnalities.json"

_DISPLAYED_STATS: tuple[str, ...] = (
    "diplomatie",
    "martialite",
    "intendance",
    "intrigue",
    "erudition",
    "prouesse",
)


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="ck3perso",
        description="Simple program to generate a ck3 player",
    )
    parser.add_argument(
        "-e",
        "--education",
        default=None,
        help="Possible values : [martialite, diplomatie, intrigue, intendance, erudition]",
    )
    parser.add_argument(
        "-l",
        "--level",
        type=int,
        default=None,
        help="Possible values : [1, 2, 3, 4, 5]",
    )
    parser.add_argument(
        "-a",
        "--age",
        type=int,
        default=None,
        help="0 to 70 years old",
    )
    parser.add_argument(
        "--educations",
        default=DEFAULT_EDUCATIONS_FILE,
        help="JSON file holding the education traits",
    )
    parser.add_argument(
        "--personalities",
        default=DEFAULT_PERSONALITIES_FILE,
        help="JSON file holding the personality traits",
    )
    return parser


def parse_args(argv: Sequence[str] | None = None) -> argparse.Namespace:
    """Parse the command line; argparse exits on malformed input."""
    return _build_parser().parse_args(argv)


def format_personnage(personnage: Personnage) -> str:
    """Render a character as the lines the command prints."""
    lines = [
        " *** age ***",
        f"age : {personnage.age}",
        " *** education ***",
        f"education : {personnage.education.name}",
        f"level : {personnage.education.level}",
        " *** personnality ***",
    ]
    lines.extend(personality.name for personality in personnage.personalities)
    lines.append(" *** statistiques ***")
    lines.extend(
        f"{name} : {getattr(personnage.statistiques, name).total()}"
        for name in _DISPLAYED_STATS
    )
    lines.append(f"points_totaux : {personnage.total_points}")
    return "\n".join(lines)


def main(argv: Sequence[str] | None = None) -> int:
    """Generate a character from the command-line choices and print it."""
    args = parse_args(argv)
    parameters = Parameters(education=args.education, level=args.level, age=args.age)
    try:
        educations, personalities = load_data(args.educations, args.personalities)
        personnage = generate_personnage(parameters, educations, personalities)
    except OSError as exc:
        print(f"error: cannot read data: {exc}", file=sys.stderr)
        return 1
    except (GenerationError, ValueError) as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 1
    print(format_personnage(personnage))
    return 0


if __name__ == "__main__":
    sys.exit(main())