# ck3perso

Generates a random character for Crusader Kings III. Each character has an age, an
education (from age 3), three compatible personality traits and attribute values.
Attribute points are spent until the character is as close as possible to a budget of
400 points.

## Installation

```
pip install .
```

## Trait data

The package does not ship any trait data. You provide two JSON files:

- an education file: a list of objects with `name`, `level`, `points` and `bonus`;
- a personality file: a list of objects with `name`, `points`, `bonus` and
  `incompatible` (a list of trait names that cannot be combined with it).

A bonus is an object with `name` (one of `intrigue`, `diplomatie`, `martialite`,
`intendance`, `erudition`, `prouesse`) and `apttitudes` (the modifier).

## Command line

```
ck3perso
ck3perso --education diplomatie --level 4
ck3perso -e martialite -a 30 --educations data/educations.json --personalities data/personnalities.json
```

Options:

- `-e`, `--education`: one of `martialite`, `diplomatie`, `intrigue`, `intendance`,
  `erudition`. Not allowed for characters aged 2 or younger.
- `-l`, `--level`: education level, from 1 to 5. It is only used for characters aged
  16 or older.
- `-a`, `--age`: age in years, from 0 to 70. If you leave it out, a random age is used.
- `--educations`: education JSON file (default `educations.json` in the current
  directory).
- `--personalities`: personality JSON file (default `personnalities.json` in the
  current directory).

The output lists the age, the education and its level, the personality traits, the
total of each attribute (base plus bonus) and the total points spent. On an unreadable
data file or invalid choices, an error is printed to standard error and the command
exits with status 1.

## Library use

```python
import random

from ck3perso.cli import format_personnage
from ck3perso.generator import generate_personnage, load_data
from ck3perso.models import Parameters

educations, personalities = load_data("educations.json", "personnalities.json")
personnage = generate_personnage(
    Parameters(education="intendance", level=3, age=25),
    educations,
    personalities,
    random.Random(42),
)
print(format_personnage(personnage))
```

- `ck3perso.models` holds the data classes: `Parameters`, `Bonus`, `Education`,
  `Personality`, `Age` (with `Age.random()` and `Age.score()`), `Statistique`,
  `Statistiques` (with `adjust`, `increment_cost` and `add_bonus`), `Signe` and
  `Personnage`.
- `ck3perso.generator` provides `load_data`, `remove_personality`,
  `generate_personnage` and `GenerationError`.
- `ck3perso.cli` provides `parse_args`, `format_personnage` and `main`.

`generate_personnage` raises `GenerationError` when the parameters or the data do not
allow a character: an unknown education, a level outside 1 to 5, an education asked
for at age 2 or younger, or no matching education or personality trait left in the
data. An age outside 0 to 70 raises `ValueError`. `load_data` raises `GenerationError`
when a file is not valid trait data.