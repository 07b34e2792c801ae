[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "ck3perso"
version = "0.1.0"
description = "Random character generator for Crusader Kings III: age, education, personality traits and attributes"
requires-python = ">=3.10"
dependencies = []
keywords = ["ck3", "crusader-kings", "character", "generator", "role-playing"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment :: Role-Playing",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
ck3perso = "ck3perso.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["ck3perso"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
