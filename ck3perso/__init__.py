"""Random Crusader Kings III character generator: data model, generator and command line."""

__version__ = "0.1.0"

__all__ = ["__version__"]