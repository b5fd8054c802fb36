"""Study exercises: design patterns, puzzles, list structures, INI helpers and small tools."""

__version__ = "0.0.1"