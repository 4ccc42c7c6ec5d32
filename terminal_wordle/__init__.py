"""Terminal word-guessing game."""

__version__ = "1.0.0"
