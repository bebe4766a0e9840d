"""Single-user command-line to-do list with JSON persistence."""

__version__ = "0.1.0"
