"""Two-stack sorting puzzle: argument validation, ranking, stack operations and helpers."""

__version__ = "0.1.0"