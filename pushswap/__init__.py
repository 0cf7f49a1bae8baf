"""Two-stack sorting puzzle: stack operations, a solver and a checker."""

__version__ = "1.0.0"