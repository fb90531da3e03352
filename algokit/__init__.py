"""Classic algorithms and data structures in plain Python."""

__version__ = "0.1.0"

__all__ = [
    "arithmetic",
    "arrays",
    "linkedlist",
    "puzzles",
    "searching",
    "sorting",
    "stack",
    "strings",
    "tree",
]