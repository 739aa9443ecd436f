"""Classic algorithms, data structures, small calculators, and playlist and recipe menus."""

__version__ = "0.1.0"

__all__ = [
    "arrays",
    "backtracking",
    "converters",
    "graphs",
    "linked_list",
    "matrix",
    "numbers",
    "playlist",
    "recipes",
    "searching",
    "sorting",
    "strings",
    "trees",
]