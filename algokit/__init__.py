"""Classic algorithms: sorting, searching, number theory, grids, text and graphs."""

__version__ = "0.1.0"

__all__ = [
    "arrays",
    "sorting",
    "searching",
    "numbers",
    "money",
    "tree",
    "text",
    "traversal",
    "paths",
    "disjoint_set",
    "flow",
]