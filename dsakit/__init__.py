"""Classic data structures and algorithms in plain Python."""

__version__ = "0.1.0"

__all__ = [
    "arrays",
    "bst",
    "circular",
    "doubly",
    "graph",
    "heaps",
    "queues",
    "searching",
    "singly",
    "sorting",
    "stack",
]