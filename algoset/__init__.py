"""Classic algorithms on arrays, strings, linked lists, trees and graphs."""

__version__ = "0.1.0"

__all__ = [
    "nodes",
    "arrays",
    "strings",
    "combinatorics",
    "linked_lists",
    "lru_cache",
    "graphs",
    "trees",
    "tree_build",
]