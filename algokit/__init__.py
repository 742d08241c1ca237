"""Algorithm routines for arrays, strings, numbers, searching, linked lists, trees and stacks."""

__version__ = "0.1.0"
__all__ = [
    "nodes",
    "trees",
    "linked_lists",
    "arrays",
    "searching",
    "numbers",
    "strings",
    "stacks",
]