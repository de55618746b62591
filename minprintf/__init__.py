"""A compact printf with string, memory, character and linked-list helpers."""

__version__ = "0.1.0"

__all__ = ["chars", "linkedlist", "memory", "output", "printf", "strsearch", "strtools"]