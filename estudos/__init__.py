"""Sorting algorithms, a mutable string type, a linked list, a stack and 2D SVG scenes."""

__version__ = "0.1.0"
__all__ = ["sorting", "text", "linkedlist", "stack", "scenes"]