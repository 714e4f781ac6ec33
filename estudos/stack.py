"""A last-in, first-out stack."""

from __future__ import annotations

from typing import Generic, Iterator, List, TypeVar

T = TypeVar("T")


class Stack(Generic[T]):
    """Stack whose iteration runs from the top down."""

    def __init__(self) -> None:
        self._items: List[T] = []

    def push(self, value: T) -> None:
        """Put a value on top of the stack."""
        self._items.append(value)

    def discard(self) -> None:
        """Drop the top value; an empty stack is left alone."""
        if self._items:
            self._items.pop()

    def pop(self) -> T:
        """Remove and return the top value; raises IndexError when empty."""
        if not self._items:
            raise IndexError("pop from an empty stack")
        return self._items.pop()

    def clear(self) -> None:
        """Remove every value."""
        self._items.clear()

    def is_empty(self) -> bool:
        """Return True if the stack holds no value."""
        return not self._items

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[T]:
        return reversed(self._items)

    def __repr__(self) -> str:
        return f"Stack({list(self)!r})"

    def describe(self) -> str:
        """Return one line per value, top first, as ``Elemento i : <tab>value``."""
        return "".join(f"Elemento {i} : \t{value}\n" for i, value in enumerate(self))