"""A singly linked list with positional access and text dumps."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Generic, Iterable, Iterator, List, Optional, TypeVar

T = TypeVar("T")


@dataclass
class _Node(Generic[T]):
    value: T
    next: Optional["_Node[T]"] = None


class LinkedList(Generic[T]):
    """Singly linked list that appends at the tail and prepends at the head."""

    def __init__(self, items: Optional[Iterable[T]] = None) -> None:
        self._head: Optional[_Node[T]] = None
        self._tail: Optional[_Node[T]] = None
        self._size = 0
        if items is not None:
            for item in items:
                self.append(item)

    def _nodes(self) -> Iterator[_Node[T]]:
        node = self._head
        while node is not None:
            yield node
            node = node.next

    def _node_at(self, index: int) -> _Node[T]:
        for position, node in enumerate(self._nodes()):
            if position == index:
                return node
        raise IndexError("LinkedList index out of range")

    def append(self, value: T) -> None:
        """Add a value at the end of the list."""
        node = _Node(value)
        if self._tail is None:
            self._head = self._tail = node
        else:
            self._tail.next = node
            self._tail = node
        self._size += 1

    def prepend(self, value: T) -> None:
        """Add a value at the start of the list."""
        self._head = _Node(value, self._head)
        if self._tail is None:
            self._tail = self._head
        self._size += 1

    def remove(self, index: int = 0) -> None:
        """Remove the value at ``index``.

        An empty list is left alone, a list of one value is emptied whatever
        the index, an index past the end is ignored, and an index of zero or
        less removes the first value.
        """
        if self._head is None:
            return
        if self._head.next is None:
            self.clear()
            return
        if index >= self._size:
            return
        if index <= 0:
            self._head = self._head.next
            self._size -= 1
            return
        previous = self._node_at(index - 1)
        removed = previous.next
        assert removed is not None
        previous.next = removed.next
        if removed is self._tail:
            self._tail = previous
        self._size -= 1

    def clear(self) -> None:
        """Remove every value."""
        self._head = self._tail = None
        self._size = 0

    def is_empty(self) -> bool:
        """Return True if the list holds no value."""
        return self._head is None

    def __contains__(self, value: object) -> bool:
        return any(node.value == value for node in self._nodes())

    def __getitem__(self, index: int) -> T:
        if not isinstance(index, int):
            raise TypeError("LinkedList indices must be integers")
        if not 0 <= index < self._size:
            raise IndexError("LinkedList index out of range")
        return self._node_at(index).value

    def __len__(self) -> int:
        return self._size

    def __iter__(self) -> Iterator[T]:
        return (node.value for node in self._nodes())

    def __repr__(self) -> str:
        return f"LinkedList({list(self)!r})"

    def __str__(self) -> str:
        body = "".join(f"Indice {i}: {value}\n" for i, value in enumerate(self))
        return body + "\n"

    def describe(self) -> str:
        """Return one line per value in the form ``Elemento i : <tab>value``."""
        return "".join(f"Elemento {i} : \t{value}\n" for i, value in enumerate(self))

    def to_ints(self) -> List[int]:
        """Return the values as integers, preceded by the list's length plus one."""
        return [self._size + 1, *(int(value) for value in self)]  # type: ignore[call-overload]