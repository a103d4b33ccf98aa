"""A minimal singly linked list."""

from __future__ import annotations

from collections.abc import Callable, Iterable, Iterator
from dataclasses import dataclass
from typing import Any


@dataclass(eq=False)
class Node:
    """One list cell holding a value and a link to the next cell."""

    value: Any
    next: Node | None = None


class LinkedList:
    """Singly linked list with front and back insertion."""

    def __init__(self, values: Iterable[Any] = ()) -> None:
        self.head: Node | None = None
        for value in values:
            self.push_back(value)

    def _nodes(self) -> Iterator[Node]:
        node = self.head
        while node is not None:
            yield node
            node = node.next

    def push_front(self, value: Any) -> Node:
        """Insert value at the front and return its node."""
        node = Node(value, self.head)
        self.head = node
        return node

    def push_back(self, value: Any) -> Node:
        """Append value at the back and return its node."""
        node = Node(value)
        tail = self.last()
        if tail is None:
            self.head = node
        else:
            tail.next = node
        return node

    def last(self) -> Node | None:
        """The final node, or None for an empty list."""
        tail = None
        for tail in self._nodes():
            pass
        return tail

    def for_each(self, func: Callable[[Any], Any]) -> None:
        """Call func on every value, front to back."""
        for value in self:
            func(value)

    def map(self, func: Callable[[Any], Any]) -> LinkedList:
        """A new list holding func applied to every value, in order."""
        return LinkedList(func(value) for value in self)

    def clear(self, release: Callable[[Any], Any] | None = None) -> None:
        """Empty the list, passing each value to release from back to front."""
        if release is not None:
            for value in reversed(list(self)):
                release(value)
        self.head = None

    def __len__(self) -> int:
        return sum(1 for _ in self._nodes())

    def __iter__(self) -> Iterator[Any]:
        return (node.value for node in self._nodes())

    def __repr__(self) -> str:
        return f"LinkedList({list(self)!r})"