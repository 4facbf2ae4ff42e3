"""A singly linked list of arbitrary values."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Iterable, Iterator, Optional


@dataclass(eq=False)
class Node:
    """One cell of a :class:`LinkedList`."""

    content: Any
    next: Optional[Node] = None


class LinkedList:
    """A singly linked list whose head is exposed as ``head``."""

    def __init__(self, items: Optional[Iterable[Any]] = None) -> None:
        self.head: Optional[Node] = None
        for item in reversed(list(items or ())):
            self.head = Node(item, self.head)

    def _nodes(self) -> Iterator[Node]:
        node = self.head
        while node is not None:
            yield node
            node = node.next

    def push_front(self, content: Any) -> Node:
        """Insert ``content`` at the head and return its node."""
        self.head = Node(content, self.head)
        return self.head

    def push_back(self, content: Any) -> Node:
        """Append ``content`` at the tail and return its node."""
        node = Node(content)
        tail = self.last()
        if tail is None:
            self.head = node
        else:
            tail.next = node
        return node

    def last(self) -> Optional[Node]:
        """The final node, or None for an empty list."""
        node = None
        for node in self._nodes():
            pass
        return node

    def __len__(self) -> int:
        return sum(1 for _ in self._nodes())

    def __iter__(self) -> Iterator[Any]:
        return (node.content for node in self._nodes())

    def __repr__(self) -> str:
        return f"LinkedList({list(self)!r})"

    def for_each(self, func: Callable[[Any], Any]) -> None:
        """Call ``func`` on every value, head first."""
        for content in self:
            func(content)

    def map(
        self,
        func: Callable[[Any], Any],
        delete: Optional[Callable[[Any], Any]] = None,
    ) -> LinkedList:
        """Return a new list of ``func(value)`` for every value.

        If ``func`` raises, ``delete`` is called on every value produced so far
        and the exception propagates.
        """
        produced: list[Any] = []
        try:
            for content in self:
                produced.append(func(content))
        except Exception:
            if delete is not None:
                for value in produced:
                    delete(value)
            raise
        return LinkedList(produced)

    def clear(self, delete: Optional[Callable[[Any], Any]] = None) -> None:
        """Empty the list, passing every value to ``delete`` when one is given."""
        node = self.head
        self.head = None
        while node is not None:
            following = node.next
            node.next = None
            if delete is not None:
                delete(node.content)
            node = following