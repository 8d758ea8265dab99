"""A singly linked list whose nodes carry arbitrary content."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Iterable, Iterator, Optional


@dataclass
class Node:
    """One link of a :class:`LinkedList`."""

    content: Any
    next: Optional[Node] = None


class LinkedList:
    """A singly linked list built from :class:`Node` objects."""

    def __init__(self, items: Iterable[Any] = ()) -> None:
        self.head: Optional[Node] = None
        for item in items:
            self.push_back(item)

    def _nodes(self) -> Iterator[Node]:
        node = self.head
        while node is not None:
            yield node
            node = node.next

    def push_front(self, content: Any) -> Node:
        """Insert ``content`` at the head and return its node."""
        node = Node(content, self.head)
        self.head = node
        return node

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
        """The final node, or ``None`` when the list is empty."""
        tail = None
        for tail in self._nodes():
            pass
        return tail

    def for_each(self, func: Callable[[Any], Any]) -> None:
        """Call ``func`` on every content, head to tail."""
        for content in self:
            func(content)

    def map(self, func: Callable[[Any], Any], delete: Callable[[Any], Any]) -> LinkedList:
        """A new list holding ``func`` applied to every content.

        If ``func`` raises, ``delete`` is called on everything mapped so far
        and the exception propagates.
        """
        result = LinkedList()
        try:
            for content in self:
                result.push_back(func(content))
        except Exception:
            result.clear(delete)
            raise
        return result

    def clear(self, delete: Callable[[Any], Any]) -> None:
        """Call ``delete`` on every content, tail first, and empty the list."""
        for node in reversed(list(self._nodes())):
            delete(node.content)
            node.next = None
        self.head = None

    def __len__(self) -> int:
        return sum(1 for _ in self._nodes())

    def __iter__(self) -> Iterator[Any]:
        return (node.content for node in self._nodes())