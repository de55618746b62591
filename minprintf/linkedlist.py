"""A singly linked list of arbitrary contents."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Iterable, Iterator, Optional


@dataclass(eq=False)
class Node:
    """One link of a list: its content and the node that follows it."""

    content: Any
    next: Optional["Node"] = None


class LinkedList:
    """A singly linked list that keeps a reference to its first node."""

    def __init__(self, contents: Iterable[Any] = ()) -> None:
        self.head: Node | None = None
        for content in contents:
            self.push_back(content)

    def push_front(self, content: Any) -> Node:
        """Insert ``content`` before the first node and return the new node."""
        node = Node(content, self.head)
        self.head = node
        return node

    def push_back(self, content: Any) -> Node:
        """Append ``content`` after the last node and return the new node."""
        node = Node(content)
        tail = self.last()
        if tail is None:
            self.head = node
        else:
            tail.next = node
        return node

    def _nodes(self) -> Iterator[Node]:
        node = self.head
        while node is not None:
            yield node
            node = node.next

    def last(self) -> Node | None:
        """Return the last node, or None for an empty list."""
        tail = None
        for tail in self._nodes():
            pass
        return tail

    def for_each(self, func: Callable[[Any], Any]) -> None:
        """Call ``func`` on the content of every node, first to last."""
        for content in self:
            func(content)

    def map(
        self,
        func: Callable[[Any], Any],
        delete: Callable[[Any], Any] | None = None,
    ) -> "LinkedList":
        """Return a new list holding ``func(content)`` for every node.

        If ``func`` raises, the contents already produced are released with
        ``delete`` before the exception propagates.
        """
        result = LinkedList()
        try:
            for content in self:
                result.push_back(func(content))
        except BaseException:
            result.clear(delete)
            raise
        return result

    def clear(self, delete: Callable[[Any], Any] | None = None) -> None:
        """Empty the list, calling ``delete`` on each content first to last."""
        node = self.head
        while node is not None:
            following = node.next
            if delete is not None:
                delete(node.content)
            node.next = None
            self.head = following
            node = following
        self.head = None

    def __len__(self) -> int:
        return sum(1 for _ in self._nodes())

    def __iter__(self) -> Iterator[Any]:
        return (node.content for node in self._nodes())

    def __repr__(self) -> str:
        return f"LinkedList({list(self)!r})"