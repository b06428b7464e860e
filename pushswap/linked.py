"""A singly linked list of arbitrary contents."""

from __future__ import annotations

from collections.abc import Callable, Iterable, Iterator
from dataclasses import dataclass
from typing import Any, Optional


@dataclass
class _Node:
    content: Any
    next: Optional["_Node"] = None


class LinkedList:
    """Singly linked list supporting front and back insertion."""

    def __init__(self, items: Optional[Iterable[Any]] = None) -> None:
        self._head: Optional[_Node] = None
        self._tail: Optional[_Node] = None
        self._size = 0
        for item in items or ():
            self.add_back(item)

    def add_front(self, content: Any) -> None:
        """Insert content before the first element."""
        node = _Node(content, self._head)
        self._head = node
        if self._tail is None:
            self._tail = node
        self._size += 1

    def add_back(self, content: Any) -> None:
        """Append content after the last element."""
        node = _Node(content)
        if self._tail is None:
            self._head = node
        else:
            self._tail.next = node
        self._tail = node
        self._size += 1

    def clear(self, delete: Optional[Callable[[Any], None]] = None) -> None:
        """Remove every element, passing each content to delete first if given."""
        node = self._head
        while node is not None:
            following = node.next
            if delete is not None:
                delete(node.content)
            node.next = None
            node = following
        self._head = self._tail = None
        self._size = 0

    def for_each(self, func: Callable[[Any], None]) -> None:
        """Call func on every content, front to back."""
        for content in self:
            func(content)

    def last(self) -> Any:
        """Content of the last element, or None for an empty list."""
        return None if self._tail is None else self._tail.content

    def map(
        self,
        func: Callable[[Any], Any],
        delete: Optional[Callable[[Any], None]] = None,
    ) -> "LinkedList":
        """Return a new list of func applied to each content.

        If func raises, the contents built so far are passed to delete
        and the exception propagates.
        """
        result = LinkedList()
        try:
            for content in self:
                result.add_back(func(content))
        except Exception:
            result.clear(delete)
            raise
        return result

    def __len__(self) -> int:
        return self._size

    def __iter__(self) -> Iterator[Any]:
        node = self._head
        while node is not None:
            yield node.content
            node = node.next

    def __repr__(self) -> str:
        return f"LinkedList({list(self)!r})"