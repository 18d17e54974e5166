"""A singly linked list of arbitrary contents."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Generic, Iterable, Iterator, Optional, TypeVar

T = TypeVar("T")
U = TypeVar("U")

Deleter = Optional[Callable[[T], object]]


@dataclass(eq=False)
class Node(Generic[T]):
    """One element of a linked list."""

    content: T
    next: Optional["Node[T]"] = None


class LinkedList(Generic[T]):
    """A singly linked list that keeps its size and its last node at hand."""

    def __init__(self, items: Iterable[T] = ()) -> None:
        self._head: Optional[Node[T]] = None
        self._tail: Optional[Node[T]] = None
        self._size = 0
        for item in items:
            self.add_back(item)

    @property
    def head(self) -> Optional[Node[T]]:
        """The first node, or None when the list is empty."""
        return self._head

    def __len__(self) -> int:
        return self._size

    def __iter__(self) -> Iterator[T]:
        node = self._head
        while node is not None:
            yield node.content
            node = node.next

    def __repr__(self) -> str:
        return f"{type(self).__name__}({list(self)!r})"

    def last(self) -> Optional[Node[T]]:
        """The last node, or None when the list is empty."""
        return self._tail

    def add_front(self, content: T) -> Node[T]:
        """Insert ``content`` at the start of the list and return its node."""
        node = Node(content, self._head)
        self._head = node
        if self._tail is None:
            self._tail = node
        self._size += 1
        return node

    def add_back(self, content: T) -> Node[T]:
        """Append ``content`` at the end of the list and return its node."""
        node: Node[T] = Node(content)
        if self._tail is None:
            self._head = node
        else:
            self._tail.next = node
        self._tail = node
        self._size += 1
        return node

    def remove_front(self, delete: Deleter = None) -> T:
        """Unlink the first node, pass its content to ``delete`` and return it."""
        node = self._head
        if node is None:
            raise IndexError("remove_front from an empty list")
        self._head = node.next
        if self._head is None:
            self._tail = None
        node.next = None
        self._size -= 1
        if delete is not None:
            delete(node.content)
        return node.content

    def clear(self, delete: Deleter = None) -> None:
        """Remove every node from front to back, passing each content to ``delete``."""
        while self._head is not None:
            self.remove_front(delete)

    def for_each(self, func: Callable[[T], object]) -> None:
        """Call ``func`` on every content in order."""
        for content in self:
            func(content)

    def map(
        self, func: Callable[[T], U], delete: Optional[Callable[[U], object]] = None
    ) -> "LinkedList[U]":
        """Return a new list of ``func(content)`` for every content.

        If ``func`` raises, the contents already produced are passed to
        ``delete`` and the exception propagates.
        """
        result: LinkedList[U] = LinkedList()
        try:
            for content in self:
                result.add_back(func(content))
        except Exception:
            result.clear(delete)
            raise
        return result