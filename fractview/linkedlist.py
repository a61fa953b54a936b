"""A singly linked list of arbitrary values."""

from collections.abc import Callable, Iterator
from dataclasses import dataclass
from typing import Any, Generic, Optional, TypeVar

T = TypeVar("T")
U = TypeVar("U")


@dataclass
class Node(Generic[T]):
    """One element of a LinkedList."""

    value: T
    next: Optional["Node[T]"] = None


class LinkedList(Generic[T]):
    """A singly linked list that keeps a reference to its first node."""

    def __init__(self, values: Optional[Any] = None) -> None:
        self.head: Optional[Node[T]] = None
        for value in values or ():
            self.append(value)

    def _nodes(self) -> Iterator[Node[T]]:
        node = self.head
        while node is not None:
            yield node
            node = node.next

    def push_front(self, value: T) -> Node[T]:
        """Insert *value* at the front and return its node."""
        node = Node(value, self.head)
        self.head = node
        return node

    def append(self, value: T) -> Node[T]:
        """Add *value* at the end and return its node."""
        node = Node(value)
        if self.head is None:
            self.head = node
        else:
            self.last().next = node
        return node

    def last(self) -> Node[T]:
        """Return the final node; raise IndexError on an empty list."""
        if self.head is None:
            raise IndexError("last() of an empty list")
        node = self.head
        while node.next is not None:
            node = node.next
        return node

    def __len__(self) -> int:
        return sum(1 for _ in self._nodes())

    def __iter__(self) -> Iterator[T]:
        return (node.value for node in self._nodes())

    def __repr__(self) -> str:
        return f"LinkedList({list(self)!r})"

    def clear(self, deleter: Optional[Callable[[T], Any]] = None) -> None:
        """Hand every value to *deleter*, front to back, and empty the list."""
        node = self.head
        while node is not None:
            following = node.next
            if deleter is not None:
                deleter(node.value)
            node.next = None
            self.head = following
            node = following

    def foreach(self, func: Callable[[T], Any]) -> None:
        """Call *func* on every value, front to back."""
        for value in self:
            func(value)

    def map(self, func: Callable[[T], U]) -> "LinkedList[U]":
        """Return a new list holding ``func(value)`` for every value."""
        result: LinkedList[U] = LinkedList()
        tail: Optional[Node[U]] = None
        for value in self:
            node = Node(func(value))
            if tail is None:
                result.head = node
            else:
                tail.next = node
            tail = node
        return result