"""A singly linked list with forward-list style operations."""

from __future__ import annotations

import operator
from dataclasses import dataclass
from typing import Any, Callable, Iterable, Iterator, Optional


class _Node:
    __slots__ = ("value", "next")

    def __init__(self, value: Any, next_node: Optional[_Node] = None) -> None:
        self.value = value
        self.next = next_node


class SinglyLinkedList:
    """A singly linked list; positions are zero-based element indices."""

    def __init__(self, values: Iterable[Any] = ()) -> None:
        self._head: Optional[_Node] = None
        for value in reversed(list(values)):
            self.push_front(value)

    def push_front(self, value: Any) -> None:
        self._head = _Node(value, self._head)

    def pop_front(self) -> Any:
        """Remove and return the first value; an empty list is left alone."""
        node = self._head
        if node is None:
            return None
        self._head = node.next
        return node.value

    def front(self) -> Any:
        if self._head is None:
            raise IndexError("front of an empty list")
        return self._head.value

    def _nodes(self) -> Iterator[_Node]:
        node = self._head
        while node is not None:
            yield node
            node = node.next

    def __iter__(self) -> Iterator[Any]:
        for node in self._nodes():
            yield node.value

    def __len__(self) -> int:
        return sum(1 for _ in self._nodes())

    def copy(self) -> SinglyLinkedList:
        """Return an independent list with the same values."""
        return SinglyLinkedList(self)

    def _node_at(self, position: int) -> _Node:
        if position >= 0:
            for index, node in enumerate(self._nodes()):
                if index == position:
                    return node
        raise IndexError(f"position {position} out of range")

    def insert_after(self, position: int, value: Any) -> None:
        """Insert ``value`` right after the element at ``position``."""
        node = self._node_at(position)
        node.next = _Node(value, node.next)

    def erase_after(self, position: int, end: Optional[int] = None) -> None:
        """Erase the element after ``position``, or every element in ``(position, end)``."""
        node = self._node_at(position)
        if end is None:
            if node.next is None:
                raise IndexError("no element after the given position")
            node.next = node.next.next
            return
        if end <= position:
            raise IndexError("end must come after position")
        stop = node.next
        for _ in range(position + 1, end):
            if stop is None:
                raise IndexError(f"end {end} out of range")
            stop = stop.next
        node.next = stop

    def remove_if(self, predicate: Callable[[Any], bool]) -> int:
        """Remove every value for which ``predicate`` holds; return how many."""
        removed = 0
        while self._head is not None and predicate(self._head.value):
            self._head = self._head.next
            removed += 1
        node = self._head
        while node is not None and node.next is not None:
            if predicate(node.next.value):
                node.next = node.next.next
                removed += 1
            else:
                node = node.next
        return removed

    def sort(self, key: Optional[Callable[[Any], Any]] = None, reverse: bool = False) -> None:
        """Stable in-place sort."""
        ordered = sorted(self, key=key, reverse=reverse)
        for node, value in zip(self._nodes(), ordered):
            node.value = value

    def reverse(self) -> None:
        previous: Optional[_Node] = None
        node = self._head
        while node is not None:
            following = node.next
            node.next = previous
            previous = node
            node = following
        self._head = previous

    def unique(self, predicate: Optional[Callable[[Any, Any], bool]] = None) -> int:
        """Drop each value that matches the last kept one; return how many were dropped.

        ``predicate(kept, candidate)`` decides a match; equality by default.
        """
        same = predicate or operator.eq
        removed = 0
        node = self._head
        while node is not None and node.next is not None:
            if same(node.value, node.next.value):
                node.next = node.next.next
                removed += 1
            else:
                node = node.next
        return removed

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, SinglyLinkedList):
            return NotImplemented
        return list(self) == list(other)

    def __repr__(self) -> str:
        return f"SinglyLinkedList({list(self)!r})"


@dataclass
class Citizen:
    """A citizen with a name and an age."""

    name: str
    age: int

    def __str__(self) -> str:
        return f"[Name: {self.name}, Age: {self.age}]"


def eligible_voters(citizens: Iterable[Citizen]) -> SinglyLinkedList:
    """Citizens aged 18 or over, in their original order."""
    result = SinglyLinkedList(citizens)
    result.remove_if(lambda c: c.age < 18)
    return result


def eligible_next_year(citizens: Iterable[Citizen]) -> SinglyLinkedList:
    """Citizens who turn 18 next year, i.e. are 17 now."""
    result = SinglyLinkedList(citizens)
    result.remove_if(lambda c: c.age != 17)
    return result