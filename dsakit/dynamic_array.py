"""A fixed-size array whose size is chosen at run time."""

from __future__ import annotations

import copy
from dataclasses import dataclass
from typing import Any, Iterator


@dataclass
class Student:
    """A student record with a name and a grade ("standard")."""

    name: str
    standard: int

    def __str__(self) -> str:
        return f"[Name: {self.name}, Standard: {self.standard}]"


class DynamicArray:
    """An array of ``n`` slots, each starting out as ``None``.

    Indexing with ``[]`` follows normal sequence rules; :meth:`at` is the
    strictly bounds-checked accessor that only accepts ``0 <= index < n``.
    """

    def __init__(self, n: int) -> None:
        if n < 0:
            raise ValueError("array size must not be negative")
        self._data: list[Any] = [None] * n

    def __getitem__(self, index: int) -> Any:
        return self._data[index]

    def __setitem__(self, index: int, value: Any) -> None:
        self._data[index] = value

    def at(self, index: int) -> Any:
        """Return the element at ``index``, raising IndexError outside ``[0, n)``."""
        if 0 <= index < len(self._data):
            return self._data[index]
        raise IndexError("Index out of range")

    def __len__(self) -> int:
        return len(self._data)

    def __iter__(self) -> Iterator[Any]:
        return iter(self._data)

    def __add__(self, other: object) -> DynamicArray:
        if not isinstance(other, DynamicArray):
            return NotImplemented
        result = DynamicArray(len(self) + len(other))
        result._data = [copy.copy(item) for item in (*self._data, *other._data)]
        return result

    def copy(self) -> DynamicArray:
        """Return a new array holding copies of this array's elements."""
        result = DynamicArray(len(self))
        result._data = [copy.copy(item) for item in self._data]
        return result

    def to_string(self, sep: str = ", ") -> str:
        """Join the string forms of the elements with ``sep``."""
        return sep.join(str(item) for item in self._data)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, DynamicArray):
            return NotImplemented
        return self._data == other._data

    def __repr__(self) -> str:
        return f"DynamicArray({self._data!r})"