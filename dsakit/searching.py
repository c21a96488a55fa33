"""Linear and binary search over sequences."""

from __future__ import annotations

from typing import Any, Iterable, Sequence


def linear_search(target: Any, sequence: Iterable[Any]) -> bool:
    """Return True if ``target`` occurs anywhere in ``sequence``."""
    return any(item == target for item in sequence)


def binary_search(target: Any, sequence: Sequence[Any]) -> bool:
    """Return True if ``target`` occurs in the ascending ``sequence``.

    The search range keeps the middle element on both sides of a split and
    shrinks until a single element is left.
    """
    first, last = 0, len(sequence)
    if first == last:
        return False
    while True:
        range_length = last - first
        half = range_length // 2
        middle = sequence[first + half]
        if middle == target:
            return True
        if middle > target:
            last -= half
        elif middle < target:
            first += half
        if range_length == 1:
            return False