"""Merge sort and quicksort."""

from __future__ import annotations

from typing import Any, Iterable, MutableSequence, Sequence


def merge(left: Sequence[Any], right: Sequence[Any]) -> list[Any]:
    """Merge two ascending sequences into one ascending list.

    On ties the element from ``right`` is taken first.
    """
    merged: list[Any] = []
    i = j = 0
    while i < len(left) and j < len(right):
        if left[i] < right[j]:
            merged.append(left[i])
            i += 1
        else:
            merged.append(right[j])
            j += 1
    merged.extend(left[i:])
    merged.extend(right[j:])
    return merged


def merge_sort(items: Iterable[Any]) -> list[Any]:
    """Return a new ascending list of ``items``."""
    values = list(items)
    if len(values) <= 1:
        return values
    mid = len(values) // 2
    return merge(merge_sort(values[:mid]), merge_sort(values[mid:]))


def _partition(items: MutableSequence[Any], begin: int, last: int) -> int:
    pivot = items[begin]
    left, right = begin + 1, last
    while True:
        while items[left] <= pivot and left < right:
            left += 1
        while items[right] > pivot and left < right:
            right -= 1
        if left == right:
            break
        items[left], items[right] = items[right], items[left]
    if pivot > items[right]:
        items[begin], items[right] = items[right], items[begin]
    return right


def quick_sort(items: MutableSequence[Any]) -> None:
    """Sort ``items`` ascending in place, using the first element as pivot."""
    ranges = [(0, len(items) - 1)]
    while ranges:
        begin, last = ranges.pop()
        if last - begin < 1:
            continue
        split = _partition(items, begin, last)
        ranges.append((begin, split - 1))
        ranges.append((split, last))