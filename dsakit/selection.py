"""Selection of the i-th smallest element in linear time (median of medians)."""

from __future__ import annotations

from typing import Any, Iterable, MutableSequence


def find_median(items: Iterable[Any]) -> Any:
    """Return the lower median of ``items``."""
    values = sorted(items)
    if not values:
        raise ValueError("median of an empty sequence")
    return values[(len(values) - 1) // 2]


def partition_using_pivot(items: MutableSequence[Any], begin: int, last: int, pivot: int) -> int:
    """Partition ``items[begin..last]`` in place around the element at index ``pivot``.

    Afterwards values smaller than the pivot come first, then the pivot,
    then values not smaller than it. Returns the pivot's final index.
    """
    if not 0 <= begin <= pivot <= last < len(items):
        raise IndexError("pivot and range must lie within the sequence")
    pivot_value = items[pivot]
    items[pivot], items[last] = items[last], items[pivot]
    store = begin
    for index in range(begin, last):
        if items[index] < pivot_value:
            items[store], items[index] = items[index], items[store]
            store += 1
    items[store], items[last] = items[last], items[store]
    return store


def _select(values: list[Any], i: int) -> Any:
    if len(values) <= 5:
        return sorted(values)[i - 1]
    medians = [find_median(values[start:start + 5]) for start in range(0, len(values), 5)]
    median_of_medians = _select(medians, (len(medians) + 1) // 2)
    split = partition_using_pivot(values, 0, len(values) - 1, values.index(median_of_medians))
    rank = split + 1
    if i == rank:
        return values[split]
    if i < rank:
        return _select(values[:split], i)
    return _select(values[split + 1:], i - rank)


def linear_time_select(items: Iterable[Any], i: int) -> Any:
    """Return the ``i``-th smallest element (1-based) of ``items``."""
    values = list(items)
    if not 1 <= i <= len(values):
        raise IndexError(f"rank {i} out of range for {len(values)} elements")
    return _select(values, i)