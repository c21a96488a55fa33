"""The subset sum problem solved by brute force, backtracking and memoization."""

from __future__ import annotations

import logging
from functools import lru_cache
from typing import Iterator, Sequence

logger = logging.getLogger(__name__)


def _generate(items: Sequence[int], index: int, chosen: tuple[int, ...]) -> Iterator[tuple[int, ...]]:
    if index == len(items):
        yield chosen
        return
    yield from _generate(items, index + 1, chosen)
    yield from _generate(items, index + 1, chosen + (items[index],))


def all_subsets(items: Sequence[int]) -> list[list[tuple[int, ...]]]:
    """Every subset of ``items``, grouped by size: ``result[k]`` holds the k-element ones.

    Within a group, subsets appear in the order an exclude-first recursion
    produces them; each subset keeps the original element order.
    """
    items = list(items)
    groups: list[list[tuple[int, ...]]] = [[] for _ in range(len(items) + 1)]
    for subset in _generate(items, 0, ()):
        groups[len(subset)].append(subset)
    return groups


def subset_sum_brute_force(items: Sequence[int], target: int) -> bool:
    """Check every subset, smallest first, for one summing to ``target``."""
    for size, group in enumerate(all_subsets(items)):
        logger.debug("SIZE = %s", size)
        for subset in group:
            if sum(subset) == target:
                return True
    return False


def _sorted_non_negative(items: Sequence[int]) -> tuple[int, ...]:
    values = tuple(sorted(items))
    if values and values[0] < 0:
        raise ValueError("items must be non-negative")
    return values


def subset_sum_backtracking(items: Sequence[int], target: int) -> bool:
    """Depth-first search that abandons a branch once it would overshoot."""
    values = _sorted_non_negative(items)

    def search(remaining: int, i: int) -> bool:
        if remaining == 0:
            return True
        if i == len(values) or values[i] > remaining:
            return False
        return search(remaining - values[i], i + 1) or search(remaining, i + 1)

    return search(target, 0)


def subset_sum_memoization(items: Sequence[int], target: int) -> bool:
    """Backtracking with results cached per ``(index, remaining sum)`` state."""
    values = _sorted_non_negative(items)

    @lru_cache(maxsize=None)
    def search(remaining: int, i: int) -> bool:
        if remaining == 0:
            return True
        if i == len(values) or values[i] > remaining:
            return False
        append = search(remaining - values[i], i + 1)
        ignore = search(remaining, i + 1)
        return append or ignore

    return search(target, 0)