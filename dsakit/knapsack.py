"""Greedy solution of the fractional knapsack problem."""

from __future__ import annotations

import dataclasses
import random
from dataclasses import dataclass, field
from typing import Iterable, Optional


@dataclass(order=True)
class KnapsackObject:
    """An item; items compare only by value per unit of weight."""

    weight: int = field(compare=False)
    value: float = field(compare=False)
    value_per_unit_weight: float = field(default=None)  # type: ignore[assignment]

    def __post_init__(self) -> None:
        if self.weight <= 0:
            raise ValueError("weight must be positive")
        if self.value_per_unit_weight is None:
            self.value_per_unit_weight = self.value / self.weight

    def __str__(self) -> str:
        return (
            f"Value: {self.value:g}\t Weight: {self.weight:g}"
            f"\t Value/Unit Weight: {self.value_per_unit_weight:g}"
        )


def fill_knapsack(objects: Iterable[KnapsackObject], capacity: int) -> list[KnapsackObject]:
    """Fill a knapsack of ``capacity`` with the best value-per-weight items.

    The last item taken is cut down to the weight that still fits; an item
    cut down to nothing is left out.
    """
    if capacity < 0:
        raise ValueError("capacity must not be negative")
    ranked = list(reversed(sorted(objects)))
    contents: list[KnapsackObject] = []
    total_weight = 0
    for obj in ranked:
        if total_weight > capacity:
            break
        contents.append(dataclasses.replace(obj))
        total_weight += obj.weight

    overflow = total_weight - capacity
    if contents and overflow > 0:
        last = contents[-1]
        last.weight -= overflow
        last.value -= last.value_per_unit_weight * overflow
        if last.weight == 0:
            contents.pop()
    return contents


def random_objects(count: int, rng: Optional[random.Random] = None) -> list[KnapsackObject]:
    """Make ``count`` items with weights and values drawn uniformly from 1..count."""
    rng = rng or random.Random()
    objects = []
    for _ in range(count):
        weight = rng.randint(1, count)
        value = float(rng.randint(1, count))
        objects.append(KnapsackObject(weight, value))
    return objects