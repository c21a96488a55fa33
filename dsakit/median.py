"""Running median of a stream using two heaps."""

from __future__ import annotations

import heapq


class RunningMedian:
    """Tracks the median of all values inserted so far."""

    def __init__(self) -> None:
        self._low: list = []  # max-heap of the lower half, stored negated
        self._high: list = []  # min-heap of the upper half

    def __len__(self) -> int:
        return len(self._low) + len(self._high)

    def insert(self, value) -> None:
        low, high = self._low, self._high
        if not low:
            heapq.heappush(low, -value)
            return
        if len(low) == len(high):
            if value <= self.get():
                heapq.heappush(low, -value)
            else:
                heapq.heappush(high, value)
        elif len(low) < len(high):
            if value > self.get():
                heapq.heappush(low, -heapq.heapreplace(high, value))
            else:
                heapq.heappush(low, -value)
        elif value < self.get():
            heapq.heappush(high, -heapq.heapreplace(low, -value))
        else:
            heapq.heappush(high, value)

    def get(self) -> float:
        """Return the current median; raises ValueError when nothing was inserted."""
        low, high = self._low, self._high
        if not low and not high:
            raise ValueError("median of an empty stream")
        if len(low) == len(high):
            return (-low[0] + high[0]) / 2.0
        if len(low) < len(high):
            return float(high[0])
        return float(-low[0])