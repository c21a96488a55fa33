"""Waiting times in a single-server queue and shortest-job-first ordering."""

from __future__ import annotations

from itertools import accumulate
from typing import Iterable, Sequence


def waiting_times(service_times: Sequence[float]) -> list[float]:
    """How long each job waits before it is served, in queue order."""
    if not service_times:
        return []
    return [0, *accumulate(service_times[:-1])]


def average_waiting_time(service_times: Sequence[float]) -> float:
    """Mean of :func:`waiting_times`; raises ValueError for an empty queue."""
    if not service_times:
        raise ValueError("average waiting time of an empty queue")
    waits = waiting_times(service_times)
    return sum(waits, 0.0) / len(waits)


def shortest_job_first(service_times: Iterable[float]) -> list[float]:
    """Reorder the queue so the shortest jobs go first."""
    return sorted(service_times)