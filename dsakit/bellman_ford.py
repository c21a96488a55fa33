"""Single-source shortest paths with negative weights (Bellman-Ford)."""

from __future__ import annotations

from typing import Iterable, NamedTuple, Optional, Sequence


class NegativeCycleError(Exception):
    """Raised when a negative-weight cycle is reachable from the start."""


class WeightedEdge(NamedTuple):
    start: int
    end: int
    weight: int


def relax_edges(
    vertex_count: int,
    edges: Iterable[WeightedEdge],
    start: int,
    rounds: Optional[int] = None,
) -> list[Optional[int]]:
    """Relax every edge ``rounds`` times (default: ``vertex_count``).

    Unreached vertices have distance ``None``.
    """
    edges = [WeightedEdge(*edge) for edge in edges]
    if not 0 <= start < vertex_count:
        raise ValueError(f"start vertex {start} out of range")
    for u, v, _ in edges:
        if not (0 <= u < vertex_count and 0 <= v < vertex_count):
            raise ValueError(f"edge {u}->{v} out of range")
    distance: list[Optional[int]] = [None] * vertex_count
    distance[start] = 0
    for _ in range(vertex_count if rounds is None else rounds):
        for u, v, w in edges:
            du = distance[u]
            if du is None:
                continue
            candidate = du + w
            dv = distance[v]
            if dv is None or candidate < dv:
                distance[v] = candidate
    return distance


def has_negative_cycle(
    distance: Sequence[Optional[int]], edges: Iterable[WeightedEdge]
) -> bool:
    """True if any edge can still shorten a known distance."""
    for u, v, w in edges:
        du = distance[u]
        if du is None:
            continue
        dv = distance[v]
        if dv is None or du + w < dv:
            return True
    return False


def bellman_ford(
    vertex_count: int, edges: Iterable[WeightedEdge], start: int = 0
) -> list[Optional[int]]:
    """Shortest distances from ``start``; raises NegativeCycleError on a negative cycle."""
    edges = [WeightedEdge(*edge) for edge in edges]
    distance = relax_edges(vertex_count, edges, start)
    if has_negative_cycle(distance, edges):
        raise NegativeCycleError("NEGATIVE CYCLE FOUND")
    return distance


def format_distances(distance: Sequence[Optional[int]], start: int) -> str:
    """Render a distance table, one vertex per line."""
    lines = [f"DISTANCE FROM VERTEX {start}:"]
    for vertex, value in enumerate(distance):
        lines.append(f"\t{vertex}: {'Unvisited' if value is None else value}")
    return "\n".join(lines) + "\n"