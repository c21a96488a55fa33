"""All-pairs shortest paths with Johnson's algorithm."""

from __future__ import annotations

import math
from typing import Iterable, Optional

from dsakit.bellman_ford import (
    NegativeCycleError,
    WeightedEdge,
    has_negative_cycle,
    relax_edges,
)


def _normalise(vertex_count: int, edges: Iterable[WeightedEdge]) -> list[WeightedEdge]:
    if vertex_count < 0:
        raise ValueError("vertex count must not be negative")
    result = [WeightedEdge(*edge) for edge in edges]
    for u, v, _ in result:
        if not (0 <= u < vertex_count and 0 <= v < vertex_count):
            raise ValueError(f"edge {u}->{v} out of range")
    return result


def dense_dijkstra(
    vertex_count: int, start: int, edges: Iterable[WeightedEdge]
) -> list[Optional[int]]:
    """Distances from ``start`` using the O(V^2) form of Dijkstra's algorithm.

    Each round settles the unvisited vertex with the smallest known distance
    (the highest-numbered one on ties). Unreached vertices have ``None``.
    """
    edges = _normalise(vertex_count, edges)
    if not 0 <= start < vertex_count:
        raise ValueError(f"start vertex {start} out of range")

    distance: list[Optional[int]] = [None] * vertex_count
    distance[start] = 0
    visited = [False] * vertex_count

    def rank(vertex: int) -> tuple[float, int]:
        known = distance[vertex]
        return (math.inf if known is None else known, -vertex)

    for _ in range(vertex_count - 1):
        current = min((v for v in range(vertex_count) if not visited[v]), key=rank)
        visited[current] = True
        base = distance[current]
        if base is None:
            continue
        for u, v, w in edges:
            if u != current or visited[v]:
                continue
            known = distance[v]
            if known is None or base + w < known:
                distance[v] = base + w
    return distance


def reweighting_potentials(vertex_count: int, edges: Iterable[WeightedEdge]) -> list[int]:
    """Vertex potentials ``h`` that make every reweighted edge non-negative.

    A virtual source joined to every vertex by a zero-weight edge is run
    through Bellman-Ford. Raises NegativeCycleError on a negative cycle.
    """
    edges = _normalise(vertex_count, edges)
    source = vertex_count
    extended = edges + [WeightedEdge(source, v, 0) for v in range(vertex_count)]
    distance = relax_edges(vertex_count + 1, extended, source, rounds=vertex_count)
    if has_negative_cycle(distance, extended):
        raise NegativeCycleError("NEGATIVE CYCLE FOUND")
    return [int(d) for d in distance[:vertex_count]]  # every vertex is reached


def johnson(vertex_count: int, edges: Iterable[WeightedEdge]) -> list[list[Optional[int]]]:
    """Matrix of shortest distances; ``result[i][j]`` is ``None`` if unreachable.

    Raises NegativeCycleError when the graph has a negative cycle.
    """
    edges = _normalise(vertex_count, edges)
    h = reweighting_potentials(vertex_count, edges)
    reweighted = [WeightedEdge(u, v, w + h[u] - h[v]) for u, v, w in edges]
    matrix: list[list[Optional[int]]] = []
    for i in range(vertex_count):
        row = dense_dijkstra(vertex_count, i, reweighted)
        matrix.append([None if d is None else d + h[j] - h[i] for j, d in enumerate(row)])
    return matrix