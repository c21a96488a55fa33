"""Prim's minimum spanning tree and Dijkstra's shortest path on an edge-list graph."""

from __future__ import annotations

import heapq
import itertools
import logging
from typing import Any

from dsakit.graph import Graph

logger = logging.getLogger(__name__)


def _check_vertex(graph: Graph, vertex: int, role: str) -> None:
    if not 1 <= vertex <= graph.vertex_count:
        raise ValueError(f"{role} vertex {vertex} out of range")


def prim_mst(graph: Graph, src: int = 1) -> list[int]:
    """Vertices in the order Prim's algorithm settles them, starting at ``src``.

    Labels hold the weight of the cheapest known edge from the frontier;
    ties are broken by the order in which labels were created.
    """
    _check_vertex(graph, src, "source")
    counter = itertools.count()
    heap: list[tuple[Any, int, int]] = [(0, next(counter), src)]
    best: dict[int, Any] = {}
    visited: set[int] = set()
    order: list[int] = []
    while heap:
        _, _, vertex = heapq.heappop(heap)
        if vertex in visited:
            continue
        logger.debug("Settling vertex ID %s", vertex)
        order.append(vertex)
        for edge in graph.outgoing_edges(vertex):
            known = best.get(edge.dest)
            if known is None or edge.weight < known:
                heapq.heappush(heap, (edge.weight, next(counter), edge.dest))
                best[edge.dest] = edge.weight
        visited.add(vertex)
    return order


def dijkstra_shortest_path(graph: Graph, src: int, dest: int) -> list[int]:
    """Cheapest path from ``src`` to ``dest`` as a list of vertices.

    Raises ValueError if ``dest`` cannot be reached from ``src``.
    """
    _check_vertex(graph, src, "source")
    _check_vertex(graph, dest, "destination")
    counter = itertools.count()
    heap: list[tuple[Any, int, int]] = [(0, next(counter), src)]
    distance: dict[int, Any] = {src: 0}
    parent: dict[int, int] = {src: src}
    visited: set[int] = set()
    reached = False
    while heap:
        dist, _, vertex = heapq.heappop(heap)
        if vertex == dest:
            logger.debug("Destination %s reached.", vertex)
            reached = True
            break
        if vertex in visited:
            continue
        logger.debug("Settling vertex %s", vertex)
        for edge in graph.outgoing_edges(vertex):
            candidate = dist + edge.weight
            known = distance.get(edge.dest)
            if known is None or candidate < known:
                heapq.heappush(heap, (candidate, next(counter), edge.dest))
                parent[edge.dest] = vertex
                distance[edge.dest] = candidate
        visited.add(vertex)

    if not reached:
        raise ValueError(f"vertex {dest} is not reachable from {src}")

    path = [dest]
    while path[-1] != src:
        path.append(parent[path[-1]])
    path.reverse()
    return path