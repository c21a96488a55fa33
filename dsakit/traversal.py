"""Breadth-first and depth-first traversal of an edge-list graph."""

from __future__ import annotations

from collections import deque

from dsakit.graph import Graph


def _check_start(graph: Graph, start: int) -> None:
    if not 1 <= start <= graph.vertex_count:
        raise ValueError(f"start vertex {start} out of range")


def breadth_first_search(graph: Graph, start: int = 1) -> list[int]:
    """Vertices reachable from ``start`` in breadth-first visiting order."""
    _check_start(graph, start)
    queue = deque([start])
    visited: set[int] = set()
    order: list[int] = []
    while queue:
        current = queue.popleft()
        if current in visited:
            continue
        visited.add(current)
        order.append(current)
        queue.extend(edge.dest for edge in graph.outgoing_edges(current))
    return order


def depth_first_search(graph: Graph, start: int = 1) -> list[int]:
    """Vertices reachable from ``start`` in depth-first visiting order.

    Neighbours are pushed in edge order, so the last-added edge is
    followed first.
    """
    _check_start(graph, start)
    stack = [start]
    visited: set[int] = set()
    order: list[int] = []
    while stack:
        current = stack.pop()
        if current in visited:
            continue
        visited.add(current)
        order.append(current)
        stack.extend(
            edge.dest for edge in graph.outgoing_edges(current) if edge.dest not in visited
        )
    return order