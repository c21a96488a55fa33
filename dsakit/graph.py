"""A directed, weighted edge-list graph with vertices numbered from 1."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True)
class Edge:
    """A directed edge; edges are ordered by weight alone."""

    src: int
    dest: int
    weight: Any

    def __lt__(self, other: Edge) -> bool:
        if not isinstance(other, Edge):
            return NotImplemented
        return self.weight < other.weight

    def __gt__(self, other: Edge) -> bool:
        if not isinstance(other, Edge):
            return NotImplemented
        return self.weight > other.weight


class Graph:
    """An edge list over vertices ``1..vertex_count``.

    Printing lists vertices ``1..vertex_count - 1``.
    """

    def __init__(self, vertex_count: int) -> None:
        if vertex_count < 0:
            raise ValueError("vertex count must not be negative")
        self._vertex_count = vertex_count
        self._edges: list[Edge] = []

    @property
    def vertex_count(self) -> int:
        return self._vertex_count

    def add_edge(self, src: int, dest: int, weight: Any) -> Edge:
        """Add a directed edge and return it; raises ValueError for unknown vertices."""
        if not (1 <= src <= self._vertex_count and 1 <= dest <= self._vertex_count):
            raise ValueError("Vertex out of bounds")
        edge = Edge(src, dest, weight)
        self._edges.append(edge)
        return edge

    def outgoing_edges(self, v: int) -> list[Edge]:
        """All edges leaving ``v``, in insertion order."""
        return [edge for edge in self._edges if edge.src == v]

    def edges(self) -> list[Edge]:
        """All edges, in insertion order."""
        return list(self._edges)

    def __str__(self) -> str:
        lines = []
        for vertex in range(1, self._vertex_count):
            listed = "".join(f"{{{e.dest}: {e.weight}}}, " for e in self.outgoing_edges(vertex))
            lines.append(f"{vertex}:\t{listed}\n")
        return "".join(lines)

    def __repr__(self) -> str:
        return f"Graph({self._vertex_count}, edges={self._edges!r})"


_REFERENCE_EDGES: dict[int, list[tuple[int, int]]] = {
    1: [(2, 2), (5, 3)],
    2: [(1, 2), (5, 5), (4, 1)],
    3: [(4, 2), (7, 3)],
    4: [(2, 1), (3, 2), (5, 2), (6, 4), (8, 5)],
    5: [(1, 3), (2, 5), (4, 2), (8, 3)],
    6: [(4, 4), (7, 4), (8, 1)],
    7: [(3, 3), (6, 4)],
    8: [(4, 5), (5, 3), (6, 1)],
}


def create_reference_graph(weighted: bool = True) -> Graph:
    """The eight-vertex sample graph; with ``weighted=False`` every weight is 0."""
    graph = Graph(9)
    for src, targets in _REFERENCE_EDGES.items():
        for dest, weight in targets:
            graph.add_edge(src, dest, weight if weighted else 0)
    return graph