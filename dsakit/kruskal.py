"""Minimum spanning tree with Kruskal's algorithm and a disjoint-set forest."""

from __future__ import annotations

from typing import Any, Hashable, Iterable

from dsakit.graph import Graph


class DisjointSet:
    """A union-find forest; :meth:`find` returns the index of a set's root."""

    def __init__(self, items: Iterable[Hashable] = ()) -> None:
        self._index: dict[Hashable, int] = {}
        self._parent: list[int] = []
        self._rank: list[int] = []
        for item in items:
            self.add_set(item)

    def add_set(self, x: Hashable) -> None:
        """Add ``x`` as a new single-element set."""
        if x in self._index:
            raise ValueError(f"{x!r} is already in the forest")
        self._index[x] = len(self._parent)
        self._parent.append(len(self._parent))
        self._rank.append(0)

    def find(self, x: Hashable) -> int:
        """Root index of the set holding ``x``; raises KeyError if ``x`` is unknown."""
        node = self._index[x]
        while self._parent[node] != node:
            node = self._parent[node]
        return node

    def union_sets(self, x: Hashable, y: Hashable) -> None:
        """Merge the sets holding ``x`` and ``y``."""
        root_x, root_y = self.find(x), self.find(y)
        if root_x == root_y:
            return
        if self._rank[root_x] > self._rank[root_y]:
            self._parent[root_y] = root_x
            self._rank[root_x] += 1
        else:
            self._parent[root_x] = root_y
            self._rank[root_y] += 1


def minimum_spanning_tree(graph: Graph) -> Graph:
    """Return a graph holding the edges Kruskal's algorithm picks, cheapest first."""
    count = graph.vertex_count
    # Vertices run 1..count, so the forest holds 0..count.
    forest = DisjointSet(range(count + 1))
    tree = Graph(count)
    edge: Any
    for edge in sorted(graph.edges(), key=lambda e: e.weight):
        if forest.find(edge.src) != forest.find(edge.dest):
            tree.add_edge(edge.src, edge.dest, edge.weight)
            forest.union_sets(edge.src, edge.dest)
    return tree