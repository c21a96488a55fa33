"""Greedy vertex colouring."""

from __future__ import annotations

from dsakit.graph import Graph

COLOR_MAP: dict[int, str] = {
    1: "Red",
    2: "Blue",
    3: "Green",
    4: "Yellow",
    5: "Black",
    6: "White",
}


def greedy_coloring(graph: Graph) -> list[int]:
    """Colour vertices ``1..vertex_count - 1`` in order with the smallest free colour.

    Index 0 of the result is unused and holds 0; uncoloured neighbours count
    as colour 0. If all named colours are taken the vertex gets the next number.
    """
    assigned = [0] * graph.vertex_count
    for vertex in range(1, graph.vertex_count):
        neighbour_colors = {assigned[e.dest] for e in graph.outgoing_edges(vertex) if e.dest < len(assigned)}
        color = 1
        while color <= len(COLOR_MAP) and color in neighbour_colors:
            color += 1
        assigned[vertex] = color
    return assigned


def color_names(colors: list[int]) -> dict[int, str]:
    """Map each vertex from 1 on to its colour's name (empty if unnamed)."""
    return {vertex: COLOR_MAP.get(color, "") for vertex, color in enumerate(colors) if vertex >= 1}