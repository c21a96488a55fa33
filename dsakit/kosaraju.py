"""Strongly connected components with Kosaraju's two-pass DFS."""

from __future__ import annotations

from typing import Sequence


def transpose(adjacency: Sequence[Sequence[int]]) -> list[list[int]]:
    """Adjacency lists with every edge reversed."""
    result: list[list[int]] = [[] for _ in adjacency]
    for node, neighbours in enumerate(adjacency):
        for nxt in neighbours:
            result[nxt].append(node)
    return result


def _finish_order(start: int, adjacency: Sequence[Sequence[int]], visited: list[bool], out: list[int]) -> None:
    visited[start] = True
    stack = [(start, iter(adjacency[start]))]
    while stack:
        node, neighbours = stack[-1]
        for nxt in neighbours:
            if not visited[nxt]:
                visited[nxt] = True
                stack.append((nxt, iter(adjacency[nxt])))
                break
        else:
            stack.pop()
            out.append(node)


def _collect(start: int, adjacency: Sequence[Sequence[int]], visited: list[bool]) -> list[int]:
    visited[start] = True
    component = [start]
    stack = [iter(adjacency[start])]
    while stack:
        for nxt in stack[-1]:
            if not visited[nxt]:
                visited[nxt] = True
                component.append(nxt)
                stack.append(iter(adjacency[nxt]))
                break
        else:
            stack.pop()
    return component


def kosaraju(adjacency: Sequence[Sequence[int]]) -> list[list[int]]:
    """Strongly connected components, each in DFS visiting order."""
    count = len(adjacency)
    visited = [False] * count
    finished: list[int] = []
    for node in range(count):
        if not visited[node]:
            _finish_order(node, adjacency, visited, finished)

    reverse = transpose(adjacency)
    visited = [False] * count
    return [_collect(node, reverse, visited) for node in reversed(finished) if not visited[node]]