"""Longest common subsequence by exhaustive search."""

from __future__ import annotations

from typing import Iterable

Subsequence = tuple[tuple[int, int], ...]


def _explore(a: str, b: str, i: int, j: int, taken: Subsequence, found: list[Subsequence]) -> int:
    while i < len(a) and j < len(b) and a[i] == b[j]:
        taken = taken + ((i, j),)
        i += 1
        j += 1
    if i >= len(a) or j >= len(b):
        found.append(taken)
        return len(taken)
    return max(_explore(a, b, i + 1, j, taken, found), _explore(a, b, i, j + 1, taken, found))


def lcs_brute_force(a: str, b: str) -> int:
    """Length of the longest common subsequence of ``a`` and ``b``."""
    return _explore(a, b, 0, 0, (), [])


def common_subsequences(a: str, b: str) -> list[Subsequence]:
    """Every subsequence the search reaches, as ``(i, j)`` index pairs.

    Sorted by length, then lexicographically, with duplicates removed.
    """
    found: list[Subsequence] = []
    _explore(a, b, 0, 0, (), found)
    return sorted(set(found), key=lambda s: (len(s), s))


def format_subsequences(a: str, b: str, subsequences: Iterable[Subsequence]) -> str:
    """Show each subsequence as both strings with unused characters blanked."""
    lines: list[str] = []
    previous_size = 0
    for subsequence in subsequences:
        if len(subsequence) != previous_size:
            previous_size = len(subsequence)
            lines.append(f"SIZE = {previous_size}")
        a_seq = ["_"] * len(a)
        b_seq = ["_"] * len(b)
        for i, j in subsequence:
            a_seq[i] = a[i]
            b_seq[j] = b[j]
        lines.append(f"\t{''.join(a_seq)} | {''.join(b_seq)}")
    return "".join(line + "\n" for line in lines)