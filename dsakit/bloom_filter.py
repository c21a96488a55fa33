"""A Bloom filter over non-negative integers with three fixed hash functions."""

from __future__ import annotations

import logging

logger = logging.getLogger(__name__)


class BloomFilter:
    """Set membership with possible false positives but no false negatives."""

    def __init__(self, n_bits: int) -> None:
        if n_bits <= 0:
            raise ValueError("number of bits must be positive")
        self._n_bits = n_bits
        self._bits = [False] * n_bits

    def __len__(self) -> int:
        return self._n_bits

    def _positions(self, key: int) -> tuple[int, int, int]:
        if key < 0:
            raise ValueError("keys must be non-negative integers")
        n = self._n_bits
        return key % n, (key // 7) % n, (key // 11) % n

    def insert(self, key: int) -> None:
        for position in self._positions(key):
            self._bits[position] = True
        logger.debug("%s inserted.", key)

    def lookup(self, key: int) -> bool:
        """True if ``key`` may be present; False if it is certainly absent."""
        result = all(self._bits[p] for p in self._positions(key))
        logger.debug("%s %s", key, "may be present." if result else "is not present.")
        return result

    def __contains__(self, key: int) -> bool:
        return self.lookup(key)