"""Classic data structures and algorithms: lists, trees, heaps, a Bloom filter, sorting, selection, greedy, graph and dynamic-programming algorithms."""

__version__ = "0.1.0"