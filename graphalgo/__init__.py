"""Integer-id graph with shortest-path, flow, spanning-tree, ordering, connectivity and Euler algorithms, plus heaps, union-find and a PCG32 generator."""

__version__ = "0.1.0"