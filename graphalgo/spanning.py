"""Minimum spanning trees of undirected graphs."""

from __future__ import annotations

import math
from collections.abc import Mapping, Sequence
from typing import Optional, Union

from graphalgo.graph import Graph
from graphalgo.structures import BinaryHeap, DisjointSet, PairingHeap

Weights = Union[Sequence[float], Mapping[int, float]]


def mst_prim(graph: Graph, weights: Weights, root: int) -> list[Optional[int]]:
    """Prim's algorithm from root.

    weights is indexed by edge id. Returns the tree parent of each vertex id;
    None for root and for vertices root cannot reach.
    """
    vertex_range = graph.id_range()[0]
    if not 0 <= root < vertex_range:
        raise KeyError(f"vertex {root} does not exist")
    min_weight = [math.inf] * vertex_range
    predecessor: list[Optional[int]] = [None] * vertex_range
    done: set[int] = set()
    heap = PairingHeap(min_weight)

    heap.push(root)
    while heap:
        vertex = heap.pop()
        done.add(vertex)
        for eid, adjacent in graph.out_edges(vertex):
            if adjacent in done or not weights[eid] < min_weight[adjacent]:
                continue
            min_weight[adjacent] = weights[eid]
            predecessor[adjacent] = vertex
            if adjacent in heap:
                heap.update(adjacent)
            else:
                heap.push(adjacent)
    return predecessor


def mst_kruskal(graph: Graph, weights: Weights) -> list[int]:
    """Kruskal's algorithm.

    Returns the ids of the chosen edges in the order they were taken; for a
    disconnected graph this is a minimum spanning forest.
    """
    edge_ids = dict.fromkeys(eid for _, eid, _ in graph.edges())
    heap = BinaryHeap(weights, edge_ids)
    components = DisjointSet(graph.id_range()[0])
    chosen: list[int] = []
    while heap:
        eid = heap.pop()
        source, target = graph.endpoints(eid)
        first, second = components.find(target), components.find(source)
        if first != second:
            chosen.append(eid)
            components.union(first, second)
    return chosen