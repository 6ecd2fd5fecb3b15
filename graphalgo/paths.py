"""Single-source and all-pairs shortest paths."""

from __future__ import annotations

import math
from collections import deque
from collections.abc import Mapping, Sequence
from typing import Optional, Union

from graphalgo.graph import Graph
from graphalgo.structures import PairingHeap

Weights = Union[Sequence[float], Mapping[int, float]]


def _check_vertex(graph: Graph, vertex: int) -> int:
    vertex_range = graph.id_range()[0]
    if not 0 <= vertex < vertex_range:
        raise KeyError(f"vertex {vertex} does not exist")
    return vertex_range


def unweighted_shortest(
    graph: Graph, source: int, target: Optional[int] = None
) -> list[Optional[int]]:
    """Breadth-first search from source.

    Returns the predecessor of each vertex id on a fewest-edges path, None
    where there is none. The search stops as soon as target is reached.
    """
    vertex_range = _check_vertex(graph, source)
    predecessor: list[Optional[int]] = [None] * vertex_range
    seen = {source}
    queue = deque([source])
    while queue:
        vertex = queue.popleft()
        for _, adjacent in graph.out_edges(vertex):
            if adjacent in seen:
                continue
            seen.add(adjacent)
            predecessor[adjacent] = vertex
            if adjacent == target:
                return predecessor
            queue.append(adjacent)
    return predecessor


def shortest_dijkstra(
    graph: Graph, weights: Weights, source: int, target: Optional[int] = None
) -> list[Optional[int]]:
    """Dijkstra's algorithm for non-negative edge weights.

    weights is indexed by edge id. Returns the predecessor of each vertex id
    on a lightest path from source; the search stops once target is settled.
    """
    vertex_range = _check_vertex(graph, source)
    distance = [math.inf] * vertex_range
    predecessor: list[Optional[int]] = [None] * vertex_range
    done: set[int] = set()
    heap = PairingHeap(distance)

    distance[source] = 0
    heap.push(source)
    while heap:
        vertex = heap.pop()
        if vertex == target:
            break
        done.add(vertex)
        for eid, adjacent in graph.out_edges(vertex):
            if adjacent in done:
                continue
            candidate = distance[vertex] + weights[eid]
            if candidate < distance[adjacent]:
                distance[adjacent] = candidate
                predecessor[adjacent] = vertex
                if adjacent in heap:
                    heap.update(adjacent)
                else:
                    heap.push(adjacent)
    return predecessor


def shortest_bellman_ford(
    graph: Graph, weights: Weights, source: int
) -> list[Optional[int]]:
    """Queue-based Bellman-Ford; edge weights may be negative.

    Returns the predecessor of each vertex id on a lightest path from source.
    Raises ValueError when a negative cycle is reachable from source.
    """
    vertex_range = _check_vertex(graph, source)
    distance = [math.inf] * vertex_range
    predecessor: list[Optional[int]] = [None] * vertex_range
    enqueued = [0] * vertex_range
    in_queue = {source}
    queue = deque([source])

    distance[source] = 0
    while queue:
        vertex = queue.popleft()
        in_queue.discard(vertex)
        for eid, adjacent in graph.out_edges(vertex):
            candidate = distance[vertex] + weights[eid]
            if distance[adjacent] <= candidate:
                continue
            distance[adjacent] = candidate
            predecessor[adjacent] = vertex
            if adjacent not in in_queue:
                enqueued[adjacent] += 1
                if enqueued[adjacent] > vertex_range:
                    raise ValueError("graph has a negative cycle reachable from source")
                queue.append(adjacent)
                in_queue.add(adjacent)
    return predecessor


def floyd_warshall(
    weight: Sequence[Sequence[float]],
) -> tuple[list[list[int]], list[list[float]]]:
    """All-pairs shortest paths over a square weight matrix.

    Missing edges are math.inf; weights may be negative. Returns (path,
    distance): path[i][j] is j for a direct edge, otherwise the last
    intermediate vertex that improved the i to j distance.
    """
    distance = [list(row) for row in weight]
    size = len(distance)
    if any(len(row) != size for row in distance):
        raise ValueError("weight matrix must be square")
    path = [list(range(size)) for _ in range(size)]

    for middle in range(size):
        through = distance[middle]
        for source, row in enumerate(distance):
            first = row[middle]
            if first == math.inf:
                continue
            for target, second in enumerate(through):
                if second == math.inf:
                    continue
                candidate = first + second
                if candidate < row[target]:
                    row[target] = candidate
                    path[source][target] = middle
    return path, distance