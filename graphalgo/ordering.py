"""Topological ordering and critical-path analysis of activity-on-arc graphs."""

from __future__ import annotations

import math
from collections import deque
from collections.abc import Mapping, Sequence
from dataclasses import dataclass
from typing import Optional, Union

from graphalgo.graph import Graph

Durations = Union[Sequence[float], Mapping[int, float]]


@dataclass
class CriticalPath:
    """Result of a critical-path analysis, each list indexed by vertex id.

    successor holds the next vertex on a critical chain, or None; late_start
    stays math.inf for vertices that cannot reach the final event.
    """

    successor: list[Optional[int]]
    early_start: list[float]
    late_start: list[float]


def _sweep(
    graph: Graph, indegree: Optional[Sequence[int]]
) -> tuple[list[int], list[Optional[int]]]:
    """Kahn's algorithm: return the topological order and first predecessors."""
    vertex_range = graph.id_range()[0]
    if indegree is None:
        indegree = graph.indegree()
    if len(indegree) < vertex_range:
        raise ValueError("indegree must cover every vertex id")
    remaining = list(indegree)
    predecessor: list[Optional[int]] = [None] * vertex_range
    order: list[int] = []
    queue = deque(v for v in graph.vertices() if remaining[v] == 0)
    while queue:
        vertex = queue.popleft()
        order.append(vertex)
        for _, adjacent in graph.out_edges(vertex):
            if predecessor[adjacent] is None:
                predecessor[adjacent] = vertex
            remaining[adjacent] -= 1
            if remaining[adjacent] == 0:
                queue.append(adjacent)
    if len(order) != graph.vertex_count:
        raise ValueError("graph has a cycle")
    return order, predecessor


def topo_sort(graph: Graph, indegree: Optional[Sequence[int]] = None) -> list[int]:
    """Return the vertices in topological order.

    indegree defaults to the graph's own in-degrees. Raises ValueError when
    the graph has a cycle.
    """
    return _sweep(graph, indegree)[0]


def topo_path(
    graph: Graph, indegree: Optional[Sequence[int]] = None
) -> list[Optional[int]]:
    """Return, per vertex id, the first vertex in topological order leading to it.

    Vertices with no incoming edge get None. Raises ValueError on a cycle.
    """
    return _sweep(graph, indegree)[1]


def critical_path(
    aoa: Graph, duration: Durations, indegree: Optional[Sequence[int]] = None
) -> CriticalPath:
    """Compute earliest and latest start times of an activity-on-arc network.

    duration is indexed by edge id. The last vertex in topological order is
    taken as the final event. Raises ValueError when the graph has a cycle.
    """
    order, _ = _sweep(aoa, indegree)
    vertex_range = aoa.id_range()[0]
    early: list[float] = [0] * vertex_range
    late: list[float] = [math.inf] * vertex_range
    successor: list[Optional[int]] = [None] * vertex_range
    if not order:
        return CriticalPath(successor, early, late)

    for vertex in order:
        for eid, adjacent in aoa.out_edges(vertex):
            early[adjacent] = max(early[adjacent], early[vertex] + duration[eid])

    last = order[-1]
    late[last] = early[last]
    for vertex in reversed(order[:-1]):
        for eid, adjacent in aoa.out_edges(vertex):
            candidate = late[adjacent] - duration[eid]
            if candidate < late[vertex]:
                late[vertex] = candidate
                if late[vertex] == early[vertex]:
                    successor[vertex] = adjacent
                    break
    return CriticalPath(successor, early, late)