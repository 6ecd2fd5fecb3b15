"""Euler paths and circuits by Hierholzer's algorithm."""

from __future__ import annotations

from collections import deque

from graphalgo.graph import Graph


def euler_path(graph: Graph, source: int, target: int) -> list[int]:
    """Return a walk from source to target using every edge exactly once.

    The walk is a list of vertices, one longer than the number of edges.
    Raises ValueError when no such walk exists.
    """
    cursor = graph.iterator()
    used: set[int] = set()
    calls: list[int] = []
    path: deque[int] = deque()
    goal = target
    vertex = source
    while True:
        step = cursor.next_edge(vertex)
        while step is not None and step[0] in used:
            step = cursor.next_edge(vertex)
        if step is not None:
            used.add(step[0])
            calls.append(vertex)
            vertex = step[1]
            continue
        path.appendleft(vertex)
        if vertex != goal:
            raise ValueError(f"no Euler path from {source} to {target}")
        if not calls:
            break
        vertex = goal = calls.pop()
    if len(used) != graph.edge_count:
        raise ValueError("edges are not all reachable from source")
    return list(path)


def euler_circuit(graph: Graph, source: int) -> list[int]:
    """Return a closed walk from source using every edge exactly once."""
    return euler_path(graph, source, source)