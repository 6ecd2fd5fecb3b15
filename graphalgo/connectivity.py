"""Articulation points and strongly connected components."""

from __future__ import annotations

from collections import defaultdict
from typing import Optional

from graphalgo.graph import Graph


def find_articulation(graph: Graph) -> list[int]:
    """Return the articulation points of a connected undirected graph.

    The search starts at the graph's first vertex; points are listed in the
    order they are found, the start vertex last. Raises ValueError for a
    directed graph.
    """
    if graph.directed:
        raise ValueError("articulation points need an undirected graph")
    root = next(graph.vertices(), None)
    if root is None:
        return []

    preorder = {root: 0}
    lowest = {root: 0}
    parent: dict[int, int] = {}
    found: list[int] = []
    marked: set[int] = set()
    stack = [(root, graph.out_edges(root))]
    while stack:
        vertex, edges = stack[-1]
        for _, adjacent in edges:
            if adjacent not in preorder:
                parent[adjacent] = vertex
                preorder[adjacent] = lowest[adjacent] = len(preorder)
                stack.append((adjacent, graph.out_edges(adjacent)))
                break
            if adjacent != parent.get(vertex) and preorder[adjacent] < lowest[vertex]:
                lowest[vertex] = preorder[adjacent]
        else:
            stack.pop()
            if not stack:
                continue
            above = stack[-1][0]
            if above != root and above not in marked and lowest[vertex] >= preorder[above]:
                marked.add(above)
                found.append(above)
            lowest[above] = min(lowest[above], lowest[vertex])

    children = sum(1 for p in parent.values() if p == root)
    if children >= 2:
        found.append(root)
    return found


def find_scc(graph: Graph) -> list[Optional[int]]:
    """Label strongly connected components (Kosaraju).

    Returns, per vertex id, a component number counted from 0; None for ids
    that are not live vertices.
    """
    reverse: dict[int, list[int]] = defaultdict(list)
    visited: set[int] = set()
    finished: list[int] = []
    for start in graph.vertices():
        if start in visited:
            continue
        visited.add(start)
        stack = [(start, graph.out_edges(start))]
        while stack:
            vertex, edges = stack[-1]
            for _, adjacent in edges:
                reverse[adjacent].append(vertex)
                if adjacent not in visited:
                    visited.add(adjacent)
                    stack.append((adjacent, graph.out_edges(adjacent)))
                    break
            else:
                stack.pop()
                finished.append(vertex)

    component: dict[int, int] = {}
    count = 0
    for start in reversed(finished):
        if start in component:
            continue
        component[start] = count
        pending = [start]
        while pending:
            vertex = pending.pop()
            for adjacent in reverse[vertex]:
                if adjacent not in component:
                    component[adjacent] = count
                    pending.append(adjacent)
        count += 1

    live = set(graph.vertices())
    return [
        component.get(v) if v in live else None
        for v in range(graph.id_range()[0])
    ]