"""Maximum flow by shortest augmenting paths."""

from __future__ import annotations

from collections import defaultdict, deque
from collections.abc import Mapping, Sequence
from typing import Union

from graphalgo.graph import Graph

Capacities = Union[Sequence[float], Mapping[int, float]]


def max_flow_edmonds_karp(
    network: Graph, capacity: Capacities, source: int, sink: int
) -> tuple[float, list[float]]:
    """Edmonds-Karp maximum flow from source to sink.

    capacity is indexed by edge id. Returns (max_flow, flow) where flow is
    indexed by edge id; for an undirected edge a negative value means flow
    from its target towards its source.
    """
    if source == sink:
        raise ValueError("source and sink must differ")
    vertex_range, edge_range = network.id_range()
    for vertex in (source, sink):
        if not 0 <= vertex < vertex_range:
            raise KeyError(f"vertex {vertex} does not exist")

    listed_from: dict[int, set[int]] = {}
    for vertex, eid, _ in network.edges():
        listed_from.setdefault(eid, set()).add(vertex)

    arcs: dict[int, list[tuple[int, int, int]]] = defaultdict(list)
    undirected: set[int] = set()
    for eid, tails in listed_from.items():
        tail, head = network.endpoints(eid)
        if tail == head:
            continue
        if not network.directed and {tail, head} <= tails:
            undirected.add(eid)
        arcs[tail].append((eid, head, 1))
        arcs[head].append((eid, tail, -1))

    flow: list[float] = [0] * edge_range

    def residual(eid: int, sign: int) -> float:
        if sign > 0:
            return capacity[eid] - flow[eid]
        if eid in undirected:
            return capacity[eid] + flow[eid]
        return flow[eid]

    total: float = 0
    while True:
        reached: dict[int, tuple[int, int, int]] = {}
        queue = deque([source])
        while queue and sink not in reached:
            vertex = queue.popleft()
            for eid, adjacent, sign in arcs[vertex]:
                if adjacent == source or adjacent in reached:
                    continue
                if residual(eid, sign) <= 0:
                    continue
                reached[adjacent] = (vertex, eid, sign)
                if adjacent == sink:
                    break
                queue.append(adjacent)
        if sink not in reached:
            break

        path = []
        vertex = sink
        while vertex != source:
            previous, eid, sign = reached[vertex]
            path.append((eid, sign))
            vertex = previous
        step = min(residual(eid, sign) for eid, sign in path)
        for eid, sign in path:
            flow[eid] += sign * step
        total += step
    return total, flow