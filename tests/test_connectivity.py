import itertools

import pytest

from graphalgo.connectivity import find_articulation, find_scc
from graphalgo.graph import Graph


def _graph(directed, n, edges):
    graph = Graph(directed)
    graph.reserve_vertices(n)
    for a, b in edges:
        graph.add_edge(a, b)
    return graph


def _reachable(graph, start, removed=None):
    seen = {start}
    pending = [start]
    while pending:
        vertex = pending.pop()
        for _, adjacent in graph.out_edges(vertex):
            if adjacent != removed and adjacent not in seen:
                seen.add(adjacent)
                pending.append(adjacent)
    return seen


def _brute_articulation(graph, n):
    result = set()
    for vertex in range(n):
        start = 0 if vertex != 0 else 1
        if len(_reachable(graph, start, removed=vertex)) < n - 1:
            result.add(vertex)
    return result


UNDIRECTED_CASES = [
    (3, [(0, 1), (1, 2)]),
    (4, [(0, 1), (0, 2), (0, 3)]),
    (5, [(0, 1), (1, 2), (2, 0), (2, 3), (3, 4), (4, 2)]),
    (3, [(2, 0), (2, 1)]),
    (6, [(0, 1), (1, 2), (2, 3), (3, 0), (3, 4), (4, 5)]),
    (4, [(0, 1), (1, 2), (2, 3), (3, 0)]),
]


@pytest.mark.parametrize("n,edges", UNDIRECTED_CASES)
def test_articulation_matches_removal_check(n, edges):
    graph = _graph(False, n, edges)
    found = find_articulation(graph)
    assert len(found) == len(set(found))
    assert set(found) == _brute_articulation(graph, n)


def test_articulation_path_middle():
    graph = _graph(False, 3, [(0, 1), (1, 2)])
    assert find_articulation(graph) == [1]


def test_articulation_cycle_has_none():
    graph = _graph(False, 4, [(0, 1), (1, 2), (2, 3), (3, 0)])
    assert find_articulation(graph) == []


def test_articulation_root_with_two_subtrees():
    graph = _graph(False, 3, [(2, 0), (2, 1)])
    root = next(graph.vertices())
    assert root in find_articulation(graph)


def test_articulation_directed_raises():
    with pytest.raises(ValueError):
        find_articulation(_graph(True, 2, [(0, 1)]))


def test_articulation_empty_graph():
    assert find_articulation(Graph(False)) == []


SCC_CASES = [
    (4, [(0, 1), (1, 2), (2, 0), (2, 3)]),
    (6, [(0, 1), (1, 0), (1, 2), (2, 3), (3, 4), (4, 2), (4, 5)]),
    (3, [(0, 1), (1, 2)]),
    (5, [(0, 1), (1, 2), (2, 3), (3, 4), (4, 0)]),
]


@pytest.mark.parametrize("n,edges", SCC_CASES)
def test_scc_matches_mutual_reachability(n, edges):
    graph = _graph(True, n, edges)
    labels = find_scc(graph)
    reach = {v: _reachable(graph, v) for v in range(n)}
    for u, v in itertools.combinations(range(n), 2):
        mutual = v in reach[u] and u in reach[v]
        assert (labels[u] == labels[v]) == mutual


@pytest.mark.parametrize("n,edges", SCC_CASES)
def test_scc_labels_are_contiguous(n, edges):
    labels = find_scc(_graph(True, n, edges))
    assert sorted(set(labels)) == list(range(len(set(labels))))


def test_scc_deleted_vertex_is_none():
    graph = _graph(True, 3, [(0, 1), (1, 0)])
    graph.delete_vertex(1)
    labels = find_scc(graph)
    assert labels[1] is None
    assert labels[0] is not None and labels[2] is not None
    assert labels[0] != labels[2]