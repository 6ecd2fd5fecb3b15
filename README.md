# graphalgo

A compact graph library. Vertices and edges are identified by small integer
ids, and a freed id is reused by the next addition. On top of the graph sit
the classic algorithms:

- **Paths** (`graphalgo.paths`): breadth-first, Dijkstra, Bellman-Ford, Floyd-Warshall
- **Flow** (`graphalgo.flow`): Edmonds-Karp maximum flow
- **Spanning trees** (`graphalgo.spanning`): Prim and Kruskal
- **Ordering** (`graphalgo.ordering`): topological sort and paths, critical path of an activity-on-arc network
- **Connectivity** (`graphalgo.connectivity`): articulation points, strongly connected components
- **Euler** (`graphalgo.euler`): Euler paths and circuits

It uses only the standard library and needs Python 3.10 or later.

## Installation

```
pip install .
```

## Building a graph

```python
from graphalgo.graph import Graph

g = Graph(directed=True)
g.reserve_vertices(6)                 # returns [0, 1, 2, 3, 4, 5]
for u, v in [(0, 1), (0, 3), (1, 3), (1, 2), (4, 1),
             (3, 4), (4, 2), (2, 5), (4, 5)]:
    g.add_edge(u, v, True)            # returns the new edge id

for vertex in g.vertices():
    for eid, target in g.out_edges(vertex):
        print(vertex, eid, target)
```

- `Graph(directed)` makes a directed or undirected multigraph.
- `add_vertex()` and `reserve_vertices(count)` create vertices.
- `add_edge(source, target, directed=None)` adds an edge. `directed` defaults
  to the graph's own kind. An undirected graph may also hold directed edges.
  A directed graph refuses undirected ones with `ValueError`. An undirected
  edge is listed from both ends under the same edge id.
- `delete_edge(eid)` removes an edge. `delete_vertex(vid)` removes a vertex
  but leaves the edges that touch it in place.
- `vertices()` and `out_edges(vertex)` list the most recently added first.
  `edges()` yields `(source, edge id, target)` triples.
- `endpoints(eid)`, `id_range()` (exclusive upper bounds of vertex and edge
  ids), `vertex_count`, `edge_count` and `indegree()` describe the graph.
- `iterator()` returns a `GraphIterator` with `next_vertex()`,
  `next_edge(vertex)`, `current()`, `reset_vertices()` and
  `reset_edges(vertex=None)`. Each vertex keeps its own edge cursor.
  `next_vertex()` and `next_edge()` return `None` when they are exhausted.

Unknown vertex or edge ids raise `KeyError`.

## Algorithms

Values per edge, such as weights, capacities and durations, are plain
sequences or mappings indexed by edge id. Results per vertex are lists
indexed by vertex id, with `None` where there is no value.

```python
from graphalgo.flow import max_flow_edmonds_karp
from graphalgo.paths import shortest_dijkstra

capacity = [3, 5, 1, 4, 2, 2, 1, 5, 2]
total, flow = max_flow_edmonds_karp(g, capacity, 0, 5)

predecessor = shortest_dijkstra(g, capacity, 0, 5)
```

- `graphalgo.paths`
  - `unweighted_shortest(graph, source, target=None)`: the BFS predecessor of each vertex.
  - `shortest_dijkstra(graph, weights, source, target=None)`: predecessors for non-negative weights.
  - `shortest_bellman_ford(graph, weights, source)`: predecessors where weights may be negative. Raises `ValueError` on a reachable negative cycle.
  - `floyd_warshall(weight)`: takes a square matrix with `math.inf` for missing edges and returns `(path, distance)`.
- `graphalgo.flow`
  - `max_flow_edmonds_karp(network, capacity, source, sink)`: returns `(max_flow, flow)`. For an undirected edge a negative flow runs from its target to its source.
- `graphalgo.spanning`
  - `mst_prim(graph, weights, root)`: the tree parent of each vertex.
  - `mst_kruskal(graph, weights)`: the chosen edge ids, a spanning forest if the graph is disconnected.
- `graphalgo.ordering`
  - `topo_sort(graph, indegree=None)` and `topo_path(graph, indegree=None)`.
  - `critical_path(aoa, duration, indegree=None)`: returns a `CriticalPath` with `successor`, `early_start` and `late_start`.
  - All three raise `ValueError` on a cycle.
- `graphalgo.connectivity`
  - `find_articulation(graph)`: for a connected undirected graph. Raises `ValueError` for a directed one.
  - `find_scc(graph)`: a component number per vertex id.
- `graphalgo.euler`
  - `euler_path(graph, source, target)` and `euler_circuit(graph, source)`: return the walk as a list of vertices. Raise `ValueError` when there is no such walk.

## Supporting structures

`graphalgo.structures` holds the building blocks the algorithms use:

- `BinaryHeap(weights, items=())`: a min-heap of ids ordered by an external weight table.
- `PairingHeap(weights)`: a min-heap of ids with `update(item)` for decrease-key.
- `DisjointSet(size)`: union-find with `find` and `union`.

`graphalgo.pcg.PcgRandom(seed)` is a PCG32 generator with `next_u32()`,
`randint(bound)` and `uniform(bound)`.

## What it does not do

The package has no command-line tool. It does not read or write graph files
and keeps nothing on disk. It cannot store named attributes on a graph;
per-edge values live in your own sequences indexed by edge id.

## Running the tests

```
pip install .[test]
pytest
```