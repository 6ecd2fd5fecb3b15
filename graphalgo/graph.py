"""Adjacency-list graph with recycled integer ids and a resumable iterator."""

from __future__ import annotations

from collections.abc import Iterator
from typing import Optional


class _IdPool:
    """Hands out small integer ids, reusing the most recently released first."""

    def __init__(self) -> None:
        self._free: list[int] = []
        self._fresh = 0
        self.range = 0

    def acquire(self) -> int:
        if self._free:
            ident = self._free.pop()
        else:
            ident = self._fresh
            self._fresh += 1
        if ident == self.range:
            self.range += 1
        return ident

    def release(self, ident: int) -> None:
        self._free.append(ident)
        if ident == self.range - 1:
            self.range = ident


class Graph:
    """A directed or undirected multigraph over integer vertex and edge ids.

    Vertices and the out-edges of a vertex are listed most recently added
    first. In an undirected graph an undirected edge is listed from both of
    its ends under the same edge id.
    """

    def __init__(self, directed: bool) -> None:
        self.directed = bool(directed)
        self._vertex_pool = _IdPool()
        self._edge_pool = _IdPool()
        self._vertices: dict[int, None] = {}
        # Per vertex, the direct ids of its out-edges in insertion order.
        self._adjacency: dict[int, dict[int, None]] = {}
        self._endpoints: dict[int, tuple[int, int]] = {}

    @property
    def vertex_count(self) -> int:
        """Number of live vertices."""
        return len(self._vertices)

    @property
    def edge_count(self) -> int:
        """Number of live edges."""
        return len(self._endpoints)

    def add_vertex(self) -> int:
        """Create a vertex and return its id."""
        vid = self._vertex_pool.acquire()
        self._vertices[vid] = None
        self._adjacency.setdefault(vid, {})
        return vid

    def reserve_vertices(self, count: int) -> list[int]:
        """Create count vertices and return their ids."""
        if count < 0:
            raise ValueError("count must not be negative")
        return [self.add_vertex() for _ in range(count)]

    def add_edge(self, source: int, target: int, directed: Optional[bool] = None) -> int:
        """Add an edge from source to target and return its id.

        directed defaults to the graph's own kind; a directed graph cannot
        hold undirected edges.
        """
        if directed is None:
            directed = self.directed
        elif not directed and self.directed:
            raise ValueError("a directed graph cannot hold undirected edges")
        for vertex in (source, target):
            if vertex not in self._vertices:
                raise KeyError(f"vertex {vertex} does not exist")
        eid = self._edge_pool.acquire()
        did = eid if self.directed else eid << 1
        self._adjacency[source][did] = None
        if not directed:
            self._adjacency[target][did ^ 1] = None
        self._endpoints[eid] = (source, target)
        return eid

    def delete_vertex(self, vid: int) -> None:
        """Remove a vertex; edges touching it are left in place."""
        if vid not in self._vertices:
            raise KeyError(f"vertex {vid} does not exist")
        del self._vertices[vid]
        self._vertex_pool.release(vid)

    def delete_edge(self, eid: int) -> None:
        """Remove an edge and free its id."""
        try:
            source, target = self._endpoints.pop(eid)
        except KeyError:
            raise KeyError(f"edge {eid} does not exist") from None
        did = eid if self.directed else eid << 1
        self._adjacency[source].pop(did, None)
        if not self.directed:
            self._adjacency[target].pop(did ^ 1, None)
        self._edge_pool.release(eid)

    def _resolve(self, did: int) -> tuple[int, int]:
        """Map a direct id to (edge id, vertex it leads to)."""
        if self.directed:
            return did, self._endpoints[did][1]
        eid = did >> 1
        source, target = self._endpoints[eid]
        return eid, source if did & 1 else target

    def _directs(self, vertex: int) -> tuple[int, ...]:
        try:
            adjacency = self._adjacency[vertex]
        except KeyError:
            raise KeyError(f"vertex {vertex} does not exist") from None
        return tuple(reversed(adjacency))

    def vertices(self) -> Iterator[int]:
        """Yield the live vertex ids, most recently added first."""
        yield from tuple(reversed(self._vertices))

    def out_edges(self, vertex: int) -> Iterator[tuple[int, int]]:
        """Yield (edge id, target) for each edge leaving vertex."""
        for did in self._directs(vertex):
            yield self._resolve(did)

    def edges(self) -> Iterator[tuple[int, int, int]]:
        """Yield (source, edge id, target) over every live vertex's out-edges."""
        for vertex in self.vertices():
            for eid, target in self.out_edges(vertex):
                yield vertex, eid, target

    def endpoints(self, eid: int) -> tuple[int, int]:
        """Return the (source, target) an edge was added with."""
        try:
            return self._endpoints[eid]
        except KeyError:
            raise KeyError(f"edge {eid} does not exist") from None

    def id_range(self) -> tuple[int, int]:
        """Return upper bounds (exclusive) of vertex ids and edge ids."""
        return self._vertex_pool.range, self._edge_pool.range

    def indegree(self) -> list[int]:
        """Return the in-degree of each vertex id below the vertex range."""
        counts = [0] * self._vertex_pool.range
        for _, _, target in self.edges():
            counts[target] += 1
        return counts

    def iterator(self) -> GraphIterator:
        """Return a fresh iterator over this graph."""
        return GraphIterator(self)


class GraphIterator:
    """Resumable cursor over a graph's vertices and each vertex's out-edges.

    The vertex cursor and every per-vertex edge cursor advance independently
    and can be reset on their own.
    """

    def __init__(self, graph: Graph) -> None:
        self._graph = graph
        self._vertex_order: tuple[int, ...] = ()
        self._vertex_pos = 0
        self._edge_lists: dict[int, tuple[int, ...]] = {}
        self._edge_pos: dict[int, int] = {}
        self.reset_vertices()
        self.reset_edges()

    def reset_vertices(self) -> None:
        """Restart the vertex cursor from the first vertex."""
        self._vertex_order = tuple(self._graph.vertices())
        self._vertex_pos = 0

    def reset_edges(self, vertex: Optional[int] = None) -> None:
        """Restart the edge cursor of one vertex, or of all when vertex is None."""
        if vertex is None:
            self._edge_lists = {
                v: self._graph._directs(v) for v in self._graph._adjacency
            }
            self._edge_pos = dict.fromkeys(self._edge_lists, 0)
        else:
            self._edge_lists[vertex] = self._graph._directs(vertex)
            self._edge_pos[vertex] = 0

    def next_vertex(self) -> Optional[int]:
        """Return the next vertex id, or None when all have been visited."""
        if self._vertex_pos >= len(self._vertex_order):
            return None
        vertex = self._vertex_order[self._vertex_pos]
        self._vertex_pos += 1
        return vertex

    def _pending_direct(self, vertex: int) -> Optional[int]:
        if vertex not in self._edge_lists:
            raise KeyError(f"vertex {vertex} does not exist")
        directs = self._edge_lists[vertex]
        pos = self._edge_pos[vertex]
        return directs[pos] if pos < len(directs) else None

    def next_edge(self, vertex: int) -> Optional[tuple[int, int]]:
        """Return the next (edge id, target) leaving vertex, or None at the end."""
        did = self._pending_direct(vertex)
        if did is None:
            return None
        self._edge_pos[vertex] += 1
        return self._graph._resolve(did)

    def current(self) -> tuple[Optional[int], Optional[int], Optional[int]]:
        """Return (vertex, edge id, target) that the cursors will yield next.

        Missing parts are None: all three when the vertices are exhausted,
        the last two when that vertex has no pending edge.
        """
        if self._vertex_pos >= len(self._vertex_order):
            return None, None, None
        vertex = self._vertex_order[self._vertex_pos]
        did = self._pending_direct(vertex)
        if did is None:
            return vertex, None, None
        eid, target = self._graph._resolve(did)
        return vertex, eid, target