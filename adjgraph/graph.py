"""
Dense undirected weighted graph for adjgraph
- Vertices are the integers 0..n-1, fixed when the graph is built
- Weights live in a symmetric n x n numpy matrix; 0.0 means "no edge"
- Legal weights are strictly positive and finite, so 0.0 is never ambiguous
- Shortest paths use Dijkstra with a linear minimum scan (O(V^2) per query)
Usage:
    from adjgraph.graph import WeightedGraph, Edge
    G = WeightedGraph.from_edges([(0, 1, 2), (1, 2, 2), (0, 2, 10)])
    G.path(0, 2)          # [0, 1, 2]
    G.at(0, 2)            # 10.0
"""

import logging
import math
import numbers
import operator
from collections import namedtuple

import numpy as np

from adjgraph.exceptions import InvalidEdge, NoSuchEdge

logger = logging.getLogger(__name__)

Edge = namedtuple("Edge", ["u", "v", "weight"])


def _as_index(value):
    """Return value as a plain int, or None if it is not an integer."""
    if isinstance(value, bool):
        return None
    try:
        return operator.index(value)
    except TypeError:
        return None


def _check_edge(item, vertex_count=None):
    """
    Validate one (u, v, weight) item and return it as a normalized Edge.

    Args:
        item: Edge or any 3-item sequence
        vertex_count: upper bound for endpoints, or None when the graph
                      size is not known yet (edge-list construction)

    Raises:
        InvalidEdge: self-loop, weight <= 0 or not finite, endpoint that is
                     not an integer or lies outside [0, vertex_count)
    """
    try:
        u, v, weight = item
    except (TypeError, ValueError):
        raise InvalidEdge(item, "expected a (u, v, weight) triple") from None

    iu, iv = _as_index(u), _as_index(v)
    if iu is None or iv is None:
        raise InvalidEdge(item, "endpoints must be integers")
    if iu == iv:
        raise InvalidEdge(item, "self-loops are not allowed")

    if isinstance(weight, bool) or not isinstance(weight, numbers.Real):
        raise InvalidEdge(item, "weight must be a number")
    w = float(weight)
    if not math.isfinite(w) or w <= 0:
        raise InvalidEdge(item, "weight must be positive and finite")

    if iu < 0 or iv < 0:
        raise InvalidEdge(item, "endpoint out of range")
    if vertex_count is not None and (iu >= vertex_count or iv >= vertex_count):
        raise InvalidEdge(item, f"endpoint out of range for {vertex_count} vertices")

    return Edge(iu, iv, w)


class WeightedGraph:
    """Undirected weighted graph over a fixed vertex set, stored as a dense matrix."""

    def __init__(self, n):
        """
        Args:
            n: number of vertices (integer >= 0). The graph starts with no edges.
        """
        count = _as_index(n)
        if count is None:
            raise TypeError(f"vertex count must be an integer, got {type(n).__name__}")
        if count < 0:
            raise ValueError(f"vertex count must be >= 0, got {count}")
        self._weights = np.zeros((count, count), dtype=np.float64)

    @classmethod
    def from_edges(cls, edges):
        """
        Build a graph from a sequence of (u, v, weight) items.

        The vertex count is one more than the highest endpoint seen, counting
        from 0 (an empty sequence gives a single isolated vertex). Every item
        is validated before the matrix is allocated. When the same unordered
        pair appears twice the later item wins.
        """
        checked = [_check_edge(item) for item in edges]
        n = max((max(e.u, e.v) for e in checked), default=0) + 1
        graph = cls(n)
        for edge in checked:
            graph._set(edge)
        logger.debug("built graph with %d vertices from %d edges", n, len(checked))
        return graph

    # ----------------------
    # Size and raw storage
    # ----------------------

    @property
    def vertex_count(self):
        return self._weights.shape[0]

    def __len__(self):
        return self.vertex_count

    @property
    def matrix(self):
        """Read-only view of the weight matrix."""
        view = self._weights.view()
        view.flags.writeable = False
        return view

    @property
    def edge_count(self):
        return int(np.count_nonzero(np.triu(self._weights, k=1)))

    def _in_range(self, vertex):
        index = _as_index(vertex)
        return index is not None and 0 <= index < self.vertex_count

    def _set(self, edge):
        self._weights[edge.u, edge.v] = edge.weight
        self._weights[edge.v, edge.u] = edge.weight

    # ----------------------
    # Mutation
    # ----------------------

    def add_edge(self, *args):
        """
        Insert or overwrite one edge.

        Accepts either a single Edge / (u, v, weight) triple or the three
        values as separate arguments: add_edge(Edge(0, 1, 2.5)) or
        add_edge(0, 1, 2.5).

        Raises:
            InvalidEdge: if the edge breaks any insertion rule
        """
        item = args[0] if len(args) == 1 else args
        self._set(_check_edge(item, self.vertex_count))

    def add_edges(self, edges):
        """
        Insert edges in order, later duplicates overwriting earlier ones.

        Stops at the first invalid edge. Edges inserted before it stay in
        the graph; nothing is rolled back.
        """
        for item in edges:
            self._set(_check_edge(item, self.vertex_count))

    # ----------------------
    # Lookup
    # ----------------------

    def weight(self, u, v):
        """
        Unchecked lookup: the stored weight, 0.0 when u and v share no edge.

        The caller guarantees both indices lie in [0, vertex_count). Breaking
        that is a programming error and raises IndexError; negative indices
        are never wrapped around.
        """
        if not (self._in_range(u) and self._in_range(v)):
            raise IndexError(
                f"vertex pair ({u!r}, {v!r}) out of range for {self.vertex_count} vertices"
            )
        return float(self._weights[u, v])

    def __getitem__(self, key):
        u, v = key
        return self.weight(u, v)

    def at(self, u, v):
        """
        Checked lookup.

        Raises:
            NoSuchEdge: if an endpoint is out of range or there is no edge
        """
        if not (self._in_range(u) and self._in_range(v)):
            raise NoSuchEdge(u, v)
        w = self._weights[u, v]
        if w == 0:
            raise NoSuchEdge(u, v)
        return float(w)

    def connected(self, u, v):
        """True iff both endpoints exist and share an edge. Never raises."""
        return self._in_range(u) and self._in_range(v) and bool(self._weights[u, v] != 0)

    def neighbors(self, u):
        """Adjacent vertex ids of u; u must be in range or IndexError is raised."""
        if not self._in_range(u):
            raise IndexError(f"vertex {u!r} out of range for {self.vertex_count} vertices")
        return [int(i) for i in np.flatnonzero(self._weights[u])]

    def edges(self):
        """Yield every edge once as Edge(u, v, weight) with u < v."""
        rows, cols = np.nonzero(np.triu(self._weights, k=1))
        for u, v in zip(rows, cols):
            yield Edge(int(u), int(v), float(self._weights[u, v]))

    # ----------------------
    # Shortest paths
    # ----------------------

    @staticmethod
    def _next_vertex(distance, settled):
        # lowest index wins ties: argmin returns the first minimum
        candidates = np.where(settled, np.inf, distance)
        index = int(np.argmin(candidates))
        if np.isinf(candidates[index]):
            return None
        return index

    def path(self, source, target):
        """
        Compute the lowest-weight path from source to target (Dijkstra).

        Args:
            source, target: vertex ids

        Returns:
            list of vertices starting with source and ending with target,
            or None if target is unreachable or either id is out of range
        """
        if not (self._in_range(source) and self._in_range(target)):
            return None
        source, target = operator.index(source), operator.index(target)

        n = self.vertex_count
        distance = np.full(n, np.inf)
        distance[source] = 0.0
        settled = np.zeros(n, dtype=bool)
        predecessor = np.full(n, -1, dtype=np.int64)
        predecessor[source] = source

        while True:
            current = self._next_vertex(distance, settled)
            if current is None:
                logger.debug("no path from %d to %d", source, target)
                return None
            if current == target:
                break
            settled[current] = True

            row = self._weights[current]
            candidate = distance[current] + row
            improved = (row > 0) & ~settled & (candidate < distance)
            distance[improved] = candidate[improved]
            predecessor[improved] = current

        route = [target]
        while route[-1] != source:
            route.append(int(predecessor[route[-1]]))
        route.reverse()
        logger.debug("path %d -> %d: %s (cost %.6g)", source, target, route, distance[target])
        return route

    def path_cost(self, path):
        """
        Total weight along a vertex sequence (0.0 for a single vertex).

        Raises:
            NoSuchEdge: if two consecutive vertices are not adjacent
        """
        total = 0.0
        for u, v in zip(path, path[1:]):
            total += self.at(u, v)
        return total

    def shortest_path(self, source, target):
        """Return (path, total_cost), or (None, inf) when there is no path."""
        route = self.path(source, target)
        if route is None:
            return None, float('inf')
        return route, self.path_cost(route)

    def spanning_tree(self):
        """
        Minimum spanning forest by Kruskal's algorithm.

        Returns a new graph with the same vertex count. Equal weights are
        taken in (u, v) order.
        """
        parent = list(range(self.vertex_count))

        def find(x):
            while parent[x] != x:
                parent[x] = parent[parent[x]]
                x = parent[x]
            return x

        tree = type(self)(self.vertex_count)
        for edge in sorted(self.edges(), key=lambda e: (e.weight, e.u, e.v)):
            root_u, root_v = find(edge.u), find(edge.v)
            if root_u != root_v:
                parent[root_u] = root_v
                tree._set(edge)
        return tree

    # ----------------------
    # Misc
    # ----------------------

    def copy(self):
        clone = type(self)(0)
        clone._weights = self._weights.copy()
        return clone

    def __eq__(self, other):
        if not isinstance(other, WeightedGraph):
            return NotImplemented
        return np.array_equal(self._weights, other._weights)

    __hash__ = None

    def __repr__(self):
        return f"WeightedGraph(vertex_count={self.vertex_count}, edge_count={self.edge_count})"
