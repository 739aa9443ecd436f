"""Graph traversal, all-pairs shortest paths and minimum spanning trees."""

from __future__ import annotations

import math
from collections import deque
from collections.abc import Iterable, Sequence
from dataclasses import dataclass

INF = math.inf
"""Distance used by :func:`floyd_warshall` for vertex pairs with no edge."""


class Graph:
    """A graph on vertices ``0 .. vertex_count - 1`` stored as adjacency lists.

    Edges are directed unless ``directed`` is false, in which case every edge
    is added in both directions.
    """

    def __init__(self, vertex_count: int, directed: bool = True) -> None:
        if vertex_count < 0:
            raise ValueError("vertex_count must not be negative")
        self.vertex_count = vertex_count
        self.directed = directed
        self._adjacency: list[list[int]] = [[] for _ in range(vertex_count)]

    def _check(self, vertex: int) -> None:
        if not 0 <= vertex < self.vertex_count:
            raise ValueError(f"vertex {vertex} is outside 0..{self.vertex_count - 1}")

    def add_edge(self, source: int, target: int) -> None:
        """Add an edge from ``source`` to ``target`` (and back if undirected)."""
        self._check(source)
        self._check(target)
        self._adjacency[source].append(target)
        if not self.directed and source != target:
            self._adjacency[target].append(source)

    def neighbours(self, vertex: int) -> list[int]:
        """Vertices adjacent to ``vertex``, in the order their edges were added."""
        self._check(vertex)
        return list(self._adjacency[vertex])

    def bfs(self, start: int) -> list[int]:
        """Vertices reachable from ``start`` in breadth-first order."""
        self._check(start)
        visited = [False] * self.vertex_count
        visited[start] = True
        queue = deque([start])
        order = []
        while queue:
            vertex = queue.popleft()
            order.append(vertex)
            for neighbour in self._adjacency[vertex]:
                if not visited[neighbour]:
                    visited[neighbour] = True
                    queue.append(neighbour)
        return order

    def dfs(self, start: int) -> list[int]:
        """Vertices reachable from ``start`` in depth-first preorder."""
        self._check(start)
        visited = [False] * self.vertex_count
        visited[start] = True
        order = [start]
        stack = [iter(self._adjacency[start])]
        while stack:
            for child in stack[-1]:
                if not visited[child]:
                    visited[child] = True
                    order.append(child)
                    stack.append(iter(self._adjacency[child]))
                    break
            else:
                stack.pop()
        return order


@dataclass(frozen=True)
class Edge:
    """A weighted, undirected edge."""

    source: int
    target: int
    weight: float


def floyd_warshall(distances: Sequence[Sequence[float]]) -> list[list[float]]:
    """Shortest distances between every pair of vertices.

    ``distances`` is a square matrix of direct edge lengths with :data:`INF`
    where there is no edge. A new matrix is returned; the input is unchanged.
    """
    dist = [list(row) for row in distances]
    size = len(dist)
    if any(len(row) != size for row in dist):
        raise ValueError("floyd_warshall() needs a square matrix")
    for k in range(size):
        through = dist[k]
        for row in dist:
            to_k = row[k]
            if to_k == INF:
                continue
            for j, from_k in enumerate(through):
                via = to_k + from_k
                if via < row[j]:
                    row[j] = via
    return dist


def _root(parent: list[int], vertex: int) -> int:
    while parent[vertex] != -1:
        vertex = parent[vertex]
    return vertex


def kruskal_mst(vertex_count: int, edges: Iterable[Edge]) -> list[Edge]:
    """Edges of a minimum spanning forest, in the order Kruskal's algorithm picks them."""
    if vertex_count < 0:
        raise ValueError("vertex_count must not be negative")
    ordered = sorted(edges, key=lambda edge: edge.weight)
    for edge in ordered:
        for vertex in (edge.source, edge.target):
            if not 0 <= vertex < vertex_count:
                raise ValueError(f"vertex {vertex} is outside 0..{vertex_count - 1}")
    parent = [-1] * vertex_count
    tree = []
    for edge in ordered:
        root_source = _root(parent, edge.source)
        root_target = _root(parent, edge.target)
        if root_source != root_target:
            tree.append(edge)
            parent[root_source] = root_target
    return tree