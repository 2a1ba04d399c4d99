"""Graphs over the vertices 0..n-1 stored as adjacency lists."""

from __future__ import annotations

from collections.abc import Sequence

Adjacency = Sequence[Sequence[int]]


class Graph:
    """A directed or undirected graph over vertices 0..n-1."""

    def __init__(self, vertex_count: int, directed: bool = True) -> None:
        if vertex_count < 0:
            raise ValueError(f"vertex count must not be negative, got {vertex_count}")
        self.directed = directed
        self._adj: list[list[int]] = [[] for _ in range(vertex_count)]

    def _check(self, v: int) -> None:
        if not 0 <= v < len(self._adj):
            raise ValueError(f"vertex {v} is outside 0..{len(self._adj) - 1}")

    def add_edge(self, u: int, v: int) -> None:
        """Add an edge from u to v, and back from v to u if undirected."""
        self._check(u)
        self._check(v)
        self._adj[u].append(v)
        if not self.directed:
            self._adj[v].append(u)

    def neighbors(self, v: int) -> tuple[int, ...]:
        """Vertices adjacent to v, in insertion order."""
        self._check(v)
        return tuple(self._adj[v])

    def __len__(self) -> int:
        return len(self._adj)

    def transpose(self) -> Graph:
        """A new graph with every edge reversed."""
        result = Graph(len(self), self.directed)
        if self.directed:
            result._adj = transpose(self._adj)
        else:
            result._adj = [list(ns) for ns in self._adj]
        return result


def _adjacency_lists(adjacency: Adjacency | Graph) -> list[list[int]]:
    """Copy adjacency lists out of a Graph or a sequence, checking every vertex."""
    if isinstance(adjacency, Graph):
        lists = [list(adjacency.neighbors(v)) for v in range(len(adjacency))]
    else:
        lists = [list(ns) for ns in adjacency]
    n = len(lists)
    for v, ns in enumerate(lists):
        for w in ns:
            if not 0 <= w < n:
                raise ValueError(f"vertex {v} has neighbour {w} outside 0..{n - 1}")
    return lists


def transpose(adjacency: Adjacency | Graph) -> list[list[int]]:
    """Adjacency lists of the graph with every edge reversed."""
    lists = _adjacency_lists(adjacency)
    result: list[list[int]] = [[] for _ in lists]
    for v, ns in enumerate(lists):
        for w in ns:
            result[w].append(v)
    return result


def format_adjacency(adjacency: Adjacency | Graph) -> str:
    """Render adjacency lists one vertex per line as 'v -> a  b  '."""
    lists = _adjacency_lists(adjacency)
    return "".join(
        f"{v} -> " + "".join(f"{w}  " for w in ns) + "\n" for v, ns in enumerate(lists)
    )