"""Breadth-first and depth-first traversals."""

from __future__ import annotations

from collections import deque
from dataclasses import dataclass, field

from graphwalk.graph import Adjacency, Graph, _adjacency_lists


@dataclass
class DfsResult:
    """Visit order of a full depth-first traversal and its number of trees."""

    order: list[int] = field(default_factory=list)
    components: int = 0


def _check_vertex(lists: list[list[int]], v: int) -> None:
    if not 0 <= v < len(lists):
        raise ValueError(f"vertex {v} is outside the graph")


def bfs(adjacency: Adjacency | Graph, start: int = 0) -> list[int]:
    """Vertices reachable from start, in breadth-first order."""
    lists = _adjacency_lists(adjacency)
    _check_vertex(lists, start)
    visited = {start}
    order = [start]
    queue = deque([start])
    while queue:
        v = queue.popleft()
        for w in lists[v]:
            if w not in visited:
                visited.add(w)
                order.append(w)
                queue.append(w)
    return order


def dfs(adjacency: Adjacency | Graph) -> DfsResult:
    """Depth-first traversal over every vertex, starting new trees in index order."""
    lists = _adjacency_lists(adjacency)
    visited = [False] * len(lists)
    result = DfsResult()
    for root in range(len(lists)):
        if visited[root]:
            continue
        result.components += 1
        visited[root] = True
        result.order.append(root)
        stack = [iter(lists[root])]
        while stack:
            for w in stack[-1]:
                if not visited[w]:
                    visited[w] = True
                    result.order.append(w)
                    stack.append(iter(lists[w]))
                    break
            else:
                stack.pop()
    return result


def count_nodes_at_level(adjacency: Adjacency | Graph, source: int, level: int) -> int:
    """Number of vertices whose breadth-first distance from source equals level."""
    lists = _adjacency_lists(adjacency)
    _check_vertex(lists, source)
    depth = {source: 0}
    queue = deque([source])
    while queue:
        v = queue.popleft()
        for w in lists[v]:
            if w not in depth:
                depth[w] = depth[v] + 1
                queue.append(w)
    return sum(1 for d in depth.values() if d == level)