"""k-cores of undirected graphs."""

from __future__ import annotations

from graphwalk.graph import Adjacency, Graph, _adjacency_lists


def _prune(lists: list[list[int]], start: int, visited: list[bool],
           degree: list[int], k: int) -> None:
    """Depth-first pass lowering degrees of vertices that fall below k."""
    visited[start] = True
    stack = [(start, iter(lists[start]))]
    while stack:
        v, neighbours = stack[-1]
        for w in neighbours:
            if degree[v] < k:
                degree[w] -= 1
            if not visited[w]:
                visited[w] = True
                stack.append((w, iter(lists[w])))
                break
        else:
            stack.pop()
            if stack and degree[v] < k:
                degree[stack[-1][0]] -= 1


def k_cores(adjacency: Adjacency | Graph, k: int) -> dict[int, list[int]]:
    """Vertices left in the k-core, each mapped to its neighbours also in the core.

    The adjacency lists are expected to hold every undirected edge in both directions.
    """
    lists = _adjacency_lists(adjacency)
    if not lists:
        return {}
    degree = [len(ns) for ns in lists]
    visited = [False] * len(lists)
    start = min(range(len(lists)), key=degree.__getitem__)
    _prune(lists, start, visited, degree, k)
    for v in range(len(lists)):
        if not visited[v]:
            _prune(lists, v, visited, degree, k)
    return {
        v: [w for w in ns if degree[w] >= k]
        for v, ns in enumerate(lists)
        if degree[v] >= k
    }


def format_k_cores(cores: dict[int, list[int]]) -> str:
    """Render cores as '\\n[v] -> a -> b' blocks."""
    return "".join(
        f"\n[{v}]" + "".join(f" -> {w}" for w in ns) for v, ns in cores.items()
    )