"""Path counting, mother vertices and transitive closure."""

from __future__ import annotations

from graphwalk.graph import Adjacency, Graph, _adjacency_lists


def _reachable(lists: list[list[int]], start: int) -> list[bool]:
    seen = [False] * len(lists)
    seen[start] = True
    stack = [start]
    while stack:
        v = stack.pop()
        for w in lists[v]:
            if not seen[w]:
                seen[w] = True
                stack.append(w)
    return seen


def count_paths(adjacency: Adjacency | Graph, source: int, target: int) -> int:
    """Number of distinct walks from source that end on their first arrival at target.

    Raises ValueError if such walks run into a cycle, which would make the count infinite.
    """
    lists = _adjacency_lists(adjacency)
    for v in (source, target):
        if not 0 <= v < len(lists):
            raise ValueError(f"vertex {v} is outside the graph")
    memo: dict[int, int] = {}
    on_path = {source}
    stack = [[source, iter(lists[source]), 0]]
    while stack:
        frame = stack[-1]
        for w in frame[1]:
            if w == target:
                frame[2] += 1
            elif w in memo:
                frame[2] += memo[w]
            elif w in on_path:
                raise ValueError(f"cycle through vertex {w} gives infinitely many paths")
            else:
                on_path.add(w)
                stack.append([w, iter(lists[w]), 0])
                break
        else:
            stack.pop()
            v, total = frame[0], frame[2]
            on_path.discard(v)
            memo[v] = total
            if stack:
                stack[-1][2] += total
    return memo[source]


def find_mother(adjacency: Adjacency | Graph) -> int | None:
    """A vertex from which every vertex is reachable, or None if there is none."""
    lists = _adjacency_lists(adjacency)
    if not lists:
        return None
    visited = [False] * len(lists)
    candidate = 0
    for v in range(len(lists)):
        if not visited[v]:
            for w, seen in enumerate(_reachable(lists, v)):
                visited[w] = visited[w] or seen
            candidate = v
    return candidate if all(_reachable(lists, candidate)) else None


def transitive_closure(adjacency: Adjacency | Graph) -> list[list[bool]]:
    """Matrix whose [i][j] entry tells whether j is reachable from i."""
    lists = _adjacency_lists(adjacency)
    return [_reachable(lists, v) for v in range(len(lists))]


def format_matrix(matrix: list[list[bool]]) -> str:
    """Render a boolean matrix as rows of '1 ' and '0 '."""
    return "".join("".join(f"{int(cell)} " for cell in row) + "\n" for row in matrix)