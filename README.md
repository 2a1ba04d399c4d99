# graphwalk

A small collection of classic graph algorithms on adjacency lists. It uses
nothing outside the Python standard library.

Vertices are the integers `0 .. n-1`. Every function accepts either a
`Graph` or a plain adjacency list: a sequence in which entry `i` holds the
neighbours of vertex `i`, in the order the edges were added. A neighbour
outside `0 .. n-1` raises `ValueError`.

## Installing

```
pip install .
```

To run the tests as well:

```
pip install .[test]
pytest
```

## Building graphs (`graphwalk.graph`)

```python
from graphwalk.graph import Graph, transpose, format_adjacency

g = Graph(5, directed=True)
for u, v in [(0, 1), (0, 4), (0, 3), (2, 0), (3, 2), (4, 1), (4, 3)]:
    g.add_edge(u, v)

len(g)            # 5
g.neighbors(0)    # (1, 4, 3)
reversed_graph = g.transpose()
```

- `Graph(vertex_count, directed=True)` rejects a negative vertex count;
  `add_edge` and `neighbors` reject vertices outside the graph with
  `ValueError`. An undirected graph records each edge in both directions,
  and its `transpose()` is simply a copy.
- `transpose(adjacency)` returns the adjacency lists with every edge
  reversed.
- `format_adjacency(adjacency)` renders adjacency lists one vertex per line,
  as `v -> a  b  `.

## Traversals (`graphwalk.traversal`)

- `bfs(adjacency, start=0)`: the vertices reachable from `start`, in
  breadth-first order.
- `dfs(adjacency)`: depth-first order over every vertex, starting a new tree
  at each unvisited vertex in index order. It returns a `DfsResult` with the
  visit `order` and the number of trees started (`components`).
- `count_nodes_at_level(adjacency, source, level)`: the number of vertices
  whose breadth-first distance from `source` is exactly `level`.

```python
from graphwalk.traversal import count_nodes_at_level

tree = [[1, 2], [0, 3], [0, 4, 5], [1], [2], [2]]
count_nodes_at_level(tree, 0, 2)   # 3
```

## Paths and reachability (`graphwalk.paths`)

- `count_paths(adjacency, source, target)`: the number of distinct walks
  from `source` that end on their first arrival at `target`. If such walks
  can run into a cycle the count would be infinite, and `ValueError` is
  raised.
- `find_mother(adjacency)`: a vertex from which every vertex can be
  reached, or `None` if there is none (or the graph is empty).
- `transitive_closure(adjacency)`: the reachability matrix of booleans;
  each vertex reaches itself. `format_matrix(matrix)` renders it as rows
  of `1 ` and `0 `.

```python
from graphwalk.paths import count_paths, find_mother

dag = [[1, 2, 3], [3, 4], [3, 4], [], []]
count_paths(dag, 0, 3)   # 3

graph = [[1, 2], [3], [], [], [1], [6, 2], [4, 0]]
find_mother(graph)       # 5
```

## k-cores (`graphwalk.kcores`)

`k_cores(adjacency, k)` finds the k-core of an undirected graph (whose
adjacency lists hold each edge in both directions). It returns a dict
mapping each vertex left in the core to its neighbours that are also in the
core. `format_k_cores(cores)` renders the result as `\n[v] -> a -> b`
blocks.

## Command line

The `graphwalk` command reads test cases in the usual competitive
programming shape: first the number of cases, then for each case the vertex
count `N` and edge count `E`, followed by `E` pairs `u v`.

```
graphwalk {bfs,dfs} [input]
```

- `bfs` reads the edges as directed and prints the breadth-first order from
  vertex 0 for each case, on one line.
- `dfs` reads the edges as undirected and prints, for each case, a line
  `No. of disconnected graph : C` followed by the depth-first order.

`input` is a file holding the cases, or `-` (the default) for standard
input. Malformed input or an unreadable file is reported on standard error
and the command exits with status 1.

```
printf '1\n5 4\n0 1\n0 2\n0 3\n2 4\n' | graphwalk bfs
```

The command offers only these two traversals; the other algorithms are
available from Python alone.