"""Command-line driver that runs traversals over graphs read as test cases."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Iterator, Sequence

from graphwalk.graph import Graph
from graphwalk.traversal import bfs, dfs


def _integers(text: str) -> Iterator[int]:
    for token in text.split():
        try:
            yield int(token)
        except ValueError:
            raise ValueError(f"expected an integer, got {token!r}") from None


def _next(numbers: Iterator[int], what: str) -> int:
    try:
        return next(numbers)
    except StopIteration:
        raise ValueError(f"input ended while reading {what}") from None


def parse_cases(text: str, undirected: bool = False) -> list[Graph]:
    """Parse a case count followed by cases of 'N E' and E edge pairs 'u v'."""
    numbers = _integers(text)
    case_count = _next(numbers, "the number of cases")
    if case_count < 0:
        raise ValueError(f"number of cases must not be negative, got {case_count}")
    graphs = []
    for case in range(1, case_count + 1):
        vertex_count = _next(numbers, f"the vertex count of case {case}")
        edge_count = _next(numbers, f"the edge count of case {case}")
        if edge_count < 0:
            raise ValueError(f"edge count must not be negative, got {edge_count}")
        graph = Graph(vertex_count, directed=not undirected)
        for _ in range(edge_count):
            u = _next(numbers, f"an edge of case {case}")
            v = _next(numbers, f"an edge of case {case}")
            graph.add_edge(u, v)
        graphs.append(graph)
    return graphs


def _line(vertices: Sequence[int]) -> str:
    return "".join(f"{v} " for v in vertices) + "\n"


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="graphwalk",
        description="Run breadth-first or depth-first traversals over graphs.",
    )
    parser.add_argument(
        "command",
        choices=("bfs", "dfs"),
        help="bfs reads directed edges; dfs reads undirected edges",
    )
    parser.add_argument(
        "input",
        nargs="?",
        default="-",
        help="file holding the cases, or '-' for standard input (the default)",
    )
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    """Read cases, traverse each graph and print the visit order."""
    args = _build_parser().parse_args(argv)
    try:
        if args.input == "-":
            text = sys.stdin.read()
        else:
            with open(args.input, encoding="utf-8") as handle:
                text = handle.read()
        out = []
        for graph in parse_cases(text, undirected=args.command == "dfs"):
            if args.command == "bfs":
                out.append(_line(bfs(graph)))
            else:
                result = dfs(graph)
                out.append(f"No. of disconnected graph : {result.components}\n")
                out.append(_line(result.order))
    except (OSError, ValueError) as exc:
        print(f"graphwalk: error: {exc}", file=sys.stderr)
        return 1
    sys.stdout.write("".join(out))
    return 0


if __name__ == "__main__":
    sys.exit(main())