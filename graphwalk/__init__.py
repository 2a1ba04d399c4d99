"""Graph algorithms on adjacency lists: traversals, paths, closures and k-cores."""

__version__ = "0.1.0"

__all__ = ["graph", "traversal", "paths", "kcores", "cli"]