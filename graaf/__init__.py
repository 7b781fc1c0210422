"""Directed and undirected graphs with traversal, shortest path, coloring and SCC algorithms."""

__version__ = "0.1.0"
__all__ = ["coloring", "graph", "properties", "scc", "shortest_path", "traversal"]