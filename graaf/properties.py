"""Degree properties of graph vertices."""

from __future__ import annotations

from graaf.graph import Graph, VertexId


def vertex_outdegree(graph: Graph, vertex_id: VertexId) -> int:
    """Number of edges leaving a vertex."""
    return len(graph.neighbors(vertex_id))


def vertex_indegree(graph: Graph, vertex_id: VertexId) -> int:
    """Number of edges arriving at a vertex.

    In an undirected graph this equals the outdegree.
    """
    if graph.is_undirected():
        return vertex_outdegree(graph, vertex_id)
    return sum(
        1 for source in graph.vertices() if vertex_id in graph.neighbors(source)
    )


def vertex_degree(graph: Graph, vertex_id: VertexId) -> int:
    """Total degree: outdegree plus indegree when directed, outdegree otherwise."""
    if graph.is_directed():
        return vertex_outdegree(graph, vertex_id) + vertex_indegree(graph, vertex_id)
    return vertex_outdegree(graph, vertex_id)