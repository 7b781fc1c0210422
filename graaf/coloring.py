"""Heuristic vertex colorings of graphs."""

from __future__ import annotations

from graaf.graph import Graph, VertexId
from graaf.properties import vertex_degree


def _neighbors_high_to_low(graph: Graph, vertex_id: VertexId) -> list[VertexId]:
    return sorted(graph.neighbors(vertex_id), reverse=True)


def greedy_graph_coloring(graph: Graph) -> dict[VertexId, int]:
    """Color vertices greedily, one at a time.

    Vertices are visited from the highest id down. Each vertex gets the
    smallest color that is larger than every already colored neighbor it
    meets, neighbors being examined from the highest id down. The result is a
    heuristic and not necessarily an optimal coloring.
    """
    coloring: dict[VertexId, int] = {}
    for vertex_id in sorted(graph.vertices(), reverse=True):
        available_color = 0
        for neighbor_id in _neighbors_high_to_low(graph, vertex_id):
            neighbor_color = coloring.get(neighbor_id)
            if neighbor_color is not None and neighbor_color >= available_color:
                available_color = neighbor_color + 1
        coloring[vertex_id] = available_color
    return coloring


def welsh_powell_coloring(graph: Graph) -> dict[VertexId, int]:
    """Color vertices in the Welsh-Powell order.

    Vertices are ordered by degree, highest first, ties broken by the higher
    id. Each vertex starts at color 0, and the color is bumped by one every
    time a neighbor, examined from the highest id down, already holds the
    current color.
    """
    ordered = sorted(
        ((vertex_degree(graph, vertex_id), vertex_id) for vertex_id in graph.vertices()),
        reverse=True,
    )

    color_map: dict[VertexId, int] = {}
    for _, vertex_id in ordered:
        color = 0
        for neighbor_id in _neighbors_high_to_low(graph, vertex_id):
            if color_map.get(neighbor_id) == color:
                color += 1
        color_map[vertex_id] = color
    return color_map