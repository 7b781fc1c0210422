"""Weighted shortest paths: A* search and Dijkstra's algorithm."""

from __future__ import annotations

import heapq
import itertools
from collections.abc import Callable
from dataclasses import dataclass, field
from typing import Any, Optional

from graaf.graph import Graph, VertexId, get_weight

Heuristic = Callable[[VertexId], Any]


@dataclass
class GraphPath:
    """A path through a graph: the vertices in order and the total weight."""

    vertices: list[VertexId] = field(default_factory=list)
    total_weight: Any = 0


def _format_weight(weight: Any) -> str:
    if isinstance(weight, float) and weight.is_integer():
        return str(int(weight))
    return str(weight)


def _negative_weight_error(weight: Any, lhs: VertexId, rhs: VertexId) -> ValueError:
    return ValueError(
        f"Negative edge weight [{_format_weight(weight)}] between vertices "
        f"[{lhs}] -> [{rhs}]."
    )


def _checked_weight(graph: Graph, lhs: VertexId, rhs: VertexId) -> Any:
    weight = get_weight(graph.edge(lhs, rhs))
    if weight < 0:
        raise _negative_weight_error(weight, lhs, rhs)
    return weight


def _reconstruct_path(
    start_vertex: VertexId,
    end_vertex: VertexId,
    vertex_info: dict[VertexId, tuple[Any, VertexId]],
) -> Optional[GraphPath]:
    """Follow predecessor links back from ``end_vertex`` to ``start_vertex``."""
    if end_vertex not in vertex_info:
        return None
    vertices = [end_vertex]
    current = end_vertex
    while current != start_vertex:
        current = vertex_info[current][1]
        vertices.append(current)
    vertices.reverse()
    return GraphPath(vertices, vertex_info[end_vertex][0])


def a_star_search(
    graph: Graph,
    start_vertex: VertexId,
    target_vertex: VertexId,
    heuristic: Heuristic,
) -> Optional[GraphPath]:
    """Find a path from ``start_vertex`` to ``target_vertex`` with A* search.

    ``heuristic`` estimates the remaining cost from a vertex to the target.
    The returned path's ``total_weight`` is the f-score of the target, that is
    the path cost plus the heuristic's estimate at the target. Returns None
    when the target cannot be reached; raises ValueError on a negative edge
    weight.
    """
    tie_breaker = itertools.count()
    g_score: dict[VertexId, Any] = {start_vertex: 0}
    # vertex id -> (f-score, predecessor on the best known path)
    vertex_info: dict[VertexId, tuple[Any, VertexId]] = {
        start_vertex: (heuristic(start_vertex), start_vertex)
    }
    open_set: list[tuple[Any, int, VertexId]] = [
        (vertex_info[start_vertex][0], next(tie_breaker), start_vertex)
    ]

    while open_set:
        _, _, current = heapq.heappop(open_set)
        if current == target_vertex:
            return _reconstruct_path(start_vertex, target_vertex, vertex_info)

        for neighbor in graph.neighbors(current):
            edge_weight = _checked_weight(graph, current, neighbor)
            tentative_g_score = g_score[current] + edge_weight
            if neighbor not in vertex_info or tentative_g_score < g_score[neighbor]:
                g_score[neighbor] = tentative_g_score
                f_score = tentative_g_score + heuristic(neighbor)
                vertex_info[neighbor] = (f_score, current)
                heapq.heappush(open_set, (f_score, next(tie_breaker), neighbor))

    return None


def dijkstra_shortest_paths(
    graph: Graph, source_vertex: VertexId
) -> dict[VertexId, GraphPath]:
    """Shortest paths from ``source_vertex`` to every reachable vertex.

    Vertices that cannot be reached are absent from the result. Raises
    ValueError on a negative edge weight.
    """
    tie_breaker = itertools.count()
    shortest_paths: dict[VertexId, GraphPath] = {
        source_vertex: GraphPath([source_vertex], 0)
    }
    to_explore: list[tuple[Any, int, VertexId]] = [
        (0, next(tie_breaker), source_vertex)
    ]

    while to_explore:
        distance_so_far, _, current = heapq.heappop(to_explore)
        if distance_so_far > shortest_paths[current].total_weight:
            continue

        for neighbor in graph.neighbors(current):
            edge_weight = _checked_weight(graph, current, neighbor)
            distance = distance_so_far + edge_weight
            known = shortest_paths.get(neighbor)
            if known is None or distance < known.total_weight:
                shortest_paths[neighbor] = GraphPath(
                    [*shortest_paths[current].vertices, neighbor], distance
                )
                heapq.heappush(to_explore, (distance, next(tie_breaker), neighbor))

    return shortest_paths