"""Breadth-first and depth-first traversal of graphs."""

from __future__ import annotations

from collections import deque
from collections.abc import Callable, Iterator
from typing import Optional

from graaf.graph import EdgeId, Graph, VertexId

EdgeCallback = Callable[[EdgeId], object]
TerminationStrategy = Callable[[VertexId], bool]


def breadth_first_traverse(
    graph: Graph,
    start_vertex: VertexId,
    edge_callback: Optional[EdgeCallback] = None,
    search_termination_strategy: Optional[TerminationStrategy] = None,
) -> None:
    """Visit every vertex reachable from ``start_vertex`` breadth first.

    ``edge_callback`` is called with the (source, target) pair of every edge
    followed. Traversal stops as soon as ``search_termination_strategy``
    returns true for a vertex taken from the queue.
    """
    seen: set[VertexId] = set()
    to_explore: deque[VertexId] = deque([start_vertex])

    while to_explore:
        current = to_explore.popleft()
        if search_termination_strategy is not None and search_termination_strategy(
            current
        ):
            return
        seen.add(current)
        for neighbor in graph.neighbors(current):
            if neighbor not in seen:
                if edge_callback is not None:
                    edge_callback((current, neighbor))
                to_explore.append(neighbor)


def depth_first_traverse(
    graph: Graph,
    start_vertex: VertexId,
    edge_callback: Optional[EdgeCallback] = None,
    search_termination_strategy: Optional[TerminationStrategy] = None,
) -> None:
    """Visit every vertex reachable from ``start_vertex`` depth first.

    ``edge_callback`` is called with the (source, target) pair of every edge
    followed. Traversal stops as soon as ``search_termination_strategy``
    returns true for a vertex being entered.
    """

    def should_stop(vertex: VertexId) -> bool:
        return search_termination_strategy is not None and bool(
            search_termination_strategy(vertex)
        )

    seen: set[VertexId] = {start_vertex}
    if should_stop(start_vertex):
        return

    stack: list[tuple[VertexId, Iterator[VertexId]]] = [
        (start_vertex, iter(graph.neighbors(start_vertex)))
    ]
    while stack:
        current, pending = stack[-1]
        for neighbor in pending:
            if neighbor in seen:
                continue
            if edge_callback is not None:
                edge_callback((current, neighbor))
            seen.add(neighbor)
            if should_stop(neighbor):
                return
            stack.append((neighbor, iter(graph.neighbors(neighbor))))
            break
        else:
            stack.pop()