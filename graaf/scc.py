"""Strongly connected components of directed graphs."""

from __future__ import annotations

from collections.abc import Iterator

from graaf.graph import Graph, VertexId

Sccs = list[list[VertexId]]


def _require_directed(graph: Graph) -> None:
    if not graph.is_directed():
        raise TypeError("Strongly connected components need a directed graph")


def _transposed_adjacency(graph: Graph) -> dict[VertexId, set[VertexId]]:
    """Map each vertex to the vertices that have an edge pointing at it."""
    transposed: dict[VertexId, set[VertexId]] = {v: set() for v in graph.vertices()}
    for source, target in graph.edges():
        transposed.setdefault(target, set()).add(source)
    return transposed


def _finish_order(graph: Graph) -> list[VertexId]:
    """Vertices in the order their depth-first visits finish."""
    seen: set[VertexId] = set()
    order: list[VertexId] = []
    for root in graph.vertices():
        if root in seen:
            continue
        seen.add(root)
        stack: list[tuple[VertexId, Iterator[VertexId]]] = [
            (root, iter(graph.neighbors(root)))
        ]
        while stack:
            current, pending = stack[-1]
            for neighbor in pending:
                if neighbor not in seen:
                    seen.add(neighbor)
                    stack.append((neighbor, iter(graph.neighbors(neighbor))))
                    break
            else:
                stack.pop()
                order.append(current)
    return order


def kosarajus_strongly_connected_components(graph: Graph) -> Sccs:
    """Find the strongly connected components with Kosaraju's algorithm.

    Returns a list of components, each a list of vertex ids. Raises
    TypeError for an undirected graph.
    """
    _require_directed(graph)
    if not graph.vertices():
        return []

    order = _finish_order(graph)
    transposed = _transposed_adjacency(graph)

    seen: set[VertexId] = set()
    sccs: Sccs = []
    for root in reversed(order):
        if root in seen:
            continue
        seen.add(root)
        component: list[VertexId] = []
        to_visit = [root]
        while to_visit:
            current = to_visit.pop()
            component.append(current)
            for neighbor in transposed.get(current, ()):
                if neighbor not in seen:
                    seen.add(neighbor)
                    to_visit.append(neighbor)
        sccs.append(component)
    return sccs


def tarjans_strongly_connected_components(graph: Graph) -> Sccs:
    """Find the strongly connected components with Tarjan's algorithm.

    Returns a list of components, each a list of vertex ids. Raises
    TypeError for an undirected graph.
    """
    _require_directed(graph)

    sccs: Sccs = []
    indices: dict[VertexId, int] = {}
    low_links: dict[VertexId, int] = {}
    on_stack: set[VertexId] = set()
    stack: list[VertexId] = []

    def enter(vertex: VertexId) -> tuple[VertexId, Iterator[VertexId]]:
        indices[vertex] = low_links[vertex] = len(indices)
        stack.append(vertex)
        on_stack.add(vertex)
        return vertex, iter(graph.neighbors(vertex))

    for root in graph.vertices():
        if root in indices:
            continue
        work = [enter(root)]
        while work:
            vertex, pending = work[-1]
            for neighbor in pending:
                if neighbor not in indices:
                    work.append(enter(neighbor))
                    break
                if neighbor in on_stack:
                    low_links[vertex] = min(low_links[vertex], indices[neighbor])
            else:
                work.pop()
                if low_links[vertex] == indices[vertex]:
                    component: list[VertexId] = []
                    while True:
                        top = stack.pop()
                        on_stack.discard(top)
                        component.append(top)
                        if top == vertex:
                            break
                    sccs.append(component)
                if work:
                    parent = work[-1][0]
                    low_links[parent] = min(low_links[parent], low_links[vertex])
    return sccs