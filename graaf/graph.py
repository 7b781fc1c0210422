"""Directed and undirected graphs with arbitrary vertex and edge payloads."""

from __future__ import annotations

import enum
import numbers
from collections.abc import Mapping
from types import MappingProxyType
from typing import Any, Generic, Optional, TypeVar

V = TypeVar("V")
E = TypeVar("E")

VertexId = int
EdgeId = tuple[int, int]


class GraphType(enum.Enum):
    """Whether the edges of a graph have a direction."""

    DIRECTED = "directed"
    UNDIRECTED = "undirected"


def get_weight(edge: Any) -> Any:
    """Return the weight of an edge.

    Numeric edges are their own weight, objects with a ``get_weight`` method
    report their weight through it, and any other edge has unit weight.
    """
    if isinstance(edge, numbers.Number):
        return edge
    weight_of = getattr(edge, "get_weight", None)
    if callable(weight_of):
        return weight_of()
    return 1


class Graph(Generic[V, E]):
    """A graph mapping integer vertex ids to vertices and id pairs to edges.

    Concrete graphs are :class:`DirectedGraph` and :class:`UndirectedGraph`.
    """

    graph_type: Optional[GraphType] = None

    def __init__(self) -> None:
        if self.graph_type is None:
            raise TypeError(
                "Graph has no direction; use DirectedGraph or UndirectedGraph"
            )
        self._vertices: dict[VertexId, V] = {}
        self._edges: dict[EdgeId, E] = {}
        self._adjacency: dict[VertexId, set[VertexId]] = {}
        self._next_id: VertexId = 0

    def _edge_key(self, lhs: VertexId, rhs: VertexId) -> EdgeId:
        if self.graph_type is GraphType.UNDIRECTED and rhs < lhs:
            return (rhs, lhs)
        return (lhs, rhs)

    def is_directed(self) -> bool:
        """True if the edges of this graph have a direction."""
        return self.graph_type is GraphType.DIRECTED

    def is_undirected(self) -> bool:
        """True if the edges of this graph have no direction."""
        return self.graph_type is GraphType.UNDIRECTED

    def vertex_count(self) -> int:
        """Number of vertices in the graph."""
        return len(self._vertices)

    def edge_count(self) -> int:
        """Number of edges in the graph."""
        return len(self._edges)

    def vertices(self) -> Mapping[VertexId, V]:
        """Read-only view of all vertices keyed by vertex id."""
        return MappingProxyType(self._vertices)

    def edges(self) -> Mapping[EdgeId, E]:
        """Read-only view of all edges keyed by their (lhs, rhs) id pair.

        Edges of an undirected graph are keyed with the smaller id first.
        """
        return MappingProxyType(self._edges)

    def has_vertex(self, vertex_id: VertexId) -> bool:
        """True if a vertex with this id exists."""
        return vertex_id in self._vertices

    def has_edge(self, vertex_id_lhs: VertexId, vertex_id_rhs: VertexId) -> bool:
        """True if an edge connects the two vertices."""
        return self._edge_key(vertex_id_lhs, vertex_id_rhs) in self._edges

    def vertex(self, vertex_id: VertexId) -> V:
        """Return the vertex with the given id; raise ValueError if absent."""
        try:
            return self._vertices[vertex_id]
        except KeyError:
            raise ValueError(
                f"Vertex with ID [{vertex_id}] not found in graph."
            ) from None

    def edge(self, vertex_id_lhs: VertexId, vertex_id_rhs: VertexId) -> E:
        """Return the edge between two vertices; raise ValueError if absent."""
        try:
            return self._edges[self._edge_key(vertex_id_lhs, vertex_id_rhs)]
        except KeyError:
            raise ValueError(
                f"No edge found between vertices [{vertex_id_lhs}] -> "
                f"[{vertex_id_rhs}]."
            ) from None

    def neighbors(self, vertex_id: VertexId) -> set[VertexId]:
        """Return a copy of the ids reachable over one edge from a vertex."""
        return set(self._adjacency.get(vertex_id, ()))

    def add_vertex(self, vertex: V, vertex_id: Optional[VertexId] = None) -> VertexId:
        """Add a vertex and return its id.

        Without an id the next free id is used; with an id that is already
        taken a ValueError is raised.
        """
        if vertex_id is None:
            while self.has_vertex(self._next_id):
                self._next_id += 1
            vertex_id = self._next_id
        elif self.has_vertex(vertex_id):
            raise ValueError(f"Vertex already exists at ID [{vertex_id}]")
        self._vertices[vertex_id] = vertex
        return vertex_id

    def remove_vertex(self, vertex_id: VertexId) -> None:
        """Remove a vertex together with every edge touching it."""
        for target in self._adjacency.pop(vertex_id, set()):
            self._edges.pop((vertex_id, target), None)
        self._vertices.pop(vertex_id, None)
        for source, neighbors in self._adjacency.items():
            neighbors.discard(vertex_id)
            self._edges.pop((source, vertex_id), None)

    def add_edge(
        self, vertex_id_lhs: VertexId, vertex_id_rhs: VertexId, edge: E
    ) -> None:
        """Connect two existing vertices; an existing edge is kept as it is."""
        if not self.has_vertex(vertex_id_lhs) or not self.has_vertex(vertex_id_rhs):
            raise ValueError(
                f"Vertices with ID [{vertex_id_lhs}] and [{vertex_id_rhs}] "
                "not found in graph."
            )
        self._adjacency.setdefault(vertex_id_lhs, set()).add(vertex_id_rhs)
        if self.is_undirected():
            self._adjacency.setdefault(vertex_id_rhs, set()).add(vertex_id_lhs)
        self._edges.setdefault(self._edge_key(vertex_id_lhs, vertex_id_rhs), edge)

    def remove_edge(self, vertex_id_lhs: VertexId, vertex_id_rhs: VertexId) -> None:
        """Remove the edge between two vertices.

        Raises KeyError if a vertex has no outgoing edges at all.
        """
        sources = [vertex_id_lhs]
        if self.is_undirected():
            sources.append(vertex_id_rhs)
        for source in sources:
            if source not in self._adjacency:
                raise KeyError(f"Vertex [{source}] has no edges.")
        self._adjacency[vertex_id_lhs].discard(vertex_id_rhs)
        if self.is_undirected():
            self._adjacency[vertex_id_rhs].discard(vertex_id_lhs)
        self._edges.pop(self._edge_key(vertex_id_lhs, vertex_id_rhs), None)


class DirectedGraph(Graph[V, E]):
    """A graph whose edges point from one vertex to another."""

    graph_type = GraphType.DIRECTED


class UndirectedGraph(Graph[V, E]):
    """A graph whose edges connect vertices in both directions."""

    graph_type = GraphType.UNDIRECTED