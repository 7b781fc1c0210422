from collections import Counter

import pytest

from graaf.graph import DirectedGraph, UndirectedGraph
from graaf.traversal import breadth_first_traverse, depth_first_traverse

TREE_EDGES = [(0, 1), (0, 2), (2, 3), (2, 4)]


class EdgeRecorder:
    """Records traversed edges and the order in which they were seen."""

    def __init__(self):
        self.seen = Counter()
        self.order = {}

    def __call__(self, edge):
        self.seen[edge] += 1
        self.order[edge] = len(self.order)


def _populate(graph, vertex_count, edges):
    ids = [graph.add_vertex(10 * (i + 1)) for i in range(vertex_count)]
    for weight, (lhs, rhs) in enumerate(edges, start=1):
        graph.add_edge(ids[lhs], ids[rhs], weight * 100)
    return ids


def _edges(ids, pairs):
    return Counter({(ids[lhs], ids[rhs]): 1 for lhs, rhs in pairs})


@pytest.mark.parametrize("traverse", [depth_first_traverse, breadth_first_traverse])
@pytest.mark.parametrize(
    "graph_cls, vertex_count, edges, expected",
    [
        (DirectedGraph, 1, [], []),
        (UndirectedGraph, 1, [], []),
        (DirectedGraph, 2, [(0, 1)], [(0, 1)]),
        (UndirectedGraph, 2, [(0, 1)], [(0, 1)]),
        (DirectedGraph, 2, [(1, 0)], []),
        (DirectedGraph, 5, TREE_EDGES, TREE_EDGES),
        (UndirectedGraph, 5, TREE_EDGES, TREE_EDGES),
        (DirectedGraph, 5, [(0, 1), (0, 2), (2, 3), (4, 2)], [(0, 1), (0, 2), (2, 3)]),
    ],
)
def test_traversed_edges(traverse, graph_cls, vertex_count, edges, expected):
    graph = graph_cls()
    ids = _populate(graph, vertex_count, edges)
    recorder = EdgeRecorder()
    traverse(graph, ids[0], recorder)
    assert recorder.seen == _edges(ids, expected)


@pytest.mark.parametrize("traverse", [depth_first_traverse, breadth_first_traverse])
@pytest.mark.parametrize("graph_cls", [DirectedGraph, UndirectedGraph])
def test_immediate_termination(traverse, graph_cls):
    graph = graph_cls()
    ids = _populate(graph, 5, TREE_EDGES)
    recorder = EdgeRecorder()
    traverse(graph, ids[0], recorder, lambda vertex: True)
    assert recorder.seen == Counter()


@pytest.mark.parametrize("graph_cls", [DirectedGraph, UndirectedGraph])
def test_dfs_order_within_branch(graph_cls):
    graph = graph_cls()
    ids = _populate(graph, 5, TREE_EDGES)
    recorder = EdgeRecorder()
    depth_first_traverse(graph, ids[0], recorder)
    order = recorder.order
    assert order[(ids[2], ids[3])] > order[(ids[0], ids[2])]
    assert order[(ids[2], ids[4])] > order[(ids[0], ids[2])]


@pytest.mark.parametrize("graph_cls", [DirectedGraph, UndirectedGraph])
def test_dfs_termination_at_target(graph_cls):
    graph = graph_cls()
    ids = _populate(graph, 5, TREE_EDGES)
    target = ids[2]
    recorder = EdgeRecorder()
    depth_first_traverse(graph, ids[0], recorder, lambda v: v == target)
    assert recorder.seen in (_edges(ids, [(0, 1), (0, 2)]), _edges(ids, [(0, 2)]))


def test_dfs_long_chain_does_not_exhaust_recursion():
    graph = DirectedGraph()
    ids = _populate(graph, 5000, [(i, i + 1) for i in range(4999)])
    recorder = EdgeRecorder()
    depth_first_traverse(graph, ids[0], recorder)
    assert sum(recorder.seen.values()) == 4999
    assert recorder.order[(ids[-2], ids[-1])] == 4998


@pytest.mark.parametrize("graph_cls", [DirectedGraph, UndirectedGraph])
def test_bfs_level_order(graph_cls):
    graph = graph_cls()
    ids = _populate(graph, 5, TREE_EDGES)
    recorder = EdgeRecorder()
    breadth_first_traverse(graph, ids[0], recorder)
    order = recorder.order
    # Every edge out of the start vertex comes before any edge one level down.
    first_level = max(order[(ids[0], ids[1])], order[(ids[0], ids[2])])
    assert min(order[(ids[2], ids[3])], order[(ids[2], ids[4])]) > first_level


@pytest.mark.parametrize("graph_cls", [DirectedGraph, UndirectedGraph])
def test_bfs_termination_at_target(graph_cls):
    graph = graph_cls()
    ids = _populate(graph, 5, TREE_EDGES)
    target = ids[2]
    recorder = EdgeRecorder()
    breadth_first_traverse(graph, ids[0], recorder, lambda v: v == target)
    seen = recorder.seen
    # The edges below the target are never followed.
    assert (ids[2], ids[3]) not in seen
    assert (ids[2], ids[4]) not in seen
    assert seen[(ids[0], ids[2])] == 1


def test_bfs_follows_every_edge_into_an_unvisited_vertex():
    pairs = [(0, 1), (0, 2), (1, 3), (2, 3)]
    graph = DirectedGraph()
    ids = _populate(graph, 4, pairs)
    recorder = EdgeRecorder()
    breadth_first_traverse(graph, ids[0], recorder)
    assert recorder.seen == _edges(ids, pairs)


def test_traversals_default_to_exhaustive_search():
    graph = DirectedGraph()
    ids = _populate(graph, 5, TREE_EDGES)
    visited = []

    def record(vertex):
        visited.append(vertex)
        return False

    depth_first_traverse(graph, ids[0], search_termination_strategy=record)
    assert sorted(visited) == sorted(ids)

    visited.clear()
    breadth_first_traverse(graph, ids[0], search_termination_strategy=record)
    assert sorted(visited) == sorted(ids)