# graaf

A small graph library with no dependencies. It provides directed and
undirected graphs that hold arbitrary vertex and edge values. It also provides
a set of classic algorithms that work on those graphs.

## Installation

From a checkout of the project:

```
pip install .
```

## Building a graph

```python
from graaf.graph import DirectedGraph, UndirectedGraph, get_weight

graph = DirectedGraph()
a = graph.add_vertex("a")
b = graph.add_vertex("b")
graph.add_edge(a, b, 3)

graph.has_edge(a, b)          # True
graph.has_edge(b, a)          # False for a directed graph
get_weight(graph.edge(a, b))  # 3
graph.neighbors(a)            # {b}
graph.vertex_count()          # 2
graph.edge_count()            # 1
```

`Graph` is the common base class. Create a `DirectedGraph` or an
`UndirectedGraph` rather than a `Graph`; instantiating `Graph` directly
raises `TypeError`. `is_directed()` and `is_undirected()` tell the two kinds
apart, and the `GraphType` enum names them.

### Vertices

- When called without an id, `add_vertex(vertex)` gives the vertex the next
  free id from an internal counter, which starts at 0.
- `add_vertex(vertex, vertex_id)` uses the id you pass. It raises
  `ValueError` if that id is already taken.
- `vertex(vertex_id)` returns the stored value. It raises `ValueError` if the
  vertex does not exist.
- `remove_vertex(vertex_id)` removes the vertex and every edge that touches
  it.

### Edges

- `add_edge(lhs, rhs, edge)` requires both vertices to exist. Otherwise it
  raises `ValueError`. Adding an edge that already exists keeps the original
  value.
- `edge(lhs, rhs)` returns the edge value. It raises `ValueError` if there is
  no such edge.
- `remove_edge(lhs, rhs)` deletes an edge. It raises `KeyError` if a vertex
  involved has no outgoing edges at all.

In an `UndirectedGraph` an edge can be looked up from either end. Such an
edge is stored under its id pair with the smaller id first.

### Views

`vertices()` and `edges()` return read-only mappings. They are keyed by
vertex id and by `(lhs, rhs)` pair respectively. `neighbors(vertex_id)`
returns a fresh set.

### Weights

`get_weight(edge)` decides what an edge weighs:

- a number weighs itself;
- an object with a callable `get_weight` method weighs what that method
  returns;
- anything else weighs 1.

## Vertex properties

```python
from graaf.properties import vertex_degree, vertex_indegree, vertex_outdegree
```

In a directed graph:

- `vertex_outdegree` counts the outgoing edges of a vertex;
- `vertex_indegree` counts the incoming edges;
- `vertex_degree` is the sum of the two.

In an undirected graph, all three return the number of neighbors.

## Algorithms

| Module | Functions |
| --- | --- |
| `graaf.traversal` | `breadth_first_traverse`, `depth_first_traverse` |
| `graaf.shortest_path` | `a_star_search`, `dijkstra_shortest_paths`, `GraphPath` |
| `graaf.coloring` | `greedy_graph_coloring`, `welsh_powell_coloring` |
| `graaf.scc` | `kosarajus_strongly_connected_components`, `tarjans_strongly_connected_components` |

### Traversal

Both traversals take:

- a start vertex;
- an optional edge callback, called with each followed edge as a
  `(source, target)` tuple;
- an optional predicate that stops the search as soon as it returns true for
  a vertex.

```python
from graaf.traversal import breadth_first_traverse

followed = []
breadth_first_traverse(graph, a, followed.append)
```

### Shortest paths

Results are `GraphPath` dataclasses with `vertices` (a list of ids) and
`total_weight`. A negative edge weight raises `ValueError`.

```python
from graaf.shortest_path import a_star_search, dijkstra_shortest_paths

path = a_star_search(graph, a, b, lambda vertex_id: 0)
paths = dijkstra_shortest_paths(graph, a)
```

- `a_star_search` returns `None` when the target cannot be reached. The
  `total_weight` it reports is the target's f-score, meaning the path cost
  plus the heuristic's estimate at the target.
- `dijkstra_shortest_paths` returns a dict that maps every reachable vertex
  to its shortest path. Vertices that cannot be reached are absent.

### Coloring

Both functions return a dict mapping vertex id to an integer color.

- `greedy_graph_coloring` visits vertices from the highest id down. Each
  vertex gets a color one above the largest color already held by its
  neighbors.
- `welsh_powell_coloring` orders vertices by degree, highest first, and
  breaks ties by the higher id.

Both are heuristics and need not give an optimal coloring.

### Strongly connected components

Both functions return a list of components, each a list of vertex ids. They
accept only directed graphs and raise `TypeError` for an undirected one.

## What it does not do

The package keeps graphs in memory only. It has:

- no export to or import from file formats (such as Graphviz DOT);
- no command-line tool;
- no unweighted breadth-first shortest path, no Bellman-Ford and no cycle
  detection;
- no drawing or layout of graphs.

## Running the tests

```
pip install -e .[test]
pytest
```