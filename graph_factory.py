"""
Construction helpers for the two Graph representations.

Callers pick a representation once, then talk to the result only through
the Graph contract.
"""

from enum import Enum

from edges_graph import EdgesGraph
from graph import Graph
from vertices_graph import VerticesGraph


class GraphKind(Enum):
    """
    Available Graph representations.

    EDGES: vertex set plus a flat list of immutable edges.
    VERTICES: per-vertex records with mirrored outgoing/incoming maps.
    """

    EDGES = "edges"
    VERTICES = "vertices"


def empty_graph(kind: GraphKind | str = GraphKind.VERTICES) -> Graph:
    """Return a new empty graph of the requested representation."""
    kind = GraphKind(kind)
    if kind is GraphKind.EDGES:
        return EdgesGraph()
    return VerticesGraph()


def copy_graph(graph: Graph, kind: GraphKind | str | None = None) -> Graph:
    """
    Replay graph into a fresh instance, optionally switching representation.

    Without kind, the copy uses the same representation as graph when it is
    one of the known kinds.
    """
    if kind is None:
        kind = GraphKind.EDGES if isinstance(graph, EdgesGraph) else GraphKind.VERTICES
    copy = empty_graph(kind)
    for vertex in graph.vertices():
        copy.add(vertex)
    for source in graph.vertices():
        for target, weight in graph.targets(source).items():
            copy.set(source, target, weight)
    return copy
