"""
Diagnostic views over any Graph.

Only the Graph contract is used, so both representations render the same way.
Output formats are for humans and carry no compatibility guarantee.
"""

from typing import Hashable, List, Sequence, Tuple

import numpy as np

from graph import Graph, Label


def _ordered(labels) -> List[Label]:
    return sorted(labels, key=str)


def edge_list(graph: Graph) -> List[Tuple[Label, Label, int]]:
    """All edges as (source, target, weight), sorted by source then target."""
    edges: List[Tuple[Label, Label, int]] = []
    for source in _ordered(graph.vertices()):
        targets = graph.targets(source)
        for target in _ordered(targets):
            edges.append((source, target, targets[target]))
    return edges


def describe(graph: Graph) -> str:
    """
    Multi-line summary: counts, vertex labels, then one line per edge.

    Example:
        Graph with 2 vertices and 1 edges:
        Vertices: [A, B]
        Edges:
          A → B (5)
    """
    vertices = _ordered(graph.vertices())
    edges = edge_list(graph)
    lines = [
        f"Graph with {len(vertices)} vertices and {len(edges)} edges:",
        "Vertices: [" + ", ".join(str(v) for v in vertices) + "]",
        "Edges:",
    ]
    lines.extend(f"  {source} → {target} ({weight})" for source, target, weight in edges)
    return "\n".join(lines) + "\n"


def weight_matrix(graph: Graph, order: Sequence[Hashable] | None = None) -> np.ndarray:
    """
    Dense weight matrix W with W[i, j] = weight(order[i] -> order[j]), 0 if absent.

    Args:
        graph: graph to read.
        order: row/column labels; defaults to the sorted vertex labels. Labels
            not in the graph give all-zero rows and columns.
    """
    labels = list(order) if order is not None else _ordered(graph.vertices())
    index = {label: i for i, label in enumerate(labels)}
    matrix = np.zeros((len(labels), len(labels)), dtype=np.int64)
    for source in labels:
        for target, weight in graph.targets(source).items():
            if target in index:
                matrix[index[source], index[target]] = weight
    return matrix
