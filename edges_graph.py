"""
Edge-list implementation of the Graph contract.

Keeps a set of vertex labels plus a flat list of immutable Edge records.
Queries scan the whole edge list, so sources()/targets() cost O(|E|).
"""

from dataclasses import dataclass
from typing import Dict, List, Optional, Set, Tuple
import logging

from graph import Graph, Label, check_label, check_weight

logger = logging.getLogger("wdigraph.edges_graph")


@dataclass(frozen=True)
class Edge:
    """
    Immutable directed edge source -> target with a positive weight.

    Only EdgesGraph creates these; a weight change means replacing the record.
    """

    source: Label
    target: Label
    weight: int

    def __post_init__(self) -> None:
        check_label(self.source)
        check_label(self.target)
        check_weight(self.weight, allow_zero=False)

    def connects(self, source: Label, target: Label) -> bool:
        """True if this edge goes from source to target."""
        return self.source == source and self.target == target

    def __str__(self) -> str:
        return f"{self.source} → {self.target} ({self.weight})"


class EdgesGraph(Graph):
    """
    Directed, weighted graph backed by a vertex set and a list of Edge records.
    """

    def __init__(self) -> None:
        self._vertices: Set[Label] = set()
        self._edges: List[Edge] = []
        self._after_mutation()

    # --- Internal helpers ---------------------------------------------------

    def _find_edge(self, source: Label, target: Label) -> Optional[int]:
        for index, edge in enumerate(self._edges):
            if edge.connects(source, target):
                return index
        return None

    # --- Graph interface -----------------------------------------------------

    def add(self, vertex: Label) -> bool:
        check_label(vertex)
        if vertex in self._vertices:
            return False
        self._vertices.add(vertex)
        logger.debug("vertex_added vertex=%r", vertex)
        self._after_mutation()
        return True

    def set(self, source: Label, target: Label, weight: int) -> int:
        check_label(source)
        check_label(target)
        check_weight(weight, allow_zero=True)
        # Build the replacement first so a bad record fails before any mutation.
        replacement = Edge(source, target, weight) if weight > 0 else None

        self._vertices.add(source)
        self._vertices.add(target)

        previous = 0
        index = self._find_edge(source, target)
        if index is not None:
            previous = self._edges.pop(index).weight
        if replacement is not None:
            self._edges.append(replacement)
            logger.debug(
                "edge_set source=%r target=%r weight=%d previous=%d", source, target, weight, previous
            )
        elif previous:
            logger.debug("edge_removed source=%r target=%r previous=%d", source, target, previous)

        self._after_mutation()
        return previous

    def remove(self, vertex: Label) -> bool:
        check_label(vertex)
        if vertex not in self._vertices:
            return False

        self._vertices.remove(vertex)
        kept = [e for e in self._edges if e.source != vertex and e.target != vertex]
        dropped = len(self._edges) - len(kept)
        self._edges = kept
        logger.debug("vertex_removed vertex=%r edges_dropped=%d", vertex, dropped)

        self._after_mutation()
        return True

    def vertices(self) -> Set[Label]:
        return set(self._vertices)

    def sources(self, target: Label) -> Dict[Label, int]:
        return {e.source: e.weight for e in self._edges if e.target == target}

    def targets(self, source: Label) -> Dict[Label, int]:
        return {e.target: e.weight for e in self._edges if e.source == source}

    # --- Representation checks ----------------------------------------------

    def rep_violations(self) -> List[str]:
        problems: List[str] = []
        for vertex in self._vertices:
            if vertex is None or vertex == "":
                problems.append(f"invalid vertex label {vertex!r}")

        seen: Set[Tuple[Label, Label]] = set()
        for edge in self._edges:
            if edge.source not in self._vertices:
                problems.append(f"edge {edge} has unknown source {edge.source!r}")
            if edge.target not in self._vertices:
                problems.append(f"edge {edge} has unknown target {edge.target!r}")
            if edge.weight <= 0:
                problems.append(f"edge {edge} has non-positive weight")
            pair = (edge.source, edge.target)
            if pair in seen:
                problems.append(f"duplicate edge {edge.source!r} -> {edge.target!r}")
            seen.add(pair)
        return problems
