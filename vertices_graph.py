"""
Adjacency implementation of the Graph contract.

Each vertex owns a Vertex record holding two maps: outgoing (target -> weight)
and incoming (source -> weight). Every edge is therefore stored twice, once on
each endpoint, and both sides are always updated together by _link().
"""

from typing import Dict, List, Optional, Set
import logging

from graph import Graph, Label, check_label, check_weight

logger = logging.getLogger("wdigraph.vertices_graph")


class Vertex:
    """
    Mutable vertex record: a label plus its outgoing and incoming edge weights.

    Only VerticesGraph creates these. Getters hand out copies of the maps.
    """

    def __init__(self, label: Label) -> None:
        self._label = check_label(label)
        self._targets: Dict[Label, int] = {}
        self._sources: Dict[Label, int] = {}

    @property
    def label(self) -> Label:
        return self._label

    def targets(self) -> Dict[Label, int]:
        return dict(self._targets)  # defensive copy

    def sources(self) -> Dict[Label, int]:
        return dict(self._sources)  # defensive copy

    def set_target(self, target: Label, weight: int) -> int:
        """Add or update the outgoing edge to target; return the previous weight or 0."""
        check_weight(weight, allow_zero=False)
        previous = self._targets.get(target, 0)
        self._targets[target] = weight
        return previous

    def set_source(self, source: Label, weight: int) -> int:
        """Add or update the incoming edge from source; return the previous weight or 0."""
        check_weight(weight, allow_zero=False)
        previous = self._sources.get(source, 0)
        self._sources[source] = weight
        return previous

    def remove_target(self, target: Label) -> int:
        return self._targets.pop(target, 0)

    def remove_source(self, source: Label) -> int:
        return self._sources.pop(source, 0)

    def rep_violations(self) -> List[str]:
        problems: List[str] = []
        if self._label is None or self._label == "":
            problems.append(f"invalid vertex label {self._label!r}")
        for target, weight in self._targets.items():
            if weight <= 0:
                problems.append(f"{self._label!r} -> {target!r} has non-positive weight {weight}")
        for source, weight in self._sources.items():
            if weight <= 0:
                problems.append(f"{source!r} -> {self._label!r} has non-positive weight {weight}")
        return problems

    def __str__(self) -> str:
        edges = ", ".join(f"→{target}({weight})" for target, weight in self._targets.items())
        return f"{self._label}: [{edges}]"

    def __repr__(self) -> str:
        return f"Vertex({self._label!r})"


class VerticesGraph(Graph):
    """
    Directed, weighted graph backed by label -> Vertex records.

    Records are kept in insertion order; the dict key always equals the
    record's own label.
    """

    def __init__(self) -> None:
        self._vertices: Dict[Label, Vertex] = {}
        self._after_mutation()

    # --- Internal helpers ---------------------------------------------------

    def _find_vertex(self, label: Label) -> Optional[Vertex]:
        try:
            return self._vertices.get(label)
        except TypeError:
            # unhashable labels can never name a vertex
            return None

    def _find_or_create(self, label: Label) -> Vertex:
        vertex = self._vertices.get(label)
        if vertex is None:
            vertex = Vertex(label)
            self._vertices[label] = vertex
        return vertex

    @staticmethod
    def _link(source: Vertex, target: Vertex, weight: int) -> int:
        """
        Single update path for an edge: writes or clears both mirrored entries.

        Returns the previous weight as seen from the source's outgoing map.
        """
        if weight > 0:
            previous = source.set_target(target.label, weight)
            target.set_source(source.label, weight)
        else:
            previous = source.remove_target(target.label)
            target.remove_source(source.label)
        return previous

    # --- Graph interface -----------------------------------------------------

    def add(self, vertex: Label) -> bool:
        check_label(vertex)
        if self._find_vertex(vertex) is not None:
            return False
        self._vertices[vertex] = Vertex(vertex)
        logger.debug("vertex_added vertex=%r", vertex)
        self._after_mutation()
        return True

    def set(self, source: Label, target: Label, weight: int) -> int:
        check_label(source)
        check_label(target)
        check_weight(weight, allow_zero=True)

        source_vertex = self._find_or_create(source)
        target_vertex = self._find_or_create(target)
        previous = self._link(source_vertex, target_vertex, weight)

        if weight > 0:
            logger.debug(
                "edge_set source=%r target=%r weight=%d previous=%d", source, target, weight, previous
            )
        elif previous:
            logger.debug("edge_removed source=%r target=%r previous=%d", source, target, previous)

        self._after_mutation()
        return previous

    def remove(self, vertex: Label) -> bool:
        check_label(vertex)
        doomed = self._find_vertex(vertex)
        if doomed is None:
            return False

        dropped = len(doomed.targets()) + len(doomed.sources())
        if vertex in doomed.targets():
            dropped -= 1  # a self-loop sits in both maps
        for other in self._vertices.values():
            other.remove_target(vertex)
            other.remove_source(vertex)
        del self._vertices[vertex]
        logger.debug("vertex_removed vertex=%r edges_dropped=%d", vertex, dropped)

        self._after_mutation()
        return True

    def vertices(self) -> Set[Label]:
        return set(self._vertices)

    def sources(self, target: Label) -> Dict[Label, int]:
        vertex = self._find_vertex(target)
        return vertex.sources() if vertex is not None else {}

    def targets(self, source: Label) -> Dict[Label, int]:
        vertex = self._find_vertex(source)
        return vertex.targets() if vertex is not None else {}

    def __str__(self) -> str:
        """Shared summary followed by one line per vertex record, in insertion order."""
        records = "".join(f"  {vertex}\n" for vertex in self._vertices.values())
        return super().__str__() + "Records:\n" + records

    # --- Representation checks ----------------------------------------------

    def rep_violations(self) -> List[str]:
        problems: List[str] = []
        for label, vertex in self._vertices.items():
            if vertex.label != label:
                problems.append(f"record for {label!r} is labelled {vertex.label!r}")
            problems.extend(vertex.rep_violations())

            for target, weight in vertex.targets().items():
                mirror = self._vertices.get(target)
                if mirror is None:
                    problems.append(f"{label!r} -> {target!r} points at a missing vertex")
                elif mirror.sources().get(label) != weight:
                    problems.append(f"{label!r} -> {target!r} is not mirrored on {target!r}")
            for source, weight in vertex.sources().items():
                mirror = self._vertices.get(source)
                if mirror is None:
                    problems.append(f"{source!r} -> {label!r} comes from a missing vertex")
                elif mirror.targets().get(label) != weight:
                    problems.append(f"{source!r} -> {label!r} is not mirrored on {source!r}")
        return problems
