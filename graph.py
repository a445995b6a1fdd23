"""
Directed, weighted graph contract for wdigraph.

Vertices are hashable labels (usually non-empty strings).
Edges are directed: source -> target with a strictly positive int weight.
Passing weight 0 to set() means "no edge"; zero is never stored.
"""

from abc import ABC, abstractmethod
from typing import Any, Dict, Hashable, List, Set

Label = Hashable


class RepInvariantError(AssertionError):
    """Internal state of a graph no longer satisfies its representation invariant."""


# Global switch for post-mutation rep checks; off under `python -O`.
REP_CHECKING: bool = __debug__


def set_rep_checking(enabled: bool) -> None:
    """Enable or disable rep checks after every mutation, for all graphs."""
    global REP_CHECKING
    REP_CHECKING = enabled


def rep_checking_enabled() -> bool:
    return REP_CHECKING


def check_label(label: Any) -> Label:
    """
    Validate a vertex label and return it unchanged.

    Raises:
        ValueError: label is None or an empty string.
        TypeError: label is not hashable.
    """
    if label is None:
        raise ValueError("vertex label cannot be None")
    if isinstance(label, str) and not label:
        raise ValueError("vertex label cannot be empty")
    hash(label)
    return label


def check_weight(weight: Any, allow_zero: bool) -> int:
    """
    Validate an edge weight and return it unchanged.

    allow_zero is True only for the top-level set() call, where 0 is a
    delete signal rather than a stored weight.
    """
    if isinstance(weight, bool) or not isinstance(weight, int):
        raise TypeError(f"weight must be an int, got {type(weight).__name__}")
    if weight < 0:
        raise ValueError(f"weight must be non-negative, got {weight}")
    if weight == 0 and not allow_zero:
        raise ValueError("weight must be positive")
    return weight


class Graph(ABC):
    """
    Mutable directed, weighted graph over hashable vertex labels.

    Every accessor returns a fresh container; callers may mutate results
    freely without affecting the graph.
    """

    @abstractmethod
    def add(self, vertex: Label) -> bool:
        """
        Add an isolated vertex if it is not already present.

        Returns: True if the vertex was added, False if it already existed.
        """
        raise NotImplementedError

    @abstractmethod
    def set(self, source: Label, target: Label, weight: int) -> int:
        """
        Add, update or remove the edge source -> target.

        A positive weight inserts or overwrites the edge, adding missing
        endpoints. Weight 0 removes the edge if present; vertices are kept.

        Returns: the previous weight of the edge, or 0 if there was none.
        """
        raise NotImplementedError

    @abstractmethod
    def remove(self, vertex: Label) -> bool:
        """
        Remove a vertex together with every edge into or out of it.

        Returns: True if the vertex existed, False otherwise.
        """
        raise NotImplementedError

    @abstractmethod
    def vertices(self) -> Set[Label]:
        """Return a snapshot of all vertex labels."""
        raise NotImplementedError

    @abstractmethod
    def sources(self, target: Label) -> Dict[Label, int]:
        """
        Incoming neighbours of target and their edge weights.

        Returns: dict[source_label, weight]; empty when target is unknown.
        """
        raise NotImplementedError

    @abstractmethod
    def targets(self, source: Label) -> Dict[Label, int]:
        """
        Outgoing neighbours of source and their edge weights.

        Returns: dict[target_label, weight]; empty when source is unknown.
        """
        raise NotImplementedError

    # --- Representation checks ----------------------------------------------

    @abstractmethod
    def rep_violations(self) -> List[str]:
        """
        Describe every way the current internal state breaks the rep invariant.

        Pure: reads state only. An empty list means the invariant holds.
        """
        raise NotImplementedError

    def check_rep(self) -> None:
        violations = self.rep_violations()
        if violations:
            raise RepInvariantError(
                f"{type(self).__name__} rep invariant violated: " + "; ".join(violations)
            )

    def _after_mutation(self) -> None:
        if REP_CHECKING:
            self.check_rep()

    def __str__(self) -> str:
        from graph_render import describe

        return describe(self)
