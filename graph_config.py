"""
YAML configuration for building graphs.

A config names the representation to use, whether rep checks run after every
mutation, and the vertices/edges to load. See graphs/demo.yml.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List, Sequence
import logging

from graph import Graph, Label, check_weight, rep_checking_enabled, set_rep_checking
from graph_factory import GraphKind, empty_graph

logger = logging.getLogger("wdigraph.graph_config")


@dataclass(frozen=True)
class EdgeSpec:
    source: Label
    target: Label
    weight: int


@dataclass(frozen=True)
class GraphConfig:
    implementation: GraphKind = GraphKind.VERTICES
    check_invariants: bool = True
    vertices: Sequence[Label] = field(default_factory=tuple)
    edges: Sequence[EdgeSpec] = field(default_factory=tuple)


def parse_config(data: Dict[str, Any] | None) -> GraphConfig:
    """Validate a decoded YAML mapping and turn it into a GraphConfig."""
    data = data or {}
    if not isinstance(data, dict):
        raise ValueError("graph config must be a mapping")

    impl_name = str(data.get("implementation", GraphKind.VERTICES.value))
    try:
        implementation = GraphKind(impl_name)
    except ValueError:
        known = ", ".join(k.value for k in GraphKind)
        raise ValueError(f"unknown implementation '{impl_name}' (expected one of: {known})") from None

    edges: List[EdgeSpec] = []
    for i, raw in enumerate(data.get("edges") or []):
        if not isinstance(raw, dict):
            raise ValueError(f"edges[{i}] must be a mapping with source, target and weight")
        missing = [key for key in ("source", "target", "weight") if key not in raw]
        if missing:
            raise ValueError(f"edges[{i}] is missing {', '.join(missing)}")
        try:
            weight = check_weight(raw["weight"], allow_zero=True)
        except (TypeError, ValueError) as exc:
            raise ValueError(f"edges[{i}] has invalid weight {raw['weight']!r}: {exc}") from None
        edges.append(EdgeSpec(source=raw["source"], target=raw["target"], weight=weight))

    return GraphConfig(
        implementation=implementation,
        check_invariants=bool(data.get("check_invariants", True)),
        vertices=tuple(data.get("vertices") or ()),
        edges=tuple(edges),
    )


def load_config(path: Path) -> GraphConfig:
    import yaml  # type: ignore

    config = parse_config(yaml.safe_load(path.read_text()))
    logger.info(
        "config_loaded path=%s implementation=%s vertices=%d edges=%d",
        path,
        config.implementation.value,
        len(config.vertices),
        len(config.edges),
    )
    return config


def build_graph(config: GraphConfig, kind: GraphKind | str | None = None) -> Graph:
    """
    Build a graph from config: add listed vertices, then set edges in file order.

    kind overrides config.implementation. config.check_invariants decides
    whether rep checks run while the config is applied; the global switch is
    restored afterwards, so later mutations follow set_rep_checking().
    """
    previous = rep_checking_enabled()
    set_rep_checking(config.check_invariants)
    try:
        graph = empty_graph(kind if kind is not None else config.implementation)
        for vertex in config.vertices:
            graph.add(vertex)
        for edge in config.edges:
            graph.set(edge.source, edge.target, edge.weight)
    finally:
        set_rep_checking(previous)
    return graph
