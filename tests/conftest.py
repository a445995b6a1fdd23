"""Shared pytest fixtures for wdigraph tests."""

from __future__ import annotations

from typing import Callable, Iterator

import pytest

from graph import Graph, set_rep_checking
from graph_factory import GraphKind, empty_graph


@pytest.fixture(autouse=True)
def _rep_checking() -> Iterator[None]:
    """Run every test with post-mutation rep checks on, and restore afterwards."""
    set_rep_checking(True)
    yield
    set_rep_checking(True)


@pytest.fixture(params=list(GraphKind), ids=lambda kind: kind.value)
def empty_instance(request: pytest.FixtureRequest) -> Callable[[], Graph]:
    """
    Factory for new empty graphs of one representation.

    Contract tests take this fixture and never name a concrete class, so the
    same suite runs once per representation.
    """
    kind: GraphKind = request.param
    return lambda: empty_graph(kind)
