"""
Contract tests for the Graph interface.

Run once per representation through the empty_instance fixture.

Partitions:
    add: new vertex / existing vertex; empty graph / non-empty graph
    set: weight 0 / positive; edge exists / absent; endpoints exist / absent;
         self-loop / distinct endpoints
    remove: vertex exists / absent; no edges, incoming only, outgoing only, both
    vertices: empty / one / many
    sources, targets: unknown vertex, no edges, one edge, many edges
"""

import pytest


def test_initial_vertices_empty(empty_instance):
    assert empty_instance().vertices() == set()


# --- add -------------------------------------------------------------------


def test_add_single_vertex(empty_instance):
    g = empty_instance()
    assert g.add("A") is True
    assert g.vertices() == {"A"}


def test_add_duplicate_vertex_returns_false(empty_instance):
    g = empty_instance()
    g.add("A")
    assert g.add("A") is False
    assert len(g.vertices()) == 1


def test_add_existing_vertex_keeps_its_edges(empty_instance):
    g = empty_instance()
    g.set("A", "B", 4)
    assert g.add("A") is False
    assert g.targets("A") == {"B": 4}


def test_add_multiple_vertices(empty_instance):
    g = empty_instance()
    assert all(g.add(v) for v in ("A", "B", "C"))
    assert g.vertices() == {"A", "B", "C"}


def test_add_new_vertex_has_no_edges(empty_instance):
    g = empty_instance()
    g.add("A")
    assert g.sources("A") == {}
    assert g.targets("A") == {}


# --- set -------------------------------------------------------------------


def test_set_new_edge_creates_vertices(empty_instance):
    g = empty_instance()
    assert g.set("A", "B", 5) == 0
    assert g.vertices() == {"A", "B"}
    assert g.targets("A") == {"B": 5}
    assert g.sources("B") == {"A": 5}


def test_set_between_existing_vertices(empty_instance):
    g = empty_instance()
    g.add("A")
    g.add("B")
    assert g.set("A", "B", 2) == 0
    assert g.vertices() == {"A", "B"}


def test_set_update_returns_previous_weight(empty_instance):
    g = empty_instance()
    g.set("A", "B", 5)
    assert g.set("A", "B", 10) == 5
    assert g.targets("A")["B"] == 10
    assert g.sources("B")["A"] == 10


def test_set_zero_removes_edge_but_keeps_vertices(empty_instance):
    g = empty_instance()
    g.set("A", "B", 5)
    assert g.set("A", "B", 0) == 5
    assert "B" not in g.targets("A")
    assert "A" not in g.sources("B")
    assert g.vertices() == {"A", "B"}


def test_set_zero_on_absent_edge_returns_zero(empty_instance):
    g = empty_instance()
    g.add("A")
    g.add("B")
    assert g.set("A", "B", 0) == 0
    assert g.targets("A") == {}


def test_set_zero_on_missing_vertices_adds_them(empty_instance):
    """Both representations register the endpoints even when no edge is stored."""
    g = empty_instance()
    assert g.set("A", "B", 0) == 0
    assert g.vertices() == {"A", "B"}
    assert g.targets("A") == {}


def test_set_is_directed(empty_instance):
    g = empty_instance()
    g.set("A", "B", 1)
    g.set("B", "A", 2)
    assert g.targets("A") == {"B": 1}
    assert g.targets("B") == {"A": 2}
    g.set("A", "B", 0)
    assert g.targets("B") == {"A": 2}


def test_set_self_loop(empty_instance):
    g = empty_instance()
    assert g.set("A", "A", 3) == 0
    assert g.vertices() == {"A"}
    assert g.targets("A") == {"A": 3}
    assert g.sources("A") == {"A": 3}


def test_set_self_loop_removed_with_zero(empty_instance):
    g = empty_instance()
    g.set("A", "A", 3)
    assert g.set("A", "A", 0) == 3
    assert g.targets("A") == {}
    assert g.sources("A") == {}
    assert g.vertices() == {"A"}


def test_set_multiple_edges_from_same_source(empty_instance):
    g = empty_instance()
    g.set("A", "B", 1)
    g.set("A", "C", 2)
    g.set("A", "D", 3)
    assert g.targets("A") == {"B": 1, "C": 2, "D": 3}


def test_set_multiple_edges_to_same_target(empty_instance):
    g = empty_instance()
    g.set("A", "D", 1)
    g.set("B", "D", 2)
    g.set("C", "D", 3)
    assert g.sources("D") == {"A": 1, "B": 2, "C": 3}


@pytest.mark.parametrize("weight", [-1, -100])
def test_set_negative_weight_rejected(empty_instance, weight):
    g = empty_instance()
    with pytest.raises(ValueError):
        g.set("A", "B", weight)
    assert g.vertices() == set()


@pytest.mark.parametrize("weight", [1.5, "3", None, True])
def test_set_non_int_weight_rejected(empty_instance, weight):
    g = empty_instance()
    with pytest.raises(TypeError):
        g.set("A", "B", weight)
    assert g.vertices() == set()


@pytest.mark.parametrize("label", [None, ""])
def test_set_invalid_label_leaves_graph_unchanged(empty_instance, label):
    g = empty_instance()
    g.set("A", "B", 1)
    with pytest.raises(ValueError):
        g.set("A", label, 2)
    with pytest.raises(ValueError):
        g.set(label, "B", 2)
    assert g.vertices() == {"A", "B"}
    assert g.targets("A") == {"B": 1}


@pytest.mark.parametrize("label", [None, ""])
def test_add_and_remove_invalid_label_rejected(empty_instance, label):
    g = empty_instance()
    with pytest.raises(ValueError):
        g.add(label)
    with pytest.raises(ValueError):
        g.remove(label)
    assert g.vertices() == set()


def test_unhashable_label_rejected(empty_instance):
    g = empty_instance()
    with pytest.raises(TypeError):
        g.add(["A"])
    assert g.vertices() == set()


def test_non_string_labels(empty_instance):
    g = empty_instance()
    g.set(1, 2, 7)
    g.set((0, 0), 1, 4)
    assert g.vertices() == {1, 2, (0, 0)}
    assert g.sources(1) == {(0, 0): 4}


# --- remove ----------------------------------------------------------------


def test_remove_existing_vertex(empty_instance):
    g = empty_instance()
    g.add("A")
    assert g.remove("A") is True
    assert g.vertices() == set()


def test_remove_absent_vertex_returns_false(empty_instance):
    g = empty_instance()
    g.add("B")
    assert g.remove("A") is False
    assert g.vertices() == {"B"}


def test_remove_vertex_with_outgoing_edges(empty_instance):
    g = empty_instance()
    g.set("A", "B", 1)
    g.set("A", "C", 2)
    assert g.remove("A") is True
    assert g.vertices() == {"B", "C"}
    assert g.sources("B") == {}
    assert g.sources("C") == {}


def test_remove_vertex_with_incoming_edges(empty_instance):
    g = empty_instance()
    g.set("A", "C", 1)
    g.set("B", "C", 2)
    assert g.remove("C") is True
    assert g.targets("A") == {}
    assert g.targets("B") == {}


def test_remove_vertex_with_incoming_and_outgoing_edges(empty_instance):
    g = empty_instance()
    g.set("A", "B", 1)
    g.set("B", "C", 2)
    g.set("D", "B", 3)
    g.set("A", "C", 4)
    assert g.remove("B") is True
    assert g.vertices() == {"A", "C", "D"}
    assert g.targets("A") == {"C": 4}
    assert g.sources("C") == {"A": 4}
    assert g.targets("D") == {}


def test_remove_cascades_edges(empty_instance):
    g = empty_instance()
    g.set("A", "B", 1)
    g.set("C", "A", 2)
    assert g.remove("A") is True
    assert g.targets("C") == {}
    assert g.sources("B") == {}
    assert g.vertices() == {"B", "C"}


def test_remove_vertex_with_self_loop(empty_instance):
    g = empty_instance()
    g.set("A", "A", 3)
    g.set("A", "B", 1)
    assert g.remove("A") is True
    assert g.vertices() == {"B"}
    assert g.sources("B") == {}


def test_removed_vertex_can_be_added_back_without_edges(empty_instance):
    g = empty_instance()
    g.set("A", "B", 1)
    g.remove("A")
    assert g.add("A") is True
    assert g.targets("A") == {}
    assert g.sources("B") == {}


# --- queries ---------------------------------------------------------------


def test_sources_and_targets_of_unknown_vertex_are_empty(empty_instance):
    g = empty_instance()
    g.set("A", "B", 1)
    assert g.sources("Z") == {}
    assert g.targets("Z") == {}


def test_sources_and_targets_accept_invalid_labels_silently(empty_instance):
    g = empty_instance()
    g.set("A", "B", 1)
    assert g.sources("") == {}
    assert g.targets(None) == {}
    assert g.sources(["B"]) == {}
    assert g.targets({"A": 1}) == {}


def test_sources_with_multiple_sources(empty_instance):
    g = empty_instance()
    g.set("A", "D", 2)
    g.set("B", "D", 5)
    g.set("C", "D", 8)
    assert g.sources("D") == {"A": 2, "B": 5, "C": 8}
    assert g.sources("A") == {}


def test_targets_with_multiple_targets(empty_instance):
    g = empty_instance()
    g.set("A", "B", 3)
    g.set("A", "C", 6)
    g.set("A", "D", 9)
    assert g.targets("A") == {"B": 3, "C": 6, "D": 9}
    assert g.targets("B") == {}


# --- defensive copies ------------------------------------------------------


def test_vertices_returns_copy(empty_instance):
    g = empty_instance()
    g.add("A")
    snapshot = g.vertices()
    snapshot.add("B")
    snapshot.discard("A")
    assert g.vertices() == {"A"}


def test_sources_and_targets_return_copies(empty_instance):
    g = empty_instance()
    g.set("A", "B", 1)

    out = g.targets("A")
    out["C"] = 9
    out["B"] = 100
    incoming = g.sources("B")
    incoming.clear()

    # internal structure must remain intact
    assert g.targets("A") == {"B": 1}
    assert g.sources("B") == {"A": 1}
    assert g.vertices() == {"A", "B"}


def test_empty_query_results_are_independent(empty_instance):
    g = empty_instance()
    missing = g.targets("A")
    missing["B"] = 1
    assert g.targets("A") == {}


# --- longer scenario -------------------------------------------------------


def test_complex_graph_operations(empty_instance):
    g = empty_instance()
    g.set("A", "B", 5)
    g.set("A", "C", 3)
    g.set("B", "C", 2)
    g.set("D", "C", 4)
    assert len(g.vertices()) == 4
    assert len(g.targets("A")) == 2
    assert len(g.sources("C")) == 3

    assert g.set("A", "B", 10) == 5
    assert g.targets("A")["B"] == 10

    assert g.set("D", "C", 0) == 4
    assert "C" not in g.targets("D")
    assert g.sources("C") == {"A": 3, "B": 2}

    assert g.remove("B") is True
    assert g.vertices() == {"A", "C", "D"}
    assert "B" not in g.targets("A")
    assert g.sources("C") == {"A": 3}


def test_rep_check_passes_after_operations(empty_instance):
    g = empty_instance()
    g.set("A", "B", 1)
    g.set("B", "A", 1)
    g.set("B", "B", 1)
    g.remove("A")
    assert g.rep_violations() == []
    g.check_rep()


def test_str_mentions_vertices_and_edges(empty_instance):
    g = empty_instance()
    assert "0 vertices" in str(g)
    g.set("A", "B", 5)
    g.set("B", "C", 3)
    text = str(g)
    assert "3 vertices" in text
    assert "A → B (5)" in text
    assert "B → C (3)" in text
