import pytest

from eulergraph.graph.base import Arc
from eulergraph.graph.strict_multidigraph import StrictMultiDiGraph


def test_init_empty_graph():
    g = StrictMultiDiGraph()
    assert len(g) == 0
    assert g.get_edges() == {}
    assert list(g.arcs()) == []


def test_add_node_duplicate():
    g = StrictMultiDiGraph()
    g.add_node("A")
    with pytest.raises(ValueError, match="already exists"):
        g.add_node("A")


def test_add_edge_requires_existing_nodes():
    g = StrictMultiDiGraph()
    g.add_node("A")
    with pytest.raises(ValueError, match="Target node 'B' does not exist"):
        g.add_edge("A", "B")
    with pytest.raises(ValueError, match="Source node 'C' does not exist"):
        g.add_edge("C", "A")


def test_auto_keys_are_monotonic_and_skip_explicit_ints():
    g = StrictMultiDiGraph()
    g.add_node("A")
    g.add_node("B")
    assert g.add_edge("A", "B") == 0
    assert g.add_edge("A", "B", key=10) == 10
    assert g.add_edge("B", "A") == 11
    assert g.add_edge("B", "A", key="named") == "named"


def test_duplicate_key_rejected_across_node_pairs():
    g = StrictMultiDiGraph()
    for node in "ABC":
        g.add_node(node)
    g.add_edge("A", "B", key="e")
    with pytest.raises(ValueError, match="already exists"):
        g.add_edge("B", "C", key="e")


def test_edge_registry_and_attributes():
    g = StrictMultiDiGraph()
    g.add_node("A")
    g.add_node("B")
    key = g.add_edge("A", "B", weight=3)

    assert g.get_edges()[key] == ("A", "B", key, {"weight": 3})
    # Registry entries share the attribute dict stored in the graph.
    g["A"]["B"][key]["weight"] = 5
    assert g.get_edges()[key][3] == {"weight": 5}


def test_constructor_accepts_graph_attributes_only():
    g = StrictMultiDiGraph(name="g")
    assert g.graph["name"] == "g"
    with pytest.raises(TypeError):
        StrictMultiDiGraph([("A", "B")])  # type: ignore[call-arg]


def test_out_and_in_arcs(figure_eight):
    assert list(figure_eight.out_arcs("B")) == [Arc("B", "C", 1), Arc("B", "D", 3)]
    assert list(figure_eight.in_arcs("B")) == [Arc("A", "B", 0), Arc("E", "B", 5)]
    assert len(list(figure_eight.arcs())) == 6


def test_arc_endpoints(figure_eight):
    arc = next(iter(figure_eight.out_arcs("A")))
    assert figure_eight.arc_source(arc) == "A"
    assert figure_eight.arc_target(arc) == "B"
    assert arc.edge == 0


def test_copy_keeps_registry(cycle4):
    clone = cycle4.copy()
    assert isinstance(clone, StrictMultiDiGraph)
    assert sorted(clone.get_edges()) == [0, 1, 2, 3]
    assert clone.add_edge(0, 2) == 4
