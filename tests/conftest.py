"""Shared graph fixtures for the test suite."""

from __future__ import annotations

from typing import Hashable, Iterable

import pytest

from eulergraph.graph.base import Arc
from eulergraph.graph.strict_multidigraph import StrictMultiDiGraph
from eulergraph.graph.strict_multigraph import StrictMultiGraph


def add_nodes(graph, nodes: Iterable[Hashable]):
    for node in nodes:
        graph.add_node(node)
    return graph


@pytest.fixture
def cycle4():
    #  0 ──► 1
    #  ▲     │
    #  │     ▼
    #  3 ◄── 2
    g = add_nodes(StrictMultiDiGraph(), range(4))
    g.add_edge(0, 1)
    g.add_edge(1, 2)
    g.add_edge(2, 3)
    g.add_edge(3, 0)
    return g


@pytest.fixture
def figure_eight():
    # Two directed triangles sharing B. The greedy walk from A closes the
    # A-B-C loop first, so the B-D-E loop has to be spliced in.
    #
    #  A ──► B ──► C        B ──► D
    #  ▲           │        ▲     │
    #  └───────────┘        └─ E ◄┘
    g = add_nodes(StrictMultiDiGraph(), "ABCDE")
    g.add_edge("A", "B", key=0)
    g.add_edge("B", "C", key=1)
    g.add_edge("C", "A", key=2)
    g.add_edge("B", "D", key=3)
    g.add_edge("D", "E", key=4)
    g.add_edge("E", "B", key=5)
    return g


@pytest.fixture
def bowtie():
    # Two undirected triangles sharing the center node 0.
    #
    #  1 ─── 0 ─── 3
    #   \   / \   /
    #    \ /   \ /
    #     2     4
    g = add_nodes(StrictMultiGraph(), range(5))
    g.add_edge(0, 1, key=0)
    g.add_edge(1, 2, key=1)
    g.add_edge(2, 0, key=2)
    g.add_edge(0, 3, key=3)
    g.add_edge(3, 4, key=4)
    g.add_edge(4, 0, key=5)
    return g


@pytest.fixture
def two_triangles():
    # Disjoint undirected triangles 0-1-2 and 3-4-5; every degree is even.
    g = add_nodes(StrictMultiGraph(), range(6))
    for u, v in ((0, 1), (1, 2), (2, 0), (3, 4), (4, 5), (5, 3)):
        g.add_edge(u, v)
    return g


@pytest.fixture
def star3():
    # Undirected star with center 0 and leaves 1, 2, 3; all degrees odd.
    g = add_nodes(StrictMultiGraph(), range(4))
    g.add_edge(0, 1, key=0)
    g.add_edge(0, 2, key=1)
    g.add_edge(0, 3, key=2)
    return g


class ArcListDigraph:
    """Directed graph backed by a plain list of arcs, with no NetworkX storage."""

    def __init__(self, nodes, arcs):
        self._nodes = list(nodes)
        self._arcs = [Arc(u, v, key) for key, (u, v) in enumerate(arcs)]

    def __iter__(self):
        return iter(self._nodes)

    def __contains__(self, node):
        return node in self._nodes

    def is_directed(self):
        return True

    def arcs(self):
        return iter(self._arcs)

    def out_arcs(self, node):
        return (arc for arc in self._arcs if arc.source == node)

    def in_arcs(self, node):
        return (arc for arc in self._arcs if arc.target == node)

    def arc_source(self, arc):
        return arc.source

    def arc_target(self, arc):
        return arc.target


@pytest.fixture
def arc_list_digraph():
    """Factory building an `ArcListDigraph` from nodes and ``(u, v)`` pairs."""
    return ArcListDigraph
