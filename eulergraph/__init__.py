"""eulergraph: Euler tours and the Eulerian test for NetworkX-backed graphs.

Primary API:
    DiEulerTour - Euler tour of a directed graph, consumed arc by arc
    EulerTour - Euler tour of an undirected graph
    euler_tour() - Full arc list of a tour
    is_eulerian() - Check whether a closed Euler tour exists
    StrictMultiDiGraph, StrictMultiGraph - Graph types exposing arcs
    from_networkx() - Wrap a NetworkX graph in a strict graph type

Example:
    from eulergraph import StrictMultiDiGraph, DiEulerTour, is_eulerian

    g = StrictMultiDiGraph()
    for n in range(3):
        g.add_node(n)
    g.add_edge(0, 1)
    g.add_edge(1, 2)
    g.add_edge(2, 0)

    assert is_eulerian(g)
    path = [(arc.source, arc.target) for arc in DiEulerTour(g, start=0)]
"""

from __future__ import annotations

from eulergraph import logging
from eulergraph._version import __version__
from eulergraph.algorithms.connectivity import is_connected
from eulergraph.algorithms.euler import (
    DiEulerTour,
    EulerTour,
    euler_tour,
    is_trail,
    tour_nodes,
)
from eulergraph.algorithms.eulerian import is_eulerian
from eulergraph.config import EULER_CONFIG, EulerConfig
from eulergraph.graph.base import Arc, DirectedArcGraph, UndirectedArcGraph
from eulergraph.graph.convert import from_networkx, undirected_view
from eulergraph.graph.strict_multidigraph import StrictMultiDiGraph
from eulergraph.graph.strict_multigraph import StrictMultiGraph

__all__ = [
    # Version
    "__version__",
    # Graph
    "Arc",
    "DirectedArcGraph",
    "UndirectedArcGraph",
    "StrictMultiDiGraph",
    "StrictMultiGraph",
    "from_networkx",
    "undirected_view",
    # Tours
    "DiEulerTour",
    "EulerTour",
    "euler_tour",
    "tour_nodes",
    "is_trail",
    # Predicate
    "is_eulerian",
    "is_connected",
    # Configuration
    "EulerConfig",
    "EULER_CONFIG",
    # Utilities
    "logging",
]
