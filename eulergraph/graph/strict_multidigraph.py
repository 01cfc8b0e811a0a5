"""Strict multi-directed graph exposing the arc capabilities used by tours.

`StrictMultiDiGraph` extends `networkx.MultiDiGraph` with the strict node and
edge management of `StrictEdgeRegistry` and yields `Arc` tuples for outgoing
and incoming edges, so it satisfies `DirectedArcGraph`.
"""

from __future__ import annotations

from typing import Iterator

import networkx as nx

from eulergraph.graph.base import Arc, NodeID
from eulergraph.graph.strict import StrictEdgeRegistry


class StrictMultiDiGraph(StrictEdgeRegistry, nx.MultiDiGraph):
    """A multi-directed graph with strict rules and unique edge keys.

    Parallel arcs and self-loops are allowed. Each arc is identified by the
    graph-wide unique key returned from ``add_edge``.

    Inherits from:
        networkx.MultiDiGraph
    """

    def arcs(self) -> Iterator[Arc]:
        """Iterate over every arc of the graph in insertion order."""
        for u, v, key in self.edges(keys=True):
            yield Arc(u, v, key)

    def out_arcs(self, node: NodeID) -> Iterator[Arc]:
        """Iterate over the arcs leaving ``node``.

        Raises:
            KeyError: If ``node`` is not in the graph.
        """
        for target, keydict in self.succ[node].items():
            for key in keydict:
                yield Arc(node, target, key)

    def in_arcs(self, node: NodeID) -> Iterator[Arc]:
        """Iterate over the arcs entering ``node``.

        Raises:
            KeyError: If ``node`` is not in the graph.
        """
        for source, keydict in self.pred[node].items():
            for key in keydict:
                yield Arc(source, node, key)

    def arc_source(self, arc: Arc) -> NodeID:
        return arc.source

    def arc_target(self, arc: Arc) -> NodeID:
        return arc.target
