"""Strict undirected multigraph exposing oriented arcs over its edges.

Each undirected edge is offered from both endpoints as an `Arc` oriented away
from the queried node. The edge key is the identity both orientations share,
which is what the undirected tour builder marks as visited.
"""

from __future__ import annotations

from typing import Iterator

import networkx as nx

from eulergraph.graph.base import Arc, EdgeID, NodeID
from eulergraph.graph.strict import StrictEdgeRegistry


class StrictMultiGraph(StrictEdgeRegistry, nx.MultiGraph):
    """An undirected multigraph with strict rules and unique edge keys.

    Satisfies `UndirectedArcGraph`. A self-loop appears once in the incident
    edges of its node and counts twice towards the node's degree, following
    the NetworkX convention.

    Inherits from:
        networkx.MultiGraph
    """

    def arcs(self) -> Iterator[Arc]:
        """Iterate over both orientations of every edge (self-loops once)."""
        for u, v, key in self.edges(keys=True):
            yield Arc(u, v, key)
            if u != v:
                yield Arc(v, u, key)

    def out_arcs(self, node: NodeID) -> Iterator[Arc]:
        """Iterate over the incident edges of ``node``, oriented away from it.

        Raises:
            KeyError: If ``node`` is not in the graph.
        """
        for nbr, keydict in self.adj[node].items():
            for key in keydict:
                yield Arc(node, nbr, key)

    def in_arcs(self, node: NodeID) -> Iterator[Arc]:
        """Iterate over the incident edges of ``node``, oriented towards it."""
        for nbr, keydict in self.adj[node].items():
            for key in keydict:
                yield Arc(nbr, node, key)

    def arc_source(self, arc: Arc) -> NodeID:
        return arc.source

    def arc_target(self, arc: Arc) -> NodeID:
        return arc.target

    def arc_edge(self, arc: Arc) -> EdgeID:
        return arc.edge

    def degree_of(self, node: NodeID) -> int:
        """Number of edge ends at ``node``; a self-loop contributes two."""
        return self.degree(node)  # type: ignore[return-value]
