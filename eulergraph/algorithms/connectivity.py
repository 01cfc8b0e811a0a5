"""Connectivity oracle used by the Eulerian predicate."""

from __future__ import annotations

from typing import Union

import networkx as nx

from eulergraph.graph.base import DirectedArcGraph
from eulergraph.graph.convert import arcs_to_multigraph, undirected_view


def is_connected(
    graph: Union[nx.Graph, DirectedArcGraph], ignore_isolated: bool = True
) -> bool:
    """Return True if ``graph`` forms a single connected component.

    Directed graphs are checked with arc directions erased, so this tests weak
    connectivity for them. Graphs that are not NetworkX graphs are copied into
    a `networkx.MultiGraph` through their arcs. The null graph counts as
    connected.

    Args:
        graph: A NetworkX graph or view, or any graph implementing
            `DirectedArcGraph`.
        ignore_isolated: If True, nodes without incident edges are skipped and
            only the components that carry edges must number at most one.

    Returns:
        True if the (non-isolated part of the) graph is connected.
    """
    if isinstance(graph, nx.Graph):
        view = undirected_view(graph)
    else:
        view = arcs_to_multigraph(graph)
    if not ignore_isolated:
        return nx.number_connected_components(view) <= 1

    nontrivial = 0
    for component in nx.connected_components(view):
        if any(view.degree(node) > 0 for node in component):
            nontrivial += 1
            if nontrivial > 1:
                return False
    return True
