"""Conversions between NetworkX graphs and the strict graph types.

`undirected_view` erases arc directions without copying, which is what the
Eulerian predicate hands to the connectivity oracle for directed graphs.
`arcs_to_multigraph` does the same for graphs that only expose arcs.
`from_networkx` wraps an arbitrary NetworkX graph in the matching strict type
so that tour builders can run over it.
"""

from __future__ import annotations

from typing import Union

import networkx as nx

from eulergraph.graph.base import DirectedArcGraph
from eulergraph.graph.strict_multidigraph import StrictMultiDiGraph
from eulergraph.graph.strict_multigraph import StrictMultiGraph


def undirected_view(graph: nx.Graph) -> nx.Graph:
    """Return a read-only view of ``graph`` with edge directions erased.

    Undirected graphs are returned unchanged. For directed graphs the view
    shares storage with ``graph``; an arc ``u -> v`` appears as edge ``u - v``.

    Args:
        graph: Any NetworkX graph, including the strict graph types.

    Returns:
        An undirected NetworkX graph or view.
    """
    if not graph.is_directed():
        return graph
    return graph.to_undirected(as_view=True)


def arcs_to_multigraph(graph: DirectedArcGraph) -> nx.MultiGraph:
    """Copy a graph that only exposes arcs into an undirected `networkx.MultiGraph`.

    Arcs sharing a key between the same nodes become one edge, so both
    orientations of an undirected edge collapse as expected.

    Args:
        graph: Any graph implementing `DirectedArcGraph`.

    Returns:
        A new undirected multigraph with the same nodes.
    """
    nx_graph = nx.MultiGraph()
    nx_graph.add_nodes_from(graph)
    for arc in graph.arcs():
        nx_graph.add_edge(arc.source, arc.target, key=arc.key)
    return nx_graph


def from_networkx(
    nx_graph: nx.Graph,
) -> Union[StrictMultiDiGraph, StrictMultiGraph]:
    """Copy a NetworkX graph into a `StrictMultiDiGraph` or `StrictMultiGraph`.

    Directed inputs produce a `StrictMultiDiGraph`, undirected inputs a
    `StrictMultiGraph`. Node and edge attributes are copied. Multigraph edge
    keys are kept when they are unique across the graph; otherwise, and for
    simple graphs, integer keys are assigned in edge order.

    Args:
        nx_graph: Source graph. It is not modified.

    Returns:
        A new strict graph with the same nodes and edges.
    """
    graph: Union[StrictMultiDiGraph, StrictMultiGraph]
    if nx_graph.is_directed():
        graph = StrictMultiDiGraph()
    else:
        graph = StrictMultiGraph()
    for node, data in nx_graph.nodes(data=True):
        graph.add_node(node, **data)

    if nx_graph.is_multigraph():
        edge_items = list(nx_graph.edges(keys=True, data=True))
        keys = [key for _, _, key, _ in edge_items]
        keep_keys = len(set(keys)) == len(keys)
        for u, v, key, data in edge_items:
            graph.add_edge(u, v, key if keep_keys else None, **data)
    else:
        for u, v, data in nx_graph.edges(data=True):
            graph.add_edge(u, v, **data)
    return graph
