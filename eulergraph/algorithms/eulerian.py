"""Decide whether a graph admits a closed Euler tour."""

from __future__ import annotations

from typing import Iterable, Optional, Union

from eulergraph.algorithms.connectivity import is_connected
from eulergraph.algorithms.euler import require_undirected
from eulergraph.config import EULER_CONFIG, EulerConfig
from eulergraph.graph.base import DirectedArcGraph, UndirectedArcGraph
from eulergraph.logging import get_logger

logger = get_logger(__name__)


def _count(items: Iterable) -> int:
    return sum(1 for _ in items)


def is_eulerian(
    graph: Union[DirectedArcGraph, UndirectedArcGraph],
    directed: Optional[bool] = None,
    config: Optional[EulerConfig] = None,
) -> bool:
    """Check whether ``graph`` is Eulerian.

    A directed graph is Eulerian if every node has equal in- and out-degree
    and the graph is connected once arc directions are erased. An undirected
    graph is Eulerian if every node has even degree and the graph is
    connected. Isolated nodes are ignored by the connectivity requirement
    unless ``config.ignore_isolated_nodes`` is False.

    Only closed tours are certified: a digraph that has an open Euler trail
    but unbalanced degrees is reported as not Eulerian.

    Args:
        graph: Graph exposing the arc capabilities. NetworkX-backed graphs
            are checked in place; other graphs are copied through their arcs.
        directed: Which degree condition to apply. Defaults to
            ``graph.is_directed()``.
        config: Behavior switches; defaults to the global `EULER_CONFIG`.

    Returns:
        True if a closed tour covering every arc exactly once exists.

    Raises:
        ValueError: If ``directed`` is False but ``graph`` is directed.
    """
    config = config or EULER_CONFIG
    if directed is None:
        directed = graph.is_directed()

    if directed:
        for node in graph:
            out_degree = _count(graph.out_arcs(node))
            in_degree = _count(graph.in_arcs(node))
            if out_degree != in_degree:
                logger.debug(
                    "Node %r is unbalanced: out-degree %d, in-degree %d",
                    node,
                    out_degree,
                    in_degree,
                )
                return False
    else:
        require_undirected(graph)
        for node in graph:
            degree = graph.degree_of(node)  # type: ignore[union-attr]
            if degree % 2:
                logger.debug("Node %r has odd degree %d", node, degree)
                return False

    connected = is_connected(graph, ignore_isolated=config.ignore_isolated_nodes)
    if not connected:
        logger.debug("Graph has more than one component carrying arcs")
    return connected
