"""Euler tours of directed and undirected graphs.

`DiEulerTour` and `EulerTour` compute a tour with Hierholzer's circuit
splicing. The constructor walks greedily from the start node until it gets
stuck; each ``advance()`` then pops the front arc and, if the node it enters
still has unused arcs, walks a sub-tour from there and places it directly
behind the popped arc. Every arc is consumed from its cursor exactly once, so
the whole traversal is O(V + E).

Example:
    tour = DiEulerTour(graph, start="A")
    for arc in tour:
        print(arc.source, "->", arc.target)

If the graph is not Eulerian the tour is a partial trail and may not be closed;
use `is_eulerian` beforehand when a full circuit is required.
"""

from __future__ import annotations

from collections import deque
from typing import Deque, Iterator, List, Optional, Sequence, Set, Union

from eulergraph.algorithms.cursor import CursorTable
from eulergraph.config import EULER_CONFIG, EulerConfig
from eulergraph.graph.base import (
    Arc,
    DirectedArcGraph,
    EdgeID,
    NodeID,
    UndirectedArcGraph,
)
from eulergraph.logging import get_logger

logger = get_logger(__name__)


def require_undirected(graph: DirectedArcGraph) -> None:
    """Reject a directed graph where undirected traversal was requested.

    Raises:
        ValueError: If ``graph.is_directed()`` is True.
    """
    if graph.is_directed():
        raise ValueError("directed=False requires an undirected graph")


def first_node_with_arcs(graph: DirectedArcGraph) -> Optional[NodeID]:
    """Return the first node (in graph order) with an outgoing arc, or None."""
    for node in graph:
        for _ in graph.out_arcs(node):
            return node
    return None


class DiEulerTour:
    """Euler tour of a directed graph, consumed one arc at a time.

    The tour is a forward-only, single-pass sequence. It is also a Python
    iterator, so ``list(DiEulerTour(g))`` yields all arcs of the tour.

    Attributes:
        start: Node the tour starts from, or None if the graph has no arcs.
    """

    def __init__(
        self,
        graph: DirectedArcGraph,
        start: Optional[NodeID] = None,
        config: Optional[EulerConfig] = None,
    ) -> None:
        """Bind the tour to ``graph`` and walk the initial trail.

        Args:
            graph: Graph to traverse; read only and must not change while the
                tour is in use.
            start: Starting node. Defaults to the first node with an outgoing
                arc. A start node without outgoing arcs yields an empty tour.
            config: Behavior switches; defaults to the global `EULER_CONFIG`.

        Raises:
            ValueError: If ``start`` is not in the graph and
                ``config.validate_start`` is set.
        """
        config = config or EULER_CONFIG
        if start is None:
            start = first_node_with_arcs(graph)
        elif config.validate_start and start not in graph:
            raise ValueError(f"Start node '{start}' does not exist.")

        self._graph = graph
        self.start: Optional[NodeID] = start
        self._tour: Deque[Arc] = deque()
        self._cursors = CursorTable(graph)
        if start is not None:
            self._tour.extend(self._walk(start))
        logger.debug(
            "%s from %r: initial trail of %d arcs",
            type(self).__name__,
            start,
            len(self._tour),
        )

    def _next_arc(self, node: NodeID) -> Optional[Arc]:
        """Consume the next usable outgoing arc of ``node``."""
        return self._cursors[node].advance()

    def _walk(self, node: NodeID) -> Iterator[Arc]:
        """Follow unused arcs from ``node`` until reaching a node with none left."""
        arc = self._next_arc(node)
        while arc is not None:
            yield arc
            arc = self._next_arc(self._graph.arc_target(arc))

    def _splice(self, node: NodeID) -> None:
        """Place the sub-tour rooted at ``node`` at the front of the tour.

        A sub-tour that does not return to ``node`` only happens on graphs
        without an Euler trail. Its tail past the last return to ``node`` is
        kept only if nothing follows it in the tour; otherwise it is dropped so
        the remaining arcs still form a trail.
        """
        sub_tour = list(self._walk(node))
        if not sub_tour:
            return
        if self._tour:
            closed = len(sub_tour)
            while closed and self._graph.arc_target(sub_tour[closed - 1]) != node:
                closed -= 1
            if closed < len(sub_tour):
                logger.debug(
                    "Dropping %d arcs that cannot be spliced at %r",
                    len(sub_tour) - closed,
                    node,
                )
                del sub_tour[closed:]
        self._tour.extendleft(reversed(sub_tour))

    def current(self) -> Optional[Arc]:
        """Return the arc at the front of the tour without consuming it."""
        return self._tour[0] if self._tour else None

    def advance(self) -> Optional[Arc]:
        """Consume and return the front arc, or None once the tour is exhausted."""
        if not self._tour:
            return None
        arc = self._tour.popleft()
        self._splice(self._graph.arc_target(arc))
        if not self._tour:
            logger.debug("%s exhausted", type(self).__name__)
        return arc

    def __iter__(self) -> DiEulerTour:
        return self

    def __next__(self) -> Arc:
        arc = self.advance()
        if arc is None:
            raise StopIteration
        return arc

    def __bool__(self) -> bool:
        """True while the tour has arcs left to consume."""
        return bool(self._tour)


class EulerTour(DiEulerTour):
    """Euler tour of an undirected graph.

    Every edge is reported once, as the `Arc` orientation in which the tour
    first reached it. An edge is marked visited as soon as it is taken, so its
    reverse orientation is skipped when met from the other endpoint.

    Raises:
        ValueError: If ``graph`` is directed.
    """

    def __init__(
        self,
        graph: UndirectedArcGraph,
        start: Optional[NodeID] = None,
        config: Optional[EulerConfig] = None,
    ) -> None:
        require_undirected(graph)
        self._visited: Set[EdgeID] = set()
        super().__init__(graph, start, config)

    def _next_arc(self, node: NodeID) -> Optional[Arc]:
        graph: UndirectedArcGraph = self._graph  # type: ignore[assignment]
        arc = self._cursors[node].advance_until(
            lambda candidate: graph.arc_edge(candidate) not in self._visited
        )
        if arc is not None:
            self._visited.add(graph.arc_edge(arc))
        return arc

    def current_edge(self) -> Optional[EdgeID]:
        """Return the edge key of the front arc, or None if exhausted."""
        arc = self.current()
        if arc is None:
            return None
        return self._graph.arc_edge(arc)  # type: ignore[attr-defined]


def euler_tour(
    graph: Union[DirectedArcGraph, UndirectedArcGraph],
    start: Optional[NodeID] = None,
    directed: Optional[bool] = None,
    config: Optional[EulerConfig] = None,
) -> List[Arc]:
    """Return the full arc sequence of an Euler tour of ``graph``.

    Args:
        graph: Graph to traverse.
        start: Starting node; see `DiEulerTour`.
        directed: Select `DiEulerTour` (True) or `EulerTour` (False). Defaults
            to ``graph.is_directed()``.
        config: Behavior switches; defaults to the global `EULER_CONFIG`.

    Returns:
        List of arcs in tour order. Partial when the graph is not Eulerian.

    Raises:
        ValueError: If ``directed`` is False but ``graph`` is directed.
    """
    if directed is None:
        directed = graph.is_directed()
    if directed:
        return list(DiEulerTour(graph, start, config))
    return list(EulerTour(graph, start, config))  # type: ignore[arg-type]


def tour_nodes(arcs: Sequence[Arc]) -> List[NodeID]:
    """Return the node sequence visited by a trail of arcs.

    A closed tour starts and ends with the same node. An empty trail has no
    nodes.
    """
    if not arcs:
        return []
    return [arcs[0].source] + [arc.target for arc in arcs]


def is_trail(arcs: Sequence[Arc]) -> bool:
    """Return True if each arc starts where the previous one ended."""
    return all(prev.target == nxt.source for prev, nxt in zip(arcs, arcs[1:]))
