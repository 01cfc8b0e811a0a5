"""Per-node cursors over the outgoing arcs not yet placed into a tour."""

from __future__ import annotations

from typing import Callable, Dict, Iterable, Iterator, Optional

from eulergraph.graph.base import Arc, DirectedArcGraph, NodeID


class NextArcCursor:
    """Forward-only cursor over one node's outgoing arcs.

    ``current()`` peeks at the next unconsumed arc and ``advance()`` consumes
    it. Both return None once the arcs are exhausted; the cursor never moves
    backwards.
    """

    __slots__ = ("_arcs", "_current")

    def __init__(self, arcs: Iterable[Arc]) -> None:
        self._arcs: Iterator[Arc] = iter(arcs)
        self._current: Optional[Arc] = next(self._arcs, None)

    def current(self) -> Optional[Arc]:
        return self._current

    def advance(self) -> Optional[Arc]:
        """Consume the current arc and return it, or None if exhausted."""
        arc = self._current
        if arc is not None:
            self._current = next(self._arcs, None)
        return arc

    def advance_until(self, accept: Callable[[Arc], bool]) -> Optional[Arc]:
        """Consume and return the first remaining arc for which ``accept`` holds.

        Rejected arcs are consumed as well.
        """
        arc = self.advance()
        while arc is not None and not accept(arc):
            arc = self.advance()
        return arc


class CursorTable:
    """Mapping of every graph node to its `NextArcCursor`.

    Built once from ``graph.out_arcs`` and never reset. Each cursor reads the
    graph lazily, so the graph must not change while the table is in use.
    """

    __slots__ = ("_cursors",)

    def __init__(self, graph: DirectedArcGraph) -> None:
        self._cursors: Dict[NodeID, NextArcCursor] = {
            node: NextArcCursor(graph.out_arcs(node)) for node in graph
        }

    def __getitem__(self, node: NodeID) -> NextArcCursor:
        return self._cursors[node]
