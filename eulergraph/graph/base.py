"""Arc type and the read-only graph capabilities consumed by tour builders.

Tour builders and the Eulerian predicate never touch a graph's storage. They
only rely on the narrow protocols below, so any graph type that exposes them
(the strict multigraphs in this package, or a user wrapper) can be used.
"""

from __future__ import annotations

from typing import Any, Dict, Hashable, Iterable, Iterator, NamedTuple, Protocol, Tuple

NodeID = Hashable
EdgeID = Hashable
AttrDict = Dict[str, Any]
EdgeTuple = Tuple[NodeID, NodeID, EdgeID, AttrDict]


class Arc(NamedTuple):
    """A traversal of one edge in one direction.

    In a directed graph an arc is the edge itself. In an undirected graph both
    orientations of an edge are distinct arcs that share the same ``key``.

    Attributes:
        source: Node the traversal leaves.
        target: Node the traversal enters.
        key: Unique edge key in the owning graph.
    """

    source: NodeID
    target: NodeID
    key: EdgeID

    @property
    def edge(self) -> EdgeID:
        """Underlying edge identity, shared by both orientations."""
        return self.key


class DirectedArcGraph(Protocol):
    """Read-only capabilities required from a directed graph."""

    def __iter__(self) -> Iterator[NodeID]: ...

    def __contains__(self, node: object) -> bool: ...

    def is_directed(self) -> bool: ...

    def arcs(self) -> Iterable[Arc]: ...

    def out_arcs(self, node: NodeID) -> Iterable[Arc]: ...

    def in_arcs(self, node: NodeID) -> Iterable[Arc]: ...

    def arc_source(self, arc: Arc) -> NodeID: ...

    def arc_target(self, arc: Arc) -> NodeID: ...


class UndirectedArcGraph(DirectedArcGraph, Protocol):
    """Read-only capabilities required from an undirected graph.

    ``out_arcs(node)`` yields every incident edge oriented away from ``node``.
    """

    def arc_edge(self, arc: Arc) -> EdgeID: ...

    def degree_of(self, node: NodeID) -> int: ...
