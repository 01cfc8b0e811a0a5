"""Strict node/edge construction shared by the directed and undirected graphs.

`StrictEdgeRegistry` is a mixin placed in front of a NetworkX multigraph class.
It forbids implicit node creation, keeps edge keys unique across the whole
graph, and raises ``ValueError`` on every invalid addition.
"""

from __future__ import annotations

from typing import Any, Dict, Optional

from eulergraph.graph.base import EdgeID, EdgeTuple, NodeID


class StrictEdgeRegistry:
    """Mixin enforcing explicit node management and graph-wide unique edge keys.

    This class enforces:
      - No automatic creation of missing nodes when adding an edge.
      - No duplicate nodes (raises ValueError on duplicates).
      - No duplicate edge keys anywhere in the graph (raises ValueError).
      - Edges added without a key receive a monotonically increasing integer.

    The constructor only accepts graph attributes; use
    `eulergraph.graph.convert.from_networkx` to build a strict graph from an
    existing NetworkX graph. Must precede a ``networkx.MultiGraph`` or
    ``networkx.MultiDiGraph`` base in the MRO.
    """

    def __init__(self, **attr: Any) -> None:
        self._edges: Dict[EdgeID, EdgeTuple] = {}
        self._next_edge_id: int = 0
        super().__init__(**attr)

    def new_edge_key(self, u: NodeID, v: NodeID, key: Optional[int] = None) -> int:  # type: ignore[override]
        """Return a new unique integer edge key.

        Signature matches NetworkX's ``new_edge_key``; the arguments are unused.
        """
        next_edge_id = self._next_edge_id
        self._next_edge_id += 1
        return next_edge_id

    def add_node(self, node_for_adding: NodeID, **attr: Any) -> None:
        """Add a single node, disallowing duplicates.

        Raises:
            ValueError: If the node already exists in the graph.
        """
        if node_for_adding in self:
            raise ValueError(f"Node '{node_for_adding}' already exists in this graph.")
        super().add_node(node_for_adding, **attr)  # type: ignore[misc]

    def add_edge(  # pyright: ignore[reportIncompatibleMethodOverride]
        self,
        u_for_edge: NodeID,
        v_for_edge: NodeID,
        key: Optional[EdgeID] = None,
        **attr: Any,
    ) -> EdgeID:
        """Add an edge between two existing nodes and return its key.

        When an explicit integer key is provided, the internal counter is
        advanced past it so auto-assigned keys never collide with it.

        Raises:
            ValueError: If either node does not exist, or if the key is in use.
        """
        if u_for_edge not in self:
            raise ValueError(f"Source node '{u_for_edge}' does not exist.")
        if v_for_edge not in self:
            raise ValueError(f"Target node '{v_for_edge}' does not exist.")

        if key is None:
            key = self.new_edge_key(u_for_edge, v_for_edge)
        else:
            if key in self._edges:
                raise ValueError(f"Edge with id '{key}' already exists.")
            if isinstance(key, int) and key >= self._next_edge_id:
                self._next_edge_id = key + 1

        super().add_edge(u_for_edge, v_for_edge, key=key, **attr)  # type: ignore[misc]
        self._edges[key] = (
            u_for_edge,
            v_for_edge,
            key,
            self[u_for_edge][v_for_edge][key],  # type: ignore[index]
        )
        return key

    def get_edges(self) -> Dict[EdgeID, EdgeTuple]:
        """Return a mapping of edge key to ``(source, target, key, attributes)``."""
        return self._edges
