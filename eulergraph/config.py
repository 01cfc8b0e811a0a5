"""Configuration classes for eulergraph components."""

from dataclasses import dataclass


@dataclass
class EulerConfig:
    """Behavior switches shared by tour builders and the Eulerian predicate."""

    # Reject a start node that is not in the graph at builder construction
    validate_start: bool = True

    # Nodes without incident arcs do not count as separate components
    # when checking connectivity
    ignore_isolated_nodes: bool = True


# Global configuration instance
EULER_CONFIG = EulerConfig()
