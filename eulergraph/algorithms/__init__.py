"""Euler tour builders, the Eulerian predicate and their helpers."""

from eulergraph.algorithms.connectivity import is_connected
from eulergraph.algorithms.cursor import CursorTable, NextArcCursor
from eulergraph.algorithms.euler import (
    DiEulerTour,
    EulerTour,
    euler_tour,
    first_node_with_arcs,
    is_trail,
    tour_nodes,
)
from eulergraph.algorithms.eulerian import is_eulerian

__all__ = [
    "CursorTable",
    "NextArcCursor",
    "DiEulerTour",
    "EulerTour",
    "euler_tour",
    "first_node_with_arcs",
    "is_trail",
    "tour_nodes",
    "is_eulerian",
    "is_connected",
]
