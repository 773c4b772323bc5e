"""
Text dumps of a separation run, for debugging.

This module provides:
    • format_points_by_axis(points, order, axis)
    • format_connections(graph)
    • print_run_state(run)

Used by:
    - main.py (when VERBOSE is set)
"""

from models.line import Axis


def format_points_by_axis(points, order, axis):
    """
    One row per rank:  [rank](x, y)
    """
    axis = Axis(axis)
    title = "Points By X-Coord" if axis == Axis.X else "Points By Y-Coord"
    rows = [title]
    for rank, idx in enumerate(order):
        pt = points[idx]
        rows.append(f"[{rank}]({pt.x}, {pt.y})")
    return "\n".join(rows)


def format_connections(graph):
    """
    Connectivity matrix, one row per point: 1 = still connected.
    """
    matrix = graph.as_matrix()
    rows = []
    for i, row in enumerate(matrix):
        cells = " ".join("1" if c else "." for c in row)
        rows.append(f"{i}: [ {cells} ]  ({graph.points[i].remaining_connections})")
    rows.append(f"remaining: {graph.remaining_total()}")
    return "\n".join(rows)


def print_run_state(run):
    print(format_points_by_axis(run.points, run.order_x, Axis.X))
    print(format_points_by_axis(run.points, run.order_y, Axis.Y))
    print(format_connections(run.graph))
