"""
Usefulness test for candidate lines.

A candidate is worth committing only if it still separates at least one
connected pair: some point left of the line must still be connected to
some point right of it.
"""

import numpy as np


def partition_point(coords, intercept):
    """
    Returns the highest rank whose coordinate is strictly less than
    `intercept`, or None if every coordinate is at or above it.

    coords must be in ascending rank order (see sorted_coordinates).
    Ranks [0, p] are left of the line, ranks [p + 1, n) are right of it.
    """
    p = int(np.searchsorted(coords, intercept, side="left")) - 1
    if p < 0:
        return None
    return p


def split_by_line(order, coords, line):
    """
    Point indices on each side of `line`.

    Returns:
        (left, right) index arrays; left is empty if nothing lies left
    """
    p = partition_point(coords, line.intercept)
    if p is None:
        return order[:0], order
    return order[:p + 1], order[p + 1:]


def has_live_crossing(graph, order, coords, line):
    """
    True iff any point left of `line` is still connected to any point
    right of it.
    """
    left, right = split_by_line(order, coords, line)
    return graph.any_connected(left, right)
