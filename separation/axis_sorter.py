"""
Axis ordering of a point set.

Everything downstream of sorting addresses points by their rank along an
axis, never by input index, so the two orders produced here are computed
once per run and never modified.
"""

import numpy as np

from models.line import Axis


def sort_points(points):
    """
    Returns two index permutations of `points`:
        order_x: indices ascending by x
        order_y: indices ascending by y

    Coordinates are assumed distinct per axis; a stable sort keeps input
    order for ties, should any slip through.
    """
    xs = np.array([pt.x for pt in points], dtype=np.int64)
    ys = np.array([pt.y for pt in points], dtype=np.int64)

    order_x = np.argsort(xs, kind="stable")
    order_y = np.argsort(ys, kind="stable")

    order_x.flags.writeable = False
    order_y.flags.writeable = False
    return order_x, order_y


def sorted_coordinates(points, order, axis):
    """
    Coordinate values along `axis`, listed in rank order.
    """
    axis = Axis(axis)
    coords = np.array([points[i].coordinate(axis) for i in order], dtype=np.float64)
    coords.flags.writeable = False
    return coords
