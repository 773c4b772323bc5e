"""
Candidate line generation by recursive bisection of an axis order.

For one axis, the sorted points are split in the middle, then each half
is split in the middle, and so on. Lines are emitted in pre-order, so the
coarse bisections that cut the most pairs come first in the sequence.
Generation never looks at the connectivity graph.

Not every gap between neighbouring ranks gets a candidate: a range of
three ranks is split once and not recursed into, and sub-ranges of two
ranks produce nothing. Only a whole axis of exactly two points yields
the line between them.
"""

from models.line import Axis, Line
from utils.geometry import midpoint


def divide_axis(points, order, axis):
    """
    Builds the candidate sequence for one axis.

    Parameters
    ----------
    points : list[Point]
    order : sequence[int]
        Point indices sorted along `axis`.
    axis : Axis

    Returns
    -------
    list[Line]
        At most n - 1 lines, in pre-order of the split tree over the
        inclusive rank range [0, n - 1].
    """
    axis = Axis(axis)
    coords = [points[i].coordinate(axis) for i in order]
    lines = []

    if len(coords) == 2:
        _emit(coords, axis, 0, lines)
    elif len(coords) > 2:
        _divide(coords, axis, 0, len(coords) - 1, lines)
    return lines


def _emit(coords, axis, rank, lines):
    # line between ranks `rank` and `rank + 1`
    inter = midpoint(coords[rank], coords[rank + 1])
    lines.append(Line(axis, inter, generation_order=len(lines)))


def _divide(coords, axis, low, high, lines):
    # [low, high] is an inclusive rank range
    span = high - low
    if span <= 1:
        return

    half = span // 2
    _emit(coords, axis, low + half, lines)

    if span != 2:
        _divide(coords, axis, low, low + half, lines)
        _divide(coords, axis, low + half, high, lines)
