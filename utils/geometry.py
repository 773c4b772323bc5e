"""
This module provides:
    - midpoint
    - separating_line
    - unseparated_pairs
    - is_valid_separation
"""

from itertools import combinations


# ----------------------------------------------------------------------
#  MIDPOINT OF TWO ADJACENT COORDINATES
# ----------------------------------------------------------------------

def midpoint(a, b):
    """
    Arithmetic midpoint of two coordinates. For distinct integers a < b the
    result lies strictly between them.
    """
    a = float(a)
    b = float(b)
    return a + (b - a) / 2


# ----------------------------------------------------------------------
#  PAIRWISE SEPARATION
# ----------------------------------------------------------------------

def separating_line(lines, p, q):
    """
    Returns the first line that puts p and q strictly on opposite sides,
    or None if no line does.
    """
    for ln in lines:
        if ln.separates(p, q):
            return ln
    return None


def unseparated_pairs(points, lines):
    """
    Brute-force check of a solution, independent of the connectivity graph.

    Output:
        list of (i, j) index pairs (i < j) that no line separates
    """
    pairs = []
    for p, q in combinations(points, 2):
        if separating_line(lines, p, q) is None:
            pairs.append((p.index, q.index))
    return pairs


def is_valid_separation(points, lines):
    return not unseparated_pairs(points, lines)
