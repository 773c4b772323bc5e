"""
Greedy driver for axis-parallel separation.

The candidate sequences of both axes are walked in lock-step
(X, Y, X, Y, ...). Each candidate that still separates a connected pair
is committed; the others are skipped. The walk stops when no connections
remain or when either sequence runs out, whichever happens first. In
the latter case the solution can be incomplete; Solution.complete
reports it.
"""

from models.line import Axis
from models.point import build_points
from models.connectivity import ConnectivityGraph
from models.solution import Solution
from separation.axis_sorter import sort_points, sorted_coordinates
from separation.candidate_generator import divide_axis
from separation.separation_tester import has_live_crossing
from separation.committer import commit


class SeparationRun:
    """
    Scratch state of one separation run.

    Owns the points, the connectivity graph, both axis orders, both
    candidate sequences and the solution. A run is built for exactly one
    point set and discarded afterwards; nothing carries over to the next
    instance.
    """

    def __init__(self, points, capacity=None):
        self.points = points
        self.graph = ConnectivityGraph(points, capacity=capacity)

        self.order_x, self.order_y = sort_points(points)
        self.coords_x = sorted_coordinates(points, self.order_x, Axis.X)
        self.coords_y = sorted_coordinates(points, self.order_y, Axis.Y)

        self.candidates_x = divide_axis(points, self.order_x, Axis.X)
        self.candidates_y = divide_axis(points, self.order_y, Axis.Y)

        self.cursor_x = 0
        self.cursor_y = 0
        self.solution = Solution(remaining_connections=self.graph.remaining_total())

    @classmethod
    def from_coordinates(cls, coordinates, capacity=None):
        return cls(build_points(coordinates), capacity=capacity)

    # ------------------------------------------------------------
    # Single steps
    # ------------------------------------------------------------
    def _try(self, line, order, coords):
        if has_live_crossing(self.graph, order, coords, line):
            commit(self.graph, order, coords, line, self.solution)
            return True
        return False

    def step(self):
        """
        One X test followed by one Y test. Both cursors advance whether
        or not their candidate was committed.
        """
        self._try(self.candidates_x[self.cursor_x], self.order_x, self.coords_x)
        self.cursor_x += 1

        self._try(self.candidates_y[self.cursor_y], self.order_y, self.coords_y)
        self.cursor_y += 1

    def can_continue(self):
        return (
            self.graph.remaining_total() > 0
            and self.cursor_x < len(self.candidates_x)
            and self.cursor_y < len(self.candidates_y)
        )

    # ------------------------------------------------------------
    # Full run
    # ------------------------------------------------------------
    def run(self):
        while self.can_continue():
            self.step()

        self.solution.remaining_connections = self.graph.remaining_total()
        return self.solution


def solve(coordinates, capacity=None):
    """
    Separates the given (x, y) pairs and returns the Solution.

    Example:
        solve([(1, 1), (2, 2)]).as_pairs() → [('v', 1.5)]
    """
    return SeparationRun.from_coordinates(coordinates, capacity=capacity).run()
