from enum import IntEnum


class Axis(IntEnum):
    """
    Axis a line splits on.

      X: the line is vertical (parallel to the y-axis), written as 'v'
      Y: the line is horizontal (parallel to the x-axis), written as 'h'
    """

    X = 0
    Y = 1

    @property
    def marker(self):
        return "v" if self is Axis.X else "h"


class Line:
    """
    Axis-parallel candidate line.

    Supports:
      - side-of-line tests for points
      - pairwise separation test
      - commit flag (flips once, never back)
      - ordering information from candidate generation
    """

    # ------------------------------------------------------------
    # Initialization
    # ------------------------------------------------------------
    def __init__(self, axis, intercept, generation_order=0):
        """
        axis: Axis.X or Axis.Y
        intercept: coordinate on the split axis where the line sits
        generation_order: position in its axis' candidate sequence
        """
        self.axis = Axis(axis)
        self.intercept = float(intercept)
        self.generation_order = generation_order
        self.committed = False

    # ------------------------------------------------------------
    # Geometry
    # ------------------------------------------------------------
    def side_of(self, point):
        """
        -1 if the point lies left of (below) the line, 1 if right of
        (above) it, 0 if the point sits exactly on the line.
        """
        c = point.coordinate(self.axis)
        if c < self.intercept:
            return -1
        if c > self.intercept:
            return 1
        return 0

    def separates(self, p, q):
        """True if p and q lie strictly on opposite sides of the line."""
        return self.side_of(p) * self.side_of(q) == -1

    # ------------------------------------------------------------
    # State
    # ------------------------------------------------------------
    def commit(self):
        self.committed = True

    # ------------------------------------------------------------
    # Repr
    # ------------------------------------------------------------
    def __repr__(self):
        state = "committed" if self.committed else "candidate"
        return f"Line({self.axis.marker} {self.intercept:g}, #{self.generation_order}, {state})"
