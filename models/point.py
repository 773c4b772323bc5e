from dataclasses import dataclass, field

from models.line import Axis


@dataclass
class Point:
    """
    One input point of a separation run.

    x, y and index identify the point and never change. The only mutable
    field is remaining_connections: how many other points still lie on the
    same side of every committed line as this one. It is maintained by
    ConnectivityGraph and must not be written anywhere else.
    """

    x: int
    y: int
    index: int
    remaining_connections: int = field(default=0, compare=False)

    def coordinate(self, axis):
        """Coordinate along the given axis (Axis.X -> x, Axis.Y -> y)."""
        return self.x if axis == Axis.X else self.y

    def __repr__(self):
        return f"Point(#{self.index}, ({self.x}, {self.y}), con={self.remaining_connections})"


def build_points(coordinates):
    """
    Wraps raw (x, y) pairs as fresh Point objects, indexed in input order.
    """
    return [Point(int(x), int(y), i) for i, (x, y) in enumerate(coordinates)]
