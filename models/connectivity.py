"""
Connectivity graph over the points of one separation run.

Every pair of points starts out connected. A pair is disconnected as
soon as a committed line puts its two points on opposite sides, and is
never reconnected. The relation is kept as a dense symmetric boolean
matrix together with a per-point counter (Point.remaining_connections)
and a global counter of remaining directed connections.
"""

import numpy as np

from utils.errors import CapacityExceededError, IntegrityError
from config import get_active_params


class ConnectivityGraph:

    def __init__(self, points, capacity=None):
        if capacity is None:
            capacity = get_active_params()["MAX_POINTS"]

        n = len(points)
        if n > capacity:
            raise CapacityExceededError(n, capacity)

        self.points = points
        self.n = n
        self._matrix = np.zeros((n, n), dtype=bool)
        self._remaining = 0

        self._connect_all()
        self._check_initial_count()

    def _connect_all(self):
        """
        Connects every point to every other point, counting each directed
        connection as it is set.
        """
        for i, pt in enumerate(self.points):
            pt.remaining_connections = 0
            for j in range(self.n):
                if i != j:
                    self._matrix[i, j] = True
                    pt.remaining_connections += 1
                    self._remaining += 1

    # ------------------------------------------------------------
    # Integrity
    # ------------------------------------------------------------
    def _check_initial_count(self):
        expected = self.n * (self.n - 1)
        if self._remaining != expected:
            raise IntegrityError(
                f"remaining connections = {self._remaining}, but should be {expected}"
            )
        if int(self._matrix.sum()) != self._remaining:
            raise IntegrityError("connection matrix does not match the connection count")
        if not (self._matrix == self._matrix.T).all():
            raise IntegrityError("connection matrix is not symmetric")
        if sum(pt.remaining_connections for pt in self.points) != expected:
            raise IntegrityError("per-point connection counts do not add up")

    # ------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------
    def connected(self, i, j):
        return bool(self._matrix[i, j])

    def remaining_total(self):
        """Number of directed connections left (twice the pair count)."""
        return self._remaining

    def any_connected(self, left, right):
        """
        True if any index in `left` is still connected to any index in
        `right`. Both are integer index arrays.
        """
        if len(left) == 0 or len(right) == 0:
            return False
        return bool(self._matrix[np.ix_(left, right)].any())

    def as_matrix(self):
        """Read-only copy of the relation, for dumps and tests."""
        return self._matrix.copy()

    # ------------------------------------------------------------
    # Mutation
    # ------------------------------------------------------------
    def disconnect(self, i, j):
        """
        Removes the connection between points i and j. Calling it on a
        pair that is already disconnected changes nothing.
        """
        if not self._matrix[i, j]:
            return False

        self._matrix[i, j] = False
        self._matrix[j, i] = False
        self.points[i].remaining_connections -= 1
        self.points[j].remaining_connections -= 1
        self._remaining -= 2
        return True

    def __repr__(self):
        return f"ConnectivityGraph(n={self.n}, remaining={self._remaining})"
