from dataclasses import dataclass, field
from typing import List

from models.line import Line


@dataclass
class Solution:
    """
    Ordered set of committed lines produced by one separation run.

    lines keeps commit order, which is also the order written to the
    solution file. remaining_connections is the connection count left
    when the driver stopped; anything above zero means some pairs were
    never separated.
    """

    lines: List[Line] = field(default_factory=list)
    remaining_connections: int = 0

    def add(self, line: Line):
        self.lines.append(line)

    @property
    def complete(self):
        return self.remaining_connections == 0

    def __len__(self):
        return len(self.lines)

    def as_pairs(self):
        """(marker, intercept) per line, in commit order."""
        return [(ln.axis.marker, ln.intercept) for ln in self.lines]
