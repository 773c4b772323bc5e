"""
Separation Package

Contains the greedy separation core:
- Axis sorting
- Candidate line generation (recursive bisection)
- Live-crossing test
- Commit / disconnect
- X/Y alternating driver
"""

from .axis_sorter import sort_points, sorted_coordinates
from .candidate_generator import divide_axis
from .separation_tester import partition_point, split_by_line, has_live_crossing
from .committer import commit
from .greedy_driver import SeparationRun, solve

__all__ = [
    "sort_points",
    "sorted_coordinates",
    "divide_axis",
    "partition_point",
    "split_by_line",
    "has_live_crossing",
    "commit",
    "SeparationRun",
    "solve",
]
