"""
Data Models

Defines the core data structures:
- Point
- Line / Axis
- ConnectivityGraph
- Solution
"""

from .line import Axis, Line
from .point import Point, build_points
from .connectivity import ConnectivityGraph
from .solution import Solution

__all__ = ["Axis", "Line", "Point", "build_points", "ConnectivityGraph", "Solution"]
