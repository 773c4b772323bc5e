"""
Greedy Axis Separation Package

Separates a set of points in the positive quadrant with axis-parallel
lines, using a greedy walk over recursively bisected candidate lines:

- Point / line / connectivity models
- Axis sorting & candidate generation
- Live-crossing test, commit, X/Y driver
- Instance & solution file I/O
- Solution visualization
"""
__all__ = [
    "config",
    "main",
    "models",
    "separation",
    "utils",
    "visualization",
]
