"""
Visualization Tools

Provides:
- Text dumps of sorted orders and the connectivity matrix
- Solution rendering (points + separating lines)
- Output saving
"""

from .print_state import format_points_by_axis, format_connections, print_run_state
from .draw_solution import PixelMapper, draw_points, draw_separating_lines, render_solution
from .save_outputs import save_all_outputs, save_solution, save_solution_image

__all__ = [
    "format_points_by_axis",
    "format_connections",
    "print_run_state",
    "PixelMapper",
    "draw_points",
    "draw_separating_lines",
    "render_solution",
    "save_all_outputs",
    "save_solution",
    "save_solution_image",
]
