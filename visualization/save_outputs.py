"""
Centralized output-saving utilities for the separation batch.

This module provides:
    • save_solution(path, solution)
    • save_solution_image(path, points, solution)
    • save_all_outputs(...)

Uses draw_solution to visualize and utils.instance_io for filesystem
handling.
"""

import os

import cv2

from models.solution import Solution
from visualization.draw_solution import render_solution
from utils.instance_io import ensure_output_dir, write_solution, solution_filename


# -------------------------------------------------------------------------
#   Save individual components
# -------------------------------------------------------------------------

def save_solution(path: str, solution: Solution):
    """
    Writes the committed lines in solution file format.
    """
    write_solution(path, solution.lines)


def save_solution_image(path: str, points, solution: Solution):
    """
    Renders the points and committed lines and saves them as an image.
    """
    ensure_output_dir(os.path.dirname(path))
    cv2.imwrite(path, render_solution(points, solution.lines))


# -------------------------------------------------------------------------
#   Master save function (used by main.py)
# -------------------------------------------------------------------------

def save_all_outputs(
    output_dir: str,
    instance_number: int,
    points,
    solution: Solution,
    render: bool = False
):
    """
    Saves every output artifact for one solved instance.

    Example output:
        greedy_solution_07
        greedy_solution_07.png   (only when render is set)
    """

    ensure_output_dir(output_dir)
    base = os.path.join(output_dir, solution_filename(instance_number))

    # 1) Solution file
    save_solution(base, solution)

    # 2) Rendering
    if render:
        save_solution_image(f"{base}.png", points, solution)

    return base
