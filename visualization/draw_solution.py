"""
Visualization utilities for rendering a separation.

This module provides:
    • draw_points(img, points, to_pixel)
    • draw_separating_lines(img, lines, to_pixel)
    • render_solution(points, lines)

Points are drawn as filled dots, vertical lines (v) and horizontal lines
(h) in their configured colors. The y-axis is flipped so that larger y
is drawn higher, as on a cartesian plane.
"""

import cv2
import numpy as np

from models.line import Axis
from config import get_active_params


# ---------------------------------------------------------------------
#  COORDINATE MAPPING
# ---------------------------------------------------------------------

class PixelMapper:
    """
    Maps plane coordinates onto a canvas large enough for all points.
    """

    def __init__(self, points, scale, margin):
        max_x = max((pt.x for pt in points), default=0)
        max_y = max((pt.y for pt in points), default=0)
        self.scale = scale
        self.margin = margin
        self.width = 2 * margin + int(np.ceil((max_x + 1) * scale))
        self.height = 2 * margin + int(np.ceil((max_y + 1) * scale))

    def px(self, x):
        return int(round(self.margin + x * self.scale))

    def py(self, y):
        return int(round(self.height - self.margin - y * self.scale))

    def __call__(self, x, y):
        return self.px(x), self.py(y)


# ---------------------------------------------------------------------
#  DRAWING
# ---------------------------------------------------------------------

def draw_points(image, points, to_pixel, color=(0, 0, 0), radius=3):
    for pt in points:
        cv2.circle(image, to_pixel(pt.x, pt.y), radius, color, thickness=-1)
    return image


def draw_separating_lines(image, lines, to_pixel, colors, thickness=1):
    """
    Draws every line across the full canvas.

    Args:
        colors: dict with "vertical" and "horizontal" (B, G, R) entries
    """
    h, w = image.shape[:2]
    for ln in lines:
        if ln.axis == Axis.X:
            x = to_pixel.px(ln.intercept)
            cv2.line(image, (x, 0), (x, h - 1), colors["vertical"], thickness)
        else:
            y = to_pixel.py(ln.intercept)
            cv2.line(image, (0, y), (w - 1, y), colors["horizontal"], thickness)
    return image


def render_solution(points, lines):
    """
    Returns a BGR image of the points and the committed lines.
    """
    params = get_active_params()
    colors = params["COLORS"]

    mapper = PixelMapper(points, params["RENDER_SCALE"], params["RENDER_MARGIN"])
    image = np.full((mapper.height, mapper.width, 3), colors["background"], dtype=np.uint8)

    draw_separating_lines(image, lines, mapper, colors)
    draw_points(image, points, mapper, colors["point"], params["POINT_RADIUS"])
    return image
