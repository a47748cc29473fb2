"""
Visualization Tools

Provides drawing utilities for:
- Primitive shapes on a raster canvas
- Points / lines rendering modes
- Saving the rendered image
"""

from .styles import Style, POINT_STYLE, CIRCLE_STYLE, LINE_STYLE
from .canvas import Canvas
from .renderer import render, render_points, render_lines
from .save_outputs import save_rendered_image

__all__ = [
    "Style",
    "POINT_STYLE",
    "CIRCLE_STYLE",
    "LINE_STYLE",
    "Canvas",
    "render",
    "render_points",
    "render_lines",
    "save_rendered_image",
]
