"""
Raster canvas with the primitive draw operations the renderer needs.

This module provides:
    • Canvas.fill_circle(center, radius, style)
    • Canvas.draw_circle(center, radius, style)
    • Canvas.draw_line(p1, p2, style)

Coordinates are floats; they are passed to cv2 as fixed-point integers
with SUBPIXEL_SHIFT fractional bits so sub-pixel positions survive.
Shapes that never touch the canvas are skipped. Circles whose centre or
radius is too large for cv2's fixed-point coordinates are rasterized
with a numpy distance mask over the visible part of the canvas.
"""

import math
from typing import Tuple

import cv2
import numpy as np

from config import COLOR_BACKGROUND, SUBPIXEL_SHIFT
from errors import RenderError
from utils.geometry import clip_segment
from visualization.styles import Style

Point = Tuple[float, float]

_FIXED_ONE = 1 << SUBPIXEL_SHIFT
_FIXED_LIMIT = 2 ** 31 - 1


def _check_finite(*values: float):
    for value in values:
        if not math.isfinite(value):
            raise RenderError(f"Cannot rasterize non-finite coordinate {value}.")


def _fits_fixed(*values: float) -> bool:
    return all(abs(v) * _FIXED_ONE <= _FIXED_LIMIT for v in values)


def _to_fixed(value: float) -> int:
    """Float pixel coordinate → cv2 fixed-point integer."""
    return int(round(value * _FIXED_ONE))


def _to_fixed_point(p: Point) -> Tuple[int, int]:
    return _to_fixed(p[0]), _to_fixed(p[1])


class Canvas:
    """
    A BGR uint8 image painted with the background colour on creation.

    Every primitive takes an immutable Style; the canvas itself holds no
    drawing state besides the pixels.
    """

    def __init__(self, width: int, height: int, background=COLOR_BACKGROUND):
        self.width = width
        self.height = height
        self.image = np.full((height, width, 3), background, dtype=np.uint8)

    # ------------------------------------------------------------
    # Visibility
    # ------------------------------------------------------------
    def _box_misses(self, cx: float, cy: float, reach: float) -> bool:
        """True if the square of half-size `reach` around (cx, cy) misses the canvas."""
        return (
            cx + reach < 0 or cx - reach > self.width
            or cy + reach < 0 or cy - reach > self.height
        )

    def _encloses_canvas(self, cx: float, cy: float, radius: float) -> bool:
        """True if every canvas corner lies strictly inside the circle."""
        far_x = max(abs(cx), abs(cx - self.width))
        far_y = max(abs(cy), abs(cy - self.height))
        return math.hypot(far_x, far_y) < radius

    # ------------------------------------------------------------
    # Large-circle fallback
    # ------------------------------------------------------------
    def _mask_circle(self, cx: float, cy: float, radius: float, color, half_width=None):
        """
        Paints a disc (half_width None) or a ring of the given half width
        by testing pixel-centre distances, limited to the circle's bounding
        box on the canvas.
        """
        reach = radius + (half_width or 0.0)
        x0 = max(0, int(math.floor(cx - reach)))
        x1 = min(self.width, int(math.ceil(cx + reach)) + 1)
        y0 = max(0, int(math.floor(cy - reach)))
        y1 = min(self.height, int(math.ceil(cy + reach)) + 1)
        if x0 >= x1 or y0 >= y1:
            return

        ys, xs = np.ogrid[y0:y1, x0:x1]
        dist = np.hypot(xs.astype(np.float64) - cx, ys.astype(np.float64) - cy)

        if half_width is None:
            mask = dist <= radius
        else:
            mask = np.abs(dist - radius) <= half_width

        self.image[y0:y1, x0:x1][mask] = color

    # ------------------------------------------------------------
    # Primitives
    # ------------------------------------------------------------
    def fill_circle(self, center: Point, radius: float, style: Style):
        """Solid disc in the style's fill colour."""
        cx, cy = center
        _check_finite(cx, cy, radius)
        if self._box_misses(cx, cy, radius):
            return

        if not _fits_fixed(cx, cy, radius):
            self._mask_circle(cx, cy, radius, style.fill_color)
            return

        cv2.circle(
            self.image,
            _to_fixed_point(center),
            _to_fixed(radius),
            style.fill_color,
            thickness=cv2.FILLED,
            lineType=cv2.LINE_8,
            shift=SUBPIXEL_SHIFT,
        )

    def draw_circle(self, center: Point, radius: float, style: Style):
        """Circle outline in the style's stroke colour."""
        cx, cy = center
        _check_finite(cx, cy, radius)
        half_width = max(style.stroke_width, 1) / 2.0
        if self._box_misses(cx, cy, radius + half_width):
            return
        if self._encloses_canvas(cx, cy, radius - half_width):
            return

        if not _fits_fixed(cx, cy, radius):
            self._mask_circle(cx, cy, radius, style.stroke_color, half_width)
            return

        cv2.circle(
            self.image,
            _to_fixed_point(center),
            _to_fixed(radius),
            style.stroke_color,
            thickness=style.stroke_width,
            lineType=cv2.LINE_8,
            shift=SUBPIXEL_SHIFT,
        )

    def draw_line(self, p1: Point, p2: Point, style: Style):
        _check_finite(p1[0], p1[1], p2[0], p2[1])
        clipped = clip_segment(p1, p2, self.width, self.height)
        if clipped is None:
            return

        cv2.line(
            self.image,
            _to_fixed_point(clipped[0]),
            _to_fixed_point(clipped[1]),
            style.stroke_color,
            thickness=style.stroke_width,
            lineType=cv2.LINE_8,
            shift=SUBPIXEL_SHIFT,
        )
