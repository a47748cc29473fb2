"""
This module provides:
    - point_distance
    - extend_line
    - clip_segment  (Liang–Barsky against the canvas rectangle)
"""

import math
from decimal import Decimal, localcontext
from typing import Optional, Tuple

from config import DECIMAL_PRECISION

Point = Tuple[float, float]


# ----------------------------------------------------------------------
#  EUCLIDEAN DISTANCE (DECIMAL SUM, FLOAT ROOT)
# ----------------------------------------------------------------------

def point_distance(p1x: Decimal, p1y: Decimal, p2x: Decimal, p2y: Decimal) -> float:
    """
    Distance between two pixel-space points given at Decimal precision.

    The squared sum is formed in Decimal; the square root is taken after
    the cast to float.
    """
    with localcontext() as ctx:
        ctx.prec = DECIMAL_PRECISION
        dx = p2x - p1x
        dy = p2y - p1y
        total = dx * dx + dy * dy
    return math.sqrt(float(total))


# ----------------------------------------------------------------------
#  EXTENDED LINE THROUGH TWO POINTS
# ----------------------------------------------------------------------

def extend_line(p1: Point, p2: Point, width: int, height: int) -> Tuple[Point, Point]:
    """
    Extends the line through p1 and p2 far past the canvas.

    The raw delta (not a unit vector) is scaled by the output width on x
    and the output height on y, on both sides of p1:

        a = p1 - (width * dx, height * dy)
        b = p1 + (width * dx, height * dy)
    """
    dx = p2[0] - p1[0]
    dy = p2[1] - p1[1]

    a = (p1[0] - width * dx, p1[1] - height * dy)
    b = (p1[0] + width * dx, p1[1] + height * dy)
    return a, b


# ----------------------------------------------------------------------
#  CLIP A SEGMENT TO THE CANVAS
# ----------------------------------------------------------------------

def clip_segment(a: Point, b: Point, width: int, height: int,
                 margin: float = 1.0) -> Optional[Tuple[Point, Point]]:
    """
    Clips segment a-b to the rectangle [-margin, width+margin] x
    [-margin, height+margin].

    Returns the clipped endpoints, or None if the segment misses the
    rectangle entirely. A zero-length segment is returned unchanged when
    it lies inside.
    """
    x0, y0 = a
    dx = b[0] - x0
    dy = b[1] - y0

    x_min, x_max = -margin, width + margin
    y_min, y_max = -margin, height + margin

    t0, t1 = 0.0, 1.0
    for p, q in (
        (-dx, x0 - x_min),
        (dx, x_max - x0),
        (-dy, y0 - y_min),
        (dy, y_max - y0),
    ):
        if p == 0:
            if q < 0:
                return None
            continue
        t = q / p
        if p < 0:
            if t > t1:
                return None
            t0 = max(t0, t)
        else:
            if t < t0:
                return None
            t1 = min(t1, t)

    return (x0 + t0 * dx, y0 + t0 * dy), (x0 + t1 * dx, y0 + t1 * dy)
