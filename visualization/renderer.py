"""
Renderer: turns loaded points into primitive draw calls on a canvas.

Points mode:
    one filled, outlined circle per point.

Lines mode:
    for every unordered pair (i, j), i < j:
      • a line through both points extended past the canvas
      • a circle around i through j
      • a circle around j through i
    optionally preceded, per i, by the point itself.

Draw order is point order, then pair order. Later primitives paint over
earlier ones, so the order is part of the output.
"""

from decimal import Decimal
from typing import List, Optional, Sequence

import numpy as np

from config import ProgramMode, RenderConfig
from errors import EmptyDataError
from models.bounds import Bounds
from models.point import PixelPoint, RawPoint
from models.view_transform import ViewTransform, to_pixel_float
from utils.geometry import clip_segment, extend_line, point_distance
from visualization.canvas import Canvas
from visualization.styles import CIRCLE_STYLE, LINE_STYLE, POINT_STYLE


class ProjectedPoint:
    """A point's pixel position at Decimal precision and as floats."""

    __slots__ = ("view_x", "view_y", "pixel")

    def __init__(self, view_x: Decimal, view_y: Decimal):
        self.view_x = view_x
        self.view_y = view_y
        self.pixel = PixelPoint(to_pixel_float(view_x), to_pixel_float(view_y))


def project_points(points: Sequence[RawPoint], transform: ViewTransform) -> List[ProjectedPoint]:
    return [ProjectedPoint(*transform.map_to_view(p)) for p in points]


# ---------------------------------------------------------------------
#  Primitive groups
# ---------------------------------------------------------------------

def draw_point(canvas, p: PixelPoint, radius: float):
    """Filled circle with a 1-pixel border."""
    canvas.fill_circle(p.as_tuple(), radius, POINT_STYLE)
    canvas.draw_circle(p.as_tuple(), radius, POINT_STYLE)


def draw_extended_line(canvas, p1: PixelPoint, p2: PixelPoint, width: int, height: int):
    """
    Draws the line through p1 and p2 across the whole canvas.

    The extended segment is clipped to the canvas first; a segment that
    never crosses the canvas draws nothing.
    """
    a, b = extend_line(p1.as_tuple(), p2.as_tuple(), width, height)
    clipped = clip_segment(a, b, width, height)
    if clipped is None:
        return
    canvas.draw_line(clipped[0], clipped[1], LINE_STYLE)


def draw_pair(canvas, p1: ProjectedPoint, p2: ProjectedPoint, width: int, height: int):
    """Extended line plus the two circles of equal radius |p1 p2|."""
    draw_extended_line(canvas, p1.pixel, p2.pixel, width, height)

    radius = point_distance(p1.view_x, p1.view_y, p2.view_x, p2.view_y)
    canvas.draw_circle(p1.pixel.as_tuple(), radius, CIRCLE_STYLE)
    canvas.draw_circle(p2.pixel.as_tuple(), radius, CIRCLE_STYLE)


# ---------------------------------------------------------------------
#  Modes
# ---------------------------------------------------------------------

def render_points(canvas, projected: List[ProjectedPoint], config: RenderConfig):
    for p in projected:
        draw_point(canvas, p.pixel, config.point_size)


def render_lines(canvas, projected: List[ProjectedPoint], config: RenderConfig):
    width, height = config.output_width, config.output_height
    count = len(projected)

    for i in range(count):
        p1 = projected[i]
        if config.draw_points_in_line_mode:
            draw_point(canvas, p1.pixel, config.point_size)

        for j in range(i + 1, count):
            draw_pair(canvas, p1, projected[j], width, height)


# ---------------------------------------------------------------------
#  Entry point
# ---------------------------------------------------------------------

def render(
    points: Sequence[RawPoint],
    config: RenderConfig,
    bounds: Optional[Bounds] = None,
    canvas=None,
) -> np.ndarray:
    """
    Renders the points according to config and returns the raster.

    Args:
        points: RawPoints in file order.
        config: mode, output size and point size.
        bounds: bounds from the loader. Computed from the points when
            omitted (which drops values from partially-valid lines).
        canvas: anything with fill_circle / draw_circle / draw_line;
            a white Canvas of the configured size by default.

    Returns:
        The BGR uint8 image of the canvas (None for canvases without one).

    Raises:
        EmptyDataError: no points.
        DegenerateDataError: zero range on an axis.
        RenderError: a coordinate cannot be rasterized.
    """
    if not points:
        raise EmptyDataError("No valid data points were loaded; nothing to plot.")

    if bounds is None:
        bounds = Bounds.from_points(points)

    transform = ViewTransform.from_bounds(bounds, config.output_width, config.output_height)

    # all coordinates are checked before the first primitive is drawn
    projected = project_points(points, transform)

    if canvas is None:
        canvas = Canvas(config.output_width, config.output_height)

    if config.mode == ProgramMode.POINTS:
        render_points(canvas, projected, config)
    else:
        render_lines(canvas, projected, config)

    return getattr(canvas, "image", None)
