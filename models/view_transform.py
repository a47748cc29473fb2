import math
from dataclasses import dataclass
from decimal import Decimal, localcontext
from typing import Tuple

from config import DECIMAL_PRECISION, VIEW_OFFSET_FACTOR, VIEW_RANGE_FACTOR
from errors import DegenerateDataError, EmptyDataError, RenderError
from models.bounds import Bounds
from models.point import PixelPoint, RawPoint


@dataclass(frozen=True)
class ViewTransform:
    """
    Maps data space (Decimal) to output-image pixel space.

    The view is VIEW_RANGE_FACTOR times the data range on each axis and is
    shifted so the data starts VIEW_OFFSET_FACTOR ranges in from the edge.
    Both scales derive from the output width; the y scale is divided by
    the aspect ratio. output_height is recorded but does not enter any
    scale factor.

    All fields are Decimal. Only map_to_pixel casts to float.
    """

    output_width: int
    output_height: int

    range_x: Decimal
    range_y: Decimal
    aspect_ratio: Decimal

    view_range_x: Decimal
    view_range_y: Decimal
    view_offset_x: Decimal
    view_offset_y: Decimal

    scale_x: Decimal
    scale_y: Decimal

    # ------------------------------------------------------------
    # Construction
    # ------------------------------------------------------------
    @classmethod
    def from_bounds(cls, bounds: Bounds, output_width: int, output_height: int) -> "ViewTransform":
        """
        Derives the transform from the loaded bounds.

        Raises:
            EmptyDataError: no value was observed on some axis.
            DegenerateDataError: an axis has zero range, which would make
                the aspect ratio or a scale factor a division by zero.
        """
        if not bounds.is_defined:
            raise EmptyDataError("No valid data points were loaded; nothing to plot.")

        range_factor = Decimal(str(VIEW_RANGE_FACTOR))
        offset_factor = Decimal(str(VIEW_OFFSET_FACTOR))
        width = Decimal(output_width)

        with localcontext() as ctx:
            ctx.prec = DECIMAL_PRECISION

            range_x = bounds.max_x - bounds.min_x
            range_y = bounds.max_y - bounds.min_y

            # y first: a zero range_y is what breaks the aspect ratio
            if range_y == 0:
                raise DegenerateDataError("y")
            if range_x == 0:
                raise DegenerateDataError("x")

            aspect_ratio = range_x / range_y

            view_range_x = range_factor * range_x
            view_range_y = range_factor * range_y

            view_offset_x = bounds.min_x - offset_factor * range_x
            view_offset_y = bounds.min_y - offset_factor * range_y

            scale_x = width / view_range_x
            scale_y = (width / view_range_y) / aspect_ratio

        return cls(
            output_width=output_width,
            output_height=output_height,
            range_x=range_x,
            range_y=range_y,
            aspect_ratio=aspect_ratio,
            view_range_x=view_range_x,
            view_range_y=view_range_y,
            view_offset_x=view_offset_x,
            view_offset_y=view_offset_y,
            scale_x=scale_x,
            scale_y=scale_y,
        )

    # ------------------------------------------------------------
    # Mapping
    # ------------------------------------------------------------
    def map_to_view(self, raw: RawPoint) -> Tuple[Decimal, Decimal]:
        """
        Pixel coordinates at Decimal precision.

        The y offset is multiplied by the aspect ratio here (and only here).
        """
        with localcontext() as ctx:
            ctx.prec = DECIMAL_PRECISION
            x = (raw.x - self.view_offset_x) * self.scale_x
            y = (raw.y - self.view_offset_y * self.aspect_ratio) * self.scale_y
        return x, y

    def map_to_pixel(self, raw: RawPoint) -> PixelPoint:
        """map_to_view cast to float; non-finite results raise RenderError."""
        x, y = self.map_to_view(raw)
        return PixelPoint(to_pixel_float(x), to_pixel_float(y))


def to_pixel_float(value: Decimal) -> float:
    """Casts a Decimal pixel coordinate to float, refusing overflow."""
    f = float(value)
    if not math.isfinite(f):
        raise RenderError(f"Pixel coordinate {value} cannot be represented as a float.")
    return f
