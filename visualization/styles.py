"""
Immutable style descriptors passed by value into every draw call.
"""

from dataclasses import dataclass
from typing import Optional, Tuple

from config import COLOR_POINT_FILL, COLOR_STROKE, STROKE_WIDTH

Color = Tuple[int, int, int]


@dataclass(frozen=True)
class Style:
    """
    fill_color:   interior colour (B, G, R), or None for outline-only shapes
    stroke_color: outline / line colour (B, G, R)
    stroke_width: outline / line width in pixels
    """
    fill_color: Optional[Color] = None
    stroke_color: Color = COLOR_STROKE
    stroke_width: int = STROKE_WIDTH


# ---------------------------------------------------------------------
#  Styles used by the renderer (matching the original program)
# ---------------------------------------------------------------------

POINT_STYLE = Style(fill_color=COLOR_POINT_FILL)
CIRCLE_STYLE = Style()
LINE_STYLE = Style()
