from dataclasses import dataclass
from decimal import Decimal


@dataclass(frozen=True)
class RawPoint:
    """
    One data point exactly as read from the input file.

    Coordinates stay Decimal so no precision is lost before the view
    transform; the cast to float happens only for PixelPoint.
    """
    x: Decimal
    y: Decimal


@dataclass(frozen=True)
class PixelPoint:
    """A point in output-image space (pixels, float)."""
    x: float
    y: float

    def as_tuple(self):
        return (self.x, self.y)

    def __repr__(self):
        return f"PixelPoint({self.x:.3f}, {self.y:.3f})"
