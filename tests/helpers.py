"""Test helpers shared by several test modules."""

from decimal import Decimal
from typing import List

from models.point import RawPoint


class RecordingCanvas:
    """Canvas stand-in that records every primitive call in order."""

    def __init__(self):
        self.calls = []

    def fill_circle(self, center, radius, style):
        self.calls.append(("fill_circle", center, radius, style))

    def draw_circle(self, center, radius, style):
        self.calls.append(("draw_circle", center, radius, style))

    def draw_line(self, p1, p2, style):
        self.calls.append(("draw_line", p1, p2, style))

    def count(self, kind, style=None) -> int:
        return sum(
            1 for c in self.calls
            if c[0] == kind and (style is None or c[3] == style)
        )


def make_points(*pairs) -> List[RawPoint]:
    return [RawPoint(Decimal(str(x)), Decimal(str(y))) for x, y in pairs]
