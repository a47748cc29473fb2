from dataclasses import dataclass
from decimal import Decimal
from typing import Iterable, Optional

from models.point import RawPoint


@dataclass
class Bounds:
    """
    Running extrema of every value observed while loading.

    The axes are updated independently (update_x / update_y) because the
    loader updates each field as soon as it parses, before it knows whether
    the rest of the record is valid. An axis with no observation stays None.
    """

    min_x: Optional[Decimal] = None
    min_y: Optional[Decimal] = None
    max_x: Optional[Decimal] = None
    max_y: Optional[Decimal] = None

    # -------------------------------------------------------------
    #   Incremental updates
    # -------------------------------------------------------------

    def update_x(self, value: Decimal):
        if self.min_x is None or value < self.min_x:
            self.min_x = value
        if self.max_x is None or value > self.max_x:
            self.max_x = value

    def update_y(self, value: Decimal):
        if self.min_y is None or value < self.min_y:
            self.min_y = value
        if self.max_y is None or value > self.max_y:
            self.max_y = value

    # -------------------------------------------------------------
    #   Queries
    # -------------------------------------------------------------

    @property
    def has_x(self) -> bool:
        return self.min_x is not None

    @property
    def has_y(self) -> bool:
        return self.min_y is not None

    @property
    def is_defined(self) -> bool:
        return self.has_x and self.has_y

    @classmethod
    def from_points(cls, points: Iterable[RawPoint]) -> "Bounds":
        """Bounds over complete points only (no partial-record values)."""
        bounds = cls()
        for p in points:
            bounds.update_x(p.x)
            bounds.update_y(p.y)
        return bounds
