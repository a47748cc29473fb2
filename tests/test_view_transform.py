"""Tests for models.view_transform module."""

from decimal import Decimal

import pytest

from errors import DegenerateDataError, EmptyDataError, RenderError
from helpers import make_points
from models.bounds import Bounds
from models.point import PixelPoint, RawPoint
from models.view_transform import ViewTransform, to_pixel_float


def bounds_of(*pairs) -> Bounds:
    return Bounds.from_points(make_points(*pairs))


class TestFromBounds:
    """Tests for deriving the transform from bounds."""

    def test_two_point_square(self):
        """(0,0) and (10,10) at width 100."""
        t = ViewTransform.from_bounds(bounds_of((0, 0), (10, 10)), 100, 100)

        assert t.range_x == 10
        assert t.range_y == 10
        assert t.aspect_ratio == 1
        assert t.view_range_x == 40
        assert t.view_range_y == 40
        assert t.view_offset_x == -15
        assert t.view_offset_y == -15
        assert t.scale_x == Decimal("2.5")
        assert t.scale_y == Decimal("2.5")

    def test_height_does_not_change_scales(self):
        b = bounds_of((0, 0), (10, 5))
        t1 = ViewTransform.from_bounds(b, 200, 100)
        t2 = ViewTransform.from_bounds(b, 200, 900)

        assert t1.scale_x == t2.scale_x
        assert t1.scale_y == t2.scale_y
        assert t2.output_height == 900

    def test_scale_y_divided_by_aspect_ratio(self):
        t = ViewTransform.from_bounds(bounds_of((0, 0), (20, 10)), 400, 400)

        assert t.aspect_ratio == 2
        assert t.scale_x == 5                  # 400 / 80
        assert t.scale_y == 5                  # (400 / 40) / 2

    def test_fields_are_decimal(self):
        t = ViewTransform.from_bounds(bounds_of((0, 0), (3, 7)), 1000, 1000)
        assert isinstance(t.scale_y, Decimal)
        assert isinstance(t.aspect_ratio, Decimal)

    def test_zero_y_range_is_fatal(self):
        with pytest.raises(DegenerateDataError) as exc:
            ViewTransform.from_bounds(bounds_of((1, 2), (3, 2)), 100, 100)
        assert exc.value.axis == "y"

    def test_zero_x_range_is_fatal(self):
        with pytest.raises(DegenerateDataError) as exc:
            ViewTransform.from_bounds(bounds_of((1, 2), (1, 5)), 100, 100)
        assert exc.value.axis == "x"

    def test_single_point_is_degenerate(self):
        with pytest.raises(DegenerateDataError):
            ViewTransform.from_bounds(bounds_of((4, 4)), 100, 100)

    def test_undefined_bounds_are_fatal(self):
        with pytest.raises(EmptyDataError):
            ViewTransform.from_bounds(Bounds(), 100, 100)

    def test_one_axis_only_is_fatal(self):
        b = Bounds()
        b.update_y(Decimal("3"))
        with pytest.raises(EmptyDataError):
            ViewTransform.from_bounds(b, 100, 100)


class TestMapToPixel:
    """Tests for mapping data points to pixels."""

    def test_two_point_square(self):
        t = ViewTransform.from_bounds(bounds_of((0, 0), (10, 10)), 100, 100)
        a, b = make_points((0, 0), (10, 10))

        assert t.map_to_pixel(a) == PixelPoint(37.5, 37.5)
        assert t.map_to_pixel(b) == PixelPoint(62.5, 62.5)

    def test_y_offset_multiplied_by_aspect_ratio(self):
        """y = (raw.y - view_offset_y * aspect_ratio) * scale_y"""
        t = ViewTransform.from_bounds(bounds_of((0, 0), (20, 10)), 400, 400)
        # view_offset_y = -15, aspect_ratio = 2, scale_y = 5
        x, y = t.map_to_view(RawPoint(Decimal("0"), Decimal("0")))

        assert x == 150                         # (0 + 30) * 5
        assert y == 150                         # (0 + 15 * 2) * 5

    def test_map_to_view_stays_decimal(self):
        t = ViewTransform.from_bounds(bounds_of((0, 0), (3, 7)), 1000, 1000)
        x, y = t.map_to_view(RawPoint(Decimal("1"), Decimal("1")))
        assert isinstance(x, Decimal) and isinstance(y, Decimal)

    def test_mapping_is_affine(self):
        t = ViewTransform.from_bounds(bounds_of((-3, 2), (17, 9)), 640, 480)
        a = RawPoint(Decimal("1.25"), Decimal("4.5"))
        b = RawPoint(Decimal("-2"), Decimal("8.75"))

        pa, pb = t.map_to_pixel(a), t.map_to_pixel(b)

        assert pa.x - pb.x == pytest.approx(float((a.x - b.x) * t.scale_x))
        assert pa.y - pb.y == pytest.approx(float((a.y - b.y) * t.scale_y))


class TestToPixelFloat:
    """Tests for the Decimal → float boundary."""

    def test_regular_value(self):
        assert to_pixel_float(Decimal("12.5")) == 12.5

    def test_overflow_raises(self):
        with pytest.raises(RenderError):
            to_pixel_float(Decimal("1e400"))
