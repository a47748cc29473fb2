"""Tests for visualization.canvas module."""

import pytest

from config import COLOR_POINT_FILL
from errors import RenderError
from visualization.canvas import Canvas
from visualization.styles import CIRCLE_STYLE, LINE_STYLE, POINT_STYLE, Style


class TestCanvas:

    def test_white_background(self):
        canvas = Canvas(30, 20)
        assert canvas.image.shape == (20, 30, 3)
        assert (canvas.image == 255).all()

    def test_fill_circle(self):
        canvas = Canvas(50, 50)
        canvas.fill_circle((25.0, 25.0), 5.0, POINT_STYLE)

        assert tuple(canvas.image[25, 25]) == COLOR_POINT_FILL
        assert tuple(canvas.image[0, 0]) == (255, 255, 255)

    def test_circle_outline_leaves_center(self):
        canvas = Canvas(50, 50)
        canvas.draw_circle((25.0, 25.0), 10.0, CIRCLE_STYLE)

        assert tuple(canvas.image[25, 25]) == (255, 255, 255)
        assert tuple(canvas.image[25, 35]) == (0, 0, 0)

    def test_line(self):
        canvas = Canvas(50, 50)
        canvas.draw_line((0.0, 10.0), (49.0, 10.0), LINE_STYLE)

        assert (canvas.image[10, :] == 0).all()
        assert (canvas.image[20, :] == 255).all()

    def test_style_colour_and_width(self):
        canvas = Canvas(50, 50)
        thick_red = Style(stroke_color=(0, 0, 255), stroke_width=3)
        canvas.draw_line((0.0, 25.0), (49.0, 25.0), thick_red)

        assert tuple(canvas.image[24, 20]) == (0, 0, 255)
        assert tuple(canvas.image[26, 20]) == (0, 0, 255)

    def test_non_finite_coordinate_raises(self):
        canvas = Canvas(10, 10)
        with pytest.raises(RenderError):
            canvas.draw_line((0.0, float("inf")), (5.0, 5.0), LINE_STYLE)

    def test_circle_enclosing_canvas_draws_nothing(self):
        canvas = Canvas(10, 10)
        canvas.draw_circle((5.0, 5.0), 1e12, CIRCLE_STYLE)
        assert (canvas.image == 255).all()

    def test_off_canvas_circles_are_skipped(self):
        canvas = Canvas(20, 20)
        canvas.fill_circle((10.0, 5e8), 10.0, POINT_STYLE)
        canvas.draw_circle((-3e9, 10.0), 10.0, CIRCLE_STYLE)
        assert (canvas.image == 255).all()

    def test_huge_circle_arc_crossing_canvas(self):
        """A circle far below the canvas whose top edge runs along row 25."""
        canvas = Canvas(50, 50)
        canvas.draw_circle((25.0, 25.0 + 1e9), 1e9, CIRCLE_STYLE)

        assert tuple(canvas.image[25, 25]) == (0, 0, 0)
        assert tuple(canvas.image[10, 25]) == (255, 255, 255)
        assert tuple(canvas.image[40, 25]) == (255, 255, 255)

    def test_huge_disc_covering_canvas(self):
        canvas = Canvas(20, 20)
        canvas.fill_circle((10.0, 10.0), 1e12, POINT_STYLE)
        assert (canvas.image == COLOR_POINT_FILL).all(axis=2).all()

    def test_non_finite_radius_raises(self):
        canvas = Canvas(10, 10)
        with pytest.raises(RenderError):
            canvas.draw_circle((5.0, 5.0), float("nan"), CIRCLE_STYLE)

    def test_line_far_outside_is_clipped(self):
        canvas = Canvas(50, 50)
        canvas.draw_line((-1e12, 20.0), (1e12, 20.0), LINE_STYLE)

        assert (canvas.image[20, :] == 0).all()
