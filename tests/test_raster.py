# =============================================================================
# Rasterizer Tests
# =============================================================================
# Lines, ellipses and rectangles drawn into a framebuffer.
# =============================================================================

import pytest

from termpix.core import Color, Framebuffer, Point
from termpix.raster import (
    draw_ellipse,
    draw_line,
    draw_rectangle,
    half,
    hspan,
    isqrt,
    plot_point,
    rectangle_bounds,
)


def painted(fb: Framebuffer) -> set[Point]:
    """Every point that isn't the black background."""
    return {point for point, color in fb.pixels() if color is not Color.BLACK}


# =============================================================================
# Integer Math
# =============================================================================

class TestIsqrt:
    def test_floor_property(self):
        for n in range(0, 2000):
            r = isqrt(n)
            assert r * r <= n < (r + 1) * (r + 1), n

    def test_small_values(self):
        assert isqrt(0) == 0
        assert isqrt(1) == 1
        assert isqrt(2) == 1
        assert isqrt(3) == 1
        assert isqrt(4) == 2

    def test_negative_is_zero(self):
        assert isqrt(-9) == 0

    def test_large(self):
        assert isqrt(10 ** 12) == 10 ** 6
        assert isqrt(10 ** 12 - 1) == 10 ** 6 - 1


def test_half_truncates_toward_zero():
    assert half(7) == 3
    assert half(-7) == -3
    assert half(-3) == -1
    assert half(0) == 0


# =============================================================================
# Points & Spans
# =============================================================================

def test_plot_point_transparent(framebuffer):
    assert plot_point(framebuffer, 1, 1, None) is False
    assert painted(framebuffer) == set()


def test_hspan_is_clipped(framebuffer):
    hspan(framebuffer, -5, 10, 1, Color.RED)
    assert framebuffer.row(1) == [Color.RED] * 4
    hspan(framebuffer, 0, 3, 9, Color.RED)
    assert framebuffer.count(Color.RED) == 4


# =============================================================================
# Lines
# =============================================================================

class TestLine:
    def test_single_point(self, large_framebuffer):
        draw_line(large_framebuffer, 5, 5, 5, 5, Color.RED)
        assert painted(large_framebuffer) == {Point(5, 5)}

    def test_horizontal(self, large_framebuffer):
        draw_line(large_framebuffer, 1, 3, 8, 3, Color.RED)
        assert painted(large_framebuffer) == {Point(x, 3) for x in range(1, 9)}

    def test_vertical(self, large_framebuffer):
        draw_line(large_framebuffer, 4, 9, 4, 2, Color.RED)
        assert painted(large_framebuffer) == {Point(4, y) for y in range(2, 10)}

    def test_diagonal(self, large_framebuffer):
        draw_line(large_framebuffer, 0, 0, 4, 4, Color.RED)
        assert painted(large_framebuffer) == {Point(i, i) for i in range(5)}

    def test_shallow_slope(self, large_framebuffer):
        draw_line(large_framebuffer, 0, 0, 5, 2, Color.RED)
        assert painted(large_framebuffer) == {
            Point(0, 0), Point(1, 0), Point(2, 1),
            Point(3, 1), Point(4, 2), Point(5, 2),
        }

    @pytest.mark.parametrize(
        "x1, y1, x2, y2",
        [(3, 4, 40, 17), (10, 30, 2, 1), (0, 39, 59, 0), (7, 2, 9, 35), (5, 5, 25, 25)],
    )
    def test_direction_does_not_matter(self, x1, y1, x2, y2):
        forward = Framebuffer(60, 40)
        backward = Framebuffer(60, 40)
        draw_line(forward, x1, y1, x2, y2, Color.RED)
        draw_line(backward, x2, y2, x1, y1, Color.RED)
        assert painted(forward) == painted(backward)

    @pytest.mark.parametrize(
        "x1, y1, x2, y2",
        [(3, 4, 40, 17), (10, 30, 2, 1), (7, 2, 9, 35)],
    )
    def test_one_pixel_per_step_of_longer_axis(self, large_framebuffer, x1, y1, x2, y2):
        draw_line(large_framebuffer, x1, y1, x2, y2, Color.RED)
        points = painted(large_framebuffer)
        assert len(points) == max(abs(x2 - x1), abs(y2 - y1)) + 1
        assert Point(x1, y1) in points
        assert Point(x2, y2) in points

    def test_clipped_at_edges(self, framebuffer):
        draw_line(framebuffer, -10, 0, 10, 0, Color.RED)
        assert framebuffer.row(0) == [Color.RED] * 4

    def test_transparent_draws_nothing(self, large_framebuffer):
        draw_line(large_framebuffer, 0, 0, 10, 10, None)
        assert painted(large_framebuffer) == set()


# =============================================================================
# Ellipses
# =============================================================================

class TestEllipse:
    def test_circle_outline_and_fill(self, large_framebuffer):
        draw_ellipse(large_framebuffer, 20, 20, 10, 10, Color.RED, Color.YELLOW)
        fb = large_framebuffer
        assert fb.get(20, 20) is Color.YELLOW
        # Extremes of the outline
        for x, y in [(25, 20), (15, 20), (20, 25), (20, 15)]:
            assert fb.get(x, y) is Color.RED
        # Nothing past the radius
        for x, y in [(26, 20), (14, 20), (20, 26), (20, 14)]:
            assert fb.get(x, y) is Color.BLACK

    def test_outline_only_leaves_inside_alone(self, large_framebuffer):
        draw_ellipse(large_framebuffer, 20, 20, 10, 10, Color.RED)
        assert large_framebuffer.get(20, 20) is Color.BLACK
        assert large_framebuffer.count(Color.RED) > 0

    def test_fill_only(self, large_framebuffer):
        draw_ellipse(large_framebuffer, 20, 20, 10, 10, None, Color.BLUE)
        assert large_framebuffer.get(20, 20) is Color.BLUE
        assert large_framebuffer.get(25, 20) is Color.BLUE

    def test_symmetric_about_centre(self, large_framebuffer):
        draw_ellipse(large_framebuffer, 30, 20, 30, 16, Color.RED)
        points = painted(large_framebuffer)
        for p in points:
            assert Point(60 - p.x, p.y) in points
            assert Point(p.x, 40 - p.y) in points

    def test_outline_wins_over_fill(self, large_framebuffer):
        draw_ellipse(large_framebuffer, 30, 20, 20, 12, Color.RED, Color.GREEN)
        outline_only = Framebuffer(60, 40)
        draw_ellipse(outline_only, 30, 20, 20, 12, Color.RED)
        assert large_framebuffer.points(Color.RED) == outline_only.points(Color.RED)

    @pytest.mark.parametrize("width, height", [(1, 10), (10, 1), (0, 0), (-4, 6)])
    def test_degenerate_plots_centre(self, large_framebuffer, width, height):
        draw_ellipse(large_framebuffer, 10, 10, width, height, Color.RED, Color.BLUE)
        assert painted(large_framebuffer) == {Point(10, 10)}
        assert large_framebuffer.get(10, 10) is Color.RED

    def test_degenerate_without_outline(self, large_framebuffer):
        draw_ellipse(large_framebuffer, 10, 10, 1, 1, None, Color.BLUE)
        assert painted(large_framebuffer) == set()

    def test_hanging_off_the_edge(self, framebuffer):
        draw_ellipse(framebuffer, 0, 0, 20, 20, Color.RED, Color.BLUE)
        assert framebuffer.count(Color.BLUE) == 16


# =============================================================================
# Rectangles
# =============================================================================

class TestRectangle:
    def test_even_size_shifts_inward(self):
        left, bottom, right, top = rectangle_bounds(10, 10, 4, 4)
        assert (left, bottom, right, top) == (8, 8, 11, 11)
        assert right - left + 1 == 4

    def test_odd_size_is_centred(self):
        assert rectangle_bounds(10, 10, 5, 3) == (8, 9, 12, 11)

    def test_fill_and_outline(self, large_framebuffer):
        draw_rectangle(large_framebuffer, 10, 10, 4, 4, Color.WHITE, Color.BLUE)
        assert large_framebuffer.count(Color.WHITE) == 12
        assert large_framebuffer.points(Color.BLUE) == {
            Point(9, 9), Point(10, 9), Point(9, 10), Point(10, 10),
        }

    def test_outline_only(self, large_framebuffer):
        draw_rectangle(large_framebuffer, 10, 10, 5, 5, Color.MAGENTA)
        assert large_framebuffer.count(Color.MAGENTA) == 16
        assert large_framebuffer.get(10, 10) is Color.BLACK

    def test_clipped_at_origin(self, large_framebuffer):
        draw_rectangle(large_framebuffer, 0, 0, 6, 6, Color.WHITE, Color.BLUE)
        # Visible part is x, y in 0..2
        assert painted(large_framebuffer) == {
            Point(x, y) for x in range(3) for y in range(3)
        }
        assert large_framebuffer.get(2, 2) is Color.WHITE
        assert large_framebuffer.get(0, 0) is Color.BLUE
