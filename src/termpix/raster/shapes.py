# =============================================================================
# Shape Rasterizer
# =============================================================================
# Integer algorithms that draw lines, ellipses and rectangles into a
# Framebuffer. Every pixel goes through Framebuffer.plot(), which silently
# drops points outside the canvas, so shapes may hang off any edge.
#
# Colour arguments are DrawColor values: a Color paints, None skips that
# pass. For shapes with both passes, fill is always drawn first so the
# outline stays visible on top.
# =============================================================================

from termpix.core.color import Color, DrawColor
from termpix.core.framebuffer import Framebuffer
from termpix.raster.intmath import half, isqrt


# =============================================================================
# Primitives
# =============================================================================

def plot_point(fb: Framebuffer, x: int, y: int, color: DrawColor) -> bool:
    """Plot one pixel. Returns False if it was outside or color is None."""
    if color is None:
        return False
    return fb.plot(x, y, color)


def hspan(fb: Framebuffer, x1: int, x2: int, y: int, color: Color) -> None:
    """Fill the horizontal run [x1, x2] on row y (inclusive)."""
    if not 0 <= y < fb.height:
        return
    for x in range(max(x1, 0), min(x2, fb.width - 1) + 1):
        fb.plot(x, y, color)


def _plot_quadrants(fb: Framebuffer, cx: int, cy: int, x: int, y: int, color: Color) -> None:
    fb.plot(cx + x, cy + y, color)
    fb.plot(cx - x, cy + y, color)
    fb.plot(cx + x, cy - y, color)
    fb.plot(cx - x, cy - y, color)


# =============================================================================
# Line
# =============================================================================

def draw_line(
    fb: Framebuffer,
    x1: int,
    y1: int,
    x2: int,
    y2: int,
    color: DrawColor,
) -> None:
    """
    Draw a line between two points using Bresenham's algorithm.

    The axis with the larger delta drives the walk; the other axis steps
    whenever the accumulated error goes negative. Both endpoints are
    plotted.

    The walk always starts from the endpoint with the smaller driving-axis
    coordinate, so drawing A->B and B->A paints exactly the same pixels.

    Args:
        fb: Framebuffer to draw into.
        x1, y1: First endpoint.
        x2, y2: Second endpoint.
        color: Line colour (None draws nothing).
    """
    if color is None:
        return

    dx = abs(x2 - x1)
    dy = abs(y2 - y1)

    if dx > dy:
        # X drives: walk left to right
        if x1 > x2:
            x1, y1, x2, y2 = x2, y2, x1, y1
        sy = 1 if y2 > y1 else -1
        err = dx // 2
        x, y = x1, y1
        while x != x2:
            fb.plot(x, y, color)
            err -= dy
            if err < 0:
                y += sy
                err += dx
            x += 1
    else:
        # Y drives (also covers dx == dy and the single-point case)
        if y1 > y2:
            x1, y1, x2, y2 = x2, y2, x1, y1
        sx = 1 if x2 > x1 else -1
        err = dy // 2
        x, y = x1, y1
        while y != y2:
            fb.plot(x, y, color)
            err -= dx
            if err < 0:
                x += sx
                err += dy
            y += 1

    fb.plot(x2, y2, color)


# =============================================================================
# Ellipse / Circle
# =============================================================================

def draw_ellipse(
    fb: Framebuffer,
    cx: int,
    cy: int,
    width: int,
    height: int,
    line_color: DrawColor,
    fill_color: DrawColor = None,
) -> None:
    """
    Draw an ellipse (a circle when width == height) centred on (cx, cy).

    The fill is a scan-line pass using the ellipse equation; the outline is
    the two-region midpoint algorithm, plotting all four quadrants at each
    step.

    If either radius (width // 2, height // 2) is zero or negative, only
    the centre point is plotted in the line colour.

    Args:
        fb: Framebuffer to draw into.
        cx, cy: Centre point.
        width: Horizontal diameter in pixels.
        height: Vertical diameter in pixels.
        line_color: Outline colour, or None for no outline.
        fill_color: Interior colour, or None for no fill.
    """
    rx = half(width)
    ry = half(height)

    if rx <= 0 or ry <= 0:
        if line_color is not None:
            fb.plot(cx, cy, line_color)
        return

    rx_sq = rx * rx
    ry_sq = ry * ry

    if fill_color is not None:
        for y in range(-ry, ry + 1):
            inner = max(rx_sq * (ry_sq - y * y), 0)
            x_bound = isqrt(inner) // ry
            hspan(fb, cx - x_bound, cx + x_bound, cy + y, fill_color)

    if line_color is None:
        return

    two_rx_sq = 2 * rx_sq
    two_ry_sq = 2 * ry_sq
    x = 0
    y = ry
    px = 0
    py = two_rx_sq * y

    _plot_quadrants(fb, cx, cy, x, y, line_color)

    # Region 1: slope magnitude < 1, step x every iteration
    p = ry_sq - rx_sq * ry + rx_sq // 4
    while px < py:
        x += 1
        px += two_ry_sq
        if p < 0:
            p += ry_sq + px
        else:
            y -= 1
            py -= two_rx_sq
            p += ry_sq + px - py
        _plot_quadrants(fb, cx, cy, x, y, line_color)

    # Region 2: slope magnitude >= 1, step y every iteration
    p = ry_sq * (x * x + x) + rx_sq * (y - 1) * (y - 1) - rx_sq * ry_sq
    while y > 0:
        y -= 1
        py -= two_rx_sq
        if p > 0:
            p += rx_sq - py
        else:
            x += 1
            px += two_ry_sq
            p += rx_sq - py + px
        _plot_quadrants(fb, cx, cy, x, y, line_color)


draw_circle = draw_ellipse


# =============================================================================
# Rectangle
# =============================================================================

def rectangle_bounds(cx: int, cy: int, width: int, height: int) -> tuple[int, int, int, int]:
    """
    Compute (left, bottom, right, top) for a rectangle centred on (cx, cy).

    For even sizes the right/top edge moves one pixel inward, so the box is
    exactly `width` x `height` pixels whatever the parity.
    """
    left = cx - half(width)
    right = cx + half(width)
    bottom = cy - half(height)
    top = cy + half(height)

    if width % 2 == 0:
        right -= 1
    if height % 2 == 0:
        top -= 1

    return left, bottom, right, top


def draw_rectangle(
    fb: Framebuffer,
    cx: int,
    cy: int,
    width: int,
    height: int,
    line_color: DrawColor,
    fill_color: DrawColor = None,
) -> None:
    """
    Draw an axis-aligned rectangle centred on (cx, cy).

    Width and height are independent, so this is also draw_square. The
    outline is 1 pixel thick and is drawn after the fill.

    Args:
        fb: Framebuffer to draw into.
        cx, cy: Centre point.
        width: Width in pixels.
        height: Height in pixels.
        line_color: Outline colour, or None for no outline.
        fill_color: Interior colour, or None for no fill.
    """
    left, bottom, right, top = rectangle_bounds(cx, cy, width, height)

    if fill_color is not None:
        for y in range(bottom, top + 1):
            hspan(fb, left, right, y, fill_color)

    if line_color is not None:
        # Top and bottom edges
        for x in range(left, right + 1):
            fb.plot(x, top, line_color)
            fb.plot(x, bottom, line_color)
        # Left and right edges
        for y in range(bottom, top + 1):
            fb.plot(left, y, line_color)
            fb.plot(right, y, line_color)


draw_square = draw_rectangle
