# =============================================================================
# Rasterizer Module
# =============================================================================
# Pure geometric drawing algorithms that write into a Framebuffer:
#   - Lines: Bresenham
#   - Ellipses/circles: scan-line fill + midpoint outline
#   - Rectangles: box fill + 1-pixel border
#
# Plus the integer square root the ellipse fill relies on.
# =============================================================================

from termpix.raster.intmath import half, isqrt
from termpix.raster.shapes import (
    draw_circle,
    draw_ellipse,
    draw_line,
    draw_rectangle,
    draw_square,
    hspan,
    plot_point,
    rectangle_bounds,
)

__all__ = [
    "draw_circle",
    "draw_ellipse",
    "draw_line",
    "draw_rectangle",
    "draw_square",
    "half",
    "hspan",
    "isqrt",
    "plot_point",
    "rectangle_bounds",
]
