# =============================================================================
# termpix Core Module
# =============================================================================
# The core data model for termpix. These are plain Python types with no
# external dependencies, importable from anywhere without circular imports.
#
#   - Color: The 16 terminal colours, each carrying its SGR codes
#   - Framebuffer: The pixel grid everything draws into
#   - Point: An integer pixel coordinate
# =============================================================================

from termpix.core.color import (
    FRACTAL_PALETTE,
    Color,
    DrawColor,
    UnknownColorError,
    color_names,
    parse_draw_color,
)
from termpix.core.framebuffer import (
    Framebuffer,
    InvalidDimension,
    PixelOutOfBounds,
    Point,
)

__all__ = [
    "Color",
    "DrawColor",
    "FRACTAL_PALETTE",
    "Framebuffer",
    "InvalidDimension",
    "PixelOutOfBounds",
    "Point",
    "UnknownColorError",
    "color_names",
    "parse_draw_color",
]
