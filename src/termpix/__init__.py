# =============================================================================
# termpix: Pixel Graphics in the Terminal
# =============================================================================
#
# termpix draws pixel graphics with Unicode half-block characters. Every
# character cell holds two pixels, one above the other, each in one of the
# 16 standard terminal colours.
#
# Features:
#   - Framebuffer with bottom-left origin
#   - Lines, circles/ellipses and rectangles (outline and fill)
#   - Mandelbrot and Julia set rendering with progress and cancellation
#   - Compact output: colour codes only where the colour changes
#   - Textual menu plus a one-shot command line
#
# =============================================================================

__version__ = "0.1.0"
__app_name__ = "termpix"

# Main entry point - this is what gets called by the 'termpix' command
from termpix.app import main

__all__ = ["main", "__version__", "__app_name__"]
