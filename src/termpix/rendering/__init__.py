# =============================================================================
# Rendering Module
# =============================================================================
# Gets framebuffer contents onto the terminal.
#
#   - AnsiRenderer: framebuffer -> half-block glyphs + minimal SGR codes
#   - TerminalOutput: cursor control, clearing, buffered writes
#   - get_terminal_geometry: current columns x rows
#
# The rendering pipeline:
#   1. Walk the framebuffer one character row (two pixel rows) at a time
#   2. Pick a glyph per cell and emit colour codes only on change
#   3. Write the assembled frame with the cursor hidden, in one flush
# =============================================================================

from termpix.rendering.ansi import (
    GLYPH_FULL,
    GLYPH_LOWER,
    GLYPH_UPPER,
    RESET,
    AnsiRenderer,
    sgr,
    sgr_codes,
)
from termpix.rendering.terminal import (
    TerminalGeometry,
    TerminalOutput,
    TerminalSizeError,
    get_terminal_geometry,
)

__all__ = [
    "AnsiRenderer",
    "GLYPH_FULL",
    "GLYPH_LOWER",
    "GLYPH_UPPER",
    "RESET",
    "TerminalGeometry",
    "TerminalOutput",
    "TerminalSizeError",
    "get_terminal_geometry",
    "sgr",
    "sgr_codes",
]
