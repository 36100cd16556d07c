# =============================================================================
# ANSI Half-Block Renderer
# =============================================================================
# Turns a Framebuffer into terminal output.
#
# Each character cell shows two pixels stacked vertically:
#   - Same colour:      █ (full block) in that colour's foreground
#   - Different colour: ▀ (upper half) with fg = upper pixel,
#                       bg = lower pixel
#
# The lower-half glyph ▄ is defined but never needed: swapping fg and bg
# lets the upper-half glyph show any pair.
#
# SGR sequences are only emitted when the active fg/bg actually changes,
# which keeps a uniform row down to a single escape sequence.
#
# Screen row 0 is the top, while pixel y = 0 is the bottom, so rows are
# emitted from the highest y downwards.
# =============================================================================

import logging
from typing import TYPE_CHECKING

from termpix.core.color import Color
from termpix.core.framebuffer import Framebuffer

if TYPE_CHECKING:
    from termpix.rendering.terminal import TerminalOutput

logger = logging.getLogger(__name__)


# Block glyphs
GLYPH_FULL = "█"   # █ both pixels
GLYPH_UPPER = "▀"  # ▀ upper pixel in fg, lower pixel in bg
GLYPH_LOWER = "▄"  # ▄ reserved, unused

ESC = "\033"
RESET = f"{ESC}[0m"

# Used if something that isn't a Color ever reaches the encoder
DEFAULT_FG = Color.WHITE.fg
DEFAULT_BG = Color.BLACK.bg


def sgr_codes(color: object) -> tuple[int, int]:
    """
    The (foreground, background) SGR codes for a colour.

    Anything that isn't a Color falls back to white on black.
    """
    if isinstance(color, Color):
        return color.value
    return DEFAULT_FG, DEFAULT_BG


def sgr(*codes: int) -> str:
    """Build an SGR escape sequence, e.g. sgr(31, 40) -> "\\033[31;40m"."""
    return f"{ESC}[{';'.join(str(code) for code in codes)}m"


class AnsiRenderer:
    """
    Renders framebuffers as half-block characters with SGR colours.

    The renderer keeps no reference to the framebuffer between calls.

    Usage:
        >>> renderer = AnsiRenderer()
        >>> text = renderer.render(fb)          # Just the frame
        >>> renderer.flush(fb, terminal)        # Draw it on screen
    """

    def render_row(self, fb: Framebuffer, row: int) -> str:
        """
        Render one character row.

        Args:
            fb: Framebuffer to read.
            row: Character row, 0 = bottom (pixel rows 0 and 1).

        Returns:
            The row's glyphs and escape codes, ending in a colour reset.
        """
        upper = fb.row(row * 2 + 1)
        lower = fb.row(row * 2)

        parts: list[str] = []
        last_fg: int | None = None
        last_bg: int | None = None

        for top_color, bottom_color in zip(upper, lower):
            if top_color == bottom_color:
                fg, _ = sgr_codes(top_color)
                if fg != last_fg:
                    parts.append(sgr(fg))
                    last_fg = fg
                parts.append(GLYPH_FULL)
            else:
                fg, _ = sgr_codes(top_color)
                _, bg = sgr_codes(bottom_color)
                if fg != last_fg or bg != last_bg:
                    parts.append(sgr(fg, bg))
                    last_fg = fg
                    last_bg = bg
                parts.append(GLYPH_UPPER)

        parts.append(RESET)
        return "".join(parts)

    def render(self, fb: Framebuffer) -> str:
        """
        Render the whole framebuffer, top row first.

        Rows are separated by newlines; there's no newline after the last
        row, so the frame never scrolls a full-height terminal.
        """
        lines = [self.render_row(fb, row) for row in range(fb.rows - 1, -1, -1)]
        return "\n".join(lines)

    def flush(self, fb: Framebuffer, terminal: "TerminalOutput") -> None:
        """
        Draw the framebuffer on the terminal.

        Hides the cursor, homes it, writes the whole frame, then shows the
        cursor again, pushing everything out in a single flush so the
        image doesn't tear.
        """
        frame = self.render(fb)
        logger.debug(f"Flushing {fb.width}x{fb.rows} cells ({len(frame)} chars)")
        try:
            terminal.hide_cursor()
            terminal.move_cursor(0, 0)
            terminal.write(frame)
        finally:
            terminal.show_cursor()
            terminal.flush()
