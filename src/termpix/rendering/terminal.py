# =============================================================================
# Terminal Collaborators
# =============================================================================
# The two things the graphics engine needs from the host terminal:
#   - Geometry: how many columns and rows there are
#   - Output: a place to write escape sequences and glyphs
#
# Geometry honours $COLUMNS / $LINES first (like most shells do) and
# otherwise asks the OS.
# =============================================================================

import shutil
import sys
from dataclasses import dataclass
from typing import TextIO

ESC = "\033"


class TerminalSizeError(Exception):
    """Raised when the terminal size can't be determined."""
    pass


@dataclass(frozen=True)
class TerminalGeometry:
    """
    Terminal size in character cells.

    Attributes:
        columns: Character columns (= pixel width).
        rows: Character rows (pixel height is twice this).
    """
    columns: int
    rows: int

    @property
    def pixel_width(self) -> int:
        return self.columns

    @property
    def pixel_height(self) -> int:
        return self.rows * 2

    def __str__(self) -> str:
        return f"{self.pixel_width}x{self.pixel_height} pixels"


def get_terminal_geometry(fallback: tuple[int, int] = (80, 24)) -> TerminalGeometry:
    """
    Query the current terminal size.

    Args:
        fallback: (columns, rows) to use when stdout isn't a terminal.

    Raises:
        TerminalSizeError: If the reported size isn't positive.
    """
    size = shutil.get_terminal_size(fallback)
    if size.columns <= 0 or size.lines <= 0:
        raise TerminalSizeError(
            f"Could not determine terminal size (got {size.columns}x{size.lines})"
        )
    return TerminalGeometry(columns=size.columns, rows=size.lines)


class TerminalOutput:
    """
    Writes escape sequences and text to a terminal stream.

    Nothing is pushed to the terminal until flush(), so a caller can
    assemble a whole frame and show it at once.

    Usage:
        >>> out = TerminalOutput()
        >>> out.clear()
        >>> out.write("hello")
        >>> out.flush()
    """

    def __init__(self, stream: TextIO | None = None) -> None:
        """
        Args:
            stream: Stream to write to. Defaults to sys.stdout at write
                    time, so redirected stdout is honoured.
        """
        self._stream = stream

    @property
    def stream(self) -> TextIO:
        return self._stream if self._stream is not None else sys.stdout

    def write(self, text: str) -> None:
        self.stream.write(text)

    def flush(self) -> None:
        self.stream.flush()

    def hide_cursor(self) -> None:
        self.write(f"{ESC}[?25l")

    def show_cursor(self) -> None:
        self.write(f"{ESC}[?25h")

    def move_cursor(self, row: int, column: int) -> None:
        """Move the cursor to a 0-based (row, column), row 0 at the top."""
        self.write(f"{ESC}[{row + 1};{column + 1}H")

    def clear(self) -> None:
        """Clear the screen and home the cursor."""
        self.write(f"{ESC}[2J{ESC}[H")
