# =============================================================================
# Framebuffer
# =============================================================================
# In-memory grid holding one colour per pixel. This is the single source of
# truth that the renderer turns into terminal output.
#
# Coordinate system:
#   - Origin (0, 0) is the BOTTOM-LEFT pixel
#   - X increases rightward, one unit per character column
#   - Y increases upward, one unit per half character row
#
# Storage is a flat row-major list: cell (x, y) lives at index y * width + x.
# =============================================================================

from typing import Iterator, NamedTuple

from termpix.core.color import Color, UnknownColorError


class InvalidDimension(ValueError):
    """Raised when a framebuffer is created with a non-positive size."""
    pass


class PixelOutOfBounds(IndexError):
    """Raised by Framebuffer.get() for coordinates outside the buffer."""
    pass


def _solid(background: Color) -> Color:
    if not isinstance(background, Color):
        raise UnknownColorError(f"Background must be a colour, got {background!r}")
    return background


class Point(NamedTuple):
    """An integer pixel coordinate (origin bottom-left)."""
    x: int
    y: int


class Framebuffer:
    """
    A fixed-size grid of colours addressed in pixel units.

    Each terminal character cell holds two vertically stacked pixels, so a
    terminal of C columns and R rows maps to a framebuffer of C x 2R.

    The size never changes after creation. `reset()` clears every cell but
    keeps the dimensions; callers that need a different size create a new
    Framebuffer.

    Usage:
        >>> fb = Framebuffer(80, 48, Color.BLACK)
        >>> fb.plot(3, 4, Color.RED)
        True
        >>> fb.plot(-1, 0, Color.RED)   # Outside: nothing written
        False
        >>> fb.get(3, 4)
        <Color.RED: (31, 41)>

    Attributes:
        width: Width in pixels (= terminal columns).
        height: Height in pixels (= terminal rows * 2).
    """

    def __init__(
        self,
        width: int,
        height: int,
        background: Color = Color.BLACK,
    ) -> None:
        """
        Allocate the framebuffer with every cell set to `background`.

        Args:
            width: Width in pixels. Must be > 0.
            height: Height in pixels. Must be > 0.
            background: Colour to fill every cell with.

        Raises:
            InvalidDimension: If width or height is not positive.
            UnknownColorError: If background isn't a Color (None included).
        """
        if width <= 0 or height <= 0:
            raise InvalidDimension(
                f"Framebuffer dimensions must be positive, got {width}x{height}"
            )
        self.width = width
        self.height = height
        self._cells: list[Color] = [_solid(background)] * (width * height)

    # -------------------------------------------------------------------------
    # Properties
    # -------------------------------------------------------------------------

    @property
    def rows(self) -> int:
        """Number of character rows the renderer draws (two pixels each)."""
        return self.height // 2

    @property
    def size(self) -> tuple[int, int]:
        """(width, height) in pixels."""
        return self.width, self.height

    # -------------------------------------------------------------------------
    # Pixel Access
    # -------------------------------------------------------------------------

    def in_bounds(self, x: int, y: int) -> bool:
        """Returns True if (x, y) is inside [0, width) x [0, height)."""
        return 0 <= x < self.width and 0 <= y < self.height

    def plot(self, x: int, y: int, color: Color) -> bool:
        """
        Set a single pixel.

        Rasterizers probe points past the edges all the time, so an
        out-of-bounds write is not an error: it writes nothing and
        returns False.

        Args:
            x: X coordinate (0 = left edge).
            y: Y coordinate (0 = bottom edge).
            color: Colour to store.

        Returns:
            True if the pixel was written, False if it was outside or
            color is None.
        """
        if color is None:
            return False
        if x < 0 or x >= self.width or y < 0 or y >= self.height:
            return False
        self._cells[y * self.width + x] = color
        return True

    def get(self, x: int, y: int) -> Color:
        """
        Read a single pixel.

        Raises:
            PixelOutOfBounds: If (x, y) is outside the framebuffer.
        """
        if not self.in_bounds(x, y):
            raise PixelOutOfBounds(
                f"Pixel ({x}, {y}) outside {self.width}x{self.height} framebuffer"
            )
        return self._cells[y * self.width + x]

    def row(self, y: int) -> list[Color]:
        """Copy of pixel row `y`, left to right."""
        if not 0 <= y < self.height:
            raise PixelOutOfBounds(f"Row {y} outside framebuffer of height {self.height}")
        start = y * self.width
        return self._cells[start:start + self.width]

    def reset(self, background: Color = Color.BLACK) -> None:
        """
        Clear every pixel to `background`.

        Raises:
            UnknownColorError: If background isn't a Color.
        """
        self._cells = [_solid(background)] * (self.width * self.height)

    # -------------------------------------------------------------------------
    # Inspection
    # -------------------------------------------------------------------------

    def pixels(self) -> Iterator[tuple[Point, Color]]:
        """Yield every (point, colour) pair, bottom row first."""
        width = self.width
        for index, color in enumerate(self._cells):
            yield Point(index % width, index // width), color

    def points(self, color: Color) -> set[Point]:
        """The set of points currently holding `color`."""
        return {point for point, value in self.pixels() if value is color}

    def count(self, color: Color) -> int:
        """Number of pixels currently holding `color`."""
        return self._cells.count(color)

    def __repr__(self) -> str:
        return f"Framebuffer(width={self.width}, height={self.height})"
