# =============================================================================
# Canvas
# =============================================================================
# The drawing context handed to callers. A Canvas owns one Framebuffer sized
# to the terminal, plus the renderer and terminal output that show it.
#
# Typical use:
#
#     canvas = Canvas()
#     canvas.clear_screen("black")
#     canvas.draw_circle(40, 24, 30, 20, "red", "yellow")
#     canvas.draw_mandelbrot(zoom=2.0)
#     canvas.render_framebuffer()
#
# Colour arguments accept a Color, None (skip), or a colour name string.
# Names are validated here, at the edge, so drawing code only ever sees
# Color values.
# =============================================================================

import logging

from termpix.core.color import Color, UnknownColorError, parse_draw_color
from termpix.core.framebuffer import Framebuffer
from termpix.fractal.engine import (
    CancelCheck,
    ProgressCallback,
    render_julia,
    render_mandelbrot,
)
from termpix.fractal.params import FractalParams, JuliaParams
from termpix.raster.shapes import draw_ellipse, draw_line, draw_rectangle
from termpix.rendering.ansi import AnsiRenderer
from termpix.rendering.terminal import (
    TerminalGeometry,
    TerminalOutput,
    get_terminal_geometry,
)

logger = logging.getLogger(__name__)

ColorArg = str | Color | None


def _background(value: str | Color) -> Color:
    """Parse a background colour; transparent isn't allowed here."""
    color = parse_draw_color(value)
    if color is None:
        raise UnknownColorError("Background colour cannot be transparent")
    return color


class Canvas:
    """
    A terminal-sized framebuffer with drawing and rendering operations.

    Attributes:
        geometry: Terminal size the framebuffer was sized from.
        terminal: Where rendered frames are written.
        renderer: Framebuffer-to-text encoder.
        background: Colour the framebuffer was last cleared to.
        framebuffer: The pixel grid (width = columns, height = rows * 2).
    """

    def __init__(
        self,
        geometry: TerminalGeometry | None = None,
        terminal: TerminalOutput | None = None,
        background: str | Color = Color.BLACK,
        renderer: AnsiRenderer | None = None,
    ) -> None:
        """
        Create a canvas and allocate its framebuffer.

        Args:
            geometry: Terminal size. Queried from the terminal if omitted.
            terminal: Output target. Defaults to stdout.
            background: Initial colour of every pixel.
            renderer: Renderer to use. Defaults to AnsiRenderer().

        Raises:
            InvalidDimension: If the geometry has no rows or columns.
        """
        self.geometry = geometry or get_terminal_geometry()
        self.terminal = terminal or TerminalOutput()
        self.renderer = renderer or AnsiRenderer()
        self.background = _background(background)
        self.framebuffer = self._allocate(self.background)

    def _allocate(self, background: Color) -> Framebuffer:
        return Framebuffer(
            self.geometry.pixel_width,
            self.geometry.pixel_height,
            background,
        )

    @property
    def width(self) -> int:
        """Width in pixels."""
        return self.framebuffer.width

    @property
    def height(self) -> int:
        """Height in pixels."""
        return self.framebuffer.height

    # -------------------------------------------------------------------------
    # Framebuffer Lifecycle
    # -------------------------------------------------------------------------

    def init_framebuffer(self, background: str | Color = Color.BLACK) -> None:
        """Reallocate the framebuffer at the current geometry, all `background`."""
        self.background = _background(background)
        self.framebuffer = self._allocate(self.background)

    def clear_screen(self, background: str | Color = Color.BLACK) -> None:
        """Clear the terminal and reinitialise the framebuffer."""
        self.background = _background(background)
        self.terminal.clear()
        self.terminal.flush()
        self.framebuffer = self._allocate(self.background)

    def resize(self, geometry: TerminalGeometry | None = None) -> None:
        """
        Adopt a new terminal size (re-queried if not given).

        The framebuffer is reallocated, so its contents are lost.
        """
        self.geometry = geometry or get_terminal_geometry()
        logger.debug(f"Canvas resized to {self.geometry}")
        self.framebuffer = self._allocate(self.background)

    def render_framebuffer(self) -> None:
        """Draw the framebuffer on the terminal."""
        self.renderer.flush(self.framebuffer, self.terminal)

    # -------------------------------------------------------------------------
    # Shapes
    # -------------------------------------------------------------------------

    def plot_point(self, x: int, y: int, color: ColorArg) -> bool:
        """
        Plot a single pixel.

        Returns:
            True if plotted, False if outside the canvas (or transparent).
        """
        paint = parse_draw_color(color)
        if paint is None:
            return False
        return self.framebuffer.plot(x, y, paint)

    def draw_line(self, x1: int, y1: int, x2: int, y2: int, color: ColorArg) -> None:
        """Draw a Bresenham line between two points (inclusive)."""
        draw_line(self.framebuffer, x1, y1, x2, y2, parse_draw_color(color))

    def draw_circle(
        self,
        cx: int,
        cy: int,
        width: int,
        height: int,
        line_color: ColorArg,
        fill_color: ColorArg = None,
    ) -> None:
        """Draw an ellipse; equal width and height give a circle."""
        draw_ellipse(
            self.framebuffer, cx, cy, width, height,
            parse_draw_color(line_color), parse_draw_color(fill_color),
        )

    def draw_square(
        self,
        cx: int,
        cy: int,
        width: int,
        height: int,
        line_color: ColorArg,
        fill_color: ColorArg = None,
    ) -> None:
        """Draw an axis-aligned rectangle centred on (cx, cy)."""
        draw_rectangle(
            self.framebuffer, cx, cy, width, height,
            parse_draw_color(line_color), parse_draw_color(fill_color),
        )

    # -------------------------------------------------------------------------
    # Fractals
    # -------------------------------------------------------------------------

    def draw_mandelbrot(
        self,
        center_re: float = -0.5,
        center_im: float = 0.0,
        zoom: float = 1.0,
        max_iter: int = 50,
        progress: ProgressCallback | None = None,
        cancel: CancelCheck | None = None,
    ) -> None:
        """
        Render the Mandelbrot set over the whole canvas.

        Raises:
            InvalidFractalParams: If zoom or max_iter isn't positive.
            RenderCancelled: If `cancel` fired at a row boundary.
        """
        params = FractalParams(center_re, center_im, zoom, max_iter)
        render_mandelbrot(self.framebuffer, params, progress=progress, cancel=cancel)

    def draw_julia(
        self,
        c_re: float = -0.7,
        c_im: float = 0.27015,
        center_re: float = 0.0,
        center_im: float = 0.0,
        zoom: float = 1.0,
        max_iter: int = 50,
        progress: ProgressCallback | None = None,
        cancel: CancelCheck | None = None,
    ) -> None:
        """
        Render the Julia set for c = c_re + c_im*i over the whole canvas.

        Raises:
            InvalidFractalParams: If zoom or max_iter isn't positive.
            RenderCancelled: If `cancel` fired at a row boundary.
        """
        params = JuliaParams(
            center_re=center_re,
            center_im=center_im,
            zoom=zoom,
            max_iter=max_iter,
            c_re=c_re,
            c_im=c_im,
        )
        render_julia(self.framebuffer, params, progress=progress, cancel=cancel)

    def __repr__(self) -> str:
        return f"Canvas({self.width}x{self.height})"

