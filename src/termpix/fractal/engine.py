# =============================================================================
# Fractal Engine
# =============================================================================
# Renders Mandelbrot and Julia sets into a Framebuffer.
#
# Both sets iterate z(n+1) = z(n)^2 + c and stop once |z|^2 > 4:
#   - Mandelbrot: z(0) = 0, c = the pixel's point on the complex plane
#   - Julia:      z(0) = the pixel's point, c = a fixed constant
#
# The escape iteration count picks a palette colour. Points that never
# escape get the palette's reserved "inside" colour (index 0).
#
# Rendering is synchronous. Long renders report progress through an
# optional callback and check an optional cancel flag once per row; rows
# are independent, so stopping between rows leaves nothing half-written.
# =============================================================================

import logging
import time
from dataclasses import dataclass
from typing import Callable, Sequence

from termpix.core.color import FRACTAL_PALETTE, Color
from termpix.core.framebuffer import Framebuffer
from termpix.fractal.params import FractalParams, JuliaParams

logger = logging.getLogger(__name__)


# Width of the complex-plane view (imaginary axis) at zoom 1.0
MANDELBROT_BASE_RANGE = 3.0
JULIA_BASE_RANGE = 4.0

# |z|^2 above this means the orbit has escaped (|z| > 2)
ESCAPE_RADIUS_SQ = 4.0

ProgressCallback = Callable[[int], None]
CancelCheck = Callable[[], bool]


class RenderCancelled(Exception):
    """Raised when a render is stopped at a row checkpoint."""

    def __init__(self, rows_done: int) -> None:
        super().__init__(f"Render cancelled after {rows_done} rows")
        self.rows_done = rows_done


# =============================================================================
# Iteration & Colouring
# =============================================================================

def escape_iterations(
    z_re: float,
    z_im: float,
    c_re: float,
    c_im: float,
    max_iter: int,
) -> int:
    """
    Iterate z = z^2 + c from z and count steps until |z|^2 > 4.

    Returns:
        The number of steps taken before escaping, or max_iter if the
        orbit stayed bounded.
    """
    iteration = 0
    while iteration < max_iter:
        if z_re * z_re + z_im * z_im > ESCAPE_RADIUS_SQ:
            break
        z_re, z_im = z_re * z_re - z_im * z_im + c_re, 2.0 * z_re * z_im + c_im
        iteration += 1
    return iteration


def color_for_iteration(
    iteration: int,
    max_iter: int,
    palette: Sequence[Color] = FRACTAL_PALETTE,
) -> Color:
    """
    Map an escape iteration count to a palette colour.

    Points that didn't escape (iteration >= max_iter) get palette[0].
    Escaping counts cycle through palette[1:], producing colour bands.
    """
    if iteration >= max_iter:
        return palette[0]
    return palette[(iteration % (len(palette) - 1)) + 1]


# =============================================================================
# Plane Mapping
# =============================================================================

@dataclass(frozen=True)
class PlaneMapping:
    """
    Maps framebuffer pixels onto a rectangle of the complex plane.

    A pixel is one column wide but only half a row tall, so the real axis
    is widened by width/height. That keeps circles round on screen.

    Attributes:
        re_min: Real coordinate of pixel column 0.
        im_min: Imaginary coordinate of pixel row 0 (the bottom row).
        re_step: Real distance between neighbouring columns.
        im_step: Imaginary distance between neighbouring rows.
    """
    re_min: float
    im_min: float
    re_step: float
    im_step: float

    @classmethod
    def for_framebuffer(
        cls,
        fb: Framebuffer,
        center_re: float,
        center_im: float,
        zoom: float,
        base_range: float,
    ) -> "PlaneMapping":
        view_range = base_range / zoom
        aspect = fb.width / fb.height

        re_min = center_re - view_range * aspect / 2.0
        re_max = center_re + view_range * aspect / 2.0
        im_min = center_im - view_range / 2.0
        im_max = center_im + view_range / 2.0

        return cls(
            re_min=re_min,
            im_min=im_min,
            re_step=(re_max - re_min) / fb.width,
            im_step=(im_max - im_min) / fb.height,
        )

    def pixel_to_complex(self, px: int, py: int) -> tuple[float, float]:
        """Complex coordinate (re, im) of pixel (px, py)."""
        return self.re_min + px * self.re_step, self.im_min + py * self.im_step


# =============================================================================
# Renderers
# =============================================================================

def _render(
    fb: Framebuffer,
    mapping: PlaneMapping,
    max_iter: int,
    julia_c: complex | None,
    label: str,
    progress: ProgressCallback | None,
    cancel: CancelCheck | None,
    palette: Sequence[Color],
) -> None:
    """Shared per-pixel loop for both fractal types."""
    width, height = fb.width, fb.height
    last_percent = -1
    started = time.perf_counter()

    logger.debug(
        f"Rendering {label} {width}x{height}: "
        f"re from {mapping.re_min:.6f} step {mapping.re_step:.6g}, "
        f"im from {mapping.im_min:.6f} step {mapping.im_step:.6g}, "
        f"max_iter={max_iter}"
    )

    for py in range(height):
        if cancel is not None and cancel():
            logger.info(f"{label} render cancelled at row {py}/{height}")
            raise RenderCancelled(py)

        percent = py * 100 // height
        if progress is not None and percent != last_percent:
            progress(percent)
        last_percent = percent

        im = mapping.im_min + py * mapping.im_step
        for px in range(width):
            re = mapping.re_min + px * mapping.re_step
            if julia_c is None:
                iteration = escape_iterations(0.0, 0.0, re, im, max_iter)
            else:
                iteration = escape_iterations(re, im, julia_c.real, julia_c.imag, max_iter)
            fb.plot(px, py, color_for_iteration(iteration, max_iter, palette))

    if progress is not None:
        progress(100)

    logger.info(f"{label} rendered in {time.perf_counter() - started:.2f}s")


def render_mandelbrot(
    fb: Framebuffer,
    params: FractalParams | None = None,
    progress: ProgressCallback | None = None,
    cancel: CancelCheck | None = None,
    palette: Sequence[Color] = FRACTAL_PALETTE,
) -> None:
    """
    Render the Mandelbrot set into `fb`, overwriting every pixel.

    Args:
        fb: Framebuffer to draw into.
        params: View to render. Defaults to the classic full view.
        progress: Called with the percentage of rows done (0-100).
        cancel: Checked before each row; returning True stops the render.
        palette: Colours to use; index 0 is the "inside" colour.

    Raises:
        RenderCancelled: If `cancel` returned True.
    """
    params = params or FractalParams()
    mapping = PlaneMapping.for_framebuffer(
        fb, params.center_re, params.center_im, params.zoom, MANDELBROT_BASE_RANGE,
    )
    _render(fb, mapping, params.max_iter, None, "Mandelbrot", progress, cancel, palette)


def render_julia(
    fb: Framebuffer,
    params: JuliaParams | None = None,
    progress: ProgressCallback | None = None,
    cancel: CancelCheck | None = None,
    palette: Sequence[Color] = FRACTAL_PALETTE,
) -> None:
    """
    Render a Julia set into `fb`, overwriting every pixel.

    Same arguments as render_mandelbrot(); `params.c` is the constant.

    Raises:
        RenderCancelled: If `cancel` returned True.
    """
    params = params or JuliaParams()
    mapping = PlaneMapping.for_framebuffer(
        fb, params.center_re, params.center_im, params.zoom, JULIA_BASE_RANGE,
    )
    _render(fb, mapping, params.max_iter, params.c, "Julia", progress, cancel, palette)
