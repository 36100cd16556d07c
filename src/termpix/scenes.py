# =============================================================================
# Scenes
# =============================================================================
# The three things termpix can draw (Mandelbrot, Julia, the shapes demo),
# and presenting a finished canvas with a message line underneath.
# =============================================================================

import logging
from enum import Enum

from termpix.canvas import Canvas
from termpix.core.color import Color
from termpix.fractal.engine import CancelCheck, ProgressCallback
from termpix.fractal.params import FractalParams, JuliaParams
from termpix.rendering.terminal import TerminalGeometry

logger = logging.getLogger(__name__)


class Scene(Enum):
    """What to draw."""
    MANDELBROT = "mandelbrot"
    JULIA = "julia"
    SHAPES = "shapes"

    @property
    def title(self) -> str:
        return {
            Scene.MANDELBROT: "Mandelbrot set",
            Scene.JULIA: "Julia set",
            Scene.SHAPES: "Shapes demo",
        }[self]


def canvas_geometry(geometry: TerminalGeometry) -> TerminalGeometry:
    """
    The drawing area for a terminal: every row but the last, which is
    kept free for the message printed under the image.
    """
    return TerminalGeometry(geometry.columns, max(geometry.rows - 1, 1))


def draw_scene(
    canvas: Canvas,
    scene: Scene,
    params: FractalParams | None = None,
    progress: ProgressCallback | None = None,
    cancel: CancelCheck | None = None,
) -> None:
    """
    Draw a scene into the canvas framebuffer (nothing is shown yet).

    Args:
        canvas: Canvas to draw into.
        scene: Which scene.
        params: View for fractal scenes. Julia needs JuliaParams; the
                defaults are used when omitted.
        progress: Fractal progress callback (percent of rows).
        cancel: Fractal cancel check, polled once per row.

    Raises:
        RenderCancelled: If a fractal render was cancelled.
    """
    logger.info(f"Drawing {scene.value} on {canvas!r}")

    if scene is Scene.MANDELBROT:
        p = params or FractalParams()
        canvas.draw_mandelbrot(
            p.center_re, p.center_im, p.zoom, p.max_iter,
            progress=progress, cancel=cancel,
        )
    elif scene is Scene.JULIA:
        p = params if isinstance(params, JuliaParams) else JuliaParams()
        canvas.draw_julia(
            p.c_re, p.c_im, p.center_re, p.center_im, p.zoom, p.max_iter,
            progress=progress, cancel=cancel,
        )
    else:
        draw_shapes_demo(canvas)


def present(canvas: Canvas, message: str) -> None:
    """
    Show the canvas full-screen with `message` on the line below it.

    The screen is cleared first; the framebuffer is left untouched.
    """
    terminal = canvas.terminal
    terminal.clear()
    canvas.render_framebuffer()
    terminal.move_cursor(canvas.framebuffer.rows, 0)
    terminal.write(message)
    terminal.flush()


def draw_shapes_demo(canvas: Canvas) -> None:
    """
    Draw the shapes demo around the centre of the canvas.

    Contents:
        - A large yellow ellipse with a red outline
        - Blue and green filled squares with white outlines, either side
        - An outline-only magenta circle above
        - Two dotted rows of cyan points below
        - A yellow line triangle at the bottom
    """
    cx = canvas.width // 2
    cy = canvas.height // 2

    canvas.draw_circle(cx, cy, 40, 30, Color.RED, Color.YELLOW)

    canvas.draw_square(cx - 30, cy, 20, 20, Color.BRIGHT_WHITE, Color.BLUE)
    canvas.draw_square(cx + 30, cy, 20, 20, Color.BRIGHT_WHITE, Color.GREEN)

    canvas.draw_circle(cx, cy + 25, 15, 15, Color.MAGENTA, None)

    for i in range(20):
        canvas.plot_point(cx - 10 + i, cy - 25, Color.CYAN)
        canvas.plot_point(cx - 10 + i, cy - 27, Color.BRIGHT_CYAN)

    # Triangle: apex, bottom-left, bottom-right
    apex = (cx, cy - 27)
    left = (cx - 10, cy - 40)
    right = (cx + 10, cy - 40)
    canvas.draw_line(*apex, *left, Color.BRIGHT_YELLOW)
    canvas.draw_line(*left, *right, Color.BRIGHT_YELLOW)
    canvas.draw_line(*right, *apex, Color.BRIGHT_YELLOW)
