# =============================================================================
# Fractal Module
# =============================================================================
# Escape-time fractals rendered into a Framebuffer:
#   - Mandelbrot set (z0 = 0, c varies per pixel)
#   - Julia sets (z0 varies per pixel, c fixed; six named presets)
# =============================================================================

from termpix.fractal.engine import (
    JULIA_BASE_RANGE,
    MANDELBROT_BASE_RANGE,
    PlaneMapping,
    RenderCancelled,
    color_for_iteration,
    escape_iterations,
    render_julia,
    render_mandelbrot,
)
from termpix.fractal.params import (
    DEFAULT_JULIA_PRESET,
    JULIA_PRESETS,
    FractalParams,
    InvalidFractalParams,
    JuliaParams,
    JuliaPreset,
    get_julia_preset,
    julia_preset_names,
)

__all__ = [
    "DEFAULT_JULIA_PRESET",
    "FractalParams",
    "InvalidFractalParams",
    "JULIA_BASE_RANGE",
    "JULIA_PRESETS",
    "JuliaParams",
    "JuliaPreset",
    "MANDELBROT_BASE_RANGE",
    "PlaneMapping",
    "RenderCancelled",
    "color_for_iteration",
    "escape_iterations",
    "get_julia_preset",
    "julia_preset_names",
    "render_julia",
    "render_mandelbrot",
]
