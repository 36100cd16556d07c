# =============================================================================
# Fractal Parameters
# =============================================================================
# Value objects describing a fractal view, plus the named Julia constants
# offered in the menu.
#
# Defaults match the classic views:
#   - Mandelbrot: centre -0.5 + 0i shows the cardioid and the "snowman"
#   - Julia: c = -0.7 + 0.27015i, the dendrite pattern
# =============================================================================

from dataclasses import dataclass


class InvalidFractalParams(ValueError):
    """Raised when a zoom or iteration bound is out of range."""
    pass


@dataclass(frozen=True)
class FractalParams:
    """
    A view onto the complex plane.

    Attributes:
        center_re: Real part of the view centre.
        center_im: Imaginary part of the view centre.
        zoom: Magnification (> 0). Higher values zoom in.
        max_iter: Iteration bound (> 0) before a point counts as inside.
    """
    center_re: float = -0.5
    center_im: float = 0.0
    zoom: float = 1.0
    max_iter: int = 50

    def __post_init__(self) -> None:
        if not self.zoom > 0:
            raise InvalidFractalParams(f"zoom must be > 0, got {self.zoom}")
        if self.max_iter <= 0:
            raise InvalidFractalParams(f"max_iter must be > 0, got {self.max_iter}")


@dataclass(frozen=True)
class JuliaParams(FractalParams):
    """
    A Julia view: a FractalParams plus the fixed constant c.

    Attributes:
        c_re: Real part of c.
        c_im: Imaginary part of c.
    """
    center_re: float = 0.0
    c_re: float = -0.7
    c_im: float = 0.27015

    @property
    def c(self) -> complex:
        return complex(self.c_re, self.c_im)


# =============================================================================
# Julia Presets
# =============================================================================

@dataclass(frozen=True)
class JuliaPreset:
    """A named Julia constant."""
    name: str
    label: str
    c_re: float
    c_im: float

    def describe(self) -> str:
        """Human-readable "label: c = a + bi" line."""
        sign = "-" if self.c_im < 0 else "+"
        return f"{self.label}: c = {self.c_re} {sign} {abs(self.c_im)}i"


JULIA_PRESETS: tuple[JuliaPreset, ...] = (
    JuliaPreset("dendrite", "Classic dendrite", -0.7, 0.27015),
    JuliaPreset("spiral", "Spiral", -0.8, 0.156),
    JuliaPreset("rabbit", "Rabbit", -0.4, 0.6),
    JuliaPreset("siegel", "Siegel disk", 0.285, 0.01),
    JuliaPreset("douady", "Douady's rabbit", -0.835, -0.2321),
    JuliaPreset("electric", "Electric", -0.7269, 0.1889),
)

DEFAULT_JULIA_PRESET = "dendrite"


def get_julia_preset(name: str) -> JuliaPreset:
    """
    Look up a preset by name (case-insensitive).

    Raises:
        KeyError: If there's no preset with that name.
    """
    key = name.strip().lower()
    for preset in JULIA_PRESETS:
        if preset.name == key:
            return preset
    raise KeyError(f"Unknown Julia preset: {name!r}")


def julia_preset_names() -> list[str]:
    return [preset.name for preset in JULIA_PRESETS]
