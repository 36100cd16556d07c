# =============================================================================
# Configuration Management
# =============================================================================
# Handles loading, saving, and validating termpix configuration.
#
# XDG Base Directory Compliance (https://specifications.freedesktop.org/basedir-spec/):
#   - Config:  $XDG_CONFIG_HOME/termpix/  (default: ~/.config/termpix/)
#   - State:   $XDG_STATE_HOME/termpix/   (default: ~/.local/state/termpix/)
#
# Files:
#   - config.toml: User preferences (background, default fractal views)
#   - termpix.log: Debug log (in state directory)
# =============================================================================

import os
import tomllib  # Built into Python 3.11+
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

import tomli_w  # For writing TOML (tomllib is read-only)

from termpix.core.color import Color, UnknownColorError
from termpix.fractal.params import (
    DEFAULT_JULIA_PRESET,
    FractalParams,
    InvalidFractalParams,
    JuliaParams,
    get_julia_preset,
)


# =============================================================================
# XDG Directory Management
# =============================================================================

# Application identifier used in all XDG paths
APP_NAME = "termpix"


def get_xdg_config_home() -> Path:
    """
    Returns the XDG config directory for termpix.

    Respects $XDG_CONFIG_HOME if set, otherwise uses ~/.config/termpix/
    """
    xdg_config = os.environ.get("XDG_CONFIG_HOME")
    if xdg_config:
        base = Path(xdg_config)
    else:
        base = Path.home() / ".config"
    return base / APP_NAME


def get_xdg_state_home() -> Path:
    """
    Returns the XDG state directory for termpix.

    Respects $XDG_STATE_HOME if set, otherwise uses ~/.local/state/termpix/
    This is where the log file lives.
    """
    xdg_state = os.environ.get("XDG_STATE_HOME")
    if xdg_state:
        base = Path(xdg_state)
    else:
        base = Path.home() / ".local" / "state"
    return base / APP_NAME


def ensure_directories() -> dict[str, Path]:
    """
    Creates the XDG directories if they don't exist.

    Returns:
        Dictionary mapping directory type to path.
    """
    dirs = {
        "config": get_xdg_config_home(),
        "state": get_xdg_state_home(),
    }

    for dir_path in dirs.values():
        dir_path.mkdir(parents=True, exist_ok=True)

    return dirs


# =============================================================================
# Configuration Data Structures
# =============================================================================

@dataclass
class DisplayConfig:
    """
    Configuration for the drawing surface.

    Attributes:
        background: Colour name every scene is cleared to before drawing.
    """
    background: str = "black"

    @property
    def background_color(self) -> Color:
        return Color.parse(self.background)


@dataclass
class MandelbrotConfig:
    """
    Default Mandelbrot view offered by the menu and the CLI.

    Attributes:
        center_re: Real part of the view centre.
        center_im: Imaginary part of the view centre.
        zoom: Magnification (1.0 = whole set visible).
        max_iter: Iteration bound.
    """
    center_re: float = -0.5
    center_im: float = 0.0
    zoom: float = 1.0
    max_iter: int = 50

    def to_params(self) -> FractalParams:
        return FractalParams(self.center_re, self.center_im, self.zoom, self.max_iter)


@dataclass
class JuliaConfig:
    """
    Default Julia view offered by the menu and the CLI.

    Attributes:
        preset: Name of the Julia preset whose constant c is used
                (dendrite, spiral, rabbit, siegel, douady, electric).
        center_re: Real part of the view centre.
        center_im: Imaginary part of the view centre.
        zoom: Magnification.
        max_iter: Iteration bound.
    """
    preset: str = DEFAULT_JULIA_PRESET
    center_re: float = 0.0
    center_im: float = 0.0
    zoom: float = 1.0
    max_iter: int = 50

    def to_params(self) -> JuliaParams:
        preset = get_julia_preset(self.preset)
        return JuliaParams(
            center_re=self.center_re,
            center_im=self.center_im,
            zoom=self.zoom,
            max_iter=self.max_iter,
            c_re=preset.c_re,
            c_im=preset.c_im,
        )


@dataclass
class Config:
    """
    Main configuration container for termpix.

    Attributes:
        display: Drawing surface settings.
        mandelbrot: Default Mandelbrot view.
        julia: Default Julia view.

    Usage:
        >>> config = Config.load()
        >>> config.mandelbrot.max_iter
        50
    """
    display: DisplayConfig = field(default_factory=DisplayConfig)
    mandelbrot: MandelbrotConfig = field(default_factory=MandelbrotConfig)
    julia: JuliaConfig = field(default_factory=JuliaConfig)

    # -------------------------------------------------------------------------
    # File Paths
    # -------------------------------------------------------------------------

    @staticmethod
    def config_file_path() -> Path:
        """Returns the path to the main config file."""
        return get_xdg_config_home() / "config.toml"

    @staticmethod
    def log_file_path() -> Path:
        """Returns the path to the log file."""
        return get_xdg_state_home() / "termpix.log"

    # -------------------------------------------------------------------------
    # Loading and Saving
    # -------------------------------------------------------------------------

    @classmethod
    def load(cls, path: Path | None = None) -> "Config":
        """
        Load configuration from the config file.

        If the config file doesn't exist, returns default configuration.

        Args:
            path: Config file to read. Defaults to the XDG location.

        Returns:
            Loaded Config object.

        Raises:
            ConfigError: If the config file exists but is invalid or unreadable.
        """
        config_path = path or cls.config_file_path()

        if not config_path.exists():
            # No config file yet - return defaults
            return cls()

        # Load and parse the TOML file
        try:
            with open(config_path, "rb") as f:
                data = tomllib.load(f)
        except (tomllib.TOMLDecodeError, UnicodeDecodeError) as e:
            raise ConfigError(f"Invalid config file: {e}") from e
        except OSError as e:
            raise ConfigError(f"Cannot read config file: {e}") from e

        config = cls._from_dict(data)
        config.validate()
        return config

    def save(self, path: Path | None = None) -> None:
        """
        Save configuration to the config file.

        Creates the config directory if it doesn't exist.
        """
        config_path = path or self.config_file_path()
        config_path.parent.mkdir(parents=True, exist_ok=True)

        with open(config_path, "wb") as f:
            tomli_w.dump(self._to_dict(), f)

    def validate(self) -> None:
        """
        Check every value can actually be used.

        Raises:
            ConfigError: Naming the first invalid setting.
        """
        try:
            self.display.background_color
        except UnknownColorError as e:
            raise ConfigError(f"[display] background: {e}") from e

        try:
            self.mandelbrot.to_params()
        except InvalidFractalParams as e:
            raise ConfigError(f"[mandelbrot] {e}") from e

        try:
            self.julia.to_params()
        except KeyError as e:
            raise ConfigError(f"[julia] preset: {e.args[0]}") from e
        except InvalidFractalParams as e:
            raise ConfigError(f"[julia] {e}") from e

    @classmethod
    def _from_dict(cls, data: dict[str, Any]) -> "Config":
        """
        Create a Config object from a dictionary (parsed TOML).

        Missing keys fall back to defaults. Numbers are coerced so that
        `zoom = 2` and `zoom = 2.0` both work.
        """
        config = cls()

        try:
            # Display settings
            display = data.get("display", {})
            config.display = DisplayConfig(
                background=str(display.get("background", "black")),
            )

            # Mandelbrot settings
            mandelbrot = data.get("mandelbrot", {})
            config.mandelbrot = MandelbrotConfig(
                center_re=float(mandelbrot.get("center_re", -0.5)),
                center_im=float(mandelbrot.get("center_im", 0.0)),
                zoom=float(mandelbrot.get("zoom", 1.0)),
                max_iter=int(mandelbrot.get("max_iter", 50)),
            )

            # Julia settings
            julia = data.get("julia", {})
            config.julia = JuliaConfig(
                preset=str(julia.get("preset", DEFAULT_JULIA_PRESET)),
                center_re=float(julia.get("center_re", 0.0)),
                center_im=float(julia.get("center_im", 0.0)),
                zoom=float(julia.get("zoom", 1.0)),
                max_iter=int(julia.get("max_iter", 50)),
            )
        except (TypeError, ValueError, AttributeError) as e:
            raise ConfigError(f"Invalid config value: {e}") from e

        return config

    def _to_dict(self) -> dict[str, Any]:
        """
        Convert Config to a dictionary for TOML serialization.
        """
        data: dict[str, Any] = {}

        data["display"] = {
            "background": self.display.background,
        }

        data["mandelbrot"] = {
            "center_re": self.mandelbrot.center_re,
            "center_im": self.mandelbrot.center_im,
            "zoom": self.mandelbrot.zoom,
            "max_iter": self.mandelbrot.max_iter,
        }

        data["julia"] = {
            "preset": self.julia.preset,
            "center_re": self.julia.center_re,
            "center_im": self.julia.center_im,
            "zoom": self.julia.zoom,
            "max_iter": self.julia.max_iter,
        }

        return data


# =============================================================================
# Exceptions
# =============================================================================

class ConfigError(Exception):
    """Raised when there's an error loading or parsing configuration."""
    pass


# =============================================================================
# Utility Functions
# =============================================================================

def print_paths() -> None:
    """
    Print all XDG paths for debugging.
    Useful for users wondering where their config is stored.
    """
    print(f"Config:  {get_xdg_config_home()}")
    print(f"State:   {get_xdg_state_home()}")
    print()
    print(f"Config file:  {Config.config_file_path()}")
    print(f"Log file:     {Config.log_file_path()}")
