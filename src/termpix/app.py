# =============================================================================
# termpix Main Application
# =============================================================================
# Two ways in:
#
#   termpix                 Interactive Textual menu
#   termpix mandelbrot ...  Draw one scene straight to the terminal and exit
#   termpix julia ...
#   termpix shapes
#
# The app manages:
#   - Configuration loading
#   - Logging setup (to a file, since the terminal is busy drawing)
#   - Screen navigation
# =============================================================================

import argparse
import logging
import sys
from pathlib import Path

from textual.app import App
from textual.binding import Binding

from termpix import __version__, __app_name__
from termpix.canvas import Canvas
from termpix.config import Config, ConfigError, ensure_directories, print_paths
from termpix.core.color import Color, UnknownColorError, color_names
from termpix.fractal.engine import RenderCancelled
from termpix.fractal.params import (
    FractalParams,
    InvalidFractalParams,
    JuliaParams,
    get_julia_preset,
    julia_preset_names,
)
from termpix.rendering.terminal import TerminalSizeError, get_terminal_geometry
from termpix.scenes import Scene, canvas_geometry, draw_scene, present
from termpix.ui.screens.main import MainScreen

logger = logging.getLogger(__name__)


class TermpixApp(App):
    """
    The termpix menu application.

    Attributes:
        config: The loaded application configuration.
        TITLE: Window title shown in terminal.
        SUB_TITLE: Subtitle shown in header.
        BINDINGS: Global keyboard shortcuts.
    """

    TITLE = "termpix"
    SUB_TITLE = "Terminal Graphics"

    # Global keybindings - these work from any screen
    BINDINGS = [
        Binding("q", "quit", "Quit"),
        Binding("4", "quit", "Quit", show=False),
        Binding("?", "show_help", "Help"),
    ]

    def __init__(self, config: Config | None = None, config_error: str | None = None) -> None:
        """
        Initialize the termpix application.

        Args:
            config: Pre-loaded configuration. Loaded from the default
                    location if not provided.
            config_error: An error from loading the config, to show once
                          the UI is up.
        """
        super().__init__()

        self._config_error = config_error

        if config is None:
            try:
                self.config = Config.load()
            except ConfigError as e:
                self.config = Config()
                self._config_error = str(e)
        else:
            self.config = config

    async def on_mount(self) -> None:
        """Called when the application is mounted and ready."""
        if self._config_error:
            self.notify(
                f"Config error: {self._config_error}",
                severity="error",
                timeout=10,
            )

        await self.push_screen(MainScreen(self.config))

    def action_quit(self) -> None:
        """Quit the application."""
        self.exit()

    def action_show_help(self) -> None:
        """Show the key summary."""
        self.notify(
            "Keys: 1=Mandelbrot, 2=Julia, 3=Shapes, Esc=cancel render, q=quit",
            timeout=10,
        )


# =============================================================================
# Logging
# =============================================================================

def configure_logging(debug: bool = False, log_path: Path | None = None) -> logging.Logger:
    """
    Send termpix logs to the log file in the XDG state directory.

    Logs never go to the terminal: it's showing either the menu or a
    picture.

    Args:
        debug: Log at DEBUG instead of WARNING.
        log_path: Override the log file location.

    Returns:
        The package logger.
    """
    package_logger = logging.getLogger(__app_name__)
    package_logger.setLevel(logging.DEBUG if debug else logging.WARNING)

    if not package_logger.handlers:
        if log_path is None:
            ensure_directories()
            log_path = Config.log_file_path()
        handler = logging.FileHandler(log_path, encoding="utf-8")
        handler.setFormatter(
            logging.Formatter("%(asctime)s %(levelname)s %(name)s: %(message)s")
        )
        package_logger.addHandler(handler)

    return package_logger


# =============================================================================
# CLI Entry Point
# =============================================================================

def _add_view_arguments(parser: argparse.ArgumentParser) -> None:
    """Options shared by the fractal subcommands (defaults come from config)."""
    parser.add_argument("--center-re", type=float, help="Centre X (real part)")
    parser.add_argument("--center-im", type=float, help="Centre Y (imaginary part)")
    parser.add_argument("--zoom", type=float, help="Zoom level (higher = closer)")
    parser.add_argument("--max-iter", type=int, help="Maximum iterations")


def build_parser() -> argparse.ArgumentParser:
    """
    Build the command-line parser.

    Returns:
        Configured ArgumentParser.
    """
    parser = argparse.ArgumentParser(
        prog=__app_name__,
        description="termpix: pixel graphics and fractals in the terminal",
    )

    parser.add_argument(
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )

    parser.add_argument(
        "--paths",
        action="store_true",
        help="Print configuration paths and exit",
    )

    parser.add_argument(
        "--config",
        type=Path,
        help="Path to config file (default: XDG config location)",
    )

    parser.add_argument(
        "--background",
        choices=color_names(),
        help="Background colour (default: from config, else black)",
    )

    parser.add_argument(
        "--debug",
        action="store_true",
        help="Enable debug mode (verbose logging)",
    )

    subparsers = parser.add_subparsers(dest="scene", metavar="SCENE")

    mandelbrot = subparsers.add_parser(Scene.MANDELBROT.value, help="Draw the Mandelbrot set")
    _add_view_arguments(mandelbrot)

    julia = subparsers.add_parser(Scene.JULIA.value, help="Draw a Julia set")
    julia.add_argument(
        "--preset",
        choices=julia_preset_names(),
        help="Named value for c (default: from config)",
    )
    julia.add_argument("--c-re", type=float, help="Real part of c (overrides preset)")
    julia.add_argument("--c-im", type=float, help="Imaginary part of c (overrides preset)")
    _add_view_arguments(julia)

    subparsers.add_parser(Scene.SHAPES.value, help="Draw the shapes demo")

    return parser


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    """
    Parse command-line arguments.

    Returns:
        Parsed arguments namespace.
    """
    return build_parser().parse_args(argv)


def _pick(value, default):
    return default if value is None else value


def params_from_args(args: argparse.Namespace, config: Config) -> FractalParams | None:
    """
    Merge command-line overrides onto the configured view.

    Returns:
        The view for a fractal scene, or None for the shapes demo.

    Raises:
        InvalidFractalParams: If the merged values are out of range.
    """
    if args.scene == Scene.MANDELBROT.value:
        base = config.mandelbrot
        return FractalParams(
            center_re=_pick(args.center_re, base.center_re),
            center_im=_pick(args.center_im, base.center_im),
            zoom=_pick(args.zoom, base.zoom),
            max_iter=_pick(args.max_iter, base.max_iter),
        )

    if args.scene == Scene.JULIA.value:
        base = config.julia
        preset = get_julia_preset(args.preset or base.preset)
        return JuliaParams(
            center_re=_pick(args.center_re, base.center_re),
            center_im=_pick(args.center_im, base.center_im),
            zoom=_pick(args.zoom, base.zoom),
            max_iter=_pick(args.max_iter, base.max_iter),
            c_re=_pick(args.c_re, preset.c_re),
            c_im=_pick(args.c_im, preset.c_im),
        )

    return None


def _progress_printer(label: str):
    """Progress callback printing "\\rRendering <label>: NN%" to stderr."""
    def on_progress(percent: int) -> None:
        sys.stderr.write(f"\rRendering {label}: {percent:3d}%")
        if percent >= 100:
            sys.stderr.write("\n")
        sys.stderr.flush()
    return on_progress


def run_scene(scene: Scene, params: FractalParams | None, background: Color) -> int:
    """
    Draw one scene straight to the terminal.

    Returns:
        Exit code.
    """
    try:
        geometry = canvas_geometry(get_terminal_geometry())
    except TerminalSizeError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    canvas = Canvas(geometry=geometry, background=background)
    try:
        draw_scene(canvas, scene, params, progress=_progress_printer(scene.title))
    except KeyboardInterrupt:
        print("\nCancelled.", file=sys.stderr)
        return 130
    except RenderCancelled as e:
        print(f"\n{e}", file=sys.stderr)
        return 1

    present(canvas, f"{scene.title} rendered.\n")
    return 0


def main(argv: list[str] | None = None) -> int:
    """
    Main entry point for termpix.

    This function:
        1. Parses command-line arguments
        2. Handles special commands (--paths, --version)
        3. Loads configuration
        4. Draws a single scene, or starts the Textual application

    Returns:
        Exit code (0 for success, non-zero for errors).
    """
    args = parse_args(argv)

    # Handle --paths flag
    if args.paths:
        print_paths()
        return 0

    configure_logging(debug=args.debug)
    logger.info(f"Starting {__app_name__} {__version__} (scene: {args.scene or 'menu'})")

    # Load configuration
    config_error = None
    try:
        config = Config.load(args.config)
    except ConfigError as e:
        if args.scene:
            print(f"Config error: {e}", file=sys.stderr)
            return 1
        config = Config()
        config_error = str(e)

    # Command-line overrides win over the config file
    if args.background:
        config.display.background = args.background

    if args.scene is None:
        app = TermpixApp(config=config, config_error=config_error)
        app.run()
        return 0

    try:
        background = config.display.background_color
        params = params_from_args(args, config)
    except (InvalidFractalParams, UnknownColorError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 2

    return run_scene(Scene(args.scene), params, background)


if __name__ == "__main__":
    sys.exit(main())
