# =============================================================================
# Main Menu Screen
# =============================================================================
# The screen shown when termpix starts: pick something to draw.
#
# Flow for a fractal:
#   1. (Julia only) pick a preset constant c
#   2. Edit the view in the parameter form
#   3. Render in a background thread, with a progress bar
#   4. Suspend Textual and draw the canvas straight onto the terminal
#   5. Wait for a key, then come back to the menu
#
# Escape during step 3 cancels the render at the next row boundary.
# =============================================================================

import logging
import sys

from textual.app import ComposeResult
from textual.binding import Binding
from textual.screen import Screen
from textual.widgets import Footer, Header, Static, Button, ProgressBar
from textual.containers import Vertical
from textual.worker import get_current_worker
from textual import work

from termpix.canvas import Canvas
from termpix.config import Config
from termpix.fractal.engine import RenderCancelled
from termpix.fractal.params import FractalParams, JuliaParams, JuliaPreset
from termpix.rendering.terminal import TerminalGeometry
from termpix.scenes import Scene, canvas_geometry, draw_scene, present
from termpix.ui.screens.fractal_form import FractalFormScreen
from termpix.ui.screens.julia_preset import JuliaPresetScreen

logger = logging.getLogger(__name__)


class MainScreen(Screen):
    """
    The main menu.

    Keybindings:
        - 1: Mandelbrot set
        - 2: Julia set
        - 3: Shapes demo
        - escape: Cancel a running render
    """

    BINDINGS = [
        Binding("1", "mandelbrot", "Mandelbrot"),
        Binding("2", "julia", "Julia"),
        Binding("3", "shapes", "Shapes"),
        Binding("escape", "cancel_render", "Cancel", show=False),
    ]

    CSS = """
    MainScreen {
        align: center middle;
    }

    #menu {
        width: 50;
        height: auto;
        padding: 1 2;
        background: $surface;
        border: double $primary;
    }

    #menu-title {
        text-align: center;
        text-style: bold;
        margin-bottom: 1;
    }

    #menu Button {
        width: 100%;
    }

    #terminal-size {
        color: $text-muted;
        text-align: center;
        margin-top: 1;
    }

    #render-progress {
        margin-top: 1;
        display: none;
    }

    #render-progress.active {
        display: block;
    }

    #status-line {
        dock: bottom;
        height: 1;
        background: $surface-darken-2;
        color: $text-muted;
        padding: 0 1;
    }
    """

    def __init__(self, config: Config | None = None) -> None:
        """
        Initialize the main screen.

        Args:
            config: Loaded configuration (defaults if None).
        """
        super().__init__()
        self._config = config or Config()
        self._rendering = False

    def compose(self) -> ComposeResult:
        """
        Compose the menu.

        +------------------------------------+
        |  Terminal Graphics - Fractal Viewer |
        |  [ 1) Mandelbrot Set ]              |
        |  [ 2) Julia Set      ]              |
        |  [ 3) Shapes Demo    ]              |
        |  [ 4) Quit           ]              |
        |  Terminal: WxH pixels               |
        |  [=========>        ] 45%           |
        +------------------------------------+
        """
        yield Header()

        with Vertical(id="menu"):
            yield Static("Terminal Graphics - Fractal Viewer", id="menu-title")
            yield Button("1) Mandelbrot Set", id="mandelbrot-btn", variant="primary")
            yield Button("2) Julia Set", id="julia-btn")
            yield Button("3) Shapes Demo", id="shapes-btn")
            yield Button("4) Quit", id="quit-btn", variant="error")
            yield Static("", id="terminal-size")
            yield ProgressBar(total=100, show_eta=False, id="render-progress")

        yield Static("Ready", id="status-line")
        yield Footer()

    def on_mount(self) -> None:
        """Show the terminal size and focus the first entry."""
        self._show_terminal_size()
        self.query_one("#mandelbrot-btn", Button).focus()

    def on_resize(self) -> None:
        """Keep the size readout current."""
        self._show_terminal_size()

    # -------------------------------------------------------------------------
    # Helpers
    # -------------------------------------------------------------------------

    def _terminal_geometry(self) -> TerminalGeometry:
        size = self.app.size
        return TerminalGeometry(columns=size.width, rows=size.height)

    def _show_terminal_size(self) -> None:
        geometry = canvas_geometry(self._terminal_geometry())
        self.query_one("#terminal-size", Static).update(f"Terminal: {geometry}")

    def update_status(self, text: str) -> None:
        """Update the status line at the bottom of the screen."""
        self.query_one("#status-line", Static).update(text)

    def _set_progress(self, percent: int) -> None:
        self.query_one("#render-progress", ProgressBar).update(progress=percent)
        self.update_status(f"Rendering: {percent:3d}%  (Esc to cancel)")

    def _new_canvas(self) -> Canvas:
        return Canvas(
            geometry=canvas_geometry(self._terminal_geometry()),
            background=self._config.display.background_color,
        )

    # -------------------------------------------------------------------------
    # Menu Actions
    # -------------------------------------------------------------------------

    def on_button_pressed(self, event: Button.Pressed) -> None:
        """Dispatch menu buttons to their actions."""
        button_id = event.button.id
        if button_id == "mandelbrot-btn":
            self.action_mandelbrot()
        elif button_id == "julia-btn":
            self.action_julia()
        elif button_id == "shapes-btn":
            self.action_shapes()
        elif button_id == "quit-btn":
            self.app.exit()

    def action_mandelbrot(self) -> None:
        """Ask for a Mandelbrot view, then render it."""
        if self._rendering:
            return

        def on_params(params: FractalParams | None) -> None:
            if params is not None:
                self._render_scene(Scene.MANDELBROT, params)

        self.app.push_screen(
            FractalFormScreen("Mandelbrot Set", self._config.mandelbrot.to_params()),
            on_params,
        )

    def action_julia(self) -> None:
        """Ask for a Julia preset and view, then render it."""
        if self._rendering:
            return

        def on_params(params: FractalParams | None) -> None:
            if params is not None:
                self._render_scene(Scene.JULIA, params)

        def on_preset(preset: JuliaPreset | None) -> None:
            if preset is None:
                return
            defaults = self._config.julia.to_params()
            defaults = JuliaParams(
                center_re=defaults.center_re,
                center_im=defaults.center_im,
                zoom=defaults.zoom,
                max_iter=defaults.max_iter,
                c_re=preset.c_re,
                c_im=preset.c_im,
            )
            self.app.push_screen(FractalFormScreen("Julia Set", defaults), on_params)

        self.app.push_screen(JuliaPresetScreen(self._config.julia.preset), on_preset)

    def action_shapes(self) -> None:
        """Draw the shapes demo."""
        if self._rendering:
            return
        self._render_scene(Scene.SHAPES, None)

    def action_cancel_render(self) -> None:
        """Cancel a running render."""
        if self._rendering:
            self.workers.cancel_group(self, "render")
            self.update_status("Cancelling...")

    # -------------------------------------------------------------------------
    # Rendering
    # -------------------------------------------------------------------------

    def _render_scene(self, scene: Scene, params: FractalParams | None) -> None:
        self._rendering = True
        self.query_one("#render-progress", ProgressBar).add_class("active")
        self._set_progress(0)
        self._do_render(scene, params)

    @work(thread=True, exclusive=True, group="render")
    def _do_render(self, scene: Scene, params: FractalParams | None) -> None:
        """Background worker: draw the scene, then hand it to the UI thread."""
        worker = get_current_worker()
        canvas = self._new_canvas()

        def on_progress(percent: int) -> None:
            self.app.call_from_thread(self._set_progress, percent)

        try:
            draw_scene(
                canvas,
                scene,
                params,
                progress=on_progress,
                cancel=lambda: worker.is_cancelled,
            )
        except RenderCancelled as e:
            self.app.call_from_thread(self._finish_render, None, str(e))
            return
        except Exception as e:
            logger.error(f"Render failed: {e}", exc_info=True)
            self.app.call_from_thread(self._finish_render, None, f"Render failed: {e}")
            return

        self.app.call_from_thread(self._finish_render, (scene, canvas), None)

    def _finish_render(
        self,
        result: tuple[Scene, Canvas] | None,
        error: str | None,
    ) -> None:
        """Back on the UI thread: show the canvas or report what went wrong."""
        self._rendering = False
        self.query_one("#render-progress", ProgressBar).remove_class("active")

        if result is None:
            self.update_status(error or "Ready")
            self.notify(error or "Render stopped", severity="warning")
            return

        scene, canvas = result

        # Suspend Textual, draw straight onto the terminal, then resume
        with self.app.suspend():
            present(canvas, f"{scene.title} rendered. Press any key to return to menu...")
            _wait_for_key()

        self.update_status(f"{scene.title} rendered ({canvas.width}x{canvas.height} pixels)")


def _wait_for_key() -> None:
    """Block until a single key is pressed."""
    import termios
    import tty

    fd = sys.stdin.fileno()
    old_settings = termios.tcgetattr(fd)
    try:
        tty.setraw(fd)
        sys.stdin.read(1)
    finally:
        termios.tcsetattr(fd, termios.TCSADRAIN, old_settings)
