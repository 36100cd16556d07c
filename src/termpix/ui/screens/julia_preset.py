# =============================================================================
# Julia Preset Screen
# =============================================================================
# A modal picker for the Julia constant c. Each preset is a known-good
# value; the parameter form that follows lets the user adjust c freely,
# so there's no separate "custom" entry.
# =============================================================================

from textual.app import ComposeResult
from textual.binding import Binding
from textual.screen import ModalScreen
from textual.widgets import Static, Button
from textual.containers import Vertical

from termpix.fractal.params import JULIA_PRESETS, JuliaPreset


class JuliaPresetScreen(ModalScreen[JuliaPreset | None]):
    """
    Modal screen listing the Julia presets.

    Keys 1-6 pick a preset directly.

    Returns:
        The chosen JuliaPreset, or None if cancelled.
    """

    BINDINGS = [
        Binding("escape", "cancel", "Cancel"),
    ] + [
        Binding(str(number), f"pick({number - 1})", show=False)
        for number in range(1, len(JULIA_PRESETS) + 1)
    ]

    CSS = """
    JuliaPresetScreen {
        align: center middle;
    }

    #preset-dialog {
        width: 60;
        height: auto;
        padding: 1 2;
        background: $surface;
        border: thick $primary;
    }

    #preset-title {
        text-align: center;
        text-style: bold;
        margin-bottom: 1;
    }

    #preset-dialog Button {
        width: 100%;
        margin-bottom: 0;
    }
    """

    def __init__(self, selected: str | None = None) -> None:
        """
        Initialize the preset picker.

        Args:
            selected: Name of the preset to focus initially.
        """
        super().__init__()
        self._selected = selected

    def compose(self) -> ComposeResult:
        """Compose the preset list."""
        with Vertical(id="preset-dialog"):
            yield Static("Julia Set: choose c", id="preset-title")
            for number, preset in enumerate(JULIA_PRESETS, start=1):
                yield Button(
                    f"{number}) {preset.describe()}",
                    id=f"preset-{preset.name}",
                )
            yield Button("Cancel", id="cancel-btn", variant="error")

    def on_mount(self) -> None:
        """Focus the configured preset, or the first one."""
        name = self._selected or JULIA_PRESETS[0].name
        buttons = self.query(f"#preset-{name}")
        if buttons:
            buttons.first().focus()

    def on_button_pressed(self, event: Button.Pressed) -> None:
        """Handle button presses."""
        button_id = event.button.id or ""
        if button_id == "cancel-btn":
            self.action_cancel()
            return
        for index, preset in enumerate(JULIA_PRESETS):
            if button_id == f"preset-{preset.name}":
                self.action_pick(index)
                return

    def action_pick(self, index: int) -> None:
        """Return the preset at `index`."""
        self.dismiss(JULIA_PRESETS[index])

    def action_cancel(self) -> None:
        """Cancel and return None."""
        self.dismiss(None)
