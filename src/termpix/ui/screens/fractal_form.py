# =============================================================================
# Fractal Parameters Screen
# =============================================================================
# A modal form for the view settings of a fractal render.
#
# Every field is pre-filled with its default; leaving a field blank also
# means "use the default". Julia forms get two extra fields for the
# constant c, pre-filled from the chosen preset.
#
# The parsing is kept in plain functions so it can be tested without
# running the UI.
# =============================================================================

from dataclasses import dataclass

from textual.app import ComposeResult
from textual.binding import Binding
from textual.screen import ModalScreen
from textual.widgets import Static, Input, Button, Label
from textual.containers import Vertical, Horizontal

from termpix.fractal.params import FractalParams, InvalidFractalParams, JuliaParams


# =============================================================================
# Form Model
# =============================================================================

@dataclass(frozen=True)
class FormField:
    """One input on the form."""
    name: str
    label: str
    default: float | int

    @property
    def is_int(self) -> bool:
        return isinstance(self.default, int)


def fields_for(params: FractalParams) -> list[FormField]:
    """The form fields for a view, pre-filled from `params`."""
    fields = []
    if isinstance(params, JuliaParams):
        fields.extend([
            FormField("c_re", "c real part", params.c_re),
            FormField("c_im", "c imaginary part", params.c_im),
        ])
    fields.extend([
        FormField("center_re", "Centre X (real)", params.center_re),
        FormField("center_im", "Centre Y (imaginary)", params.center_im),
        FormField("zoom", "Zoom level", params.zoom),
        FormField("max_iter", "Max iterations", params.max_iter),
    ])
    return fields


def parse_field(form_field: FormField, text: str) -> float | int:
    """
    Parse one input value.

    Blank input gives the field's default.

    Raises:
        ValueError: With the field's label if the text isn't a number.
    """
    text = text.strip()
    if not text:
        return form_field.default
    try:
        return int(text) if form_field.is_int else float(text)
    except ValueError:
        kind = "a whole number" if form_field.is_int else "a number"
        raise ValueError(f"{form_field.label} must be {kind}, got {text!r}") from None


def build_params(defaults: FractalParams, values: dict[str, str]) -> FractalParams:
    """
    Build the view described by the form.

    Args:
        defaults: The view the form was opened with. Its type decides
                  whether a FractalParams or JuliaParams is returned.
        values: Raw text per field name. Missing names use defaults.

    Raises:
        ValueError: If a value doesn't parse, or the resulting view is
                    invalid (InvalidFractalParams is a ValueError).
    """
    parsed = {
        form_field.name: parse_field(form_field, values.get(form_field.name, ""))
        for form_field in fields_for(defaults)
    }
    return type(defaults)(**parsed)


# =============================================================================
# Screen
# =============================================================================

class FractalFormScreen(ModalScreen[FractalParams | None]):
    """
    Modal screen for editing a fractal view before rendering.

    Returns:
        The edited FractalParams (JuliaParams for Julia), or None if
        cancelled.
    """

    BINDINGS = [
        Binding("escape", "cancel", "Cancel"),
    ]

    CSS = """
    FractalFormScreen {
        align: center middle;
    }

    #form-dialog {
        width: 60;
        height: auto;
        padding: 1 2;
        background: $surface;
        border: thick $primary;
    }

    #form-title {
        text-align: center;
        text-style: bold;
        margin-bottom: 1;
    }

    #form-hint {
        color: $text-muted;
        margin-bottom: 1;
    }

    .form-row {
        height: auto;
    }

    .form-row Label {
        width: 24;
        padding: 1 0;
    }

    .form-row Input {
        width: 1fr;
    }

    #form-error {
        color: $error;
        text-align: center;
        height: auto;
    }

    #form-buttons {
        align: center middle;
        height: auto;
        margin-top: 1;
    }

    #form-buttons Button {
        margin: 0 1;
    }
    """

    def __init__(self, title: str, defaults: FractalParams) -> None:
        """
        Initialize the form.

        Args:
            title: Heading, e.g. "Mandelbrot Set".
            defaults: View to pre-fill the fields with.
        """
        super().__init__()
        self._title = title
        self._defaults = defaults
        self._fields = fields_for(defaults)

    def compose(self) -> ComposeResult:
        """Compose the form dialog."""
        with Vertical(id="form-dialog"):
            yield Static(self._title, id="form-title")
            yield Static(
                "Press Enter to accept defaults, or enter custom values.",
                id="form-hint",
            )
            for form_field in self._fields:
                with Horizontal(classes="form-row"):
                    yield Label(form_field.label)
                    yield Input(
                        value=str(form_field.default),
                        placeholder=str(form_field.default),
                        id=f"field-{form_field.name}",
                    )
            yield Static("", id="form-error")
            with Horizontal(id="form-buttons"):
                yield Button("Render", id="render-btn", variant="primary")
                yield Button("Cancel", id="cancel-btn")

    def on_mount(self) -> None:
        """Focus the first field when mounted."""
        self.query_one(f"#field-{self._fields[0].name}", Input).focus()

    def on_button_pressed(self, event: Button.Pressed) -> None:
        """Handle button presses."""
        if event.button.id == "render-btn":
            self.action_submit()
        elif event.button.id == "cancel-btn":
            self.action_cancel()

    def on_input_submitted(self, event: Input.Submitted) -> None:
        """Handle Enter in any field."""
        self.action_submit()

    def action_submit(self) -> None:
        """Validate the fields and return the view."""
        values = {
            form_field.name: self.query_one(f"#field-{form_field.name}", Input).value
            for form_field in self._fields
        }
        try:
            params = build_params(self._defaults, values)
        except (ValueError, InvalidFractalParams) as e:
            self.query_one("#form-error", Static).update(str(e))
            self.notify(str(e), severity="warning")
            return
        self.dismiss(params)

    def action_cancel(self) -> None:
        """Cancel and return None."""
        self.dismiss(None)
