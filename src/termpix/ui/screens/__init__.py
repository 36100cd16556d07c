# =============================================================================
# UI Screens
# =============================================================================
# Full-screen views and dialogs for the application.
#
#   - MainScreen: The menu (Mandelbrot / Julia / Shapes demo / Quit)
#   - JuliaPresetScreen: Modal picker for the Julia constant c
#   - FractalFormScreen: Modal form for the view (centre, zoom, iterations)
# =============================================================================

from termpix.ui.screens.main import MainScreen
from termpix.ui.screens.fractal_form import FractalFormScreen
from termpix.ui.screens.julia_preset import JuliaPresetScreen

__all__ = ["MainScreen", "FractalFormScreen", "JuliaPresetScreen"]
