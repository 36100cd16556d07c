# =============================================================================
# UI Module
# =============================================================================
# Textual-based menu for termpix.
#
# The menu only collects choices and shows progress. The pictures
# themselves are drawn straight onto the terminal while Textual is
# suspended, since Textual would otherwise repaint over them.
# =============================================================================

from termpix.ui.screens.main import MainScreen

__all__ = ["MainScreen"]
