# =============================================================================
# Pytest Configuration and Fixtures
# =============================================================================
# Shared fixtures for the termpix test suite.
# =============================================================================

import io

import pytest
import tempfile
from pathlib import Path

from termpix.canvas import Canvas
from termpix.core import Color, Framebuffer
from termpix.rendering import TerminalGeometry, TerminalOutput


@pytest.fixture
def temp_dir():
    """Create a temporary directory for test files."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture
def framebuffer():
    """A 4x4 black framebuffer (two character rows)."""
    return Framebuffer(4, 4, Color.BLACK)


@pytest.fixture
def large_framebuffer():
    """A 60x40 black framebuffer, big enough for every shape test."""
    return Framebuffer(60, 40, Color.BLACK)


@pytest.fixture
def stream():
    """An in-memory text stream standing in for stdout."""
    return io.StringIO()


@pytest.fixture
def terminal(stream):
    """TerminalOutput writing to the in-memory stream."""
    return TerminalOutput(stream)


@pytest.fixture
def small_geometry():
    """A 4-column, 2-row terminal (4x4 pixels)."""
    return TerminalGeometry(columns=4, rows=2)


@pytest.fixture
def canvas(small_geometry, terminal):
    """A 4x4 pixel canvas that renders into the in-memory stream."""
    return Canvas(geometry=small_geometry, terminal=terminal)


@pytest.fixture
def demo_canvas(terminal):
    """A canvas the size of an 80x24 terminal minus the message line."""
    return Canvas(geometry=TerminalGeometry(columns=80, rows=23), terminal=terminal)
