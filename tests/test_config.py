# =============================================================================
# Configuration Tests
# =============================================================================

import pytest

from termpix.config import Config, ConfigError, ensure_directories
from termpix.core import Color
from termpix.fractal import JuliaParams


@pytest.fixture
def xdg_home(temp_dir, monkeypatch):
    """Point the XDG directories into a temporary directory."""
    monkeypatch.setenv("XDG_CONFIG_HOME", str(temp_dir / "config"))
    monkeypatch.setenv("XDG_STATE_HOME", str(temp_dir / "state"))
    return temp_dir


def test_paths_follow_xdg(xdg_home):
    assert Config.config_file_path() == xdg_home / "config" / "termpix" / "config.toml"
    assert Config.log_file_path() == xdg_home / "state" / "termpix" / "termpix.log"


def test_ensure_directories(xdg_home):
    dirs = ensure_directories()
    assert dirs["config"].is_dir()
    assert dirs["state"].is_dir()


def test_missing_file_gives_defaults(xdg_home):
    config = Config.load()
    assert config.display.background_color is Color.BLACK
    assert config.mandelbrot.to_params().center_re == -0.5
    assert config.julia.preset == "dendrite"


def test_save_and_reload(temp_dir):
    path = temp_dir / "nested" / "config.toml"
    config = Config()
    config.display.background = "blue"
    config.mandelbrot.zoom = 4.0
    config.mandelbrot.max_iter = 200
    config.julia.preset = "rabbit"
    config.save(path)

    reloaded = Config.load(path)
    assert reloaded.display.background_color is Color.BLUE
    assert reloaded.mandelbrot.zoom == 4.0
    assert reloaded.mandelbrot.max_iter == 200
    assert reloaded.julia.preset == "rabbit"


def test_partial_file_and_int_coercion(temp_dir):
    path = temp_dir / "config.toml"
    path.write_text("[mandelbrot]\nzoom = 2\n", encoding="utf-8")
    config = Config.load(path)
    assert config.mandelbrot.zoom == 2.0
    assert isinstance(config.mandelbrot.zoom, float)
    assert config.mandelbrot.max_iter == 50


def test_julia_config_uses_preset_constant(temp_dir):
    path = temp_dir / "config.toml"
    path.write_text('[julia]\npreset = "siegel"\nzoom = 1.5\n', encoding="utf-8")
    params = Config.load(path).julia.to_params()
    assert isinstance(params, JuliaParams)
    assert (params.c_re, params.c_im, params.zoom) == (0.285, 0.01, 1.5)


@pytest.mark.parametrize(
    "text, message",
    [
        ("[display\nbackground = 'red'", "Invalid config file"),
        ("[display]\nbackground = 'mauve'", "background"),
        ("[julia]\npreset = 'cauliflower'", "preset"),
        ("[mandelbrot]\nzoom = 0", "zoom"),
        ("[julia]\nmax_iter = -3", "max_iter"),
        ("[mandelbrot]\nmax_iter = 'many'", "Invalid config value"),
        ("display = 'red'", "Invalid config value"),
    ],
)
def test_invalid_files(temp_dir, text, message):
    path = temp_dir / "config.toml"
    path.write_text(text, encoding="utf-8")
    with pytest.raises(ConfigError, match=message):
        Config.load(path)


def test_file_that_is_not_utf8(temp_dir):
    path = temp_dir / "config.toml"
    path.write_bytes(b"[display]\nbackground = '\xff\xfe'\n")
    with pytest.raises(ConfigError, match="Invalid config file"):
        Config.load(path)


def test_path_that_cannot_be_read(temp_dir):
    path = temp_dir / "config.toml"
    path.mkdir()
    with pytest.raises(ConfigError, match="Cannot read config file"):
        Config.load(path)
