# =============================================================================
# Fractal Engine Tests
# =============================================================================

import pytest

from termpix.core import Color, Framebuffer
from termpix.fractal import (
    MANDELBROT_BASE_RANGE,
    FractalParams,
    InvalidFractalParams,
    JuliaParams,
    PlaneMapping,
    RenderCancelled,
    color_for_iteration,
    escape_iterations,
    get_julia_preset,
    julia_preset_names,
    render_julia,
    render_mandelbrot,
)
from termpix.fractal.params import DEFAULT_JULIA_PRESET, JULIA_PRESETS

# Not in the fractal palette, so untouched pixels are easy to spot
UNTOUCHED = Color.BRIGHT_BLACK


# =============================================================================
# Iteration
# =============================================================================

class TestEscapeIterations:
    def test_origin_never_escapes(self):
        assert escape_iterations(0.0, 0.0, 0.0, 0.0, 50) == 50

    def test_escapes_after_two_steps(self):
        # 0 -> 2 -> 6
        assert escape_iterations(0.0, 0.0, 2.0, 0.0, 50) == 2

    def test_far_point_escapes_immediately(self):
        assert escape_iterations(0.0, 0.0, 10.0, 0.0, 50) == 1
        assert escape_iterations(3.0, 0.0, 0.0, 0.0, 50) == 0

    def test_bounded_by_max_iter(self):
        assert escape_iterations(0.0, 0.0, -1.0, 0.0, 7) == 7


class TestColorForIteration:
    def test_inside_is_black(self):
        assert color_for_iteration(50, 50) is Color.BLACK

    def test_escaping_counts_cycle_past_index_zero(self):
        assert color_for_iteration(0, 50) is Color.BLUE
        assert color_for_iteration(13, 50) is Color.BRIGHT_WHITE
        assert color_for_iteration(14, 50) is Color.BLUE

    def test_never_black_for_escaping_points(self):
        for iteration in range(49):
            assert color_for_iteration(iteration, 50) is not Color.BLACK

    def test_custom_palette(self):
        palette = (Color.WHITE, Color.RED, Color.GREEN)
        assert color_for_iteration(5, 5, palette) is Color.WHITE
        assert color_for_iteration(0, 5, palette) is Color.RED
        assert color_for_iteration(1, 5, palette) is Color.GREEN
        assert color_for_iteration(2, 5, palette) is Color.RED


# =============================================================================
# Parameters
# =============================================================================

class TestParams:
    def test_defaults(self):
        params = FractalParams()
        assert (params.center_re, params.center_im, params.zoom, params.max_iter) == (-0.5, 0.0, 1.0, 50)

    def test_julia_defaults(self):
        params = JuliaParams()
        assert params.center_re == 0.0
        assert params.c == complex(-0.7, 0.27015)

    @pytest.mark.parametrize("zoom", [0.0, -1.0, float("nan")])
    def test_zoom_must_be_positive(self, zoom):
        with pytest.raises(InvalidFractalParams):
            FractalParams(zoom=zoom)

    def test_max_iter_must_be_positive(self):
        with pytest.raises(InvalidFractalParams):
            JuliaParams(max_iter=0)

    def test_invalid_params_is_value_error(self):
        assert issubclass(InvalidFractalParams, ValueError)


class TestPresets:
    def test_six_presets(self):
        assert julia_preset_names() == [
            "dendrite", "spiral", "rabbit", "siegel", "douady", "electric",
        ]

    def test_default_preset_matches_julia_defaults(self):
        preset = get_julia_preset(DEFAULT_JULIA_PRESET)
        assert complex(preset.c_re, preset.c_im) == JuliaParams().c

    def test_lookup_is_case_insensitive(self):
        assert get_julia_preset("Rabbit").c_re == -0.4

    def test_unknown_preset(self):
        with pytest.raises(KeyError):
            get_julia_preset("cauliflower")

    def test_describe_negative_imaginary(self):
        douady = JULIA_PRESETS[4]
        assert douady.describe() == "Douady's rabbit: c = -0.835 - 0.2321i"


# =============================================================================
# Plane Mapping
# =============================================================================

def test_mapping_widens_real_axis_by_aspect():
    fb = Framebuffer(80, 40)
    mapping = PlaneMapping.for_framebuffer(fb, -0.5, 0.0, 1.0, 3.0)
    assert mapping.re_min == pytest.approx(-3.5)
    assert mapping.im_min == pytest.approx(-1.5)
    assert mapping.re_step == pytest.approx(6.0 / 80)
    assert mapping.im_step == pytest.approx(3.0 / 40)


def test_mapping_zoom_narrows_view():
    fb = Framebuffer(40, 40)
    mapping = PlaneMapping.for_framebuffer(fb, 0.0, 0.0, 4.0, 4.0)
    assert mapping.pixel_to_complex(0, 0) == pytest.approx((-0.5, -0.5))
    assert mapping.pixel_to_complex(20, 20) == pytest.approx((0.0, 0.0))


# =============================================================================
# Rendering
# =============================================================================

class TestRenderMandelbrot:
    def test_overwrites_every_pixel(self):
        fb = Framebuffer(20, 20, UNTOUCHED)
        render_mandelbrot(fb)
        assert fb.count(UNTOUCHED) == 0

    def test_centre_inside_corner_outside(self):
        fb = Framebuffer(20, 20)
        render_mandelbrot(fb, FractalParams(max_iter=50))
        # Pixel (10, 10) maps to c = -0.5
        assert fb.get(10, 10) is Color.BLACK
        # Pixel (0, 0) maps to c = -2 - 1.5i, which escapes at once
        assert fb.get(0, 0) is Color.BRIGHT_BLUE

    def test_origin_inside_when_centred_and_zoomed(self):
        fb = Framebuffer(20, 20)
        params = FractalParams(center_re=0.0, center_im=0.0, zoom=2.0)
        render_mandelbrot(fb, params)
        mapping = PlaneMapping.for_framebuffer(fb, 0.0, 0.0, 2.0, MANDELBROT_BASE_RANGE)
        assert mapping.pixel_to_complex(10, 10) == pytest.approx((0.0, 0.0), abs=1e-12)
        assert fb.get(10, 10) is Color.BLACK

    def test_progress_reports_each_percent_once_then_100(self):
        fb = Framebuffer(4, 4)
        reported = []
        render_mandelbrot(fb, progress=reported.append)
        assert reported == [0, 25, 50, 75, 100]

    def test_progress_is_monotonic(self):
        fb = Framebuffer(10, 300)
        reported = []
        render_mandelbrot(fb, FractalParams(max_iter=5), progress=reported.append)
        assert reported == sorted(set(reported))
        assert reported[-1] == 100

    def test_cancel_before_first_row(self):
        fb = Framebuffer(8, 6, UNTOUCHED)
        with pytest.raises(RenderCancelled) as excinfo:
            render_mandelbrot(fb, cancel=lambda: True)
        assert excinfo.value.rows_done == 0
        assert fb.count(UNTOUCHED) == 48

    def test_cancel_stops_at_row_boundary(self):
        fb = Framebuffer(8, 6, UNTOUCHED)
        checks = []
        reported = []

        def cancel():
            checks.append(True)
            return len(checks) > 2

        with pytest.raises(RenderCancelled) as excinfo:
            render_mandelbrot(fb, progress=reported.append, cancel=cancel)

        assert excinfo.value.rows_done == 2
        assert UNTOUCHED not in fb.row(0) + fb.row(1)
        for y in range(2, 6):
            assert fb.row(y) == [UNTOUCHED] * 8
        assert 100 not in reported


class TestRenderJulia:
    def test_c_zero_is_the_unit_disk(self):
        fb = Framebuffer(20, 20)
        render_julia(fb, JuliaParams(c_re=0.0, c_im=0.0))
        # Pixel (10, 10) maps to z = 0; pixel (0, 0) to z = -2 - 2i
        assert fb.get(10, 10) is Color.BLACK
        assert fb.get(0, 0) is Color.BLUE

    def test_default_view(self):
        fb = Framebuffer(20, 20, UNTOUCHED)
        reported = []
        render_julia(fb, progress=reported.append)
        assert fb.count(UNTOUCHED) == 0
        assert reported[-1] == 100
