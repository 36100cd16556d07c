# =============================================================================
# Colour Model Tests
# =============================================================================

import pytest

from termpix.core.color import (
    FRACTAL_PALETTE,
    Color,
    UnknownColorError,
    color_names,
    parse_draw_color,
)


def test_sixteen_colours_with_standard_codes():
    assert len(Color) == 16
    assert Color.BLACK.value == (30, 40)
    assert Color.WHITE.value == (37, 47)
    assert Color.BRIGHT_BLACK.value == (90, 100)
    assert Color.BRIGHT_WHITE.value == (97, 107)


def test_background_code_is_foreground_plus_ten():
    for color in Color:
        assert color.bg == color.fg + 10


def test_code_ranges():
    for color in Color:
        assert color.fg in range(30, 38) or color.fg in range(90, 98)
        assert color.bg in range(40, 48) or color.bg in range(100, 108)


@pytest.mark.parametrize("name", ["bright_red", "BRIGHT_RED", "Bright Red", "bright-red"])
def test_parse_accepts_spelling_variants(name):
    assert Color.parse(name) is Color.BRIGHT_RED


def test_parse_unknown_name():
    with pytest.raises(UnknownColorError, match="mauve"):
        Color.parse("mauve")


def test_unknown_colour_is_a_value_error():
    assert issubclass(UnknownColorError, ValueError)


class TestParseDrawColor:
    def test_colour_passes_through(self):
        assert parse_draw_color(Color.GREEN) is Color.GREEN

    def test_none_is_transparent(self):
        assert parse_draw_color(None) is None

    @pytest.mark.parametrize("name", ["none", "Transparent", ""])
    def test_transparent_names(self, name):
        assert parse_draw_color(name) is None

    def test_name(self):
        assert parse_draw_color("cyan") is Color.CYAN

    def test_bad_name(self):
        with pytest.raises(UnknownColorError):
            parse_draw_color("ultraviolet")

    @pytest.mark.parametrize("value", [42, 3.5, ("red",)])
    def test_non_string_rejected(self, value):
        with pytest.raises(UnknownColorError):
            parse_draw_color(value)


def test_color_names_in_definition_order():
    names = color_names()
    assert names[0] == "black"
    assert names[-1] == "bright_white"
    assert len(names) == 16


def test_palette_starts_with_inside_colour():
    assert FRACTAL_PALETTE[0] is Color.BLACK
    assert len(FRACTAL_PALETTE) == 15
    assert len(set(FRACTAL_PALETTE)) == 15
