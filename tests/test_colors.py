# Copyright (c) 2026 Legibly
# SPDX-License-Identifier: MIT

"""Tests for color string parsing."""

import pytest

from legibly.errors import ColorParseError, ParseError
from legibly.measure.colors import parse_color, resolve_rgb
from legibly.schema import HexColor, HslColor, NamedColor, RgbColor


class TestHex:

    def test_short_hex(self):
        color = parse_color("#FFF")
        assert color == HexColor("#fff")
        assert color.to_rgb() == (255.0, 255.0, 255.0)

    def test_long_hex(self):
        assert parse_color("#1e3a8a").to_rgb() == (30.0, 58.0, 138.0)

    def test_hex_with_alpha(self):
        color = parse_color("#ff000080")
        assert color.to_rgb() == (255.0, 0.0, 0.0)
        assert color.alpha == pytest.approx(128 / 255)

    def test_short_hex_with_alpha(self):
        assert parse_color("#0f08").to_rgb() == (0.0, 255.0, 0.0)

    @pytest.mark.parametrize("text", ["#ggg", "#12", "#12345", "#1234567"])
    def test_invalid_hex(self, text):
        with pytest.raises(ColorParseError):
            parse_color(text)


class TestRgb:

    def test_comma_syntax(self):
        assert parse_color("rgb(255, 0, 0)") == RgbColor(255.0, 0.0, 0.0)

    def test_rgba_alpha(self):
        color = parse_color("rgba(0, 0, 0, 0.5)")
        assert color.alpha == 0.5
        assert color.to_rgb() == (0.0, 0.0, 0.0)

    def test_space_syntax_with_percentages(self):
        color = parse_color("rgb(100% 0% 0% / 50%)")
        assert color.to_rgb() == pytest.approx((255.0, 0.0, 0.0))
        assert color.alpha == pytest.approx(0.5)

    def test_channels_clamped(self):
        assert parse_color("rgb(300, -5, 10)").to_rgb() == (255.0, 0.0, 10.0)

    def test_wrong_arity(self):
        with pytest.raises(ColorParseError):
            parse_color("rgb(1, 2)")

    def test_bad_unit(self):
        with pytest.raises(ColorParseError):
            parse_color("rgb(1px, 2, 3)")


class TestHsl:

    def test_green(self):
        assert parse_color("hsl(120, 100%, 50%)").to_rgb() == pytest.approx((0.0, 255.0, 0.0))

    def test_turn_unit(self):
        color = parse_color("hsl(0.5turn 100% 50%)")
        assert isinstance(color, HslColor)
        assert color.h == pytest.approx(180.0)
        assert color.to_rgb() == pytest.approx((0.0, 255.0, 255.0))

    def test_hsla(self):
        assert parse_color("hsla(0, 0%, 100%, 0.25)").alpha == 0.25

    def test_bad_hue_unit(self):
        with pytest.raises(ColorParseError):
            parse_color("hsl(10px, 50%, 50%)")


class TestNamed:

    def test_case_insensitive(self):
        color = parse_color("RebeccaPurple")
        assert color == NamedColor("rebeccapurple")
        assert color.to_rgb() == (102.0, 51.0, 153.0)

    def test_transparent_rejected(self):
        with pytest.raises(ColorParseError):
            parse_color("transparent")

    def test_unknown_name(self):
        with pytest.raises(ColorParseError):
            parse_color("notacolor")


class TestErrors:

    @pytest.mark.parametrize("text", ["", "   ", "blue-ish", "cmyk(0, 0, 0, 0)"])
    def test_unrecognized(self, text):
        with pytest.raises(ColorParseError):
            parse_color(text)

    def test_non_string(self):
        with pytest.raises(ColorParseError):
            parse_color(123)

    def test_error_hierarchy(self):
        with pytest.raises(ParseError):
            parse_color("nope")
        with pytest.raises(ValueError):
            parse_color("nope")


class TestResolveRgb:

    def test_string(self):
        assert resolve_rgb("white") == (255.0, 255.0, 255.0)

    def test_color_value(self):
        assert resolve_rgb(HexColor("#000")) == (0.0, 0.0, 0.0)
