"""Tests for tokenforge.colors."""

from __future__ import annotations

import re

import pytest

from tokenforge.colors import (
    color_to_hex,
    color_to_hsl,
    color_to_oklch,
    color_to_rgb,
    color_to_rgb_triplet,
    parse_css_color,
    parse_hex_color,
    parse_rgb_function,
    to_linear,
)
from tokenforge.schema import ColorValue

RED = ColorValue(r=1, g=0, b=0, a=1)
BLACK = ColorValue(r=0, g=0, b=0, a=1)

_OKLCH_RE = re.compile(r"^oklch\((\d+\.\d{2})% (\d+\.\d{4}) (\d+\.\d{2})\)$")


class TestHex:
    def test_opaque_color_has_six_digits(self) -> None:
        assert color_to_hex(RED) == "#ff0000"

    def test_translucent_color_has_alpha_byte(self) -> None:
        assert color_to_hex(ColorValue(r=1, g=0, b=0, a=0.5)) == "#ff000080"

    def test_channels_round_half_up(self) -> None:
        # 0.5 * 255 = 127.5
        assert color_to_hex(ColorValue(r=0.5, g=0.5, b=0.5)) == "#808080"

    @pytest.mark.parametrize("literal", ["#3b82f6", "#000000", "#ffffff", "#1d293d05", "#ff000080"])
    def test_parse_then_encode_returns_input(self, literal: str) -> None:
        assert color_to_hex(parse_hex_color(literal)) == literal

    def test_parse_is_case_insensitive(self) -> None:
        assert color_to_hex(parse_hex_color("#3B82F6")) == "#3b82f6"

    def test_parse_without_alpha_is_opaque(self) -> None:
        assert parse_hex_color("#ff0000").a == 1.0

    @pytest.mark.parametrize(
        "literal",
        ["#fff", "#ff00", "#gg0000", "not a color", "#ff0000f", "##ff0000", "#ff0000 ", " #ff0000", "ff0000"],
    )
    def test_parse_rejects_other_lengths_and_digits(self, literal: str) -> None:
        with pytest.raises(ValueError):
            parse_hex_color(literal)


class TestRgb:
    def test_opaque(self) -> None:
        assert color_to_rgb(RED) == "rgb(255, 0, 0)"

    def test_translucent_alpha_has_two_decimals(self) -> None:
        assert color_to_rgb(ColorValue(r=0, g=0, b=1, a=0.5)) == "rgba(0, 0, 255, 0.50)"

    def test_alpha_exactly_one_is_opaque(self) -> None:
        assert color_to_rgb(ColorValue(r=0, g=1, b=0, a=1.0)).startswith("rgb(")

    def test_triplet(self) -> None:
        assert color_to_rgb_triplet(ColorValue(r=0.2, g=0.4, b=0.6)) == "51, 102, 153"

    def test_parse_rgb_function(self) -> None:
        color = parse_rgb_function("rgb(255, 0, 0)")
        assert color == RED

    def test_parse_rgba_function(self) -> None:
        color = parse_rgb_function("rgba(0, 0, 0, 0.25)")
        assert color is not None
        assert color.a == 0.25

    def test_parse_rgb_function_out_of_range_is_none(self) -> None:
        assert parse_rgb_function("rgb(300, 0, 0)") is None

    def test_parse_css_color_dispatches(self) -> None:
        assert parse_css_color("#ff0000") == RED
        assert parse_css_color("rgb(255, 0, 0)") == RED
        assert parse_css_color("red") is None
        assert parse_css_color("#fff") is None


class TestHsl:
    @pytest.mark.parametrize(
        ("color", "expected"),
        [
            (ColorValue(r=1, g=0, b=0), "hsl(0, 100%, 50%)"),
            (ColorValue(r=0, g=1, b=0), "hsl(120, 100%, 50%)"),
            (ColorValue(r=0, g=0, b=1), "hsl(240, 100%, 50%)"),
            (ColorValue(r=1, g=1, b=1), "hsl(0, 0%, 100%)"),
            (BLACK, "hsl(0, 0%, 0%)"),
        ],
    )
    def test_primaries(self, color: ColorValue, expected: str) -> None:
        assert color_to_hsl(color) == expected

    def test_translucent_uses_hsla(self) -> None:
        assert color_to_hsl(ColorValue(r=1, g=0, b=0, a=0.5)) == "hsla(0, 100%, 50%, 0.50)"


class TestOklch:
    def test_black_is_exact(self) -> None:
        assert color_to_oklch(BLACK) == "oklch(0.00% 0.0000 0.00)"

    def test_translucent_appends_alpha(self) -> None:
        assert color_to_oklch(ColorValue(r=0, g=0, b=0, a=0.5)) == "oklch(0.00% 0.0000 0.00 / 0.50)"

    def test_red_is_pinned(self) -> None:
        assert color_to_oklch(RED) == "oklch(62.80% 0.2576 29.23)"

    def test_output_is_deterministic(self) -> None:
        color = ColorValue(r=0.23, g=0.51, b=0.96)
        assert color_to_oklch(color) == color_to_oklch(color)

    def test_hue_is_never_negative(self) -> None:
        # Blue-ish colors have negative atan2 output before wrapping
        match = _OKLCH_RE.match(color_to_oklch(ColorValue(r=0.5, g=0, b=1)))
        assert match is not None
        assert 0 <= float(match.group(3)) < 360


class TestToLinear:
    def test_linear_segment(self) -> None:
        assert to_linear(0.04) == pytest.approx(0.04 / 12.92)

    def test_endpoints(self) -> None:
        assert to_linear(0) == 0
        assert to_linear(1) == pytest.approx(1)
