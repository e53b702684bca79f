"""Tests for gradient parsing (CSS text and Figma paints) and rendering."""

from __future__ import annotations

import math
from typing import Any

import pytest

from tokenforge.registry import CssConversionOptions, TokenTypeRegistry
from tokenforge.registry.handlers.gradient import (
    default_gradient,
    figma_handle_angle,
    normalize_angle,
    parse_figma_gradient,
    parse_gradient_string,
)
from tokenforge.schema import ColorValue, GradientStop, GradientValue

RED = ColorValue(r=1, g=0, b=0)
BLUE = ColorValue(r=0, g=0, b=1)


def _figma_paint(paint_type: str = "GRADIENT_LINEAR", handles: list[dict[str, float]] | None = None) -> dict[str, Any]:
    return {
        "type": paint_type,
        "gradientHandlePositions": handles if handles is not None else [{"x": 0, "y": 0.5}, {"x": 1, "y": 0.5}],
        "gradientStops": [
            {"color": {"r": 1, "g": 0, "b": 0, "a": 1}, "position": 0},
            {"color": {"r": 0, "g": 0, "b": 1, "a": 1}, "position": 1},
        ],
    }


class TestParseGradientString:
    def test_linear_with_angle_and_positions(self) -> None:
        gradient = parse_gradient_string("linear-gradient(90deg, #ff0000 0%, #0000ff 100%)")

        assert gradient == GradientValue(
            type="linear",
            angle=90,
            stops=[GradientStop(color=RED, position=0), GradientStop(color=BLUE, position=1)],
        )

    def test_endpoint_positions_default(self) -> None:
        gradient = parse_gradient_string("linear-gradient(#ff0000, #0000ff)")
        assert gradient is not None
        assert gradient.angle is None
        assert [stop.position for stop in gradient.stops] == [0.0, 1.0]

    def test_interior_stop_without_position_keeps_none(self) -> None:
        gradient = parse_gradient_string("linear-gradient(#ff0000, #00ff00, #0000ff)")
        assert gradient is not None
        assert [stop.position for stop in gradient.stops] == [0.0, None, 1.0]

    def test_stop_past_full_length_is_dropped_before_defaults(self) -> None:
        gradient = parse_gradient_string("linear-gradient(90deg, #ff0000 150%, #0000ff)")
        assert gradient == GradientValue(type="linear", angle=90, stops=[GradientStop(color=BLUE, position=0.0)])

    def test_rgb_stops(self) -> None:
        gradient = parse_gradient_string("linear-gradient(45deg, rgba(255, 0, 0, 0.5) 10%, rgb(0, 0, 255) 90%)")
        assert gradient is not None
        assert gradient.stops[0].color.a == 0.5
        assert gradient.stops[0].position == pytest.approx(0.1)
        assert gradient.stops[1].position == pytest.approx(0.9)

    @pytest.mark.parametrize(
        ("angle", "degrees"),
        [
            ("180deg", 180),
            ("180", 180),
            ("0.25turn", 90),
            ("100grad", 90),
            (f"{math.pi}rad", 180),
            ("450deg", 90),
            ("360deg", 0),
        ],
    )
    def test_angle_units(self, angle: str, degrees: float) -> None:
        gradient = parse_gradient_string(f"linear-gradient({angle}, #ff0000, #0000ff)")
        assert gradient is not None
        assert gradient.angle == pytest.approx(degrees)

    def test_radial_and_conic_have_no_angle(self) -> None:
        radial = parse_gradient_string("radial-gradient(circle, #ff0000, #0000ff)")
        conic = parse_gradient_string("conic-gradient(#ff0000, #0000ff)")

        assert radial is not None and radial.type == "radial" and radial.angle is None
        assert conic is not None and conic.type == "conic"

    def test_named_colors_are_dropped(self) -> None:
        gradient = parse_gradient_string("linear-gradient(90deg, red, #0000ff)")
        assert gradient is not None
        assert len(gradient.stops) == 1
        assert gradient.stops[0].color == BLUE

    def test_only_named_colors_is_none(self) -> None:
        assert parse_gradient_string("linear-gradient(red, blue)") is None

    @pytest.mark.parametrize("value", ["", "#ff0000", "repeating-linear-gradient(#fff, #000)", "gradient(#ff0000)"])
    def test_unrecognized_is_none(self, value: str) -> None:
        assert parse_gradient_string(value) is None


class TestFigmaHandleAngle:
    @pytest.mark.parametrize(
        ("end", "degrees"),
        [
            ({"x": 1, "y": 0}, 90),  # pointing right
            ({"x": 0, "y": 1}, 180),  # pointing down the frame
            ({"x": -1, "y": 0}, 270),  # pointing left
            ({"x": 0, "y": -1}, 0),  # pointing up
        ],
    )
    def test_direction(self, end: dict[str, float], degrees: float) -> None:
        assert figma_handle_angle({"x": 0, "y": 0}, end) == pytest.approx(degrees)

    def test_result_is_wrapped(self) -> None:
        angle = figma_handle_angle({"x": 0, "y": 0}, {"x": -1, "y": -1})
        assert 0 <= angle < 360
        assert angle == pytest.approx(315)

    def test_normalize_angle(self) -> None:
        assert normalize_angle(-90) == 270
        assert normalize_angle(720) == 0
        assert normalize_angle(-1e-17) == 0


class TestParseFigmaGradient:
    def test_linear(self) -> None:
        gradient = parse_figma_gradient(_figma_paint())
        assert gradient is not None
        assert gradient.type == "linear"
        assert gradient.angle == pytest.approx(90)
        assert [stop.color for stop in gradient.stops] == [RED, BLUE]

    @pytest.mark.parametrize(("paint_type", "expected"), [("GRADIENT_RADIAL", "radial"), ("GRADIENT_ANGULAR", "conic")])
    def test_type_mapping(self, paint_type: str, expected: str) -> None:
        gradient = parse_figma_gradient(_figma_paint(paint_type))
        assert gradient is not None
        assert gradient.type == expected
        assert gradient.angle is None

    def test_missing_handles_leave_angle_unset(self) -> None:
        gradient = parse_figma_gradient(_figma_paint(handles=[{"x": 0, "y": 0}]))
        assert gradient is not None
        assert gradient.angle is None

    @pytest.mark.parametrize(
        "value",
        [
            None,
            "linear-gradient(#fff, #000)",
            {"type": "GRADIENT_LINEAR", "gradientStops": []},
            {"type": "GRADIENT_LINEAR", "gradientStops": [{"position": 0}]},
            {"type": "GRADIENT_LINEAR", "gradientStops": [{"color": {"r": 5, "g": 0, "b": 0}, "position": 0}]},
        ],
    )
    def test_unreadable_is_none(self, value: Any) -> None:
        assert parse_figma_gradient(value) is None

    def test_registry_substitutes_default_gradient(self, registry: TokenTypeRegistry) -> None:
        assert registry.parse_figma_value("gradient", {"gradientStops": []}) == default_gradient()
        assert registry.parse_figma_value("gradient", None) == default_gradient()

    def test_default_gradient_is_black_to_white(self) -> None:
        gradient = default_gradient()
        assert gradient.type == "linear"
        assert gradient.angle == 0
        assert gradient.stops[0] == GradientStop(color=ColorValue(r=0, g=0, b=0), position=0)
        assert gradient.stops[-1] == GradientStop(color=ColorValue(r=1, g=1, b=1), position=1)


class TestGradientToCss:
    def test_linear(self, registry: TokenTypeRegistry) -> None:
        gradient = parse_gradient_string("linear-gradient(90deg, #ff0000 0%, #0000ff 100%)")
        assert registry.to_css("gradient", gradient) == (
            "linear-gradient(90deg, rgb(255, 0, 0) 0.0%, rgb(0, 0, 255) 100.0%)"
        )

    def test_linear_without_angle_renders_zero(self, registry: TokenTypeRegistry) -> None:
        gradient = parse_gradient_string("linear-gradient(#ff0000, #0000ff)")
        assert registry.to_css("gradient", gradient).startswith("linear-gradient(0deg, ")

    def test_fractional_angle(self, registry: TokenTypeRegistry) -> None:
        gradient = GradientValue(type="linear", angle=22.5, stops=[GradientStop(color=RED, position=0)])
        assert registry.to_css("gradient", gradient) == "linear-gradient(22.5deg, rgb(255, 0, 0) 0.0%)"

    def test_interior_stop_without_position_renders_color_only(self, registry: TokenTypeRegistry) -> None:
        gradient = parse_gradient_string("linear-gradient(#ff0000, #00ff00, #0000ff)")
        assert registry.to_css("gradient", gradient) == (
            "linear-gradient(0deg, rgb(255, 0, 0) 0.0%, rgb(0, 255, 0), rgb(0, 0, 255) 100.0%)"
        )

    def test_radial_and_conic(self, registry: TokenTypeRegistry) -> None:
        stops = [GradientStop(color=RED, position=0), GradientStop(color=BLUE, position=0.5)]
        radial = GradientValue(type="radial", stops=stops)
        conic = GradientValue(type="conic", stops=stops)

        assert registry.to_css("gradient", radial) == "radial-gradient(rgb(255, 0, 0) 0.0%, rgb(0, 0, 255) 50.0%)"
        assert registry.to_css("gradient", conic) == "conic-gradient(rgb(255, 0, 0) 0.0%, rgb(0, 0, 255) 50.0%)"

    def test_stops_ignore_color_format(self, registry: TokenTypeRegistry) -> None:
        gradient = parse_gradient_string("linear-gradient(90deg, #ff0000 0%, #0000ff 100%)")
        options = CssConversionOptions(color_format="oklch")
        assert "rgb(255, 0, 0)" in registry.to_css("gradient", gradient, options)

    def test_figma_paint_round_trip_to_css(self, registry: TokenTypeRegistry) -> None:
        gradient = registry.parse_figma_value("gradient", _figma_paint(handles=[{"x": 0.5, "y": 0}, {"x": 0.5, "y": 1}]))
        assert registry.to_css("gradient", gradient) == (
            "linear-gradient(180deg, rgb(255, 0, 0) 0.0%, rgb(0, 0, 255) 100.0%)"
        )
