"""Tests for shadow and typography handlers (Figma effect and font strings)."""

from __future__ import annotations

import pytest

from tokenforge.registry import ScssConversionOptions, TokenTypeRegistry
from tokenforge.registry.handlers.shadow import parse_effect_string
from tokenforge.registry.handlers.typography import parse_font_string
from tokenforge.schema import ColorValue, DimensionValue, ShadowValue, TypographyValue

DROP_SHADOW = "Effect(type: DROP_SHADOW, color: #1D293D05, offset: (0, 1), radius: 0.5, spread: 0.05)"
DM_SANS = 'Font(family: "DM Sans", style: Bold, size: 56, weight: 700, lineHeight: 64, letterSpacing: -1.5)'


class TestShadow:
    def test_parse_drop_shadow(self) -> None:
        shadow = parse_effect_string(DROP_SHADOW)
        assert shadow is not None
        assert shadow.inset is False
        assert shadow.offset_x == DimensionValue(value=0)
        assert shadow.offset_y == DimensionValue(value=1)
        assert shadow.blur == DimensionValue(value=0.5)
        assert shadow.spread == DimensionValue(value=0.05)
        assert shadow.color.a == pytest.approx(5 / 255)

    def test_inner_shadow_is_inset(self) -> None:
        shadow = parse_effect_string("Effect(type: INNER_SHADOW, color: #000000, offset: (0, 2), radius: 4)")
        assert shadow is not None
        assert shadow.inset is True
        assert shadow.spread is None

    def test_missing_color_uses_default(self) -> None:
        shadow = parse_effect_string("Effect(type: DROP_SHADOW, offset: (1, 1), radius: 2)")
        assert shadow is not None
        assert shadow.color == ColorValue(r=0, g=0, b=0, a=0.1)

    def test_not_an_effect(self) -> None:
        assert parse_effect_string("0 1px 2px #000") is None

    def test_to_css(self, registry: TokenTypeRegistry) -> None:
        shadow = parse_effect_string(DROP_SHADOW)
        assert registry.to_css("shadow", shadow) == "0px 1px 0.5px 0.05px rgba(29, 41, 61, 0.02)"

    def test_inset_to_css(self, registry: TokenTypeRegistry) -> None:
        shadow = parse_effect_string("Effect(type: INNER_SHADOW, color: #000000, offset: (0, 2), radius: 4)")
        assert registry.to_css("shadow", shadow) == "inset 0px 2px 4px rgb(0, 0, 0)"

    def test_layers_are_comma_joined(self, registry: TokenTypeRegistry) -> None:
        layer = ShadowValue(
            offset_x=DimensionValue(value=0),
            offset_y=DimensionValue(value=1),
            blur=DimensionValue(value=2),
            color=ColorValue(r=0, g=0, b=0),
        )
        assert registry.to_css("shadow", [layer, layer]) == "0px 1px 2px rgb(0, 0, 0), 0px 1px 2px rgb(0, 0, 0)"


class TestTypography:
    def test_parse_full_font_string(self) -> None:
        assert parse_font_string(DM_SANS) == TypographyValue(
            font_family=["DM Sans"],
            font_size=DimensionValue(value=56),
            font_weight=700,
            line_height=DimensionValue(value=64),
            letter_spacing=DimensionValue(value=-1.5),
        )

    def test_zero_fields_count_as_absent(self) -> None:
        typography = parse_font_string('Font(family: "Inter", size: 0, weight: 0, lineHeight: 0, letterSpacing: 0)')
        assert typography is not None
        assert typography.font_size == DimensionValue(value=16)
        assert typography.font_weight == 400
        assert typography.line_height == 1.5
        assert typography.letter_spacing is None

    def test_weight_snaps_to_scale(self) -> None:
        typography = parse_font_string('Font(family: "Inter", size: 14, weight: 560)')
        assert typography is not None
        assert typography.font_weight == 600

    def test_missing_family_defaults(self) -> None:
        typography = parse_font_string("Font(size: 12)")
        assert typography is not None
        assert typography.font_family == ["sans-serif"]

    def test_not_a_font(self) -> None:
        assert parse_font_string("16px Inter") is None

    def test_to_css(self, registry: TokenTypeRegistry) -> None:
        typography = parse_font_string(DM_SANS)
        assert registry.to_css("typography", typography) == (
            'font-family: "DM Sans"; font-size: 56px; font-weight: 700; line-height: 64px; letter-spacing: -1.5px'
        )

    def test_to_scss_is_a_map(self, registry: TokenTypeRegistry) -> None:
        typography = parse_font_string('Font(family: "Inter", size: 16)')
        assert registry.to_scss("typography", typography, ScssConversionOptions()) == (
            "(font-family: Inter, font-size: 16px, font-weight: 400, line-height: 1.5)"
        )
