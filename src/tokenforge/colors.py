"""
Color math.

Pure conversions between the normalized ``ColorValue`` (0-1 channels) and
textual encodings: hex, rgb()/rgba(), hsl()/hsla() and oklch().

Oklch goes through sRGB -> linear sRGB -> XYZ (D65) -> LMS -> Oklab -> Oklch
using fixed matrices so output is reproducible to the printed precision.
"""

from __future__ import annotations

import math
import re

from pydantic import ValidationError

from tokenforge.schema.tokens import ColorValue

_HEX_DIGITS_RE = re.compile(r"[0-9A-Fa-f]+")
_RGB_FUNCTION_RE = re.compile(
    r"rgba?\(\s*(\d+)\s*,\s*(\d+)\s*,\s*(\d+)(?:\s*,\s*([\d.]+))?\s*\)"
)

# Linear sRGB -> XYZ (D65)
_SRGB_TO_XYZ = (
    (0.4124564, 0.3575761, 0.1804375),
    (0.2126729, 0.7151522, 0.0721750),
    (0.0193339, 0.1191920, 0.9503041),
)

# XYZ -> LMS (Oklab M1)
_XYZ_TO_LMS = (
    (0.8189330101, 0.3618667424, -0.1288597137),
    (0.0329845436, 0.9293118715, 0.0361456387),
    (0.0482003018, 0.2643662691, 0.6338517070),
)

# Cube-rooted LMS -> Oklab (Oklab M2)
_LMS_TO_OKLAB = (
    (0.2104542553, 0.7936177850, -0.0040720468),
    (1.9779984951, -2.4285922050, 0.4505937099),
    (0.0259040371, 0.7827717662, -0.8086757660),
)


def _round_half_up(value: float) -> int:
    return math.floor(value + 0.5)


def _to_byte(channel: float) -> int:
    """Scale a 0-1 channel to the nearest integer in 0-255."""
    return min(255, max(0, _round_half_up(channel * 255)))


def _apply(matrix: tuple[tuple[float, float, float], ...], x: float, y: float, z: float) -> tuple[float, float, float]:
    r0, r1, r2 = matrix
    return (
        r0[0] * x + r0[1] * y + r0[2] * z,
        r1[0] * x + r1[1] * y + r1[2] * z,
        r2[0] * x + r2[1] * y + r2[2] * z,
    )


def to_linear(c: float) -> float:
    """sRGB transfer function inverse (gamma-encoded channel -> linear light)."""
    if c <= 0.04045:
        return c / 12.92
    return ((c + 0.055) / 1.055) ** 2.4


# =============================================================================
# Encoders
# =============================================================================


def color_to_hex(color: ColorValue) -> str:
    """``#rrggbb``, or ``#rrggbbaa`` when the color is translucent."""
    r, g, b = _to_byte(color.r), _to_byte(color.g), _to_byte(color.b)
    if color.a < 1:
        return f"#{r:02x}{g:02x}{b:02x}{_to_byte(color.a):02x}"
    return f"#{r:02x}{g:02x}{b:02x}"


def color_to_rgb(color: ColorValue) -> str:
    """``rgb(r, g, b)``, or ``rgba(r, g, b, a)`` when the color is translucent."""
    r, g, b = _to_byte(color.r), _to_byte(color.g), _to_byte(color.b)
    if color.a < 1:
        return f"rgba({r}, {g}, {b}, {color.a:.2f})"
    return f"rgb({r}, {g}, {b})"


def color_to_rgb_triplet(color: ColorValue) -> str:
    """Bare ``r, g, b`` triplet, as used by ``--*-rgb`` theme variables."""
    return f"{_to_byte(color.r)}, {_to_byte(color.g)}, {_to_byte(color.b)}"


def color_to_oklch(color: ColorValue) -> str:
    """
    Convert to ``oklch(L% C H)``.

    Lightness is printed as a percentage with 2 decimals, chroma with 4 and
    hue (degrees, 0-360) with 2. A ``/ alpha`` term is appended only when
    the color is translucent.
    """
    lr, lg, lb = to_linear(color.r), to_linear(color.g), to_linear(color.b)

    x, y, z = _apply(_SRGB_TO_XYZ, lr, lg, lb)
    l, m, s = _apply(_XYZ_TO_LMS, x, y, z)
    lightness, a, b = _apply(_LMS_TO_OKLAB, math.cbrt(l), math.cbrt(m), math.cbrt(s))

    chroma = math.sqrt(a * a + b * b)
    hue = math.degrees(math.atan2(b, a))
    if hue < 0:
        hue += 360

    body = f"{lightness * 100:.2f}% {chroma:.4f} {hue:.2f}"
    if color.a < 1:
        return f"oklch({body} / {color.a:.2f})"
    return f"oklch({body})"


def color_to_hsl(color: ColorValue) -> str:
    """``hsl(h, s%, l%)`` with integer components; ``hsla`` when translucent."""
    r, g, b = color.r, color.g, color.b
    high = max(r, g, b)
    low = min(r, g, b)
    h = 0.0
    s = 0.0
    lightness = (high + low) / 2

    if high != low:
        d = high - low
        s = d / (2 - high - low) if lightness > 0.5 else d / (high + low)
        if high == r:
            h = ((g - b) / d + (6 if g < b else 0)) / 6
        elif high == g:
            h = ((b - r) / d + 2) / 6
        else:
            h = ((r - g) / d + 4) / 6

    h_deg = _round_half_up(h * 360)
    s_pct = _round_half_up(s * 100)
    l_pct = _round_half_up(lightness * 100)

    if color.a < 1:
        return f"hsla({h_deg}, {s_pct}%, {l_pct}%, {color.a:.2f})"
    return f"hsl({h_deg}, {s_pct}%, {l_pct}%)"


# =============================================================================
# Decoders
# =============================================================================


def parse_hex_color(value: str) -> ColorValue:
    """
    Parse ``#rrggbb`` or ``#rrggbbaa``.

    Raises:
        ValueError: If the string is not a 6 or 8 digit hex literal.
    """
    digits = value[1:] if value.startswith("#") else ""
    if len(digits) not in (6, 8) or not _HEX_DIGITS_RE.fullmatch(digits):
        raise ValueError(f"Not a hex color: {value!r}")

    r = int(digits[0:2], 16) / 255
    g = int(digits[2:4], 16) / 255
    b = int(digits[4:6], 16) / 255
    a = int(digits[6:8], 16) / 255 if len(digits) == 8 else 1.0
    return ColorValue(r=r, g=g, b=b, a=a)


def parse_rgb_function(value: str) -> ColorValue | None:
    """Parse an ``rgb(r, g, b)`` / ``rgba(r, g, b, a)`` call with 0-255 channels."""
    match = _RGB_FUNCTION_RE.search(value)
    if not match:
        return None

    try:
        return ColorValue(
            r=int(match.group(1)) / 255,
            g=int(match.group(2)) / 255,
            b=int(match.group(3)) / 255,
            a=float(match.group(4)) if match.group(4) else 1.0,
        )
    except (ValueError, ValidationError):
        return None


def parse_css_color(value: str) -> ColorValue | None:
    """Parse a hex literal or rgb()/rgba() call; anything else yields ``None``."""
    if value.startswith("#"):
        try:
            return parse_hex_color(value)
        except ValueError:
            return None
    if value.lower().startswith("rgb"):
        return parse_rgb_function(value)
    return None
