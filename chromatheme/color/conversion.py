# Copyright (c) 2026 Chromatheme
# SPDX-License-Identifier: MIT

"""
Hex parsing and conversion between RGB, HSL and OKLCH.

Colors travel between spaces unrounded. Rounding (and clamping) is applied
only when a component record or a hex string is produced, so constructing
an intermediate color never loses out-of-range intent.
"""

from __future__ import annotations

import re
from typing import Optional, Union

import numpy as np

from chromatheme.schema import Color, ColorSpace, HSLValues, OKLCHValues, RGBValues
from chromatheme.color.colorspace import (
    hsl_to_srgb,
    oklch_to_srgb,
    srgb_to_hsl,
    srgb_to_oklch,
)
from chromatheme.color.precision import (
    round_alpha,
    round_hue,
    round_oklch_c,
    round_oklch_h,
    round_oklch_l,
    round_percent,
    round_rgb,
    round_to,
)


ColorLike = Union[Color, str]

_HEX_RE = re.compile(r"^#(?:[0-9A-Fa-f]{3}|[0-9A-Fa-f]{4}|[0-9A-Fa-f]{6}|[0-9A-Fa-f]{8})$")

_BLACK = Color(ColorSpace.RGB, (0.0, 0.0, 0.0))


# =============================================================================
# Hex parsing
# =============================================================================


def is_valid_hex(value: object) -> bool:
    """Check if a value is a #RGB, #RGBA, #RRGGBB or #RRGGBBAA string."""
    return isinstance(value, str) and _HEX_RE.match(value) is not None


def normalize_hex(hex_color: str) -> str:
    """
    Normalize hex to uppercase 6 or 8 digit form.

    Short forms are expanded by doubling each digit. Invalid input is
    returned unchanged.
    """
    if not is_valid_hex(hex_color):
        return hex_color

    digits = hex_color[1:]
    if len(digits) in (3, 4):
        digits = "".join(ch * 2 for ch in digits)

    return f"#{digits.upper()}"


def extract_alpha_from_hex(hex_color: str) -> float:
    """Alpha encoded in a hex string, rounded to 2 decimals (1.0 if absent)."""
    normalized = normalize_hex(hex_color)
    if is_valid_hex(normalized) and len(normalized) == 9:
        return round_alpha(int(normalized[7:9], 16) / 255.0)
    return 1.0


def parse_hex(hex_color: object) -> Optional[Color]:
    """
    Parse a hex string into an RGB color.

    Returns:
        Color tagged RGB, or None for anything that is not a valid hex color
    """
    if not is_valid_hex(hex_color):
        return None

    normalized = normalize_hex(hex_color)
    r = int(normalized[1:3], 16)
    g = int(normalized[3:5], 16)
    b = int(normalized[5:7], 16)
    alpha = int(normalized[7:9], 16) / 255.0 if len(normalized) == 9 else 1.0

    return Color(ColorSpace.RGB, (r / 255.0, g / 255.0, b / 255.0), alpha)


# =============================================================================
# Raw coordinate conversion
# =============================================================================


def _coerce(color: ColorLike) -> Optional[Color]:
    if isinstance(color, Color):
        return color
    return parse_hex(color)


def srgb_coords(color: Color) -> tuple[float, float, float]:
    """sRGB channels of a color (0-1 nominal, unclipped)."""
    if color.space is ColorSpace.RGB:
        return color.coords
    if color.space is ColorSpace.HSL:
        return hsl_to_srgb(*color.coords)

    srgb = oklch_to_srgb(np.array(color.coords, dtype=np.float64))
    return float(srgb[0]), float(srgb[1]), float(srgb[2])


def hsl_coords(color: Color) -> tuple[float, float, float]:
    """HSL coordinates of a color (hue degrees, saturation 0-1, lightness 0-1)."""
    if color.space is ColorSpace.HSL:
        return color.coords
    return srgb_to_hsl(*srgb_coords(color))


def oklch_coords(color: Color) -> tuple[float, float, float]:
    """OKLCH coordinates of a color (L 0-1, C >= 0, H degrees)."""
    if color.space is ColorSpace.OKLCH:
        return color.coords

    lch = srgb_to_oklch(np.array(srgb_coords(color), dtype=np.float64))
    return float(lch[0]), float(lch[1]), float(lch[2])


def convert(color: Color, space: ColorSpace) -> Color:
    """Re-express a color in another space without rounding or clamping."""
    if color.space is space:
        return color
    if space is ColorSpace.RGB:
        coords = srgb_coords(color)
    elif space is ColorSpace.HSL:
        coords = hsl_coords(color)
    else:
        coords = oklch_coords(color)
    return Color(space, coords, color.alpha)


# =============================================================================
# Rounded component records
# =============================================================================


def to_rgb(color: ColorLike) -> RGBValues:
    """
    Convert a color to RGB bytes.

    Args:
        color: Color, or a hex string (invalid strings give black)

    Returns:
        RGBValues with channels 0-255 and alpha at 2 decimals
    """
    c = _coerce(color)
    if c is None:
        return RGBValues(0, 0, 0, 1.0)

    r, g, b = srgb_coords(c)
    return RGBValues(
        r=round_rgb(r * 255.0),
        g=round_rgb(g * 255.0),
        b=round_rgb(b * 255.0),
        alpha=round_alpha(c.alpha),
    )


def to_hsl(color: ColorLike) -> HSLValues:
    """
    Convert a color to HSL.

    Returns:
        HSLValues with integer hue [0, 360) and integer percentages
    """
    c = _coerce(color)
    if c is None:
        return HSLValues(0, 0, 0, 1.0)

    h, s, l = hsl_coords(c)
    return HSLValues(
        h=round_hue(h),
        s=round_percent(s * 100.0),
        l=round_percent(l * 100.0),
        alpha=round_alpha(c.alpha),
    )


def to_oklch(color: ColorLike) -> OKLCHValues:
    """
    Convert a color to OKLCH.

    Hue is reported as 0 when chroma rounds to zero, since the angle of a
    gray carries no information.

    Returns:
        OKLCHValues with L and C at 3 decimals, H at 1 decimal
    """
    c = _coerce(color)
    if c is None:
        return OKLCHValues(0.0, 0.0, 0.0, 1.0)

    L, C, H = oklch_coords(c)
    chroma = round_oklch_c(C)
    return OKLCHValues(
        l=round_oklch_l(L),
        c=chroma,
        h=round_oklch_h(H) if chroma > 0 else 0.0,
        alpha=round_alpha(c.alpha),
    )


def to_hex(color: ColorLike, include_alpha_if_opaque: bool = False) -> str:
    """
    Convert a color to an uppercase hex string.

    Args:
        color: Color, or a hex string (invalid strings give #000000)
        include_alpha_if_opaque: Append "FF" even when alpha rounds to 1

    Returns:
        "#RRGGBB" when alpha rounds to 1, otherwise "#RRGGBBAA"
    """
    c = _coerce(color)
    if c is None:
        c = _BLACK

    rgb = to_rgb(c)
    hex_color = f"#{rgb.r:02X}{rgb.g:02X}{rgb.b:02X}"

    if rgb.alpha < 1.0 or include_alpha_if_opaque:
        alpha_byte = int(round_to(max(0.0, min(1.0, c.alpha)) * 255.0, 0))
        hex_color += f"{alpha_byte:02X}"

    return hex_color


# =============================================================================
# Creation functions (from individual values)
# =============================================================================


def from_rgb(r: float, g: float, b: float, alpha: float = 1.0) -> Color:
    """Create a color from RGB bytes (0-255). Values are not clamped."""
    return Color(ColorSpace.RGB, (r / 255.0, g / 255.0, b / 255.0), alpha)


def from_hsl(h: float, s: float, l: float, alpha: float = 1.0) -> Color:
    """Create a color from HSL (h: degrees, s and l: 0-100). Values are not clamped."""
    return Color(ColorSpace.HSL, (h, s / 100.0, l / 100.0), alpha)


def from_oklch(l: float, c: float, h: float, alpha: float = 1.0) -> Color:
    """Create a color from OKLCH (l: 0-1, c: 0+, h: degrees). Values are not clamped."""
    return Color(ColorSpace.OKLCH, (l, c, h), alpha)
