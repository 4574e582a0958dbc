# Copyright (c) 2026 Chromatheme
# SPDX-License-Identifier: MIT

"""
Full color parsing and direct value ↔ hex helpers.

parse_color() is the one place a hex string is expanded into every
representation the editor shows. The *_to_hex helpers are the way back:
whatever a user typed into an RGB, HSL or OKLCH field ends up here as a
canonical hex string.
"""

from __future__ import annotations

from typing import Optional

from chromatheme.schema import ParsedColor
from chromatheme.color.conversion import (
    extract_alpha_from_hex,
    from_hsl,
    from_oklch,
    from_rgb,
    is_valid_hex,
    normalize_hex,
    parse_hex,
    to_hex,
    to_hsl,
    to_oklch,
    to_rgb,
)
from chromatheme.color.gamut import gamut_map, is_in_gamut
from chromatheme.color.precision import round_to


def parse_color(hex_string: object) -> Optional[ParsedColor]:
    """
    Parse a hex color string into all format representations.

    Guarantees ``parsed.hex == normalize_hex(hex_string)`` and
    ``parsed.alpha == extract_alpha_from_hex(hex_string)``.

    Returns:
        ParsedColor, or None if the string is not a valid hex color
    """
    color = parse_hex(hex_string)
    if color is None:
        return None

    return ParsedColor(
        hex=normalize_hex(hex_string),
        rgb=to_rgb(color),
        hsl=to_hsl(color),
        oklch=to_oklch(color),
        alpha=extract_alpha_from_hex(hex_string),
        is_in_gamut=is_in_gamut(color),
    )


def color_to_hex(parsed: ParsedColor) -> str:
    """Re-encode a parsed color, appending the alpha byte only when translucent."""
    if parsed.alpha < 1.0:
        alpha_byte = int(round_to(parsed.alpha * 255.0, 0))
        return f"{parsed.hex[:7]}{alpha_byte:02X}"
    return parsed.hex[:7]


# =============================================================================
# Convenience conversion functions
# =============================================================================


def rgb_to_hex(r: float, g: float, b: float, a: float = 1.0) -> str:
    """Convert RGB bytes directly to a hex string."""
    return to_hex(from_rgb(r, g, b, a))


def hsl_to_hex(h: float, s: float, l: float, a: float = 1.0) -> str:
    """Convert HSL values (h: degrees, s and l: 0-100) directly to a hex string."""
    return to_hex(from_hsl(h, s, l, a))


def oklch_to_hex(l: float, c: float, h: float, a: float = 1.0) -> str:
    """
    Convert OKLCH values directly to a hex string.

    The color is gamut-mapped first so the saved value is always valid sRGB.
    """
    return to_hex(gamut_map(from_oklch(l, c, h, a)))


def hex_to_rgb(hex_color: str) -> Optional[dict]:
    """RGB bytes and alpha for a hex string, or None if invalid."""
    if not is_valid_hex(hex_color):
        return None
    rgb = to_rgb(hex_color)
    return {"r": rgb.r, "g": rgb.g, "b": rgb.b, "a": rgb.alpha}


def hex_to_hsl(hex_color: str) -> Optional[dict]:
    """HSL values and alpha for a hex string, or None if invalid."""
    if not is_valid_hex(hex_color):
        return None
    hsl = to_hsl(hex_color)
    return {"h": hsl.h, "s": hsl.s, "l": hsl.l, "a": hsl.alpha}


def hex_to_oklch(hex_color: str) -> Optional[dict]:
    """OKLCH values and alpha for a hex string, or None if invalid."""
    if not is_valid_hex(hex_color):
        return None
    lch = to_oklch(hex_color)
    return {"l": lch.l, "c": lch.c, "h": lch.h, "a": lch.alpha}
