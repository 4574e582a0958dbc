# Copyright (c) 2026 Chromatheme
# SPDX-License-Identifier: MIT

"""
Color model for Chromatheme.

Deterministic conversion between hex, RGB, HSL and OKLCH (with alpha),
the rounding rules for each component, and sRGB gamut handling.
All functions are pure. Malformed hex input never raises: parsing entry
points return None so callers can show a "not a color" state.
"""

from chromatheme.color.conversion import (
    convert,
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
from chromatheme.color.formatting import format_color_as
from chromatheme.color.gamut import GamutConfig, clamp_to_gamut, gamut_map, is_in_gamut
from chromatheme.color.parsed import (
    color_to_hex,
    hex_to_hsl,
    hex_to_oklch,
    hex_to_rgb,
    hsl_to_hex,
    oklch_to_hex,
    parse_color,
    rgb_to_hex,
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

__all__ = [
    # Parsing
    "is_valid_hex",
    "normalize_hex",
    "extract_alpha_from_hex",
    "parse_hex",
    "parse_color",
    # Conversion
    "to_rgb",
    "to_hsl",
    "to_oklch",
    "to_hex",
    "from_rgb",
    "from_hsl",
    "from_oklch",
    "convert",
    "color_to_hex",
    "rgb_to_hex",
    "hsl_to_hex",
    "oklch_to_hex",
    "hex_to_rgb",
    "hex_to_hsl",
    "hex_to_oklch",
    "format_color_as",
    # Gamut
    "GamutConfig",
    "is_in_gamut",
    "clamp_to_gamut",
    "gamut_map",
    # Precision
    "round_to",
    "round_rgb",
    "round_hue",
    "round_percent",
    "round_oklch_l",
    "round_oklch_c",
    "round_oklch_h",
    "round_alpha",
]
