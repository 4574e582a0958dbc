# Copyright (c) 2026 Chromatheme
# SPDX-License-Identifier: MIT

"""
Rounding rules for every color component.

All rounding is half away from zero, done by scaling, rounding and
dividing back so binary floating point noise does not leak into the
displayed or persisted value (round_to(0.1 + 0.2, 1) == 0.3).

Component rules:
- RGB channel: integer, clamped to [0, 255]
- HSL hue: integer, wrapped into [0, 360)
- HSL saturation/lightness: integer, clamped to [0, 100]
- OKLCH lightness: 3 decimals, clamped to [0, 1]
- OKLCH chroma: 3 decimals, clamped to >= 0 (no upper bound)
- OKLCH hue: 1 decimal, wrapped into [0, 360)
- Alpha: 2 decimals, clamped to [0, 1]
"""

from __future__ import annotations

import math


def round_to(value: float, decimals: int) -> float:
    """
    Round to a number of decimals, half away from zero.

    Args:
        value: Number to round
        decimals: Decimal places to keep (0 or more)

    Returns:
        Rounded float (never negative zero)
    """
    factor = 10 ** decimals
    scaled = abs(value) * factor
    if not math.isfinite(scaled):
        # No fractional digits left at this magnitude
        return value
    magnitude = math.floor(scaled + 0.5) / factor
    if magnitude == 0:
        return 0.0
    return -magnitude if value < 0 else magnitude


def wrap_hue(value: float) -> float:
    """Normalize an angle in degrees into [0, 360)."""
    return value % 360.0


def _round_hue_to(value: float, decimals: int) -> float:
    # Wrap again after rounding: 359.96 rounds up to 360.0
    return wrap_hue(round_to(wrap_hue(value), decimals))


def round_rgb(value: float) -> int:
    """Round an RGB channel (0-255, integer)."""
    return int(round_to(max(0.0, min(255.0, value)), 0))


def round_hue(value: float) -> int:
    """Round an HSL hue (0-360, integer, wrapping)."""
    return int(_round_hue_to(value, 0))


def round_percent(value: float) -> int:
    """Round an HSL saturation or lightness (0-100, integer)."""
    return int(round_to(max(0.0, min(100.0, value)), 0))


def round_oklch_l(value: float) -> float:
    """Round OKLCH lightness (0-1, 3 decimals)."""
    return round_to(max(0.0, min(1.0, value)), 3)


def round_oklch_c(value: float) -> float:
    """Round OKLCH chroma (0+, 3 decimals)."""
    return round_to(max(0.0, value), 3)


def round_oklch_h(value: float) -> float:
    """Round OKLCH hue (0-360, 1 decimal, wrapping)."""
    return _round_hue_to(value, 1)


def round_alpha(value: float) -> float:
    """Round alpha (0-1, 2 decimals)."""
    return round_to(max(0.0, min(1.0, value)), 2)
