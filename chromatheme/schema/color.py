# Copyright (c) 2026 Chromatheme
# SPDX-License-Identifier: MIT

"""
Canonical value types for theme color editing.

Design principles:
- Immutable: All types are frozen dataclasses
- Lossless: Constructors never clamp, rounding happens on the way out
- Addressable: Color entries carry the structural path they came from

Color spaces and native units:
- RGB: channels 0.0-1.0 (values outside the range mean out-of-gamut intent)
- HSL: hue in degrees, saturation and lightness 0.0-1.0
- OKLCH: L 0.0-1.0, C >= 0.0 (no upper bound), H in degrees
"""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum
from typing import Any


# =============================================================================
# Enumerations
# =============================================================================


class ColorSpace(Enum):
    """Color space a Color's coordinates are expressed in."""

    RGB = "rgb"
    HSL = "hsl"
    OKLCH = "oklch"


class ColorFormat(Enum):
    """Display/editing format for a color."""

    HEX = "hex"
    RGB = "rgb"
    HSL = "hsl"
    OKLCH = "oklch"


class EditState(Enum):
    """Whether the live document differs from its saved baseline."""

    CLEAN = "clean"
    DIRTY = "dirty"


# =============================================================================
# Core Color Type
# =============================================================================


@dataclass(frozen=True, slots=True)
class Color:
    """
    A color tagged with the space its coordinates live in.

    Attributes:
        space: Color space of ``coords``
        coords: Three coordinates in the space's native units
        alpha: Opacity, nominally 0.0-1.0 (not clamped here)
    """
    space: ColorSpace
    coords: tuple[float, float, float]
    alpha: float = 1.0

    def __post_init__(self) -> None:
        """Reject non-finite values; range checks belong to rounding."""
        if len(self.coords) != 3:
            raise ValueError(f"Color needs 3 coordinates, got {len(self.coords)}")
        for value in (*self.coords, self.alpha):
            if not math.isfinite(value):
                raise ValueError(f"Color components must be finite, got {value}")


# =============================================================================
# Rounded Component Records
# =============================================================================


@dataclass(frozen=True, slots=True)
class RGBValues:
    """RGB channels as bytes (0-255) with rounded alpha."""
    r: int
    g: int
    b: int
    alpha: float = 1.0

    def to_dict(self) -> dict:
        """Serialize to dictionary."""
        return {"r": self.r, "g": self.g, "b": self.b, "alpha": self.alpha}


@dataclass(frozen=True, slots=True)
class HSLValues:
    """HSL with integer hue (0-359) and integer percentages (0-100)."""
    h: int
    s: int
    l: int
    alpha: float = 1.0

    def to_dict(self) -> dict:
        """Serialize to dictionary."""
        return {"h": self.h, "s": self.s, "l": self.l, "alpha": self.alpha}


@dataclass(frozen=True, slots=True)
class OKLCHValues:
    """
    OKLCH with lightness and chroma at 3 decimals, hue at 1 decimal.

    Chroma has no upper bound so wide-gamut intent can be expressed.
    """
    l: float
    c: float
    h: float
    alpha: float = 1.0

    def to_dict(self) -> dict:
        """Serialize to dictionary."""
        return {"l": self.l, "c": self.c, "h": self.h, "alpha": self.alpha}


# =============================================================================
# Parsed Color Bundle
# =============================================================================


@dataclass(frozen=True, slots=True)
class ParsedColor:
    """
    Every representation of one hex color, computed once per parse.

    Attributes:
        hex: Normalized hex (uppercase, 6 or 8 digits)
        rgb: Rounded RGB channels
        hsl: Rounded HSL components
        oklch: Rounded OKLCH components
        alpha: Alpha rounded to 2 decimals
        is_in_gamut: False when the color cannot be shown without clipping
    """
    hex: str
    rgb: RGBValues
    hsl: HSLValues
    oklch: OKLCHValues
    alpha: float
    is_in_gamut: bool

    def to_dict(self) -> dict:
        """Serialize to dictionary."""
        return {
            "hex": self.hex,
            "rgb": {"r": self.rgb.r, "g": self.rgb.g, "b": self.rgb.b},
            "hsl": {"h": self.hsl.h, "s": self.hsl.s, "l": self.hsl.l},
            "oklch": {"l": self.oklch.l, "c": self.oklch.c, "h": self.oklch.h},
            "alpha": self.alpha,
            "is_in_gamut": self.is_in_gamut,
        }


# =============================================================================
# Document Addressing
# =============================================================================


@dataclass(frozen=True, slots=True)
class ColorEntry:
    """
    One editable color location inside a theme style tree.

    Entries are structural addresses, not stable IDs. They must be
    re-extracted after any edit that changes the document's shape.

    Attributes:
        path: Display path, segments joined with "/" (keys may contain dots)
        segments: Raw path segments; array indices are written "[i]"
        display_key: Human-readable key, e.g. "players[0].cursor"
        value: The hex string found at the location
    """
    path: str
    segments: tuple[str, ...]
    display_key: str
    value: str


# =============================================================================
# History
# =============================================================================


def _utc_now() -> datetime:
    return datetime.now(timezone.utc)


@dataclass(frozen=True, slots=True)
class ChangeSnapshot:
    """A whole-document value captured at one point in edit history."""
    document: Any
    timestamp: datetime = field(default_factory=_utc_now)
