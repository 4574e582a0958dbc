# Copyright (c) 2026 Chromatheme
# SPDX-License-Identifier: MIT

"""
Schema definitions for theme color editing.

All types in this module are immutable (frozen dataclasses).
Documents themselves stay plain dicts and lists; every edit yields a new one.
"""

from chromatheme.schema.color import (
    ChangeSnapshot,
    Color,
    ColorEntry,
    ColorFormat,
    ColorSpace,
    EditState,
    HSLValues,
    OKLCHValues,
    ParsedColor,
    RGBValues,
)

__all__ = [
    # Core types
    "Color",
    "ColorSpace",
    # Rounded component records
    "RGBValues",
    "HSLValues",
    "OKLCHValues",
    "ParsedColor",
    # Display
    "ColorFormat",
    # Document addressing
    "ColorEntry",
    # History
    "ChangeSnapshot",
    "EditState",
]
