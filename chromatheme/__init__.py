# Copyright (c) 2026 Chromatheme
# SPDX-License-Identifier: MIT

"""
Chromatheme -- Color editing core for theme documents.

Converts colors between hex, RGB, HSL and OKLCH with fixed rounding,
finds every color inside an irregular theme tree, writes edits back as
new document versions, and tracks undo/redo against the loaded file.

Quick start::

    from chromatheme import EditorSession, parse_color

    session = EditorSession(theme_family)
    entry = session.entries()[0]
    session.update_color(entry.segments, "#FF8800")
    session.is_dirty    # True
    session.undo()
    session.is_dirty    # False
"""

from __future__ import annotations

__version__ = "1.0.0"

from chromatheme.color import (
    gamut_map,
    oklch_to_hex,
    parse_color,
    parse_hex,
    to_hex,
)
from chromatheme.document import extract_colors, update_color_at_path
from chromatheme.editing import EditorSession, NumericInputModel, Quantity
from chromatheme.history import ChangeTracker
from chromatheme.schema import (
    Color,
    ColorEntry,
    ColorFormat,
    ColorSpace,
    EditState,
    ParsedColor,
)

__all__ = [
    # Core API
    "EditorSession",
    "ChangeTracker",
    "parse_color",
    "parse_hex",
    "to_hex",
    "oklch_to_hex",
    "gamut_map",
    "extract_colors",
    "update_color_at_path",
    "NumericInputModel",
    "Quantity",
    # Types (commonly needed)
    "Color",
    "ColorSpace",
    "ColorEntry",
    "ColorFormat",
    "EditState",
    "ParsedColor",
    # Version
    "__version__",
]
