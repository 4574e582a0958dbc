# Copyright (c) 2026 Chromatheme
# SPDX-License-Identifier: MIT

"""
Editing session for a theme family.

An explicit context object: several sessions can coexist, and nothing is
kept in module globals. The session owns a ChangeTracker and the small bits
of editor state that decide where edits go (active theme, selected color,
display format).
"""

from __future__ import annotations

import logging
from typing import Any, Optional, Sequence, Union

from chromatheme.schema import ColorEntry, ColorFormat, HSLValues, OKLCHValues, RGBValues
from chromatheme.color import (
    from_hsl,
    from_oklch,
    from_rgb,
    gamut_map,
    is_valid_hex,
    normalize_hex,
    to_hex,
)
from chromatheme.document import ExtractionConfig, extract_colors, join_path, split_path
from chromatheme.history import ChangeTracker, HistoryConfig

log = logging.getLogger("chromatheme.editing.session")

ComponentValues = Union[RGBValues, HSLValues, OKLCHValues]


class EditorSession:
    """
    One open theme family and its edit history.

    Args:
        document: Parsed theme family ``{name, author, themes: [...]}``
        history: History settings (uses defaults if None)
        extraction: Extraction settings (uses defaults if None)
        display_format: Initial format colors are shown in
    """

    def __init__(
        self,
        document: Any,
        *,
        history: Optional[HistoryConfig] = None,
        extraction: Optional[ExtractionConfig] = None,
        display_format: ColorFormat = ColorFormat.HEX,
    ) -> None:
        self.tracker = ChangeTracker(document, history)
        self.extraction = extraction
        self.display_format = display_format
        self.active_theme_index = 0
        self.selected_path: Optional[str] = None

    # -------------------------------------------------------------------------
    # Navigation
    # -------------------------------------------------------------------------

    @property
    def document(self) -> Any:
        return self.tracker.current

    @property
    def themes(self) -> list:
        return self.document.get("themes", [])

    @property
    def current_theme(self) -> Optional[dict]:
        themes = self.themes
        if 0 <= self.active_theme_index < len(themes):
            return themes[self.active_theme_index]
        return None

    def set_active_theme(self, index: int) -> None:
        """Switch themes; the selection does not carry over."""
        if not 0 <= index < len(self.themes):
            raise IndexError(f"Theme index {index} out of range (0-{len(self.themes) - 1})")
        self.active_theme_index = index
        self.selected_path = None

    def select_color(self, path: Union[str, Sequence[str], None]) -> None:
        self.selected_path = None if path is None else join_path(split_path(path))

    def set_display_format(self, fmt: Union[ColorFormat, str]) -> None:
        self.display_format = ColorFormat(fmt)

    def entries(self) -> list[ColorEntry]:
        """Colors of the active theme, extracted from the live document."""
        theme = self.current_theme
        if theme is None:
            return []
        return extract_colors(theme.get("style"), config=self.extraction)

    # -------------------------------------------------------------------------
    # Edits
    # -------------------------------------------------------------------------

    def update_color(self, path: Union[str, Sequence[str]], value: str) -> bool:
        """
        Store a hex color at a path of the active theme.

        Returns:
            False if the value is not a hex color or the path is stale
        """
        if not is_valid_hex(value):
            log.debug("Rejected non-hex value %r", value)
            return False
        return self.tracker.apply_color(self.active_theme_index, path, normalize_hex(value))

    def update_color_from(self, path: Union[str, Sequence[str]], values: ComponentValues) -> bool:
        """
        Store a color given as RGB, HSL or OKLCH components.

        OKLCH input is gamut-mapped before encoding so the saved color is
        always valid sRGB.
        """
        if isinstance(values, RGBValues):
            color = from_rgb(values.r, values.g, values.b, values.alpha)
        elif isinstance(values, HSLValues):
            color = from_hsl(values.h, values.s, values.l, values.alpha)
        elif isinstance(values, OKLCHValues):
            color = gamut_map(from_oklch(values.l, values.c, values.h, values.alpha))
        else:
            raise TypeError(f"Unsupported component values: {type(values).__name__}")
        return self.update_color(path, to_hex(color))

    def undo(self) -> bool:
        return self.tracker.undo()

    def redo(self) -> bool:
        return self.tracker.redo()

    def mark_saved(self) -> None:
        self.tracker.mark_saved()

    @property
    def is_dirty(self) -> bool:
        return self.tracker.is_dirty

    @property
    def can_undo(self) -> bool:
        return self.tracker.can_undo

    @property
    def can_redo(self) -> bool:
        return self.tracker.can_redo
