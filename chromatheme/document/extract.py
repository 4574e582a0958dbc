# Copyright (c) 2026 Chromatheme
# SPDX-License-Identifier: MIT

"""
Color extraction from theme style trees.

Theme styles mix four shapes of color-bearing data:

1. Scalar fields: ``"editor.background": "#282C34"`` (at any depth)
2. Color arrays: ``"accents": ["#61AFEF", null]``
3. Record maps: ``"syntax": {"keyword": {"color": "#C678DD"}}``
4. Record arrays: ``"players": [{"cursor": "#61AFEF"}]``

Each shape has one strategy that turns ``(key, value, segments)`` into
entries. The walker itself knows nothing about shapes: at every key it asks
the strategies in order and recurses into plain objects nobody claimed.
Arrays nobody claimed are skipped.

Order is deterministic: object keys in insertion order, arrays by index.
"""

from __future__ import annotations

from collections import Counter
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any, Callable, Optional, Union

from chromatheme.schema import ColorEntry
from chromatheme.color import is_valid_hex
from chromatheme.document.paths import index_segment, join_path


@dataclass(frozen=True)
class ExtractionConfig:
    """Which keys use the array and record strategies. Defaults follow the Zed theme schema."""

    # Keys holding a flat list of colors
    color_array_keys: frozenset[str] = frozenset({"accents"})

    # Keys holding {name: record}, paired with the record fields that carry
    # colors. A mapping is accepted and stored as pairs.
    record_map_fields: tuple[tuple[str, tuple[str, ...]], ...] = (
        ("syntax", ("color", "background_color")),
    )

    # Keys holding [record, ...]; every hex field of a record is a color
    record_array_keys: frozenset[str] = frozenset({"players"})

    def __post_init__(self) -> None:
        """Freeze collection arguments so the config stays immutable and hashable."""
        fields: Union[Mapping, tuple] = self.record_map_fields
        pairs = fields.items() if isinstance(fields, Mapping) else fields
        object.__setattr__(
            self, "record_map_fields", tuple((key, tuple(subs)) for key, subs in pairs)
        )
        object.__setattr__(self, "color_array_keys", frozenset(self.color_array_keys))
        object.__setattr__(self, "record_array_keys", frozenset(self.record_array_keys))

    def fields_for(self, key: str) -> Optional[tuple[str, ...]]:
        """Record fields carrying colors under a record-map key, or None."""
        for name, subs in self.record_map_fields:
            if name == key:
                return subs
        return None


_DEFAULT_CONFIG = ExtractionConfig()


def _entry(segments: list[str], display_key: str, value: str) -> ColorEntry:
    return ColorEntry(
        path=join_path(segments),
        segments=tuple(segments),
        display_key=display_key,
        value=value,
    )


# =============================================================================
# Strategies
# =============================================================================

# A strategy returns None when the shape is not its own, or the (possibly
# empty) list of entries it produced.
Strategy = Callable[[str, Any, list, ExtractionConfig], Optional[list[ColorEntry]]]


def _scalar(key: str, value: Any, segments: list, config: ExtractionConfig) -> Optional[list[ColorEntry]]:
    if not is_valid_hex(value):
        return None
    return [_entry(segments, key, value)]


def _color_array(key: str, value: Any, segments: list, config: ExtractionConfig) -> Optional[list[ColorEntry]]:
    if key not in config.color_array_keys or not isinstance(value, list):
        return None
    return [
        _entry(segments + [index_segment(i)], f"{key}[{i}]", item)
        for i, item in enumerate(value)
        if is_valid_hex(item)
    ]


def _record_map(key: str, value: Any, segments: list, config: ExtractionConfig) -> Optional[list[ColorEntry]]:
    fields = config.fields_for(key)
    if fields is None or not isinstance(value, dict):
        return None

    entries = []
    for name, record in value.items():
        if not isinstance(record, dict):
            continue
        for sub in fields:
            if is_valid_hex(record.get(sub)):
                entries.append(_entry(segments + [name, sub], f"{name}.{sub}", record[sub]))
    return entries


def _record_array(key: str, value: Any, segments: list, config: ExtractionConfig) -> Optional[list[ColorEntry]]:
    if key not in config.record_array_keys or not isinstance(value, list):
        return None

    entries = []
    for i, record in enumerate(value):
        if not isinstance(record, dict):
            continue
        for sub, sub_value in record.items():
            if is_valid_hex(sub_value):
                entries.append(
                    _entry(segments + [index_segment(i), sub], f"{key}[{i}].{sub}", sub_value)
                )
    return entries


STRATEGIES: tuple[Strategy, ...] = (_scalar, _color_array, _record_map, _record_array)


# =============================================================================
# Walker
# =============================================================================


def extract_colors(
    style: Any,
    base_path: str = "style",
    config: Optional[ExtractionConfig] = None,
) -> list[ColorEntry]:
    """
    Enumerate every editable color in a style tree.

    Args:
        style: The ``style`` object of one theme
        base_path: First segment of every path (the key ``style`` sits under)
        config: Strategy key settings (uses defaults if None)

    Returns:
        Entries in document order. Paths are only valid for this version
        of the document.
    """
    config = config or _DEFAULT_CONFIG
    entries: list[ColorEntry] = []

    def traverse(obj: Any, segments: list[str]) -> None:
        if not isinstance(obj, dict):
            return
        for key, value in obj.items():
            current = segments + [key]
            for strategy in STRATEGIES:
                produced = strategy(key, value, current, config)
                if produced is not None:
                    entries.extend(produced)
                    break
            else:
                if isinstance(value, dict):
                    traverse(value, current)

    traverse(style, [base_path])
    return entries


def extract_colors_as_map(
    style: Any,
    base_path: str = "style",
    config: Optional[ExtractionConfig] = None,
) -> dict[str, str]:
    """Extracted colors keyed by display path, for comparing two versions."""
    return {e.path: e.value for e in extract_colors(style, base_path, config)}


# =============================================================================
# Statistics
# =============================================================================


@dataclass(frozen=True)
class ColorStats:
    """Summary of the colors in a style tree."""

    total_colors: int
    unique_colors: int
    colors_by_category: dict[str, int]


def color_stats(style: Any, config: Optional[ExtractionConfig] = None) -> ColorStats:
    """
    Count colors overall, distinct values, and per category.

    The category is the display key's text before the first dot
    ("editor.background" → "editor"); undotted keys count as "other".
    """
    entries = extract_colors(style, config=config)
    categories: Counter[str] = Counter()
    for entry in entries:
        head, dot, _ = entry.display_key.partition(".")
        categories[head if dot else "other"] += 1

    return ColorStats(
        total_colors=len(entries),
        unique_colors=len({e.value.upper() for e in entries}),
        colors_by_category=dict(categories),
    )
