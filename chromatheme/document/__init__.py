# Copyright (c) 2026 Chromatheme
# SPDX-License-Identifier: MIT

"""
Theme document addressing.

Extraction turns a style tree into a flat, ordered list of color entries;
path editing writes one value back into a new document.
"""

from chromatheme.document.extract import (
    ColorStats,
    ExtractionConfig,
    color_stats,
    extract_colors,
    extract_colors_as_map,
)
from chromatheme.document.normalize import normalize_colors
from chromatheme.document.paths import (
    PATH_SEPARATOR,
    index_segment,
    is_index_segment,
    join_path,
    resolve_path,
    split_path,
    update_color_at_path,
)

__all__ = [
    # Extraction
    "extract_colors",
    "extract_colors_as_map",
    "ExtractionConfig",
    "color_stats",
    "ColorStats",
    # Paths
    "update_color_at_path",
    "resolve_path",
    "index_segment",
    "is_index_segment",
    "join_path",
    "split_path",
    "PATH_SEPARATOR",
    # Normalization
    "normalize_colors",
]
