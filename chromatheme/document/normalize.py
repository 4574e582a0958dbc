# Copyright (c) 2026 Chromatheme
# SPDX-License-Identifier: MIT

"""Canonicalize every hex color in a freshly loaded document."""

from __future__ import annotations

from typing import Any

from chromatheme.color import is_valid_hex, normalize_hex


def normalize_colors(tree: Any) -> Any:
    """
    Copy of ``tree`` with every valid hex string normalized.

    Short forms are expanded and digits uppercased, at any depth, in objects
    and arrays alike. Non-color values are kept as they are.
    """
    if is_valid_hex(tree):
        return normalize_hex(tree)
    if isinstance(tree, dict):
        return {key: normalize_colors(value) for key, value in tree.items()}
    if isinstance(tree, list):
        return [normalize_colors(item) for item in tree]
    return tree
