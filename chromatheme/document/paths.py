# Copyright (c) 2026 Chromatheme
# SPDX-License-Identifier: MIT

"""
Path addressing inside a theme document.

A path is a sequence of segments below ``document["themes"][i]``. A segment
written "[n]" is an array index; anything else is a field name, even if it
looks numeric. Edits copy every container along the path and share the
rest, so the input document is never modified.

A path that no longer resolves (the document changed shape since the path
was extracted) is a structural miss: the original document comes back
untouched and nothing is partially applied.
"""

from __future__ import annotations

import logging
import re
from typing import Any, Optional, Sequence, Union

log = logging.getLogger("chromatheme.document.paths")

PATH_SEPARATOR = "/"

_INDEX_RE = re.compile(r"^\[(\d+)\]$")

PathLike = Union[str, Sequence[str]]

_MISSING = object()


def index_segment(index: int) -> str:
    """Segment addressing an array element."""
    return f"[{index}]"


def is_index_segment(segment: str) -> bool:
    """True if the segment addresses an array element."""
    return _INDEX_RE.match(segment) is not None


def _segment_index(segment: str) -> Optional[int]:
    m = _INDEX_RE.match(segment)
    return int(m.group(1)) if m else None


def join_path(segments: Sequence[str]) -> str:
    """Display form of a segment list."""
    return PATH_SEPARATOR.join(segments)


def split_path(path: PathLike) -> tuple[str, ...]:
    """Segments of a path given either as a "/"-joined string or a sequence."""
    if isinstance(path, str):
        return tuple(s for s in path.split(PATH_SEPARATOR) if s)
    return tuple(path)


def _child(container: Any, segment: str) -> Any:
    """Value below ``container`` at ``segment``, or _MISSING."""
    index = _segment_index(segment)
    if index is not None:
        if isinstance(container, list) and index < len(container):
            return container[index]
        return _MISSING
    if isinstance(container, dict) and segment in container:
        return container[segment]
    return _MISSING


def _theme(document: Any, theme_index: int) -> Any:
    if not isinstance(document, dict):
        return _MISSING
    themes = document.get("themes")
    if not isinstance(themes, list) or not 0 <= theme_index < len(themes):
        return _MISSING
    return themes[theme_index]


def resolve_path(document: Any, theme_index: int, path: PathLike) -> Any:
    """
    Value at a path inside one theme.

    Returns:
        The value, or None if the path does not resolve
    """
    current = _theme(document, theme_index)
    for segment in split_path(path):
        if current is _MISSING or current is None:
            return None
        current = _child(current, segment)
    return None if current is _MISSING else current


def _resolves_to_parent(theme: Any, segments: tuple[str, ...]) -> bool:
    current = theme
    for segment in segments[:-1]:
        current = _child(current, segment)
        if current is _MISSING or current is None:
            return False

    index = _segment_index(segments[-1])
    if index is not None:
        return isinstance(current, list) and index < len(current)
    return isinstance(current, dict)


def _assign(container: Any, segment: str, value: Any) -> Any:
    """Shallow copy of ``container`` with ``segment`` set to ``value``."""
    index = _segment_index(segment)
    if index is not None:
        copied = list(container)
        copied[index] = value
        return copied
    copied = dict(container)
    copied[segment] = value
    return copied


def _replace(container: Any, segments: tuple[str, ...], value: Any) -> Any:
    if len(segments) == 1:
        return _assign(container, segments[0], value)
    head = segments[0]
    return _assign(container, head, _replace(_child(container, head), segments[1:], value))


def update_color_at_path(
    document: dict,
    theme_index: int,
    path: PathLike,
    new_value: str,
) -> dict:
    """
    Set the value at a path inside one theme, returning a new document.

    Args:
        document: Theme family ``{name, author, themes: [...]}``
        theme_index: Which entry of ``themes`` the path starts from
        path: Segments (e.g. from a ColorEntry) or a "/"-joined path
        new_value: Hex string to store

    Returns:
        A new document sharing every untouched subtree with the input, or
        the input object itself when the path does not resolve
    """
    segments = split_path(path)
    theme = _theme(document, theme_index)

    if not segments or theme is _MISSING or not _resolves_to_parent(theme, segments):
        log.debug(
            "Stale path %r in theme %d; document left unchanged",
            join_path(segments), theme_index,
        )
        return document

    themes = list(document["themes"])
    themes[theme_index] = _replace(theme, segments, new_value)

    updated = dict(document)
    updated["themes"] = themes
    return updated
