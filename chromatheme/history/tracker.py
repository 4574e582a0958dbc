# Copyright (c) 2026 Chromatheme
# SPDX-License-Identifier: MIT

"""
Change tracking and linear undo/redo.

The undo stack holds whole-document snapshots. Its bottom entry is the
document as originally loaded and is never popped. The top entry is the
live document.

Dirty state is decided by structural equality between the live document
and the saved baseline, not by whether any edit happened: undoing back to
the original is clean again, and so is an edit that restores old values.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Optional, Sequence

from chromatheme.schema import ChangeSnapshot, EditState
from chromatheme.document.paths import update_color_at_path

log = logging.getLogger("chromatheme.history.tracker")


@dataclass(frozen=True)
class HistoryConfig:
    """Configuration for edit history."""

    # Maximum snapshots kept, the original included. When exceeded, the
    # oldest snapshot above the original is dropped.
    max_history: int = 50

    def __post_init__(self) -> None:
        """Validate the limit leaves room for the original plus one edit."""
        if self.max_history < 2:
            raise ValueError(f"max_history must be >= 2, got {self.max_history}")


class ChangeTracker:
    """
    Edit history for one document session.

    Every ``commit`` is one atomic history entry; debouncing keystrokes into
    settled edits is the caller's job.

    Example:
        >>> tracker = ChangeTracker(document)
        >>> tracker.commit(edited)
        >>> tracker.is_dirty
        True
        >>> tracker.undo()
        True
        >>> tracker.state
        <EditState.CLEAN: 'clean'>
    """

    def __init__(self, original: Any, config: Optional[HistoryConfig] = None) -> None:
        self.config = config or HistoryConfig()
        self.reset(original)

    # -------------------------------------------------------------------------
    # Session
    # -------------------------------------------------------------------------

    def reset(self, original: Any) -> None:
        """Start over from a freshly loaded document."""
        self._undo: list[ChangeSnapshot] = [ChangeSnapshot(original)]
        self._redo: list[ChangeSnapshot] = []
        self._saved = original
        self._state = EditState.CLEAN

    def mark_saved(self) -> None:
        """Treat the live document as saved; history is kept."""
        self._saved = self.current
        self._refresh()

    # -------------------------------------------------------------------------
    # Edits
    # -------------------------------------------------------------------------

    def commit(self, document: Any) -> None:
        """Record a new version of the document and drop any redo branch."""
        self._undo.append(ChangeSnapshot(document))
        self._redo.clear()

        if len(self._undo) > self.config.max_history:
            del self._undo[1]
            log.debug("History limit %d reached; dropped oldest edit", self.config.max_history)

        self._refresh()

    def apply_color(self, theme_index: int, path: str | Sequence[str], value: str) -> bool:
        """
        Write one color into the live document and commit the result.

        Returns:
            False if the path is stale (nothing committed), True otherwise
        """
        current = self.current
        updated = update_color_at_path(current, theme_index, path, value)
        if updated is current:
            return False
        self.commit(updated)
        return True

    def undo(self) -> bool:
        """Step back one version. No-op at the original."""
        if len(self._undo) <= 1:
            return False
        self._redo.append(self._undo.pop())
        self._refresh()
        log.debug("undo: depth %d, redo %d", self.undo_depth, self.redo_depth)
        return True

    def redo(self) -> bool:
        """Re-apply the most recently undone version. No-op when nothing was undone."""
        if not self._redo:
            return False
        self._undo.append(self._redo.pop())
        self._refresh()
        log.debug("redo: depth %d, redo %d", self.undo_depth, self.redo_depth)
        return True

    # -------------------------------------------------------------------------
    # State
    # -------------------------------------------------------------------------

    def _refresh(self) -> None:
        self._state = EditState.CLEAN if self.current == self._saved else EditState.DIRTY

    @property
    def current(self) -> Any:
        """The live document."""
        return self._undo[-1].document

    @property
    def original(self) -> Any:
        """The document as originally loaded."""
        return self._undo[0].document

    @property
    def saved(self) -> Any:
        """Baseline for dirty checks: the original until ``mark_saved``."""
        return self._saved

    @property
    def state(self) -> EditState:
        return self._state

    @property
    def is_dirty(self) -> bool:
        return self._state is EditState.DIRTY

    @property
    def can_undo(self) -> bool:
        return len(self._undo) > 1

    @property
    def can_redo(self) -> bool:
        return bool(self._redo)

    @property
    def undo_depth(self) -> int:
        """Number of edits that can be undone."""
        return len(self._undo) - 1

    @property
    def redo_depth(self) -> int:
        return len(self._redo)

    @property
    def snapshots(self) -> tuple[ChangeSnapshot, ...]:
        """Undo stack, original first."""
        return tuple(self._undo)
