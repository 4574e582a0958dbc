# Copyright (c) 2026 Chromatheme
# SPDX-License-Identifier: MIT

"""Edit history: dirty tracking against the loaded document, undo and redo."""

from chromatheme.history.tracker import ChangeTracker, HistoryConfig

__all__ = ["ChangeTracker", "HistoryConfig"]
