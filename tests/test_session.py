# Copyright (c) 2026 Chromatheme
# SPDX-License-Identifier: MIT

"""Tests for the editing session."""

import pytest

from chromatheme.color import is_in_gamut
from chromatheme.editing import EditorSession
from chromatheme.history import HistoryConfig
from chromatheme.schema import ColorFormat, HSLValues, OKLCHValues, RGBValues


def _family():
    return {
        "name": "Session",
        "author": "Tester",
        "themes": [
            {
                "name": "Session Dark",
                "appearance": "dark",
                "style": {
                    "background": "#1E1E1E",
                    "accents": ["#FF0000", "#00FF00"],
                    "syntax": {"keyword": {"color": "#C586C0", "font_weight": 700}},
                },
            },
            {
                "name": "Session Light",
                "appearance": "light",
                "style": {"background": "#FFFFFF"},
            },
        ],
    }


def _background(session, index=0):
    return session.document["themes"][index]["style"]["background"]


class TestNavigation:

    def test_defaults(self):
        session = EditorSession(_family())
        assert session.active_theme_index == 0
        assert session.selected_path is None
        assert session.display_format is ColorFormat.HEX
        assert session.current_theme["name"] == "Session Dark"

    def test_switch_theme_clears_selection(self):
        session = EditorSession(_family())
        session.select_color(["style", "background"])
        assert session.selected_path == "style/background"
        session.set_active_theme(1)
        assert session.selected_path is None
        assert session.current_theme["name"] == "Session Light"

    def test_switch_theme_out_of_range(self):
        session = EditorSession(_family())
        with pytest.raises(IndexError):
            session.set_active_theme(2)

    def test_display_format_from_string(self):
        session = EditorSession(_family())
        session.set_display_format("oklch")
        assert session.display_format is ColorFormat.OKLCH

    def test_entries_of_active_theme(self):
        session = EditorSession(_family())
        keys = [entry.display_key for entry in session.entries()]
        assert keys == ["background", "accents[0]", "accents[1]", "keyword.color"]
        session.set_active_theme(1)
        assert [entry.display_key for entry in session.entries()] == ["background"]

    def test_entries_without_themes(self):
        session = EditorSession({"name": "Empty", "themes": []})
        assert session.current_theme is None
        assert session.entries() == []


class TestEdits:

    def test_update_color_normalizes(self):
        session = EditorSession(_family())
        assert session.update_color("style/background", "#abc")
        assert _background(session) == "#AABBCC"
        assert session.is_dirty

    def test_update_targets_active_theme(self):
        session = EditorSession(_family())
        session.set_active_theme(1)
        session.update_color("style/background", "#EEEEEE")
        assert _background(session, 1) == "#EEEEEE"
        assert _background(session, 0) == "#1E1E1E"

    def test_rejects_non_hex(self):
        session = EditorSession(_family())
        assert session.update_color("style/background", "red") is False
        assert not session.is_dirty
        assert not session.can_undo

    def test_stale_path_is_not_committed(self):
        session = EditorSession(_family())
        assert session.update_color("style/accents/[9]", "#123456") is False
        assert not session.can_undo

    def test_update_from_rgb(self):
        session = EditorSession(_family())
        session.update_color_from("style/accents/[0]", RGBValues(0, 128, 255))
        assert session.document["themes"][0]["style"]["accents"][0] == "#0080FF"

    def test_update_from_rgb_with_alpha(self):
        session = EditorSession(_family())
        session.update_color_from("style/background", RGBValues(255, 0, 0, 0.5))
        assert _background(session) == "#FF000080"

    def test_update_from_hsl(self):
        session = EditorSession(_family())
        session.update_color_from("style/background", HSLValues(120, 100, 50))
        assert _background(session) == "#00FF00"

    def test_update_from_out_of_gamut_oklch(self):
        session = EditorSession(_family())
        session.update_color_from("style/background", OKLCHValues(0.7, 0.4, 150))
        stored = _background(session)
        assert stored.startswith("#") and len(stored) == 7
        assert is_in_gamut(stored)

    def test_update_from_unknown_type(self):
        session = EditorSession(_family())
        with pytest.raises(TypeError):
            session.update_color_from("style/background", (1, 2, 3))


class TestHistory:

    def test_undo_redo_roundtrip(self):
        session = EditorSession(_family())
        session.update_color("style/background", "#000000")
        assert session.undo()
        assert _background(session) == "#1E1E1E"
        assert not session.is_dirty
        assert session.redo()
        assert _background(session) == "#000000"

    def test_mark_saved(self):
        session = EditorSession(_family())
        session.update_color("style/background", "#000000")
        session.mark_saved()
        assert not session.is_dirty
        session.undo()
        assert session.is_dirty

    def test_history_config_passed_through(self):
        session = EditorSession(_family(), history=HistoryConfig(max_history=2))
        session.update_color("style/background", "#000001")
        session.update_color("style/background", "#000002")
        assert session.undo()
        assert not session.undo()
        assert _background(session) == "#1E1E1E"
