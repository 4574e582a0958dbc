# Copyright (c) 2026 Chromatheme
# SPDX-License-Identifier: MIT

"""Tests for component rounding rules."""

import pytest

from chromatheme.color.precision import (
    round_to,
    round_rgb,
    round_hue,
    round_percent,
    round_oklch_l,
    round_oklch_c,
    round_oklch_h,
    round_alpha,
    wrap_hue,
)


class TestRoundTo:

    def test_no_binary_residue(self):
        assert round_to(0.1 + 0.2, 1) == 0.3

    def test_half_away_from_zero(self):
        assert round_to(2.5, 0) == 3.0
        assert round_to(-2.5, 0) == -3.0
        assert round_to(0.125, 2) == 0.13

    def test_not_bankers_rounding(self):
        assert round_to(0.5, 0) == 1.0
        assert round_to(1.5, 0) == 2.0

    def test_no_negative_zero(self):
        result = round_to(-0.0004, 3)
        assert result == 0.0
        assert str(result) == "0.0"

    def test_beyond_float_precision(self):
        assert round_to(1e308, 3) == 1e308
        assert round_to(-1e308, 1) == -1e308


class TestComponentRounding:

    def test_rgb_clamps_and_rounds(self):
        assert round_rgb(127.5) == 128
        assert round_rgb(-12.0) == 0
        assert round_rgb(300.0) == 255
        assert isinstance(round_rgb(10.2), int)

    def test_percent_clamps(self):
        assert round_percent(100.4) == 100
        assert round_percent(-3.0) == 0
        assert round_percent(49.5) == 50

    def test_oklch_lightness(self):
        assert round_oklch_l(0.62796) == 0.628
        assert round_oklch_l(1.2) == 1.0
        assert round_oklch_l(-0.1) == 0.0

    def test_oklch_chroma_has_no_upper_bound(self):
        assert round_oklch_c(0.8234) == 0.823
        assert round_oklch_c(-0.05) == 0.0

    def test_alpha(self):
        assert round_alpha(128 / 255) == 0.5
        assert round_alpha(1.7) == 1.0
        assert round_alpha(-0.2) == 0.0


class TestHueRounding:

    def test_negative_inputs_wrap(self):
        assert round_hue(-10) == 350
        assert round_hue(-370) == 350

    def test_periodic(self):
        for x in (-725.0, -10.0, 0.0, 12.0, 180.0, 359.0, 400.0):
            assert round_hue(x) == round_hue(x + 360)

    def test_rounding_up_to_360_wraps_to_zero(self):
        assert round_hue(359.7) == 0
        assert round_oklch_h(359.96) == 0.0

    def test_oklch_hue_one_decimal(self):
        assert round_oklch_h(29.2339) == 29.2
        assert round_oklch_h(-0.25) == 359.8

    def test_hue_is_int(self):
        assert isinstance(round_hue(12.4), int)

    def test_wrap_hue(self):
        assert wrap_hue(720.0) == 0.0
        assert wrap_hue(-90.0) == 270.0
