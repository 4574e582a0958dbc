# Copyright (c) 2026 Chromatheme
# SPDX-License-Identifier: MIT

"""Tests for hex parsing and conversion between RGB, HSL and OKLCH."""

import pytest

from chromatheme.schema import Color, ColorSpace, HSLValues, RGBValues
from chromatheme.color.conversion import (
    convert,
    extract_alpha_from_hex,
    from_hsl,
    from_oklch,
    from_rgb,
    is_valid_hex,
    normalize_hex,
    parse_hex,
    to_hex,
    to_hsl,
    to_oklch,
    to_rgb,
)


class TestHexParsing:

    @pytest.mark.parametrize("value", ["#abc", "#ABCD", "#a1b2c3", "#A1B2C3D4"])
    def test_valid_forms(self, value):
        assert is_valid_hex(value)
        assert parse_hex(value) is not None

    @pytest.mark.parametrize(
        "value",
        ["abc", "#ab", "#abcde", "#abcdefa", "#GGGGGG", "", "#", " #FFFFFF", "rgb(0,0,0)", None, 255],
    )
    def test_invalid_forms(self, value):
        assert not is_valid_hex(value)
        assert parse_hex(value) is None

    def test_short_forms_are_doubled(self):
        assert normalize_hex("#abc") == "#AABBCC"
        assert normalize_hex("#abcd") == "#AABBCCDD"

    def test_long_forms_uppercased(self):
        assert normalize_hex("#a1b2c3") == "#A1B2C3"
        assert normalize_hex("#a1b2c3d4") == "#A1B2C3D4"

    def test_invalid_returned_unchanged(self):
        assert normalize_hex("not-a-color") == "not-a-color"

    def test_parse_gives_rgb_color(self):
        color = parse_hex("#FF000080")
        assert color.space is ColorSpace.RGB
        assert color.coords == (1.0, 0.0, 0.0)
        assert color.alpha == pytest.approx(128 / 255)

    def test_extract_alpha(self):
        assert extract_alpha_from_hex("#FF000080") == 0.5
        assert extract_alpha_from_hex("#F008") == 0.53
        assert extract_alpha_from_hex("#FF0000") == 1.0
        assert extract_alpha_from_hex("garbage") == 1.0


class TestComponentRecords:

    def test_to_rgb(self):
        assert to_rgb("#1A2B3C") == RGBValues(26, 43, 60, 1.0)

    def test_to_hsl_red(self):
        assert to_hsl("#FF0000") == HSLValues(0, 100, 50, 1.0)

    def test_to_hsl_gray(self):
        assert to_hsl("#808080") == HSLValues(0, 0, 50, 1.0)

    def test_to_oklch_red(self):
        lch = to_oklch("#FF0000")
        assert lch.l == pytest.approx(0.628, abs=0.001)
        assert lch.c == pytest.approx(0.258, abs=0.001)
        assert lch.h == pytest.approx(29.2, abs=0.1)

    def test_to_oklch_white_is_achromatic(self):
        lch = to_oklch("#FFFFFF")
        assert lch.l == 1.0
        assert lch.c == 0.0
        assert lch.h == 0.0

    def test_to_oklch_near_gray_hue_is_zero(self):
        lch = to_oklch(from_oklch(0.5, 0.0004, 120.0))
        assert lch.c == 0.0
        assert lch.h == 0.0

    def test_to_oklch_keeps_hue_at_smallest_chroma(self):
        lch = to_oklch(from_oklch(0.5, 0.0006, 120.0))
        assert lch.c == 0.001
        assert lch.h == 120.0

    def test_invalid_string_gives_zero_record(self):
        assert to_rgb("nope") == RGBValues(0, 0, 0, 1.0)
        assert to_hsl("nope") == HSLValues(0, 0, 0, 1.0)
        assert to_oklch("nope").l == 0.0

    def test_same_space_skips_roundtrip(self):
        """An OKLCH color reports its own coordinates, rounded."""
        lch = to_oklch(from_oklch(0.5, 0.9, -30.0, 0.25))
        assert (lch.l, lch.c, lch.h, lch.alpha) == (0.5, 0.9, 330.0, 0.25)

    def test_rounding_clamps_out_of_range_intent(self):
        color = from_rgb(300, -20, 128, 1.5)
        assert to_rgb(color) == RGBValues(255, 0, 128, 1.0)

    def test_hsl_constructor_does_not_clamp(self):
        color = from_hsl(400, 150, 50)
        assert color.coords == (400, 1.5, 0.5)
        assert to_hsl(color) == HSLValues(40, 100, 50, 1.0)


class TestHexEncoding:

    def test_opaque_is_six_digits(self):
        assert to_hex(from_rgb(255, 136, 0)) == "#FF8800"

    def test_uppercase(self):
        assert to_hex("#abcdef") == "#ABCDEF"

    def test_half_alpha_appends_80(self):
        assert to_hex(from_rgb(255, 0, 0, 0.5)) == "#FF000080"

    def test_alpha_one_never_appends(self):
        assert to_hex(from_rgb(0, 0, 0, 1.0)) == "#000000"

    def test_alpha_rounding_to_one_drops_suffix(self):
        assert to_hex(from_rgb(0, 0, 0, 0.996)) == "#000000"

    def test_include_alpha_if_opaque(self):
        assert to_hex(from_rgb(255, 0, 0), include_alpha_if_opaque=True) == "#FF0000FF"

    def test_transparent(self):
        assert to_hex(from_rgb(18, 52, 86, 0.0)) == "#12345600"

    def test_invalid_gives_black(self):
        assert to_hex("nope") == "#000000"

    def test_alpha_byte_survives_parse(self):
        for suffix in ("00", "1A", "80", "C0", "F0"):
            hex_color = f"#336699{suffix}"
            assert to_hex(parse_hex(hex_color)) == hex_color


class TestRoundtrips:

    @pytest.mark.parametrize("hex_color", ["#123456", "#abcdef", "#00FF7F", "#fa8072", "#000000", "#FFFFFF"])
    def test_rgb_byte_exact(self, hex_color):
        rgb = to_rgb(parse_hex(hex_color))
        assert to_hex(from_rgb(rgb.r, rgb.g, rgb.b)) == normalize_hex(hex_color)

    @pytest.mark.parametrize("hsl", [(0, 100, 50), (210, 50, 40), (120, 100, 25), (300, 75, 60)])
    def test_hsl_integers_stable(self, hsl):
        hex_color = to_hex(from_hsl(*hsl))
        result = to_hsl(hex_color)
        assert (result.h, result.s, result.l) == hsl

    def test_oklch_close_to_source(self):
        lch = to_oklch("#3366CC")
        back = to_hex(from_oklch(lch.l, lch.c, lch.h))
        original = to_rgb("#3366CC")
        recovered = to_rgb(back)
        assert abs(original.r - recovered.r) <= 1
        assert abs(original.g - recovered.g) <= 1
        assert abs(original.b - recovered.b) <= 1

    def test_convert_between_spaces(self):
        color = parse_hex("#FF0000")
        hsl = convert(color, ColorSpace.HSL)
        assert hsl.space is ColorSpace.HSL
        assert hsl.coords == pytest.approx((0.0, 1.0, 0.5))
        assert convert(color, ColorSpace.RGB) is color


class TestColorValidation:

    def test_non_finite_rejected(self):
        with pytest.raises(ValueError, match="finite"):
            Color(ColorSpace.RGB, (float("nan"), 0.0, 0.0))

    def test_wrong_arity_rejected(self):
        with pytest.raises(ValueError, match="3 coordinates"):
            Color(ColorSpace.RGB, (0.0, 0.0))

    def test_frozen(self):
        color = from_rgb(1, 2, 3)
        with pytest.raises(AttributeError):
            color.alpha = 0.5
