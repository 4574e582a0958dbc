# Copyright (c) 2026 Chromatheme
# SPDX-License-Identifier: MIT

"""
Gamut analysis and mapping into sRGB.

Two policies are offered for colors that cannot be shown without clipping:

- clamp_to_gamut: per-channel clamp in RGB. Fast, but may visibly shift
  hue and lightness.
- gamut_map: chroma reduction in OKLCH holding lightness and hue, in the
  manner of CSS Color 4. Slower, perceptually faithful.

Being out of gamut is not an error. Callers read the flag and pick a policy.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

import numpy as np

from chromatheme.schema import Color, ColorSpace
from chromatheme.color.colorspace import delta_e_ok, oklch_to_oklab, srgb_to_oklab
from chromatheme.color.conversion import ColorLike, oklch_coords, parse_hex, srgb_coords

log = logging.getLogger("chromatheme.color.gamut")


@dataclass(frozen=True)
class GamutConfig:
    """Configuration for gamut checks and mapping."""

    # Just-noticeable difference (OKLab ΔE). A clipped candidate this close
    # to the chroma-reduced color is accepted as-is.
    jnd: float = 0.02

    # Binary search stops once the chroma interval is narrower than this
    epsilon: float = 1e-4

    # Slack for floating point noise from the matrix chain when testing
    # whether a channel lies within [0, 1]
    tolerance: float = 1e-6


_DEFAULT_CONFIG = GamutConfig()


def _coerce(color: ColorLike) -> Color | None:
    if isinstance(color, Color):
        return color
    return parse_hex(color)


def _channels_in_range(channels: tuple[float, float, float], tolerance: float) -> bool:
    return all(-tolerance <= ch <= 1.0 + tolerance for ch in channels)


def _clip(channels: tuple[float, float, float]) -> tuple[float, float, float]:
    return tuple(min(1.0, max(0.0, ch)) for ch in channels)


def is_in_gamut(color: ColorLike, config: GamutConfig | None = None) -> bool:
    """
    Check whether a color is displayable in sRGB without clipping.

    Args:
        color: Color or hex string (invalid strings are never in gamut)
        config: Tolerance settings (uses defaults if None)
    """
    config = config or _DEFAULT_CONFIG
    c = _coerce(color)
    if c is None:
        return False
    return _channels_in_range(srgb_coords(c), config.tolerance)


def clamp_to_gamut(color: ColorLike) -> Color:
    """
    Clamp each sRGB channel into [0, 1].

    Returns:
        Color tagged RGB (black for an invalid hex string)
    """
    c = _coerce(color)
    if c is None:
        return Color(ColorSpace.RGB, (0.0, 0.0, 0.0))
    return Color(ColorSpace.RGB, _clip(srgb_coords(c)), c.alpha)


def gamut_map(color: ColorLike, config: GamutConfig | None = None) -> Color:
    """
    Map a color into sRGB by reducing OKLCH chroma.

    Lightness and hue are held fixed while chroma is binary-searched down to
    the gamut boundary. A candidate whose per-channel clip is within the
    just-noticeable difference is accepted, which keeps as much chroma as
    the eye can tell apart. The final value is clipped, so the result is
    always in gamut.

    Args:
        color: Color or hex string
        config: Search settings (uses defaults if None)

    Returns:
        The input unchanged if already in gamut, otherwise a Color tagged RGB
    """
    config = config or _DEFAULT_CONFIG
    c = _coerce(color)
    if c is None:
        return Color(ColorSpace.RGB, (0.0, 0.0, 0.0))

    if _channels_in_range(srgb_coords(c), config.tolerance):
        return c

    L, C, H = oklch_coords(c)
    if L >= 1.0:
        return Color(ColorSpace.RGB, (1.0, 1.0, 1.0), c.alpha)
    if L <= 0.0:
        return Color(ColorSpace.RGB, (0.0, 0.0, 0.0), c.alpha)

    def clipped_at(chroma: float) -> tuple[tuple[float, float, float], bool, float]:
        candidate = Color(ColorSpace.OKLCH, (L, chroma, H))
        channels = srgb_coords(candidate)
        clipped = _clip(channels)
        distance = delta_e_ok(
            oklch_to_oklab(np.array([L, chroma, H], dtype=np.float64)),
            srgb_to_oklab(np.array(clipped, dtype=np.float64)),
        )
        return clipped, _channels_in_range(channels, config.tolerance), distance

    clipped, _, distance = clipped_at(max(C, 0.0))
    if distance <= config.jnd:
        log.debug("gamut_map: clip within JND for L=%.3f C=%.3f H=%.1f", L, C, H)
        return Color(ColorSpace.RGB, clipped, c.alpha)

    start, end = 0.0, max(C, 0.0)
    while end - start > config.epsilon:
        chroma = (start + end) / 2.0
        clipped, inside, distance = clipped_at(chroma)
        if inside or distance <= config.jnd:
            start = chroma
        else:
            end = chroma

    clipped, _, _ = clipped_at(start)
    log.debug(
        "gamut_map: chroma %.4f -> %.4f at L=%.3f H=%.1f", C, start, L, H
    )
    return Color(ColorSpace.RGB, clipped, c.alpha)
