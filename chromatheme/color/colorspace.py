# Copyright (c) 2026 Chromatheme
# SPDX-License-Identifier: MIT

"""
Color space conversions.

Conversion chains:
    sRGB → Linear RGB → OKLab → OKLCH
    sRGB ↔ HSL

References:
- OKLab: https://bottosson.github.io/posts/oklab/
- OKLCH: Cylindrical form of OKLab (Lightness, Chroma, Hue)
- HSL: CSS Color Module Level 4, section 7

Nothing here clamps. Out-of-gamut colors produce sRGB values outside
[0, 1]; deciding what to do about that is the job of the gamut module.
"""

from __future__ import annotations

import numpy as np
from numpy.typing import NDArray


# =============================================================================
# sRGB ↔ Linear RGB
# =============================================================================


def srgb_to_linear(srgb: NDArray[np.float64]) -> NDArray[np.float64]:
    """
    Convert sRGB values to linear RGB.

    sRGB uses a piecewise gamma curve:
    - For |value| <= 0.04045: value/12.92
    - Otherwise: sign(value) * ((|value| + 0.055) / 1.055) ^ 2.4

    The curve is mirrored for negative inputs so extended-range values
    survive a round trip.
    """
    srgb = np.asarray(srgb, dtype=np.float64)
    magnitude = np.abs(srgb)
    linear = np.where(
        magnitude <= 0.04045,
        srgb / 12.92,
        np.sign(srgb) * np.power((magnitude + 0.055) / 1.055, 2.4)
    )
    return linear


def linear_to_srgb(linear: NDArray[np.float64]) -> NDArray[np.float64]:
    """
    Convert linear RGB to sRGB values.

    Inverse of srgb_to_linear. Values are not clipped.
    """
    linear = np.asarray(linear, dtype=np.float64)
    magnitude = np.abs(linear)
    srgb = np.where(
        magnitude <= 0.0031308,
        linear * 12.92,
        np.sign(linear) * (1.055 * np.power(magnitude, 1.0 / 2.4) - 0.055)
    )
    return srgb


# =============================================================================
# Linear RGB ↔ OKLab
# =============================================================================

# Matrices from https://bottosson.github.io/posts/oklab/

# Linear sRGB to LMS (cone responses)
_M1 = np.array([
    [0.4122214708, 0.5363325363, 0.0514459929],
    [0.2119034982, 0.6806995451, 0.1073969566],
    [0.0883024619, 0.2817188376, 0.6299787005],
], dtype=np.float64)

# LMS to OKLab
_M2 = np.array([
    [0.2104542553, 0.7936177850, -0.0040720468],
    [1.9779984951, -2.4285922050, 0.4505937099],
    [0.0259040371, 0.7827717662, -0.8086757660],
], dtype=np.float64)

# Inverse matrices
_M1_INV = np.linalg.inv(_M1)
_M2_INV = np.linalg.inv(_M2)


def linear_rgb_to_oklab(rgb: NDArray[np.float64]) -> NDArray[np.float64]:
    """
    Convert linear RGB to OKLab.

    Args:
        rgb: Array of shape (..., 3) with linear RGB values

    Returns:
        Array of shape (..., 3) with OKLab values (L, a, b)
    """
    rgb = np.asarray(rgb, dtype=np.float64)

    # RGB to LMS
    lms = np.einsum('...j,ij->...i', rgb, _M1)

    # Cube root (handle negative values for out-of-gamut colors)
    lms_cbrt = np.cbrt(lms)

    # LMS to OKLab
    lab = np.einsum('...j,ij->...i', lms_cbrt, _M2)

    return lab


def oklab_to_linear_rgb(lab: NDArray[np.float64]) -> NDArray[np.float64]:
    """
    Convert OKLab to linear RGB.

    Args:
        lab: Array of shape (..., 3) with OKLab values (L, a, b)

    Returns:
        Array of shape (..., 3) with linear RGB values
    """
    lab = np.asarray(lab, dtype=np.float64)

    # OKLab to LMS (cubed)
    lms_cbrt = np.einsum('...j,ij->...i', lab, _M2_INV)

    # Cube
    lms = lms_cbrt ** 3

    # LMS to RGB
    rgb = np.einsum('...j,ij->...i', lms, _M1_INV)

    return rgb


# =============================================================================
# OKLab ↔ OKLCH
# =============================================================================


def oklab_to_oklch(lab: NDArray[np.float64]) -> NDArray[np.float64]:
    """
    Convert OKLab to OKLCH (cylindrical coordinates).

    Args:
        lab: Array of shape (..., 3) with OKLab values (L, a, b)

    Returns:
        Array of shape (..., 3) with OKLCH values (L, C, H)
        H is in degrees [0, 360)
    """
    lab = np.asarray(lab, dtype=np.float64)

    L = lab[..., 0]
    a = lab[..., 1]
    b = lab[..., 2]

    C = np.sqrt(a**2 + b**2)
    H = np.degrees(np.arctan2(b, a)) % 360.0

    return np.stack([L, C, H], axis=-1)


def oklch_to_oklab(lch: NDArray[np.float64]) -> NDArray[np.float64]:
    """
    Convert OKLCH to OKLab.

    Args:
        lch: Array of shape (..., 3) with OKLCH values (L, C, H)
        H is in degrees

    Returns:
        Array of shape (..., 3) with OKLab values (L, a, b)
    """
    lch = np.asarray(lch, dtype=np.float64)

    L = lch[..., 0]
    C = lch[..., 1]
    H_rad = np.radians(lch[..., 2])

    a = C * np.cos(H_rad)
    b = C * np.sin(H_rad)

    return np.stack([L, a, b], axis=-1)


# =============================================================================
# Convenience: sRGB ↔ OKLCH (full chain)
# =============================================================================


def srgb_to_oklab(srgb: NDArray[np.float64]) -> NDArray[np.float64]:
    """Convert sRGB to OKLab (sRGB → Linear RGB → OKLab)."""
    return linear_rgb_to_oklab(srgb_to_linear(srgb))


def srgb_to_oklch(srgb: NDArray[np.float64]) -> NDArray[np.float64]:
    """
    Convert sRGB to OKLCH.

    Full chain: sRGB → Linear RGB → OKLab → OKLCH

    Args:
        srgb: Array of shape (..., 3) with sRGB values

    Returns:
        Array of shape (..., 3) with OKLCH values (L, C, H)
        - L: Lightness [0, 1] for in-gamut input
        - C: Chroma [0, ~0.32 for the sRGB gamut]
        - H: Hue in degrees [0, 360)
    """
    return oklab_to_oklch(srgb_to_oklab(srgb))


def oklch_to_srgb(lch: NDArray[np.float64]) -> NDArray[np.float64]:
    """
    Convert OKLCH to sRGB.

    Full chain: OKLCH → OKLab → Linear RGB → sRGB

    Args:
        lch: Array of shape (..., 3) with OKLCH values (L, C, H)

    Returns:
        Array of shape (..., 3) with unclipped sRGB values
    """
    lab = oklch_to_oklab(lch)
    linear = oklab_to_linear_rgb(lab)
    return linear_to_srgb(linear)


# =============================================================================
# sRGB ↔ HSL
# =============================================================================


def srgb_to_hsl(r: float, g: float, b: float) -> tuple[float, float, float]:
    """
    Convert sRGB channels to HSL.

    Args:
        r, g, b: sRGB channels, nominally [0, 1]

    Returns:
        (hue degrees [0, 360), saturation, lightness). Hue is 0 for grays.
    """
    hi = max(r, g, b)
    lo = min(r, g, b)
    delta = hi - lo
    lightness = (hi + lo) / 2.0

    if delta == 0:
        return 0.0, 0.0, lightness

    denominator = 1.0 - abs(hi + lo - 1.0)
    saturation = delta / denominator if denominator != 0 else 0.0
    if hi == r:
        hue = (g - b) / delta + (6.0 if g < b else 0.0)
    elif hi == g:
        hue = (b - r) / delta + 2.0
    else:
        hue = (r - g) / delta + 4.0

    return (hue * 60.0) % 360.0, saturation, lightness


def hsl_to_srgb(h: float, s: float, l: float) -> tuple[float, float, float]:
    """
    Convert HSL to sRGB channels.

    Args:
        h: Hue in degrees (any value, wrapped)
        s: Saturation, nominally [0, 1]
        l: Lightness, nominally [0, 1]

    Returns:
        (r, g, b), unclipped
    """
    chroma = (1.0 - abs(2.0 * l - 1.0)) * s
    sector = (h % 360.0) / 60.0
    x = chroma * (1.0 - abs(sector % 2.0 - 1.0))
    m = l - chroma / 2.0

    if sector < 1:
        r, g, b = chroma, x, 0.0
    elif sector < 2:
        r, g, b = x, chroma, 0.0
    elif sector < 3:
        r, g, b = 0.0, chroma, x
    elif sector < 4:
        r, g, b = 0.0, x, chroma
    elif sector < 5:
        r, g, b = x, 0.0, chroma
    else:
        r, g, b = chroma, 0.0, x

    return r + m, g + m, b + m


# =============================================================================
# ΔE Distance (Perceptual Color Difference)
# =============================================================================


def delta_e_ok(
    lab1: NDArray[np.float64],
    lab2: NDArray[np.float64],
) -> float:
    """
    Euclidean distance between two OKLab colors.

    Reference thresholds (OKLab Euclidean, 0-1 scale):
    - ΔE ≈ 0.02: barely perceptible (the usual just-noticeable difference)
    - ΔE ≈ 0.04: noticeable difference
    - ΔE ≈ 0.08+: clearly different colors
    """
    delta = np.asarray(lab1, dtype=np.float64) - np.asarray(lab2, dtype=np.float64)
    return float(np.sqrt(np.sum(delta ** 2)))
