# Copyright (c) 2026 Chromatheme
# SPDX-License-Identifier: MIT

"""CSS-style text rendering of a parsed color in each display format."""

from __future__ import annotations

from chromatheme.schema import ColorFormat, ParsedColor


def _format_alpha(alpha: float) -> str:
    return f"{alpha:g}"


def format_color_as(parsed: ParsedColor, fmt: ColorFormat | str) -> str:
    """
    Render a parsed color as text.

    Examples:
        HEX:   "#FF0000"
        RGB:   "rgb(255, 0, 0)" or "rgba(255, 0, 0, 0.5)"
        HSL:   "hsl(000 100% 50%)" or "hsl(000 100% 50% / 0.5)"
        OKLCH: "oklch(0.628 0.258 29.2)" or "oklch(0.628 0.258 29.2 / 0.5)"

    Unknown formats fall back to hex.
    """
    try:
        fmt = ColorFormat(fmt)
    except ValueError:
        return parsed.hex

    translucent = parsed.alpha < 1.0

    if fmt is ColorFormat.RGB:
        r, g, b = parsed.rgb.r, parsed.rgb.g, parsed.rgb.b
        if translucent:
            return f"rgba({r}, {g}, {b}, {_format_alpha(parsed.alpha)})"
        return f"rgb({r}, {g}, {b})"

    if fmt is ColorFormat.HSL:
        body = f"{parsed.hsl.h:03d} {parsed.hsl.s}% {parsed.hsl.l}%"
        if translucent:
            return f"hsl({body} / {_format_alpha(parsed.alpha)})"
        return f"hsl({body})"

    if fmt is ColorFormat.OKLCH:
        body = f"{parsed.oklch.l:.3f} {parsed.oklch.c:.3f} {parsed.oklch.h:.1f}"
        if translucent:
            return f"oklch({body} / {_format_alpha(parsed.alpha)})"
        return f"oklch({body})"

    return parsed.hex
