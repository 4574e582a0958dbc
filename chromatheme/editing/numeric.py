# Copyright (c) 2026 Chromatheme
# SPDX-License-Identifier: MIT

"""
Numeric field model for editing color components.

Holds the state behind one number input, independent of any widget:

- the last valid value, always clamped (or wrapped) and rounded for its
  quantity;
- a raw text buffer that may hold partial input such as "-", "." or ""
  while the user is typing.

Arrow-key stepping: ±1 by default, ±0.1 with alt, ±10 with shift, and
±1 with both. Quantities whose working range is about one unit wide
(alpha, OKLCH chroma) scale all steps by 0.1. Integer quantities never
step by less than 1.
"""

from __future__ import annotations

import math
import re
from dataclasses import dataclass
from enum import Enum
from typing import Optional

from chromatheme.color.precision import round_to


class Quantity(Enum):
    """Color components that can be edited as numbers."""
    OKLCH_L = "oklch_l"  # Lightness as percent
    OKLCH_C = "oklch_c"
    OKLCH_H = "oklch_h"
    HSL_H = "hsl_h"
    HSL_S = "hsl_s"
    HSL_L = "hsl_l"
    RGB = "rgb"  # Any single channel
    ALPHA = "alpha"


@dataclass(frozen=True)
class Domain:
    """Range, edge policy and precision of a quantity."""

    minimum: float
    maximum: float
    wraps: bool = False
    decimals: int = 0
    step_scale: float = 1.0

    def __post_init__(self) -> None:
        """Validate bounds."""
        if not self.minimum < self.maximum:
            raise ValueError(f"Domain needs minimum < maximum, got {self.minimum}..{self.maximum}")
        if self.wraps and math.isinf(self.maximum - self.minimum):
            raise ValueError("A wrapping domain needs finite bounds")

    @property
    def is_integer(self) -> bool:
        return self.decimals == 0


QUANTITY_DOMAINS: dict[Quantity, Domain] = {
    Quantity.OKLCH_L: Domain(0.0, 100.0, decimals=1),
    Quantity.OKLCH_C: Domain(0.0, math.inf, decimals=3, step_scale=0.1),
    Quantity.OKLCH_H: Domain(0.0, 360.0, wraps=True, decimals=1),
    Quantity.HSL_H: Domain(0.0, 360.0, wraps=True),
    Quantity.HSL_S: Domain(0.0, 100.0),
    Quantity.HSL_L: Domain(0.0, 100.0),
    Quantity.RGB: Domain(0.0, 255.0),
    Quantity.ALPHA: Domain(0.0, 1.0, decimals=2, step_scale=0.1),
}

# Step multipliers for (alt, shift)
_MODIFIERS = {
    (False, False): 1.0,
    (True, False): 0.1,
    (False, True): 10.0,
    (True, True): 1.0,
}

_PARTIAL_NUMBER_RE = re.compile(r"^-?\d*\.?\d*$")
_INCOMPLETE = {"", "-", ".", "-."}


# =============================================================================
# Utility Functions
# =============================================================================


def round_to_precision(value: float, decimals: int) -> float:
    """Round half away from zero, free of floating point residue."""
    return round_to(value, decimals)


def clamp_value(value: float, minimum: float, maximum: float, wraps: bool) -> float:
    """Clamp into [minimum, maximum], or wrap into [minimum, maximum) for angles."""
    if wraps:
        return minimum + (value - minimum) % (maximum - minimum)
    return max(minimum, min(maximum, value))


def format_number(value: float, decimals: int) -> str:
    """Render a value for the text buffer, trailing zeros removed."""
    rounded = round_to_precision(value, decimals)
    if abs(rounded) < 1e-10:
        return "0"
    text = f"{rounded:.{decimals}f}"
    if "." in text:
        text = text.rstrip("0").rstrip(".")
    return text


def is_partial_number(text: str) -> bool:
    """True for text that is a number or could become one by typing more."""
    return _PARTIAL_NUMBER_RE.match(text) is not None


def parse_number(text: str) -> Optional[float]:
    """Number in the text, or None for partial or invalid input."""
    if text in _INCOMPLETE or not is_partial_number(text):
        return None
    value = float(text)
    # Long digit runs overflow to inf
    return value if math.isfinite(value) else None


def step_increment(domain: Domain, direction: int, alt: bool = False, shift: bool = False) -> float:
    """
    Signed step for one increment/decrement gesture.

    Args:
        domain: Quantity being edited
        direction: Positive to increment, negative to decrement
        alt: Fine step modifier
        shift: Coarse step modifier
    """
    increment = _MODIFIERS[(bool(alt), bool(shift))] * domain.step_scale
    if domain.is_integer:
        increment = max(1.0, round_to(increment, 0))
    return increment if direction >= 0 else -increment


# =============================================================================
# Model
# =============================================================================


class NumericInputModel:
    """
    State of one numeric input field.

    Example:
        >>> hue = NumericInputModel(Quantity.OKLCH_H, 355)
        >>> hue.step(+1, shift=True)
        5.0
        >>> hue.text
        '5'
    """

    def __init__(self, quantity: Quantity, value: float = 0.0) -> None:
        self.quantity = quantity
        self.domain = QUANTITY_DOMAINS[quantity]
        self._value = self._normalize(value)
        self._text = format_number(self._value, self.domain.decimals)

    def _normalize(self, value: float) -> float:
        if not math.isfinite(value):
            raise ValueError(f"{self.quantity.value} must be finite, got {value}")
        d = self.domain
        value = clamp_value(value, d.minimum, d.maximum, d.wraps)
        value = round_to_precision(value, d.decimals)
        # Rounding can land on the wrap point (359.96 -> 360.0)
        return clamp_value(value, d.minimum, d.maximum, d.wraps)

    @property
    def value(self) -> float:
        """Last valid value."""
        return self._value

    @property
    def text(self) -> str:
        """Raw text buffer, possibly partial."""
        return self._text

    def set_value(self, value: float) -> None:
        """
        Replace the value from outside (e.g. a new color was selected).

        Raises:
            ValueError: If the value is NaN or infinite
        """
        self._value = self._normalize(value)
        self._text = format_number(self._value, self.domain.decimals)

    def set_text(self, raw: str) -> bool:
        """
        Feed typed text into the buffer.

        Partial input is kept verbatim. When the text is a complete number
        the value follows it; the buffer is left as typed.

        Returns:
            False if the text cannot be part of a number (buffer unchanged)
        """
        if not is_partial_number(raw):
            return False
        self._text = raw
        parsed = parse_number(raw)
        if parsed is not None:
            self._value = self._normalize(parsed)
        return True

    def step(self, direction: int, *, alt: bool = False, shift: bool = False) -> float:
        """
        Apply an increment or decrement gesture.

        Returns:
            The new value, also written to the text buffer
        """
        increment = step_increment(self.domain, direction, alt=alt, shift=shift)
        self.set_value(self._value + increment)
        return self._value

    def commit(self) -> float:
        """
        Finalize the field (e.g. on blur).

        The buffer is parsed, falling back to the last valid value when it
        holds partial input, then normalized and written back.
        """
        parsed = parse_number(self._text)
        self.set_value(parsed if parsed is not None else self._value)
        return self._value

    def discard(self) -> None:
        """Abandon the typed text and show the last valid value again."""
        self._text = format_number(self._value, self.domain.decimals)
