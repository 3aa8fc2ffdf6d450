"""
==============================================================================
Numeric Utilities Module
==============================================================================

Single-precision handling for product weights.

Weights are held as IEEE-754 binary32 values: a parsed literal is rounded
to the nearest float32, and anything that overflows float32 is treated as
not finite.

==============================================================================
"""

from __future__ import annotations

import math
import re
from typing import Optional

import numpy as np


# ASCII-only decimal literal: [sign] digits [. digits] [exponent]
DECIMAL_PATTERN = re.compile(r"[+-]?([0-9]+\.?[0-9]*|\.[0-9]+)([eE][+-]?[0-9]+)?")


def to_single_precision(value: float) -> float:
    """
    Round a value to the nearest float32 and return it as a Python float.

    Values beyond the float32 range come back as ``inf``.
    """
    with np.errstate(over="ignore"):
        return float(np.float32(value))


def parse_single(text: str) -> Optional[float]:
    """
    Parse a decimal literal as a finite single-precision number.

    Only plain ASCII decimal literals are accepted: an optional sign,
    digits with an optional fraction, and an optional exponent. Digit
    separators ("1_5"), non-ASCII digits, hex and the inf/nan words are
    rejected.

    Args:
        text: Already-trimmed input text

    Returns:
        The float32-rounded value, or None if the text is not a number
        or the result is not finite

    Example:
        >>> parse_single("1.5")
        1.5
        >>> parse_single("1_5") is None
        True
        >>> parse_single("1e39") is None
        True
    """
    if not DECIMAL_PATTERN.fullmatch(text):
        return None

    value = to_single_precision(float(text))
    if not math.isfinite(value):
        return None
    return value
