# Copyright (c) 2025 Jonathan Piette
# This file is part of TriviaNight and is licensed for non-commercial use only.
# See the LICENSE file for details.

"""
Score Utilities

Lenient numeric parsing for host-entered scores. The dashboard sends
whatever is in the input box, so "12", "12 pts", 12.7 and "" all have to
produce something sensible.
"""

import math
import re
from typing import Any

from trivia_night.src.config.game_config import MIN_SCORE

_LEADING_INT = re.compile(r"^\s*([+-]?\d+)")


def coerce_int(value: Any, default: int = 0) -> int:
    """
    Parse the leading integer of a value, falling back to a default.

    Floats are truncated toward zero; strings are read up to the first
    non-digit character; booleans, None and anything else give the default.

    Examples:
        >>> coerce_int("12 pts")
        12
        >>> coerce_int(7.9)
        7
        >>> coerce_int("abc")
        0
    """
    if isinstance(value, bool) or value is None:
        return default
    if isinstance(value, int):
        return value
    if isinstance(value, float):
        return int(value) if math.isfinite(value) else default
    if isinstance(value, str):
        match = _LEADING_INT.match(value)
        if not match:
            return default
        try:
            return int(match.group(1))
        except ValueError:
            # Digit strings past the interpreter conversion limit
            return default
    return default


def clamp_score(score: int) -> int:
    """Scores never go below MIN_SCORE."""
    return max(MIN_SCORE, score)
