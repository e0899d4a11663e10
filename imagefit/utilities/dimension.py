"""
Dimension values: plain floats, or the UNKNOWN sentinel (NaN).

A dimension is "unknown" when it has no value yet.  Negative values are
meaningful (INNER and OUTER treat them as orientation flips) and pass
through untouched.

All functions are pure: no side effects, no state.
"""

from __future__ import annotations

import logging
import math

logger = logging.getLogger(__name__)

UNKNOWN: float = math.nan
DEFAULT: float = 1.0


def is_unknown(value: float) -> bool:
    """True if *value* is the UNKNOWN sentinel."""
    return math.isnan(value)


def parse_dimension(token: str | None) -> float:
    """
    Parse a numeric token into a dimension.

    Never raises: ``None``, blank, malformed and non-finite tokens all
    become UNKNOWN.  Surrounding whitespace is ignored.
    """
    if token is None:
        return UNKNOWN
    try:
        value = float(token)
    except ValueError:
        logger.debug("Unparseable dimension token %r, using UNKNOWN", token)
        return UNKNOWN
    if math.isinf(value):
        logger.debug("Non-finite dimension token %r, using UNKNOWN", token)
        return UNKNOWN
    return value


def divide(numerator: float, denominator: float) -> float:
    """IEEE-754 division: a zero divisor yields ±inf or UNKNOWN instead of raising."""
    if denominator != 0:
        return numerator / denominator
    if numerator == 0 or math.isnan(numerator):
        return UNKNOWN
    return math.copysign(math.inf, numerator) * math.copysign(1.0, denominator)


def nan_max(a: float, b: float) -> float:
    """max() that propagates UNKNOWN from either operand."""
    if math.isnan(a) or math.isnan(b):
        return UNKNOWN
    return max(a, b)


def nan_min(a: float, b: float) -> float:
    """min() that propagates UNKNOWN from either operand."""
    if math.isnan(a) or math.isnan(b):
        return UNKNOWN
    return min(a, b)
