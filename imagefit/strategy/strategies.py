"""
Sizing strategies: the nine aspect-fitting policies and the define-size
combinator that reconciles a raw size with a maximum.

Each strategy is a pure function  (w, h, max_w, max_h) → Concrete:

    RAW           (w, h)
    MAX           (max_w, max_h)
    WIDTH         (max_w, h·max_w/w)
    HEIGHT        (w·max_h/h, max_h)
    INNER         fit inside the box, touching the nearer bound
    OUTER         cover the box, touching the farther bound
    WIDTH_LIMIT   unchanged while w < max_w, else scaled to max_w
    HEIGHT_LIMIT  unchanged while h < max_h, else scaled to max_h
    LIMIT         WIDTH_LIMIT for landscape (w > h), else HEIGHT_LIMIT

INNER and OUTER negate a bound when the matching raw axis is negative, so a
flipped image stays flipped after fitting.

Arithmetic follows IEEE-754: a zero divisor yields ±inf or UNKNOWN rather
than raising.
"""

from __future__ import annotations

import logging
from enum import Enum

from imagefit.schemas.size import Concrete, SizeExpression
from imagefit.utilities.dimension import divide, is_unknown

logger = logging.getLogger(__name__)


class InvalidSizeError(ValueError):
    """Raised when neither the raw size nor the maximum defines an axis."""


class SizingStrategy(str, Enum):
    """Named aspect-fitting policy."""

    RAW = "RAW"
    MAX = "MAX"
    WIDTH = "WIDTH"
    HEIGHT = "HEIGHT"
    INNER = "INNER"
    OUTER = "OUTER"
    WIDTH_LIMIT = "WIDTH_LIMIT"
    HEIGHT_LIMIT = "HEIGHT_LIMIT"
    LIMIT = "LIMIT"

    def size(self, w: float, h: float, max_w: float, max_h: float) -> Concrete:
        """Apply this strategy to fully-known raw and maximum sizes."""
        match self:
            case SizingStrategy.RAW:
                return Concrete(w, h)
            case SizingStrategy.MAX:
                return Concrete(max_w, max_h)
            case SizingStrategy.WIDTH:
                return _fit_width(w, h, max_w)
            case SizingStrategy.HEIGHT:
                return _fit_height(w, h, max_h)
            case SizingStrategy.INNER | SizingStrategy.OUTER:
                if w < 0:
                    max_w = -max_w
                if h < 0:
                    max_h = -max_h
                width_ratio = divide(w, max_w)
                height_ratio = divide(h, max_h)
                if self is SizingStrategy.INNER:
                    width_bound = width_ratio > height_ratio
                else:
                    width_bound = width_ratio < height_ratio
                if width_bound:
                    return _fit_width(w, h, max_w)
                return _fit_height(w, h, max_h)
            case SizingStrategy.WIDTH_LIMIT:
                return _limit_width(w, h, max_w)
            case SizingStrategy.HEIGHT_LIMIT:
                return _limit_height(w, h, max_h)
            case SizingStrategy.LIMIT:
                if w > h:
                    return _limit_width(w, h, max_w)
                return _limit_height(w, h, max_h)

        raise AssertionError(f"unhandled sizing strategy {self!r}")

    # ── Define-size combinator ─────────────────────────────────────────────────

    def define_size(
        self,
        raw_width: float,
        raw_height: float,
        max_width: float,
        max_height: float,
    ) -> Concrete:
        """
        Resolve UNKNOWN axes, then apply this strategy.

        An UNKNOWN raw axis takes the maximum's value; an UNKNOWN maximum
        then takes the (already substituted) raw value.

        Raises:
            InvalidSizeError: If the raw value and the maximum are both
                UNKNOWN on either axis.  Checked before any substitution.
        """
        if is_unknown(raw_width) and is_unknown(max_width):
            logger.debug("%s: width undefined in both raw and max size", self.name)
            raise InvalidSizeError("No size defined: width is unknown in both raw and max size")
        if is_unknown(raw_height) and is_unknown(max_height):
            logger.debug("%s: height undefined in both raw and max size", self.name)
            raise InvalidSizeError("No size defined: height is unknown in both raw and max size")
        if is_unknown(raw_width):
            raw_width = max_width
        if is_unknown(raw_height):
            raw_height = max_height
        if is_unknown(max_width):
            max_width = raw_width
        if is_unknown(max_height):
            max_height = raw_height
        logger.debug(
            "%s: raw=(%r, %r) max=(%r, %r)",
            self.name,
            raw_width,
            raw_height,
            max_width,
            max_height,
        )
        return self.size(raw_width, raw_height, max_width, max_height)

    def define_size_from_raw(
        self,
        raw: SizeExpression | None,
        max_width: float,
        max_height: float,
    ) -> Concrete:
        """define_size() with a raw expression; without one, the maximum as-is."""
        if raw is None:
            return Concrete(max_width, max_height)
        return self.define_size(raw.width, raw.height, max_width, max_height)

    def define_size_from_bounds(
        self,
        raw_width: float,
        raw_height: float,
        bounds: SizeExpression | None,
    ) -> Concrete:
        """define_size() against a bounds expression; without one, the raw size as-is."""
        if bounds is None:
            return Concrete(raw_width, raw_height)
        return self.define_size(raw_width, raw_height, bounds.width, bounds.height)

    def define_size_between(
        self,
        raw: SizeExpression | None,
        bounds: SizeExpression | None,
    ) -> SizeExpression:
        """
        define_size() for two optional expressions.

        When only one side is present it is returned itself, untouched and
        without applying the strategy.

        Raises:
            InvalidSizeError: If both are None, or per define_size().
        """
        if raw is not None and bounds is not None:
            return self.define_size(raw.width, raw.height, bounds.width, bounds.height)
        if bounds is not None:
            return bounds
        if raw is not None:
            return raw
        raise InvalidSizeError("No size defined: neither raw nor max size given")


# ── Formula helpers ───────────────────────────────────────────────────────────


def _fit_width(w: float, h: float, max_w: float) -> Concrete:
    return Concrete(max_w, divide(h * max_w, w))


def _fit_height(w: float, h: float, max_h: float) -> Concrete:
    return Concrete(divide(w * max_h, h), max_h)


def _limit_width(w: float, h: float, max_w: float) -> Concrete:
    if w < max_w:
        return Concrete(w, h)
    return Concrete(max_w, divide(max_w * h, w))


def _limit_height(w: float, h: float, max_h: float) -> Concrete:
    if h < max_h:
        return Concrete(w, h)
    return Concrete(divide(max_h * w, h), max_h)
