"""
Size expressions: immutable width/height pairs, possibly composed.

Three variants:

    Concrete(width, height)          leaf; values read directly
    Blend(after, before, ratio)      after × ratio + before × (1 − ratio), per axis
    Offset(base, diff)               base + diff, per axis

Expressions are frozen and freely shareable: the same sub-expression may be
a child of several parents, and evaluation never mutates anything.

Validity is part of the contract and is not derivable from the computed
value once composed:

    Concrete   valid iff the stored value is not UNKNOWN
    Blend      width_valid == height_valid ==
                   (after.width_valid or before.width_valid)
                   and (after.height_valid or before.height_valid)
    Offset     follows the base only; the diff's validity is ignored
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass

from imagefit.utilities.dimension import DEFAULT, UNKNOWN, is_unknown, nan_max, nan_min


class SizeExpression(ABC):
    """Common behaviour of every size expression variant."""

    width: float
    height: float

    @property
    @abstractmethod
    def width_valid(self) -> bool: ...

    @property
    @abstractmethod
    def height_valid(self) -> bool: ...

    @abstractmethod
    def with_aspect(self, available: SizeExpression | None) -> SizeExpression:
        """Resolve unknown axes against *available*, preserving aspect."""

    def max(self) -> float:
        """Larger of width and height; UNKNOWN if either is UNKNOWN."""
        return nan_max(self.width, self.height)

    def min(self) -> float:
        """Smaller of width and height; UNKNOWN if either is UNKNOWN."""
        return nan_min(self.width, self.height)

    def scale(self, factor: float) -> Concrete:
        """Multiply both axes by *factor*.  Always collapses to a Concrete leaf."""
        return Concrete(self.width * factor, self.height * factor)

    def per(self) -> SizeExpression:
        """Identity, so a bare expression can stand in where a blend is expected."""
        return self

    def blend(self, ratio: float, previous: SizeExpression | None) -> SizeExpression:
        """
        Blend from *previous* (at ratio 0) towards this expression (at ratio 1).

        Returns this expression unchanged when there is no *previous* state.
        *ratio* is not clamped; values outside [0, 1] extrapolate.
        """
        if previous is None:
            return self
        return Blend(after=self, before=previous, ratio=ratio)


@dataclass(frozen=True)
class Concrete(SizeExpression):
    """A leaf size.  Either axis may be UNKNOWN."""

    width: float
    height: float

    @property
    def width_valid(self) -> bool:
        return not is_unknown(self.width)

    @property
    def height_valid(self) -> bool:
        return not is_unknown(self.height)

    def with_aspect(self, available: SizeExpression | None) -> SizeExpression:
        """
        Fill in an UNKNOWN axis from the aspect ratio of *available*.

        - no *available*, or both axes known → self, unchanged
        - only width known  → keep width, height follows available's aspect
        - only height known → keep height, width follows available's aspect
        - neither known     → a height-1 probe carrying available's aspect

        Raises InvalidSizeError when *available* cannot supply the missing axis.
        """
        # strategies build Concrete results, so they import this module
        from imagefit.strategy.strategies import SizingStrategy

        if available is None:
            return self
        if self.width_valid and self.height_valid:
            return self
        if self.width_valid:
            return SizingStrategy.WIDTH.define_size_from_raw(available, self.width, UNKNOWN)
        if self.height_valid:
            return SizingStrategy.HEIGHT.define_size_from_raw(available, UNKNOWN, self.height)
        return SizingStrategy.HEIGHT.define_size_from_raw(available, UNKNOWN, DEFAULT)


@dataclass(frozen=True)
class Blend(SizeExpression):
    """Linear blend between two size states, for animated transitions."""

    after: SizeExpression
    before: SizeExpression
    ratio: float

    @property
    def width(self) -> float:  # type: ignore[override]
        return self.after.width * self.ratio + self.before.width * (1.0 - self.ratio)

    @property
    def height(self) -> float:  # type: ignore[override]
        return self.after.height * self.ratio + self.before.height * (1.0 - self.ratio)

    def _valid(self) -> bool:
        # Both axes share one formula that reads both axes.
        return (self.after.width_valid or self.before.width_valid) and (
            self.after.height_valid or self.before.height_valid
        )

    @property
    def width_valid(self) -> bool:
        return self._valid()

    @property
    def height_valid(self) -> bool:
        return self._valid()

    def with_aspect(self, available: SizeExpression | None) -> SizeExpression:
        return Blend(
            after=self.after.with_aspect(available),
            before=self.before.with_aspect(available),
            ratio=self.ratio,
        )

    def __repr__(self) -> str:
        return (
            f"Blend(after={self.after!r}, before={self.before!r}, ratio={self.ratio!r}, "
            f"width={self.width!r}, height={self.height!r})"
        )


@dataclass(frozen=True)
class Offset(SizeExpression):
    """A diff added on top of a base size."""

    base: SizeExpression
    diff: SizeExpression

    @property
    def width(self) -> float:  # type: ignore[override]
        return self.base.width + self.diff.width

    @property
    def height(self) -> float:  # type: ignore[override]
        return self.base.height + self.diff.height

    @property
    def width_valid(self) -> bool:
        return self.base.width_valid

    @property
    def height_valid(self) -> bool:
        return self.base.height_valid

    def with_aspect(self, available: SizeExpression | None) -> SizeExpression:
        """Resolve the base against *available*, then the diff against the resolved base."""
        return self.diff.with_aspect(self.base.with_aspect(available))

    def __repr__(self) -> str:
        return (
            f"Offset(base={self.base!r}, diff={self.diff!r}, "
            f"width={self.width!r}, height={self.height!r})"
        )


DEFAULT_SIZE: Concrete = Concrete(DEFAULT, DEFAULT)
UNKNOWN_SIZE: Concrete = Concrete(UNKNOWN, UNKNOWN)


def size_of(width: float, height: float) -> Concrete:
    """Build a Concrete leaf."""
    return Concrete(width, height)


def offset_or_concrete(base: SizeExpression | None, diff: SizeExpression) -> SizeExpression:
    """Offset *diff* from *base*; without a base, a Concrete copy of *diff*."""
    if base is None:
        return Concrete(diff.width, diff.height)
    return Offset(base=base, diff=diff)
