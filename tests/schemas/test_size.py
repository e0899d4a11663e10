"""
Tests for size expressions: Concrete, Blend, Offset.

Covers:
  - Per-variant width/height formulas, including blend extrapolation
  - Validity rules, including Blend's shared both-axis formula and
    Offset's base-only rule, on mixed valid/UNKNOWN leaves
  - max/min UNKNOWN propagation, scale, per, blend
  - with_aspect on every variant
  - Immutability and structural sharing
"""

import math

import pytest

from imagefit.schemas.size import (
    DEFAULT_SIZE,
    UNKNOWN_SIZE,
    Blend,
    Concrete,
    Offset,
    SizeExpression,
    offset_or_concrete,
    size_of,
)
from imagefit.strategy.strategies import InvalidSizeError
from imagefit.utilities.dimension import UNKNOWN

NAN = UNKNOWN


@pytest.fixture(scope="module")
def landscape():
    """A 400×200 available area (2:1)."""
    return Concrete(400.0, 200.0)


# ── Concrete ───────────────────────────────────────────────────────────────────


class TestConcrete:
    def test_reads_fields(self):
        c = Concrete(5.0, 10.0)
        assert c.width == 5.0
        assert c.height == 10.0

    def test_validity_follows_unknown(self):
        assert Concrete(1.0, 2.0).width_valid
        assert Concrete(1.0, 2.0).height_valid
        assert not Concrete(NAN, 2.0).width_valid
        assert Concrete(NAN, 2.0).height_valid
        assert Concrete(1.0, NAN).width_valid
        assert not Concrete(1.0, NAN).height_valid

    def test_negative_values_are_valid(self):
        c = Concrete(-3.0, -4.0)
        assert c.width_valid and c.height_valid

    def test_is_frozen(self):
        c = Concrete(1.0, 2.0)
        with pytest.raises(AttributeError):
            c.width = 3.0  # type: ignore[misc]

    def test_is_a_size_expression(self):
        assert isinstance(Concrete(1.0, 2.0), SizeExpression)

    def test_well_known_sizes(self):
        assert DEFAULT_SIZE == Concrete(1.0, 1.0)
        assert math.isnan(UNKNOWN_SIZE.width)
        assert math.isnan(UNKNOWN_SIZE.height)

    def test_size_of(self):
        assert size_of(3.0, 4.0) == Concrete(3.0, 4.0)


# ── Blend ──────────────────────────────────────────────────────────────────────


class TestBlend:
    def test_midpoint(self):
        b = Blend(after=Concrete(10.0, 20.0), before=Concrete(0.0, 0.0), ratio=0.5)
        assert b.width == pytest.approx(5.0)
        assert b.height == pytest.approx(10.0)

    def test_ratio_one_is_after(self):
        b = Blend(after=Concrete(10.0, 20.0), before=Concrete(2.0, 4.0), ratio=1.0)
        assert (b.width, b.height) == (10.0, 20.0)

    def test_ratio_zero_is_before(self):
        b = Blend(after=Concrete(10.0, 20.0), before=Concrete(2.0, 4.0), ratio=0.0)
        assert (b.width, b.height) == (2.0, 4.0)

    def test_ratio_above_one_extrapolates(self):
        b = Blend(after=Concrete(10.0, 20.0), before=Concrete(0.0, 0.0), ratio=2.0)
        assert (b.width, b.height) == (20.0, 40.0)

    def test_negative_ratio_extrapolates(self):
        b = Blend(after=Concrete(10.0, 20.0), before=Concrete(0.0, 0.0), ratio=-1.0)
        assert (b.width, b.height) == (-10.0, -20.0)

    def test_unknown_leaf_poisons_value(self):
        b = Blend(after=Concrete(NAN, 20.0), before=Concrete(4.0, 0.0), ratio=0.5)
        assert math.isnan(b.width)
        assert b.height == pytest.approx(10.0)


class TestBlendValidity:
    def test_all_valid(self):
        b = Blend(after=Concrete(1.0, 2.0), before=Concrete(3.0, 4.0), ratio=0.5)
        assert b.width_valid and b.height_valid

    def test_width_from_one_side_height_from_other_is_valid(self):
        b = Blend(after=Concrete(1.0, NAN), before=Concrete(NAN, 2.0), ratio=0.5)
        assert b.width_valid
        assert b.height_valid
        # valid even though the computed values are UNKNOWN
        assert math.isnan(b.width)

    def test_no_width_anywhere_invalidates_height_too(self):
        b = Blend(after=Concrete(NAN, 2.0), before=Concrete(NAN, 3.0), ratio=0.5)
        assert not b.height_valid
        assert not b.width_valid

    def test_no_height_anywhere_invalidates_width_too(self):
        b = Blend(after=Concrete(1.0, NAN), before=Concrete(2.0, NAN), ratio=0.5)
        assert not b.width_valid
        assert not b.height_valid

    def test_one_fully_valid_side_suffices(self):
        b = Blend(after=UNKNOWN_SIZE, before=Concrete(2.0, 3.0), ratio=0.5)
        assert b.width_valid and b.height_valid


# ── Offset ─────────────────────────────────────────────────────────────────────


class TestOffset:
    def test_adds_axes(self):
        o = Offset(base=Concrete(100.0, 50.0), diff=Concrete(10.0, -5.0))
        assert (o.width, o.height) == (110.0, 45.0)

    def test_validity_follows_base_only(self):
        o = Offset(base=Concrete(1.0, NAN), diff=UNKNOWN_SIZE)
        assert o.width_valid
        assert not o.height_valid

    def test_valid_diff_does_not_rescue_invalid_base(self):
        o = Offset(base=UNKNOWN_SIZE, diff=Concrete(1.0, 1.0))
        assert not o.width_valid
        assert not o.height_valid

    def test_validity_through_nested_blend_base(self):
        base = Blend(after=Concrete(1.0, NAN), before=Concrete(NAN, 2.0), ratio=0.5)
        o = Offset(base=base, diff=UNKNOWN_SIZE)
        assert o.width_valid and o.height_valid


class TestOffsetOrConcrete:
    def test_with_base_builds_offset(self):
        base = Concrete(1.0, 2.0)
        diff = Concrete(3.0, 4.0)
        result = offset_or_concrete(base, diff)
        assert isinstance(result, Offset)
        assert result.base is base
        assert result.diff is diff

    def test_without_base_copies_diff_as_concrete(self):
        diff = Offset(base=Concrete(1.0, 2.0), diff=Concrete(3.0, 4.0))
        result = offset_or_concrete(None, diff)
        assert isinstance(result, Concrete)
        assert (result.width, result.height) == (4.0, 6.0)


# ── Shared operations ──────────────────────────────────────────────────────────


class TestMaxMin:
    def test_max_and_min(self):
        c = Concrete(3.0, 7.0)
        assert c.max() == 7.0
        assert c.min() == 3.0

    @pytest.mark.parametrize("c", [Concrete(NAN, 7.0), Concrete(7.0, NAN), UNKNOWN_SIZE])
    def test_unknown_propagates(self, c):
        assert math.isnan(c.max())
        assert math.isnan(c.min())

    def test_composed_expressions(self):
        o = Offset(base=Concrete(10.0, 2.0), diff=Concrete(1.0, 1.0))
        assert o.max() == 11.0
        assert o.min() == 3.0


class TestScale:
    def test_concrete(self):
        assert Concrete(5.0, 10.0).scale(2.0) == Concrete(10.0, 20.0)

    def test_collapses_blend_to_concrete(self):
        b = Blend(after=Concrete(10.0, 20.0), before=Concrete(0.0, 0.0), ratio=0.5)
        scaled = b.scale(2.0)
        assert type(scaled) is Concrete
        assert (scaled.width, scaled.height) == (10.0, 20.0)

    def test_collapses_offset_to_concrete(self):
        scaled = Offset(base=Concrete(1.0, 1.0), diff=Concrete(1.0, 2.0)).scale(3.0)
        assert type(scaled) is Concrete
        assert (scaled.width, scaled.height) == (6.0, 9.0)


class TestPerAndBlend:
    def test_per_is_identity(self):
        c = Concrete(1.0, 2.0)
        assert c.per() is c

    def test_blend_without_previous_is_identity(self):
        o = Offset(base=Concrete(1.0, 1.0), diff=Concrete(1.0, 1.0))
        assert o.blend(0.3, None) is o

    def test_blend_with_previous(self):
        current = Concrete(10.0, 20.0)
        previous = Concrete(0.0, 0.0)
        b = current.blend(0.25, previous)
        assert isinstance(b, Blend)
        assert b.after is current
        assert b.before is previous
        assert b.ratio == 0.25
        assert (b.width, b.height) == (2.5, 5.0)


# ── with_aspect ────────────────────────────────────────────────────────────────


class TestConcreteWithAspect:
    def test_no_available_returns_self(self):
        c = Concrete(NAN, 5.0)
        assert c.with_aspect(None) is c

    @pytest.mark.parametrize("available", [None, Concrete(400.0, 200.0), UNKNOWN_SIZE])
    def test_fully_valid_returns_self(self, available):
        c = Concrete(30.0, 90.0)
        assert c.with_aspect(available) is c

    def test_width_known_height_from_aspect(self, landscape):
        result = Concrete(100.0, NAN).with_aspect(landscape)
        assert (result.width, result.height) == (100.0, 50.0)

    def test_height_known_width_from_aspect(self, landscape):
        result = Concrete(NAN, 50.0).with_aspect(landscape)
        assert (result.width, result.height) == (100.0, 50.0)

    def test_neither_known_probes_unit_height(self, landscape):
        result = Concrete(NAN, NAN).with_aspect(landscape)
        assert (result.width, result.height) == (2.0, 1.0)

    def test_available_missing_needed_axis_raises(self):
        with pytest.raises(InvalidSizeError):
            Concrete(100.0, NAN).with_aspect(Concrete(400.0, NAN))


class TestComposedWithAspect:
    def test_blend_resolves_both_sides(self, landscape):
        b = Blend(after=Concrete(100.0, NAN), before=Concrete(NAN, 100.0), ratio=0.5)
        result = b.with_aspect(landscape)
        assert isinstance(result, Blend)
        assert result.ratio == 0.5
        assert (result.after.width, result.after.height) == (100.0, 50.0)
        assert (result.before.width, result.before.height) == (200.0, 100.0)
        assert (result.width, result.height) == (150.0, 75.0)

    def test_blend_keeps_original_untouched(self, landscape):
        after = Concrete(100.0, NAN)
        b = Blend(after=after, before=Concrete(1.0, 1.0), ratio=0.5)
        b.with_aspect(landscape)
        assert b.after is after

    def test_offset_resolves_diff_against_resolved_base(self, landscape):
        # base (?, 100) on 2:1 → (200, 100); diff (10, ?) on 200×100 → (10, 5)
        o = Offset(base=Concrete(NAN, 100.0), diff=Concrete(10.0, NAN))
        result = o.with_aspect(landscape)
        assert (result.width, result.height) == (10.0, 5.0)

    def test_offset_with_complete_diff_returns_diff(self, landscape):
        diff = Concrete(10.0, 20.0)
        o = Offset(base=Concrete(NAN, 100.0), diff=diff)
        assert o.with_aspect(landscape) is diff

    def test_offset_without_available(self):
        diff = Concrete(10.0, NAN)
        o = Offset(base=Concrete(4.0, 2.0), diff=diff)
        result = o.with_aspect(None)
        # base is complete, so the diff resolves against it
        assert (result.width, result.height) == (10.0, 5.0)


class TestSharing:
    def test_shared_leaf_in_several_parents(self):
        leaf = Concrete(10.0, 20.0)
        b = Blend(after=leaf, before=leaf, ratio=0.3)
        o = Offset(base=leaf, diff=leaf)
        assert (b.width, b.height) == pytest.approx((10.0, 20.0))
        assert (o.width, o.height) == (20.0, 40.0)
        assert leaf == Concrete(10.0, 20.0)

    def test_repr_shows_computed_size(self):
        b = Blend(after=Concrete(10.0, 20.0), before=Concrete(0.0, 0.0), ratio=0.5)
        assert "width=5.0" in repr(b)
        o = Offset(base=Concrete(1.0, 1.0), diff=Concrete(2.0, 2.0))
        assert "height=3.0" in repr(o)
