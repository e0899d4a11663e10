"""
Public size resolution API.

resolve_display_size() runs the whole pipeline a renderer needs in one call:

    SizeProperty ─diff(base)─▶ expression ─blend(ratio, previous)─▶
    ─with_aspect(natural)─▶ aspect-complete ─define_size_between(bounds)─▶ fitted

The result is a SizeExpression whose width and height are final layout
dimensions (UNKNOWN only where no input could define them).
"""

from __future__ import annotations

from imagefit.property.size_property import SizeProperty
from imagefit.schemas.size import SizeExpression
from imagefit.strategy.strategies import SizingStrategy


def resolve_display_size(
    prop: SizeProperty,
    natural: SizeExpression | None,
    bounds: SizeExpression | None,
    strategy: SizingStrategy = SizingStrategy.INNER,
    base: SizeExpression | None = None,
    previous: SizeExpression | None = None,
    ratio: float = 1.0,
) -> SizeExpression:
    """
    Resolve the size an image should be drawn at.

    Parameters
    ----------
    prop:
        The parsed size property (width and/or height may be UNKNOWN).
    natural:
        The image's own size; supplies the aspect ratio for UNKNOWN axes.
        None leaves UNKNOWN axes for *bounds* to fill.
    bounds:
        Container or canvas size the result is fitted against.
    strategy:
        Fitting policy; defaults to INNER.
    base:
        Size the property is an offset of, if any.
    previous:
        Previous size state for animated transitions, if any.
    ratio:
        Blend ratio towards the new state (1.0 = fully new).

    Returns
    -------
    SizeExpression
        Fitted size.  If *bounds* is None the aspect-complete size is
        returned as-is.

    Raises
    ------
    InvalidSizeError
        If an axis stays undefined in both the requested size and *bounds*.
    """
    requested = prop.diff(base).blend(ratio, previous)
    return strategy.define_size_between(requested.with_aspect(natural), bounds)
