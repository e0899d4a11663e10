"""strategy: aspect-fitting policies and the define-size combinator."""

from imagefit.strategy.strategies import InvalidSizeError, SizingStrategy

__all__ = ["InvalidSizeError", "SizingStrategy"]
