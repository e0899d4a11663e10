"""property: parse-driven size property."""

from imagefit.property.size_property import MetaProperty, SizeProperty

__all__ = ["MetaProperty", "SizeProperty"]
