"""
Size expression schema: public API.

Exposed names
-------------
SizeExpression      -- common base of the three variants
Concrete            -- leaf width/height pair
Blend               -- linear blend between two size states
Offset              -- diff added on top of a base size
DEFAULT_SIZE        -- Concrete(1, 1)
UNKNOWN_SIZE        -- Concrete(UNKNOWN, UNKNOWN)
size_of             -- Concrete factory
offset_or_concrete  -- Offset over a base, or a Concrete copy without one
"""

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

__all__ = [
    "SizeExpression",
    "Concrete",
    "Blend",
    "Offset",
    "DEFAULT_SIZE",
    "UNKNOWN_SIZE",
    "size_of",
    "offset_or_concrete",
]
