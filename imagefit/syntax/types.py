"""
Vocabulary for the property-key syntax table.

PropertyKey enumerates the keys a property parser can own; PropertyKeyEntry
is the frozen row loaded from property_keys.yaml.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class PropertyKey(str, Enum):
    """Logical property keys, independent of their token spelling."""

    SIZE_WIDTH = "SIZE_WIDTH"
    SIZE_HEIGHT = "SIZE_HEIGHT"


@dataclass(frozen=True)
class PropertyKeyEntry:
    id: PropertyKey
    key: str
    description: str = ""
