from .registry import SyntaxRegistry, get_registry
from .types import PropertyKey, PropertyKeyEntry

__all__ = [
    "PropertyKey",
    "PropertyKeyEntry",
    "SyntaxRegistry",
    "get_registry",
]
