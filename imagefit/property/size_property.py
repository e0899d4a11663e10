"""
SizeProperty: the mutable, parse-driven builder of a width/height pair.

An external key/value parser feeds tokens into SizeProperty.parse(); the
property accumulates width and height, and flags the first key it does not
own.  Once parsing is done the property emits SizeExpression values via
diff().

SizeProperty is not thread-safe: it belongs to a single owner while it is
being parsed.  The expressions it emits are immutable copies and never alias
the property.

MetaProperty is a @runtime_checkable Protocol describing any property that
takes part in the key/value dispatch loop, so dispatchers and tests can treat
properties uniformly.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any, Protocol, runtime_checkable

from imagefit.schemas.size import Concrete, SizeExpression, offset_or_concrete
from imagefit.syntax import PropertyKey, get_registry
from imagefit.utilities.dimension import UNKNOWN, parse_dimension

logger = logging.getLogger(__name__)


@runtime_checkable
class MetaProperty(Protocol):
    """Protocol for properties driven by the key/value dispatch loop."""

    def parse(self, source: str, key: str, value: str) -> bool: ...

    def is_resolved(self) -> bool: ...

    def data(self) -> Any: ...


def _width_token() -> str:
    return get_registry().token(PropertyKey.SIZE_WIDTH)


def _height_token() -> str:
    return get_registry().token(PropertyKey.SIZE_HEIGHT)


def _to_dimension(value: float | str | None) -> float:
    if value is None or isinstance(value, str):
        return parse_dimension(value)
    return float(value)


@dataclass
class SizeProperty:
    """
    A width/height pair under construction.

    Attributes:
        width: Width, or UNKNOWN until set.
        height: Height, or UNKNOWN until set.
        width_key: Token that addresses the width in parse().
        height_key: Token that addresses the height in parse().
    """

    width: float = UNKNOWN
    height: float = UNKNOWN
    width_key: str = field(default_factory=_width_token)
    height_key: str = field(default_factory=_height_token)
    _saw_unrecognized_key: bool = field(default=False, init=False, repr=False)

    # ── Setters ────────────────────────────────────────────────────────────────

    def set_width(self, value: float | str | None) -> SizeProperty:
        """Set the width.  Strings are parsed; malformed ones become UNKNOWN."""
        self.width = _to_dimension(value)
        return self

    def set_height(self, value: float | str | None) -> SizeProperty:
        """Set the height.  Strings are parsed; malformed ones become UNKNOWN."""
        self.height = _to_dimension(value)
        return self

    def set_size(self, width: float | str | None, height: float | str | None) -> SizeProperty:
        return self.set_width(width).set_height(height)

    def set_size_from(self, other: SizeProperty | SizeExpression) -> SizeProperty:
        """Copy the width and height of another property or a resolved expression."""
        return self.set_size(other.width, other.height)

    # ── Emission ───────────────────────────────────────────────────────────────

    def diff(self, base: SizeExpression | None = None) -> SizeExpression:
        """
        This property as an expression: an Offset over *base* when given,
        otherwise a plain Concrete.
        """
        return offset_or_concrete(base, Concrete(self.width, self.height))

    # ── MetaProperty ───────────────────────────────────────────────────────────

    def parse(self, source: str, key: str, value: str) -> bool:
        """
        Consume one key/value token pair.

        Returns True if *key* is the width or height token.  Any other key
        marks the property as unresolved for good and returns False, which
        tells the dispatch loop to hand the key to another property.
        """
        if key == self.width_key:
            self.set_width(value)
            return True
        if key == self.height_key:
            self.set_height(value)
            return True
        logger.debug("SizeProperty does not own key %r in %r", key, source)
        self._saw_unrecognized_key = True
        return False

    def is_resolved(self) -> bool:
        """True until the first unrecognized key is seen; never resets."""
        return not self._saw_unrecognized_key

    def data(self) -> SizeProperty:
        return self
