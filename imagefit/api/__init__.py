"""api: one-call display size resolution."""

from imagefit.api.resolve import resolve_display_size

__all__ = ["resolve_display_size"]
