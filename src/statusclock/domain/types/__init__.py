"""Shared domain types."""

from statusclock.domain.types.display import (
    AmPmEmphasis,
    ClockPlacement,
    DateCase,
    DatePosition,
    DateVisibility,
)
from statusclock.domain.types.rendering import (
    SMALL_FACTOR,
    Delete,
    RenderResult,
    Resize,
    Span,
    SpanAction,
    SpanKind,
)

__all__ = [
    "AmPmEmphasis",
    "ClockPlacement",
    "DateCase",
    "DatePosition",
    "DateVisibility",
    "SMALL_FACTOR",
    "Delete",
    "RenderResult",
    "Resize",
    "Span",
    "SpanAction",
    "SpanKind",
]
