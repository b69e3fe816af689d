"""statusclock - locale-aware status-bar clock formatting.

Given an instant, a locale and display settings, produces display text with
emphasis spans for the date and AM/PM runs, plus an accessibility string.
"""

from statusclock.application import (
    FormatSelector,
    SegmentComposer,
    StatusClock,
    config_from_tuning,
    load_display_config,
)
from statusclock.domain.config import DisplayConfig
from statusclock.domain.types import (
    AmPmEmphasis,
    ClockPlacement,
    DateCase,
    DatePosition,
    DateVisibility,
    Delete,
    RenderResult,
    Resize,
    Span,
    SpanKind,
)

__version__ = "0.1.0"

__all__ = [
    "AmPmEmphasis",
    "ClockPlacement",
    "DateCase",
    "DatePosition",
    "DateVisibility",
    "Delete",
    "DisplayConfig",
    "FormatSelector",
    "RenderResult",
    "Resize",
    "SegmentComposer",
    "Span",
    "SpanKind",
    "StatusClock",
    "config_from_tuning",
    "load_display_config",
]
