"""Render output types: emphasis spans and the per-tick result."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum

__all__ = [
    "SMALL_FACTOR",
    "SpanKind",
    "Resize",
    "Delete",
    "SpanAction",
    "Span",
    "RenderResult",
]

# Relative size used for SMALL date and AM/PM runs
SMALL_FACTOR = 0.7


class SpanKind(Enum):
    """Which run of the text a span locates."""

    DATE_EMPHASIS = "date_emphasis"
    AM_PM_EMPHASIS = "am_pm_emphasis"


@dataclass(frozen=True, slots=True)
class Resize:
    """Render the covered run at ``factor`` times the base size."""

    factor: float


@dataclass(frozen=True, slots=True)
class Delete:
    """Drop the covered run when rendering."""


SpanAction = Resize | Delete


@dataclass(frozen=True, slots=True)
class Span:
    """An emphasis descriptor over ``text[start:end]`` of a RenderResult."""

    kind: SpanKind
    start: int
    end: int
    action: SpanAction

    def __post_init__(self) -> None:
        if self.start < 0 or self.end < self.start:
            raise ValueError(f"Invalid span offsets: [{self.start}, {self.end})")


@dataclass(frozen=True, slots=True)
class RenderResult:
    """Output of one tick.

    Attributes:
        text: Final display text, free of marker characters
        spans: Emphasis spans whose offsets index ``text`` as returned
        accessibility_text: Plain description rendered from the unmodified pattern
    """

    text: str
    spans: tuple[Span, ...] = field(default_factory=tuple)
    accessibility_text: str = ""

    def span_for(self, kind: SpanKind) -> Span | None:
        """Return the span of the given kind, if one was emitted."""
        for span in self.spans:
            if span.kind is kind:
                return span
        return None

    def run(self, span: Span) -> str:
        """Return the slice of ``text`` covered by ``span``."""
        return self.text[span.start : span.end]
