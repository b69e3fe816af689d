"""Segment composition: joins time and date runs and places emphasis spans.

Composition works on a small span-tracking buffer. Structural deletions
(markers, a stripped AM/PM run) shift spans that were placed earlier, so the
offsets handed back always index the final text.
"""

from __future__ import annotations

from collections.abc import Callable
from datetime import datetime

from statusclock.application.format_selector import ResolvedFormat
from statusclock.application.pattern_markers import MARK_END, MARK_START
from statusclock.domain.config import DisplayConfig
from statusclock.domain.protocols import DateFormatter
from statusclock.domain.types import (
    SMALL_FACTOR,
    AmPmEmphasis,
    DateCase,
    DatePosition,
    DateVisibility,
    RenderResult,
    Resize,
    Span,
    SpanAction,
    SpanKind,
)
from statusclock.infrastructure.locale import BabelDateFormatter

SEPARATOR = " "

_CASE_TRANSFORMS: dict[DateCase, Callable[[str], str]] = {
    DateCase.AS_IS: lambda value: value,
    DateCase.LOWER: str.lower,
    DateCase.UPPER: str.upper,
}


class _SpanBuffer:
    """Mutable text with spans that follow deletions."""

    def __init__(self, text: str) -> None:
        self.text = text
        self._spans: list[Span] = []

    def add_span(self, kind: SpanKind, start: int, end: int, action: SpanAction) -> None:
        self._spans.append(Span(kind, start, end, action))

    def delete(self, start: int, end: int) -> None:
        """Remove ``text[start:end]``, collapsing or shifting affected spans."""
        removed = end - start
        if removed <= 0:
            return

        def shift(offset: int) -> int:
            if offset <= start:
                return offset
            if offset < end:
                return start
            return offset - removed

        self.text = self.text[:start] + self.text[end:]
        self._spans = [
            Span(span.kind, shift(span.start), shift(span.end), span.action)
            for span in self._spans
        ]

    def spans(self) -> tuple[Span, ...]:
        return tuple(sorted(self._spans, key=lambda span: span.start))


class SegmentComposer:
    """Renders one tick's display text, spans and accessibility text."""

    def __init__(self, date_formatter: DateFormatter | None = None) -> None:
        self._date_formatter = date_formatter or BabelDateFormatter()

    def render(
        self,
        instant: datetime,
        resolved: ResolvedFormat,
        config: DisplayConfig,
    ) -> RenderResult:
        """
        Compose the display text for ``instant``.

        Args:
            instant: The instant to render, already in the display timezone
            resolved: Formatters from the FormatSelector for ``config``
            config: Display settings for this tick

        Returns:
            RenderResult whose span offsets reference the returned text
        """
        time_text = resolved.display.format(instant)
        accessibility_text = resolved.accessibility.format(instant)

        buffer = self._compose_date(instant, time_text, config)
        self._apply_am_pm(buffer, config.am_pm_emphasis)

        return RenderResult(
            text=buffer.text,
            spans=buffer.spans(),
            accessibility_text=accessibility_text,
        )

    def format_date(self, instant: datetime, config: DisplayConfig) -> str:
        """Render and case-transform the date segment."""
        date_text = self._date_formatter.format(instant, config.date_pattern, config.locale)
        return _CASE_TRANSFORMS[config.date_case](date_text)

    def _compose_date(
        self, instant: datetime, time_text: str, config: DisplayConfig
    ) -> _SpanBuffer:
        visibility = config.date_visibility
        if visibility is DateVisibility.NONE:
            # No date run at all, so nothing reserves width for it
            return _SpanBuffer(time_text)

        date_text = self.format_date(instant, config)
        if config.date_position is DatePosition.LEFT:
            buffer = _SpanBuffer(date_text + SEPARATOR + time_text)
            date_start = 0
        elif config.date_position is DatePosition.RIGHT:
            buffer = _SpanBuffer(time_text + SEPARATOR + date_text)
            date_start = len(time_text) + len(SEPARATOR)
        else:
            raise ValueError(f"Unsupported date position: {config.date_position}")

        if visibility is DateVisibility.SMALL:
            buffer.add_span(
                SpanKind.DATE_EMPHASIS,
                date_start,
                date_start + len(date_text),
                Resize(SMALL_FACTOR),
            )
        elif visibility is not DateVisibility.NORMAL:
            raise ValueError(f"Unsupported date visibility: {visibility}")
        return buffer

    @staticmethod
    def _apply_am_pm(buffer: _SpanBuffer, emphasis: AmPmEmphasis) -> None:
        start = buffer.text.find(MARK_START)
        end = buffer.text.find(MARK_END)
        if start < 0 or end <= start:
            return

        if emphasis is AmPmEmphasis.NONE:
            buffer.delete(start, end + 1)
            return

        if emphasis is AmPmEmphasis.SMALL:
            buffer.add_span(SpanKind.AM_PM_EMPHASIS, start + 1, end, Resize(SMALL_FACTOR))
        elif emphasis is not AmPmEmphasis.NORMAL:
            raise ValueError(f"Unsupported AM/PM emphasis: {emphasis}")
        # Markers are scaffolding only
        buffer.delete(end, end + 1)
        buffer.delete(start, start + 1)
