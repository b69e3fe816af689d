"""Rich rendering helpers for clock render results."""

from __future__ import annotations

from rich.style import Style
from rich.text import Text

from statusclock.domain.types import Delete, RenderResult, Resize


def format_clock_text(
    result: RenderResult,
    small_style: str | Style = "dim",
    base_style: str | Style = "",
) -> Text:
    """
    Convert a RenderResult into Rich Text.

    Terminals cannot change glyph size, so runs resized below 1.0 are shown
    with ``small_style`` instead. Delete spans drop their run.
    """
    text = Text(result.text, style=base_style)
    for span in result.spans:
        if isinstance(span.action, Resize) and span.action.factor < 1:
            text.stylize(small_style, span.start, span.end)

    deletions = [span for span in result.spans if isinstance(span.action, Delete)]
    for span in sorted(deletions, key=lambda item: item.start, reverse=True):
        text = text[: span.start] + text[span.end :]
    return text


def format_clock_markup(result: RenderResult, small_style: str = "dim") -> str:
    """Return the Rich markup for a RenderResult."""
    return format_clock_text(result, small_style=small_style).markup
