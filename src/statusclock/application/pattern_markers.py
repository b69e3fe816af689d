"""AM/PM marker injection for time patterns.

To find the AM/PM run again after formatting, the pattern gets two reserved
private-use characters around its ``a`` field. They pass through the
formatter as literal text and never occur in locale output.
"""

from __future__ import annotations

__all__ = [
    "MARK_START",
    "MARK_END",
    "find_am_pm_field",
    "inject_am_pm_markers",
]

MARK_START = "\uef00"
MARK_END = "\uef01"

_QUOTE = "'"
_AM_PM_FIELD = "a"


def find_am_pm_field(pattern: str) -> int:
    """Return the index of the first unquoted ``a`` field, or -1.

    Quoting is tracked by parity: every apostrophe flips the quoted state,
    which also treats a doubled ``''`` literal as two flips.
    """
    quoted = False
    for index, char in enumerate(pattern):
        if char == _QUOTE:
            quoted = not quoted
        if not quoted and char == _AM_PM_FIELD:
            return index
    return -1


def inject_am_pm_markers(pattern: str) -> str:
    """Bracket the AM/PM field, and the whitespace before it, with markers.

    Patterns without an unquoted ``a`` are returned unchanged.

    >>> inject_am_pm_markers("h:mm a") == "h:mm" + MARK_START + " a" + MARK_END
    True
    """
    field_index = find_am_pm_field(pattern)
    if field_index < 0:
        return pattern

    start = field_index
    while start > 0 and pattern[start - 1].isspace():
        start -= 1

    return (
        pattern[:start]
        + MARK_START
        + pattern[start:field_index]
        + _AM_PM_FIELD
        + MARK_END
        + pattern[field_index + 1 :]
    )

