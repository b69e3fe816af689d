"""Display-mode enums for the status clock."""

from enum import Enum

__all__ = [
    "AmPmEmphasis",
    "DateVisibility",
    "DateCase",
    "DatePosition",
    "ClockPlacement",
]


class AmPmEmphasis(Enum):
    """How the AM/PM run of the time is rendered.

    NONE strips the token (and the whitespace before it) from the text,
    SMALL renders it at a reduced size and NORMAL leaves it untouched.
    """

    NONE = "none"
    SMALL = "small"
    NORMAL = "normal"


class DateVisibility(Enum):
    """Whether the date segment is shown, and at which size."""

    NONE = "none"
    SMALL = "small"
    NORMAL = "normal"


class DateCase(Enum):
    """Case transform applied to the rendered date segment."""

    AS_IS = "as_is"
    LOWER = "lower"
    UPPER = "upper"


class DatePosition(Enum):
    """Side of the time on which the date segment is placed."""

    LEFT = "left"
    RIGHT = "right"


class ClockPlacement(Enum):
    """Where the host places the clock in the status bar."""

    RIGHT = "right"
    CENTER = "center"
    LEFT = "left"
