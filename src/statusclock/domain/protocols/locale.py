"""Locale collaborator protocols.

The core never derives locale data itself: skeleton patterns come from a
``LocaleData`` provider and free-form date segments from a ``DateFormatter``.
"""

from datetime import datetime
from typing import NamedTuple, Protocol

__all__ = ["TimeSkeletons", "LocaleData", "DateFormatter"]


class TimeSkeletons(NamedTuple):
    """The four base time patterns a locale supplies.

    Field names follow the skeleton ids: upper-case ``H`` is the 24-hour
    variant, lower-case ``h`` the 12-hour one.
    """

    Hms: str
    hms: str
    Hm: str
    hm: str

    def select(self, *, hour24: bool, show_seconds: bool) -> str:
        """Pick the base pattern for the given 12/24-hour and seconds mode."""
        if show_seconds:
            return self.Hms if hour24 else self.hms
        return self.Hm if hour24 else self.hm


class LocaleData(Protocol):
    """Provides base time patterns for a locale tag."""

    def skeletons(self, locale: str) -> TimeSkeletons:
        """Return the base time patterns for ``locale``.

        Args:
            locale: Locale tag such as ``en_US``

        Returns:
            The locale's Hms/hms/Hm/hm patterns
        """
        ...


class DateFormatter(Protocol):
    """Formats an instant with an arbitrary date pattern."""

    def format(self, instant: datetime, pattern: str, locale: str) -> str:
        """Render ``instant`` with ``pattern`` for ``locale``."""
        ...
