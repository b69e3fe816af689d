"""Date segment formatting through Babel."""

from datetime import datetime

from babel.dates import format_datetime


class BabelDateFormatter:
    """Formats an instant with a CLDR date pattern such as ``EEE`` or ``d MMM``.

    Malformed patterns raise ``ValueError`` from Babel.
    """

    def format(self, instant: datetime, pattern: str, locale: str) -> str:
        return format_datetime(instant, format=pattern, locale=locale)
