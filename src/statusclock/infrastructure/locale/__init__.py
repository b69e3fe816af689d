"""Locale collaborators backed by Babel's CLDR data."""

from statusclock.infrastructure.locale.babel_data import BabelLocaleData, StaticLocaleData
from statusclock.infrastructure.locale.date_formatter import BabelDateFormatter

__all__ = [
    "BabelDateFormatter",
    "BabelLocaleData",
    "StaticLocaleData",
]
