"""Locale data providers for base time patterns."""

from __future__ import annotations

from collections.abc import Mapping

from babel import Locale

from statusclock.domain.protocols import TimeSkeletons
from statusclock.logger import get_logger

logger = get_logger("locale_data")

_SKELETON_IDS = ("Hms", "hms", "Hm", "hm")


class BabelLocaleData:
    """Reads the Hms/hms/Hm/hm patterns from CLDR through Babel.

    Unknown locale tags raise ``babel.UnknownLocaleError``; the error is left
    to the caller since no sensible pattern can be guessed.
    """

    def __init__(self) -> None:
        self._resolved: dict[str, TimeSkeletons] = {}

    def skeletons(self, locale: str) -> TimeSkeletons:
        cached = self._resolved.get(locale)
        if cached is not None:
            return cached

        parsed = Locale.parse(locale)
        available = parsed.datetime_skeletons
        patterns = TimeSkeletons(*(available[skeleton].pattern for skeleton in _SKELETON_IDS))
        logger.debug(f"Loaded time skeletons for {locale}: {patterns}")
        self._resolved[locale] = patterns
        return patterns


class StaticLocaleData:
    """Serves fixed patterns, keyed by locale tag.

    Useful when the host already knows its patterns, and in tests. A
    ``default`` entry is used for tags that are not listed.
    """

    def __init__(
        self,
        patterns: Mapping[str, TimeSkeletons] | None = None,
        default: TimeSkeletons | None = None,
    ) -> None:
        self._patterns = dict(patterns or {})
        self._default = default

    def skeletons(self, locale: str) -> TimeSkeletons:
        found = self._patterns.get(locale, self._default)
        if found is None:
            raise KeyError(f"No time patterns configured for locale '{locale}'")
        return found
