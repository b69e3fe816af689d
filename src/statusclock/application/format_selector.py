"""Format selection: picks the locale time pattern and compiles its formatters.

The selector owns a single-entry cache keyed on everything that shapes the
pattern: locale, 12/24-hour mode, seconds visibility and AM/PM emphasis.
Resolving with an unchanged key hands back the very same compiled
formatters; any change recompiles.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from datetime import datetime

from babel import Locale
from babel.dates import DateTimePattern, parse_pattern

from statusclock.application.pattern_markers import inject_am_pm_markers
from statusclock.domain.config import DisplayConfig
from statusclock.domain.protocols import LocaleData
from statusclock.domain.types import AmPmEmphasis
from statusclock.infrastructure.cache import FormatCache
from statusclock.infrastructure.locale import BabelLocaleData
from statusclock.logger import get_logger

logger = get_logger("format_selector")

PatternKey = tuple[str, bool, bool, AmPmEmphasis]


@dataclass(frozen=True, slots=True)
class CompiledFormat:
    """A compiled time pattern bound to its locale."""

    pattern: str
    locale: Locale
    compiled: DateTimePattern

    def format(self, instant: datetime) -> str:
        return self.compiled.apply(instant, self.locale)


@dataclass(frozen=True, slots=True)
class ResolvedFormat:
    """Result of a pattern resolution.

    Attributes:
        pattern: Display pattern, carrying AM/PM markers when emphasis applies
        accessibility_pattern: The locale's base pattern, unmodified
        display: Compiled formatter for ``pattern``
        accessibility: Compiled formatter for ``accessibility_pattern``
    """

    pattern: str
    accessibility_pattern: str
    display: CompiledFormat
    accessibility: CompiledFormat


class FormatSelector:
    """Resolves and caches the time formatters for one display surface.

    Not thread-safe: a selector belongs to the single thread driving its
    ticks.
    """

    def __init__(
        self,
        locale_data: LocaleData | None = None,
        compile_pattern: Callable[[str], DateTimePattern] = parse_pattern,
    ) -> None:
        """
        Args:
            locale_data: Provider of base time patterns (Babel/CLDR by default)
            compile_pattern: Pattern compiler; raises on malformed patterns
        """
        self._locale_data = locale_data or BabelLocaleData()
        self._compile_pattern = compile_pattern
        self._cache: FormatCache[PatternKey, ResolvedFormat] = FormatCache()

    @property
    def cached_key(self) -> PatternKey | None:
        return self._cache.last_key

    def invalidate(self) -> None:
        """Drop the cached formatters, e.g. after a locale change notification."""
        if self._cache.last_key is not None:
            logger.debug(f"Invalidating cached formatters for {self._cache.last_key}")
        self._cache.clear()

    def resolve(self, config: DisplayConfig) -> ResolvedFormat:
        """Resolve the formatters for ``config``."""
        return self.resolve_pattern(*config.pattern_key)

    def resolve_pattern(
        self,
        locale: str,
        hour24: bool,
        show_seconds: bool,
        am_pm_emphasis: AmPmEmphasis,
    ) -> ResolvedFormat:
        """
        Select the locale's base pattern and compile display and accessibility formatters.

        Args:
            locale: Locale tag such as ``en_US``
            hour24: 24-hour clock if True
            show_seconds: Whether the pattern includes seconds
            am_pm_emphasis: AM/PM emphasis; anything but NORMAL gets markers injected

        Returns:
            ResolvedFormat, served from cache when the inputs are unchanged

        Raises:
            ValueError: If a pattern cannot be compiled
            babel.UnknownLocaleError: If the locale tag is unknown
        """
        key: PatternKey = (locale, hour24, show_seconds, am_pm_emphasis)
        cached = self._cache.get(key)
        if cached is not None:
            return cached

        base = self._locale_data.skeletons(locale).select(
            hour24=hour24, show_seconds=show_seconds
        )
        pattern = base
        if am_pm_emphasis is not AmPmEmphasis.NORMAL:
            pattern = inject_am_pm_markers(base)

        parsed_locale = Locale.parse(locale)
        resolved = ResolvedFormat(
            pattern=pattern,
            accessibility_pattern=base,
            display=CompiledFormat(pattern, parsed_locale, self._compile_pattern(pattern)),
            accessibility=CompiledFormat(base, parsed_locale, self._compile_pattern(base)),
        )
        logger.debug(f"Compiled time formatters for {key}: {base!r}")
        self._cache.set(key, resolved)
        return resolved
