"""Shared fixtures for statusclock tests."""

from datetime import datetime, timezone

import pytest

from statusclock.application import FormatSelector, SegmentComposer
from statusclock.domain.protocols import TimeSkeletons
from statusclock.infrastructure.locale import StaticLocaleData

EN_SKELETONS = TimeSkeletons(Hms="HH:mm:ss", hms="h:mm:ss a", Hm="HH:mm", hm="h:mm a")


class FixedDateFormatter:
    """Date formatter returning a canned value and recording calls."""

    def __init__(self, value: str = "Wed"):
        self.value = value
        self.calls: list[tuple[datetime, str, str]] = []

    def format(self, instant: datetime, pattern: str, locale: str) -> str:
        self.calls.append((instant, pattern, locale))
        return self.value


class CountingCompiler:
    """Wraps Babel's pattern compiler and counts compilations."""

    def __init__(self):
        from babel.dates import parse_pattern

        self._parse = parse_pattern
        self.patterns: list[str] = []

    def __call__(self, pattern: str):
        self.patterns.append(pattern)
        return self._parse(pattern)

    @property
    def count(self) -> int:
        return len(self.patterns)


@pytest.fixture
def locale_data() -> StaticLocaleData:
    return StaticLocaleData({"en_US": EN_SKELETONS, "en_GB": EN_SKELETONS})


@pytest.fixture
def compiler() -> CountingCompiler:
    return CountingCompiler()


@pytest.fixture
def selector(locale_data, compiler) -> FormatSelector:
    return FormatSelector(locale_data=locale_data, compile_pattern=compiler)


@pytest.fixture
def composer() -> SegmentComposer:
    return SegmentComposer()


@pytest.fixture
def instant() -> datetime:
    """Wednesday 2024-01-10, 15:04:05 UTC."""
    return datetime(2024, 1, 10, 15, 4, 5, tzinfo=timezone.utc)
