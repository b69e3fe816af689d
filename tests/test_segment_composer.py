"""Tests for SegmentComposer text composition and span placement."""

import itertools

import pytest

from statusclock.application import FormatSelector, SegmentComposer
from statusclock.application.pattern_markers import MARK_END, MARK_START
from statusclock.domain.config import DisplayConfig
from statusclock.domain.protocols import TimeSkeletons
from statusclock.domain.types import (
    SMALL_FACTOR,
    AmPmEmphasis,
    DateCase,
    DatePosition,
    DateVisibility,
    Resize,
    SpanKind,
)
from statusclock.infrastructure.locale import StaticLocaleData

from tests.conftest import FixedDateFormatter


def _render(selector, composer, instant, **settings):
    config = DisplayConfig(**settings)
    return composer.render(instant, selector.resolve(config), config)


class TestTimeOnly:
    """Tests for renders without a date segment."""

    def test_normal_am_pm_without_date_has_no_spans(self, selector, composer, instant):
        result = _render(selector, composer, instant, am_pm_emphasis=AmPmEmphasis.NORMAL)
        assert result.text == "3:04 PM"
        assert result.accessibility_text == "3:04 PM"
        assert result.spans == ()

    def test_hidden_am_pm_is_stripped_with_its_whitespace(self, selector, composer, instant):
        result = _render(selector, composer, instant, am_pm_emphasis=AmPmEmphasis.NONE)
        assert result.text == "3:04"
        assert result.accessibility_text == "3:04 PM"
        assert result.spans == ()

    def test_small_am_pm_span_covers_space_and_token(self, selector, composer, instant):
        result = _render(selector, composer, instant, am_pm_emphasis=AmPmEmphasis.SMALL)
        assert result.text == "3:04 PM"

        span = result.span_for(SpanKind.AM_PM_EMPHASIS)
        assert (span.start, span.end) == (4, 7)
        assert result.run(span) == " PM"
        assert span.action == Resize(SMALL_FACTOR)

    def test_seconds(self, selector, composer, instant):
        result = _render(
            selector, composer, instant, show_seconds=True, am_pm_emphasis=AmPmEmphasis.NORMAL
        )
        assert result.text == "3:04:05 PM"

    def test_24_hour_emphasis_has_no_effect(self, selector, composer, instant):
        for emphasis in AmPmEmphasis:
            result = _render(selector, composer, instant, hour24=True, am_pm_emphasis=emphasis)
            assert result.text == "15:04"
            assert result.spans == ()

    def test_morning(self, selector, composer, instant):
        morning = instant.replace(hour=9)
        result = _render(selector, composer, morning, am_pm_emphasis=AmPmEmphasis.SMALL)
        assert result.text == "9:04 AM"


class TestDateSegment:
    """Tests for date composition, ordering and case."""

    def test_date_left(self, selector, composer, instant):
        result = _render(
            selector, composer, instant, date_visibility=DateVisibility.NORMAL
        )
        assert result.text == "Wed 3:04"
        assert result.spans == ()

    def test_date_right(self, selector, composer, instant):
        result = _render(
            selector,
            composer,
            instant,
            date_visibility=DateVisibility.NORMAL,
            date_position=DatePosition.RIGHT,
        )
        assert result.text == "3:04 Wed"

    def test_hidden_date_equals_time_only_render(self, selector, composer, instant):
        with_hidden_date = _render(
            selector,
            composer,
            instant,
            date_visibility=DateVisibility.NONE,
            date_position=DatePosition.RIGHT,
            date_case=DateCase.UPPER,
        )
        time_only = _render(selector, composer, instant)
        assert with_hidden_date == time_only
        assert "Wed" not in with_hidden_date.text
        assert not with_hidden_date.text.endswith(" ")

    def test_hidden_date_skips_date_formatter(self, selector, instant):
        formatter = FixedDateFormatter()
        composer = SegmentComposer(formatter)
        _render(selector, composer, instant, date_visibility=DateVisibility.NONE)
        assert formatter.calls == []

    def test_small_date_span(self, selector, composer, instant):
        result = _render(selector, composer, instant, date_visibility=DateVisibility.SMALL)
        span = result.span_for(SpanKind.DATE_EMPHASIS)
        assert result.run(span) == "Wed"
        assert span.action == Resize(SMALL_FACTOR)

    @pytest.mark.parametrize(
        ("date_case", "expected"),
        [(DateCase.AS_IS, "wed"), (DateCase.LOWER, "wed"), (DateCase.UPPER, "WED")],
    )
    def test_case_transform_keeps_offsets(self, selector, instant, date_case, expected):
        composer = SegmentComposer(FixedDateFormatter("wed"))
        result = _render(
            selector,
            composer,
            instant,
            date_visibility=DateVisibility.SMALL,
            date_position=DatePosition.RIGHT,
            date_case=date_case,
        )
        span = result.span_for(SpanKind.DATE_EMPHASIS)
        assert (span.start, span.end) == (5, 8)
        assert result.text == f"3:04 {expected}"

    def test_lower_case(self, selector, composer, instant):
        result = _render(
            selector,
            composer,
            instant,
            date_visibility=DateVisibility.NORMAL,
            date_case=DateCase.LOWER,
        )
        assert result.text == "wed 3:04"

    def test_empty_date_pattern_defaults_to_short_weekday(self, selector, composer, instant):
        default = _render(
            selector, composer, instant, date_visibility=DateVisibility.NORMAL, date_format_pattern=""
        )
        explicit = _render(
            selector, composer, instant, date_visibility=DateVisibility.NORMAL, date_format_pattern="EEE"
        )
        assert default == explicit

    def test_custom_date_pattern(self, selector, composer, instant):
        result = _render(
            selector,
            composer,
            instant,
            date_visibility=DateVisibility.NORMAL,
            date_format_pattern="d MMM",
        )
        assert result.text == "10 Jan 3:04"

    def test_date_formatter_receives_locale_and_pattern(self, selector, instant):
        formatter = FixedDateFormatter()
        composer = SegmentComposer(formatter)
        _render(selector, composer, instant, date_visibility=DateVisibility.NORMAL, date_format_pattern="")
        assert formatter.calls == [(instant, "EEE", "en_US")]


class TestCombinedEmphasis:
    """Tests where date and AM/PM runs interact."""

    def test_hidden_am_pm_does_not_shift_small_date_right(self, selector, composer, instant):
        result = _render(
            selector,
            composer,
            instant,
            am_pm_emphasis=AmPmEmphasis.NONE,
            date_visibility=DateVisibility.SMALL,
            date_position=DatePosition.RIGHT,
        )
        assert result.text == "3:04 Wed"
        span = result.span_for(SpanKind.DATE_EMPHASIS)
        assert (span.start, span.end) == (5, 8)
        assert result.span_for(SpanKind.AM_PM_EMPHASIS) is None

    def test_both_small_date_right(self, selector, composer, instant):
        result = _render(
            selector,
            composer,
            instant,
            am_pm_emphasis=AmPmEmphasis.SMALL,
            date_visibility=DateVisibility.SMALL,
            date_position=DatePosition.RIGHT,
        )
        assert result.text == "3:04 PM Wed"
        am_pm = result.span_for(SpanKind.AM_PM_EMPHASIS)
        date = result.span_for(SpanKind.DATE_EMPHASIS)
        assert result.run(am_pm) == " PM"
        assert result.run(date) == "Wed"
        assert [span.kind for span in result.spans] == [
            SpanKind.AM_PM_EMPHASIS,
            SpanKind.DATE_EMPHASIS,
        ]

    def test_both_small_date_left(self, selector, composer, instant):
        result = _render(
            selector,
            composer,
            instant,
            am_pm_emphasis=AmPmEmphasis.SMALL,
            date_visibility=DateVisibility.SMALL,
        )
        assert result.text == "Wed 3:04 PM"
        assert result.run(result.span_for(SpanKind.DATE_EMPHASIS)) == "Wed"
        assert result.run(result.span_for(SpanKind.AM_PM_EMPHASIS)) == " PM"


def test_every_setting_combination_is_marker_free(selector, composer, instant):
    """All 108 enum combinations render clean text with valid, consistent spans."""
    for emphasis, visibility, case, position, hour24 in itertools.product(
        AmPmEmphasis, DateVisibility, DateCase, DatePosition, (False, True)
    ):
        result = _render(
            selector,
            composer,
            instant,
            hour24=hour24,
            am_pm_emphasis=emphasis,
            date_visibility=visibility,
            date_case=case,
            date_position=position,
        )
        assert MARK_START not in result.text and MARK_END not in result.text
        assert MARK_START not in result.accessibility_text

        kinds = [span.kind for span in result.spans]
        assert len(kinds) == len(set(kinds))
        for span in result.spans:
            assert 0 <= span.start <= span.end <= len(result.text)

        date_span = result.span_for(SpanKind.DATE_EMPHASIS)
        assert (date_span is not None) == (visibility is DateVisibility.SMALL)
        if date_span is not None:
            assert result.run(date_span).lower() == "wed"

        am_pm_span = result.span_for(SpanKind.AM_PM_EMPHASIS)
        expects_am_pm = emphasis is AmPmEmphasis.SMALL and not hour24
        assert (am_pm_span is not None) == expects_am_pm
        if am_pm_span is not None:
            assert result.run(am_pm_span) == " PM"

        if emphasis is AmPmEmphasis.NONE:
            assert "PM" not in result.text


def test_markers_from_a_supplied_pattern_are_removed_for_normal(composer, instant):
    """A pattern that already carries markers never leaks them into the text."""
    marked = TimeSkeletons(
        Hms="HH:mm:ss",
        hms="h:mm:ss a",
        Hm="HH:mm",
        hm=f"h:mm{MARK_START} a{MARK_END}",
    )
    selector = FormatSelector(StaticLocaleData(default=marked))
    result = _render(selector, composer, instant, am_pm_emphasis=AmPmEmphasis.NORMAL)
    assert result.text == "3:04 PM"
    assert result.spans == ()
