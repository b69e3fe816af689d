"""Display configuration for the status clock."""

from pydantic import BaseModel, ConfigDict, Field

from statusclock.domain.types import (
    AmPmEmphasis,
    ClockPlacement,
    DateCase,
    DatePosition,
    DateVisibility,
)

__all__ = ["DEFAULT_DATE_PATTERN", "DisplayConfig"]

DEFAULT_DATE_PATTERN = "EEE"


class DisplayConfig(BaseModel):
    """Display-mode settings, immutable for the duration of a tick."""

    hour24: bool = Field(False, description="24-hour clock if True, 12-hour otherwise")
    show_seconds: bool = Field(False, description="Whether to render seconds")
    am_pm_emphasis: AmPmEmphasis = AmPmEmphasis.NONE
    date_visibility: DateVisibility = DateVisibility.NONE
    date_case: DateCase = DateCase.AS_IS
    date_position: DatePosition = DatePosition.LEFT
    date_format_pattern: str = Field(
        DEFAULT_DATE_PATTERN, description="CLDR date pattern, empty means 'EEE'"
    )
    locale: str = Field("en_US", description="Locale tag such as 'en_US'")
    timezone: str | None = Field(None, description="IANA zone name, None for local time")
    show_clock: bool = True
    placement: ClockPlacement = ClockPlacement.RIGHT

    model_config = ConfigDict(frozen=True)

    @property
    def date_pattern(self) -> str:
        """The effective date pattern, falling back to ``EEE`` when unset."""
        return self.date_format_pattern or DEFAULT_DATE_PATTERN

    @property
    def visible(self) -> bool:
        """Whether the host should show this clock at all.

        Only the right-placed clock is drawn by this view; the other
        placements belong to differently positioned clock views.
        """
        return self.show_clock and self.placement is ClockPlacement.RIGHT

    @property
    def pattern_key(self) -> tuple[str, bool, bool, AmPmEmphasis]:
        """The inputs that determine the compiled time formatters."""
        return (self.locale, self.hour24, self.show_seconds, self.am_pm_emphasis)
