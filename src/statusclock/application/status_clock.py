"""The status clock engine: one render per tick.

The host drives ticks (a timer, a time-change notification, a settings
change) and calls ``render``. Attachment, scheduling and persistence stay
with the host; this class only keeps the state a clock needs between ticks:
the current settings, the display timezone and the optional demo instant.
"""

from __future__ import annotations

from collections.abc import Callable, Mapping
from datetime import datetime, timedelta, timezone as dt_timezone, tzinfo
from zoneinfo import ZoneInfo

from statusclock.application.format_selector import FormatSelector
from statusclock.application.segment_composer import SegmentComposer
from statusclock.domain.config import DisplayConfig
from statusclock.domain.types import RenderResult
from statusclock.logger import get_logger

logger = get_logger("status_clock")

DEMO_ENTER = "enter"
DEMO_EXIT = "exit"
DEMO_CLOCK = "clock"


def resolve_timezone(name: str | None) -> tzinfo | None:
    """Return the zone for an IANA name, or None for the system local zone."""
    if not name:
        return None
    return ZoneInfo(name)


def _system_now(tz: tzinfo | None) -> datetime:
    if tz is None:
        return datetime.now().astimezone()
    return datetime.now(tz)


class StatusClock:
    """Drives the format selector and segment composer for one display surface."""

    def __init__(
        self,
        config: DisplayConfig | None = None,
        selector: FormatSelector | None = None,
        composer: SegmentComposer | None = None,
        now: Callable[[tzinfo | None], datetime] = _system_now,
    ) -> None:
        self._config = config or DisplayConfig()
        self._selector = selector or FormatSelector()
        self._composer = composer or SegmentComposer()
        self._now = now
        self._tz = resolve_timezone(self._config.timezone)
        self._demo_mode = False
        self._demo_instant: datetime | None = None

    @property
    def config(self) -> DisplayConfig:
        return self._config

    @property
    def demo_mode(self) -> bool:
        return self._demo_mode

    @property
    def visible(self) -> bool:
        return self._config.visible

    def update_config(self, config: DisplayConfig) -> None:
        """Swap in new settings; a locale or timezone change is applied as well."""
        previous = self._config
        tz = self._tz
        if config.timezone != previous.timezone:
            tz = resolve_timezone(config.timezone)
        self._config = config
        self._tz = tz
        if config.locale != previous.locale:
            self._selector.invalidate()
        logger.info(f"Display config updated: {config.model_dump(mode='json')}")

    def on_locale_changed(self, locale: str) -> None:
        """Host notification that the system locale changed."""
        if locale == self._config.locale:
            return
        self.update_config(self._config.model_copy(update={"locale": locale}))

    def on_timezone_changed(self, name: str | None) -> None:
        """Host notification that the display timezone changed."""
        self.update_config(self._config.model_copy(update={"timezone": name}))

    def current_instant(self) -> datetime:
        """The instant the next tick renders: the demo instant or the current time."""
        if self._demo_mode and self._demo_instant is not None:
            return self._demo_instant
        return self._now(self._tz)

    def render(self, now: datetime | float | None = None) -> RenderResult:
        """
        Render one tick.

        Args:
            now: Instant to render, as an aware datetime or epoch seconds.
                Defaults to the demo instant in demo mode, else the current time.

        Returns:
            RenderResult for the current settings
        """
        instant = self._to_local(now) if now is not None else self.current_instant()
        resolved = self._selector.resolve(self._config)
        return self._composer.render(instant, resolved, self._config)

    def dispatch_demo_command(self, command: str, args: Mapping[str, str] | None = None) -> None:
        """
        Handle a demo-mode command.

        ``enter`` pins the clock to the current time, ``exit`` resumes live
        time and ``clock`` sets the pinned time from either ``millis`` (epoch
        milliseconds) or ``hhmm`` (four digits). Commands that do not apply
        in the current mode are ignored.

        Raises:
            ValueError: If ``clock`` arguments are malformed
        """
        args = args or {}
        if not self._demo_mode and command == DEMO_ENTER:
            self._demo_mode = True
            self._demo_instant = self._now(self._tz)
            logger.info("Entered demo mode")
        elif self._demo_mode and command == DEMO_EXIT:
            self._demo_mode = False
            self._demo_instant = None
            logger.info("Exited demo mode")
        elif self._demo_mode and command == DEMO_CLOCK:
            self._demo_instant = self._demo_clock_instant(args)
            logger.debug(f"Demo clock set to {self._demo_instant.isoformat()}")

    def _demo_clock_instant(self, args: Mapping[str, str]) -> datetime:
        base = self._demo_instant or self._now(self._tz)
        millis = args.get("millis")
        if millis is not None:
            return self._to_local(int(millis) / 1000)

        hhmm = args.get("hhmm")
        if hhmm is not None and len(hhmm) == 4:
            if not hhmm.isdigit():
                raise ValueError(f"Invalid hhmm value: {hhmm!r}")
            hours, minutes = int(hhmm[:2]), int(hhmm[2:])
            if self._config.hour24:
                hour = hours
            else:
                # Counted from the start of the current half-day; 12 rolls into the next
                hour = (base.hour // 12) * 12 + hours
            delta = timedelta(hours=hour - base.hour, minutes=minutes - base.minute)
            return base + delta
        return base

    def _to_local(self, value: datetime | float) -> datetime:
        if isinstance(value, datetime):
            if value.tzinfo is None:
                return value
            return value.astimezone(self._tz) if self._tz is not None else value.astimezone()
        moment = datetime.fromtimestamp(value, tz=dt_timezone.utc)
        return moment.astimezone(self._tz) if self._tz is not None else moment.astimezone()
