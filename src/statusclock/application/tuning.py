"""Build DisplayConfig from clock tuning values.

Tuning values arrive as integer strings keyed by the clock tuning keys, with
None meaning "unset". Unset keys take the stock defaults: clock shown, no
seconds, AM/PM hidden, right placement, no date, date case as-is, date on
the left and an ``EEE`` date pattern.
"""

from __future__ import annotations

import os
from collections.abc import Mapping
from pathlib import Path
from typing import Optional

from dotenv import dotenv_values

from statusclock.domain.config import DEFAULT_DATE_PATTERN, DisplayConfig
from statusclock.domain.types import (
    AmPmEmphasis,
    ClockPlacement,
    DateCase,
    DatePosition,
    DateVisibility,
)
from statusclock.logger import get_logger

logger = get_logger("tuning")

CLOCK_SHOW = "clock_show"
CLOCK_SECONDS = "clock_seconds"
CLOCK_AM_PM_STYLE = "clock_am_pm_style"
CLOCK_STYLE = "clock_style"
# Stored key keeps its historical mixed case
CLOCK_DATE_SHOW = "clock_date_SHOW"
CLOCK_DATE_STYLE = "clock_date_style"
CLOCK_DATE_POSITION = "clock_date_position"
CLOCK_DATE_FORMAT = "clock_date_format"

TUNING_KEYS = (
    CLOCK_SHOW,
    CLOCK_SECONDS,
    CLOCK_AM_PM_STYLE,
    CLOCK_STYLE,
    CLOCK_DATE_SHOW,
    CLOCK_DATE_STYLE,
    CLOCK_DATE_POSITION,
    CLOCK_DATE_FORMAT,
)

ENV_PREFIX = "STATUSCLOCK_"

# Integer tuning values, in stored order
_AM_PM_STYLES = (AmPmEmphasis.NONE, AmPmEmphasis.SMALL, AmPmEmphasis.NORMAL)
_CLOCK_STYLES = (ClockPlacement.RIGHT, ClockPlacement.CENTER, ClockPlacement.LEFT)
_DATE_SHOW = (DateVisibility.NONE, DateVisibility.SMALL, DateVisibility.NORMAL)
_DATE_STYLES = (DateCase.AS_IS, DateCase.LOWER, DateCase.UPPER)
_DATE_POSITIONS = (DatePosition.LEFT, DatePosition.RIGHT)


def _choice(values: Mapping[str, Optional[str]], key: str, options: tuple, default):
    raw = values.get(key)
    if raw is None:
        return default
    index = int(raw)
    if not 0 <= index < len(options):
        raise ValueError(f"Tuning value {raw!r} out of range for '{key}'")
    return options[index]


def config_from_tuning(
    values: Mapping[str, Optional[str]],
    *,
    hour24: bool = False,
    locale: str = "en_US",
    timezone: str | None = None,
) -> DisplayConfig:
    """
    Map tuning values onto a DisplayConfig.

    Args:
        values: Tuning key to integer string (or None when unset)
        hour24: Whether the system uses a 24-hour clock; forces AM/PM to NONE
        locale: Locale tag for the display
        timezone: IANA zone name, None for local time

    Returns:
        DisplayConfig with defaults for unset keys

    Raises:
        ValueError: If a value is not an integer or out of range
    """
    show = values.get(CLOCK_SHOW)
    seconds = values.get(CLOCK_SECONDS)
    am_pm = _choice(values, CLOCK_AM_PM_STYLE, _AM_PM_STYLES, AmPmEmphasis.NONE)
    if hour24:
        am_pm = AmPmEmphasis.NONE
    date_format = values.get(CLOCK_DATE_FORMAT)

    return DisplayConfig(
        hour24=hour24,
        show_seconds=seconds is not None and int(seconds) != 0,
        am_pm_emphasis=am_pm,
        date_visibility=_choice(values, CLOCK_DATE_SHOW, _DATE_SHOW, DateVisibility.NONE),
        date_case=_choice(values, CLOCK_DATE_STYLE, _DATE_STYLES, DateCase.AS_IS),
        date_position=_choice(values, CLOCK_DATE_POSITION, _DATE_POSITIONS, DatePosition.LEFT),
        date_format_pattern=DEFAULT_DATE_PATTERN if date_format is None else date_format,
        locale=locale,
        timezone=timezone,
        show_clock=show is None or int(show) == 1,
        placement=_choice(values, CLOCK_STYLE, _CLOCK_STYLES, ClockPlacement.RIGHT),
    )


def load_display_config(
    env_file: Optional[str | Path] = None,
    environ: Optional[Mapping[str, str]] = None,
) -> DisplayConfig:
    """
    Load a DisplayConfig from ``STATUSCLOCK_*`` environment variables.

    Tuning keys are read upper-cased with the ``STATUSCLOCK_`` prefix
    (``STATUSCLOCK_CLOCK_SECONDS=1``), plus ``STATUSCLOCK_HOUR24``,
    ``STATUSCLOCK_LOCALE`` and ``STATUSCLOCK_TIMEZONE``.

    Args:
        env_file: Optional .env file; the environment takes precedence over it
        environ: Mapping to read instead of ``os.environ``

    Returns:
        The parsed DisplayConfig
    """
    source: dict[str, str] = {}
    if env_file is not None:
        source.update({k: v for k, v in dotenv_values(env_file).items() if v is not None})
    source.update(os.environ if environ is None else environ)

    values = {key: source.get(ENV_PREFIX + key.upper()) for key in TUNING_KEYS}
    hour24 = source.get(ENV_PREFIX + "HOUR24", "0").strip().lower() in ("1", "true", "yes")
    config = config_from_tuning(
        values,
        hour24=hour24,
        locale=source.get(ENV_PREFIX + "LOCALE") or "en_US",
        timezone=source.get(ENV_PREFIX + "TIMEZONE") or None,
    )
    logger.debug(f"Loaded display config from environment: {config.model_dump(mode='json')}")
    return config
