"""Application layer - format selection, segment composition and the clock engine."""

from statusclock.application.format_selector import CompiledFormat, FormatSelector, ResolvedFormat
from statusclock.application.pattern_markers import MARK_END, MARK_START, inject_am_pm_markers
from statusclock.application.segment_composer import SegmentComposer
from statusclock.application.status_clock import StatusClock
from statusclock.application.tuning import config_from_tuning, load_display_config

__all__ = [
    "CompiledFormat",
    "FormatSelector",
    "ResolvedFormat",
    "MARK_END",
    "MARK_START",
    "inject_am_pm_markers",
    "SegmentComposer",
    "StatusClock",
    "config_from_tuning",
    "load_display_config",
]
