"""
Reusable formatter utilities for Rich-based clock displays.
"""

from .clock import format_clock_markup, format_clock_text

__all__ = [
    "format_clock_markup",
    "format_clock_text",
]
