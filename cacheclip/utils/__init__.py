"""Utility functions."""

from .formatting import format_entry, format_timestamp, single_line, truncate_text
from .fuzzy import FuzzyMatcher

__all__ = [
    "FuzzyMatcher",
    "format_entry",
    "format_timestamp",
    "single_line",
    "truncate_text",
]
