"""Utility functions for lunr_index package."""

from .format import (
    format_entry,
    format_index_entries,
    format_summary,
    format_pages,
)

__all__ = [
    "format_entry",
    "format_index_entries",
    "format_summary",
    "format_pages",
]
