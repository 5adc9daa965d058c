"""Data models for lunr_index package."""

from .entry import IndexEntry
from .route import RouteData

__all__ = ["IndexEntry", "RouteData"]
