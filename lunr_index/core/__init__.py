"""Core functionality for lunr_index package."""

from .indexer import SearchIndexer, parse_html, write_index, load_index, summarize_entries
from .extractor import IndexBuilder, collect_content, extract_text, find_section
from .selectors import select_pages, select_headings, default_heading_filter
from .filters import IndexerFilters, load_filters
from .routes import discover_routes, load_routes_manifest
from .config import Config, validate_config

__all__ = [
    "SearchIndexer",
    "IndexBuilder",
    "IndexerFilters",
    "Config",
    "parse_html",
    "write_index",
    "load_index",
    "summarize_entries",
    "collect_content",
    "extract_text",
    "find_section",
    "select_pages",
    "select_headings",
    "default_heading_filter",
    "load_filters",
    "discover_routes",
    "load_routes_manifest",
    "validate_config",
]
