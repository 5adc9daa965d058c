"""
lunr_index - 정적 사이트 검색 색인 생성기

정적 사이트 빌드 결과 HTML에서 제목과 그 뒤의 본문을 추출하여
클라이언트 측 검색 라이브러리(Lunr)가 읽을 수 있는 JSON 색인을 만듭니다.
"""

__version__ = "0.1.0"

# Core classes and functions
from .core.indexer import SearchIndexer, write_index, load_index
from .core.extractor import IndexBuilder
from .core.filters import IndexerFilters, load_filters
from .core.routes import discover_routes, load_routes_manifest
from .core.config import Config, validate_config

# Data models
from .models.entry import IndexEntry
from .models.route import RouteData

# Utilities
from .utils.format import format_index_entries, format_summary

__all__ = [
    # Version info
    "__version__",
    # Core classes
    "SearchIndexer",
    "IndexBuilder",
    "IndexerFilters",
    "Config",
    # Data models
    "IndexEntry",
    "RouteData",
    # Functions
    "write_index",
    "load_index",
    "load_filters",
    "discover_routes",
    "load_routes_manifest",
    "validate_config",
    # Utilities
    "format_index_entries",
    "format_summary",
]
