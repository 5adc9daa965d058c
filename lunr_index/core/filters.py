"""
사용자 정의 필터 구성

각 단계(라우트, 제목, 본문, 결과)의 필터는 선택 사항이며,
지정되면 해당 단계의 기본 동작을 완전히 대체합니다.
"""

import logging
import importlib.util
from pathlib import Path
from dataclasses import dataclass, fields
from typing import Any, Callable, List, Optional, Union

from bs4 import Tag

from ..models.entry import IndexEntry
from ..models.route import RouteData

logger = logging.getLogger(__name__)

RouteFilter = Callable[[RouteData, int, List[RouteData]], bool]
HeadingFilter = Callable[[int, Tag], bool]
ContentFilter = Callable[[Tag], bool]
ResultFilter = Callable[[IndexEntry, int, List[IndexEntry]], bool]


@dataclass
class IndexerFilters:
    """색인 단계별 사용자 정의 필터 모음"""

    route_filter: Optional[RouteFilter] = None
    heading_filter: Optional[HeadingFilter] = None
    content_filter: Optional[ContentFilter] = None
    result_filter: Optional[ResultFilter] = None

    def active(self) -> List[str]:
        """설정된 필터 이름 목록"""
        return [f.name for f in fields(self) if getattr(self, f.name) is not None]


def load_filters(path: Union[str, Path]) -> IndexerFilters:
    """
    파이썬 파일에서 필터 함수를 불러옵니다.

    파일 안에 ``route_filter``, ``heading_filter``, ``content_filter``,
    ``result_filter`` 이름의 함수가 있으면 해당 단계의 필터로 사용합니다.

    Args:
        path: 필터 정의 파일 경로

    Returns:
        IndexerFilters 인스턴스

    Raises:
        FileNotFoundError: 파일이 없는 경우
    """
    path = Path(path)
    if not path.is_file():
        raise FileNotFoundError(f"필터 파일을 찾을 수 없습니다: {path}")

    spec = importlib.util.spec_from_file_location(f"_lunr_filters_{path.stem}", path)
    module = importlib.util.module_from_spec(spec)
    spec.loader.exec_module(module)

    filters = IndexerFilters()
    for field in fields(IndexerFilters):
        candidate: Any = getattr(module, field.name, None)
        if candidate is None:
            continue
        if not callable(candidate):
            raise ValueError(f"{path}: {field.name}은 호출 가능한 객체여야 합니다.")
        setattr(filters, field.name, candidate)

    logger.debug(f"필터 파일 로드: {path} ({', '.join(filters.active()) or '없음'})")
    return filters
