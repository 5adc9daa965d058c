"""
색인 대상 페이지와 제목(heading) 요소 선택
"""

import logging
from pathlib import Path
from typing import List, Optional, Tuple, Union

from bs4 import BeautifulSoup, Tag

from ..models.route import RouteData
from .filters import HeadingFilter, RouteFilter

# 로깅 설정
logger = logging.getLogger(__name__)

HEADING_TAGS = ["h1", "h2", "h3", "h4", "h5", "h6"]


def is_heading(node) -> bool:
    """노드가 h1~h6 제목 요소인지 확인합니다."""
    return isinstance(node, Tag) and node.name in HEADING_TAGS


def resolve_dist_path(
    dist_path: Optional[str], dist_dir: Union[str, Path]
) -> Optional[Path]:
    """
    라우트의 결과물 경로를 빌드 디렉터리 기준 파일 경로로 변환합니다.

    앞에 붙은 '/'는 모두 제거하고 빌드 디렉터리 기준 상대 경로로 취급합니다.

    Args:
        dist_path: 라우트의 결과물 경로
        dist_dir: 빌드 결과물 디렉터리

    Returns:
        파일 경로, 경로가 없으면 None
    """
    if not dist_path:
        return None
    dist_path = dist_path.lstrip("/")
    if not dist_path:
        return None
    return Path(dist_dir) / dist_path


def select_pages(
    routes: List[RouteData],
    dist_dir: Union[str, Path],
    route_filter: Optional[RouteFilter] = None,
) -> List[Tuple[RouteData, Path]]:
    """
    빌드 결과 중 색인할 페이지를 고릅니다.

    사용자 라우트 필터가 있으면 먼저 적용한 뒤, 타입이 "page"이고
    결과물 경로가 있는 라우트만 남깁니다.

    Args:
        routes: 빌드가 생성한 전체 라우트 목록
        dist_dir: 빌드 결과물 디렉터리
        route_filter: (value, index, array) -> bool 형태의 라우트 필터

    Returns:
        (라우트, 파일 경로) 튜플 리스트
    """
    routes = list(routes)
    if route_filter is not None:
        routes = [
            route for idx, route in enumerate(routes) if route_filter(route, idx, routes)
        ]

    pages = []
    for route in routes:
        if not route.is_page:
            logger.debug(f"페이지가 아닌 라우트 건너뜀: {route.route} ({route.type})")
            continue

        path = resolve_dist_path(route.dist_path, dist_dir)
        if path is None:
            logger.debug(f"결과물 경로가 없는 라우트 건너뜀: {route.route}")
            continue

        pages.append((route, path))

    return pages


def default_heading_filter(idx: int, heading: Tag) -> bool:
    """header, nav 요소 안에 있는 제목은 제외합니다."""
    return heading.find_parent("header") is None and heading.find_parent("nav") is None


def select_headings(
    soup: BeautifulSoup, heading_filter: Optional[HeadingFilter] = None
) -> List[Tag]:
    """
    페이지에서 색인할 제목 요소를 문서 순서대로 고릅니다.

    사용자 필터가 있으면 기본 필터 대신 그것만 사용합니다.

    Args:
        soup: 파싱된 페이지
        heading_filter: (index, element) -> bool 형태의 제목 필터

    Returns:
        제목 요소 리스트
    """
    headings = soup.find_all(HEADING_TAGS)
    keep = heading_filter if heading_filter is not None else default_heading_filter
    return [heading for idx, heading in enumerate(headings) if keep(idx, heading)]
