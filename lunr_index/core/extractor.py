"""
제목별 검색 색인 항목 추출

각 제목 뒤에 오는 형제 요소들을 다음 제목이 나올 때까지 훑어
본문 텍스트를 모으고, 가장 가까운 섹션 표식을 찾아 색인 항목을 만듭니다.
"""

import logging
from typing import List, Optional, Set, Tuple

from bs4 import BeautifulSoup, NavigableString, Tag
from bs4.element import PreformattedString

from ..models.entry import IndexEntry
from ..models.route import RouteData
from .filters import ContentFilter, IndexerFilters
from .selectors import is_heading, select_headings

# 로깅 설정
logger = logging.getLogger(__name__)

DEFAULT_SECTION_ATTRIBUTE = "data-adf-section"

# 본문 수집 시 기본으로 제외하는 요소
IGNORED_TAGS = ("script", "style", "astro-island", "nav", "video")
# svg 내부에서 텍스트로 인정하는 요소
SVG_TEXT_TAGS = ("title", "text")


def find_section(
    heading: Tag, attribute: str = DEFAULT_SECTION_ATTRIBUTE
) -> Optional[str]:
    """
    가장 가까운 조상 요소의 섹션 식별자를 찾습니다.

    Args:
        heading: 제목 요소
        attribute: 섹션 식별자 속성 이름

    Returns:
        섹션 식별자 문자열 또는 None
    """
    for parent in heading.parents:
        value = parent.get(attribute)
        if value:
            return str(value)
    return None


def is_ignored(element: Tag) -> bool:
    """기본 제외 규칙: 스크립트, 스타일, 내비게이션 등과 svg 아이콘 마크업"""
    if element.name in IGNORED_TAGS:
        return True
    return element.name not in SVG_TEXT_TAGS and element.find_parent("svg") is not None


def is_excluded(element: Tag, content_filter: Optional[ContentFilter] = None) -> bool:
    """
    요소를 본문 수집에서 제외할지 결정합니다.

    사용자 본문 필터가 있으면 기본 제외 규칙은 적용하지 않고
    필터의 결과만 따릅니다.
    """
    if content_filter is None:
        return is_ignored(element)
    return not content_filter(element)


def _is_text(node) -> bool:
    # 주석, CDATA, doctype 등은 본문이 아님
    return isinstance(node, NavigableString) and not isinstance(
        node, PreformattedString
    )


def extract_text(element: Tag, content_filter: Optional[ContentFilter] = None) -> str:
    """
    요소의 하위 트리에서 텍스트를 재귀적으로 추출합니다.

    Args:
        element: 텍스트를 추출할 요소
        content_filter: 요소 단위 본문 필터

    Returns:
        공백이 정리된 텍스트
    """
    if is_excluded(element, content_filter):
        return ""

    text = ""
    for child in element.children:
        if isinstance(child, Tag):
            text += extract_text(child, content_filter)
        elif _is_text(child):
            text += child.strip()
    return text.strip()


def collect_content(
    heading: Tag, content_filter: Optional[ContentFilter] = None
) -> str:
    """
    제목 다음부터 다음 제목 직전까지의 형제 요소에서 본문을 모읍니다.

    Args:
        heading: 제목 요소
        content_filter: 요소 단위 본문 필터

    Returns:
        본문 텍스트 (없으면 빈 문자열)
    """
    content = ""
    for sibling in heading.next_siblings:
        if not isinstance(sibling, Tag):
            continue
        if is_heading(sibling):
            break
        content += extract_text(sibling, content_filter).strip()
    return content.strip()


def build_loc(route: str, heading: Tag) -> str:
    """라우트와 제목 id로 위치 문자열을 만듭니다."""
    heading_id = heading.get("id") or ""
    if heading_id:
        return f"{route}#{heading_id}"
    return route


class IndexBuilder:
    """페이지별로 색인 항목을 누적하고 (loc, title) 기준으로 중복을 제거하는 클래스"""

    def __init__(
        self,
        filters: Optional[IndexerFilters] = None,
        section_attribute: str = DEFAULT_SECTION_ATTRIBUTE,
    ):
        self.filters = filters or IndexerFilters()
        self.section_attribute = section_attribute
        self.entries: List[IndexEntry] = []
        self._seen: Set[Tuple[str, str]] = set()

    def add_page(self, soup: BeautifulSoup, route: RouteData) -> int:
        """
        파싱된 페이지에서 색인 항목을 추출해 누적합니다.

        Args:
            soup: 파싱된 페이지
            route: 페이지 라우트

        Returns:
            새로 추가된 항목 수
        """
        added = 0
        for heading in select_headings(soup, self.filters.heading_filter):
            loc = build_loc(route.route, heading)
            title = heading.get_text() or loc

            if (loc, title) in self._seen:
                logger.debug(f"중복 항목 건너뜀: {loc} ({title})")
                continue

            entry = IndexEntry(loc=loc, title=title)
            section = find_section(heading, self.section_attribute)
            if section:
                entry.section = section
            content = collect_content(heading, self.filters.content_filter)
            if content:
                entry.content = content

            self._seen.add((loc, title))
            self.entries.append(entry)
            added += 1

        return added

    def results(self) -> List[IndexEntry]:
        """결과 필터를 적용한 최종 항목 리스트"""
        result_filter = self.filters.result_filter
        if result_filter is None:
            return list(self.entries)
        entries = self.entries
        return [
            entry for idx, entry in enumerate(entries) if result_filter(entry, idx, entries)
        ]
