"""
빌드 완료 후 검색 색인(search_index.json)을 생성하는 모듈
빌드 결과 HTML 페이지를 읽어 제목별 색인 항목을 추출하고 JSON으로 저장합니다.
"""

import json
import logging
from pathlib import Path
from typing import Any, Dict, List, Optional, Union

from bs4 import BeautifulSoup
from tqdm import tqdm

from ..models.entry import IndexEntry
from ..models.route import RouteData
from .config import Config
from .extractor import DEFAULT_SECTION_ATTRIBUTE, IndexBuilder
from .filters import IndexerFilters
from .selectors import select_pages

# 로깅 설정
logger = logging.getLogger(__name__)

DEFAULT_INDEX_FILENAME = "search_index.json"

# HTML5 트리 생성 규칙을 따르는 파서 (닫히지 않은 <p>는 다음 제목에서 닫힘)
HTML_PARSER = "html5lib"

_FILTER_LABELS = {
    "route_filter": "라우트",
    "heading_filter": "제목",
    "content_filter": "본문",
    "result_filter": "결과",
}


def parse_html(html_content: str) -> BeautifulSoup:
    """HTML 문자열을 파싱합니다."""
    return BeautifulSoup(html_content, HTML_PARSER)


def summarize_entries(entries: List[IndexEntry]) -> Dict[str, int]:
    """전체 항목 수와 본문이 있는 항목 수를 계산합니다."""
    return {
        "entry_count": len(entries),
        "entries_with_content": sum(1 for entry in entries if entry.content),
    }


def write_index(entries: List[IndexEntry], index_path: Union[str, Path]) -> Path:
    """
    색인 항목을 JSON 배열로 저장합니다. 기존 파일은 덮어씁니다.

    Args:
        entries: 저장할 색인 항목들
        index_path: 저장 경로

    Returns:
        저장된 파일 경로
    """
    index_path = Path(index_path)
    with open(index_path, "w", encoding="utf-8") as f:
        json.dump([entry.to_dict() for entry in entries], f, ensure_ascii=False)
    return index_path


def load_index(index_path: Union[str, Path]) -> List[IndexEntry]:
    """저장된 색인 파일을 읽어 IndexEntry 리스트로 복원합니다."""
    with open(index_path, "r", encoding="utf-8") as f:
        data = json.load(f)
    return [IndexEntry.from_dict(item) for item in data]


class SearchIndexer:
    """빌드 결과물로부터 검색 색인을 만드는 메인 클래스"""

    def __init__(
        self,
        filters: Optional[IndexerFilters] = None,
        index_filename: str = DEFAULT_INDEX_FILENAME,
        section_attribute: str = DEFAULT_SECTION_ATTRIBUTE,
        show_progress: bool = True,
    ):
        """
        색인기를 초기화합니다.

        Args:
            filters: 단계별 사용자 정의 필터
            index_filename: 색인 파일 이름
            section_attribute: 섹션 식별자 속성 이름
            show_progress: 진행률 표시 여부
        """
        self.filters = filters or IndexerFilters()
        self.index_filename = index_filename
        self.section_attribute = section_attribute
        self.show_progress = show_progress

    @classmethod
    def from_config(
        cls, config: Config, filters: Optional[IndexerFilters] = None
    ) -> "SearchIndexer":
        """Config 설정으로 색인기를 생성합니다."""
        return cls(
            filters=filters,
            index_filename=config.search_index_filename,
            section_attribute=config.section_attribute,
            show_progress=config.show_progress,
        )

    def _log_active_filters(self):
        for name in self.filters.active():
            logger.info(f"사용자 정의 {_FILTER_LABELS[name]} 필터로 검색 색인을 생성합니다.")

    def parse_page(self, path: Path) -> BeautifulSoup:
        """페이지 HTML 파일을 읽고 파싱합니다."""
        logger.debug(f"페이지 파싱 중: {path}")
        html_content = path.read_text(encoding="utf-8")
        return parse_html(html_content)

    def build_index(
        self, dist_dir: Union[str, Path], routes: List[RouteData]
    ) -> List[IndexEntry]:
        """
        선택된 모든 페이지에서 색인 항목을 추출합니다.

        Args:
            dist_dir: 빌드 결과물 디렉터리
            routes: 빌드가 생성한 라우트 목록

        Returns:
            결과 필터까지 적용된 색인 항목 리스트
        """
        pages = select_pages(routes, dist_dir, self.filters.route_filter)
        logger.info(f"색인 대상 페이지: {len(pages)}개 (전체 라우트 {len(routes)}개)")

        builder = IndexBuilder(self.filters, self.section_attribute)
        for route, path in tqdm(pages, desc="페이지 색인", disable=not self.show_progress):
            soup = self.parse_page(path)
            added = builder.add_page(soup, route)
            logger.debug(f"  -> {route.route}: {added}개 항목 추가")

        return builder.results()

    def build_done(
        self, dist_dir: Union[str, Path], routes: List[RouteData]
    ) -> Path:
        """
        빌드 완료 시점에 호출되어 전체 색인 생성 과정을 수행합니다.

        Args:
            dist_dir: 빌드 결과물 디렉터리
            routes: 빌드가 생성한 라우트 목록

        Returns:
            저장된 색인 파일 경로
        """
        self._log_active_filters()
        index_path = Path(dist_dir) / self.index_filename

        entries = self.build_index(dist_dir, routes)
        write_index(entries, index_path)

        summary = summarize_entries(entries)
        logger.info(
            f"{self.index_filename} 생성 완료: 총 {summary['entry_count']}개 항목, "
            f"본문 포함 {summary['entries_with_content']}개"
        )
        return index_path

    def stats(self, index_path: Union[str, Path]) -> Dict[str, Any]:
        """저장된 색인 파일의 통계를 반환합니다."""
        entries = load_index(index_path)
        summary = summarize_entries(entries)
        summary["entries_with_section"] = sum(1 for entry in entries if entry.section)
        return summary
