"""
색인 항목 및 빌드 요약 포맷팅 유틸리티
"""

from pathlib import Path
from typing import Dict, List, Tuple

from ..models.entry import IndexEntry
from ..models.route import RouteData


def truncate(text: str, max_length: int) -> str:
    """최대 길이를 넘는 텍스트를 말줄임표로 자릅니다."""
    if len(text) <= max_length:
        return text
    return text[:max_length].rstrip() + "..."


def format_entry(
    entry: IndexEntry, show_full_content: bool = False, max_content_length: int = 200
) -> str:
    """
    색인 항목 하나를 사람이 읽기 좋은 형태로 포맷팅합니다.

    Args:
        entry: 색인 항목
        show_full_content: 전체 본문 표시 여부
        max_content_length: 본문 최대 표시 길이

    Returns:
        포맷팅된 문자열
    """
    lines = [f"📄 {entry.title}", f"   위치: {entry.loc}"]

    if entry.section:
        lines.append(f"   섹션: {entry.section}")

    if entry.content:
        content = (
            entry.content
            if show_full_content
            else truncate(entry.content, max_content_length)
        )
        lines.append(f"   본문: {content}")
    else:
        lines.append("   본문: (없음)")

    return "\n".join(lines)


def format_index_entries(
    entries: List[IndexEntry],
    show_full_content: bool = False,
    max_content_length: int = 200,
) -> str:
    """여러 색인 항목을 구분선과 함께 포맷팅합니다."""
    if not entries:
        return "색인 항목이 없습니다."

    formatted = [
        f"[{i}] " + format_entry(entry, show_full_content, max_content_length)
        for i, entry in enumerate(entries, 1)
    ]
    return ("\n" + "-" * 50 + "\n").join(formatted)


def format_summary(summary: Dict[str, int]) -> str:
    """빌드 요약 정보를 포맷팅합니다."""
    lines = [
        f"📊 전체 항목: {summary.get('entry_count', 0):,}",
        f"   본문 포함 항목: {summary.get('entries_with_content', 0):,}",
    ]
    if "entries_with_section" in summary:
        lines.append(f"   섹션 태그 항목: {summary['entries_with_section']:,}")
    return "\n".join(lines)


def format_pages(pages: List[Tuple[RouteData, Path]]) -> str:
    """색인 대상 페이지 목록을 포맷팅합니다."""
    if not pages:
        return "색인할 페이지가 없습니다."
    return "\n".join(f"{route.route}\t{path}" for route, path in pages)
