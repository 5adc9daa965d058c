"""Search index entry related data models."""

from typing import Dict, Any, Optional
from dataclasses import dataclass


@dataclass
class IndexEntry:
    """검색 색인 항목을 나타내는 데이터 클래스"""

    loc: str
    title: str
    content: Optional[str] = None
    section: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        """
        JSON 직렬화용 딕셔너리로 변환합니다.

        값이 없는 선택 필드(content, section)는 키 자체를 생략합니다.
        """
        data = {"loc": self.loc, "title": self.title}
        if self.content:
            data["content"] = self.content
        if self.section:
            data["section"] = self.section
        return data

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "IndexEntry":
        """JSON 객체에서 색인 항목을 복원합니다."""
        return cls(
            loc=data["loc"],
            title=data["title"],
            content=data.get("content"),
            section=data.get("section"),
        )
