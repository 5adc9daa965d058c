"""Build route related data models."""

from typing import Optional
from dataclasses import dataclass


@dataclass
class RouteData:
    """빌드 결과물의 한 페이지(라우트)를 나타내는 데이터 클래스"""

    route: str
    type: str = "page"
    dist_path: Optional[str] = None

    @property
    def is_page(self) -> bool:
        """엔드포인트 등이 아닌 일반 페이지인지 여부"""
        return self.type == "page"
