"""공용 테스트 픽스처"""

from pathlib import Path

import pytest
from bs4 import BeautifulSoup

from lunr_index.core.indexer import parse_html
from lunr_index.models.route import RouteData


def page(body: str, title: str = "Test") -> str:
    """본문 조각을 완전한 HTML 문서로 감쌉니다."""
    return (
        "<!DOCTYPE html><html><head>"
        f"<title>{title}</title></head><body>{body}</body></html>"
    )


def parse(body: str) -> BeautifulSoup:
    return parse_html(page(body))


@pytest.fixture
def make_site(tmp_path):
    """{상대 경로: 본문} 딕셔너리로 빌드 디렉터리를 만듭니다."""

    def _make(pages):
        dist = tmp_path / "dist"
        for relative, body in pages.items():
            path = dist / relative
            path.parent.mkdir(parents=True, exist_ok=True)
            path.write_text(page(body), encoding="utf-8")
        dist.mkdir(exist_ok=True)
        return dist

    return _make


@pytest.fixture
def guide_site(make_site):
    dist = make_site(
        {
            "index.html": "<h1 id=\"home\">Home</h1><p>Welcome.</p>",
            "guide/index.html": (
                "<header><h1>Site</h1></header>"
                "<h2 id=\"setup\">Setup</h2><p>Install it.</p><h2>Next</h2>"
            ),
        }
    )
    routes = [
        RouteData(route="/", type="page", dist_path="/index.html"),
        RouteData(route="/guide", type="page", dist_path="/guide/index.html"),
        RouteData(route="/api/data.json", type="endpoint", dist_path="/api/data.json"),
    ]
    return dist, routes


def write_filters(directory: Path, source: str) -> Path:
    path = directory / "search_filters.py"
    path.write_text(source, encoding="utf-8")
    return path
