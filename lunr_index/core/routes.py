"""
빌드 결과물에서 라우트 목록을 만드는 모듈

라우트 매니페스트(JSON) 파일을 읽거나, 빌드 디렉터리의 HTML 파일을
직접 찾아 RouteData 리스트를 생성합니다.
"""

import json
import logging
from pathlib import Path
from typing import List, Optional, Union
from urllib.parse import unquote, urlparse

from ..models.route import RouteData

# 로깅 설정
logger = logging.getLogger(__name__)

_PATH_KEYS = ("distPath", "dist_path", "distURL")


def _path_from_url(value: str, dist_dir: Optional[Path]) -> str:
    """file:// URL을 빌드 디렉터리 기준 경로로 바꿉니다."""
    path = unquote(urlparse(value).path) if value.startswith("file:") else value
    if dist_dir is not None and Path(path).is_absolute():
        try:
            relative = Path(path).resolve().relative_to(dist_dir.resolve())
        except ValueError:
            return path
        return "/" + relative.as_posix()
    return path


def load_routes_manifest(
    manifest_path: Union[str, Path], dist_dir: Optional[Union[str, Path]] = None
) -> List[RouteData]:
    """
    라우트 매니페스트 파일을 읽습니다.

    매니페스트는 {"route", "type", "distPath"|"dist_path"|"distURL"} 객체의
    JSON 배열입니다. 빌드 디렉터리 안을 가리키는 절대 경로나 file:// URL은
    빌드 디렉터리 기준 경로로 변환됩니다.

    Args:
        manifest_path: 매니페스트 파일 경로
        dist_dir: 빌드 결과물 디렉터리

    Returns:
        RouteData 리스트
    """
    manifest_path = Path(manifest_path)
    base = Path(dist_dir) if dist_dir is not None else None

    with open(manifest_path, "r", encoding="utf-8") as f:
        data = json.load(f)

    if not isinstance(data, list):
        raise ValueError(f"라우트 매니페스트는 JSON 배열이어야 합니다: {manifest_path}")

    routes = []
    for item in data:
        if "route" not in item:
            raise ValueError(f"route 키가 없는 매니페스트 항목: {item}")

        dist_path = None
        for key in _PATH_KEYS:
            if item.get(key):
                dist_path = _path_from_url(str(item[key]), base)
                break

        routes.append(
            RouteData(
                route=item["route"],
                type=item.get("type", "page"),
                dist_path=dist_path,
            )
        )

    logger.info(f"라우트 매니페스트에서 {len(routes)}개의 라우트를 읽었습니다.")
    return routes


def route_for_file(relative_path: Path) -> str:
    """
    HTML 파일의 상대 경로에 대응하는 라우트를 계산합니다.

    index.html은 해당 디렉터리 라우트가 되고, 그 밖의 파일은 확장자를 뺀
    경로가 라우트가 됩니다.
    """
    parts = list(relative_path.parts[:-1])
    if relative_path.name != "index.html":
        parts.append(relative_path.stem)
    return "/" + "/".join(parts)


def discover_routes(dist_dir: Union[str, Path]) -> List[RouteData]:
    """
    빌드 디렉터리의 모든 HTML 파일을 페이지 라우트로 만듭니다.

    Args:
        dist_dir: 빌드 결과물 디렉터리

    Returns:
        상대 경로 순으로 정렬된 RouteData 리스트
    """
    dist_dir = Path(dist_dir)
    if not dist_dir.is_dir():
        raise FileNotFoundError(f"빌드 디렉터리를 찾을 수 없습니다: {dist_dir}")

    html_files = sorted(
        (p.relative_to(dist_dir) for p in dist_dir.rglob("*.html") if p.is_file()),
        key=lambda p: p.as_posix(),
    )

    routes = [
        RouteData(
            route=route_for_file(relative),
            type="page",
            dist_path="/" + relative.as_posix(),
        )
        for relative in html_files
    ]

    logger.info(f"{dist_dir}에서 {len(routes)}개의 HTML 페이지를 찾았습니다.")
    return routes
