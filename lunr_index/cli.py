#!/usr/bin/env python3
"""
정적 사이트 검색 색인 생성 명령행 도구
"""

import os
import sys
import argparse
import logging

from .core.config import Config, check_index_filename, validate_config
from .core.filters import IndexerFilters, load_filters
from .core.indexer import SearchIndexer, load_index
from .core.routes import discover_routes, load_routes_manifest
from .core.selectors import select_pages
from .utils.format import format_index_entries, format_pages, format_summary

logger = logging.getLogger(__name__)


def _load_routes(args, dist_dir):
    """매니페스트가 있으면 읽고, 없으면 빌드 디렉터리에서 HTML 파일을 찾습니다."""
    if args.routes:
        return load_routes_manifest(args.routes, dist_dir)
    return discover_routes(dist_dir)


def _load_filters(args):
    if args.filters:
        return load_filters(args.filters)
    return IndexerFilters()


def build_command(args):
    """검색 색인 생성 명령"""
    try:
        config = Config()
        validate_config(config)

        dist_dir = args.dist_dir or config.dist_dir
        if not os.path.isdir(dist_dir):
            print(f"❌ 빌드 디렉터리를 찾을 수 없습니다: {dist_dir}")
            return 1

        if args.output_name:
            name_error = check_index_filename(args.output_name, "--output-name")
            if name_error:
                print(f"❌ {name_error}")
                return 1

        indexer = SearchIndexer.from_config(config, _load_filters(args))
        if args.output_name:
            indexer.index_filename = args.output_name
        if args.no_progress:
            indexer.show_progress = False

        print(f"🔨 검색 색인 생성 시작: {dist_dir}")
        index_path = indexer.build_done(dist_dir, _load_routes(args, dist_dir))

        print(f"✅ 검색 색인을 저장했습니다: {index_path}")
        print(format_summary(indexer.stats(index_path)))

    except Exception as e:
        logger.error(f"검색 색인 생성 중 오류 발생: {e}")
        return 1
    return 0


def routes_command(args):
    """색인 대상 페이지 목록 명령"""
    try:
        config = Config()
        dist_dir = args.dist_dir or config.dist_dir
        filters = _load_filters(args)

        pages = select_pages(_load_routes(args, dist_dir), dist_dir, filters.route_filter)
        print(format_pages(pages))

    except Exception as e:
        logger.error(f"라우트 조회 중 오류 발생: {e}")
        return 1
    return 0


def show_command(args):
    """저장된 색인 보기 명령"""
    try:
        if not os.path.exists(args.index_file):
            print(f"❌ 색인 파일을 찾을 수 없습니다: {args.index_file}")
            return 1

        entries = load_index(args.index_file)
        print(f"🔍 색인 항목 ({len(entries)}개):")
        print("=" * 80)

        if args.limit:
            entries = entries[: args.limit]
        print(format_index_entries(entries, show_full_content=args.full_content))

    except Exception as e:
        logger.error(f"색인 파일 읽기 중 오류 발생: {e}")
        return 1
    return 0


def config_command(args):
    """현재 설정 확인 명령"""
    Config.print_config()

    errors = Config.validate()
    if errors:
        print("❌ 설정 오류:")
        for error in errors:
            print(f"  - {error}")
        return 1

    print("✅ 설정이 올바릅니다.")
    return 0


def create_parser():
    """명령행 인수 파서 생성"""
    parser = argparse.ArgumentParser(
        description="정적 사이트 검색 색인 생성기",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
예제:
  # 빌드 디렉터리의 모든 HTML 페이지로 색인 생성
  lunr-index build dist

  # 라우트 매니페스트와 사용자 필터 사용
  lunr-index build dist --routes routes.json --filters search_filters.py

  # 색인 대상 페이지 확인
  lunr-index routes dist

  # 생성된 색인 보기
  lunr-index show dist/search_index.json --limit 20

  # 현재 설정 확인
  lunr-index config
        """,
    )

    subparsers = parser.add_subparsers(dest="command", help="사용 가능한 명령어")

    # build 명령
    build_parser = subparsers.add_parser("build", help="검색 색인 생성")
    build_parser.add_argument(
        "dist_dir", nargs="?", help="빌드 결과물 디렉터리 (기본값: DIST_DIR)"
    )
    build_parser.add_argument("--routes", help="라우트 매니페스트 JSON 파일")
    build_parser.add_argument("--filters", help="사용자 필터 함수가 정의된 파이썬 파일")
    build_parser.add_argument(
        "--output-name", help="색인 파일 이름 (기본값: search_index.json)"
    )
    build_parser.add_argument(
        "--no-progress", action="store_true", help="진행률 표시 끄기"
    )

    # routes 명령
    routes_parser = subparsers.add_parser("routes", help="색인 대상 페이지 목록")
    routes_parser.add_argument(
        "dist_dir", nargs="?", help="빌드 결과물 디렉터리 (기본값: DIST_DIR)"
    )
    routes_parser.add_argument("--routes", help="라우트 매니페스트 JSON 파일")
    routes_parser.add_argument("--filters", help="사용자 필터 함수가 정의된 파이썬 파일")

    # show 명령
    show_parser = subparsers.add_parser("show", help="생성된 색인 보기")
    show_parser.add_argument("index_file", help="색인 JSON 파일 경로")
    show_parser.add_argument("--limit", type=int, default=0, help="표시할 항목 수")
    show_parser.add_argument(
        "--full-content", action="store_true", help="전체 본문 표시"
    )

    # config 명령
    subparsers.add_parser("config", help="현재 설정 확인")

    return parser


def main(argv=None):
    """메인 함수"""
    parser = create_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=getattr(logging, str(Config.LOG_LEVEL).upper(), logging.INFO),
        format="%(asctime)s - %(levelname)s - %(message)s",
    )

    if not args.command:
        parser.print_help()
        return 1

    # 명령 실행
    if args.command == "build":
        return build_command(args)
    elif args.command == "routes":
        return routes_command(args)
    elif args.command == "show":
        return show_command(args)
    elif args.command == "config":
        return config_command(args)
    else:
        parser.print_help()
        return 1


if __name__ == "__main__":
    sys.exit(main())
