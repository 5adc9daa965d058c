"""
환경 설정 및 구성 관리
"""

import os
import logging
from typing import Optional
from dotenv import load_dotenv

# 환경 변수 로드
load_dotenv()

_TRUE_VALUES = ("1", "true", "yes", "on")


def check_index_filename(name: str, label: str = "SEARCH_INDEX_FILENAME") -> Optional[str]:
    """
    색인 파일 이름을 검사합니다.

    Returns:
        오류 메시지, 올바른 이름이면 None
    """
    if not name:
        return f"{label}이(가) 설정되지 않았습니다."
    if "/" in name or "\\" in name:
        return f"{label}은(는) 경로가 아닌 파일 이름이어야 합니다."
    if not name.endswith(".json"):
        return f"{label}은(는) .json으로 끝나야 합니다."
    return None


class Config:
    """애플리케이션 설정 클래스"""

    # 빌드 결과물 설정
    DIST_DIR = os.getenv("DIST_DIR", "dist")
    SEARCH_INDEX_FILENAME = os.getenv("SEARCH_INDEX_FILENAME", "search_index.json")

    # 섹션 태그 설정
    SECTION_ATTRIBUTE = os.getenv("SECTION_ATTRIBUTE", "data-adf-section")

    # 로깅 설정
    LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")
    SHOW_PROGRESS = os.getenv("SHOW_PROGRESS", "true").lower() in _TRUE_VALUES

    @property
    def dist_dir(self):
        """빌드 결과물 디렉터리"""
        return self.DIST_DIR

    @property
    def search_index_filename(self):
        """색인 파일 이름"""
        return self.SEARCH_INDEX_FILENAME

    @property
    def section_attribute(self):
        """섹션 식별자 속성 이름"""
        return self.SECTION_ATTRIBUTE

    @property
    def show_progress(self):
        """진행률 표시 여부"""
        return self.SHOW_PROGRESS

    @classmethod
    def validate(cls):
        """설정 유효성 검사"""
        errors = []

        if not cls.DIST_DIR:
            errors.append("DIST_DIR이 설정되지 않았습니다.")

        filename_error = check_index_filename(cls.SEARCH_INDEX_FILENAME)
        if filename_error:
            errors.append(filename_error)

        if not cls.SECTION_ATTRIBUTE:
            errors.append("SECTION_ATTRIBUTE가 설정되지 않았습니다.")

        if logging.getLevelName(str(cls.LOG_LEVEL).upper()) not in (
            logging.DEBUG,
            logging.INFO,
            logging.WARNING,
            logging.ERROR,
            logging.CRITICAL,
        ):
            errors.append(f"알 수 없는 LOG_LEVEL입니다: {cls.LOG_LEVEL}")

        return errors

    @classmethod
    def print_config(cls):
        """현재 설정을 출력합니다."""
        print("현재 설정:")
        print(f"  빌드 디렉터리: {cls.DIST_DIR}")
        print(f"  색인 파일 이름: {cls.SEARCH_INDEX_FILENAME}")
        print(f"  섹션 속성: {cls.SECTION_ATTRIBUTE}")
        print(f"  로그 레벨: {cls.LOG_LEVEL}")
        print(f"  진행률 표시: {'예' if cls.SHOW_PROGRESS else '아니오'}")


def validate_config(config: Config) -> None:
    """
    설정 유효성 검사 함수

    Args:
        config: Config 인스턴스

    Raises:
        ValueError: 설정이 유효하지 않은 경우
    """
    errors = config.validate()
    if errors:
        error_message = "설정 오류가 발견되었습니다:\n" + "\n".join(
            f"  - {error}" for error in errors
        )
        raise ValueError(error_message)
