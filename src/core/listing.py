"""
디렉터리 목록: 직계 자식을 하위 폴더 / 일반 파일로 분류.

- 분류는 파일시스템 메타데이터 기준 (이름 추정 금지)
- 정렬: 이름순 (플랫폼별 열거 순서에 의존하지 않음)
- 전제: dir_path는 존재하는 디렉터리 (호출자가 확인)
"""

import os
from collections.abc import Iterable
from pathlib import Path

from src.domain.schemas import DirectoryListing


def list_children(
    dir_path: Path,
    exclude_names: Iterable[str] = (),
) -> DirectoryListing:
    """
    직계 자식 목록.

    디렉터리도 일반 파일도 아닌 항목(소켓, 깨진 링크 등)은 제외.

    Args:
        dir_path: 대상 디렉터리
        exclude_names: 파일 목록에서 숨길 이름 (description.txt 등)

    Returns:
        DirectoryListing
    """
    excluded = set(exclude_names)
    listing = DirectoryListing()

    with os.scandir(dir_path) as entries:
        for entry in entries:
            if entry.is_dir():
                listing.subdirectories.append(entry.name)
            elif entry.is_file() and entry.name not in excluded:
                listing.files.append(entry.name)

    listing.subdirectories.sort()
    listing.files.sort()
    return listing


def list_projects(projects_root: Path) -> list[str]:
    """projects root 바로 아래의 프로젝트(폴더) 이름 목록."""
    return list_children(projects_root).subdirectories
