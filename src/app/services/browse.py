"""
Browse Service: 요청 경로 → 뷰 모델.

흐름:
- 세그먼트 → projects root 하위 경로 해석 (벗어나면 404)
- 존재/타입 확인 (디렉터리 vs 파일) → 아니면 NotFoundError
- 목록 + description.txt 읽기 → DirectoryView / FileView

상태 없음: 매 요청마다 파일시스템을 새로 읽음.
"""

import logging
from pathlib import Path

from src.core.description import read_description
from src.core.listing import list_children, list_projects
from src.core.paths import resolve_under_root
from src.domain.constants import (
    DESCRIPTION_FILENAME,
    FILE_NOT_FOUND_MESSAGE,
    PROJECT_NOT_FOUND_MESSAGE,
    SUBDIR_NOT_FOUND_MESSAGE,
)
from src.domain.errors import BrowserError, ErrorCodes, NotFoundError
from src.domain.schemas import DirectoryView, FileView, Link
from src.render.pages import (
    description_url,
    file_url,
    index_url,
    project_url,
    subdir_url,
)

logger = logging.getLogger(__name__)


def read_file_contents(path: Path) -> str:
    """
    파일 페이지에 표시할 내용.

    UTF-8로 해석 불가한 바이트는 대체 문자로 표시.
    읽기 실패 시 경고 로그 후 빈 문자열 (요청은 실패시키지 않음).
    """
    try:
        return path.read_bytes().decode("utf-8", errors="replace")
    except OSError as e:
        logger.warning(f"Failed to read file contents {path}: {e}")
        return ""


class BrowseService:
    """
    프로젝트 트리 조회 서비스.

    구조:
    <projects_root>/
    ├── <project>/
    │   ├── description.txt
    │   ├── <file>
    │   └── <subdir>/
    │       ├── description.txt
    │       └── <file>
    """

    def __init__(self, projects_root: Path):
        """
        Args:
            projects_root: 프로젝트 루트 디렉터리
        """
        self.projects_root = projects_root

    # =========================================================================
    # Path Resolution
    # =========================================================================

    def _resolve(
        self,
        segments: tuple[str, ...],
        code: str,
        message: str,
        expect_dir: bool,
    ) -> Path:
        try:
            path = resolve_under_root(self.projects_root, *segments)
        except BrowserError as e:
            logger.debug(f"Rejected path segments {segments!r}: {e.to_dict()}")
            raise NotFoundError(code, message, **e.context) from e

        found = path.is_dir() if expect_dir else path.is_file()
        if not found:
            error = NotFoundError(code, message, path=str(path))
            logger.debug(f"Not found: {error.to_dict()}")
            raise error

        return path

    # =========================================================================
    # Views
    # =========================================================================

    def list_projects(self) -> list[str]:
        """프로젝트 이름 목록."""
        return list_projects(self.projects_root)

    def project_view(self, project: str) -> DirectoryView:
        """
        프로젝트 페이지 뷰.

        Raises:
            NotFoundError: PROJECT_NOT_FOUND
        """
        project_dir = self._resolve(
            (project,),
            ErrorCodes.PROJECT_NOT_FOUND,
            PROJECT_NOT_FOUND_MESSAGE,
            expect_dir=True,
        )
        listing = list_children(project_dir, exclude_names=(DESCRIPTION_FILENAME,))
        description = read_description(project_dir / DESCRIPTION_FILENAME)

        return DirectoryView(
            title=project,
            back=Link(href=index_url(), label="Back to Projects"),
            description_href=description_url(project) if description else None,
            subdirectories=[
                Link(href=subdir_url(project, name), label=name)
                for name in listing.subdirectories
            ],
            files=[
                Link(href=file_url(project, name), label=name)
                for name in listing.files
            ],
        )

    def subdir_view(self, project: str, subdir: str) -> DirectoryView:
        """
        하위 폴더 페이지 뷰 (파일만 표시, 더 깊은 폴더는 표시 안 함).

        Raises:
            NotFoundError: SUBDIR_NOT_FOUND
        """
        subdir_path = self._resolve(
            (project, subdir),
            ErrorCodes.SUBDIR_NOT_FOUND,
            SUBDIR_NOT_FOUND_MESSAGE,
            expect_dir=True,
        )
        listing = list_children(subdir_path, exclude_names=(DESCRIPTION_FILENAME,))
        description = read_description(subdir_path / DESCRIPTION_FILENAME)

        return DirectoryView(
            title=subdir,
            back=Link(href=project_url(project), label="Back to Project"),
            description_href=(
                description_url(project, subdir) if description else None
            ),
            files=[
                Link(href=file_url(project, name, subdir=subdir), label=name)
                for name in listing.files
            ],
        )

    def file_view(
        self,
        project: str,
        file_name: str,
        subdir: str | None = None,
    ) -> FileView:
        """
        파일 페이지 뷰.

        캡션은 파일이 속한 폴더의 description.txt에서 조회.

        Args:
            project: 프로젝트명
            file_name: 파일명
            subdir: 하위 폴더명 (프로젝트 직속 파일이면 None)

        Raises:
            NotFoundError: FILE_NOT_FOUND
        """
        parents = (project,) if subdir is None else (project, subdir)
        file_path = self._resolve(
            (*parents, file_name),
            ErrorCodes.FILE_NOT_FOUND,
            FILE_NOT_FOUND_MESSAGE,
            expect_dir=False,
        )
        # file_path는 링크 해석 후 경로이므로 description.txt는 요청 폴더 기준
        parent_dir = resolve_under_root(self.projects_root, *parents)
        caption = read_description(
            parent_dir / DESCRIPTION_FILENAME,
            target_file_name=file_name,
        )

        if subdir is None:
            back = Link(href=project_url(project), label="Back to Project")
        else:
            back = Link(href=subdir_url(project, subdir), label="Back to Subdirectory")

        return FileView(
            title=file_name,
            back=back,
            caption=caption or "",
            contents=read_file_contents(file_path),
        )
