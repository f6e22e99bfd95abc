"""
Projects Routes: 프로젝트 트리 조회 (읽기 전용).

- GET / → 프로젝트 목록
- GET /project/{project_name} → 프로젝트 페이지
- GET /project/{project_name}/subdir/{subdir_name} → 하위 폴더 페이지
- GET /project/{project_name}/file/{file_name} → 파일 페이지
- GET /project/{project_name}/subdir/{subdir_name}/file/{file_name} → 파일 페이지

없는 경로는 NotFoundError → 404 plain text (main.py 예외 핸들러).
원본 다운로드(/static)는 main.py에서 StaticFiles로 마운트.
"""

from pathlib import Path

from fastapi import APIRouter, Request
from fastapi.responses import HTMLResponse

from src.app.services.browse import BrowseService
from src.domain.constants import (
    FILE_NOT_FOUND_MESSAGE,
    FILE_ROUTE_SEGMENT,
    PROJECT_NOT_FOUND_MESSAGE,
    PROJECT_ROUTE_PREFIX,
    SUBDIR_NOT_FOUND_MESSAGE,
    SUBDIR_ROUTE_SEGMENT,
)
from src.render.pages import render_directory_page, render_file_page, render_index

router = APIRouter()


def infer_not_found_message(path: str) -> str | None:
    """
    매칭되는 라우트가 없는 /project 요청의 404 본문.

    빈 이름, "/"로 디코딩된 이름 등은 라우터에서 매칭되지 않으므로
    경로 모양으로 메시지를 추정.

    Args:
        path: 퍼센트 디코딩된 요청 경로

    Returns:
        404 메시지 (/project 하위가 아니면 None)
    """
    if path != PROJECT_ROUTE_PREFIX and not path.startswith(f"{PROJECT_ROUTE_PREFIX}/"):
        return None

    segments = path[len(PROJECT_ROUTE_PREFIX):].split("/")
    if FILE_ROUTE_SEGMENT in segments:
        return FILE_NOT_FOUND_MESSAGE
    if SUBDIR_ROUTE_SEGMENT in segments:
        return SUBDIR_NOT_FOUND_MESSAGE
    return PROJECT_NOT_FOUND_MESSAGE


def get_projects_root(request: Request) -> Path:
    """Request에서 projects_root 경로 가져오기."""
    return request.app.state.projects_root


def get_browse_service(request: Request) -> BrowseService:
    return BrowseService(get_projects_root(request))


# =============================================================================
# Page Routes (HTML)
# =============================================================================

@router.get("/", response_class=HTMLResponse)
def projects_index(request: Request) -> HTMLResponse:
    """프로젝트 목록 화면."""
    projects = get_browse_service(request).list_projects()
    return HTMLResponse(content=render_index(projects))


@router.get("/project/{project_name}", response_class=HTMLResponse)
def project_page(request: Request, project_name: str) -> HTMLResponse:
    """프로젝트 화면: 설명, 하위 폴더, 파일."""
    view = get_browse_service(request).project_view(project_name)
    return HTMLResponse(content=render_directory_page(view))


@router.get("/project/{project_name}/subdir/{subdir_name}", response_class=HTMLResponse)
def subdir_page(request: Request, project_name: str, subdir_name: str) -> HTMLResponse:
    """하위 폴더 화면: 설명, 파일."""
    view = get_browse_service(request).subdir_view(project_name, subdir_name)
    return HTMLResponse(content=render_directory_page(view))


@router.get("/project/{project_name}/file/{file_name}", response_class=HTMLResponse)
def project_file_page(request: Request, project_name: str, file_name: str) -> HTMLResponse:
    """프로젝트 직속 파일 화면: 캡션 + 내용."""
    view = get_browse_service(request).file_view(project_name, file_name)
    return HTMLResponse(content=render_file_page(view))


@router.get(
    "/project/{project_name}/subdir/{subdir_name}/file/{file_name}",
    response_class=HTMLResponse,
)
def subdir_file_page(
    request: Request,
    project_name: str,
    subdir_name: str,
    file_name: str,
) -> HTMLResponse:
    """하위 폴더 파일 화면: 캡션 + 내용."""
    view = get_browse_service(request).file_view(
        project_name, file_name, subdir=subdir_name
    )
    return HTMLResponse(content=render_file_page(view))
