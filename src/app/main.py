"""
FastAPI 애플리케이션 진입점.

실행:
- 개발: uv run uvicorn src.app.main:create_app --factory --reload --port 3000
- 스크립트: uv run python scripts/serve.py --root ./Projects
"""

import logging
import os
from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager
from pathlib import Path
from typing import Any

import yaml
from fastapi import FastAPI, Request
from fastapi.responses import PlainTextResponse
from fastapi.staticfiles import StaticFiles
from starlette.exceptions import HTTPException as StarletteHTTPException

# Routes
from src.app.routes import projects
from src.domain.constants import (
    DEFAULT_HOST,
    DEFAULT_PORT,
    DEFAULT_PROJECTS_DIR,
    PROJECTS_ROOT_ENV,
    STATIC_ROUTE_PREFIX,
)
from src.domain.errors import BrowserError, ErrorCodes, NotFoundError

logger = logging.getLogger(__name__)

# 프로젝트 루트 (default.yaml, Projects/ 위치)
PROJECT_ROOT = Path(__file__).parent.parent.parent

# =============================================================================
# Configuration
# =============================================================================


def load_config(config_path: Path | None = None) -> dict:
    """설정 파일 로드."""
    if config_path is None:
        # 프로젝트 루트의 default.yaml
        config_path = PROJECT_ROOT / "default.yaml"

    if not config_path.exists():
        return {}

    with open(config_path, encoding="utf-8") as f:
        data: dict[Any, Any] = yaml.safe_load(f) or {}
        return data


def resolve_projects_root(config: dict, base_dir: Path = PROJECT_ROOT) -> Path:
    """
    projects root 경로 결정.

    우선순위: 환경 변수 PROJECT_BROWSER_ROOT > paths.projects_root > "Projects"
    상대 경로는 base_dir 기준.

    Args:
        config: load_config() 결과
        base_dir: 상대 경로 기준 디렉터리

    Returns:
        projects root 경로 (존재 여부는 확인하지 않음)
    """
    raw = os.getenv(PROJECTS_ROOT_ENV) or (config.get("paths") or {}).get(
        "projects_root", DEFAULT_PROJECTS_DIR
    )
    root = Path(raw).expanduser()
    if not root.is_absolute():
        root = base_dir / root
    return root


def get_server_settings(config: dict) -> tuple[str, int]:
    """(host, port) 설정값."""
    server = config.get("server") or {}
    return server.get("host", DEFAULT_HOST), int(server.get("port", DEFAULT_PORT))


# =============================================================================
# Lifespan
# =============================================================================


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """
    애플리케이션 생명주기 관리.

    상태는 create_app()에서 app.state에 설정됨 (요청 간 공유 가변 상태 없음).
    """
    logger.info(f"Serving projects from {app.state.projects_root}")

    yield


# =============================================================================
# Error Handlers
# =============================================================================


async def not_found_handler(request: Request, exc: NotFoundError) -> PlainTextResponse:
    """NotFoundError → 404 plain text."""
    return PlainTextResponse(content=exc.message, status_code=404)


async def http_error_handler(
    request: Request, exc: StarletteHTTPException
) -> PlainTextResponse:
    """
    프레임워크 HTTP 에러 (매칭 라우트 없음, StaticFiles 404 등) → plain text.

    /project 하위 404는 경로 모양에 맞는 메시지 사용.
    """
    content = str(exc.detail)
    if exc.status_code == 404:
        content = projects.infer_not_found_message(request.scope["path"]) or content

    return PlainTextResponse(
        content=content,
        status_code=exc.status_code,
        headers=getattr(exc, "headers", None),
    )


# =============================================================================
# App Factory
# =============================================================================


def create_app(
    config: dict | None = None,
    projects_root: Path | None = None,
) -> FastAPI:
    """
    FastAPI 앱 생성.

    Args:
        config: 설정 dict (None이면 default.yaml 로드)
        projects_root: projects root (None이면 설정에서 결정)

    Returns:
        FastAPI 앱

    Raises:
        BrowserError: PROJECTS_ROOT_MISSING (root가 디렉터리가 아님)
    """
    if config is None:
        config = load_config()
    if projects_root is None:
        projects_root = resolve_projects_root(config)

    if not projects_root.is_dir():
        raise BrowserError(ErrorCodes.PROJECTS_ROOT_MISSING, path=str(projects_root))

    app = FastAPI(
        title="Project Browser",
        description="프로젝트 폴더 트리 → 읽기 전용 HTML 브라우저",
        version="0.1.0",
        lifespan=lifespan,
    )
    app.state.config = config
    app.state.projects_root = projects_root

    # 원본 다운로드 (description.txt 포함)
    app.mount(
        STATIC_ROUTE_PREFIX,
        StaticFiles(directory=projects_root),
        name="static",
    )

    app.add_exception_handler(NotFoundError, not_found_handler)
    app.add_exception_handler(StarletteHTTPException, http_error_handler)

    # 페이지 라우트 (HTML)
    app.include_router(projects.router, tags=["Projects"])

    @app.get("/health")
    async def health() -> dict[str, str]:
        """헬스 체크."""
        return {"status": "ok"}

    return app


# =============================================================================
# CLI Entry Point
# =============================================================================

if __name__ == "__main__":
    import uvicorn

    host, port = get_server_settings(load_config())
    uvicorn.run(
        "src.app.main:create_app",
        factory=True,
        host=host,
        port=port,
        reload=True,
    )
