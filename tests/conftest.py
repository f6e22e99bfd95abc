"""
Pytest fixtures for the project browser tests.

테스트용 프로젝트 트리 (tmp_path):
Projects/
├── Alpha/
│   ├── description.txt   # 자유 텍스트 + x.txt 캡션
│   ├── x.txt
│   ├── A/
│   └── B/
│       ├── description.txt   # 캡션 라인만 (자유 텍스트 없음)
│       └── b.txt             # 마크업 포함 내용
├── Empty/                # description.txt 없음
└── stray.txt             # root의 일반 파일 (프로젝트 아님)
"""

from collections.abc import Generator
from pathlib import Path

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient

from src.app.main import create_app
from src.domain.constants import PROJECTS_ROOT_ENV

ALPHA_DESCRIPTION = "Alpha overview\nSecond line\nx.txt=Caption here\n"
X_CONTENTS = "hello from x\n"
B_CONTENTS = "<script>alert(1)</script> & more"

# =============================================================================
# Path Fixtures
# =============================================================================

@pytest.fixture
def project_root() -> Path:
    """저장소 루트 경로."""
    return Path(__file__).parent.parent


@pytest.fixture(autouse=True)
def _clear_root_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """환경 변수 오버라이드가 테스트에 새지 않도록."""
    monkeypatch.delenv(PROJECTS_ROOT_ENV, raising=False)


@pytest.fixture
def projects_root(tmp_path: Path) -> Path:
    """샘플 프로젝트 트리."""
    root = tmp_path / "Projects"

    alpha = root / "Alpha"
    (alpha / "A").mkdir(parents=True)
    (alpha / "B").mkdir()
    (alpha / "description.txt").write_text(ALPHA_DESCRIPTION, encoding="utf-8")
    (alpha / "x.txt").write_text(X_CONTENTS, encoding="utf-8")
    (alpha / "B" / "description.txt").write_text(
        "b.txt=  Beta caption  \n", encoding="utf-8"
    )
    (alpha / "B" / "b.txt").write_text(B_CONTENTS, encoding="utf-8")

    (root / "Empty").mkdir()
    (root / "stray.txt").write_text("not a project", encoding="utf-8")

    return root


# =============================================================================
# App Fixtures
# =============================================================================

@pytest.fixture
def app(projects_root: Path) -> FastAPI:
    """테스트용 FastAPI 앱."""
    return create_app(config={}, projects_root=projects_root)


@pytest.fixture
def client(app: FastAPI) -> Generator[TestClient, None, None]:
    """FastAPI TestClient."""
    with TestClient(app) as client:
        yield client
