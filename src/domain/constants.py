"""
Domain Constants: 브라우저 전역 상수.

사이드카 파일명, 라우트 경로, 기본 설정값 등 시스템 전반에서 사용되는 값들.
"""

import os

# =============================================================================
# Sidecar File (설명 파일)
# =============================================================================
# 각 프로젝트/하위 폴더에 위치:
# Projects/<project>/
# ├── description.txt     # 자유 텍스트 + name=caption 라인
# ├── <file>
# └── <subdir>/
#     ├── description.txt
#     └── <file>

DESCRIPTION_FILENAME = "description.txt"
CAPTION_SEPARATOR = "="

NO_DESCRIPTION_MESSAGE = "No description is available."

# =============================================================================
# Route Prefixes
# =============================================================================

PROJECT_ROUTE_PREFIX = "/project"
SUBDIR_ROUTE_SEGMENT = "subdir"
FILE_ROUTE_SEGMENT = "file"
STATIC_ROUTE_PREFIX = "/static"

# =============================================================================
# Not Found Messages (404 plain text)
# =============================================================================

PROJECT_NOT_FOUND_MESSAGE = "Project not found"
SUBDIR_NOT_FOUND_MESSAGE = "Subdirectory not found"
FILE_NOT_FOUND_MESSAGE = "File not found"

# =============================================================================
# Defaults (default.yaml에서 오버라이드 가능)
# =============================================================================

DEFAULT_PROJECTS_DIR = "Projects"
DEFAULT_HOST = "127.0.0.1"
DEFAULT_PORT = 3000

PROJECTS_ROOT_ENV = "PROJECT_BROWSER_ROOT"

# 경로 세그먼트로 허용하지 않는 값/문자
FORBIDDEN_SEGMENTS = frozenset({"", ".", ".."})
# "\\"는 구분자인 플랫폼(Windows)에서만 거부
FORBIDDEN_SEGMENT_CHARS = frozenset(
    {"/", "\x00"} | {sep for sep in (os.sep, os.altsep) if sep}
)
