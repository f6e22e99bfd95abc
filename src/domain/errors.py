"""
Error definitions for the project browser.

규칙:
- 404 대상(없는 프로젝트/폴더/파일, 거부된 경로 세그먼트) → NotFoundError
- description.txt 읽기 실패 → 예외 아님 (경고 로그 후 "설명 없음")
"""

from typing import Any


class BrowserError(Exception):
    """
    브라우저 도메인 에러.

    Usage:
        raise BrowserError("PROJECTS_ROOT_MISSING", path=str(root))
    """

    def __init__(self, code: str, **context: Any) -> None:
        self.code = code
        self.context = context
        super().__init__(self._format_message())

    def _format_message(self) -> str:
        ctx_str = ", ".join(f"{k}={v!r}" for k, v in self.context.items())
        return f"[{self.code}] {ctx_str}" if ctx_str else f"[{self.code}]"

    def to_dict(self) -> dict[str, Any]:
        """로그/JSON 직렬화용."""
        return {
            "code": self.code,
            **self.context,
        }


class NotFoundError(BrowserError):
    """
    요청한 프로젝트/하위 폴더/파일이 없거나 타입이 다를 때.

    message는 클라이언트에 그대로 전달되는 plain text 본문.
    """

    def __init__(self, code: str, message: str, **context: Any) -> None:
        self.message = message
        super().__init__(code, **context)

    def to_dict(self) -> dict[str, Any]:
        return {
            "code": self.code,
            "message": self.message,
            **self.context,
        }


# =============================================================================
# Error Codes
# =============================================================================

class ErrorCodes:
    """에러 코드 상수."""

    # === Not Found (404) ===
    PROJECT_NOT_FOUND = "PROJECT_NOT_FOUND"
    SUBDIR_NOT_FOUND = "SUBDIR_NOT_FOUND"
    FILE_NOT_FOUND = "FILE_NOT_FOUND"

    # === Path ===
    INVALID_PATH_SEGMENT = "INVALID_PATH_SEGMENT"
    PATH_OUTSIDE_ROOT = "PATH_OUTSIDE_ROOT"

    # === Startup ===
    PROJECTS_ROOT_MISSING = "PROJECTS_ROOT_MISSING"
