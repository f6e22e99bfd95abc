"""
경로 해석: URL 세그먼트 → projects root 하위 파일시스템 경로.

규칙:
- 세그먼트는 불투명한 이름으로만 취급 (구분자로 재해석 금지)
- "", ".", "..", 구분자/NUL 포함 세그먼트 거부
- 해석 결과(심볼릭 링크 포함)가 root 밖이면 거부
"""

from pathlib import Path

from src.domain.constants import FORBIDDEN_SEGMENT_CHARS, FORBIDDEN_SEGMENTS
from src.domain.errors import BrowserError, ErrorCodes


def validate_segment(segment: str) -> None:
    """
    경로 세그먼트 유효성 검증.

    Args:
        segment: 퍼센트 디코딩된 단일 경로 세그먼트

    Raises:
        BrowserError: INVALID_PATH_SEGMENT
    """
    if segment in FORBIDDEN_SEGMENTS:
        raise BrowserError(ErrorCodes.INVALID_PATH_SEGMENT, segment=segment)

    found_forbidden = set(segment) & FORBIDDEN_SEGMENT_CHARS
    if found_forbidden:
        raise BrowserError(
            ErrorCodes.INVALID_PATH_SEGMENT,
            segment=segment,
            forbidden=sorted(found_forbidden),
        )


def resolve_under_root(root: Path, *segments: str) -> Path:
    """
    세그먼트들을 root 하위 경로로 해석.

    존재 여부는 확인하지 않음 (호출자가 is_dir/is_file로 확인).

    Args:
        root: projects root
        *segments: 프로젝트명, 하위 폴더명, 파일명 순

    Returns:
        해석된 절대 경로

    Raises:
        BrowserError: INVALID_PATH_SEGMENT, PATH_OUTSIDE_ROOT
    """
    for segment in segments:
        validate_segment(segment)

    root_resolved = root.resolve()
    resolved = root_resolved.joinpath(*segments).resolve()

    if not resolved.is_relative_to(root_resolved):
        raise BrowserError(
            ErrorCodes.PATH_OUTSIDE_ROOT,
            root=str(root_resolved),
            path=str(resolved),
        )

    return resolved
