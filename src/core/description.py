"""
description.txt 읽기: 자유 텍스트 모드 / 캡션 모드.

파일 형식 (라인 단위):
- "=" 없는 라인 → 폴더 설명 (자유 텍스트)
- "<파일명>=<캡션>" 라인 → 해당 파일의 캡션

규칙:
- 파일 없음 → None (정상 상태, 로그 없음)
- 그 외 읽기 실패 → 경고 로그 후 None (페이지 렌더링은 계속)
- 파일명은 정규식이 아닌 문자열 접두사로 비교 (메타문자 그대로 매칭)
"""

import logging
from pathlib import Path

from src.domain.constants import CAPTION_SEPARATOR

logger = logging.getLogger(__name__)


def read_text_safe(path: Path) -> str | None:
    """
    텍스트 파일을 읽되 실패 시 None.

    Args:
        path: 읽을 파일 경로

    Returns:
        파일 내용 (없거나 읽기 실패 시 None)
    """
    try:
        return path.read_text(encoding="utf-8")
    except FileNotFoundError:
        return None
    except (OSError, UnicodeDecodeError) as e:
        logger.warning(f"Failed to read description file {path}: {e}")
        return None


def parse_free_text(text: str) -> str | None:
    """
    자유 텍스트 모드: "="가 없는 라인만 줄바꿈으로 다시 연결.

    결과가 빈 문자열이면 None.
    """
    lines = [line for line in text.split("\n") if CAPTION_SEPARATOR not in line]
    description = "\n".join(lines)
    return description or None


def find_caption(text: str, file_name: str) -> str | None:
    """
    캡션 모드: "<file_name>=" 로 시작하는 첫 라인의 값.

    Args:
        text: description.txt 내용
        file_name: 캡션을 찾을 파일명 (정확히 일치)

    Returns:
        앞뒤 공백을 제거한 캡션 (없으면 None)
    """
    prefix = f"{file_name}{CAPTION_SEPARATOR}"
    for line in text.split("\n"):
        if line.startswith(prefix):
            return line[len(prefix):].strip()
    return None


def read_description(
    sidecar_path: Path,
    target_file_name: str | None = None,
) -> str | None:
    """
    description.txt 읽기.

    Args:
        sidecar_path: description.txt 경로
        target_file_name: 지정 시 캡션 모드, 미지정 시 자유 텍스트 모드

    Returns:
        설명 또는 캡션 (없으면 None)
    """
    text = read_text_safe(sidecar_path)
    if not text:
        return None

    if target_file_name is not None:
        return find_caption(text, target_file_name)

    return parse_free_text(text)
