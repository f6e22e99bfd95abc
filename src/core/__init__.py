"""
Core layer: 파일시스템 읽기.

역할:
- 경로 해석 + root 격리
- description.txt 파싱
- 디렉터리 목록
"""

from .description import find_caption, parse_free_text, read_description
from .listing import list_children, list_projects
from .paths import resolve_under_root, validate_segment

__all__ = [
    # description
    "read_description",
    "parse_free_text",
    "find_caption",
    # listing
    "list_children",
    "list_projects",
    # paths
    "resolve_under_root",
    "validate_segment",
]
