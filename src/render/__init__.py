"""
Render layer: HTML 페이지 생성.

역할:
- 뷰 모델 (DirectoryView, FileView) → HTML 문서
- 링크 URL 인코딩 + HTML 이스케이프
"""

from .pages import (
    render_directory_page,
    render_file_page,
    render_index,
)

__all__ = [
    "render_index",
    "render_directory_page",
    "render_file_page",
]
