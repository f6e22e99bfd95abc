"""
Application Services.

역할:
- browse: 요청 경로 → 프로젝트/폴더/파일 뷰 모델
"""

from .browse import BrowseService

__all__ = [
    "BrowseService",
]
