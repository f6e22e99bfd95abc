"""
FastAPI Routes.

페이지 라우트 (HTML)
"""

from . import projects

__all__ = ["projects"]
