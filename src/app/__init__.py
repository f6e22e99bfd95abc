"""
App layer: HTTP 서버 (FastAPI).

역할:
- 라우트 → 서비스 → 렌더러 연결
- /static 원본 다운로드 마운트
- ⚠️ 쓰기 기능 없음 (읽기 전용)
"""
