#!/usr/bin/env python3
"""
serve.py - Project Browser 서버 실행 스크립트

설정 우선순위 (높은 순):
1. 명령행 옵션 (--root, --host, --port)
2. 환경 변수 PROJECT_BROWSER_ROOT
3. default.yaml (또는 --config로 지정한 파일)

사용법:
    # 기본 실행 (default.yaml, ./Projects, 포트 3000)
    uv run python scripts/serve.py

    # 다른 폴더 공개
    uv run python scripts/serve.py --root /srv/projects --port 8080
"""

import argparse
import logging
import sys
from pathlib import Path

# 프로젝트 루트를 path에 추가
sys.path.insert(0, str(Path(__file__).parent.parent))

import uvicorn

from src.app.main import (
    PROJECT_ROOT,
    create_app,
    get_server_settings,
    load_config,
    resolve_projects_root,
)
from src.domain.errors import BrowserError

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="읽기 전용 프로젝트 폴더 브라우저",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=__doc__,
    )
    parser.add_argument(
        "--config",
        type=str,
        default=str(PROJECT_ROOT / "default.yaml"),
        help="설정 파일 경로 (기본: default.yaml)",
    )
    parser.add_argument(
        "--root",
        type=str,
        help="projects root 디렉터리 (기본: 설정값)",
    )
    parser.add_argument("--host", type=str, help="바인딩 호스트")
    parser.add_argument("--port", type=int, help="바인딩 포트")
    parser.add_argument(
        "--log-level",
        type=str,
        help="로그 레벨 (DEBUG, INFO, WARNING, ...)",
    )
    return parser


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)

    config_path = Path(args.config)
    config = load_config(config_path)

    log_level = args.log_level or (config.get("logging") or {}).get("level", "INFO")
    logging.basicConfig(
        level=log_level.upper(),
        format="%(asctime)s [%(levelname)s] %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )

    if args.root:
        projects_root = Path(args.root).expanduser().resolve()
    else:
        projects_root = resolve_projects_root(config, base_dir=config_path.parent)

    host, port = get_server_settings(config)
    host = args.host if args.host is not None else host
    port = args.port if args.port is not None else port

    try:
        app = create_app(config=config, projects_root=projects_root)
    except BrowserError as e:
        logger.error(f"Cannot start server: {e}")
        return 1

    logger.info(f"Server is running on http://{host}:{port}")
    uvicorn.run(app, host=host, port=port, log_level=log_level.lower())
    return 0


if __name__ == "__main__":
    sys.exit(main())
