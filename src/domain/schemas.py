"""
View schemas for the project browser.

모든 엔티티는 요청마다 파일시스템에서 새로 파생됨 (캐시 없음).
경로 세그먼트가 곧 식별자이자 표시 이름.
"""

from dataclasses import dataclass, field


@dataclass
class DirectoryListing:
    """디렉터리 직계 자식 목록 (하위 폴더 / 일반 파일)."""
    subdirectories: list[str] = field(default_factory=list)
    files: list[str] = field(default_factory=list)


@dataclass(frozen=True)
class Link:
    """네비게이션 링크. href는 이미 퍼센트 인코딩된 상태."""
    href: str
    label: str


@dataclass
class DirectoryView:
    """
    프로젝트/하위 폴더 페이지 뷰 모델.

    description_href가 None이면 "설명 없음" 안내문을 표시.
    """
    title: str
    back: Link
    description_href: str | None = None
    subdirectories: list[Link] = field(default_factory=list)
    files: list[Link] = field(default_factory=list)


@dataclass
class FileView:
    """파일 페이지 뷰 모델."""
    title: str
    back: Link
    caption: str = ""
    contents: str = ""
