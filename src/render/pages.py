"""
HTML 페이지 렌더러: 뷰 모델 → HTML 문서 문자열.

규칙:
- 파일시스템/네트워크 접근 없음 (순수 함수)
- URL 경로 세그먼트 → 퍼센트 인코딩 (quote, safe="")
- HTML 텍스트(이름, 캡션, 파일 내용) → 이스케이프
- 설명이 있으면 /static 원본 링크, 없으면 안내문
"""

import html as html_escape_module
from urllib.parse import quote

from src.domain.constants import (
    DESCRIPTION_FILENAME,
    FILE_ROUTE_SEGMENT,
    NO_DESCRIPTION_MESSAGE,
    PROJECT_ROUTE_PREFIX,
    STATIC_ROUTE_PREFIX,
    SUBDIR_ROUTE_SEGMENT,
)
from src.domain.schemas import DirectoryView, FileView, Link

# =============================================================================
# Escaping / URL Helpers
# =============================================================================


def escape_html(text: str) -> str:
    """HTML 이스케이프."""
    return html_escape_module.escape(text)


def encode_segment(name: str) -> str:
    """URL 경로 세그먼트 인코딩 ("/"도 인코딩)."""
    return quote(name, safe="")


def index_url() -> str:
    return "/"


def project_url(project: str) -> str:
    return f"{PROJECT_ROUTE_PREFIX}/{encode_segment(project)}"


def subdir_url(project: str, subdir: str) -> str:
    return f"{project_url(project)}/{SUBDIR_ROUTE_SEGMENT}/{encode_segment(subdir)}"


def file_url(project: str, file_name: str, subdir: str | None = None) -> str:
    """
    파일 페이지 URL.

    Args:
        project: 프로젝트명
        file_name: 파일명
        subdir: 하위 폴더명 (프로젝트 직속 파일이면 None)
    """
    base = subdir_url(project, subdir) if subdir is not None else project_url(project)
    return f"{base}/{FILE_ROUTE_SEGMENT}/{encode_segment(file_name)}"


def static_url(*segments: str) -> str:
    """/static 원본 다운로드 URL."""
    encoded = "/".join(encode_segment(segment) for segment in segments)
    return f"{STATIC_ROUTE_PREFIX}/{encoded}"


def description_url(*segments: str) -> str:
    """폴더의 description.txt 원본 URL."""
    return static_url(*segments, DESCRIPTION_FILENAME)


# =============================================================================
# HTML Fragments
# =============================================================================


def build_link_html(link: Link) -> str:
    """<a> 태그 생성."""
    return f'<a href="{escape_html(link.href)}">{escape_html(link.label)}</a>'


def build_link_list_html(heading: str, links: list[Link]) -> str:
    """
    제목 + 링크 목록.

    링크가 없으면 섹션 자체를 생략 (빈 문자열).
    """
    if not links:
        return ""

    items = "".join(f"<li>{build_link_html(link)}</li>" for link in links)
    return f"<h2>{escape_html(heading)}</h2><ul>{items}</ul>"


def build_description_html(description_href: str | None) -> str:
    """폴더 설명 섹션: 원본 링크 또는 안내문."""
    if description_href is None:
        return f"<b>Description</b><p>{NO_DESCRIPTION_MESSAGE}</p>"

    link = Link(href=description_href, label=DESCRIPTION_FILENAME)
    return f"<b>Description</b> - {build_link_html(link)}"


def build_document(title: str, body: str) -> str:
    """공통 HTML 골격."""
    return f"""<!DOCTYPE html>
<html>
<head>
    <meta charset="UTF-8">
    <title>{escape_html(title)}</title>
</head>
<body>
{body}
</body>
</html>
"""


# =============================================================================
# Pages
# =============================================================================


def render_index(projects: list[str]) -> str:
    """프로젝트 목록 페이지."""
    items = "".join(
        f"<li>{build_link_html(Link(href=project_url(p), label=p))}</li>"
        for p in projects
    )
    body = f"""    <h1>Projects</h1>
    <ul>{items}</ul>"""
    return build_document("Projects", body)


def render_directory_page(view: DirectoryView) -> str:
    """
    프로젝트 / 하위 폴더 페이지.

    구성: 제목, 설명 섹션, 하위 폴더 목록, 파일 목록, 뒤로 가기 링크.
    """
    body = f"""    <h1>{escape_html(view.title)}</h1>
    <h2>Description</h2>
    {build_description_html(view.description_href)}
    {build_link_list_html("Subdirectories", view.subdirectories)}
    {build_link_list_html("Files", view.files)}
    {build_link_html(view.back)}"""
    return build_document(view.title, body)


def render_file_page(view: FileView) -> str:
    """
    파일 페이지.

    파일 내용은 <pre> 안에 이스케이프된 텍스트로 그대로 표시.
    """
    body = f"""    <h1>{escape_html(view.title)}</h1>
    <h2>Description</h2>
    <p>{escape_html(view.caption)}</p>
    <h2>Contents</h2>
    <pre>{escape_html(view.contents)}</pre>
    {build_link_html(view.back)}"""
    return build_document(view.title, body)
