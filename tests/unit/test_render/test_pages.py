"""
test_pages.py - HTML 페이지 렌더러 테스트

검증 포인트:
1. URL 세그먼트 퍼센트 인코딩
2. 이름/캡션/파일 내용 HTML 이스케이프 (XSS)
3. 설명 링크 vs 안내문
4. 빈 목록 섹션 생략
"""

import html

from src.domain.constants import NO_DESCRIPTION_MESSAGE
from src.domain.schemas import DirectoryView, FileView, Link
from src.render.pages import (
    build_link_list_html,
    description_url,
    encode_segment,
    escape_html,
    file_url,
    project_url,
    render_directory_page,
    render_file_page,
    render_index,
    static_url,
    subdir_url,
)

# =============================================================================
# URL Helpers
# =============================================================================


class TestUrls:
    """URL 생성 테스트."""

    def test_encode_segment_encodes_slash_and_space(self):
        assert encode_segment("a b/c") == "a%20b%2Fc"

    def test_encode_segment_non_ascii(self):
        assert encode_segment("ü") == "%C3%BC"

    def test_project_url(self):
        assert project_url("My Project") == "/project/My%20Project"

    def test_subdir_url(self):
        assert subdir_url("P", "S 1") == "/project/P/subdir/S%201"

    def test_file_url_in_project(self):
        assert file_url("P", "a#b.txt") == "/project/P/file/a%23b.txt"

    def test_file_url_in_subdir(self):
        assert file_url("P", "f.txt", subdir="S") == "/project/P/subdir/S/file/f.txt"

    def test_static_and_description_urls(self):
        assert static_url("P", "a b.txt") == "/static/P/a%20b.txt"
        assert description_url("P") == "/static/P/description.txt"
        assert description_url("P", "S") == "/static/P/S/description.txt"


# =============================================================================
# Fragments
# =============================================================================


class TestFragments:
    """HTML 조각 테스트."""

    def test_escape_html(self):
        assert escape_html('<a href="x">&</a>') == "&lt;a href=&quot;x&quot;&gt;&amp;&lt;/a&gt;"

    def test_empty_link_list_is_omitted(self):
        assert build_link_list_html("Files", []) == ""

    def test_link_list_has_heading_and_items(self):
        result = build_link_list_html("Files", [Link("/a", "a"), Link("/b", "b")])

        assert result.startswith("<h2>Files</h2><ul>")
        assert result.count("<li>") == 2


# =============================================================================
# Pages
# =============================================================================


class TestRenderIndex:
    """프로젝트 목록 페이지 테스트."""

    def test_lists_projects(self):
        page = render_index(["Alpha", "My Project"])

        assert "<title>Projects</title>" in page
        assert '<a href="/project/Alpha">Alpha</a>' in page
        assert '<a href="/project/My%20Project">My Project</a>' in page

    def test_escapes_project_names(self):
        page = render_index(["<b>x</b>"])

        assert "<b>x</b>" not in page
        assert "&lt;b&gt;x&lt;/b&gt;" in page

    def test_empty_index(self):
        page = render_index([])

        assert "<ul></ul>" in page


class TestRenderDirectoryPage:
    """프로젝트/하위 폴더 페이지 테스트."""

    def _view(self, **kwargs) -> DirectoryView:
        defaults = {
            "title": "Alpha",
            "back": Link("/", "Back to Projects"),
        }
        defaults.update(kwargs)
        return DirectoryView(**defaults)

    def test_placeholder_without_description(self):
        page = render_directory_page(self._view())

        assert NO_DESCRIPTION_MESSAGE in page

    def test_link_with_description(self):
        page = render_directory_page(
            self._view(description_href="/static/Alpha/description.txt")
        )

        assert '<a href="/static/Alpha/description.txt">description.txt</a>' in page
        assert NO_DESCRIPTION_MESSAGE not in page

    def test_sections_only_when_non_empty(self):
        page = render_directory_page(self._view())

        assert "Subdirectories" not in page
        assert "<h2>Files</h2>" not in page

    def test_lists_subdirectories_and_files(self):
        page = render_directory_page(
            self._view(
                subdirectories=[Link("/project/Alpha/subdir/A", "A")],
                files=[Link("/project/Alpha/file/x.txt", "x.txt")],
            )
        )

        assert "<h2>Subdirectories</h2>" in page
        assert '<a href="/project/Alpha/subdir/A">A</a>' in page
        assert '<a href="/project/Alpha/file/x.txt">x.txt</a>' in page
        assert '<a href="/">Back to Projects</a>' in page

    def test_escapes_title(self):
        page = render_directory_page(self._view(title="<i>t</i>"))

        assert "<i>t</i>" not in page
        assert "<title>&lt;i&gt;t&lt;/i&gt;</title>" in page


class TestRenderFilePage:
    """파일 페이지 테스트."""

    def test_contents_round_trip(self):
        """이스케이프된 내용을 되돌리면 원문과 동일."""
        contents = "<b>bold</b> & \"q\" 'single'\n\ttab\nünïcödé\n"
        page = render_file_page(
            FileView(title="f.txt", back=Link("/project/P", "Back to Project"), contents=contents)
        )

        start = page.index("<pre>") + len("<pre>")
        end = page.index("</pre>")
        assert html.unescape(page[start:end]) == contents
        assert "<b>bold</b>" not in page

    def test_caption_rendered(self):
        page = render_file_page(
            FileView(title="f.txt", back=Link("/p", "Back"), caption="A & B")
        )

        assert "<p>A &amp; B</p>" in page

    def test_empty_caption(self):
        page = render_file_page(FileView(title="f.txt", back=Link("/p", "Back")))

        assert "<p></p>" in page
