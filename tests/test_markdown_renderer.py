# tests/test_markdown_renderer.py
import pytest

from mdpad.domain.errors import RenderError
from mdpad.services.markdown_renderer import MarkdownRenderer, wrap_html_document


@pytest.fixture
def r() -> MarkdownRenderer:
    return MarkdownRenderer()


def test_renderer_basic_fragment(r: MarkdownRenderer):
    html = r.to_html("# Title\n\nSome **bold** text.")
    assert "<h1" in html and "Title" in html
    assert "<strong>bold</strong>" in html
    # A fragment, not a page
    assert "<html" not in html.lower()


def test_renderer_code_block(r: MarkdownRenderer):
    html = r.to_html("```python\nprint('x')\n```")
    assert ("<pre" in html or "<code" in html) and "print" in html


def test_renderer_tables(r: MarkdownRenderer):
    html = r.to_html("| a | b |\n|---|---|\n| 1 | 2 |")
    assert "<table>" in html and "<td>1</td>" in html


def test_renderer_task_list(r: MarkdownRenderer):
    html = r.to_html("- [x] done\n- [ ] todo")
    assert 'type="checkbox"' in html


def test_renderer_autolink(r: MarkdownRenderer):
    html = r.to_html("Visit https://example.com today")
    assert 'href="https://example.com"' in html


@pytest.mark.parametrize(
    "md, tag",
    [("~~gone~~", "<del>"), ("==hi==", "<mark>"), ("^^ins^^", "<ins>"), ("H~2~O", "<sub>")],
)
def test_renderer_emphasis_variants(r: MarkdownRenderer, md: str, tag: str):
    assert tag in r.to_html(md)


def test_renderer_has_no_state_between_calls(r: MarkdownRenderer):
    first = r.to_html("Text[^1]\n\n[^1]: note")
    second = r.to_html("plain")
    assert "footnote" in first
    assert "footnote" not in second


def test_renderer_wraps_library_failures(monkeypatch, r: MarkdownRenderer):
    def boom(*_a, **_k):
        raise RuntimeError("bad")

    monkeypatch.setattr(r._md, "convert", boom)
    with pytest.raises(RenderError):
        r.to_html("x")


def test_wrap_html_document_is_standalone_light_page():
    page = wrap_html_document("<p>x</p>")
    assert page.lower().startswith("<!doctype html")
    assert '<meta charset="utf-8"' in page
    assert 'content="light"' in page
    assert "<style>" in page
    assert "<p>x</p>" in page


def test_to_document_wraps_fragment(r: MarkdownRenderer):
    page = r.to_document("*hi*")
    assert "<em>hi</em>" in page
    assert "<body>" in page


def test_renderer_grid_tables(r: MarkdownRenderer):
    md = (
        "+-----+-----+\n"
        "| a   | b   |\n"
        "+=====+=====+\n"
        "| 1   | 2   |\n"
        "+-----+-----+\n"
    )
    html = r.to_html(md)
    assert "<table" in html
    assert "a" in html and "2" in html
    # The header rule is table syntax, not ==mark==
    assert "<mark>" not in html
    assert "+-----+" not in html
