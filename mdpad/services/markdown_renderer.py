# mdpad/services/markdown_renderer.py
from __future__ import annotations

import logging

import markdown

from mdpad.domain.errors import RenderError
from mdpad.domain.interfaces import IMarkdownRenderer
from mdpad.utils.constants import CSS_PREVIEW, HTML_TEMPLATE

logger = logging.getLogger(__name__)

# Fixed for the lifetime of the process.
EXTENSIONS = [
    "extra",  # tables, fenced code, footnotes, attr lists, def lists
    "sane_lists",
    "markdown_grid_tables",  # +---+ / +===+ grid tables
    "pymdownx.magiclink",  # autolinks
    "pymdownx.tasklist",
    "pymdownx.betterem",
    "pymdownx.tilde",  # ~~strike~~ and ~sub~
    "pymdownx.caret",  # ^^insert^^ and ^sup^
    "pymdownx.mark",  # ==mark==
]

EXTENSION_CONFIGS = {
    "pymdownx.tasklist": {"custom_checkbox": False, "clickable_checkbox": False},
    "pymdownx.magiclink": {"hide_protocol": False},
}


def wrap_html_document(fragment: str) -> str:
    """Wrap an HTML fragment in the standalone preview page (charset, light CSS)."""
    return HTML_TEMPLATE.format(css=CSS_PREVIEW, body=fragment)


class MarkdownRenderer(IMarkdownRenderer):
    """
    Converts Markdown to an HTML fragment.

    The Markdown instance is built once and reset between conversions, so the
    extension set cannot change after construction.
    """

    def __init__(self) -> None:
        self._md = markdown.Markdown(
            extensions=EXTENSIONS,
            extension_configs=EXTENSION_CONFIGS,
            output_format="html",
        )

    def to_html(self, markdown_text: str) -> str:
        try:
            return self._md.reset().convert(markdown_text)
        except Exception as e:
            logger.debug("Markdown conversion failed", exc_info=True)
            raise RenderError(f"Markdown conversion failed: {e}") from e

    def to_document(self, markdown_text: str) -> str:
        return wrap_html_document(self.to_html(markdown_text))
