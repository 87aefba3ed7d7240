"""
Cursor-relative Markdown edit commands.

Every function here is pure: it takes the current text and selection and
returns an EditResult. Applying the result to a buffer is the caller's job.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import PurePath
from types import ModuleType

from mdpad.domain.errors import UserInputError
from mdpad.domain.models import EditResult, SelectionRange
from mdpad.utils.constants import IMAGE_EXTENSIONS


@dataclass(frozen=True)
class Snippet:
    label: str
    prefix: str
    suffix: str = ""


SNIPPETS: dict[str, Snippet] = {
    "heading1": Snippet("Heading 1", "# "),
    "heading2": Snippet("Heading 2", "## "),
    "heading3": Snippet("Heading 3", "### "),
    "bold": Snippet("Bold", "**", "**"),
    "italic": Snippet("Italic", "*", "*"),
    "code_block": Snippet("Code Block", "```\n", "\n```"),
    "bullet_list": Snippet("Bullet List", "- "),
    "numbered_list": Snippet("Numbered List", "1. "),
}


@dataclass(frozen=True)
class LinkRequest:
    text: str
    url: str


def _check(text: str, sel: SelectionRange) -> None:
    if sel.end > len(text):
        raise ValueError(f"Selection {sel.start}+{sel.length} exceeds text length {len(text)}")


def surround(text: str, sel: SelectionRange, prefix: str, suffix: str) -> EditResult:
    """
    Replace the selection with prefix + selected + suffix.

    The new selection covers exactly the original selected text, so an empty
    selection leaves the caret right after the prefix.
    """
    _check(text, sel)
    selected = text[sel.start : sel.end]
    new_text = text[: sel.start] + prefix + selected + suffix + text[sel.end :]
    return EditResult(new_text, SelectionRange(sel.start + len(prefix), len(selected)))


def insert_prefix(text: str, sel: SelectionRange, prefix: str) -> EditResult:
    return surround(text, sel, prefix, "")


def wrap(text: str, sel: SelectionRange, marker: str) -> EditResult:
    return surround(text, sel, marker, marker)


def insert_code_block(text: str, sel: SelectionRange) -> EditResult:
    snip = SNIPPETS["code_block"]
    return surround(text, sel, snip.prefix, snip.suffix)


def apply_snippet(text: str, sel: SelectionRange, name: str) -> EditResult:
    snip = SNIPPETS[name]
    return surround(text, sel, snip.prefix, snip.suffix)


def insert_at_cursor(text: str, sel: SelectionRange, snippet: str) -> EditResult:
    """Replace the selection with snippet and collapse the caret after it."""
    _check(text, sel)
    new_text = text[: sel.start] + snippet + text[sel.end :]
    return EditResult(new_text, SelectionRange(sel.start + len(snippet), 0))


# ---------- links ----------


def validate_link_request(text: str, url: str) -> LinkRequest:
    if not url.strip():
        raise UserInputError("Please enter a URL.")
    return LinkRequest(text=text, url=url.strip())


def link_markdown(link_text: str, url: str) -> str:
    return f"[{link_text}]({url})"


def insert_link(text: str, sel: SelectionRange, request: LinkRequest) -> EditResult:
    # A non-empty selection wins over the text typed in the dialog.
    selected = text[sel.start : sel.end]
    label = selected if selected else request.text
    return insert_at_cursor(text, sel, link_markdown(label, request.url))


# ---------- images ----------


def is_image_file(path: str | os.PathLike[str]) -> bool:
    return PurePath(path).suffix.lower() in IMAGE_EXTENSIONS


def image_reference_path(
    image_path: str | os.PathLike[str],
    document_path: str | os.PathLike[str] | None,
    *,
    pathmod: ModuleType = os.path,
) -> str:
    """
    Express image_path relative to the document's directory when possible.

    Falls back to the absolute path when the document is unsaved or the two
    paths do not share a root (e.g. different Windows drives). Separators are
    always forward slashes.
    """
    image = os.fspath(image_path)
    result = image
    if document_path is not None:
        doc_dir = pathmod.dirname(pathmod.abspath(os.fspath(document_path)))
        try:
            result = pathmod.relpath(pathmod.abspath(image), doc_dir)
        except ValueError:
            result = image
    return result.replace("\\", "/")


def image_markdown(
    image_path: str | os.PathLike[str],
    document_path: str | os.PathLike[str] | None,
    *,
    pathmod: ModuleType = os.path,
) -> str:
    name = pathmod.basename(os.fspath(image_path))
    ref = image_reference_path(image_path, document_path, pathmod=pathmod)
    return f"![{name}]({ref})"


# ---------- caret position ----------


def cursor_position(text: str, offset: int) -> tuple[int, int]:
    """1-based (line, column) of offset in text."""
    offset = max(0, min(offset, len(text)))
    line = text.count("\n", 0, offset) + 1
    last_nl = text.rfind("\n", 0, offset)
    return line, offset - last_nl
