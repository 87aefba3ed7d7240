from __future__ import annotations

from dataclasses import dataclass

from mdpad.domain.interfaces import ITextBuffer
from mdpad.services.editing import LinkRequest, insert_at_cursor, insert_link


@dataclass(frozen=True)
class InsertText:
    """Command: replace the selection with `text` and leave the caret after it."""

    buffer: ITextBuffer
    text: str

    def execute(self) -> None:
        b = self.buffer
        b.apply(insert_at_cursor(b.text, b.selection, self.text))


@dataclass(frozen=True)
class InsertLink:
    """Command: insert [text](url); a non-empty selection supplies the text."""

    buffer: ITextBuffer
    request: LinkRequest

    def execute(self) -> None:
        b = self.buffer
        b.apply(insert_link(b.text, b.selection, self.request))
