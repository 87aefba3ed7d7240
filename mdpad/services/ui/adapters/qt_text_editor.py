from __future__ import annotations

from typing import Callable

from PyQt6.QtGui import QTextCursor
from PyQt6.QtWidgets import QTextEdit

from mdpad.domain.models import EditResult, SelectionRange


def _to_qt(text: str, offset: int) -> int:
    """Python code-point offset -> Qt (UTF-16) position."""
    return len(text[:offset].encode("utf-16-le")) // 2


def _from_qt(text: str, pos: int) -> int:
    """Qt (UTF-16) position -> Python code-point offset."""
    units = 0
    for i, ch in enumerate(text):
        if units >= pos:
            return i
        units += 2 if ord(ch) > 0xFFFF else 1
    return len(text)


class QtTextBuffer:
    """
    Narrow adapter exposing a QTextEdit as an ITextBuffer.

    Offsets are Python string offsets; conversion to Qt's UTF-16 positions
    happens here. apply() runs as one edit block, so every command is a single
    undo step in the editor.
    """

    def __init__(self, edit: QTextEdit):
        self._e = edit

    @property
    def widget(self) -> QTextEdit:
        return self._e

    @property
    def text(self) -> str:
        # toPlainText() folds U+00A0 into a space; raw text keeps it.
        raw = self._e.document().toRawText()
        return raw.replace("\u2029", "\n").replace("\u2028", "\n")

    @property
    def selection(self) -> SelectionRange:
        c = self._e.textCursor()
        text = self.text
        start = _from_qt(text, c.selectionStart())
        end = _from_qt(text, c.selectionEnd())
        return SelectionRange(start, end - start)

    def selected_text(self) -> str:
        sel = self.selection
        return self.text[sel.start : sel.end]

    def set_text(self, text: str) -> None:
        self._e.setPlainText(text)

    def set_selection(self, start: int, length: int = 0) -> None:
        text = self.text
        if start < 0 or length < 0 or start + length > len(text):
            raise ValueError(f"Selection {start}+{length} exceeds text length {len(text)}")
        c = self._e.textCursor()
        c.setPosition(_to_qt(text, start))
        c.setPosition(_to_qt(text, start + length), QTextCursor.MoveMode.KeepAnchor)
        self._e.setTextCursor(c)

    def replace_selection(self, new_text: str) -> None:
        c = self._e.textCursor()
        c.insertText(new_text)
        self._e.setTextCursor(c)

    def apply(self, result: EditResult) -> None:
        old = self.text
        new = result.text
        if new != old:
            # Only touch the changed middle so the caret/scroll state outside it survives.
            prefix = 0
            limit = min(len(old), len(new))
            while prefix < limit and old[prefix] == new[prefix]:
                prefix += 1
            suffix = 0
            while (
                suffix < limit - prefix
                and old[len(old) - 1 - suffix] == new[len(new) - 1 - suffix]
            ):
                suffix += 1

            c = QTextCursor(self._e.document())
            c.beginEditBlock()
            try:
                c.setPosition(_to_qt(old, prefix))
                c.setPosition(_to_qt(old, len(old) - suffix), QTextCursor.MoveMode.KeepAnchor)
                c.insertText(new[prefix : len(new) - suffix])
            finally:
                c.endEditBlock()
        self.set_selection(result.selection.start, result.selection.length)

    def focus(self) -> None:
        self._e.setFocus()

    def subscribe(self, callback: Callable[[], None]) -> Callable[[], None]:
        self._e.textChanged.connect(callback)

        def unsubscribe() -> None:
            self._e.textChanged.disconnect(callback)

        return unsubscribe
