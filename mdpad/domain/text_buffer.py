from __future__ import annotations

from typing import Callable

from mdpad.domain.models import EditResult, SelectionRange

ChangeCallback = Callable[[], None]


class TextBuffer:
    """
    In-memory document text with a single selection.

    Subscribers are called synchronously after every text mutation.
    Moving the selection alone does not notify.
    """

    def __init__(self, text: str = "") -> None:
        self._text = text
        self._selection = SelectionRange(0, 0)
        self._subscribers: list[ChangeCallback] = []

    # ---------- state ----------
    @property
    def text(self) -> str:
        return self._text

    @property
    def selection(self) -> SelectionRange:
        return self._selection

    def selected_text(self) -> str:
        sel = self._selection
        return self._text[sel.start : sel.end]

    # ---------- mutation ----------
    def set_text(self, text: str) -> None:
        self._text = text
        self._selection = SelectionRange(0, 0)
        self._notify()

    def set_selection(self, start: int, length: int = 0) -> None:
        sel = SelectionRange(start, length)
        if sel.end > len(self._text):
            raise ValueError(
                f"Selection {start}+{length} exceeds text length {len(self._text)}"
            )
        self._selection = sel

    def replace_selection(self, new_text: str) -> None:
        sel = self._selection
        self._text = self._text[: sel.start] + new_text + self._text[sel.end :]
        self._selection = SelectionRange(sel.start + len(new_text), 0)
        self._notify()

    def apply(self, result: EditResult) -> None:
        changed = result.text != self._text
        self._text = result.text
        self.set_selection(result.selection.start, result.selection.length)
        if changed:
            self._notify()

    # ---------- observers ----------
    def subscribe(self, callback: ChangeCallback) -> Callable[[], None]:
        self._subscribers.append(callback)

        def unsubscribe() -> None:
            if callback in self._subscribers:
                self._subscribers.remove(callback)

        return unsubscribe

    def _notify(self) -> None:
        for cb in list(self._subscribers):
            cb()
