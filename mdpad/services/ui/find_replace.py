from __future__ import annotations

import logging
import re
from dataclasses import dataclass
from enum import Enum, auto
from typing import Any

from PyQt6.QtWidgets import (
    QCheckBox,
    QDialog,
    QGridLayout,
    QHBoxLayout,
    QLabel,
    QLineEdit,
    QPushButton,
    QVBoxLayout,
)

from mdpad.domain.interfaces import ITextBuffer
from mdpad.domain.models import EditResult, SelectionRange
from mdpad.services.ui.ports.messages import IMessageService

logger = logging.getLogger(__name__)

# -------------------------
# Model / Service
# -------------------------


@dataclass(frozen=True)
class SearchOptions:
    text: str
    replace: str = ""
    case_sensitive: bool = False


class FindOutcome(Enum):
    FOUND = auto()
    NOT_FOUND = auto()
    REJECTED = auto()  # empty search text


def _index_of(haystack: str, needle: str, start: int, case_sensitive: bool) -> int:
    if case_sensitive:
        return haystack.find(needle, start)
    m = re.compile(re.escape(needle), re.IGNORECASE).search(haystack, start)
    return m.start() if m else -1


def _equals(a: str, b: str, case_sensitive: bool) -> bool:
    if case_sensitive:
        return a == b
    return re.fullmatch(re.escape(b), a, re.IGNORECASE) is not None


def replace_all_text(text: str, opt: SearchOptions) -> tuple[str, int]:
    """
    Single left-to-right pass replacing every match of opt.text.

    The next search resumes right after the inserted replacement, so text
    introduced by a replacement is never matched again in the same pass.
    """
    if not opt.text:
        return text, 0
    count = 0
    index = _index_of(text, opt.text, 0, opt.case_sensitive)
    while index >= 0:
        text = text[:index] + opt.replace + text[index + len(opt.text) :]
        count += 1
        index = _index_of(text, opt.text, index + len(opt.replace), opt.case_sensitive)
    return text, count


class FindReplaceEngine:
    """
    Forward search with wraparound over an ITextBuffer.

    Idle (last_found is None) searches from the end of the current selection;
    Positioned searches from one past the previous match.
    """

    def __init__(self, buffer: ITextBuffer) -> None:
        self._buf = buffer
        self.last_found: int | None = None

    @property
    def is_positioned(self) -> bool:
        return self.last_found is not None

    def reset(self) -> None:
        self.last_found = None

    def find_next(self, opt: SearchOptions) -> FindOutcome:
        if not opt.text:
            return FindOutcome.REJECTED

        text = self._buf.text
        if self.last_found is not None:
            start = self.last_found + 1
        else:
            sel = self._buf.selection
            start = sel.start + sel.length
        if start >= len(text):
            start = 0

        index = _index_of(text, opt.text, start, opt.case_sensitive)
        if index < 0 and start > 0:
            index = _index_of(text, opt.text, 0, opt.case_sensitive)

        if index < 0:
            self.last_found = None
            return FindOutcome.NOT_FOUND

        self._buf.set_selection(index, len(opt.text))
        focus = getattr(self._buf, "focus", None)
        if callable(focus):
            focus()
        self.last_found = index
        return FindOutcome.FOUND

    def replace(self, opt: SearchOptions) -> FindOutcome:
        if not opt.text:
            return FindOutcome.REJECTED
        selected = self._buf.selected_text()
        if selected and _equals(selected, opt.text, opt.case_sensitive):
            self._buf.replace_selection(opt.replace)
        return self.find_next(opt)

    def replace_all(self, opt: SearchOptions) -> int:
        if not opt.text:
            return 0
        new_text, count = replace_all_text(self._buf.text, opt)
        if count:
            self._buf.apply(EditResult(new_text, SelectionRange(0, 0)))
        return count


# -------------------------
# Dialog (View/Controller)
# -------------------------


class FindReplaceDialog(QDialog):
    """Non-modal find/replace dialog backed by FindReplaceEngine."""

    def __init__(self, buffer: ITextBuffer, messages: IMessageService, parent: Any = None):
        super().__init__(parent)
        self.setWindowTitle("Find / Replace")
        self.setModal(False)

        self._engine = FindReplaceEngine(buffer)
        self._messages = messages

        # Widgets
        self.find_edit = QLineEdit()
        self.replace_edit = QLineEdit()
        self.replace_label = QLabel("Replace:")
        self.case_cb = QCheckBox("Match case")

        self.find_next_btn = QPushButton("Find Next")
        self.replace_btn = QPushButton("Replace")
        self.replace_all_btn = QPushButton("Replace All")
        self.close_btn = QPushButton("Close")

        # Layout
        form = QGridLayout()
        form.addWidget(QLabel("Find:"), 0, 0)
        form.addWidget(self.find_edit, 0, 1, 1, 3)
        form.addWidget(self.replace_label, 1, 0)
        form.addWidget(self.replace_edit, 1, 1, 1, 3)

        opts = QHBoxLayout()
        opts.addWidget(self.case_cb)
        opts.addStretch(1)

        buttons = QHBoxLayout()
        buttons.addWidget(self.find_next_btn)
        buttons.addWidget(self.replace_btn)
        buttons.addWidget(self.replace_all_btn)
        buttons.addStretch(1)
        buttons.addWidget(self.close_btn)

        root = QVBoxLayout(self)
        root.addLayout(form)
        root.addLayout(opts)
        root.addLayout(buttons)

        # Signals
        self.find_next_btn.clicked.connect(self.find_next)
        self.replace_btn.clicked.connect(self.replace_one)
        self.replace_all_btn.clicked.connect(self.replace_all)
        self.close_btn.clicked.connect(self.close)
        self.find_edit.returnPressed.connect(self.find_next)
        self.replace_edit.returnPressed.connect(self.replace_one)

        self.find_edit.setPlaceholderText("Find text…")
        self.replace_edit.setPlaceholderText("Replace with…")

    @property
    def engine(self) -> FindReplaceEngine:
        return self._engine

    # Public API used by MainWindow wiring
    def show_find(self) -> None:
        self._start_session(replace_mode=False)
        self.find_edit.setFocus()
        self.find_edit.selectAll()

    def show_replace(self) -> None:
        self._start_session(replace_mode=True)
        self.replace_edit.setFocus()
        self.replace_edit.selectAll()

    def is_replace_mode(self) -> bool:
        return not self.replace_edit.isHidden()

    # Internal helpers
    def _start_session(self, *, replace_mode: bool) -> None:
        self._engine.reset()
        self.setWindowTitle("Find / Replace" if replace_mode else "Find")
        for w in (self.replace_label, self.replace_edit, self.replace_btn, self.replace_all_btn):
            w.setVisible(replace_mode)
        self.show()
        self.raise_()
        self.activateWindow()

    def _options(self) -> SearchOptions:
        return SearchOptions(
            text=self.find_edit.text(),
            replace=self.replace_edit.text(),
            case_sensitive=self.case_cb.isChecked(),
        )

    def _report(self, outcome: FindOutcome, opt: SearchOptions) -> FindOutcome:
        if outcome is FindOutcome.NOT_FOUND:
            self._messages.info(self, "Find", f"Could not find '{opt.text}'.")
        return outcome

    def find_next(self) -> FindOutcome:
        opt = self._options()
        return self._report(self._engine.find_next(opt), opt)

    def replace_one(self) -> FindOutcome:
        opt = self._options()
        return self._report(self._engine.replace(opt), opt)

    def replace_all(self) -> int:
        opt = self._options()
        if not opt.text:
            return 0
        count = self._engine.replace_all(opt)
        logger.info("Replaced %d occurrence(s)", count)
        if count:
            self._messages.info(self, "Replace All", f"Replaced {count} occurrence(s).")
        else:
            self._messages.info(self, "Find", f"Could not find '{opt.text}'.")
        return count
