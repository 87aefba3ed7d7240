from __future__ import annotations

from typing import Any

from PyQt6.QtWidgets import QMessageBox

from mdpad.services.ui.ports.messages import Answer, IMessageService, Question

_BUTTONS = {
    Question.YES_NO: QMessageBox.StandardButton.Yes | QMessageBox.StandardButton.No,
    Question.YES_NO_CANCEL: QMessageBox.StandardButton.Yes
    | QMessageBox.StandardButton.No
    | QMessageBox.StandardButton.Cancel,
}


class QtMessageService(IMessageService):
    """Qt-backed implementation for message dialogs."""

    def info(self, parent: Any | None, title: str, text: str) -> None:
        QMessageBox.information(parent, title, text)

    def warning(self, parent: Any | None, title: str, text: str) -> None:
        QMessageBox.warning(parent, title, text)

    def error(self, parent: Any | None, title: str, text: str) -> None:
        QMessageBox.critical(parent, title, text)

    def ask(
        self,
        parent: Any | None,
        title: str,
        text: str,
        kind: Question = Question.YES_NO,
    ) -> Answer:
        resp = QMessageBox.question(parent, title, text, _BUTTONS[kind])
        if resp == QMessageBox.StandardButton.Yes:
            return Answer.YES
        if resp == QMessageBox.StandardButton.No or kind is Question.YES_NO:
            return Answer.NO
        return Answer.CANCEL
