from __future__ import annotations

from typing import Any

from PyQt6.QtWidgets import (
    QDialog,
    QGridLayout,
    QHBoxLayout,
    QLabel,
    QLineEdit,
    QPushButton,
    QVBoxLayout,
)

from mdpad.domain.errors import UserInputError
from mdpad.services.editing import LinkRequest, validate_link_request
from mdpad.services.ui.ports.dialogs import Cancelled, Confirmed, DialogResult
from mdpad.services.ui.ports.messages import IMessageService


class CreateLinkDialog(QDialog):
    """Modal dialog collecting link text and URL. The URL is mandatory."""

    def __init__(self, messages: IMessageService, parent: Any = None):
        super().__init__(parent)
        self.setWindowTitle("Insert Link")
        self.setModal(True)
        self._messages = messages
        self._request: LinkRequest | None = None

        # Widgets
        self.link_title = QLineEdit()
        self.url_edit = QLineEdit()
        self.url_edit.setPlaceholderText("https://")

        self.create_link_btn = QPushButton("Insert")
        self.create_link_btn.setDefault(True)
        self.close_btn = QPushButton("Cancel")

        # Layout
        form = QGridLayout()
        form.addWidget(QLabel("Link Text:"), 0, 0)
        form.addWidget(self.link_title, 0, 1, 1, 3)
        form.addWidget(QLabel("Link URL:"), 1, 0)
        form.addWidget(self.url_edit, 1, 1, 1, 3)

        buttons = QHBoxLayout()
        buttons.addStretch(1)
        buttons.addWidget(self.create_link_btn)
        buttons.addWidget(self.close_btn)

        root = QVBoxLayout(self)
        root.addLayout(form)
        root.addLayout(buttons)

        # Signals
        self.create_link_btn.clicked.connect(self.accept)
        self.close_btn.clicked.connect(self.reject)

        self.link_title.setFocus()

    def accept(self) -> None:
        try:
            self._request = validate_link_request(self.link_title.text(), self.url_edit.text())
        except UserInputError as e:
            # Stay open; the user fixes the URL or cancels.
            self._messages.warning(self, "Insert Link", str(e))
            self.url_edit.setFocus()
            return
        super().accept()

    def result_value(self) -> DialogResult[LinkRequest]:
        if self.result() == QDialog.DialogCode.Accepted and self._request is not None:
            return Confirmed(self._request)
        return Cancelled()


def ask_link(parent: Any, messages: IMessageService) -> DialogResult[LinkRequest]:
    """Run the link dialog modally and return Confirmed(LinkRequest) or Cancelled()."""
    dlg = CreateLinkDialog(messages, parent)
    dlg.exec()
    return dlg.result_value()
