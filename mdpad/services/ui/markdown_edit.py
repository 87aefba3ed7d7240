from __future__ import annotations

from typing import Callable

from PyQt6.QtCore import QMimeData
from PyQt6.QtGui import QDropEvent
from PyQt6.QtWidgets import QTextEdit, QWidget

MimeHandler = Callable[[QMimeData], bool]


class MarkdownTextEdit(QTextEdit):
    """
    Plain-text editor whose paste/drop path can be intercepted.

    Ctrl+V, the Paste action and unclaimed drops end in insertFromMimeData;
    when the installed handler returns True the data was consumed and the
    default plain-text insertion is skipped.

    Drops are offered to a separate handler first, so a dropped document can
    be opened instead of being treated like pasted data.
    """

    def __init__(self, parent: QWidget | None = None) -> None:
        super().__init__(parent)
        self.setAcceptRichText(False)
        self.setTabStopDistance(4 * self.fontMetrics().horizontalAdvance(" "))
        self._mime_handler: MimeHandler | None = None
        self._drop_handler: MimeHandler | None = None

    def set_mime_handler(self, handler: MimeHandler | None) -> None:
        self._mime_handler = handler

    def set_drop_handler(self, handler: MimeHandler | None) -> None:
        self._drop_handler = handler

    def canInsertFromMimeData(self, source: QMimeData) -> bool:
        return source.hasImage() or source.hasUrls() or super().canInsertFromMimeData(source)

    def insertFromMimeData(self, source: QMimeData) -> None:
        if self._mime_handler is not None and self._mime_handler(source):
            return
        super().insertFromMimeData(source)

    def dropEvent(self, e: QDropEvent) -> None:
        if self._drop_handler is not None and self._drop_handler(e.mimeData()):
            e.acceptProposedAction()
            return
        # Falls through to insertFromMimeData at the drop position.
        super().dropEvent(e)
