from __future__ import annotations

import logging
from pathlib import Path

from PyQt6.QtCore import QObject, QUrl, pyqtSignal
from PyQt6.QtWidgets import QTextBrowser, QWidget

from mdpad.services.markdown_renderer import wrap_html_document

logger = logging.getLogger(__name__)


class TextBrowserPreviewSink(QObject):
    """QTextBrowser-backed preview. Ready as soon as it is constructed."""

    ready = pyqtSignal()

    def __init__(self, parent: QWidget | None = None) -> None:
        super().__init__(parent)
        self.widget = QTextBrowser(parent)
        self.widget.setOpenExternalLinks(True)
        self._visible = True

    def is_ready(self) -> bool:
        return self._visible

    def display(self, html: str) -> None:
        self.widget.setHtml(html)

    def set_visible(self, visible: bool) -> None:
        self._visible = visible
        self.widget.setVisible(visible)

    def set_base_dir(self, directory: Path | None) -> None:
        self.widget.setSearchPaths([str(directory)] if directory else [])


class WebPreviewSink(QObject):
    """
    QWebEngineView-backed preview (JS-capable, matches a real browser).

    The engine initializes asynchronously: an empty page is loaded once and
    `ready` fires when that load completes. Until then is_ready() is False.
    """

    ready = pyqtSignal()

    def __init__(self, parent: QWidget | None = None) -> None:
        super().__init__(parent)
        from PyQt6.QtWebEngineWidgets import QWebEngineView  # type: ignore

        self.widget = QWebEngineView(parent)
        self._ready = False
        self._visible = True
        self._base_url = QUrl()

        self.widget.loadFinished.connect(self._on_initial_load)
        self.widget.setHtml(wrap_html_document(""))

    def _on_initial_load(self, ok: bool) -> None:
        self.widget.loadFinished.disconnect(self._on_initial_load)
        if not ok:
            logger.warning("Preview engine reported a failed initial load")
        self._ready = True
        self.ready.emit()

    def is_ready(self) -> bool:
        return self._ready and self._visible

    def display(self, html: str) -> None:
        self.widget.setHtml(html, self._base_url)

    def set_visible(self, visible: bool) -> None:
        self._visible = visible
        self.widget.setVisible(visible)

    def set_base_dir(self, directory: Path | None) -> None:
        # Trailing slash so relative image paths resolve inside the directory.
        self._base_url = (
            QUrl.fromLocalFile(str(directory) + "/") if directory is not None else QUrl()
        )


def create_preview_sink(parent: QWidget | None = None) -> WebPreviewSink | TextBrowserPreviewSink:
    """
    Prefer Qt WebEngine, fall back to QTextBrowser.
    The WebEngine import is guarded so the app runs even if it isn't installed.
    """
    try:
        sink = WebPreviewSink(parent)
        logger.info("Using QWebEngineView for preview")
        return sink
    except Exception as e:
        logger.warning("QWebEngineView unavailable (%s); falling back to QTextBrowser", e)
        return TextBrowserPreviewSink(parent)
