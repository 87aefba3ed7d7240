from __future__ import annotations

import logging
from collections.abc import Callable

from PyQt6.QtCore import QObject, QTimer, pyqtSignal

from mdpad.domain.interfaces import IMarkdownRenderer, IPreviewSink
from mdpad.services.markdown_renderer import wrap_html_document
from mdpad.utils.constants import PREVIEW_DEBOUNCE_MS

logger = logging.getLogger(__name__)


class PreviewScheduler(QObject):
    """
    Debounces preview updates.

    Every text change restarts one single-shot timer; the render runs when the
    timer finally fires, on the thread that owns this object (the GUI thread).
    Only the latest text matters: there is no queue of pending renders.
    """

    status_message = pyqtSignal(str)
    rendered = pyqtSignal()

    def __init__(
        self,
        renderer: IMarkdownRenderer,
        sink: IPreviewSink,
        text_source: Callable[[], str],
        *,
        interval_ms: int = PREVIEW_DEBOUNCE_MS,
        parent: QObject | None = None,
    ) -> None:
        super().__init__(parent)
        self._renderer = renderer
        self._sink = sink
        self._text_source = text_source

        self._timer = QTimer(self)
        self._timer.setSingleShot(True)
        self._timer.setInterval(interval_ms)
        self._timer.timeout.connect(self._on_timer_fired)

    @property
    def interval_ms(self) -> int:
        return self._timer.interval()

    @property
    def is_pending(self) -> bool:
        return self._timer.isActive()

    def on_text_changed(self) -> None:
        # start() on an active timer restarts it
        self._timer.start()

    def render_now(self) -> None:
        self._timer.stop()
        self.render()

    def cancel(self) -> None:
        self._timer.stop()

    def render(self) -> None:
        if not self._sink.is_ready():
            logger.debug("Preview not ready; dropping render request")
            return
        try:
            fragment = self._renderer.to_html(self._text_source())
            self._sink.display(wrap_html_document(fragment))
        except Exception as e:
            logger.exception("Preview update failed")
            self.status_message.emit(f"Preview error: {e}")
            return
        self.rendered.emit()

    def _on_timer_fired(self) -> None:
        self.render()
