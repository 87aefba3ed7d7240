from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass, field
from datetime import datetime
from pathlib import Path
from typing import Literal

from PyQt6.QtCore import QMimeData
from PyQt6.QtGui import QImage, QPixmap

from mdpad.domain.errors import ImageSaveError
from mdpad.services.editing import image_markdown, is_image_file
from mdpad.utils.constants import IMAGES_DIR_NAME, SCREENSHOT_NAME_FORMAT

logger = logging.getLogger(__name__)

PasteKind = Literal["image", "files", "text"]


def _as_image(data: object) -> QImage:
    if isinstance(data, QImage):
        return data
    if isinstance(data, QPixmap):
        return data.toImage()
    return QImage()


@dataclass(frozen=True)
class PasteAction:
    """
    What a paste should do.

    "text" means the caller performs its normal plain-text paste; the other
    kinds carry markdown snippets to insert at the cursor, in order.
    """

    kind: PasteKind
    snippets: list[str] = field(default_factory=list)


class ClipboardImageIngestor:
    """Saves clipboard bitmaps as PNG files and turns them into image references."""

    def __init__(
        self,
        fallback_dir: Path,
        *,
        clock: Callable[[], datetime] = datetime.now,
    ) -> None:
        self._fallback_dir = fallback_dir
        self._clock = clock

    @property
    def fallback_dir(self) -> Path:
        return self._fallback_dir

    def images_dir(self, document_path: Path | None) -> Path:
        if document_path is not None:
            return document_path.parent / IMAGES_DIR_NAME
        return self._fallback_dir

    @staticmethod
    def screenshot_name(now: datetime) -> str:
        return now.strftime(SCREENSHOT_NAME_FORMAT)

    def save_image(self, image: QImage, document_path: Path | None) -> Path:
        """
        Write image as PNG under the images directory and return its path.

        A capture within the same second as a previous one overwrites it.
        """
        if image.isNull():
            raise ImageSaveError("Clipboard image is empty")
        target_dir = self.images_dir(document_path)
        try:
            target_dir.mkdir(parents=True, exist_ok=True)
        except OSError as e:
            raise ImageSaveError(f"Cannot create image folder {target_dir}: {e}") from e

        out = target_dir / self.screenshot_name(self._clock())
        if not image.save(str(out), "PNG"):
            raise ImageSaveError(f"Failed to write image: {out}")
        logger.info("Saved clipboard image to %s", out)
        return out

    def ingest(self, image: QImage, document_path: Path | None) -> str:
        path = self.save_image(image, document_path)
        return image_markdown(path, document_path)

    def paste_action(self, mime: QMimeData, document_path: Path | None) -> PasteAction:
        """Image -> save and reference; local files -> reference the images; else text."""
        if mime.hasImage():
            image = _as_image(mime.imageData())
            return PasteAction("image", [self.ingest(image, document_path)])

        if mime.hasUrls():
            local = [u.toLocalFile() for u in mime.urls() if u.isLocalFile()]
            if local:
                snippets = [image_markdown(p, document_path) for p in local if is_image_file(p)]
                return PasteAction("files", snippets)

        return PasteAction("text")
