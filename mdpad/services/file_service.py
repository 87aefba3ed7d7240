from __future__ import annotations

import logging
from pathlib import Path

from PyQt6.QtCore import QIODevice, QSaveFile

from mdpad.domain.interfaces import IFileService

logger = logging.getLogger(__name__)

ENCODING = "UTF-8"


class FileService(IFileService):
    """UTF-8 document I/O; writes go through QSaveFile so a failed save never truncates."""

    def read_text(self, path: Path) -> str:
        # utf-8-sig drops a leading BOM written by other editors
        text = path.read_text(encoding="utf-8-sig")
        logger.info("Opened %s (%d chars)", path, len(text))
        return text

    def write_text_atomic(self, path: Path, text: str) -> None:
        sf = QSaveFile(str(path))
        if not sf.open(QIODevice.OpenModeFlag.WriteOnly):
            raise OSError(f"Cannot open for write: {path}: {sf.errorString()}")
        if sf.write(text.encode("utf-8")) < 0:
            sf.cancelWriting()
            raise OSError(f"Write failed for: {path}: {sf.errorString()}")
        if not sf.commit():
            raise OSError(f"Commit failed for: {path}: {sf.errorString()}")
        logger.info("Saved %s", path)
