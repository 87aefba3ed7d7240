from __future__ import annotations

from datetime import datetime
from pathlib import Path

import pytest
from PyQt6.QtCore import QMimeData, QUrl
from PyQt6.QtGui import QColor, QImage

from mdpad.domain.errors import ImageSaveError
from mdpad.services.clipboard_images import ClipboardImageIngestor

FIXED = datetime(2024, 3, 5, 14, 7, 9)


def red_image() -> QImage:
    img = QImage(4, 4, QImage.Format.Format_RGB32)
    img.fill(QColor("red"))
    return img


@pytest.fixture
def ingestor(tmp_path: Path) -> ClipboardImageIngestor:
    return ClipboardImageIngestor(tmp_path / "fallback", clock=lambda: FIXED)


def test_screenshot_name_format():
    assert ClipboardImageIngestor.screenshot_name(FIXED) == "screenshot_20240305_140709.png"


def test_images_dir_next_to_saved_document(ingestor, tmp_path: Path):
    doc = tmp_path / "notes" / "doc.md"
    assert ingestor.images_dir(doc) == tmp_path / "notes" / "images"
    assert ingestor.images_dir(None) == ingestor.fallback_dir


def test_save_image_creates_folder_and_png(qapp, ingestor, tmp_path: Path):
    doc = tmp_path / "doc.md"
    out = ingestor.save_image(red_image(), doc)
    assert out == tmp_path / "images" / "screenshot_20240305_140709.png"
    assert out.read_bytes().startswith(b"\x89PNG")


def test_save_null_image_raises(qapp, ingestor):
    with pytest.raises(ImageSaveError):
        ingestor.save_image(QImage(), None)


def test_save_image_write_failure_is_image_save_error(qapp, tmp_path: Path):
    blocker = tmp_path / "blocker"
    blocker.write_text("not a directory", encoding="utf-8")
    ing = ClipboardImageIngestor(blocker / "sub", clock=lambda: FIXED)
    with pytest.raises(OSError):
        ing.save_image(red_image(), None)


def test_ingest_returns_relative_reference(qapp, ingestor, tmp_path: Path):
    md = ingestor.ingest(red_image(), tmp_path / "doc.md")
    assert md == "![screenshot_20240305_140709.png](images/screenshot_20240305_140709.png)"


def test_paste_action_for_image(qapp, ingestor, tmp_path: Path):
    mime = QMimeData()
    mime.setImageData(red_image())
    action = ingestor.paste_action(mime, tmp_path / "doc.md")
    assert action.kind == "image"
    assert action.snippets == [
        "![screenshot_20240305_140709.png](images/screenshot_20240305_140709.png)"
    ]


def test_paste_action_for_files_keeps_only_images(qapp, ingestor, tmp_path: Path):
    pic = tmp_path / "pics" / "cat.png"
    txt = tmp_path / "pics" / "readme.txt"
    mime = QMimeData()
    mime.setUrls([QUrl.fromLocalFile(str(pic)), QUrl.fromLocalFile(str(txt))])
    action = ingestor.paste_action(mime, tmp_path / "doc.md")
    assert action.kind == "files"
    assert action.snippets == ["![cat.png](pics/cat.png)"]


def test_paste_action_for_text(qapp, ingestor):
    mime = QMimeData()
    mime.setText("plain")
    action = ingestor.paste_action(mime, None)
    assert action.kind == "text"
    assert action.snippets == []
