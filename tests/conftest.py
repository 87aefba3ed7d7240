from __future__ import annotations

import os
from pathlib import Path

import pytest

os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

from PyQt6.QtWidgets import QApplication  # noqa: E402

from mdpad.services.file_service import FileService  # noqa: E402
from mdpad.services.markdown_renderer import MarkdownRenderer  # noqa: E402
from mdpad.services.ui.ports.messages import Answer, Question  # noqa: E402


# --- Fallback QApplication fixture (works with or without pytest-qt) ---
@pytest.fixture(scope="session")
def qapp():
    """Provide a QApplication for tests that need Qt.
    Creates one if not present; reuses existing otherwise.
    """
    app = QApplication.instance()
    created = False
    if app is None:
        app = QApplication([])
        created = True
    try:
        yield app
    finally:
        # Don't forcibly quit a shared app; only close if we created it here.
        if created:
            app.quit()


# --- Fakes shared across UI tests ---


class FakeMessages:
    """Records every message instead of opening a QMessageBox."""

    def __init__(self, answer: Answer = Answer.NO) -> None:
        self.answer = answer
        self.infos: list[tuple[str, str]] = []
        self.warnings: list[tuple[str, str]] = []
        self.errors: list[tuple[str, str]] = []
        self.questions: list[tuple[str, Question]] = []

    def info(self, parent, title: str, text: str) -> None:
        self.infos.append((title, text))

    def warning(self, parent, title: str, text: str) -> None:
        self.warnings.append((title, text))

    def error(self, parent, title: str, text: str) -> None:
        self.errors.append((title, text))

    def ask(self, parent, title: str, text: str, kind: Question = Question.YES_NO) -> Answer:
        self.questions.append((text, kind))
        return self.answer


class FakeDialogs:
    def __init__(self, open_path: Path | None = None, save_path: Path | None = None) -> None:
        self.open_path = open_path
        self.save_path = save_path
        self.open_calls = 0
        self.save_calls = 0

    def get_open_file(self, parent, caption, start_dir, filter_str) -> Path | None:
        self.open_calls += 1
        return self.open_path

    def get_save_file(self, parent, caption, start_path, filter_str) -> Path | None:
        self.save_calls += 1
        return self.save_path


# --- Other common fixtures ---


@pytest.fixture()
def messages() -> FakeMessages:
    return FakeMessages()


@pytest.fixture()
def dialogs() -> FakeDialogs:
    return FakeDialogs()


@pytest.fixture()
def file_service() -> FileService:
    return FileService()


@pytest.fixture()
def renderer() -> MarkdownRenderer:
    return MarkdownRenderer()
