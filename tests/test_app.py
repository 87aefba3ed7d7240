from __future__ import annotations

import logging
from pathlib import Path

import mdpad.app as app_mod


# ----------------------------
# Fakes (Qt)
# ----------------------------


class FakeQGuiApplication:
    set_attribute_calls: list[tuple[object, bool]] = []

    @classmethod
    def setAttribute(cls, attr: object, on: bool) -> None:
        cls.set_attribute_calls.append((attr, on))


class FakeQApplication:
    org_name: str | None = None
    app_name: str | None = None

    def __init__(self, argv: list[str]) -> None:
        self.argv = list(argv)
        self.exec_called = 0

    @classmethod
    def setOrganizationName(cls, name: str) -> None:
        cls.org_name = name

    @classmethod
    def setApplicationName(cls, name: str) -> None:
        cls.app_name = name

    def exec(self) -> int:
        self.exec_called += 1
        return 0


# ----------------------------
# Fakes (Container)
# ----------------------------


class FakeWindow:
    def __init__(self) -> None:
        self.shown = False

    def show(self) -> None:
        self.shown = True


class FakeConfig:
    loaded_from = None

    def log_level(self) -> int:
        return logging.WARNING

    def get_version(self) -> str:
        return "1.0.0"


class FakeContainer:
    def __init__(self) -> None:
        self.config = FakeConfig()
        self.window = FakeWindow()
        self.build_args = None

    def build_main_window(self, *, start_path=None, app_title: str = "MarkdownPad"):
        self.build_args = {"start_path": start_path, "app_title": app_title}
        return self.window


def _patch_qt(monkeypatch) -> None:
    FakeQGuiApplication.set_attribute_calls = []
    monkeypatch.setattr(app_mod, "QGuiApplication", FakeQGuiApplication)
    monkeypatch.setattr(app_mod, "QApplication", FakeQApplication)


# ----------------------------
# Tests
# ----------------------------


def test_run_app_opens_argv_path_and_shows_window(monkeypatch, tmp_path: Path) -> None:
    _patch_qt(monkeypatch)
    configured: list[int] = []
    monkeypatch.setattr(app_mod, "configure_logging", configured.append)

    container = FakeContainer()
    monkeypatch.setattr(app_mod.Container, "default", staticmethod(lambda: container))

    file_to_open = tmp_path / "doc.md"
    rc = app_mod.run_app(["mdpad", str(file_to_open)])

    assert rc == 0
    assert container.window.shown is True
    assert container.build_args == {"start_path": file_to_open, "app_title": app_mod.APP_NAME}
    assert configured == [logging.WARNING]

    assert FakeQApplication.org_name == app_mod.APP_ORG
    assert FakeQApplication.app_name == app_mod.APP_NAME
    assert FakeQGuiApplication.set_attribute_calls, "QGuiApplication.setAttribute was not called"


def test_run_app_without_argument_starts_untitled(monkeypatch) -> None:
    _patch_qt(monkeypatch)
    monkeypatch.setattr(app_mod, "configure_logging", lambda level: None)
    container = FakeContainer()
    monkeypatch.setattr(app_mod.Container, "default", staticmethod(lambda: container))

    assert app_mod.run_app(["mdpad"]) == 0
    assert container.build_args["start_path"] is None


def test_configure_logging_installs_one_formatted_handler(monkeypatch) -> None:
    calls: list[dict] = []
    monkeypatch.setattr(app_mod.logging, "basicConfig", lambda **kw: calls.append(kw))

    app_mod.configure_logging(logging.DEBUG)

    assert calls == [{"level": logging.DEBUG, "format": app_mod.LOG_FORMAT, "force": True}]
