from __future__ import annotations
from collections.abc import Mapping
from pathlib import Path
from typing import Callable, Protocol, runtime_checkable

from mdpad.domain.models import EditResult, SelectionRange


class IMarkdownRenderer(Protocol):
    """Convert Markdown text to an HTML fragment (body markup only)."""

    def to_html(self, markdown_text: str) -> str: ...


@runtime_checkable
class IPreviewSink(Protocol):
    """
    Displays a complete HTML document.

    Callers check is_ready() first; a sink is not ready until its one-time
    initialization has finished, or while it is hidden.
    """

    def is_ready(self) -> bool: ...
    def display(self, html: str) -> None: ...
    def set_visible(self, visible: bool) -> None: ...
    def set_base_dir(self, directory: Path | None) -> None: ...


@runtime_checkable
class ITextBuffer(Protocol):
    """Text plus selection, as seen by edit commands and find/replace."""

    @property
    def text(self) -> str: ...
    @property
    def selection(self) -> SelectionRange: ...
    def selected_text(self) -> str: ...
    def set_text(self, text: str) -> None: ...
    def set_selection(self, start: int, length: int = 0) -> None: ...
    def replace_selection(self, new_text: str) -> None: ...
    def apply(self, result: EditResult) -> None: ...
    def subscribe(self, callback: Callable[[], None]) -> Callable[[], None]: ...


class IFileService(Protocol):
    """Read/write text files. Writes should be atomic when possible."""

    def read_text(self, path: Path) -> str: ...
    def write_text_atomic(self, path: Path, text: str) -> None: ...


class IConfigService(Protocol):
    """Read-only access to INI-style configuration."""

    def get(self, section: str, key: str, default: str | None = None) -> str | None: ...
    def get_bool(self, section: str, key: str, default: bool | None = None) -> bool | None: ...
    def as_dict(self) -> Mapping[str, Mapping[str, str]]: ...
    def app_version(self) -> str: ...


class IAppConfig(IConfigService, Protocol):
    """Configuration plus the resolved application version."""

    def get_version(self) -> str: ...
