from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Any, Generic, Protocol, TypeVar, Union, runtime_checkable

T = TypeVar("T")


@dataclass(frozen=True)
class Confirmed(Generic[T]):
    """A modal dialog was accepted; payload holds what the user entered."""

    payload: T


@dataclass(frozen=True)
class Cancelled:
    """A modal dialog was dismissed."""


DialogResult = Union[Confirmed[T], Cancelled]


@runtime_checkable
class IFileDialogService(Protocol):
    """
    Abstract UI port for file dialogs. Keeps the rest of the app decoupled from Qt.
    """

    def get_open_file(
            self,
            parent: Any | None,
            caption: str,
            start_dir: str | None,
            filter_str: str,
    ) -> Path | None:
        """Return a selected file path or None if cancelled."""
        ...

    def get_save_file(
            self,
            parent: Any | None,
            caption: str,
            start_path: str | None,
            filter_str: str,
    ) -> Path | None:
        """Return a selected destination path or None if cancelled."""
        ...
