from __future__ import annotations
from dataclasses import dataclass
from pathlib import Path


@dataclass
class Document:
    path: Path | None
    text: str
    modified: bool = False
    encoding: str = "UTF-8"


@dataclass(frozen=True)
class SelectionRange:
    """Selection as (start offset, length). A zero length is a plain caret."""

    start: int = 0
    length: int = 0

    def __post_init__(self) -> None:
        if self.start < 0 or self.length < 0:
            raise ValueError(f"Invalid selection: start={self.start}, length={self.length}")

    @property
    def end(self) -> int:
        return self.start + self.length

    @property
    def collapsed(self) -> bool:
        return self.length == 0


@dataclass(frozen=True)
class EditResult:
    """New text plus the selection that should follow an edit command."""

    text: str
    selection: SelectionRange
