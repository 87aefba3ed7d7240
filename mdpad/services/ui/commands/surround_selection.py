from __future__ import annotations

from dataclasses import dataclass

from mdpad.domain.interfaces import ITextBuffer
from mdpad.services.editing import surround


@dataclass(frozen=True)
class SurroundSelection:
    """
    Command: replace the selection with prefix + selection + suffix.

    Afterwards exactly the original text is selected (a bare caret ends up
    between prefix and suffix). Markers are always added, never toggled off.
    """

    buffer: ITextBuffer
    prefix: str
    suffix: str = ""

    def execute(self) -> None:
        b = self.buffer
        b.apply(surround(b.text, b.selection, self.prefix, self.suffix))
