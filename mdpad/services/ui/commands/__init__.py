from __future__ import annotations

from .enablement import can_copy, can_cut, can_paste, can_redo, can_undo
from .insert_text import InsertLink, InsertText
from .surround_selection import SurroundSelection

__all__ = [
    "SurroundSelection",
    "InsertText",
    "InsertLink",
    "can_undo",
    "can_redo",
    "can_cut",
    "can_copy",
    "can_paste",
]
