"""Stateless can-execute predicates, evaluated each time a menu is about to show."""

from __future__ import annotations

from PyQt6.QtWidgets import QTextEdit


def can_undo(edit: QTextEdit) -> bool:
    return edit.document().isUndoAvailable()


def can_redo(edit: QTextEdit) -> bool:
    return edit.document().isRedoAvailable()


def can_cut(edit: QTextEdit) -> bool:
    return edit.textCursor().hasSelection() and not edit.isReadOnly()


def can_copy(edit: QTextEdit) -> bool:
    return edit.textCursor().hasSelection()


def can_paste(edit: QTextEdit) -> bool:
    return edit.canPaste()
