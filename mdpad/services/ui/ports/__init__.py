from __future__ import annotations

from .dialogs import Cancelled, Confirmed, DialogResult, IFileDialogService
from .messages import Answer, IMessageService, Question

__all__ = [
    "IFileDialogService",
    "IMessageService",
    "Question",
    "Answer",
    "Confirmed",
    "Cancelled",
    "DialogResult",
]
