"""Domain layer: interfaces, errors and simple models (dataclasses)."""

from .errors import ImageSaveError, MdpadError, RenderError, UserInputError
from .interfaces import (
    IAppConfig,
    IConfigService,
    IFileService,
    IMarkdownRenderer,
    IPreviewSink,
    ITextBuffer,
)
from .models import Document, EditResult, SelectionRange
from .text_buffer import TextBuffer

__all__ = [
    "IMarkdownRenderer",
    "IPreviewSink",
    "ITextBuffer",
    "IFileService",
    "IConfigService",
    "IAppConfig",
    "Document",
    "EditResult",
    "SelectionRange",
    "TextBuffer",
    "MdpadError",
    "UserInputError",
    "ImageSaveError",
    "RenderError",
]
