"""Concrete service implementations."""

from .clipboard_images import ClipboardImageIngestor
from .file_service import FileService
from .markdown_renderer import MarkdownRenderer
from .preview_scheduler import PreviewScheduler

__all__ = ["ClipboardImageIngestor", "FileService", "MarkdownRenderer", "PreviewScheduler"]
