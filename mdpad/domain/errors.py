from __future__ import annotations


class MdpadError(Exception):
    """Base class for application errors."""


class UserInputError(MdpadError, ValueError):
    """Input rejected inline (blank URL, empty search text)."""


class ImageSaveError(MdpadError, OSError):
    """An image could not be written to disk."""


class RenderError(MdpadError, RuntimeError):
    """Markdown conversion failed."""
