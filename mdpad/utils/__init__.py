"""App constants and utilities."""

from .constants import (
    APP_NAME,
    APP_ORG,
    CSS_PREVIEW,
    HTML_TEMPLATE,
    IMAGE_EXTENSIONS,
    IMAGES_DIR_NAME,
    MARKDOWN_GUIDE,
    PREVIEW_DEBOUNCE_MS,
    SCREENSHOT_NAME_FORMAT,
    STATUS_TIMEOUT_MS,
)

__all__ = [
    "APP_ORG",
    "APP_NAME",
    "CSS_PREVIEW",
    "HTML_TEMPLATE",
    "IMAGE_EXTENSIONS",
    "IMAGES_DIR_NAME",
    "MARKDOWN_GUIDE",
    "PREVIEW_DEBOUNCE_MS",
    "SCREENSHOT_NAME_FORMAT",
    "STATUS_TIMEOUT_MS",
]
