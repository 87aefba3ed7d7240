from __future__ import annotations

from pathlib import Path

from mdpad.domain.interfaces import IFileService, IMarkdownRenderer
from mdpad.services.clipboard_images import ClipboardImageIngestor
from mdpad.services.config.app_config import AppConfig, build_app_config
from mdpad.services.file_service import FileService
from mdpad.services.markdown_renderer import MarkdownRenderer
from mdpad.services.ui.adapters import QtFileDialogService, QtMessageService
from mdpad.services.ui.main_window import MainWindow
from mdpad.services.ui.ports.dialogs import IFileDialogService
from mdpad.services.ui.ports.messages import IMessageService
from mdpad.utils.constants import APP_NAME


class Container:
    """
    Lightweight DI container:
      - Wires default services if not provided
      - Builds the clipboard image ingestor from the configured fallback directory
      - Hands everything to the thin MainWindow
    """

    def __init__(
        self,
        config: AppConfig | None = None,
        renderer: IMarkdownRenderer | None = None,
        files: IFileService | None = None,
        dialogs: IFileDialogService | None = None,
        messages: IMessageService | None = None,
        ingestor: ClipboardImageIngestor | None = None,
    ) -> None:
        self.config: AppConfig = config or build_app_config()
        self.renderer: IMarkdownRenderer = renderer or MarkdownRenderer()
        self.file_service: IFileService = files or FileService()
        self.dialogs: IFileDialogService = dialogs or QtFileDialogService()
        self.messages: IMessageService = messages or QtMessageService()
        self.ingestor: ClipboardImageIngestor = ingestor or ClipboardImageIngestor(
            self.config.images_fallback_dir()
        )

    @staticmethod
    def default(*, explicit_ini: Path | None = None) -> Container:
        return Container(config=build_app_config(explicit_ini=explicit_ini))

    # ---------- UI factories ----------

    def build_main_window(
        self,
        *,
        start_path: Path | None = None,
        app_title: str = APP_NAME,
        **window_kwargs,
    ) -> MainWindow:
        """Create the Qt MainWindow with every service injected."""
        return MainWindow(
            renderer=self.renderer,
            file_service=self.file_service,
            messages=self.messages,
            dialogs=self.dialogs,
            ingestor=self.ingestor,
            config=self.config,
            start_path=start_path,
            app_title=app_title,
            **window_kwargs,
        )
