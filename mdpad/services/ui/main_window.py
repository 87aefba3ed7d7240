from __future__ import annotations

import logging
from collections.abc import Callable
from pathlib import Path

from PyQt6.QtCore import QMimeData, Qt
from PyQt6.QtGui import QAction, QKeySequence
from PyQt6.QtWidgets import (
    QLabel,
    QMainWindow,
    QMenu,
    QSplitter,
    QStatusBar,
    QTextEdit,
    QToolBar,
    QWidget,
)

from mdpad.domain.interfaces import IAppConfig, IFileService, IMarkdownRenderer
from mdpad.domain.models import Document
from mdpad.services.clipboard_images import ClipboardImageIngestor
from mdpad.services.editing import (
    SNIPPETS,
    LinkRequest,
    cursor_position,
    image_markdown,
    is_image_file,
)
from mdpad.services.preview_scheduler import PreviewScheduler
from mdpad.services.ui.about import AboutDialog
from mdpad.services.ui.adapters.qt_text_editor import QtTextBuffer
from mdpad.services.ui.commands import (
    InsertLink,
    InsertText,
    SurroundSelection,
    can_copy,
    can_cut,
    can_paste,
    can_redo,
    can_undo,
)
from mdpad.services.ui.create_link import ask_link
from mdpad.services.ui.find_replace import FindReplaceDialog
from mdpad.services.ui.markdown_edit import MarkdownTextEdit
from mdpad.services.ui.ports.dialogs import Confirmed, DialogResult, IFileDialogService
from mdpad.services.ui.ports.messages import Answer, IMessageService, Question
from mdpad.services.ui.preview import create_preview_sink
from mdpad.utils.constants import APP_NAME, MARKDOWN_GUIDE, STATUS_TIMEOUT_MS

logger = logging.getLogger(__name__)

MARKDOWN_FILTER = "Markdown (*.md *.markdown);;Text (*.txt);;All files (*)"
SAVE_FILTER = "Markdown (*.md);;Text (*.txt);;All files (*)"
IMAGE_FILTER = "Images (*.png *.jpg *.jpeg *.gif *.bmp *.webp);;All files (*)"

PreviewFactory = Callable[[QWidget], object]
LinkPrompt = Callable[[QWidget, IMessageService], DialogResult[LinkRequest]]


class MainWindow(QMainWindow):
    """Thin PyQt window that delegates work to injected services (DIP)."""

    def __init__(
        self,
        renderer: IMarkdownRenderer,
        file_service: IFileService,
        messages: IMessageService,
        dialogs: IFileDialogService,
        ingestor: ClipboardImageIngestor,
        *,
        config: IAppConfig | None = None,
        preview_factory: PreviewFactory = create_preview_sink,
        link_prompt: LinkPrompt = ask_link,
        debounce_ms: int | None = None,
        start_path: Path | None = None,
        app_title: str = APP_NAME,
    ) -> None:
        super().__init__()
        self._app_title = app_title
        self.resize(1100, 700)

        self.renderer = renderer
        self.file_service = file_service
        self.messages = messages
        self.dialogs = dialogs
        self.ingestor = ingestor
        self.config = config
        self._link_prompt = link_prompt

        self.doc = Document(path=None, text="", modified=False)

        # Widgets
        self.editor = MarkdownTextEdit(self)
        self.editor.set_mime_handler(self._handle_mime)
        self.editor.set_drop_handler(self._open_dropped_document)
        self.buffer = QtTextBuffer(self.editor)

        self.preview_sink = preview_factory(self)
        self.preview = self.preview_sink.widget

        self.splitter = QSplitter(self)
        self.splitter.setOrientation(Qt.Orientation.Horizontal)
        self.splitter.addWidget(self.editor)
        self.splitter.addWidget(self.preview)
        self.splitter.setStretchFactor(0, 1)
        self.splitter.setStretchFactor(1, 1)
        self.setCentralWidget(self.splitter)

        sched_kwargs = {} if debounce_ms is None else {"interval_ms": debounce_ms}
        self.scheduler = PreviewScheduler(
            renderer, self.preview_sink, lambda: self.buffer.text, parent=self, **sched_kwargs
        )
        self.scheduler.status_message.connect(self._show_status)
        self.preview_sink.ready.connect(self.scheduler.render_now)

        # Non-modal Find/Replace dialog
        self.find_dialog = FindReplaceDialog(self.buffer, self.messages, self)

        # Signals
        self.editor.textChanged.connect(self._on_text_changed)
        self.editor.cursorPositionChanged.connect(self._update_cursor_label)

        # UI
        self._build_actions()
        self._build_toolbar()
        self._build_menu()
        self._build_status_bar()
        self._update_title()

        wrap = self.config.get_bool("view", "word_wrap", True) if self.config is not None else True
        self.act_toggle_wrap.setChecked(bool(wrap))
        self._toggle_wrap(bool(wrap))

        # Load starting content
        if start_path:
            self._open_path(start_path)
        else:
            self.scheduler.render_now()

        # DnD
        self.setAcceptDrops(True)

    # ---------- UI creation ----------
    def _build_actions(self):
        # File
        self.act_new = QAction(
            "New", self, shortcut=QKeySequence.StandardKey.New, triggered=self._new_file
        )
        self.act_open = QAction(
            "Open…", self, shortcut=QKeySequence.StandardKey.Open, triggered=self._open_dialog
        )
        self.act_save = QAction(
            "Save", self, shortcut=QKeySequence.StandardKey.Save, triggered=self._save
        )
        self.act_save_as = QAction(
            "Save As…", self, shortcut=QKeySequence.StandardKey.SaveAs, triggered=self._save_as
        )
        self.act_exit = QAction("E&xit", self, shortcut="Ctrl+Q", triggered=self.close)

        # Edit
        self.act_undo = QAction(
            "Undo", self, shortcut=QKeySequence.StandardKey.Undo, triggered=self.editor.undo
        )
        self.act_redo = QAction(
            "Redo", self, shortcut=QKeySequence.StandardKey.Redo, triggered=self.editor.redo
        )
        self.act_cut = QAction(
            "Cut", self, shortcut=QKeySequence.StandardKey.Cut, triggered=self.editor.cut
        )
        self.act_copy = QAction(
            "Copy", self, shortcut=QKeySequence.StandardKey.Copy, triggered=self.editor.copy
        )
        # editor.paste() ends in insertFromMimeData, i.e. _handle_mime
        self.act_paste = QAction(
            "Paste", self, shortcut=QKeySequence.StandardKey.Paste, triggered=self.editor.paste
        )
        self.act_select_all = QAction(
            "Select All",
            self,
            shortcut=QKeySequence.StandardKey.SelectAll,
            triggered=self.editor.selectAll,
        )
        # The editor handles these keys itself; the menu entries are for discoverability.
        for a in (
            self.act_undo,
            self.act_redo,
            self.act_cut,
            self.act_copy,
            self.act_paste,
            self.act_select_all,
        ):
            a.setShortcutContext(Qt.ShortcutContext.WidgetShortcut)

        self.act_find = QAction(
            "Find…", self, shortcut=QKeySequence.StandardKey.Find, triggered=self._show_find
        )
        self.act_replace = QAction(
            "Replace…",
            self,
            shortcut=QKeySequence.StandardKey.Replace,
            triggered=self._show_replace,
        )

        # Insert
        self.act_img = QAction("Image…", self, triggered=self._select_image)
        self.act_link = QAction("Link…", self, shortcut="Ctrl+K", triggered=self._create_link)

        self.snippet_actions: dict[str, QAction] = {}
        shortcuts = {"bold": "Ctrl+B", "italic": "Ctrl+I"}
        for name, snip in SNIPPETS.items():
            act = QAction(
                snip.label,
                self,
                triggered=lambda chk=False, n=name: self._apply_snippet(n),
            )
            if name in shortcuts:
                act.setShortcut(shortcuts[name])
            self.snippet_actions[name] = act
        self.act_h1 = self.snippet_actions["heading1"]
        self.act_bold = self.snippet_actions["bold"]
        self.act_italic = self.snippet_actions["italic"]

        # View
        self.act_toggle_preview = QAction(
            "Preview", self, checkable=True, checked=True, triggered=self._toggle_preview
        )
        self.act_toggle_wrap = QAction(
            "Word Wrap", self, checkable=True, checked=True, triggered=self._toggle_wrap
        )

        # Help
        self.act_guide = QAction("Markdown Guide", self, triggered=self._show_guide)
        self.act_about = QAction("About", self, triggered=self._show_about)

    def _build_toolbar(self):
        tb = QToolBar("Main", self)
        tb.setMovable(False)
        for a in (self.act_new, self.act_open, self.act_save):
            tb.addAction(a)
        tb.addSeparator()
        for a in self.snippet_actions.values():
            tb.addAction(a)
        tb.addSeparator()
        tb.addAction(self.act_link)
        tb.addAction(self.act_img)
        tb.addSeparator()
        tb.addAction(self.act_toggle_preview)
        self.addToolBar(tb)

    def _build_menu(self):
        m = self.menuBar()
        filem = m.addMenu("&File")
        for a in (self.act_new, self.act_open):
            filem.addAction(a)
        filem.addSeparator()
        filem.addAction(self.act_save)
        filem.addAction(self.act_save_as)
        filem.addSeparator()
        filem.addAction(self.act_exit)

        self.edit_menu: QMenu = m.addMenu("&Edit")
        for a in (self.act_undo, self.act_redo):
            self.edit_menu.addAction(a)
        self.edit_menu.addSeparator()
        for a in (self.act_cut, self.act_copy, self.act_paste, self.act_select_all):
            self.edit_menu.addAction(a)
        self.edit_menu.addSeparator()
        self.edit_menu.addAction(self.act_find)
        self.edit_menu.addAction(self.act_replace)
        self.edit_menu.aboutToShow.connect(self._refresh_edit_actions)

        insertm = m.addMenu("&Insert")
        for a in self.snippet_actions.values():
            insertm.addAction(a)
        insertm.addSeparator()
        insertm.addAction(self.act_link)
        insertm.addAction(self.act_img)

        viewm = m.addMenu("&View")
        viewm.addAction(self.act_toggle_preview)
        viewm.addAction(self.act_toggle_wrap)

        helpm = m.addMenu("&Help")
        helpm.addAction(self.act_guide)
        helpm.addAction(self.act_about)

    def _build_status_bar(self):
        sb = QStatusBar(self)
        self.pos_label = QLabel(self)
        self.chars_label = QLabel(self)
        self.encoding_label = QLabel(self.doc.encoding, self)
        for w in (self.pos_label, self.chars_label, self.encoding_label):
            sb.addPermanentWidget(w)
        self.setStatusBar(sb)
        self._update_cursor_label()
        self._update_char_count()

    def _refresh_edit_actions(self):
        # Re-evaluated each time; nothing is cached.
        self.act_undo.setEnabled(can_undo(self.editor))
        self.act_redo.setEnabled(can_redo(self.editor))
        self.act_cut.setEnabled(can_cut(self.editor))
        self.act_copy.setEnabled(can_copy(self.editor))
        self.act_paste.setEnabled(can_paste(self.editor))

    # ---------- Editing commands ----------
    def _apply_snippet(self, name: str) -> None:
        snip = SNIPPETS[name]
        SurroundSelection(self.buffer, snip.prefix, snip.suffix).execute()
        self.editor.setFocus()

    def _insert_text(self, text: str) -> None:
        InsertText(self.buffer, text).execute()
        self.editor.setFocus()

    def _create_link(self) -> None:
        result = self._link_prompt(self, self.messages)
        if isinstance(result, Confirmed):
            InsertLink(self.buffer, result.payload).execute()
            self.editor.setFocus()

    def _select_image(self) -> None:
        path = self.dialogs.get_open_file(self, "Insert Image", None, IMAGE_FILTER)
        if path is None:
            return
        self._insert_text(self._image_markdown(path))

    def _image_markdown(self, path: Path) -> str:
        return image_markdown(path, self.doc.path)

    def _handle_mime(self, mime: QMimeData) -> bool:
        """Paste/drop hook: images and image files become references; text falls through."""
        try:
            action = self.ingestor.paste_action(mime, self.doc.path)
        except Exception as e:
            logger.exception("Image paste failed")
            self.messages.error(self, "Paste Image Error", f"Failed to paste image:\n{e}")
            return True
        if action.kind == "text":
            return False
        if action.snippets:
            self._insert_text("".join(action.snippets))
        if action.kind == "image":
            self._show_status("Saved image from clipboard")
        return True

    def _show_find(self):
        self.find_dialog.show_find()

    def _show_replace(self):
        self.find_dialog.show_replace()

    # ---------- File commands ----------
    def _new_file(self):
        if not self._confirm_discard():
            return
        self._load_document(None, "")
        self._show_status("New document")

    def _open_dialog(self):
        if not self._confirm_discard():
            return
        start = str(self.doc.path.parent) if self.doc.path else None
        path = self.dialogs.get_open_file(self, "Open Markdown", start, MARKDOWN_FILTER)
        if path is not None:
            self._open_path(path, confirm=False)

    def _open_path(self, path: Path, *, confirm: bool = True) -> bool:
        if confirm and not self._confirm_discard():
            return False
        try:
            text = self.file_service.read_text(path)
        except (OSError, UnicodeDecodeError) as e:
            logger.exception("Failed to open %s", path)
            self.messages.error(self, "Open Error", f"Failed to open file:\n{e}")
            return False
        self._load_document(path, text)
        self._show_status(f"Opened: {path.name}")
        return True

    def _load_document(self, path: Path | None, text: str) -> None:
        self.buffer.set_text(text)
        # set_text fired textChanged; the freshly loaded document is clean.
        self.doc = Document(path=path, text=text, modified=False)
        self.preview_sink.set_base_dir(path.parent if path else None)
        self._update_title()
        self.scheduler.render_now()

    def _save(self) -> bool:
        if self.doc.path is None:
            return self._save_as()
        return self._write_to(self.doc.path)

    def _save_as(self) -> bool:
        start = str(self.doc.path) if self.doc.path else "untitled.md"
        path = self.dialogs.get_save_file(self, "Save As", start, SAVE_FILTER)
        if path is None:
            return False
        if not self._write_to(path):
            return False
        self.doc.path = path
        self.preview_sink.set_base_dir(path.parent)
        self._update_title()
        return True

    def _write_to(self, path: Path) -> bool:
        try:
            self.file_service.write_text_atomic(path, self.buffer.text)
        except OSError as e:
            logger.exception("Failed to save %s", path)
            self.messages.error(self, "Save Error", f"Failed to save file:\n{e}")
            return False
        self.doc.modified = False
        self._update_title()
        self._show_status(f"Saved: {path.name}")
        return True

    def _confirm_discard(self) -> bool:
        """Save prompt gate. True means the caller may discard the current document."""
        if not self.doc.modified:
            return True
        answer = self.messages.ask(
            self, APP_NAME, "Do you want to save your changes?", Question.YES_NO_CANCEL
        )
        if answer is Answer.YES:
            return self._save()
        return answer is Answer.NO

    # ---------- View / Help ----------
    def _toggle_wrap(self, on: bool):
        mode = QTextEdit.LineWrapMode.WidgetWidth if on else QTextEdit.LineWrapMode.NoWrap
        self.editor.setLineWrapMode(mode)

    def _toggle_preview(self, on: bool):
        self.preview_sink.set_visible(on)
        if on:
            # Becoming visible always renders, even without a text change.
            self.scheduler.render_now()

    def _show_guide(self):
        self.buffer.set_text(MARKDOWN_GUIDE)
        self._show_status("Showing the Markdown guide")

    def _show_about(self):
        version = self.config.get_version() if self.config is not None else "0.0.0"
        AboutDialog(version, self).show()

    # ---------- Helpers ----------
    def _on_text_changed(self):
        self.doc.text = self.buffer.text
        self.doc.modified = True
        self._update_title()
        self._update_char_count()
        self.scheduler.on_text_changed()

    def _update_title(self):
        name = self.doc.path.name if self.doc.path else "Untitled"
        self.setWindowTitle(f"{self._app_title} - {name}[*]")
        self.setWindowModified(self.doc.modified)

    def _update_cursor_label(self):
        offset = self.buffer.selection.end
        line, col = cursor_position(self.buffer.text, offset)
        self.pos_label.setText(f"Ln {line}, Col {col}")

    def _update_char_count(self):
        self.chars_label.setText(f"{len(self.doc.text)} chars")

    def _show_status(self, text: str) -> None:
        self.statusBar().showMessage(text, STATUS_TIMEOUT_MS)

    # ---------- DnD ----------
    def dragEnterEvent(self, e):
        if e.mimeData().hasUrls():
            e.acceptProposedAction()

    def dropEvent(self, e):
        mime = e.mimeData()
        if self._open_dropped_document(mime):
            e.acceptProposedAction()
            return
        images = [p for p in _local_files(mime) if is_image_file(p)]
        if images:
            self._insert_text("".join(self._image_markdown(Path(p)) for p in images))
            e.acceptProposedAction()

    def _open_dropped_document(self, mime: QMimeData) -> bool:
        """Drop hook: local files without any image open the first one as the document."""
        files = _local_files(mime)
        if not files or any(is_image_file(p) for p in files):
            return False
        self._open_path(Path(files[0]))
        return True

    # ---------- Close ----------
    def closeEvent(self, event):
        if not self._confirm_discard():
            event.ignore()
            return
        self.scheduler.cancel()
        self.find_dialog.close()
        super().closeEvent(event)


def _local_files(mime: QMimeData) -> list[str]:
    if not mime.hasUrls():
        return []
    return [u.toLocalFile() for u in mime.urls() if u.isLocalFile()]
