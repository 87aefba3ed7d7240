# mdpad/services/ui/about.py
from __future__ import annotations

from PyQt6.QtWidgets import (
    QDialog,
    QGridLayout,
    QHBoxLayout,
    QLabel,
    QPushButton,
    QVBoxLayout,
)

from mdpad.utils.constants import APP_NAME

FEATURES = (
    "Markdown notepad with a live preview.\n\n"
    "Features:\n"
    "• Real-time HTML preview of Markdown\n"
    "• Paste screenshots and images from the clipboard\n"
    "• Basic text editing, find and replace"
)


# Keep this tiny and self-contained.
class AboutDialog(QDialog):
    def __init__(self, version: str = "0.0.0", parent=None):
        super().__init__(parent)
        self.setWindowTitle("About")
        self.setModal(False)

        # Widgets
        self.close_btn = QPushButton("OK")

        name_label = QLabel(APP_NAME)
        version_label = QLabel(f"Version {version}")
        features_label = QLabel(FEATURES)
        features_label.setWordWrap(True)

        # Layouts
        form = QGridLayout()
        form.addWidget(name_label, 0, 0)
        form.addWidget(version_label, 1, 0)
        form.addWidget(features_label, 2, 0)

        buttons = QHBoxLayout()
        buttons.addStretch(1)
        buttons.addWidget(self.close_btn)

        root = QVBoxLayout(self)
        root.addLayout(form)
        root.addLayout(buttons)

        # Signals
        self.close_btn.clicked.connect(self.close)
