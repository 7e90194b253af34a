"""Static About and Privacy Policy pages."""

from __future__ import annotations

from PyQt6.QtCore import Qt
from PyQt6.QtWidgets import QDialog, QVBoxLayout, QLabel, QPushButton, QWidget


ABOUT_TITLE = "About LegendTimer"
ABOUT_TEXT = (
    "LegendTimer is a simple, neon-inspired workout and interval timer "
    "designed for smooth performance and ease of use."
)

PRIVACY_TITLE = "Privacy Policy"
PRIVACY_TEXT = (
    "LegendTimer does not collect, store, or share any personal data. "
    "All app settings are stored locally on your device and never "
    "transmitted. No analytics or tracking tools are used."
)


class InfoDialog(QDialog):
    """Title, a paragraph of text and a Back button."""

    def __init__(self, title: str, text: str, parent: QWidget | None = None) -> None:
        super().__init__(parent)
        self.setWindowTitle(title)
        self.setMinimumWidth(400)
        self.setModal(True)

        layout = QVBoxLayout(self)
        layout.setContentsMargins(24, 20, 24, 20)
        layout.setSpacing(20)

        heading = QLabel(title, self)
        heading.setObjectName("sectionLabel")
        heading.setStyleSheet("font-size: 24px;")
        heading.setAlignment(Qt.AlignmentFlag.AlignCenter)
        layout.addWidget(heading)

        self._body = QLabel(text, self)
        self._body.setObjectName("infoText")
        self._body.setWordWrap(True)
        layout.addWidget(self._body)

        back_btn = QPushButton("Back", self)
        back_btn.setObjectName("configButton")
        back_btn.clicked.connect(self.accept)
        layout.addWidget(back_btn, alignment=Qt.AlignmentFlag.AlignCenter)

    @property
    def body_text(self) -> str:
        return self._body.text()


def about_dialog(parent: QWidget | None = None) -> InfoDialog:
    return InfoDialog(ABOUT_TITLE, ABOUT_TEXT, parent)


def privacy_dialog(parent: QWidget | None = None) -> InfoDialog:
    return InfoDialog(PRIVACY_TITLE, PRIVACY_TEXT, parent)
