"""Settings dialog for LegendTimer.

Clock format and interval length.  Nothing is written until the user
presses Save; the action button reads "Back" while the selection still
matches what was loaded and turns into "Save" as soon as it differs.
"""

from __future__ import annotations

from PyQt6.QtCore import Qt
from PyQt6.QtWidgets import (
    QDialog, QVBoxLayout, QHBoxLayout, QGridLayout,
    QLabel, QPushButton, QButtonGroup, QWidget,
)

from ..settings import Settings, SettingsStore, load_settings, save_settings
from ..timer.config import INTERVAL_OPTIONS, validate_interval
from .info_dialogs import about_dialog, privacy_dialog


class SettingsDialog(QDialog):
    """Modal dialog for clock format and interval length."""

    def __init__(self, store: SettingsStore, parent: QWidget | None = None) -> None:
        super().__init__(parent)
        self.setWindowTitle("Settings")
        self.setMinimumWidth(460)
        self.setModal(True)

        self._store = store
        self._original = load_settings(store)
        self._settings = Settings(
            is_24_hour=self._original.is_24_hour,
            interval_ms=self._original.interval_ms,
        )
        self._saved = False

        self._build_ui()
        self._populate()

    # ══════════════════════════════════════════════════════════════════
    #  BUILD UI
    # ══════════════════════════════════════════════════════════════════

    def _build_ui(self) -> None:
        root = QVBoxLayout(self)
        root.setContentsMargins(24, 20, 24, 20)
        root.setSpacing(16)

        # ── Clock format ─────────────────────────────────────────────
        root.addWidget(self._section_label("Clock Format"))
        self._format_btn = QPushButton(self)
        self._format_btn.clicked.connect(self._on_format_clicked)
        root.addWidget(self._format_btn, alignment=Qt.AlignmentFlag.AlignCenter)

        # ── Interval length ──────────────────────────────────────────
        root.addWidget(self._section_label("Interval Length"))
        grid = QGridLayout()
        grid.setSpacing(8)
        self._interval_group = QButtonGroup(self)
        self._interval_group.setExclusive(True)
        for i, option in enumerate(INTERVAL_OPTIONS):
            btn = QPushButton(f"{option // 1000}s", self)
            btn.setCheckable(True)
            self._interval_group.addButton(btn, option)
            grid.addWidget(btn, i // 4, i % 4)
        self._interval_group.idClicked.connect(self._on_interval_clicked)
        root.addLayout(grid)

        # ── Save / Back ──────────────────────────────────────────────
        self._action_btn = QPushButton("Back", self)
        self._action_btn.setObjectName("configButton")
        self._action_btn.clicked.connect(self._on_action)
        root.addWidget(self._action_btn, alignment=Qt.AlignmentFlag.AlignCenter)

        # ── info pages ───────────────────────────────────────────────
        root.addStretch()
        info_row = QHBoxLayout()
        self._privacy_btn = QPushButton("Privacy Policy", self)
        self._privacy_btn.setObjectName("configButton")
        self._privacy_btn.clicked.connect(lambda: privacy_dialog(self).exec())
        self._about_btn = QPushButton("About", self)
        self._about_btn.setObjectName("configButton")
        self._about_btn.clicked.connect(lambda: about_dialog(self).exec())
        info_row.addWidget(self._privacy_btn)
        info_row.addWidget(self._about_btn)
        root.addLayout(info_row)

    @staticmethod
    def _section_label(text: str) -> QLabel:
        lbl = QLabel(text)
        lbl.setObjectName("sectionLabel")
        lbl.setAlignment(Qt.AlignmentFlag.AlignCenter)
        return lbl

    # ══════════════════════════════════════════════════════════════════
    #  POPULATE / REFRESH
    # ══════════════════════════════════════════════════════════════════

    def _populate(self) -> None:
        btn = self._interval_group.button(self._settings.interval_ms)
        if btn is not None:
            btn.setChecked(True)
        self._refresh()

    def _refresh(self) -> None:
        self._format_btn.setText("24 Hour" if self._settings.is_24_hour else "12 Hour")
        modified = self.is_modified
        self._action_btn.setText("Save" if modified else "Back")
        self._action_btn.setProperty("modified", "true" if modified else "false")
        # Re-polish so the [modified="true"] selector applies
        self._action_btn.style().unpolish(self._action_btn)
        self._action_btn.style().polish(self._action_btn)

    # ══════════════════════════════════════════════════════════════════
    #  CHANGE HANDLERS
    # ══════════════════════════════════════════════════════════════════

    def _on_format_clicked(self) -> None:
        self._settings.is_24_hour = not self._settings.is_24_hour
        self._refresh()

    def _on_interval_clicked(self, interval_ms: int) -> None:
        self._settings.interval_ms = validate_interval(interval_ms)
        self._refresh()

    def _on_action(self) -> None:
        if self.is_modified:
            # Best-effort: a failed write leaves the old value in place.
            save_settings(self._store, self._settings)
            self._saved = True
        self.accept()

    # ══════════════════════════════════════════════════════════════════
    #  PUBLIC
    # ══════════════════════════════════════════════════════════════════

    @property
    def is_modified(self) -> bool:
        return (
            self._settings.is_24_hour != self._original.is_24_hour
            or self._settings.interval_ms != self._original.interval_ms
        )

    @property
    def saved(self) -> bool:
        return self._saved

    @property
    def settings(self) -> Settings:
        return self._settings
