"""Main clock screen.

Layout (top → bottom):
    - Logo
    - Live wall clock (its own 1 Hz timer, independent of the engine)
    - Workout total
    - Interval countdown + mute toggle
    - Start / Stop / Reset
    - Settings button
"""

from __future__ import annotations

from datetime import datetime
from typing import Callable

from PyQt6.QtCore import Qt, QTimer, pyqtSignal
from PyQt6.QtWidgets import (
    QWidget, QVBoxLayout, QHBoxLayout, QLabel, QPushButton,
)

from ..settings import Settings
from ..timer.config import TimerConfig
from ..timer.engine import CountdownEngine, EngineState
from ..timer.formatting import format_clock, format_time


class ClockWidget(QWidget):
    """Clock, workout total and interval countdown with their controls."""

    settings_requested = pyqtSignal()

    def __init__(
        self,
        engine: CountdownEngine,
        config: TimerConfig,
        parent: QWidget | None = None,
        *,
        is_24_hour: bool = True,
        now: Callable[[], datetime] = datetime.now,
    ) -> None:
        super().__init__(parent)
        self._engine = engine
        self._config = config
        self._is_24_hour = is_24_hour
        self._now = now

        self._build_ui()
        self._connect_signals()

        self._clock_timer = QTimer(self)
        self._clock_timer.setInterval(1000)
        self._clock_timer.timeout.connect(self._refresh_clock)
        self._clock_timer.start()

        self._refresh_clock()
        self._on_total_changed(engine.total_elapsed_ms)
        self._on_remaining_changed(engine.remaining_ms)
        self._refresh_interval_label()
        self._refresh_mute_button()
        self._on_state_changed(engine.state)

    # ── build ─────────────────────────────────────────────────────────────

    def _build_ui(self) -> None:
        layout = QVBoxLayout(self)
        layout.setContentsMargins(20, 20, 20, 20)
        layout.setSpacing(6)
        layout.setAlignment(Qt.AlignmentFlag.AlignCenter)

        self._logo = self._centered_label("LEGENDTIMER", "logo")
        layout.addWidget(self._logo)
        layout.addSpacing(30)

        self._clock_label = self._centered_label("", "clockText")
        layout.addWidget(self._clock_label)
        layout.addSpacing(30)

        layout.addWidget(self._centered_label("Workout Total", "sectionLabel"))
        self._total_label = self._centered_label("0:00", "timerText")
        layout.addWidget(self._total_label)

        self._interval_title = self._centered_label("", "sectionLabel")
        layout.addWidget(self._interval_title)
        self._remaining_label = self._centered_label("0:00", "timerText")
        layout.addWidget(self._remaining_label)

        mute_row = QHBoxLayout()
        mute_row.setAlignment(Qt.AlignmentFlag.AlignCenter)
        self._mute_btn = QPushButton(self)
        self._mute_btn.setObjectName("muteButton")
        self._mute_btn.setCheckable(True)
        mute_row.addWidget(self._mute_btn)
        layout.addLayout(mute_row)

        layout.addSpacing(20)

        btn_row = QHBoxLayout()
        btn_row.setSpacing(10)
        btn_row.setAlignment(Qt.AlignmentFlag.AlignCenter)
        self._start_btn = QPushButton("Start", self)
        self._stop_btn = QPushButton("Stop", self)
        self._reset_btn = QPushButton("Reset", self)
        for btn in (self._start_btn, self._stop_btn, self._reset_btn):
            btn_row.addWidget(btn)
        layout.addLayout(btn_row)

        layout.addSpacing(30)

        cfg_row = QHBoxLayout()
        cfg_row.setAlignment(Qt.AlignmentFlag.AlignCenter)
        self._settings_btn = QPushButton("Settings", self)
        self._settings_btn.setObjectName("configButton")
        cfg_row.addWidget(self._settings_btn)
        layout.addLayout(cfg_row)

    def _centered_label(self, text: str, name: str) -> QLabel:
        lbl = QLabel(text, self)
        lbl.setObjectName(name)
        lbl.setAlignment(Qt.AlignmentFlag.AlignCenter)
        return lbl

    # ── signals ───────────────────────────────────────────────────────────

    def _connect_signals(self) -> None:
        self._start_btn.clicked.connect(self._engine.start)
        self._stop_btn.clicked.connect(self._engine.stop)
        self._reset_btn.clicked.connect(self._engine.reset)
        self._mute_btn.clicked.connect(self._on_mute_clicked)
        self._settings_btn.clicked.connect(lambda: self.settings_requested.emit())

        self._engine.total_changed.connect(self._on_total_changed)
        self._engine.remaining_changed.connect(self._on_remaining_changed)
        self._engine.state_changed.connect(self._on_state_changed)

    # ── public ────────────────────────────────────────────────────────────

    def apply_settings(self, settings: Settings) -> None:
        """Push freshly loaded settings into the display and config cell.

        A new interval length lands in the config only; the running
        countdown picks it up at its next wrap.  A fresh, never-started
        engine is reset so its countdown shows the new length at once.
        """
        self._is_24_hour = settings.is_24_hour
        self._config.interval_ms = settings.interval_ms
        if (
            self._engine.state == EngineState.IDLE
            and self._engine.total_elapsed_ms == 0
        ):
            self._engine.reset()
        self._refresh_interval_label()
        self._refresh_clock()

    @property
    def is_24_hour(self) -> bool:
        return self._is_24_hour

    # ── slots ─────────────────────────────────────────────────────────────

    def _refresh_clock(self) -> None:
        self._clock_label.setText(format_clock(self._now(), self._is_24_hour))

    def _refresh_interval_label(self) -> None:
        self._interval_title.setText(f"Interval ({self._config.interval_ms // 1000}s)")

    def _refresh_mute_button(self) -> None:
        muted = self._config.muted
        self._mute_btn.setChecked(muted)
        self._mute_btn.setText("Unmute" if muted else "Mute")

    def _on_mute_clicked(self) -> None:
        self._config.toggle_mute()
        self._refresh_mute_button()

    def _on_total_changed(self, total_ms: int) -> None:
        self._total_label.setText(format_time(total_ms))

    def _on_remaining_changed(self, remaining_ms: int) -> None:
        self._remaining_label.setText(format_time(remaining_ms))

    def _on_state_changed(self, state: EngineState) -> None:
        running = state == EngineState.RUNNING
        self._start_btn.setEnabled(not running)
        self._stop_btn.setEnabled(running)
