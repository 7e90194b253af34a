"""Main application window for LegendTimer."""

from __future__ import annotations

import logging

from PyQt6.QtWidgets import QMainWindow

from .audio.dispatcher import CueDispatcher
from .audio.sounds import QtSoundBackend
from .settings import SettingsStore, load_settings
from .timer.config import TimerConfig
from .timer.engine import CountdownEngine
from .ui.clock_widget import ClockWidget
from .ui.settings_dialog import SettingsDialog
from .ui.styles import build_stylesheet

logger = logging.getLogger(__name__)


class LegendTimerApp(QMainWindow):
    """Owns one timer session: config cell, engine, dispatcher, screen."""

    def __init__(
        self,
        *,
        store: SettingsStore | None = None,
        sound_backend=None,
    ) -> None:
        super().__init__()
        self.setWindowTitle("LegendTimer")
        self.setMinimumSize(420, 640)
        self.resize(460, 760)

        # ── settings ──────────────────────────────────────────────────
        self._store = store or SettingsStore()
        settings = load_settings(self._store)
        self._config = TimerConfig(interval_ms=settings.interval_ms)

        # ── engine + cues ─────────────────────────────────────────────
        self._engine = CountdownEngine(self._config, self)
        self._sound_backend = sound_backend or QtSoundBackend(self)
        self._dispatcher = CueDispatcher(self._config, self._sound_backend, self)
        self._dispatcher.attach(self._engine)

        # ── screen ────────────────────────────────────────────────────
        self._clock = ClockWidget(
            self._engine, self._config, self, is_24_hour=settings.is_24_hour,
        )
        self._clock.settings_requested.connect(self._open_settings)
        self.setCentralWidget(self._clock)
        self.setStyleSheet(build_stylesheet())

        logger.info(
            "session ready: interval=%d ms, 24h=%s",
            settings.interval_ms, settings.is_24_hour,
        )

    # ── public ────────────────────────────────────────────────────────

    @property
    def engine(self) -> CountdownEngine:
        return self._engine

    @property
    def config(self) -> TimerConfig:
        return self._config

    @property
    def dispatcher(self) -> CueDispatcher:
        return self._dispatcher

    @property
    def clock(self) -> ClockWidget:
        return self._clock

    def reload_settings(self) -> None:
        """Re-read the store and push the values into the live session."""
        settings = load_settings(self._store)
        self._clock.apply_settings(settings)
        logger.info("settings reloaded: interval=%d ms", settings.interval_ms)

    # ── internal ──────────────────────────────────────────────────────

    def _open_settings(self) -> None:
        dlg = SettingsDialog(self._store, self)
        dlg.exec()
        self.reload_settings()

    def closeEvent(self, event) -> None:  # noqa: N802
        self._engine.stop()
        self._dispatcher.detach(self._engine)
        super().closeEvent(event)
