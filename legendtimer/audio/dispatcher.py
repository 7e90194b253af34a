"""Turns engine cues into fire-and-forget sound playback.

One playback unit per cue: load a fresh handle, arrange for it to be
released when it finishes (or fails), then play it.  Nothing here ever
raises back into the engine's tick; load and play errors are logged and
dropped.
"""

from __future__ import annotations

import logging

from PyQt6.QtCore import QObject, pyqtSignal

from ..timer.config import TimerConfig
from ..timer.engine import Cue, CountdownEngine

logger = logging.getLogger(__name__)


CUE_SOUNDS: dict[Cue, str] = {
    Cue.INTERVAL_COMPLETE: "start",
    Cue.WARNING: "beep",
}


class CueDispatcher(QObject):
    """Plays the sound for each cue unless muted at dispatch time.

    Signals
    -------
    sound_requested(asset: str)
        Emitted after a handle was loaded and ``play`` was requested.
    """

    sound_requested = pyqtSignal(str)

    def __init__(
        self,
        config: TimerConfig,
        backend,
        parent: QObject | None = None,
    ) -> None:
        super().__init__(parent)
        self._config = config
        self._backend = backend
        self._live: set = set()

    @property
    def in_flight(self) -> int:
        """Handles loaded but not yet released."""
        return len(self._live)

    def attach(self, engine: CountdownEngine) -> None:
        engine.cue.connect(self.dispatch)

    def detach(self, engine: CountdownEngine) -> None:
        engine.cue.disconnect(self.dispatch)

    def dispatch(self, cue: Cue) -> None:
        if self._config.muted:
            return
        asset = CUE_SOUNDS.get(cue)
        if asset is None:
            logger.warning("no sound mapped for cue %r", cue)
            return

        try:
            handle = self._backend.load(asset)
        except Exception:
            logger.exception("failed to load sound %r", asset)
            return

        self._live.add(handle)
        try:
            self._backend.on_complete(
                handle,
                lambda failed, h=handle, a=asset: self._on_finished(h, a, failed),
            )
            self._backend.play(handle)
        except Exception:
            logger.exception("failed to play sound %r", asset)
            self._release(handle)
            return

        self.sound_requested.emit(asset)

    # ── internal ──────────────────────────────────────────────────────

    def _on_finished(self, handle, asset: str, failed: bool) -> None:
        if failed:
            logger.warning("playback of %r ended with an error", asset)
        self._release(handle)

    def _release(self, handle) -> None:
        if handle not in self._live:
            return
        self._live.discard(handle)
        try:
            self._backend.release(handle)
        except Exception:
            logger.exception("failed to release sound handle")
