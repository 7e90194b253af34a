"""Sound synthesis and per-cue playback handles using numpy + QSoundEffect.

Both assets are generated programmatically as WAV files using sine-wave
synthesis with ADSR envelopes.  Files are cached to disk so subsequent
app launches are instant.

Sound names
-----------
- ``beep``   — short single tone, one per second of the final countdown
- ``start``  — rising two-tone chime when a new interval begins

Every ``load`` hands out a fresh ``QSoundEffect``; the caller plays it,
waits for ``on_complete`` and then ``release``\\ s it.
"""

from __future__ import annotations

import io
import logging
import wave
from pathlib import Path
from typing import Callable

import numpy as np

from PyQt6.QtCore import QObject, QUrl
from PyQt6.QtMultimedia import QSoundEffect

from ..database.db import APP_SUPPORT_DIR

logger = logging.getLogger(__name__)


# ── paths ────────────────────────────────────────────────────────────────

SOUNDS_DIR = APP_SUPPORT_DIR / "sounds"

SOUND_NAMES = ("beep", "start")

SAMPLE_RATE = 44100


class SoundLoadError(RuntimeError):
    """Raised when an asset is unknown or its WAV file is missing."""


# ═══════════════════════════════════════════════════════════════════════════
#  WAV SYNTHESIS HELPERS
# ═══════════════════════════════════════════════════════════════════════════


def _make_envelope(
    length: int,
    attack: int = 200,
    decay: int = 400,
    sustain_level: float = 0.7,
    release: int = 800,
) -> np.ndarray:
    """ADSR envelope (all durations in samples)."""
    env = np.ones(length, dtype=np.float64)
    a = min(attack, length)
    if a > 0:
        env[:a] = np.linspace(0.0, 1.0, a)
    d_end = min(a + decay, length)
    if decay > 0 and d_end > a:
        env[a:d_end] = np.linspace(1.0, sustain_level, d_end - a)
    s_end = max(length - release, d_end)
    if s_end > d_end:
        env[d_end:s_end] = sustain_level
    if release > 0 and s_end < length:
        env[s_end:] = np.linspace(sustain_level, 0.0, length - s_end)
    return env


def _sine(freq: float, duration_s: float) -> np.ndarray:
    """Pure sine wave at *freq* Hz for *duration_s* seconds."""
    t = np.linspace(0, duration_s, int(SAMPLE_RATE * duration_s), endpoint=False)
    return np.sin(2 * np.pi * freq * t)


def _to_wav_bytes(samples: np.ndarray) -> bytes:
    """Convert a float64 numpy array (-1..1) to 16-bit PCM WAV bytes."""
    samples = np.clip(samples, -1.0, 1.0)
    int_samples = (samples * 32767).astype(np.int16)

    buf = io.BytesIO()
    with wave.open(buf, "wb") as wf:
        wf.setnchannels(1)
        wf.setsampwidth(2)
        wf.setframerate(SAMPLE_RATE)
        wf.writeframes(int_samples.tobytes())
    return buf.getvalue()


# ═══════════════════════════════════════════════════════════════════════════
#  SOUND GENERATORS
# ═══════════════════════════════════════════════════════════════════════════


def _generate_beep() -> bytes:
    """Countdown beep — 150 ms at A5 (880Hz), crisp attack."""
    tone = _sine(880.0, 0.15) * 0.6
    env = _make_envelope(len(tone), attack=60, decay=600, sustain_level=0.6, release=1500)
    # Pad with silence so QSoundEffect doesn't clip
    return _to_wav_bytes(np.concatenate([tone * env, np.zeros(int(SAMPLE_RATE * 0.03))]))


def _generate_start() -> bytes:
    """Interval start — E5 then a held B5, brighter and longer than the beep."""
    first = _sine(659.25, 0.12) * 0.6
    first = first * _make_envelope(len(first), attack=80, decay=300, sustain_level=0.5, release=400)
    second = _sine(987.77, 0.45) * 0.6 + _sine(987.77 * 2, 0.45) * 0.08
    second = second * _make_envelope(
        len(second),
        attack=80,
        decay=int(SAMPLE_RATE * 0.1),
        sustain_level=0.5,
        release=int(SAMPLE_RATE * 0.25),
    )
    gap = np.zeros(int(SAMPLE_RATE * 0.03))
    return _to_wav_bytes(np.concatenate([first, gap, second]))


_GENERATORS: dict[str, Callable[[], bytes]] = {
    "beep": _generate_beep,
    "start": _generate_start,
}


# ═══════════════════════════════════════════════════════════════════════════
#  PLAYBACK BACKEND
# ═══════════════════════════════════════════════════════════════════════════


class QtSoundBackend(QObject):
    """``load`` / ``play`` / ``on_complete`` / ``release`` over QSoundEffect.

    Usage::

        backend = QtSoundBackend(parent=self)
        handle = backend.load("beep")
        backend.on_complete(handle, lambda failed: backend.release(handle))
        backend.play(handle)
    """

    def __init__(
        self,
        parent: QObject | None = None,
        *,
        sounds_dir: Path | None = None,
    ) -> None:
        super().__init__(parent)
        self._sounds_dir = sounds_dir or SOUNDS_DIR
        self._ensure_wav_files()

    # ── public API ────────────────────────────────────────────────────

    @property
    def sounds_dir(self) -> Path:
        return self._sounds_dir

    def load(self, asset: str) -> QSoundEffect:
        if asset not in SOUND_NAMES:
            raise SoundLoadError(f"unknown sound asset {asset!r}")
        path = self._sounds_dir / f"{asset}.wav"
        if not path.exists():
            raise SoundLoadError(f"missing WAV for {asset!r}: {path}")
        effect = QSoundEffect(self)
        effect.setSource(QUrl.fromLocalFile(str(path)))
        return effect

    def play(self, handle: QSoundEffect) -> None:
        # Plays as soon as loading finishes if the source is still loading.
        handle.play()

    def on_complete(
        self, handle: QSoundEffect, callback: Callable[[bool], None],
    ) -> None:
        """Call ``callback(failed)`` once, when playback ends or errors."""
        seen = {"playing": False, "done": False}

        def _finish(failed: bool) -> None:
            if seen["done"]:
                return
            seen["done"] = True
            callback(failed)

        def _on_playing_changed() -> None:
            if handle.isPlaying():
                seen["playing"] = True
            elif seen["playing"]:
                _finish(False)

        def _on_status_changed() -> None:
            if handle.status() == QSoundEffect.Status.Error:
                _finish(True)

        handle.playingChanged.connect(_on_playing_changed)
        handle.statusChanged.connect(_on_status_changed)

    def release(self, handle: QSoundEffect) -> None:
        handle.stop()
        handle.deleteLater()

    # ── internal ──────────────────────────────────────────────────────

    def _ensure_wav_files(self) -> None:
        """Generate any missing WAV files to the cache directory.

        An unwritable cache leaves the assets missing; ``load`` then raises
        :class:`SoundLoadError` for them.
        """
        try:
            self._sounds_dir.mkdir(parents=True, exist_ok=True)
            for name, gen_fn in _GENERATORS.items():
                path = self._sounds_dir / f"{name}.wav"
                if not path.exists():
                    path.write_bytes(gen_fn())
        except OSError:
            logger.warning(
                "could not write sound cache in %s, cues will be silent",
                self._sounds_dir, exc_info=True,
            )
