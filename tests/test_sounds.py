"""Tests for sound synthesis and the QSoundEffect backend."""

from __future__ import annotations

import io
import logging
import time
import wave

import pytest
from PyQt6.QtMultimedia import QSoundEffect

from legendtimer.audio.sounds import (
    QtSoundBackend,
    SoundLoadError,
    SOUND_NAMES,
    _generate_beep,
    _generate_start,
)


class TestSoundGeneration:

    @pytest.mark.parametrize("gen_fn", [_generate_beep, _generate_start])
    def test_generator_produces_wav(self, gen_fn):
        data = gen_fn()
        assert isinstance(data, bytes)
        assert data[:4] == b"RIFF"

    @pytest.mark.parametrize("gen_fn", [_generate_beep, _generate_start])
    def test_wav_is_parseable(self, gen_fn):
        with wave.open(io.BytesIO(gen_fn()), "rb") as wf:
            assert wf.getnchannels() == 1
            assert wf.getsampwidth() == 2
            assert wf.getframerate() == 44100
            assert wf.getnframes() > 0

    def test_start_is_longer_than_beep(self):
        assert len(_generate_start()) > len(_generate_beep())


@pytest.mark.usefixtures("qapp")
class TestQtSoundBackend:

    def test_wav_files_generated(self, tmp_path):
        QtSoundBackend(parent=None, sounds_dir=tmp_path)
        for name in SOUND_NAMES:
            path = tmp_path / f"{name}.wav"
            assert path.exists(), f"Missing WAV: {name}"
            assert path.stat().st_size > 100

    def test_existing_files_not_regenerated(self, tmp_path):
        (tmp_path / "beep.wav").write_bytes(b"cached")
        QtSoundBackend(parent=None, sounds_dir=tmp_path)
        assert (tmp_path / "beep.wav").read_bytes() == b"cached"

    def test_unwritable_cache_is_not_fatal(self, tmp_path, caplog):
        blocker = tmp_path / "afile"
        blocker.write_bytes(b"")
        with caplog.at_level(logging.WARNING, logger="legendtimer.audio.sounds"):
            backend = QtSoundBackend(parent=None, sounds_dir=blocker / "sounds")
        assert "could not write sound cache" in caplog.text
        with pytest.raises(SoundLoadError):
            backend.load("beep")

    def test_unknown_asset_raises(self, tmp_path):
        backend = QtSoundBackend(parent=None, sounds_dir=tmp_path)
        with pytest.raises(SoundLoadError):
            backend.load("fanfare")

    def test_missing_file_raises(self, tmp_path):
        backend = QtSoundBackend(parent=None, sounds_dir=tmp_path)
        (tmp_path / "start.wav").unlink()
        with pytest.raises(SoundLoadError):
            backend.load("start")

    def test_load_returns_fresh_effect(self, tmp_path):
        backend = QtSoundBackend(parent=None, sounds_dir=tmp_path)
        first = backend.load("beep")
        second = backend.load("beep")
        assert isinstance(first, QSoundEffect)
        assert first is not second
        assert first.source().toLocalFile().endswith("beep.wav")
        backend.release(first)
        backend.release(second)

    def test_corrupt_wav_reports_failure_once(self, qapp, tmp_path):
        (tmp_path / "beep.wav").write_bytes(b"not a wav")
        backend = QtSoundBackend(parent=None, sounds_dir=tmp_path)
        handle = backend.load("beep")
        calls: list[bool] = []
        backend.on_complete(handle, calls.append)
        backend.play(handle)

        deadline = time.monotonic() + 5.0
        while not calls and time.monotonic() < deadline:
            qapp.processEvents()
            time.sleep(0.01)
        assert calls == [True]

        handle.statusChanged.emit()
        qapp.processEvents()
        assert calls == [True]

        backend.release(handle)
        assert not handle.isPlaying()
