"""Tests for cue dispatch: sound mapping, live mute, and failure isolation."""

import logging

from legendtimer.audio.dispatcher import CueDispatcher, CUE_SOUNDS
from legendtimer.timer.engine import Cue

from helpers import FakeSoundBackend, SignalCollector, run_ticks


class TestCueMapping:

    def test_mapping(self):
        assert CUE_SOUNDS[Cue.INTERVAL_COMPLETE] == "start"
        assert CUE_SOUNDS[Cue.WARNING] == "beep"

    def test_warning_plays_beep(self, dispatcher, sound_backend):
        dispatcher.dispatch(Cue.WARNING)
        assert sound_backend.played_assets == ["beep"]

    def test_interval_complete_plays_start(self, dispatcher, sound_backend):
        dispatcher.dispatch(Cue.INTERVAL_COMPLETE)
        assert sound_backend.played_assets == ["start"]

    def test_full_interval_through_engine(self, engine, dispatcher, sound_backend):
        engine.start()
        run_ticks(engine, 30)
        assert sound_backend.played_assets == ["beep", "beep", "beep", "start"]

    def test_sound_requested_signal(self, dispatcher):
        c = SignalCollector()
        dispatcher.sound_requested.connect(c)
        dispatcher.dispatch(Cue.WARNING)
        assert c.items == ["beep"]

    def test_detach_stops_dispatch(self, engine, dispatcher, sound_backend):
        dispatcher.detach(engine)
        engine.start()
        run_ticks(engine, 30)
        assert sound_backend.loaded == []


class TestMute:

    def test_muted_is_noop(self, dispatcher, sound_backend, config):
        config.muted = True
        dispatcher.dispatch(Cue.WARNING)
        dispatcher.dispatch(Cue.INTERVAL_COMPLETE)
        assert sound_backend.loaded == []

    def test_mute_toggle_applies_on_next_cue(self, engine, dispatcher, sound_backend, config):
        engine.start()
        run_ticks(engine, 27)  # 3000 ms -> beep
        assert len(sound_backend.loaded) == 1

        config.muted = True
        engine.tick()  # 2000 ms -> silent
        assert len(sound_backend.loaded) == 1

        config.toggle_mute()
        engine.tick()  # 1000 ms -> beep again
        assert sound_backend.played_assets == ["beep", "beep"]

    def test_muted_cues_still_advance_engine(self, engine, dispatcher, config):
        config.muted = True
        engine.start()
        run_ticks(engine, 30)
        assert engine.remaining_ms == 30000
        assert engine.total_elapsed_ms == 30000


class TestHandleLifecycle:

    def test_handle_released_on_completion(self, dispatcher, sound_backend):
        dispatcher.dispatch(Cue.WARNING)
        assert dispatcher.in_flight == 1

        handle = sound_backend.loaded[0]
        sound_backend.finish(handle)
        assert handle.released is True
        assert dispatcher.in_flight == 0

    def test_overlapping_sounds_are_independent(self, dispatcher, sound_backend):
        dispatcher.dispatch(Cue.WARNING)
        dispatcher.dispatch(Cue.INTERVAL_COMPLETE)
        assert dispatcher.in_flight == 2

        sound_backend.finish(sound_backend.loaded[1])
        assert dispatcher.in_flight == 1
        assert sound_backend.loaded[0].released is False

        sound_backend.finish_all()
        assert dispatcher.in_flight == 0

    def test_failed_completion_releases_and_logs(self, dispatcher, sound_backend, caplog):
        dispatcher.dispatch(Cue.WARNING)
        handle = sound_backend.loaded[0]
        with caplog.at_level(logging.WARNING, logger="legendtimer.audio.dispatcher"):
            sound_backend.finish(handle, failed=True)
        assert handle.released is True
        assert "beep" in caplog.text

    def test_double_completion_releases_once(self, dispatcher, sound_backend):
        dispatcher.dispatch(Cue.WARNING)
        handle = sound_backend.loaded[0]
        sound_backend.finish(handle)
        sound_backend.finish(handle)
        assert sound_backend.released == [handle]


class TestFailureIsolation:

    def test_load_failure_is_logged_and_swallowed(self, qapp, engine, config, caplog):
        backend = FakeSoundBackend(fail_load=True)
        d = CueDispatcher(config, backend)
        d.attach(engine)

        engine.start()
        with caplog.at_level(logging.ERROR, logger="legendtimer.audio.dispatcher"):
            run_ticks(engine, 30)

        assert engine.remaining_ms == 30000
        assert engine.is_running
        assert "failed to load sound" in caplog.text
        assert d.in_flight == 0

    def test_play_failure_releases_handle(self, qapp, engine, config, caplog):
        backend = FakeSoundBackend(fail_play=True)
        d = CueDispatcher(config, backend)
        d.attach(engine)

        engine.start()
        with caplog.at_level(logging.ERROR, logger="legendtimer.audio.dispatcher"):
            run_ticks(engine, 27)

        assert len(backend.loaded) == 1
        assert backend.loaded[0].released is True
        assert d.in_flight == 0
        assert "failed to play sound" in caplog.text

    def test_play_failure_emits_no_request(self, qapp, config):
        d = CueDispatcher(config, FakeSoundBackend(fail_play=True))
        c = SignalCollector()
        d.sound_requested.connect(c)
        d.dispatch(Cue.INTERVAL_COMPLETE)
        assert len(c) == 0
