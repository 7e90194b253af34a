"""Shared pytest fixtures for LegendTimer tests."""

import os
import sys
import pytest

os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

from PyQt6.QtWidgets import QApplication

from legendtimer.audio.dispatcher import CueDispatcher
from legendtimer.database.db import configure_engine, init_db
from legendtimer.settings import SettingsStore
from legendtimer.timer.config import TimerConfig
from legendtimer.timer.engine import CountdownEngine

from helpers import FakeSoundBackend, FakeTickSource


@pytest.fixture(scope="session")
def qapp():
    """A single QApplication instance shared across the entire test run."""
    app = QApplication.instance() or QApplication(sys.argv)
    yield app


@pytest.fixture(autouse=True)
def test_db():
    """Point every test at a fresh in-memory SQLite database."""
    configure_engine("sqlite:///:memory:")
    init_db()
    yield


@pytest.fixture
def store():
    return SettingsStore()


@pytest.fixture
def config():
    """Default config: 30 s interval, unmuted."""
    return TimerConfig()


@pytest.fixture
def ticks():
    return FakeTickSource()


@pytest.fixture
def engine(qapp, config, ticks):
    """Fresh CountdownEngine driven by a hand-fired tick source."""
    return CountdownEngine(config, tick_source=ticks)


@pytest.fixture
def sound_backend():
    return FakeSoundBackend()


@pytest.fixture
def dispatcher(qapp, config, sound_backend, engine):
    """CueDispatcher already listening to ``engine``."""
    d = CueDispatcher(config, sound_backend)
    d.attach(engine)
    return d
