"""Timer package."""

from .config import (
    TimerConfig,
    ConfigError,
    INTERVAL_OPTIONS,
    DEFAULT_INTERVAL_MS,
    validate_interval,
    coerce_interval,
)
from .engine import (
    CountdownEngine,
    EngineState,
    Cue,
    TICK_INTERVAL_MS,
    WARNING_WINDOW_MS,
)
from .ticks import QtTickSource

__all__ = [
    "TimerConfig",
    "ConfigError",
    "INTERVAL_OPTIONS",
    "DEFAULT_INTERVAL_MS",
    "validate_interval",
    "coerce_interval",
    "CountdownEngine",
    "EngineState",
    "Cue",
    "TICK_INTERVAL_MS",
    "WARNING_WINDOW_MS",
    "QtTickSource",
]
