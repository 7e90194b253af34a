"""Countdown engine for LegendTimer.

States
------
IDLE      Not ticking.  Counters may be non-zero (stopped mid-workout).
RUNNING   Both tick sources are scheduled and counters advance.

Transitions
-----------
IDLE → RUNNING      (start; counters untouched, i.e. resume)
RUNNING → IDLE      (stop; counters kept)
Any → IDLE          (reset; counters cleared)

Each logical second is two steps driven by two separately scheduled
1 Hz sources: the *total* step adds to the workout total, the *interval*
step counts the interval down, wraps it, and raises cues.

Cues
----
WARNING             remaining time entered the last three seconds
                    (fires at 3000, 2000 and 1000 ms).
INTERVAL_COMPLETE   the countdown hit zero and wrapped.

The interval length is read from the shared :class:`TimerConfig` at the
moment of each wrap, so a change made mid-interval applies from the
next interval onward and never rescales the one in flight.
"""

from __future__ import annotations

import logging
from enum import Enum

from PyQt6.QtCore import QObject, pyqtSignal

from .config import TimerConfig
from .ticks import QtTickSource

logger = logging.getLogger(__name__)


# ── enums ─────────────────────────────────────────────────────────────────


class EngineState(Enum):
    IDLE = "idle"
    RUNNING = "running"


class Cue(Enum):
    WARNING = "warning"
    INTERVAL_COMPLETE = "interval_complete"


# ── constants ─────────────────────────────────────────────────────────────

TICK_INTERVAL_MS = 1000
WARNING_WINDOW_MS = 3000


# ── engine ────────────────────────────────────────────────────────────────


class CountdownEngine(QObject):
    """Tick-driven workout total + repeating interval countdown.

    Signals
    -------
    total_changed(total_elapsed_ms: int)
        Emitted after every total step and on reset.
    remaining_changed(remaining_ms: int)
        Emitted after every interval step and on reset.
    cue(cue: Cue)
        Emitted at most once per interval step.
    state_changed(new_state: EngineState)
        Emitted on every state transition.
    """

    total_changed = pyqtSignal(int)
    remaining_changed = pyqtSignal(int)
    cue = pyqtSignal(object)
    state_changed = pyqtSignal(object)

    def __init__(
        self,
        config: TimerConfig,
        parent: QObject | None = None,
        *,
        tick_source=None,
        tick_interval_ms: int = TICK_INTERVAL_MS,
    ) -> None:
        super().__init__(parent)

        # ── configuration (read-only from here) ──────────────────────
        self._config = config
        self._tick_ms = tick_interval_ms
        self._ticks = tick_source if tick_source is not None else QtTickSource(self)

        # ── counters ──────────────────────────────────────────────────
        self._state: EngineState = EngineState.IDLE
        self._total_elapsed: int = 0
        self._remaining: int = config.interval_ms
        self._last_cue: int | None = None

        # ── tick source handles ──────────────────────────────────────
        self._total_handle = None
        self._interval_handle = None
        self._violation_logged = False

    # ══════════════════════════════════════════════════════════════════
    #  PUBLIC PROPERTIES
    # ══════════════════════════════════════════════════════════════════

    @property
    def state(self) -> EngineState:
        return self._state

    @property
    def is_running(self) -> bool:
        return self._state == EngineState.RUNNING

    @property
    def total_elapsed_ms(self) -> int:
        return self._total_elapsed

    @property
    def remaining_ms(self) -> int:
        return self._remaining

    @property
    def last_cue_ms(self) -> int | None:
        return self._last_cue

    @property
    def config(self) -> TimerConfig:
        return self._config

    @property
    def tick_interval_ms(self) -> int:
        return self._tick_ms

    @property
    def tick_sources_coupled(self) -> bool:
        """False when exactly one of the two periodic sources is live."""
        handles = (self._total_handle, self._interval_handle)
        if all(h is None for h in handles):
            return True
        if any(h is None for h in handles):
            return False
        is_active = getattr(self._ticks, "is_active", None)
        if is_active is None:
            return True
        return is_active(self._total_handle) == is_active(self._interval_handle)

    # ══════════════════════════════════════════════════════════════════
    #  CONTROLS
    # ══════════════════════════════════════════════════════════════════

    def start(self) -> None:
        """Begin (or resume) ticking.  No-op when already running."""
        if self._state == EngineState.RUNNING:
            return
        self._violation_logged = False
        self._set_state(EngineState.RUNNING)
        self._total_handle = self._ticks.schedule(self._on_total_tick, self._tick_ms)
        self._interval_handle = self._ticks.schedule(
            self._on_interval_tick, self._tick_ms,
        )
        logger.debug(
            "started: total=%d remaining=%d", self._total_elapsed, self._remaining,
        )

    def stop(self) -> None:
        """Halt both tick sources.  Counters keep their values."""
        if self._state != EngineState.RUNNING:
            return
        self._cancel_sources()
        self._set_state(EngineState.IDLE)
        logger.debug(
            "stopped: total=%d remaining=%d", self._total_elapsed, self._remaining,
        )

    def reset(self) -> None:
        """Force IDLE and clear both counters, from any state."""
        self._cancel_sources()
        self._total_elapsed = 0
        self._remaining = self._config.interval_ms
        self._last_cue = None
        self.total_changed.emit(self._total_elapsed)
        self.remaining_changed.emit(self._remaining)
        self._set_state(EngineState.IDLE)

    def tick(self) -> None:
        """Advance one logical second (total step, then interval step)."""
        self._on_total_tick()
        self._on_interval_tick()

    # ══════════════════════════════════════════════════════════════════
    #  INTERNAL — tick steps
    # ══════════════════════════════════════════════════════════════════

    def _on_total_tick(self) -> None:
        if self._state != EngineState.RUNNING:
            return
        self._total_elapsed += self._tick_ms
        self.total_changed.emit(self._total_elapsed)

    def _on_interval_tick(self) -> None:
        if self._state != EngineState.RUNNING:
            return
        self._check_sources()

        candidate = self._remaining - self._tick_ms
        fired: Cue | None = None

        if candidate <= 0:
            fired = Cue.INTERVAL_COMPLETE
            self._remaining = self._config.interval_ms
            self._last_cue = None
        elif candidate <= WARNING_WINDOW_MS and candidate != self._last_cue:
            fired = Cue.WARNING
            self._last_cue = candidate
            self._remaining = candidate
        else:
            self._remaining = candidate

        self.remaining_changed.emit(self._remaining)
        if fired is not None:
            self.cue.emit(fired)

    def _check_sources(self) -> None:
        if self._violation_logged or self.tick_sources_coupled:
            return
        self._violation_logged = True
        logger.error(
            "tick sources out of step: one periodic source stopped while "
            "the engine is running"
        )

    def _cancel_sources(self) -> None:
        for handle in (self._total_handle, self._interval_handle):
            if handle is not None:
                self._ticks.cancel(handle)
        self._total_handle = None
        self._interval_handle = None

    def _set_state(self, new_state: EngineState) -> None:
        self._state = new_state
        self.state_changed.emit(new_state)
