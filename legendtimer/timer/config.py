"""Live timer configuration shared between the screen and the engine.

The screen layer owns a single :class:`TimerConfig` and may change it at
any time.  The engine and the cue dispatcher keep a reference to the same
object and read it on every tick / dispatch, so a change is picked up on
the next read without re-scheduling anything.
"""

from __future__ import annotations

from dataclasses import dataclass


# ── constants ─────────────────────────────────────────────────────────────

INTERVAL_STEP_MS = 10_000
MIN_INTERVAL_MS = 10_000
MAX_INTERVAL_MS = 120_000
DEFAULT_INTERVAL_MS = 30_000

# 10s, 20s, ... 120s
INTERVAL_OPTIONS: tuple[int, ...] = tuple(
    range(MIN_INTERVAL_MS, MAX_INTERVAL_MS + 1, INTERVAL_STEP_MS)
)


class ConfigError(ValueError):
    """Raised for an interval length outside the selectable options."""


def validate_interval(interval_ms: int) -> int:
    """Return *interval_ms* unchanged, or raise :class:`ConfigError`."""
    if isinstance(interval_ms, bool) or not isinstance(interval_ms, int):
        raise ConfigError(f"interval must be an integer, got {interval_ms!r}")
    if interval_ms not in INTERVAL_OPTIONS:
        raise ConfigError(
            f"interval {interval_ms} ms is not one of "
            f"{MIN_INTERVAL_MS}..{MAX_INTERVAL_MS} in {INTERVAL_STEP_MS} ms steps"
        )
    return interval_ms


def coerce_interval(interval_ms: int) -> int:
    """Clamp and snap *interval_ms* to the nearest selectable option.

    Used when reading persisted values, where a bad value should degrade
    to something usable rather than fail.
    """
    clamped = max(MIN_INTERVAL_MS, min(MAX_INTERVAL_MS, int(interval_ms)))
    return (clamped + INTERVAL_STEP_MS // 2) // INTERVAL_STEP_MS * INTERVAL_STEP_MS


@dataclass
class TimerConfig:
    """Mutable cell read by the engine (interval) and dispatcher (mute)."""

    interval_ms: int = DEFAULT_INTERVAL_MS
    muted: bool = False

    def toggle_mute(self) -> bool:
        self.muted = not self.muted
        return self.muted
