"""Display formatting for counters and the wall clock."""

from __future__ import annotations

from datetime import datetime


def format_time(ms: int) -> str:
    """``m:ss`` for a millisecond counter (negative shows as 0:00)."""
    total_seconds = max(0, ms) // 1000
    minutes, seconds = divmod(total_seconds, 60)
    return f"{minutes}:{seconds:02d}"


def format_clock(now: datetime, is_24_hour: bool = True) -> str:
    """``HH:MM:SS`` in 24-hour mode, ``h:MM:SS AM`` otherwise."""
    if is_24_hour:
        return now.strftime("%H:%M:%S")
    hour = now.hour % 12 or 12
    suffix = "AM" if now.hour < 12 else "PM"
    return f"{hour}:{now.minute:02d}:{now.second:02d} {suffix}"
