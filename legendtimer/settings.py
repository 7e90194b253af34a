"""Application settings on top of a string key-value store.

Settings are stored as rows in the ``settings`` table of the app
database (``~/.legendtimer/legendtimer.db``):

    is24Hour       "true" | "false"
    intervalTime   interval length in milliseconds, e.g. "30000"

Usage::

    store = SettingsStore()
    settings = load_settings(store)
    settings.interval_ms = 45_000
    save_settings(store, settings)

A failing read falls back to the default; a failing write is logged and
reported as ``False`` but never raised.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

from sqlalchemy.exc import SQLAlchemyError

from .database.db import get_session
from .database.models import Setting
from .timer.config import DEFAULT_INTERVAL_MS, coerce_interval

logger = logging.getLogger(__name__)


KEY_IS_24_HOUR = "is24Hour"
KEY_INTERVAL = "intervalTime"


class SettingsStore:
    """``get(key) -> str | None`` / ``set(key, value) -> bool``."""

    def get(self, key: str) -> str | None:
        try:
            with get_session() as db:
                row = db.get(Setting, key)
                return row.value if row is not None else None
        except (SQLAlchemyError, OSError):
            logger.warning("could not read setting %r, using default", key, exc_info=True)
            return None

    def set(self, key: str, value: str) -> bool:
        try:
            with get_session() as db:
                row = db.get(Setting, key)
                if row is None:
                    db.add(Setting(key=key, value=value))
                else:
                    row.value = value
            return True
        except (SQLAlchemyError, OSError):
            logger.warning("could not save setting %r", key, exc_info=True)
            return False


@dataclass
class Settings:
    """All user-configurable preferences."""

    is_24_hour: bool = True
    interval_ms: int = DEFAULT_INTERVAL_MS


def _parse_interval(raw: str | None) -> int:
    if not raw:
        return DEFAULT_INTERVAL_MS
    try:
        value = int(raw)
    except ValueError:
        logger.warning("ignoring unparseable interval %r", raw)
        return DEFAULT_INTERVAL_MS
    coerced = coerce_interval(value)
    if coerced != value:
        logger.warning("stored interval %d ms adjusted to %d ms", value, coerced)
    return coerced


def load_settings(store: SettingsStore) -> Settings:
    """Read settings from *store*, falling back to defaults per key."""
    settings = Settings()
    fmt = store.get(KEY_IS_24_HOUR)
    if fmt is not None:
        settings.is_24_hour = fmt == "true"
    settings.interval_ms = _parse_interval(store.get(KEY_INTERVAL))
    return settings


def save_settings(store: SettingsStore, settings: Settings) -> bool:
    """Write both keys.  Returns False if either write failed."""
    ok_fmt = store.set(KEY_IS_24_HOUR, "true" if settings.is_24_hour else "false")
    ok_interval = store.set(KEY_INTERVAL, str(settings.interval_ms))
    return ok_fmt and ok_interval
