"""Periodic tick sources.

The engine never owns a ``QTimer`` directly; it asks a tick source to
``schedule`` a callback and later ``cancel`` the returned handle.  The
default :class:`QtTickSource` hands out one ``QTimer`` per schedule so
that each periodic stream can be stopped independently.
"""

from __future__ import annotations

from typing import Callable

from PyQt6.QtCore import QObject, QTimer


class QtTickSource(QObject):
    """``schedule`` / ``cancel`` on top of repeating ``QTimer`` instances."""

    def __init__(self, parent: QObject | None = None) -> None:
        super().__init__(parent)

    def schedule(self, callback: Callable[[], None], period_ms: int) -> QTimer:
        timer = QTimer(self)
        timer.setInterval(period_ms)
        timer.timeout.connect(callback)
        timer.start()
        return timer

    def cancel(self, handle: QTimer) -> None:
        # QTimer.stop() discards any pending timeout for this timer, so
        # no callback is delivered after this returns.
        handle.stop()
        handle.timeout.disconnect()
        handle.deleteLater()

    @staticmethod
    def is_active(handle: QTimer) -> bool:
        return handle.isActive()
