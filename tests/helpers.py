"""Shared test helpers for LegendTimer."""

from legendtimer.audio.sounds import SoundLoadError
from legendtimer.timer.engine import CountdownEngine


class SignalCollector:
    """Utility to capture pyqtSignal emissions into a list."""

    def __init__(self):
        self.items: list = []

    def slot(self, *args):
        self.items.append(args if len(args) > 1 else args[0] if args else None)

    def __call__(self, *args):
        self.slot(*args)

    def __len__(self):
        return len(self.items)

    def __getitem__(self, idx):
        return self.items[idx]

    @property
    def last(self):
        return self.items[-1] if self.items else None

    def clear(self):
        self.items.clear()


# ── tick source ───────────────────────────────────────────────────────────


class FakeTimer:
    def __init__(self, callback, period_ms: int):
        self.callback = callback
        self.period_ms = period_ms
        self.active = True

    def fire(self):
        """Deliver a timeout, even if cancelled (simulates a late event)."""
        self.callback()


class FakeTickSource:
    """Records schedule / cancel calls; ticks are fired by hand."""

    def __init__(self):
        self.scheduled: list[FakeTimer] = []
        self.cancelled: list[FakeTimer] = []

    def schedule(self, callback, period_ms):
        timer = FakeTimer(callback, period_ms)
        self.scheduled.append(timer)
        return timer

    def cancel(self, handle):
        handle.active = False
        self.cancelled.append(handle)

    def is_active(self, handle):
        return handle.active

    @property
    def active(self) -> list[FakeTimer]:
        return [t for t in self.scheduled if t.active]

    def fire_active(self):
        for timer in self.active:
            timer.fire()


def run_ticks(engine: CountdownEngine, n: int) -> None:
    for _ in range(n):
        engine.tick()


# ── sound backend ─────────────────────────────────────────────────────────


class FakeHandle:
    def __init__(self, asset: str):
        self.asset = asset
        self.played = False
        self.released = False


class FakeSoundBackend:
    """In-memory ``load`` / ``play`` / ``on_complete`` / ``release``."""

    def __init__(self, *, fail_load: bool = False, fail_play: bool = False):
        self.fail_load = fail_load
        self.fail_play = fail_play
        self.loaded: list[FakeHandle] = []
        self.released: list[FakeHandle] = []
        self._callbacks: dict = {}

    def load(self, asset):
        if self.fail_load:
            raise SoundLoadError(f"cannot load {asset}")
        handle = FakeHandle(asset)
        self.loaded.append(handle)
        return handle

    def play(self, handle):
        if self.fail_play:
            raise RuntimeError("audio device unavailable")
        handle.played = True

    def on_complete(self, handle, callback):
        self._callbacks[handle] = callback

    def release(self, handle):
        handle.released = True
        self.released.append(handle)

    @property
    def played_assets(self) -> list[str]:
        return [h.asset for h in self.loaded if h.played]

    def finish(self, handle, failed: bool = False):
        self._callbacks[handle](failed)

    def finish_all(self):
        for handle in list(self._callbacks):
            self.finish(handle)
