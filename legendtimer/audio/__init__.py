"""Audio package."""

from .sounds import QtSoundBackend, SoundLoadError, SOUND_NAMES
from .dispatcher import CueDispatcher, CUE_SOUNDS

__all__ = [
    "QtSoundBackend",
    "SoundLoadError",
    "SOUND_NAMES",
    "CueDispatcher",
    "CUE_SOUNDS",
]
