"""UI package."""

from .clock_widget import ClockWidget
from .settings_dialog import SettingsDialog
from .info_dialogs import InfoDialog, about_dialog, privacy_dialog

__all__ = [
    "ClockWidget",
    "SettingsDialog",
    "InfoDialog",
    "about_dialog",
    "privacy_dialog",
]
