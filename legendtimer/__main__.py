"""Allow running LegendTimer as a module: python -m legendtimer."""

import logging
import sys

from PyQt6.QtWidgets import QApplication
from sqlalchemy.exc import SQLAlchemyError

from .database.db import init_db
from .app import LegendTimerApp

logger = logging.getLogger(__name__)


def _init_storage() -> bool:
    """Create the settings tables; the timer still runs without them."""
    try:
        init_db()
    except (SQLAlchemyError, OSError):
        logger.warning("settings storage unavailable, using defaults", exc_info=True)
        return False
    return True


def main() -> None:
    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    _init_storage()

    app = QApplication(sys.argv)
    app.setApplicationName("LegendTimer")
    app.setOrganizationName("LegendTimer")

    window = LegendTimerApp()
    window.show()

    sys.exit(app.exec())


if __name__ == "__main__":
    main()
