"""Allow running PomoRing as a module: python -m pomoring."""

import logging
import sys

from PyQt6.QtWidgets import QApplication

from .database.db import init_db
from .app import PomoRingApp, make_icon
from .timer.state import TimerMode


def main() -> None:
    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    init_db()

    app = QApplication(sys.argv)
    app.setApplicationName("PomoRing")
    app.setOrganizationName("PomoRing")
    app.setWindowIcon(make_icon(TimerMode.WORK))

    window = PomoRingApp()
    window.show()

    sys.exit(app.exec())


if __name__ == "__main__":
    main()
