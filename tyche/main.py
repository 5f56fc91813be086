# main.py
# This is the entry point of the application
# It loads the stylesheet, builds the window and starts the event loop

import logging
import sys

from PyQt6.QtWidgets import QApplication

from tyche.auth_window import AuthWindow
from tyche.form_controller import FormController
from tyche.theme import ResourceLoadError, apply_stylesheet

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"
LOG_DATEFMT = "%H:%M:%S"

log = logging.getLogger(__name__)


def configure_logging(level=logging.INFO):
    # Logs go to stderr so stdout stays reserved for submit lines
    logging.basicConfig(level=level, format=LOG_FORMAT, datefmt=LOG_DATEFMT)


def main():
    configure_logging()

    # Every PyQt app needs exactly ONE QApplication
    app = QApplication.instance() or QApplication(sys.argv)

    try:
        apply_stylesheet(app)
    except ResourceLoadError as e:
        log.critical("Startup failed: %s", e)
        sys.exit(1)

    window = AuthWindow()
    # Keep a reference so the controller lives as long as the window
    window.controller = FormController(window)
    window.show()

    log.info("Window shown")

    # Keep the app running
    sys.exit(app.exec())


if __name__ == "__main__":
    main()
