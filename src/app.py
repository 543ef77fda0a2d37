"""
Stipple - a raster image editor.

This is the main entry point for the application.
Run with: python -m src.app
"""

import signal
import sys

from PySide6.QtCore import QTimer
from PySide6.QtWidgets import QApplication

from src import __version__
from src.core.app_core import AppCore
from src.services.config_service import ConfigService
from src.services.logging_service import get_logger, setup_logging


_app: QApplication = None
_should_quit = False


def request_quit(signum, frame):
    """Handle termination signals by asking the event loop to stop."""
    global _should_quit
    _should_quit = True


def check_for_quit():
    """Timer callback to check if we should quit."""
    if _should_quit and _app:
        get_logger(__name__).info("Signal received, quitting...")
        _app.quit()


def main() -> int:
    """
    Main entry point for Stipple.

    Returns:
        Exit code (0 for success, non-zero for error).
    """
    global _app

    config = ConfigService()
    setup_logging(config.log_level, config.log_to_file, keep_days=config.log_keep_days)
    logger = get_logger(__name__)

    try:
        logger.info("Starting Stipple...")

        _app = QApplication(sys.argv)
        _app.setApplicationName("Stipple")
        _app.setOrganizationName("Stipple")
        _app.setApplicationVersion(__version__)

        signal.signal(signal.SIGINT, request_quit)
        signal.signal(signal.SIGTERM, request_quit)

        # Timer to poll for quit signal (Qt event loop blocks Python signals)
        quit_timer = QTimer()
        quit_timer.timeout.connect(check_for_quit)
        quit_timer.start(100)

        core = AppCore(_app, config)
        core.show()

        logger.info("Stipple initialization complete. Entering event loop...")
        exit_code = _app.exec()

        logger.info(f"Stipple exiting with code {exit_code}")
        return exit_code

    except Exception as e:
        logger.critical(f"Fatal error during startup: {e}", exc_info=True)
        return 1


if __name__ == "__main__":
    sys.exit(main())
