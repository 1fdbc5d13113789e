"""
GUI entry point for the R Labs learning platform.

This module provides the main entry point for the PyQt5-based desktop
catalog application.
"""

import sys
import logging
from PyQt5.QtWidgets import QApplication
from PyQt5.QtCore import Qt

from rlabs.catalog import load_catalog
from rlabs.config import settings
from rlabs.exceptions import CatalogError
from rlabs.gui.main_window import MainWindow
from rlabs.main import setup_logging


def main():
    """Main entry point for the GUI application."""
    setup_logging()
    logger = logging.getLogger(__name__)

    logger.info("R Labs Learning Platform - GUI Mode")
    logger.info(f"  Feedback: {settings.feedback_mode}, {settings.copied_feedback_ms} ms")
    logger.info(f"  Clipboard mechanism: {settings.clipboard_mechanism}")
    logger.info(f"  Catalog: {settings.catalog_path or 'bundled'}")

    try:
        catalog = load_catalog(settings.catalog_path)
    except CatalogError as e:
        logger.error(f"Cannot start: {e}")
        return 1

    # High DPI attributes must be set before the application is created
    QApplication.setAttribute(Qt.AA_EnableHighDpiScaling, True)
    QApplication.setAttribute(Qt.AA_UseHighDpiPixmaps, True)

    app = QApplication(sys.argv)
    app.setApplicationName("R Labs Learning Platform")

    window = MainWindow(catalog)
    window.show()

    logger.info("GUI application started")

    exit_code = app.exec_()

    logger.info(f"GUI application exited with code {exit_code}")

    return exit_code


if __name__ == '__main__':
    sys.exit(main())
