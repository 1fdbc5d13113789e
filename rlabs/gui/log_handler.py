"""
Custom logging handler for GUI integration.

This module provides a thread-safe logging handler that emits Qt signals,
so clipboard diagnostics logged from any thread reach the status bar.
"""

import logging
from PyQt5.QtCore import QObject, pyqtSignal


class QtLogHandler(logging.Handler, QObject):
    """
    Logging handler that forwards records as Qt signals.

    Attach it to the root logger with a WARNING level to surface clipboard
    failures ("Clipboard not available in this environment", "Copy failed: ...")
    to the user without a dedicated error dialog.

    Signals:
        log_message: Emitted for every handled record
                    Args: level (str), message (str)
    """

    log_message = pyqtSignal(str, str)  # level, message

    def __init__(self, level=logging.WARNING):
        logging.Handler.__init__(self, level)
        QObject.__init__(self)
        self.setFormatter(logging.Formatter('%(message)s'))

    def emit(self, record):
        try:
            self.log_message.emit(record.levelname, self.format(record))
        except Exception:
            self.handleError(record)
