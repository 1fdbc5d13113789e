"""
Qt implementations of the clipboard host capabilities.

This module provides the document context for the legacy copy path (a hidden,
off-screen text widget inside the main window) and a scheduler that runs
feedback timers on the Qt event loop.
"""

import logging
from typing import Callable

from PyQt5 import sip
from PyQt5.QtCore import QObject, Qt, QTimer
from PyQt5.QtWidgets import QApplication, QPlainTextEdit, QWidget


logger = logging.getLogger(__name__)

OFFSCREEN = -9999


class QtTimerHandle:
    """Cancellable handle for a single-shot QTimer."""

    def __init__(self, timer: QTimer):
        self._timer = timer

    def cancel(self) -> None:
        if sip.isdeleted(self._timer):
            return
        self._timer.stop()
        self._timer.deleteLater()


class QtScheduler:
    """
    Scheduler that runs callbacks on the Qt event loop.

    Timers are parented to ``owner`` so they are destroyed with it.
    """

    def __init__(self, owner: QObject):
        self._owner = owner

    def call_later(self, delay: float, callback: Callable[[], None]) -> QtTimerHandle:
        timer = QTimer(self._owner)
        timer.setSingleShot(True)
        timer.timeout.connect(callback)
        timer.timeout.connect(timer.deleteLater)
        timer.start(int(delay * 1000))
        return QtTimerHandle(timer)


class QtTextHolder:
    """Invisible text widget holding the text being copied."""

    def __init__(self):
        self.widget = QPlainTextEdit()
        self.widget.setFixedSize(1, 1)
        self.widget.setFocusPolicy(Qt.NoFocus)

    def set_text(self, text: str) -> None:
        self.widget.setPlainText(text)

    def select(self) -> None:
        self.widget.selectAll()


class QtDocument:
    """
    Document context backed by a host widget.

    Elements are parented to the host and moved far outside its visible
    area while they exist.
    """

    def __init__(self, host: QWidget):
        self._host = host

    def is_available(self) -> bool:
        return QApplication.instance() is not None and not sip.isdeleted(self._host)

    def create_element(self) -> QtTextHolder:
        return QtTextHolder()

    def append(self, element: QtTextHolder) -> None:
        element.widget.setParent(self._host)
        element.widget.move(OFFSCREEN, OFFSCREEN)
        element.widget.show()

    def remove(self, element: QtTextHolder) -> None:
        element.widget.hide()
        element.widget.setParent(None)
        element.widget.deleteLater()

    def exec_copy(self, element: QtTextHolder) -> bool:
        """
        Copy the element's selection and confirm it reached the clipboard.

        Returns:
            True if the system clipboard now holds the element's text
        """
        element.widget.copy()
        copied = QApplication.clipboard().text() == element.widget.toPlainText()
        if not copied:
            logger.debug("Clipboard contents differ from the copied element")
        return copied
