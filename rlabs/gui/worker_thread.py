"""
Worker thread for native clipboard writes.

The native clipboard write blocks on an external process or OS call, so the
GUI runs it on a QThread and receives the outcome back through a queued
signal. The worker only performs the write: feedback state is updated by the
slot on the GUI thread.
"""

import asyncio
import logging
from PyQt5.QtCore import QThread, pyqtSignal

from rlabs.clipboard_manager import ClipboardWriter, Outcome
from rlabs.exceptions import WriteFailed


logger = logging.getLogger(__name__)


class CopyWorker(QThread):
    """
    Worker thread that runs one clipboard write.

    Signals:
        copy_finished: Emitted when the write completes
                       Args: item_id (int), outcome (Outcome), error (ClipboardError or None)
    """

    copy_finished = pyqtSignal(int, object, object)  # item_id, outcome, error

    def __init__(self, writer: ClipboardWriter, text: str, item_id: int, parent=None):
        super().__init__(parent)
        self.writer = writer
        self.text = text
        self.item_id = item_id

    def run(self):
        """Run the writer's coroutine on a private event loop."""
        try:
            outcome = asyncio.run(self.writer.write(self.text))
            error = self.writer.last_error
        except Exception as e:
            # Writers do not raise; this only covers event loop failures
            logger.error(f"Copy worker failed for item {self.item_id}: {e}", exc_info=True)
            outcome, error = Outcome.FAILED, WriteFailed(str(e))

        self.copy_finished.emit(self.item_id, outcome, error)
