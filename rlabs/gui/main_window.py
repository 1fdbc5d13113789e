"""
Main window for the GUI application.

This module provides the main application window that renders the lab
catalog, owns the session state and routes copy requests to the right
clipboard writer.
"""

import logging
from typing import List, Optional

from PyQt5.QtWidgets import (
    QMainWindow, QWidget, QVBoxLayout, QGridLayout, QLabel, QScrollArea, QStatusBar
)
from PyQt5.QtCore import Qt

from rlabs.capability import HostEnvironment
from rlabs.catalog import Catalog
from rlabs.clipboard_manager import Outcome, PyperclipClipboard, SyncClipboardWriter
from rlabs.config import Settings, settings as default_settings
from rlabs.feedback import create_feedback_state
from rlabs.session import LabSession

from .lab_card import LabCard
from .log_handler import QtLogHandler
from .qt_host import QtDocument, QtScheduler
from .worker_thread import CopyWorker


logger = logging.getLogger(__name__)

STATUS_TIMEOUT_MS = 5000


class MainWindow(QMainWindow):
    """
    Main application window.

    Shows the introduction and a scrollable grid of lab cards. Native
    clipboard writes run on a CopyWorker thread; the legacy fallback runs
    synchronously on the GUI thread. All session state is only touched here,
    on the GUI thread.
    """

    def __init__(self, catalog: Catalog, app_settings: Optional[Settings] = None):
        """
        Initialize the main window.

        Args:
            catalog: Lab content to render
            app_settings: Settings to use instead of the global instance
        """
        super().__init__()
        self.catalog = catalog
        self.settings = app_settings or default_settings

        self.cards: List[LabCard] = []
        self.workers: List[CopyWorker] = []
        self.log_handler = None

        feedback = create_feedback_state(
            self.settings.feedback_mode,
            QtScheduler(self),
            self.settings.copied_feedback_seconds,
        )
        feedback.add_listener(self._refresh_cards)

        host = HostEnvironment(
            clipboard=PyperclipClipboard(),
            document=QtDocument(self),
        )
        self.session = LabSession(
            host,
            feedback,
            mechanism_preference=self.settings.clipboard_mechanism,
        )

        self._setup_ui()
        self._apply_theme()
        self._setup_logging()
        self._refresh_cards()

        logger.info("Main window initialized")

    def _setup_ui(self):
        """Set up the user interface."""
        self.setWindowTitle("R Labs Learning Platform")
        self.setMinimumSize(1100, 800)

        content = QWidget()
        content.setObjectName("content")
        layout = QVBoxLayout()
        layout.setContentsMargins(24, 24, 24, 24)
        layout.setSpacing(24)

        header = QLabel("🌱 R Labs Learning Platform")
        header.setAlignment(Qt.AlignCenter)
        header.setStyleSheet("font-size: 30px; font-weight: bold;")
        layout.addWidget(header)

        # Introduction panel
        intro = QWidget()
        intro.setObjectName("intro")
        intro_layout = QVBoxLayout()
        intro_title = QLabel(self.catalog.intro.title)
        intro_title.setStyleSheet("font-size: 18px; font-weight: bold;")
        intro_layout.addWidget(intro_title)
        intro_text = QLabel(self.catalog.intro.content)
        intro_text.setWordWrap(True)
        intro_text.setTextInteractionFlags(Qt.TextSelectableByMouse)
        intro_layout.addWidget(intro_text)
        intro.setLayout(intro_layout)
        layout.addWidget(intro)

        self.progress_label = QLabel()
        self.progress_label.setStyleSheet("font-weight: bold;")
        layout.addWidget(self.progress_label)

        # Card grid
        grid = QGridLayout()
        grid.setSpacing(24)
        columns = self.settings.window_columns
        for item_id, lab in enumerate(self.catalog.labs):
            card = LabCard(item_id, lab)
            card.copy_requested.connect(self._on_copy_requested)
            card.completion_toggled.connect(self._on_completion_toggled)
            grid.addWidget(card, item_id // columns, item_id % columns)
            self.cards.append(card)
        layout.addLayout(grid)
        layout.addStretch()

        content.setLayout(layout)

        scroll = QScrollArea()
        scroll.setWidgetResizable(True)
        scroll.setWidget(content)
        self.setCentralWidget(scroll)

        self.status_bar = QStatusBar()
        self.setStatusBar(self.status_bar)
        self.status_bar.showMessage("Ready")

    def _setup_logging(self):
        """Route WARNING and above to the status bar."""
        self.log_handler = QtLogHandler(logging.WARNING)
        self.log_handler.log_message.connect(self._show_log_message)
        logging.getLogger().addHandler(self.log_handler)

    def _apply_theme(self):
        """Apply the light card theme stylesheet."""
        self.setStyleSheet("""
        QWidget#content {
            background-color: #f3f4f6;
            color: #111827;
            font-family: 'Segoe UI', Arial, sans-serif;
        }

        QWidget#intro {
            background-color: #ffffff;
            border-left: 6px solid #3b82f6;
            border-radius: 12px;
        }

        QFrame#labCard {
            background-color: #ffffff;
            border: 1px solid #e5e7eb;
            border-radius: 16px;
        }

        QFrame#labCard[completed="true"] {
            border: 2px solid #10b981;
        }

        QPlainTextEdit {
            background-color: #f9fafb;
            border: 1px solid #e5e7eb;
            border-radius: 6px;
        }

        QPushButton#copyButton {
            background-color: #3b82f6;
            color: #ffffff;
            border: none;
            border-radius: 6px;
            padding: 4px 10px;
        }

        QPushButton#completeButton {
            background-color: #e5e7eb;
            color: #111827;
            border: none;
            border-radius: 10px;
            font-weight: bold;
        }

        QPushButton#completeButton[completed="true"] {
            background-color: #10b981;
            color: #ffffff;
        }
        """)

    def _on_copy_requested(self, item_id: int):
        """
        Handle a card's Copy button.

        Args:
            item_id: Index of the card
        """
        text = self.catalog.lab(item_id).example
        writer = self.session.select_writer()

        if isinstance(writer, SyncClipboardWriter):
            outcome = writer.write_now(text)
            self.session.record_outcome(item_id, outcome, writer.last_error)
            return

        worker = CopyWorker(writer, text, item_id)
        worker.copy_finished.connect(self._on_copy_finished)
        worker.finished.connect(self._on_worker_finished)
        self.workers.append(worker)
        worker.start()

    def _on_copy_finished(self, item_id: int, outcome: Outcome, error):
        """Apply a native write's outcome on the GUI thread."""
        self.session.record_outcome(item_id, outcome, error)

    def _on_worker_finished(self):
        worker = self.sender()
        if worker in self.workers:
            self.workers.remove(worker)
        worker.deleteLater()

    def _on_completion_toggled(self, item_id: int):
        self.session.toggle_completion(item_id)
        self._refresh_cards()

    def _refresh_cards(self):
        """Re-render every card from the session state."""
        for card in self.cards:
            card.set_copied(self.session.is_copied(card.item_id))
            card.set_completed(self.session.contains(card.item_id))

        self.progress_label.setText(
            f"Completed: {len(self.session.completion)} / {len(self.catalog.labs)}"
        )

    def _show_log_message(self, level: str, message: str):
        self.status_bar.showMessage(f"{level}: {message}", STATUS_TIMEOUT_MS)

    def closeEvent(self, event):
        """
        Handle window close event.

        Args:
            event: Close event
        """
        logger.info("Application closing...")

        # Let in-flight clipboard writes finish
        for worker in list(self.workers):
            if not worker.wait(5000):
                logger.warning(f"Copy worker for item {worker.item_id} did not finish")

        self.session.close()

        if self.log_handler is not None:
            logging.getLogger().removeHandler(self.log_handler)

        logger.info("Application closed")
        event.accept()
