"""
Card widget for a single lab.

This module provides the QFrame-based card showing a lab's example code,
expected output, interpretation and exercise, with a copy button and a
completion toggle.
"""

from PyQt5.QtWidgets import (
    QFrame, QVBoxLayout, QHBoxLayout, QPlainTextEdit, QPushButton, QLabel
)
from PyQt5.QtCore import pyqtSignal
from PyQt5.QtGui import QFont

from rlabs.catalog import Lab


COPY_LABEL = "Copy"
COPIED_LABEL = "Copied!"
COMPLETE_LABEL = "Mark as Complete"
COMPLETED_LABEL = "✔ Completed"


class LabCard(QFrame):
    """
    Card displaying one lab.

    The card holds no state of its own: the main window pushes the copied and
    completed flags in through ``set_copied`` and ``set_completed``.

    Signals:
        copy_requested: Emitted when the Copy button is clicked
                        Args: item_id (int)
        completion_toggled: Emitted when the completion button is clicked
                            Args: item_id (int)
    """

    copy_requested = pyqtSignal(int)
    completion_toggled = pyqtSignal(int)

    def __init__(self, item_id: int, lab: Lab):
        """
        Initialize the card.

        Args:
            item_id: Index of the lab in the catalog
            lab: Lab content to display
        """
        super().__init__()
        self.item_id = item_id
        self.lab = lab
        self.setObjectName("labCard")
        self._setup_ui()
        self.set_completed(False)

    def _setup_ui(self):
        """Set up the user interface."""
        layout = QVBoxLayout()
        layout.setContentsMargins(16, 16, 16, 16)
        layout.setSpacing(8)

        # Title row with completion check mark
        title_layout = QHBoxLayout()
        title = QLabel(self.lab.title)
        title.setWordWrap(True)
        title.setStyleSheet("font-weight: bold; font-size: 15px;")
        title_layout.addWidget(title, 1)

        self.check_label = QLabel("✔")
        self.check_label.setStyleSheet("color: #10b981; font-size: 18px;")
        title_layout.addWidget(self.check_label)
        layout.addLayout(title_layout)

        # Example code with copy button
        example_header = QHBoxLayout()
        example_header.addWidget(self._section_label("Example"))
        example_header.addStretch()
        self.copy_button = QPushButton(COPY_LABEL)
        self.copy_button.setObjectName("copyButton")
        self.copy_button.clicked.connect(lambda: self.copy_requested.emit(self.item_id))
        example_header.addWidget(self.copy_button)
        layout.addLayout(example_header)

        layout.addWidget(self._code_box(self.lab.example))

        layout.addWidget(self._section_label("Output"))
        layout.addWidget(self._code_box(self.lab.output))

        layout.addWidget(self._section_label("Interpretation"))
        layout.addWidget(self._wrapped_label(self.lab.interpretation))

        layout.addWidget(self._section_label("Exercise"))
        layout.addWidget(self._wrapped_label(self.lab.exercise))

        layout.addStretch()

        self.complete_button = QPushButton(COMPLETE_LABEL)
        self.complete_button.setObjectName("completeButton")
        self.complete_button.setMinimumHeight(36)
        self.complete_button.clicked.connect(lambda: self.completion_toggled.emit(self.item_id))
        layout.addWidget(self.complete_button)

        self.setLayout(layout)

    def _section_label(self, text: str) -> QLabel:
        label = QLabel(text)
        label.setStyleSheet("font-weight: bold; color: #374151;")
        return label

    def _wrapped_label(self, text: str) -> QLabel:
        label = QLabel(text)
        label.setWordWrap(True)
        return label

    def _code_box(self, text: str) -> QPlainTextEdit:
        box = QPlainTextEdit(text)
        box.setReadOnly(True)
        box.setFont(QFont("Courier New", 10))
        line_count = text.count("\n") + 1
        box.setFixedHeight(min(line_count, 12) * 18 + 16)
        return box

    def set_copied(self, copied: bool):
        """Show or hide the copy confirmation."""
        self.copy_button.setText(COPIED_LABEL if copied else COPY_LABEL)

    def set_completed(self, completed: bool):
        """
        Render the completion state.

        Args:
            completed: True if the lab is marked complete
        """
        self.check_label.setVisible(completed)
        self.complete_button.setText(COMPLETED_LABEL if completed else COMPLETE_LABEL)

        # Dynamic property drives the border and button colors in the stylesheet
        self.setProperty("completed", completed)
        self.complete_button.setProperty("completed", completed)
        for widget in (self, self.complete_button):
            widget.style().unpolish(widget)
            widget.style().polish(widget)
