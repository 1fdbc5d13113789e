"""Session state exposed to the R Labs front-ends.

This module ties the clipboard pipeline (capability detection → writer →
feedback) and the completion markers together behind one object that a UI
calls into and re-renders from.
"""

import logging
from typing import Optional

from rlabs.capability import HostEnvironment, detect
from rlabs.clipboard_manager import ClipboardWriter, Outcome, writer_for
from rlabs.completion import CompletionSet
from rlabs.exceptions import ClipboardError
from rlabs.feedback import FeedbackState

# Module-level logger
logger = logging.getLogger(__name__)


class LabSession:
    """State of one catalog viewing session.

    The copy pipeline and the completion markers are independent: copying
    never changes completion and toggling never changes feedback.

    Usage:
        session = LabSession(host, feedback)
        await session.request_copy(lab.example, 3)
        session.current()          # 3 until the confirmation expires
        session.toggle_completion(3)
        session.contains(3)        # True
    """

    def __init__(
        self,
        host: HostEnvironment,
        feedback: FeedbackState,
        completion: Optional[CompletionSet] = None,
        mechanism_preference: str = "auto",
    ):
        """Initialize the session.

        Args:
            host: Clipboard capabilities of the running application
            feedback: TransientFeedbackState or SingleFeedbackState
            completion: Completion markers (a fresh set by default)
            mechanism_preference: Restriction passed to capability detection
        """
        self.host = host
        self.feedback = feedback
        self.completion = completion if completion is not None else CompletionSet()
        self.mechanism_preference = mechanism_preference
        self.last_error: Optional[ClipboardError] = None

        logger.debug(f"LabSession initialized (mechanism preference: {mechanism_preference})")

    # Clipboard pipeline

    def select_writer(self) -> ClipboardWriter:
        """Detect the usable mechanism now and return a writer for it."""
        mechanism = detect(self.host, self.mechanism_preference)
        logger.debug(f"Clipboard mechanism detected: {mechanism.value}")
        return writer_for(mechanism, self.host)

    def record_outcome(self, item_id: int, outcome: Outcome,
                       error: Optional[ClipboardError] = None) -> None:
        """Feed a finished write into the feedback state."""
        self.last_error = error
        if outcome is Outcome.SUCCESS:
            self.feedback.on_write_succeeded(item_id)
        else:
            self.feedback.on_write_failed(item_id)

    async def request_copy(self, text: str, item_id: int) -> Outcome:
        """Copy ``text`` for card ``item_id``. Never raises.

        Args:
            text: Example code to copy
            item_id: Index of the card that requested the copy

        Returns:
            Outcome.SUCCESS or Outcome.FAILED
        """
        writer = self.select_writer()
        outcome = await writer.write(text)
        self.record_outcome(item_id, outcome, writer.last_error)
        return outcome

    # Completion markers

    def toggle_completion(self, item_id: int) -> bool:
        completed = self.completion.toggle(item_id)
        logger.info(f"Lab {item_id + 1} marked {'complete' if completed else 'incomplete'}")
        return completed

    # Observable state

    def current(self) -> Optional[int]:
        return self.feedback.current()

    def is_copied(self, item_id: int) -> bool:
        return self.feedback.is_active(item_id)

    def contains(self, item_id: int) -> bool:
        return self.completion.contains(item_id)

    def close(self) -> None:
        """Tear down pending feedback timers."""
        self.feedback.close()
        logger.debug("LabSession closed")
