"""Transient "Copied!" feedback for lab cards.

After a successful copy the card shows a confirmation that clears itself
after a fixed delay. Two implementations are provided:

- ``TransientFeedbackState`` (default): every card owns its own timer. A new
  success for a card cancels that card's pending clear before scheduling a
  new one, and one card's timer never affects another card.
- ``SingleFeedbackState``: one global indicator whose clears are never
  cancelled. When two cards are copied within the delay, the first card's
  timer clears the second card's confirmation early. Selected with
  ``feedback_mode = "single"``.

Timers are created through a ``Scheduler`` so the same state works on an
asyncio loop, on the Qt event loop, and under a manual clock in tests.
"""

import asyncio
import logging
from abc import ABC, abstractmethod
from collections import OrderedDict
from typing import Callable, List, Optional, Protocol

# Module-level logger
logger = logging.getLogger(__name__)

DEFAULT_FEEDBACK_DELAY = 2.0  # seconds

Listener = Callable[[], None]


class TimerHandle(Protocol):
    def cancel(self) -> None:
        ...


class Scheduler(Protocol):
    """Schedules a callback on the owning event loop."""

    def call_later(self, delay: float, callback: Callable[[], None]) -> TimerHandle:
        ...


class AsyncioScheduler:
    """Scheduler backed by an asyncio event loop."""

    def __init__(self, loop: Optional[asyncio.AbstractEventLoop] = None):
        self._loop = loop

    def call_later(self, delay: float, callback: Callable[[], None]) -> asyncio.TimerHandle:
        loop = self._loop or asyncio.get_running_loop()
        return loop.call_later(delay, callback)


class FeedbackState(ABC):
    """Base class for feedback states.

    Holds the scheduler, the delay and the listener list. Subclasses decide
    which confirmations are showing and when they clear.
    """

    def __init__(self, scheduler: Scheduler, delay: float = DEFAULT_FEEDBACK_DELAY):
        self._scheduler = scheduler
        self.delay = delay
        self._listeners: List[Listener] = []

    def add_listener(self, listener: Listener) -> None:
        """Register a callback invoked after every indicator change."""
        self._listeners.append(listener)

    def _notify(self) -> None:
        for listener in list(self._listeners):
            listener()

    @abstractmethod
    def is_active(self, item_id: int) -> bool:
        """Check whether ``item_id`` currently shows its confirmation."""

    @abstractmethod
    def current(self) -> Optional[int]:
        """Return the card whose confirmation is showing, if any."""

    @abstractmethod
    def on_write_succeeded(self, item_id: int) -> None:
        ...

    @abstractmethod
    def on_write_failed(self, item_id: int) -> None:
        ...

    @abstractmethod
    def close(self) -> None:
        """Stop reacting to timers and drop listeners."""


class SingleFeedbackState(FeedbackState):
    """One global indicator, cleared by timers that are never cancelled."""

    def __init__(self, scheduler: Scheduler, delay: float = DEFAULT_FEEDBACK_DELAY):
        super().__init__(scheduler, delay)
        self._current: Optional[int] = None

    def current(self) -> Optional[int]:
        return self._current

    def is_active(self, item_id: int) -> bool:
        return self._current == item_id

    def on_write_succeeded(self, item_id: int) -> None:
        self._current = item_id
        self._scheduler.call_later(self.delay, self._clear)
        self._notify()

    def on_write_failed(self, item_id: int) -> None:
        self._current = None
        self._notify()

    def _clear(self) -> None:
        self._current = None
        self._notify()

    def close(self) -> None:
        # No handles are kept; pending clears still fire.
        self._listeners.clear()


class TransientFeedbackState(FeedbackState):
    """Per-card confirmations, each with its own cancellable timer.

    Args:
        scheduler: Source of timers
        delay: Seconds a confirmation stays visible
    """

    def __init__(self, scheduler: Scheduler, delay: float = DEFAULT_FEEDBACK_DELAY):
        super().__init__(scheduler, delay)
        # item id -> pending clear, oldest confirmation first
        self._active: "OrderedDict[int, TimerHandle]" = OrderedDict()

    def current(self) -> Optional[int]:
        """Return the most recently confirmed card that is still showing."""
        if not self._active:
            return None
        return next(reversed(self._active))

    def is_active(self, item_id: int) -> bool:
        return item_id in self._active

    def active_items(self) -> List[int]:
        return list(self._active)

    def on_write_succeeded(self, item_id: int) -> None:
        """Show the confirmation for ``item_id`` and (re)start its timer."""
        self._cancel(item_id)
        self._active[item_id] = self._scheduler.call_later(
            self.delay, lambda: self._expire(item_id)
        )
        logger.debug(f"Feedback shown for item {item_id} ({self.delay:.1f}s)")
        self._notify()

    def on_write_failed(self, item_id: int) -> None:
        """Clear any confirmation still showing for ``item_id``."""
        if self._cancel(item_id):
            self._notify()

    def _cancel(self, item_id: int) -> bool:
        handle = self._active.pop(item_id, None)
        if handle is None:
            return False
        handle.cancel()
        return True

    def _expire(self, item_id: int) -> None:
        if self._active.pop(item_id, None) is not None:
            logger.debug(f"Feedback expired for item {item_id}")
            self._notify()

    def close(self) -> None:
        """Cancel every pending timer and drop all confirmations."""
        for handle in self._active.values():
            handle.cancel()
        self._active.clear()
        self._listeners.clear()


def create_feedback_state(mode: str, scheduler: Scheduler,
                          delay: float = DEFAULT_FEEDBACK_DELAY) -> FeedbackState:
    """Build the feedback state for a configured mode ("per_item" or "single")."""
    if mode == "single":
        return SingleFeedbackState(scheduler, delay)
    if mode == "per_item":
        return TransientFeedbackState(scheduler, delay)
    raise ValueError(f"Unknown feedback mode: {mode}")
