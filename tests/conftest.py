"""Shared fakes for the clipboard, document and timer capabilities."""

import asyncio

import pytest

from rlabs.capability import HostEnvironment
from rlabs.feedback import create_feedback_state
from rlabs.session import LabSession


class FakeHandle:
    def __init__(self, when, callback):
        self.when = when
        self.callback = callback
        self.cancelled = False
        self.fired = False

    def cancel(self):
        self.cancelled = True


class FakeScheduler:
    """Manual clock; callbacks fire only when the test advances time."""

    def __init__(self):
        self.now = 0.0
        self.handles = []

    def call_later(self, delay, callback):
        handle = FakeHandle(self.now + delay, callback)
        self.handles.append(handle)
        return handle

    def advance(self, seconds):
        target = self.now + seconds
        while True:
            due = [h for h in self.pending() if h.when <= target]
            if not due:
                break
            handle = min(due, key=lambda h: h.when)
            self.now = handle.when
            handle.fired = True
            handle.callback()
        self.now = target

    def advance_to(self, when):
        self.advance(when - self.now)

    def pending(self):
        return [h for h in self.handles if not h.cancelled and not h.fired]


class FakeClipboard:
    def __init__(self, available=True, error=None):
        self.available = available
        self.error = error
        self.written = []

    def is_available(self):
        return self.available

    async def write_text(self, text):
        await asyncio.sleep(0)
        if self.error is not None:
            raise self.error
        self.written.append(text)


class FakeElement:
    def __init__(self):
        self.text = ""
        self.selected = False

    def set_text(self, text):
        self.text = text

    def select(self):
        self.selected = True


class FakeDocument:
    """Records every element created, attached and removed."""

    def __init__(self, available=True, copy_result=True, copy_error=None):
        self.available = available
        self.copy_result = copy_result
        self.copy_error = copy_error
        self.created = []
        self.attached = []
        self.removed = []
        self.copied = []

    def is_available(self):
        return self.available

    def create_element(self):
        element = FakeElement()
        self.created.append(element)
        return element

    def append(self, element):
        self.attached.append(element)

    def remove(self, element):
        self.attached.remove(element)
        self.removed.append(element)

    def exec_copy(self, element):
        if self.copy_error is not None:
            raise self.copy_error
        if element.selected:
            self.copied.append(element.text)
        return self.copy_result


@pytest.fixture
def scheduler():
    return FakeScheduler()


@pytest.fixture
def make_session(scheduler):
    def _make(clipboard=None, document=None, mode="per_item", preference="auto"):
        feedback = create_feedback_state(mode, scheduler, 2.0)
        host = HostEnvironment(clipboard=clipboard, document=document)
        return LabSession(host, feedback, mechanism_preference=preference)
    return _make


@pytest.fixture(autouse=True)
def headless_session(monkeypatch):
    # pyperclip backend resolution depends on the developer's display
    monkeypatch.delenv("DISPLAY", raising=False)
    monkeypatch.delenv("WAYLAND_DISPLAY", raising=False)
