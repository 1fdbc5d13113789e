"""Clipboard writers for copying lab example code.

This module provides one writer per clipboard mechanism. Whichever writer the
capability detector selects, callers only ever see an ``Outcome``: every
failure is caught, logged and kept on ``last_error``.
"""

import asyncio
import enum
import logging
import os
import shutil
import sys
from abc import ABC, abstractmethod
from contextlib import contextmanager
from typing import Callable, Iterator, Optional

import pyperclip

from rlabs.capability import Document, HostEnvironment, Mechanism, TextElement
from rlabs.exceptions import CapabilityUnavailable, ClipboardError, WriteFailed

# Module-level logger
logger = logging.getLogger(__name__)


class Outcome(enum.Enum):
    """Result of a clipboard write."""
    SUCCESS = "success"
    FAILED = "failed"


def _preview(text: str) -> str:
    # First 50 characters on one line, for log output
    preview = text[:50] + "..." if len(text) > 50 else text
    return preview.replace("\n", " ")


QT_COPY_NAME = "copy_qt"


def _is_wsl() -> bool:
    try:
        with open("/proc/version", "r") as f:
            return "microsoft" in f.read().lower()
    except OSError:
        return False


def _only_qt_backend() -> bool:
    """Check whether pyperclip would fall back to its Qt backend.

    pyperclip picks Qt on an X11 session without xclip, xsel or klipper, and
    resolving that backend constructs a QApplication. That aborts the process
    when the display is unreachable, and QClipboard may only be used from the
    GUI thread anyway, so such a system counts as having no native clipboard.
    """
    if sys.platform in ("win32", "darwin", "cygwin") or _is_wsl():
        return False
    if os.getenv("WAYLAND_DISPLAY") and shutil.which("wl-copy") and shutil.which("wl-paste"):
        return False
    if not os.getenv("DISPLAY"):
        return False
    if shutil.which("xclip") or shutil.which("xsel"):
        return False
    if shutil.which("klipper") and shutil.which("qdbus"):
        return False
    return True


def _resolve_copy() -> Optional[Callable[[str], None]]:
    """Return pyperclip's copy function, or None when there is no usable one."""
    if _only_qt_backend():
        return None
    copy, _ = pyperclip.determine_clipboard()
    if not copy or getattr(copy, "__name__", "") == QT_COPY_NAME:
        return None
    return copy


class PyperclipClipboard:
    """Asynchronous clipboard capability backed by pyperclip.

    pyperclip shells out to pbcopy/xclip/xsel/wl-copy or calls the Windows
    API, all of which block, so the copy runs in the event loop's default
    executor. The backend is re-resolved on every call; pyperclip's Qt
    backend is never used.
    """

    name = "pyperclip"

    def is_available(self) -> bool:
        """Check whether pyperclip found a usable copy mechanism on this system."""
        return _resolve_copy() is not None

    async def write_text(self, text: str) -> None:
        """Copy text to the system clipboard.

        Args:
            text: The text to copy

        Raises:
            CapabilityUnavailable: If pyperclip has no usable backend
            WriteFailed: If the backend reported an error
        """
        copy = _resolve_copy()
        if copy is None:
            raise CapabilityUnavailable("pyperclip could not find a copy mechanism")

        loop = asyncio.get_running_loop()
        try:
            await loop.run_in_executor(None, copy, text)
        except pyperclip.PyperclipException as e:
            raise WriteFailed(str(e)) from e


class ClipboardWriter(ABC):
    """Base class for clipboard writers.

    Subclasses implement one mechanism. ``write`` never raises.
    """

    mechanism: Mechanism

    def __init__(self):
        self.last_error: Optional[ClipboardError] = None

    @abstractmethod
    async def write(self, text: str) -> Outcome:
        """Write text to the clipboard and report the outcome."""

    def _succeeded(self, text: str) -> Outcome:
        self.last_error = None
        logger.info(
            f"Copied to clipboard via {self.mechanism.value}: "
            f"{len(text)} characters - '{_preview(text)}'"
        )
        return Outcome.SUCCESS

    def _failed(self, error: ClipboardError) -> Outcome:
        self.last_error = error
        if isinstance(error, CapabilityUnavailable):
            logger.warning(f"Copy failed: {error}")
        else:
            logger.error(f"Copy failed: {error}")
        return Outcome.FAILED


class SyncClipboardWriter(ClipboardWriter):
    """Writer whose mechanism completes without suspending."""

    @abstractmethod
    def write_now(self, text: str) -> Outcome:
        """Write synchronously and report the outcome."""

    async def write(self, text: str) -> Outcome:
        return self.write_now(text)


class NativeWriter(ClipboardWriter):
    """Writes through the host's asynchronous clipboard capability."""

    mechanism = Mechanism.NATIVE_ASYNC

    def __init__(self, clipboard):
        super().__init__()
        self._clipboard = clipboard

    async def write(self, text: str) -> Outcome:
        try:
            await self._clipboard.write_text(text)
        except ClipboardError as e:
            return self._failed(e)
        except Exception as e:
            return self._failed(WriteFailed(f"Native clipboard write raised: {e}"))
        return self._succeeded(text)


@contextmanager
def _attached(document: Document) -> Iterator[TextElement]:
    """Create a temporary element in ``document`` and always remove it."""
    element = document.create_element()
    document.append(element)
    try:
        yield element
    finally:
        document.remove(element)


class LegacyWriter(SyncClipboardWriter):
    """Copies by selecting an off-screen text element and invoking copy.

    The element exists only for the duration of the call, whether the copy
    command succeeds, reports failure or raises.
    """

    mechanism = Mechanism.LEGACY_DOM

    def __init__(self, document: Document):
        super().__init__()
        self._document = document

    def write_now(self, text: str) -> Outcome:
        try:
            with _attached(self._document) as element:
                element.set_text(text)
                element.select()
                copied = self._document.exec_copy(element)
        except Exception as e:
            return self._failed(WriteFailed(f"Legacy copy raised: {e}"))

        if not copied:
            return self._failed(WriteFailed("Legacy copy command reported failure"))
        return self._succeeded(text)


class UnavailableWriter(SyncClipboardWriter):
    """Writer used when no mechanism is usable; never touches anything."""

    mechanism = Mechanism.UNAVAILABLE

    def write_now(self, text: str) -> Outcome:
        self.last_error = CapabilityUnavailable("Clipboard not available in this environment")
        logger.warning(str(self.last_error))
        return Outcome.FAILED


def writer_for(mechanism: Mechanism, host: HostEnvironment) -> ClipboardWriter:
    """Build the writer for a detected mechanism.

    Args:
        mechanism: Result of capability detection
        host: Capabilities the writer will use

    Returns:
        A fresh writer instance
    """
    if mechanism is Mechanism.NATIVE_ASYNC:
        return NativeWriter(host.clipboard)
    if mechanism is Mechanism.LEGACY_DOM:
        return LegacyWriter(host.document)
    return UnavailableWriter()
