"""Clipboard capability detection.

A copy request can be served by one of three mechanisms, checked in order of
preference every time a request arrives:

1. ``NATIVE_ASYNC``: the host exposes an asynchronous clipboard (pyperclip
   running off the event loop in production).
2. ``LEGACY_DOM``: the host has a document context where a hidden text element
   can be selected and copied (a Qt widget tree in production).
3. ``UNAVAILABLE``: neither is usable.

Support is never cached because it can change between requests (a clipboard
tool uninstalled, a display connection lost, the window closed).
"""

import enum
import logging
from dataclasses import dataclass
from typing import Optional, Protocol

# Module-level logger
logger = logging.getLogger(__name__)


class Mechanism(enum.Enum):
    """Clipboard-write mechanisms, in order of preference."""
    NATIVE_ASYNC = "native"
    LEGACY_DOM = "legacy"
    UNAVAILABLE = "none"


class AsyncClipboard(Protocol):
    """Asynchronous clipboard-write capability."""

    def is_available(self) -> bool:
        ...

    async def write_text(self, text: str) -> None:
        """Write ``text``; raise on failure."""
        ...


class TextElement(Protocol):
    """Text-holding element used by the legacy copy path."""

    def set_text(self, text: str) -> None:
        ...

    def select(self) -> None:
        ...


class Document(Protocol):
    """Document context able to host a temporary, off-screen element."""

    def is_available(self) -> bool:
        ...

    def create_element(self) -> TextElement:
        ...

    def append(self, element: TextElement) -> None:
        ...

    def remove(self, element: TextElement) -> None:
        ...

    def exec_copy(self, element: TextElement) -> bool:
        """Copy the element's current selection; return the command's success."""
        ...


@dataclass
class HostEnvironment:
    """Capabilities the surrounding application exposes to the clipboard layer.

    Either capability may be absent: the CLI has no document, a headless
    session may have neither.
    """
    clipboard: Optional[AsyncClipboard] = None
    document: Optional[Document] = None


def _is_usable(capability, label: str) -> bool:
    if capability is None:
        return False
    try:
        return bool(capability.is_available())
    except Exception as e:
        logger.debug(f"{label} availability check failed: {e}")
        return False


def detect(host: HostEnvironment, preference: str = "auto") -> Mechanism:
    """Determine which clipboard mechanism is usable right now.

    Args:
        host: Capabilities of the running application
        preference: "auto" (native, then legacy), "native" or "legacy" to
            consider only that mechanism, "none" to disable copying

    Returns:
        The first usable mechanism, or Mechanism.UNAVAILABLE
    """
    if preference in ("auto", "native") and _is_usable(host.clipboard, "Native"):
        return Mechanism.NATIVE_ASYNC

    if preference in ("auto", "legacy") and _is_usable(host.document, "Document"):
        return Mechanism.LEGACY_DOM

    return Mechanism.UNAVAILABLE
