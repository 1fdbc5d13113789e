"""Custom exception classes for the R Labs learning platform.

This module defines custom exceptions for the clipboard and catalog
components to enable targeted error handling and clearer diagnostics.
"""


class RLabsError(Exception):
    """Base exception class for all R Labs platform errors."""
    pass


class ClipboardError(RLabsError):
    """Base exception for clipboard write failures.

    Clipboard errors never propagate out of a writer; they are logged and
    kept on ``ClipboardWriter.last_error`` for callers that want a reason.
    """
    pass


class CapabilityUnavailable(ClipboardError):
    """Raised when no clipboard mechanism is usable in this environment.

    Examples:
    - No pyperclip backend (no xclip/xsel/wl-copy, no display)
    - No running QApplication to host the fallback element
    - Clipboard disabled through configuration
    """
    pass


class WriteFailed(ClipboardError):
    """Raised when a clipboard mechanism was chosen but the write failed.

    Examples:
    - pyperclip backend process exited with an error
    - Legacy copy command reported failure
    - Element insertion or selection raised
    """
    pass


class CatalogError(RLabsError):
    """Exception raised when the lab catalog cannot be loaded.

    Examples:
    - Catalog file missing or unreadable
    - Invalid JSON
    - Schema validation failures
    - Unknown card index
    """
    pass
