"""Clipboard operations service.

Uses pyperclip for cross-platform clipboard access.
"""

import logging

import pyperclip

logger = logging.getLogger(__name__)


class ClipboardError(RuntimeError):
    """Raised when a clipboard read or write fails."""


class ClipboardUnavailableError(ClipboardError):
    """Raised when no clipboard mechanism exists on this system."""


class ClipboardService:
    def open(self) -> None:
        """Probe the clipboard once so a missing backend fails early."""
        try:
            pyperclip.paste()
        except pyperclip.PyperclipException as e:
            raise ClipboardUnavailableError(f"Could not initialize clipboard: {e}") from e
        logger.info("Clipboard backend ready")

    def read(self) -> str:
        try:
            text = pyperclip.paste()
        except pyperclip.PyperclipException as e:
            raise ClipboardError(f"Failed to read from clipboard: {e}") from e
        return text or ""

    def write(self, text: str) -> None:
        try:
            pyperclip.copy(text)
        except pyperclip.PyperclipException as e:
            raise ClipboardError(f"Could not set clipboard contents: {e}") from e
