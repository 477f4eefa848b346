"""Business logic services."""

from .clipboard_service import ClipboardError, ClipboardService, ClipboardUnavailableError
from .daemon_service import ClipboardPoller
from .history_service import EntryNotFoundError, HistoryService
from .storage_service import StorageError, StorageService

__all__ = [
    "ClipboardError",
    "ClipboardPoller",
    "ClipboardService",
    "ClipboardUnavailableError",
    "EntryNotFoundError",
    "HistoryService",
    "StorageError",
    "StorageService",
]
