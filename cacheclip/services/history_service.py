"""
History Service - list, search, restore and clear operations
"""
import logging
import threading
from typing import List, Optional

from cacheclip.config.settings import Settings
from cacheclip.core.protocols import ClipboardPort, StoragePort
from cacheclip.history import Entry
from cacheclip.services.daemon_service import ClipboardPoller
from cacheclip.utils.formatting import format_entry
from cacheclip.utils.fuzzy import FuzzyMatcher

logger = logging.getLogger(__name__)


class EntryNotFoundError(LookupError):
    """Raised when restore is given an index with no entry."""

    def __init__(self, index: int):
        super().__init__(f"Item with index {index} not found")
        self.index = index


class HistoryService:
    """Service for the user-facing history operations.

    Every call loads the history fresh from storage; mutations are saved
    before returning.
    """

    def __init__(
        self,
        storage: StoragePort,
        clipboard: ClipboardPort,
        settings: Optional[Settings] = None,
        matcher: Optional[FuzzyMatcher] = None,
    ):
        """
        Initialize history service

        Args:
            storage: Loads and saves the history file
            clipboard: Used by restore and the daemon
            settings: Display and retention settings (defaults if omitted)
            matcher: Fuzzy matcher for search
        """
        self.storage = storage
        self.clipboard = clipboard
        self.settings = settings or Settings()
        self.matcher = matcher or FuzzyMatcher()

    def _format(self, index: int, entry: Entry) -> str:
        return format_entry(index, entry, self.settings.display.max_content_length)

    def entry_count(self) -> int:
        return len(self.storage.load())

    def list_entries(self, count: Optional[int] = None) -> List[str]:
        """Formatted lines for the newest count entries"""
        if count is None:
            count = self.settings.display.default_list_count
        if count < 0:
            raise ValueError(f"count must be non-negative, got {count}")
        history = self.storage.load()
        return [self._format(i, entry) for i, entry in enumerate(history.items[:count])]

    def search_entries(self, query: str) -> List[str]:
        """Formatted lines for entries fuzzy-matching query, in history order"""
        history = self.storage.load()
        results = history.search(query, self.matcher)
        logger.debug(f"Search {query!r} matched {len(results)} of {len(history)} entries")
        return [self._format(i, entry) for i, entry in results]

    def restore_entry(self, index: int) -> Entry:
        """
        Copy the entry at index back to the clipboard

        Raises:
            EntryNotFoundError: no entry at index; the clipboard is untouched
        """
        history = self.storage.load()
        entry = history.get_item(index)
        if entry is None:
            raise EntryNotFoundError(index)

        self.clipboard.write(entry.content)
        logger.info(f"Restored entry {index} ({len(entry.content)} chars)")
        return entry

    def clear_history(self) -> int:
        """Remove all entries. Returns the number removed."""
        history = self.storage.load()
        count = history.clear()
        self.storage.save(history)
        logger.info(f"Cleared {count} entries")
        return count

    def create_poller(self) -> ClipboardPoller:
        return ClipboardPoller(
            clipboard=self.clipboard,
            storage=self.storage,
            interval=self.settings.daemon.poll_interval,
            max_items=self.settings.history.max_items,
        )

    def run_daemon(self, stop_event: Optional[threading.Event] = None) -> None:
        """Poll the clipboard until stop_event is set (forever if None)"""
        self.create_poller().run(stop_event)
