"""
Daemon Service - polls the clipboard and records changes
"""
import logging
import threading
from typing import Optional

from cacheclip.config.settings import MAX_HISTORY_ITEMS
from cacheclip.core.protocols import ClipboardPort, StoragePort
from cacheclip.history import History
from cacheclip.services.clipboard_service import ClipboardError

logger = logging.getLogger(__name__)

DEFAULT_POLL_INTERVAL = 0.5


class ClipboardPoller:
    """Samples the clipboard on a fixed interval and feeds the history.

    Keeps a single live History for its lifetime and persists it after
    every recorded change. Only the last observed value is remembered, so
    A -> B -> A is recorded as three changes.
    """

    def __init__(
        self,
        clipboard: ClipboardPort,
        storage: StoragePort,
        history: Optional[History] = None,
        interval: float = DEFAULT_POLL_INTERVAL,
        max_items: int = MAX_HISTORY_ITEMS,
    ):
        self.clipboard = clipboard
        self.storage = storage
        self.history = history if history is not None else storage.load()
        self.interval = interval
        self.max_items = max_items
        self.last_content = ""
        self._stop_event = threading.Event()

    def tick(self) -> bool:
        """Sample the clipboard once. Returns True if the clipboard changed."""
        try:
            content = self.clipboard.read()
        except ClipboardError as e:
            logger.debug(f"Clipboard read failed, skipping tick: {e}")
            return False

        if not content or content == self.last_content:
            return False

        if self.history.add_item(content, max_items=self.max_items):
            logger.info(f"Recorded clipboard entry ({len(content)} chars)")
        self.storage.save(self.history)
        self.last_content = content
        return True

    def run(self, stop_event: Optional[threading.Event] = None) -> None:
        """Poll until stop_event (or stop()) is set. Without one, runs forever."""
        if stop_event is not None:
            self._stop_event = stop_event

        logger.info(f"Clipboard polling started (interval {self.interval:.3f}s)")
        while not self._stop_event.is_set():
            self.tick()
            self._stop_event.wait(self.interval)
        logger.info("Clipboard polling stopped")

    def stop(self) -> None:
        self._stop_event.set()
