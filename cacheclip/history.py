"""
CacheClip History - bounded, most-recent-first log of clipboard text
"""
import logging
from datetime import datetime
from typing import List, Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field, field_validator

from cacheclip.config.settings import MAX_HISTORY_ITEMS
from cacheclip.utils.fuzzy import FuzzyMatcher

logger = logging.getLogger(__name__)


def local_now() -> datetime:
    """Current time with the local UTC offset attached"""
    return datetime.now().astimezone()


class Entry(BaseModel):
    """One recorded clipboard snapshot"""
    model_config = ConfigDict(frozen=True)

    content: str
    timestamp: datetime

    @field_validator('timestamp')
    @classmethod
    def attach_local_offset(cls, v: datetime) -> datetime:
        """Naive timestamps are taken to be local time"""
        if v.tzinfo is None:
            return v.astimezone()
        return v


class History(BaseModel):
    """Ordered clipboard history, newest entry at index 0.

    Positions are only meaningful until the next mutation; they are not
    durable identifiers.
    """
    items: List[Entry] = Field(default_factory=list)

    @field_validator('items')
    @classmethod
    def drop_overflow(cls, v: List[Entry]) -> List[Entry]:
        """Keep only the newest MAX_HISTORY_ITEMS entries"""
        if len(v) > MAX_HISTORY_ITEMS:
            logger.info(f"Dropping {len(v) - MAX_HISTORY_ITEMS} entries beyond the history limit")
            return v[:MAX_HISTORY_ITEMS]
        return v

    def __len__(self) -> int:
        return len(self.items)

    def add_item(self, content: str, max_items: int = MAX_HISTORY_ITEMS) -> bool:
        """
        Record clipboard content at the head of the history

        Blank content, and content equal to the current newest entry, is
        ignored. Older duplicates are allowed.

        Returns:
            True if a new entry was recorded
        """
        if not content.strip():
            return False

        if self.items and self.items[0].content == content:
            logger.debug("Skipping content identical to newest entry")
            return False

        self.items.insert(0, Entry(content=content, timestamp=local_now()))
        limit = min(max_items, MAX_HISTORY_ITEMS)
        if len(self.items) > limit:
            del self.items[limit:]
        return True

    def get_item(self, index: int) -> Optional[Entry]:
        """Return the entry at position index, or None if out of range"""
        if 0 <= index < len(self.items):
            return self.items[index]
        return None

    def clear(self) -> int:
        """Remove every entry. Returns the number removed."""
        count = len(self.items)
        self.items.clear()
        return count

    def search(self, query: str, matcher: Optional[FuzzyMatcher] = None) -> List[Tuple[int, Entry]]:
        """
        Fuzzy-match query against every entry

        Returns:
            (original_index, entry) pairs in history order, not score order
        """
        matcher = matcher or FuzzyMatcher()
        return [
            (i, entry)
            for i, entry in enumerate(self.items)
            if matcher.is_match(entry.content, query)
        ]
