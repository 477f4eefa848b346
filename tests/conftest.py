"""Pytest configuration and shared fixtures."""

import threading
import time
from datetime import datetime, timedelta, timezone
from pathlib import Path
from typing import Iterable, List, Optional

import pytest

from cacheclip.history import Entry, History
from cacheclip.services.clipboard_service import ClipboardError
from cacheclip.services.storage_service import StorageService

# Marks a scripted read that should fail
READ_FAILURE = object()


class FakeClipboard:
    """In-memory clipboard.

    Reads return scripted values in order; once the script is exhausted the
    last value keeps being returned and ``stop_event`` (if any) is set.
    """

    def __init__(self, reads: Iterable = (), stop_event: Optional[threading.Event] = None):
        self._reads = list(reads)
        self._last = ""
        self.stop_event = stop_event
        self.read_count = 0
        self.writes: List[str] = []

    def read(self) -> str:
        self.read_count += 1
        if not self._reads:
            if self.stop_event is not None:
                self.stop_event.set()
            return self._last

        value = self._reads.pop(0)
        if value is READ_FAILURE:
            raise ClipboardError("clipboard busy")
        self._last = value
        return value

    def write(self, text: str) -> None:
        self.writes.append(text)
        self._last = text


def make_history(*contents: str) -> History:
    """Build a history from contents given newest first."""
    base = datetime(2025, 1, 1, 10, 0, 0, tzinfo=timezone(timedelta(hours=2)))
    items = [
        Entry(content=content, timestamp=base - timedelta(minutes=i))
        for i, content in enumerate(contents)
    ]
    return History(items=items)


@pytest.fixture(autouse=True)
def local_timezone(monkeypatch):
    """Pin local time to UTC+02:00 so rendered timestamps are stable."""
    monkeypatch.setenv("TZ", "UTC-02:00")
    time.tzset()
    yield
    monkeypatch.undo()
    time.tzset()


@pytest.fixture
def temp_history_path(tmp_path: Path) -> Path:
    return tmp_path / "data" / "history.json"


@pytest.fixture
def temp_config_path(tmp_path: Path) -> Path:
    return tmp_path / "settings.yml"


@pytest.fixture
def corruption_events() -> list:
    return []


@pytest.fixture
def storage(temp_history_path: Path, corruption_events: list) -> StorageService:
    return StorageService(
        temp_history_path,
        on_corruption=lambda path, error: corruption_events.append((path, error)),
    )


@pytest.fixture
def fake_clipboard() -> FakeClipboard:
    return FakeClipboard()


@pytest.fixture
def history_factory():
    return make_history


@pytest.fixture
def clipboard_factory():
    return FakeClipboard


@pytest.fixture
def read_failure():
    return READ_FAILURE
