"""
Storage Service - reads and writes the history file
"""
import logging
from pathlib import Path
from typing import Callable, Optional

from pydantic import ValidationError

from cacheclip.history import History

logger = logging.getLogger(__name__)

CorruptionSink = Callable[[Path, Exception], None]


class StorageError(RuntimeError):
    """Raised when the history file or its directory cannot be accessed."""


class StorageService:
    """Persists a History as a single pretty-printed JSON document"""

    def __init__(self, history_path: Path, on_corruption: Optional[CorruptionSink] = None):
        """
        Initialize storage service

        Args:
            history_path: Location of history.json
            on_corruption: Called with (path, error) when an unreadable file is discarded
        """
        self.history_path = history_path
        self.on_corruption = on_corruption

    def load(self) -> History:
        """Load history, falling back to an empty one on a missing or corrupt file"""
        if not self.history_path.exists():
            logger.debug(f"No history file at {self.history_path}, starting empty")
            return History()

        try:
            raw = self.history_path.read_bytes()
        except OSError as e:
            raise StorageError(f"Could not read history file {self.history_path}: {e}") from e

        try:
            history = History.model_validate_json(raw)
        except (ValidationError, UnicodeDecodeError) as e:
            logger.warning(
                f"Could not parse history file {self.history_path}. Starting with a new history."
            )
            logger.debug(f"Parse error: {e}")
            if self.on_corruption is not None:
                self.on_corruption(self.history_path, e)
            return History()

        logger.debug(f"Loaded {len(history)} entries from {self.history_path}")
        return history

    def save(self, history: History) -> None:
        """Overwrite the history file with the full history"""
        try:
            self.history_path.parent.mkdir(parents=True, exist_ok=True)
            self.history_path.write_text(history.model_dump_json(indent=2), encoding="utf-8")
        except OSError as e:
            raise StorageError(f"Could not write history file {self.history_path}: {e}") from e

        logger.debug(f"Saved {len(history)} entries to {self.history_path}")
