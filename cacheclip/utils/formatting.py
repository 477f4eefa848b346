"""Text formatting utilities."""

from datetime import datetime

ELLIPSIS = "..."
DEFAULT_MAX_CONTENT_LENGTH = 60
TIMESTAMP_FORMAT = "%Y-%m-%d %H:%M:%S"


def format_timestamp(timestamp: datetime) -> str:
    """Render in the current local zone, whatever offset was stored."""
    return timestamp.astimezone().strftime(TIMESTAMP_FORMAT)


def truncate_text(text: str, max_length: int = DEFAULT_MAX_CONTENT_LENGTH) -> str:
    """Cut text longer than max_length down to exactly max_length, ellipsis included."""
    if len(text) <= max_length:
        return text
    return text[: max_length - len(ELLIPSIS)] + ELLIPSIS


def single_line(text: str) -> str:
    return text.replace("\r", " ").replace("\n", " ")


def format_entry(index: int, entry, max_length: int = DEFAULT_MAX_CONTENT_LENGTH) -> str:
    """Render an entry as ``[index] YYYY-MM-DD HH:MM:SS | content``."""
    content = single_line(truncate_text(entry.content, max_length))
    return f"[{index}] {format_timestamp(entry.timestamp)} | {content}"
