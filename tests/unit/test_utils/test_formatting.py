"""Tests for formatting utilities."""

from datetime import datetime, timedelta, timezone


def _entry(content: str):
    from cacheclip.history import Entry

    return Entry(
        content=content,
        timestamp=datetime(2025, 3, 4, 5, 6, 7, tzinfo=timezone(timedelta(hours=2))),
    )


def test_format_timestamp():
    from cacheclip.utils.formatting import format_timestamp

    result = format_timestamp(datetime(2025, 3, 4, 5, 6, 7))

    assert result == "2025-03-04 05:06:07"


def test_format_timestamp_converts_to_local_zone():
    from cacheclip.utils.formatting import format_timestamp

    result = format_timestamp(datetime(2025, 3, 4, 5, 6, 7, tzinfo=timezone(timedelta(hours=-5))))

    assert result == "2025-03-04 12:06:07"


def test_truncate_text_short():
    from cacheclip.utils.formatting import truncate_text

    assert truncate_text("Short text", max_length=60) == "Short text"


def test_truncate_text_exact_length_untouched():
    from cacheclip.utils.formatting import truncate_text

    text = "b" * 60

    assert truncate_text(text, max_length=60) == text


def test_truncate_text_long():
    from cacheclip.utils.formatting import truncate_text

    result = truncate_text("A" * 200, max_length=60)

    assert len(result) == 60
    assert result == "A" * 57 + "..."


def test_format_entry_layout():
    from cacheclip.utils.formatting import format_entry

    result = format_entry(0, _entry("hello"))

    assert result == "[0] 2025-03-04 05:06:07 | hello"


def test_format_entry_truncates_long_content():
    from cacheclip.utils.formatting import format_entry

    result = format_entry(3, _entry("a" * 70))

    prefix, content = result.split(" | ", 1)
    assert prefix == "[3] 2025-03-04 05:06:07"
    assert content == "a" * 57 + "..."
    assert len(content) == 60


def test_format_entry_replaces_newlines():
    from cacheclip.utils.formatting import format_entry

    result = format_entry(1, _entry("line one\nline two\r\nline three"))

    assert "\n" not in result
    assert "\r" not in result
    assert result.endswith("| line one line two  line three")


def test_format_entry_custom_max_length():
    from cacheclip.utils.formatting import format_entry

    result = format_entry(2, _entry("x" * 30), max_length=20)

    assert result.endswith("| " + "x" * 17 + "...")
