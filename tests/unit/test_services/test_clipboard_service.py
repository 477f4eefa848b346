"""Tests for the pyperclip-backed clipboard service."""

import pyperclip
import pytest


def _raise(*args):
    raise pyperclip.PyperclipException("no clipboard mechanism")


def test_read_returns_clipboard_text(monkeypatch):
    from cacheclip.services.clipboard_service import ClipboardService

    monkeypatch.setattr(pyperclip, "paste", lambda: "copied text")

    assert ClipboardService().read() == "copied text"


def test_read_none_becomes_empty_string(monkeypatch):
    from cacheclip.services.clipboard_service import ClipboardService

    monkeypatch.setattr(pyperclip, "paste", lambda: None)

    assert ClipboardService().read() == ""


def test_read_failure_raises_clipboard_error(monkeypatch):
    from cacheclip.services.clipboard_service import ClipboardError, ClipboardService

    monkeypatch.setattr(pyperclip, "paste", _raise)

    with pytest.raises(ClipboardError):
        ClipboardService().read()


def test_write_copies_text(monkeypatch):
    from cacheclip.services.clipboard_service import ClipboardService

    copied = []
    monkeypatch.setattr(pyperclip, "copy", copied.append)

    ClipboardService().write("restore me")

    assert copied == ["restore me"]


def test_write_failure_raises_clipboard_error(monkeypatch):
    from cacheclip.services.clipboard_service import ClipboardError, ClipboardService

    monkeypatch.setattr(pyperclip, "copy", _raise)

    with pytest.raises(ClipboardError):
        ClipboardService().write("text")


def test_open_without_backend_raises_unavailable(monkeypatch):
    from cacheclip.services.clipboard_service import ClipboardService, ClipboardUnavailableError

    monkeypatch.setattr(pyperclip, "paste", _raise)

    with pytest.raises(ClipboardUnavailableError):
        ClipboardService().open()


def test_open_with_backend(monkeypatch):
    from cacheclip.services.clipboard_service import ClipboardService

    monkeypatch.setattr(pyperclip, "paste", lambda: "")

    ClipboardService().open()
