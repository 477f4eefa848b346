"""Protocol definitions for dependency injection."""

from typing import Protocol

from cacheclip.history import History


class ClipboardPort(Protocol):
    def read(self) -> str: ...

    def write(self, text: str) -> None: ...


class StoragePort(Protocol):
    def load(self) -> History: ...

    def save(self, history: History) -> None: ...
