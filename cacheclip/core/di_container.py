"""Dependency injection container."""

from dataclasses import dataclass, field
from typing import Optional

from cacheclip.config import AppPaths, Settings, SettingsManager
from cacheclip.services import (
    ClipboardService,
    HistoryService,
    StorageError,
    StorageService,
)
from cacheclip.services.storage_service import CorruptionSink


@dataclass
class AppContainer:
    settings: Settings
    paths: AppPaths
    on_corruption: Optional[CorruptionSink] = None

    _storage_service: Optional[StorageService] = field(
        default=None, init=False, repr=False
    )
    _clipboard_service: Optional[ClipboardService] = field(
        default=None, init=False, repr=False
    )
    _history_service: Optional[HistoryService] = field(
        default=None, init=False, repr=False
    )

    @property
    def storage_service(self) -> StorageService:
        if self._storage_service is None:
            try:
                self.paths.ensure_data_dir()
            except OSError as e:
                raise StorageError(
                    f"Could not create data directory {self.paths.data_dir}: {e}"
                ) from e
            self._storage_service = StorageService(
                self.paths.history_path, on_corruption=self.on_corruption
            )
        return self._storage_service

    @property
    def clipboard_service(self) -> ClipboardService:
        if self._clipboard_service is None:
            self._clipboard_service = ClipboardService()
        return self._clipboard_service

    @property
    def history_service(self) -> HistoryService:
        if self._history_service is None:
            self._history_service = HistoryService(
                storage=self.storage_service,
                clipboard=self.clipboard_service,
                settings=self.settings,
            )
        return self._history_service

    @classmethod
    def create(
        cls,
        settings: Optional[Settings] = None,
        paths: Optional[AppPaths] = None,
        on_corruption: Optional[CorruptionSink] = None,
    ) -> "AppContainer":
        paths = paths or AppPaths.default()
        return cls(
            settings=settings or SettingsManager(paths.config_path).settings,
            paths=paths,
            on_corruption=on_corruption,
        )
