"""Application paths configuration."""

from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from platformdirs import user_config_dir, user_data_dir

APP_NAME = "cacheclip"
HISTORY_FILE_NAME = "history.json"
SETTINGS_FILE_NAME = "settings.yml"


@dataclass(frozen=True)
class AppPaths:
    data_dir: Path
    history_path: Path
    config_path: Path

    @classmethod
    def default(cls) -> "AppPaths":
        data_dir = Path(user_data_dir(APP_NAME, appauthor=False))
        config_dir = Path(user_config_dir(APP_NAME, appauthor=False))

        return cls(
            data_dir=data_dir,
            history_path=data_dir / HISTORY_FILE_NAME,
            config_path=config_dir / SETTINGS_FILE_NAME,
        )

    @classmethod
    def from_overrides(
        cls,
        data_dir: Optional[Path] = None,
        config_path: Optional[Path] = None,
    ) -> "AppPaths":
        defaults = cls.default()
        if data_dir is None:
            data_dir = defaults.data_dir

        return cls(
            data_dir=data_dir,
            history_path=data_dir / HISTORY_FILE_NAME,
            config_path=config_path or defaults.config_path,
        )

    def ensure_data_dir(self) -> Path:
        """Create the data directory if needed. OSError propagates."""
        self.data_dir.mkdir(parents=True, exist_ok=True)
        return self.data_dir
