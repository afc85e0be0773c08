"""
User settings and their JSON persistence.
"""

import json
from dataclasses import dataclass, asdict, fields, replace
from pathlib import Path
from typing import Any, Dict, Optional

from .config import DEFAULT_SETTINGS, SETTINGS_FILE
from .exceptions import ConfigurationError
from .logger import get_logger

logger = get_logger("settings")


@dataclass(frozen=True)
class Credentials:
    """Discogs consumer key and secret."""
    api_key: str = ""
    api_secret: str = ""

    @property
    def is_complete(self) -> bool:
        return bool(self.api_key and self.api_secret)


@dataclass(frozen=True)
class Settings:
    """Settings handed to every pipeline run."""
    artwork_folder: str = DEFAULT_SETTINGS["artwork_folder"]
    metadata_template: str = DEFAULT_SETTINGS["metadata_template"]
    api_key: str = DEFAULT_SETTINGS["api_key"]
    api_secret: str = DEFAULT_SETTINGS["api_secret"]

    @property
    def credentials(self) -> Credentials:
        return Credentials(api_key=self.api_key, api_secret=self.api_secret)

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)

    @classmethod
    def field_names(cls):
        return [f.name for f in fields(cls)]

    def with_value(self, key: str, value: str) -> "Settings":
        """Return a copy with one setting changed."""
        if key not in self.field_names():
            raise ConfigurationError(
                f"Unknown setting '{key}'. Valid settings: {', '.join(self.field_names())}"
            )
        return replace(self, **{key: value})


class SettingsStore:
    """Loads and saves settings as JSON, merging stored values over defaults."""

    def __init__(self, path: Optional[Path] = None):
        self.path = Path(path) if path else SETTINGS_FILE

    def load(self) -> Settings:
        """
        Load settings from disk.

        Missing files yield the defaults; unknown keys are ignored.

        Raises:
            ConfigurationError: If the file exists but cannot be parsed
        """
        values = dict(DEFAULT_SETTINGS)
        if not self.path.exists():
            logger.debug(f"No settings file at {self.path}, using defaults")
            return Settings(**values)

        try:
            stored = json.loads(self.path.read_text(encoding="utf-8"))
        except (OSError, ValueError) as e:
            raise ConfigurationError(f"Cannot read settings file {self.path}: {e}") from e

        if not isinstance(stored, dict):
            raise ConfigurationError(f"Settings file {self.path} must contain a JSON object")

        for key in Settings.field_names():
            if key in stored and isinstance(stored[key], str):
                values[key] = stored[key]
            elif key in stored:
                logger.warning(f"Ignoring non-string value for setting '{key}'")

        return Settings(**values)

    def save(self, settings: Settings) -> None:
        """Persist settings to disk, creating the config directory if needed."""
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            self.path.write_text(json.dumps(settings.to_dict(), indent=2), encoding="utf-8")
        except OSError as e:
            raise ConfigurationError(f"Cannot write settings file {self.path}: {e}") from e
        logger.debug(f"Saved settings to {self.path}")

    def reset(self) -> Settings:
        """Restore and persist the default settings."""
        settings = Settings(**DEFAULT_SETTINGS)
        self.save(settings)
        return settings
