"""Load and save AppSettings as JSON under the user's config directory."""

from __future__ import annotations

import logging
import os
from pathlib import Path

from pydantic import ValidationError

from podlens.constants.values import CONFIG_DIR_NAME, CONFIG_FILE_NAME, CONFIG_PATH_ENV
from podlens.models.state.app_settings import (
    AppSettings,
    ConfigError,
    ConfigLoadError,
    ConfigSaveError,
)

logger = logging.getLogger(__name__)


class ConfigManager:
    """Static helpers around the settings file."""

    @staticmethod
    def config_path() -> Path:
        """Return the settings file path, honouring ``PODLENS_CONFIG``."""
        override = os.environ.get(CONFIG_PATH_ENV)
        if override:
            return Path(override).expanduser()
        return Path.home() / ".config" / CONFIG_DIR_NAME / CONFIG_FILE_NAME

    @classmethod
    def read(cls, path: Path | None = None) -> AppSettings:
        """Read settings, raising ConfigLoadError on any failure."""
        target = path or cls.config_path()
        try:
            raw = target.read_text(encoding="utf-8")
        except OSError as exc:
            raise ConfigLoadError(f"Cannot read {target}: {exc}") from exc
        try:
            return AppSettings.model_validate_json(raw)
        except ValidationError as exc:
            raise ConfigLoadError(f"Invalid settings in {target}: {exc}") from exc

    @classmethod
    def load(cls, path: Path | None = None) -> AppSettings:
        """Load settings; absence or corruption yields defaults."""
        target = path or cls.config_path()
        if not target.exists():
            logger.debug("No settings file at %s, using defaults", target)
            return AppSettings()
        try:
            return cls.read(target)
        except ConfigLoadError as exc:
            logger.warning("%s; falling back to defaults", exc)
            return AppSettings()

    @classmethod
    def save(cls, settings: AppSettings, path: Path | None = None) -> Path:
        """Write settings as pretty JSON, creating parent directories."""
        target = path or cls.config_path()
        try:
            target.parent.mkdir(parents=True, exist_ok=True)
            target.write_text(
                settings.model_dump_json(by_alias=True, indent=2) + "\n", encoding="utf-8"
            )
        except OSError as exc:
            raise ConfigSaveError(f"Cannot write {target}: {exc}") from exc
        logger.debug("Saved settings to %s", target)
        return target


__all__ = [
    "AppSettings",
    "ConfigError",
    "ConfigLoadError",
    "ConfigManager",
    "ConfigSaveError",
]
