"""Unit tests for loading and saving the settings file."""

from __future__ import annotations

import json
from pathlib import Path

import pytest

from podlens.constants.values import CONFIG_PATH_ENV
from podlens.models.state.app_settings import AppSettings, ConfigLoadError
from podlens.models.state.config_manager import ConfigManager

# =============================================================================
# Path resolution
# =============================================================================


class TestConfigPath:
    """Test ConfigManager.config_path."""

    def test_env_override(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        target = tmp_path / "custom.json"
        monkeypatch.setenv(CONFIG_PATH_ENV, str(target))
        assert ConfigManager.config_path() == target

    def test_default_under_home(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.delenv(CONFIG_PATH_ENV, raising=False)
        monkeypatch.setattr(Path, "home", classmethod(lambda cls: tmp_path))
        path = ConfigManager.config_path()
        assert path.is_relative_to(tmp_path / ".config")


# =============================================================================
# Load / save
# =============================================================================


class TestLoadSave:
    """Test settings persistence."""

    def test_missing_file_gives_defaults(self, tmp_path: Path) -> None:
        assert ConfigManager.load(tmp_path / "absent.json") == AppSettings()

    def test_save_then_load(self, tmp_path: Path) -> None:
        target = tmp_path / "nested" / "settings.json"
        settings = AppSettings(last_namespace="payments", last_context="prod", refresh_interval=10)
        assert ConfigManager.save(settings, target) == target
        assert ConfigManager.load(target) == settings

    def test_saved_file_uses_alias_keys(self, tmp_path: Path) -> None:
        target = tmp_path / "settings.json"
        ConfigManager.save(AppSettings(refresh_interval=4), target)
        data = json.loads(target.read_text(encoding="utf-8"))
        assert data["refresh_interval_seconds"] == 4

    def test_corrupt_file_falls_back_to_defaults(self, tmp_path: Path) -> None:
        target = tmp_path / "settings.json"
        target.write_text("{not json", encoding="utf-8")
        assert ConfigManager.load(target) == AppSettings()

    def test_read_raises_on_invalid_values(self, tmp_path: Path) -> None:
        target = tmp_path / "settings.json"
        target.write_text(json.dumps({"refresh_interval_seconds": 0}), encoding="utf-8")
        with pytest.raises(ConfigLoadError):
            ConfigManager.read(target)

    @pytest.mark.parametrize("raw", ["{not json", "[1, 2]", "\"default\""])
    def test_read_raises_on_malformed_documents(self, tmp_path: Path, raw: str) -> None:
        target = tmp_path / "settings.json"
        target.write_text(raw, encoding="utf-8")
        with pytest.raises(ConfigLoadError, match="Invalid settings"):
            ConfigManager.read(target)

    def test_unknown_keys_ignored(self, tmp_path: Path) -> None:
        target = tmp_path / "settings.json"
        target.write_text(json.dumps({"last_namespace": "ops", "extra": 1}), encoding="utf-8")
        assert ConfigManager.load(target).last_namespace == "ops"
