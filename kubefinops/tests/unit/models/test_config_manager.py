"""Tests for ConfigManager."""

from __future__ import annotations

import json
from pathlib import Path

import pytest

from kubefinops.constants.enums import StatusPolicy
from kubefinops.models.state.config_manager import ConfigManager
from kubefinops.models.state.finops_settings import (
    ConfigError,
    ConfigLoadError,
    FinOpsSettings,
)


@pytest.fixture(autouse=True)
def _isolated_config(monkeypatch: pytest.MonkeyPatch, tmp_path: Path):
    """Run each test from an empty directory with a clean cache."""
    monkeypatch.delenv(ConfigManager.ENV_SETTINGS_PATH, raising=False)
    monkeypatch.chdir(tmp_path)
    ConfigManager.reset()
    yield
    ConfigManager.reset()


class TestConfigManagerLoad:
    """Tests for ConfigManager.load."""

    def test_defaults_without_document(self) -> None:
        settings = ConfigManager.load()
        assert settings == FinOpsSettings()
        assert ConfigManager.source_path() is None

    def test_load_json(self, tmp_path: Path) -> None:
        path = tmp_path / "custom.json"
        path.write_text(json.dumps({"statusPolicy": "fixed_boundary"}))

        settings = ConfigManager.load(path)

        assert settings.status_policy is StatusPolicy.FIXED_BOUNDARY
        assert ConfigManager.source_path() == path

    def test_load_yaml(self, tmp_path: Path) -> None:
        path = tmp_path / "settings.yaml"
        path.write_text("thresholds:\n  redBelow: 0.05\nrefreshInterval: 15\n")

        settings = ConfigManager.load(path)

        assert settings.thresholds.red_below == 0.05
        assert settings.refresh_interval == 15

    def test_empty_document_uses_defaults(self, tmp_path: Path) -> None:
        json_path = tmp_path / "empty.json"
        json_path.write_text("")
        yaml_path = tmp_path / "empty.yml"
        yaml_path.write_text("")

        assert ConfigManager.load(json_path) == FinOpsSettings()
        assert ConfigManager.load(yaml_path) == FinOpsSettings()

    def test_discovers_default_filename(self, tmp_path: Path) -> None:
        (tmp_path / "finops-settings.json").write_text('{"peakWindow": "3d"}')
        assert ConfigManager.load().peak_window == "3d"

    def test_env_variable_path(
        self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        path = tmp_path / "env.json"
        path.write_text('{"peakWindow": "2d"}')
        monkeypatch.setenv(ConfigManager.ENV_SETTINGS_PATH, str(path))

        assert ConfigManager.load().peak_window == "2d"

    def test_load_is_cached(self, tmp_path: Path) -> None:
        path = tmp_path / "finops-settings.json"
        path.write_text('{"peakWindow": "3d"}')
        first = ConfigManager.load()

        path.write_text('{"peakWindow": "5d"}')

        assert ConfigManager.load() is first

    def test_explicit_path_bypasses_cache(self, tmp_path: Path) -> None:
        ConfigManager.load()
        path = tmp_path / "other.json"
        path.write_text('{"peakWindow": "4d"}')
        assert ConfigManager.load(path).peak_window == "4d"

    def test_reset_drops_cache(self) -> None:
        first = ConfigManager.load()
        ConfigManager.reset()
        assert ConfigManager.load() is not first


class TestConfigManagerErrors:
    """Tests for settings load failures."""

    def test_missing_explicit_file(self, tmp_path: Path) -> None:
        with pytest.raises(ConfigLoadError, match="Cannot read"):
            ConfigManager.load(tmp_path / "missing.json")

    def test_malformed_json(self, tmp_path: Path) -> None:
        path = tmp_path / "bad.json"
        path.write_text("{not json")
        with pytest.raises(ConfigLoadError, match="Cannot parse"):
            ConfigManager.load(path)

    def test_malformed_yaml(self, tmp_path: Path) -> None:
        path = tmp_path / "bad.yaml"
        path.write_text("thresholds: [unclosed\n")
        with pytest.raises(ConfigLoadError):
            ConfigManager.load(path)

    def test_non_mapping_document(self, tmp_path: Path) -> None:
        path = tmp_path / "list.json"
        path.write_text("[1, 2]")
        with pytest.raises(ConfigLoadError, match="mapping"):
            ConfigManager.load(path)

    def test_invalid_values(self, tmp_path: Path) -> None:
        path = tmp_path / "invalid.json"
        path.write_text('{"thresholds": {"redBelow": 2}}')
        with pytest.raises(ConfigLoadError, match="Invalid settings"):
            ConfigManager.load(path)

    def test_failed_load_does_not_cache(self, tmp_path: Path) -> None:
        path = tmp_path / "invalid.json"
        path.write_text('{"refreshInterval": 0}')
        with pytest.raises(ConfigLoadError):
            ConfigManager.load(path)
        assert ConfigManager.load() == FinOpsSettings()

    def test_load_error_is_config_error(self) -> None:
        assert issubclass(ConfigLoadError, ConfigError)

    def test_parse_none(self) -> None:
        assert ConfigManager.parse(None) == FinOpsSettings()
