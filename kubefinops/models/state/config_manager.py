"""ConfigManager - loads the FinOps settings document once per process.

Usage:
    from kubefinops.models.state.config_manager import ConfigManager

    settings = ConfigManager.load()            # cached after first call
    settings = ConfigManager.load(path)        # explicit document
"""

from __future__ import annotations

import json
import logging
import os
from pathlib import Path
from typing import Any

import yaml
from pydantic import ValidationError

from kubefinops.models.state.finops_settings import ConfigLoadError, FinOpsSettings

logger = logging.getLogger(__name__)


class ConfigManager:
    """Reads, validates and caches the settings document."""

    ENV_SETTINGS_PATH = "KUBEFINOPS_SETTINGS"
    DEFAULT_FILENAMES = ("finops-settings.json", "finops-settings.yaml", "finops-settings.yml")
    _YAML_SUFFIXES = (".yaml", ".yml")

    _settings: FinOpsSettings | None = None
    _source_path: Path | None = None

    @classmethod
    def resolve_path(cls, path: str | Path | None = None) -> Path | None:
        """Return the settings file to read, or None when none exists."""
        if path is not None:
            return Path(path).expanduser()
        env_path = os.environ.get(cls.ENV_SETTINGS_PATH, "").strip()
        if env_path:
            return Path(env_path).expanduser()
        for filename in cls.DEFAULT_FILENAMES:
            candidate = Path.cwd() / filename
            if candidate.is_file():
                return candidate
        return None

    @classmethod
    def load(cls, path: str | Path | None = None) -> FinOpsSettings:
        """Load settings, applying defaults for missing fields.

        The first successful load is cached; later calls without an explicit
        path return the cached instance.

        Raises:
            ConfigLoadError: The document exists but cannot be read or validated.
        """
        if path is None and cls._settings is not None:
            return cls._settings

        resolved = cls.resolve_path(path)
        if resolved is None:
            logger.info("No settings document found, using defaults")
            settings = FinOpsSettings()
        else:
            settings = cls._load_file(resolved)

        cls._settings = settings
        cls._source_path = resolved
        return settings

    @classmethod
    def parse(cls, document: dict[str, Any] | None) -> FinOpsSettings:
        """Validate an already-decoded settings document."""
        try:
            return FinOpsSettings.model_validate(document or {})
        except ValidationError as exc:
            raise ConfigLoadError(f"Invalid settings document: {exc}") from exc

    @classmethod
    def _load_file(cls, path: Path) -> FinOpsSettings:
        try:
            raw = path.read_text(encoding="utf-8")
        except OSError as exc:
            raise ConfigLoadError(f"Cannot read settings file {path}: {exc}") from exc

        try:
            if path.suffix.lower() in cls._YAML_SUFFIXES:
                document = yaml.safe_load(raw)
            else:
                document = json.loads(raw) if raw.strip() else {}
        except (yaml.YAMLError, json.JSONDecodeError) as exc:
            raise ConfigLoadError(f"Cannot parse settings file {path}: {exc}") from exc

        if document is not None and not isinstance(document, dict):
            raise ConfigLoadError(f"Settings file {path} must contain a mapping")

        settings = cls.parse(document)
        logger.debug(f"Loaded settings from {path}")
        return settings

    @classmethod
    def source_path(cls) -> Path | None:
        return cls._source_path

    @classmethod
    def reset(cls) -> None:
        """Drop the cached settings (used by tests)."""
        cls._settings = None
        cls._source_path = None
