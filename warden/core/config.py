"""Configuration management for warden.

Settings are declared in YAML or TOML and validated with Pydantic models.
The file location is passed explicitly or read from ``$WARDEN_CONFIG``; when
neither is present the defaults apply.
"""
from __future__ import annotations

import logging
import os
import tomllib
from pathlib import Path
from typing import Any, Dict, Optional

import yaml
from pydantic import BaseModel, Field, ValidationError, field_validator

from warden.security.roles import DEFAULT_AREA
from warden.utils.errors import ConfigurationError
from warden.utils.logging import configure_logging, get_logger

logger = get_logger(__name__)


class LoggingSettings(BaseModel):
    """Logging knobs applied by :meth:`AclSettings.apply_logging`."""

    level: str = "INFO"
    directory: Optional[Path] = None
    rich: bool = True

    @field_validator("level")
    @classmethod
    def validate_level(cls, value: str) -> str:
        name = value.upper()
        if not isinstance(logging.getLevelName(name), int):
            raise ValueError(f"Unknown log level {value!r}")
        return name


class AclSettings(BaseModel):
    """Root configuration schema."""

    default_rule_area: str = Field(default=DEFAULT_AREA, description="Area assigned to new rules")
    logging: LoggingSettings = Field(default_factory=LoggingSettings)

    @field_validator("default_rule_area")
    @classmethod
    def validate_area(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("default_rule_area must not be blank")
        return value

    def apply_logging(self) -> None:
        configure_logging(
            level=self.logging.level,
            log_dir=self.logging.directory,
            rich=self.logging.rich,
        )


class AclConfigManager:
    """Load and cache :class:`AclSettings`."""

    def __init__(self, config_path: Optional[Path] = None) -> None:
        env_path = os.environ.get("WARDEN_CONFIG")
        self.config_path = config_path or (Path(env_path) if env_path else None)
        self._settings: Optional[AclSettings] = None

    def load(self) -> AclSettings:
        """Load configuration from disk and validate it."""

        if self.config_path is None:
            logger.debug("no configuration file, using defaults")
            self._settings = AclSettings()
            return self._settings
        logger.debug("loading configuration", extra={"path": str(self.config_path)})
        data = self._read_file(self.config_path)
        try:
            settings = AclSettings.model_validate(data)
        except ValidationError as exc:
            raise ConfigurationError(str(exc)) from exc
        self._settings = settings
        return settings

    def get_settings(self) -> AclSettings:
        """Return the last loaded settings, loading them if necessary."""

        if self._settings is None:
            return self.load()
        return self._settings

    @staticmethod
    def _read_file(path: Path) -> Dict[str, Any]:
        if not path.exists():
            raise ConfigurationError(f"Configuration file {path} does not exist")
        try:
            if path.suffix in {".yml", ".yaml"}:
                with path.open("r", encoding="utf-8") as handle:
                    data = yaml.safe_load(handle) or {}
            elif path.suffix == ".toml":
                with path.open("rb") as handle:
                    data = tomllib.load(handle)
            else:
                raise ConfigurationError(f"Unsupported configuration format: {path.suffix}")
        except (yaml.YAMLError, tomllib.TOMLDecodeError) as exc:
            raise ConfigurationError(f"Cannot parse {path}: {exc}") from exc
        if not isinstance(data, dict):
            raise ConfigurationError(f"Configuration file {path} must contain a mapping")
        invalid = [key for key in data if not isinstance(key, str)]
        if invalid:
            raise ConfigurationError(f"Configuration file {path} has non-string keys: {invalid!r}")
        return data


__all__ = ["AclConfigManager", "AclSettings", "LoggingSettings"]
