"""Configuration loading and dot-path access."""

from __future__ import annotations

import logging
import os
from typing import Any

import yaml

from joker.errors import ConfigError, ConfigNotFoundError

__all__ = ["Config"]

_logger = logging.getLogger("joker.config")


class Config:
    """Configuration accessor with dot-path key support."""

    def __init__(self, data: dict[str, Any] | None = None) -> None:
        self._data: dict[str, Any] = data or {}
        self.source_path: str | None = None

    @classmethod
    def load(cls, yaml_path: str) -> Config:
        """Load configuration from a YAML file.

        Args:
            yaml_path: Path to the YAML configuration file.

        Returns:
            A new Config wrapping the top-level mapping of the file.

        Raises:
            ConfigNotFoundError: If the file does not exist.
            ConfigError: If the YAML is invalid or is not a mapping.
        """
        if not os.path.isfile(yaml_path):
            raise ConfigNotFoundError(config_path=yaml_path)

        with open(yaml_path, encoding="utf-8") as f:
            try:
                data = yaml.safe_load(f)
            except yaml.YAMLError as e:
                raise ConfigError(f"Invalid YAML in {yaml_path}: {e}", cause=e) from e

        if data is None:
            data = {}
        if not isinstance(data, dict):
            raise ConfigError(
                f"Config in {yaml_path} must be a mapping, got {type(data).__name__}"
            )

        _logger.debug("Loaded config from %s (%d top-level keys)", yaml_path, len(data))
        config = cls(data)
        config.source_path = yaml_path
        return config

    @property
    def data(self) -> dict[str, Any]:
        """Shallow copy of the underlying mapping."""
        return dict(self._data)

    def get(self, key: str, default: Any = None) -> Any:
        """Get a configuration value by dot-path key."""
        parts = key.split(".")
        current: Any = self._data
        for part in parts:
            if isinstance(current, dict) and part in current:
                current = current[part]
            else:
                return default
        return current
