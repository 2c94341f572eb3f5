"""Configuration service for Pomotodo.

Loads and saves ``config.json`` under the platform config directory and
exposes dotted-key access (``notifications.sound``) for the CLI.
"""

from __future__ import annotations

import json
from functools import lru_cache
from pathlib import Path
from typing import Any

from platformdirs import user_config_dir, user_data_dir
from pydantic import BaseModel
from pydantic import ValidationError as PydanticValidationError

from pomotodo.models import AppConfig


class ConfigService:
    """Service for loading, editing and saving application configuration."""

    def __init__(self):
        """Initialize the config service."""
        self.config_dir = Path(user_config_dir("pomotodo"))
        self.config_path = self.config_dir / "config.json"
        self.default_data_dir = Path(user_data_dir("pomotodo"))

        self._config: AppConfig | None = None

    @property
    def config(self) -> AppConfig:
        """Get or load the current configuration."""
        if self._config is None:
            self._config = self.load_config()
        return self._config

    @property
    def data_dir(self) -> Path:
        """Directory holding the task blob."""
        configured = self.config.storage.data_dir
        return Path(configured).expanduser() if configured else self.default_data_dir

    def load_config(self) -> AppConfig:
        """Load configuration from disk. Missing or corrupt files yield defaults."""
        if self._config is not None:
            return self._config

        try:
            with open(self.config_path, encoding="utf-8") as f:
                self._config = AppConfig.model_validate_json(f.read())
        except FileNotFoundError:
            self._config = AppConfig()
        except (OSError, UnicodeDecodeError, PydanticValidationError):
            # Corrupted config falls back to defaults until the next save
            self._config = AppConfig()

        return self._config

    def save_config(self) -> None:
        """Save the current configuration to disk."""
        try:
            self.config_dir.mkdir(parents=True, exist_ok=True)
            with open(self.config_path, "w", encoding="utf-8") as f:
                f.write(self.config.model_dump_json(indent=4))
            self.config_path.chmod(0o600)
        except OSError as e:
            raise RuntimeError(f"Failed to save config: {e}") from e

    def get(self, key: str) -> Any:
        """Get a configuration value by dot-separated key. Unknown keys give None."""
        return _get_from_config(self.config, key)

    def has_key(self, key: str) -> bool:
        """Whether a dotted key names a setting or a section."""
        value: Any = self.config
        for k in key.split("."):
            if not isinstance(value, BaseModel) or k not in type(value).model_fields:
                return False
            value = getattr(value, k)
        return True

    def set(self, key: str, value: Any) -> None:
        """Set a configuration value by dot-separated key and save.

        Raises:
            KeyError: If the key does not name a setting
            ValueError: If the value does not validate
        """
        keys = key.split(".")
        config_dict = self.config.model_dump()

        current = config_dict
        for k in keys[:-1]:
            if not isinstance(current.get(k), dict):
                raise KeyError(key)
            current = current[k]
        if keys[-1] not in current or isinstance(current[keys[-1]], dict):
            raise KeyError(key)

        current[keys[-1]] = value

        try:
            self._config = AppConfig.model_validate(config_dict)
        except PydanticValidationError as e:
            raise ValueError(f"Invalid value for {key}: {e.errors()[0]['msg']}") from e
        self.save_config()

    def reset(self, key: str | None = None) -> None:
        """Reset one key, or the whole configuration, to defaults."""
        if key is None:
            self._config = AppConfig()
            self.save_config()
        else:
            self.set(key, _get_from_config(AppConfig(), key))

    def as_dict(self) -> dict[str, Any]:
        return json.loads(self.config.model_dump_json())


def _get_from_config(config: AppConfig, key: str) -> Any:
    value: Any = config
    for k in key.split("."):
        if isinstance(value, BaseModel):
            value = getattr(value, k, None)
        else:
            return None
    return value


@lru_cache(maxsize=1)
def get_config_service() -> ConfigService:
    """Get a cached ConfigService instance."""
    config_service = ConfigService()
    config_service.load_config()
    return config_service
