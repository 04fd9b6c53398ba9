"""Configuration management for patternkit."""
from __future__ import annotations

import json
import os
import threading
from pathlib import Path
from typing import Any, Dict, Optional, Type, TypeVar

import yaml

from patternkit.config.schemas import AppConfig, LoggingConfig, ObserverConfig
from patternkit.config.utils.env_expansion import expand_config_env_vars
from patternkit.domain.core.exceptions import ConfigurationError
from patternkit.infrastructure.logging.logger import get_logger

T = TypeVar("T")

CONFIG_FILE_ENV = "PATTERNKIT_CONFIG_FILE"

# Environment variable -> (section, key) overrides applied after file loading
ENV_OVERRIDES = {
    "PATTERNKIT_LOG_LEVEL": ("logging", "level"),
    "PATTERNKIT_LOG_DESTINATION": ("logging", "destination"),
    "PATTERNKIT_ENVIRONMENT": (None, "environment"),
}

logger = get_logger(__name__)


class ConfigurationManager:
    """
    Configuration manager that serves as the single source of truth.

    Configuration is loaded lazily on first access from, in order:
    - the config_file passed to the constructor
    - the file named by PATTERNKIT_CONFIG_FILE
    - built-in defaults

    Values may reference environment variables ($VAR, ${VAR}, ${VAR:default})
    and are validated through AppConfig.
    """

    def __init__(self, config_file: Optional[str] = None):
        """Initialize configuration manager with lazy loading."""
        self._config_file = config_file
        self._lock = threading.RLock()
        self._app_config: Optional[AppConfig] = None

    @property
    def app_config(self) -> AppConfig:
        """Lazy load application configuration."""
        if self._app_config is None:
            with self._lock:
                if self._app_config is None:
                    self._app_config = self._load_app_config()
        return self._app_config

    def _resolve_config_file(self) -> Optional[str]:
        return self._config_file or os.environ.get(CONFIG_FILE_ENV)

    def _load_app_config(self) -> AppConfig:
        """Load application configuration from sources."""
        config_file = self._resolve_config_file()
        if config_file:
            config_data = self.load_from_file(config_file)
        else:
            config_data = {}

        config_data = expand_config_env_vars(config_data)
        config_data = self.apply_environment_overrides(config_data)

        app_config = AppConfig.from_dict(config_data)
        logger.debug(
            "Configuration loaded",
            config_file=config_file,
            environment=app_config.environment,
        )
        return app_config

    @staticmethod
    def load_from_file(config_file: str) -> Dict[str, Any]:
        """
        Load raw configuration data from a JSON or YAML file.

        Args:
            config_file: Path to the configuration file

        Returns:
            Configuration dictionary

        Raises:
            ConfigurationError: If the file is missing, unreadable or malformed
        """
        path = Path(config_file)
        if not path.is_file():
            raise ConfigurationError(f"Configuration file not found: {config_file}")

        try:
            with path.open("r", encoding="utf-8") as f:
                if path.suffix.lower() in (".yml", ".yaml"):
                    data = yaml.safe_load(f)
                else:
                    data = json.load(f)
        except (OSError, UnicodeDecodeError, json.JSONDecodeError, yaml.YAMLError) as e:
            raise ConfigurationError(f"Failed to read configuration file {config_file}: {e}") from e

        if data is None:
            return {}
        if not isinstance(data, dict):
            raise ConfigurationError(
                f"Configuration file {config_file} must contain a mapping at the top level"
            )
        return data

    @staticmethod
    def apply_environment_overrides(config_data: Dict[str, Any]) -> Dict[str, Any]:
        """Apply PATTERNKIT_* environment variable overrides."""
        result = dict(config_data)
        for env_name, (section, key) in ENV_OVERRIDES.items():
            value = os.environ.get(env_name)
            if value is None:
                continue
            if section is None:
                result[key] = value
            else:
                section_data = dict(result.get(section) or {})
                section_data[key] = value
                result[section] = section_data
            logger.debug("Applied environment override", variable=env_name)
        return result

    def get_typed(self, config_type: Type[T]) -> T:
        """Get a typed configuration section."""
        type_mapping = {
            AppConfig: lambda config: config,
            LoggingConfig: lambda config: config.logging,
            ObserverConfig: lambda config: config.observer,
        }
        if config_type not in type_mapping:
            raise ValueError(f"Unknown configuration type: {config_type.__name__}")
        return type_mapping[config_type](self.app_config)

    def reload(self) -> None:
        """Reload configuration from sources on next access."""
        with self._lock:
            self._app_config = None
        logger.info("Configuration reload requested")


# Global configuration manager
_config_manager: Optional[ConfigurationManager] = None
_manager_lock = threading.Lock()


def get_config_manager() -> ConfigurationManager:
    """
    Get the global configuration manager instance.

    Returns:
        Global configuration manager
    """
    global _config_manager

    if _config_manager is None:
        with _manager_lock:
            if _config_manager is None:
                _config_manager = ConfigurationManager()

    return _config_manager


def reset_config_manager() -> None:
    """Discard the global configuration manager (test support)."""
    global _config_manager

    with _manager_lock:
        _config_manager = None
