"""Configuration package with clean public API."""

from .manager import ConfigurationManager, get_config_manager, reset_config_manager
from .schemas import AppConfig, LoggingConfig, ObserverConfig, validate_config

__all__ = [
    "AppConfig",
    "validate_config",
    "LoggingConfig",
    "ObserverConfig",
    "ConfigurationManager",
    "get_config_manager",
    "reset_config_manager",
]
