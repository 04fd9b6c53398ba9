"""Environment variable expansion for configuration values."""

import os
import re
from typing import Any, Dict

# $VAR, ${VAR} and ${VAR:default}
_ENV_PATTERN = re.compile(
    r"\$\{(?P<braced>[A-Za-z_][A-Za-z0-9_]*)(?::(?P<default>[^}]*))?\}"
    r"|\$(?P<bare>[A-Za-z_][A-Za-z0-9_]*)"
)


def _replace(match: "re.Match[str]") -> str:
    name = match.group("braced") or match.group("bare")
    if name in os.environ:
        return os.environ[name]
    default = match.group("default")
    if default is not None:
        return default
    # Unknown variables are left untouched
    return match.group(0)


def expand_env_vars(value: Any) -> Any:
    """
    Recursively expand environment variables in configuration values.

    Strings are expanded; dicts and lists are walked; any other value is
    returned unchanged.
    """
    if isinstance(value, str):
        return _ENV_PATTERN.sub(_replace, value)
    if isinstance(value, dict):
        return {key: expand_env_vars(item) for key, item in value.items()}
    if isinstance(value, list):
        return [expand_env_vars(item) for item in value]
    return value


def expand_config_env_vars(config: Dict[str, Any]) -> Dict[str, Any]:
    """Expand environment variables across a whole configuration dictionary."""
    return expand_env_vars(config)
