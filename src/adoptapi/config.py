"""
Configuration loading for adoptapi.

Configuration lives in a YAML file (by default in the platform's user config
directory). A missing file means defaults; unknown keys are preserved.
"""

import os
from pathlib import Path
from typing import Any, Dict, Optional, Union

import platformdirs
import yaml

from adoptapi.constants import (
    APP_NAME,
    CONFIG_FILE_NAME,
    DEFAULT_GITHUB_ORGANISATION,
    GITHUB_API_TIMEOUT,
    GITHUB_TOKEN_ENV_VAR,
    RELEASES_CACHE_EXPIRY_SECONDS,
)
from adoptapi.exceptions import ConfigFileError, ConfigValidationError
from adoptapi.log_utils import logger

DEFAULT_CONFIG: Dict[str, Any] = {
    "GITHUB_TOKEN": None,
    "ALLOW_ENV_TOKEN": True,
    "GITHUB_ORGANISATION": DEFAULT_GITHUB_ORGANISATION,
    "RELEASES_CACHE_EXPIRY_SECONDS": RELEASES_CACHE_EXPIRY_SECONDS,
    "GITHUB_API_TIMEOUT": GITHUB_API_TIMEOUT,
    "LOG_LEVEL": None,
    "LOG_DIR": None,
}

_NUMERIC_KEYS = ("RELEASES_CACHE_EXPIRY_SECONDS", "GITHUB_API_TIMEOUT")


def get_default_config_path() -> Path:
    """Return the default location of the configuration file."""
    return Path(platformdirs.user_config_dir(APP_NAME)) / CONFIG_FILE_NAME


def _validate_config(config: Dict[str, Any]) -> None:
    for key in _NUMERIC_KEYS:
        value = config.get(key)
        if isinstance(value, bool) or not isinstance(value, (int, float)):
            raise ConfigValidationError(
                f"Invalid value for {key}", details=f"expected a number, got {value!r}"
            )
        if value < 0:
            raise ConfigValidationError(
                f"Invalid value for {key}", details="must not be negative"
            )


def load_config(config_path: Optional[Union[str, Path]] = None) -> Dict[str, Any]:
    """
    Load configuration from a YAML file merged over DEFAULT_CONFIG.

    Parameters:
        config_path (Optional[Union[str, Path]]): File to read; the platform default
            location is used when omitted.

    Returns:
        Dict[str, Any]: The merged configuration mapping.

    Raises:
        ConfigFileError: If the file cannot be read, is not valid YAML, or does not
            contain a mapping.
        ConfigValidationError: If a numeric setting is not a non-negative number.
    """
    path = Path(config_path) if config_path else get_default_config_path()
    config = dict(DEFAULT_CONFIG)

    if not path.exists():
        logger.debug(f"No configuration file at {path}; using defaults")
        return config

    try:
        with open(path, "r", encoding="utf-8") as f:
            loaded = yaml.safe_load(f)
    except (OSError, yaml.YAMLError) as exc:
        raise ConfigFileError(
            f"Failed to read configuration file {path}", details=str(exc)
        ) from exc

    if loaded is None:
        loaded = {}
    if not isinstance(loaded, dict):
        raise ConfigFileError(
            f"Configuration file {path} must contain a mapping",
            details=f"got {type(loaded).__name__}",
        )

    config.update(loaded)
    _validate_config(config)
    logger.debug(f"Loaded configuration from {path}")
    return config


def get_effective_github_token(
    github_token: Optional[str], allow_env_token: bool = True
) -> Optional[str]:
    """
    Determine the GitHub token to use, preferring the explicit argument over the environment.

    Parameters:
        github_token (Optional[str]): Explicit token to use; leading and trailing whitespace are ignored.
        allow_env_token (bool): If True, fall back to the `GITHUB_TOKEN` environment variable when no explicit token is provided.

    Returns:
        Optional[str]: The chosen token with surrounding whitespace removed, or `None` if no token is available.
    """
    candidate = (github_token or "").strip()
    if candidate:
        return candidate
    if not allow_env_token:
        return None
    env_token = os.environ.get(GITHUB_TOKEN_ENV_VAR)
    return env_token.strip() if env_token else None
