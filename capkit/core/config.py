# capkit/core/config.py
"""
Centralized configuration loading for capkit.

Usage:
    from capkit.core.config import load_yaml, load_config, ConfigError

    # Load raw YAML
    data = load_yaml("capkit.yaml")

    # Load and validate (explicit path, else $CAPKIT_CONFIG, else defaults)
    config = load_config("capkit.yaml")

Design principles:
    - Schema validation is separate from loading
    - Clear error messages with file paths
    - A missing config is only an error when a path was asked for
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import Any, Dict, Optional, Type, TypeVar, Union

import yaml
from pydantic import ValidationError

from capkit.core.exceptions import CapkitError
from capkit.core.schema import CapkitConfig
from capkit.logging.logger import get_logger
from capkit.logging.tags import CONFIG

logger = get_logger(__name__)

T = TypeVar("T")

CONFIG_ENV_VAR = "CAPKIT_CONFIG"


# =============================================================================
# Errors
# =============================================================================


class ConfigError(CapkitError):
    """Base error for configuration issues."""

    def __init__(self, message: str, path: Optional[Path] = None):
        self.path = path
        if path:
            message = f"{message} (file: {path})"
        super().__init__(message)


class ConfigNotFoundError(ConfigError):
    """Raised when a config file doesn't exist."""

    pass


class ConfigParseError(ConfigError):
    """Raised when YAML parsing fails."""

    pass


class ConfigValidationError(ConfigError):
    """Raised when config doesn't match schema."""

    pass


# =============================================================================
# Core Loading Functions
# =============================================================================


def load_yaml(path: Union[str, Path]) -> Dict[str, Any]:
    """
    Load a YAML file and return as dictionary.

    Args:
        path: Path to YAML file

    Returns:
        Dictionary of config data (empty file gives an empty dict)

    Raises:
        ConfigNotFoundError: If file doesn't exist
        ConfigParseError: If YAML is invalid or the root is not a mapping
    """
    p = Path(path)

    if not p.exists():
        raise ConfigNotFoundError("Config file not found", path=p)

    if p.is_dir():
        raise ConfigError("Config path is a directory, not a file", path=p)

    try:
        with p.open("r", encoding="utf-8") as f:
            data = yaml.safe_load(f) or {}
    except yaml.YAMLError as e:
        raise ConfigParseError(f"Invalid YAML syntax: {e}", path=p) from e
    except OSError as e:
        raise ConfigParseError(f"Failed to read config: {e}", path=p) from e

    if not isinstance(data, dict):
        raise ConfigParseError("Config root must be a mapping (dict)", path=p)

    logger.debug(f"{CONFIG} Loaded config from {p}")
    return data


def load_config(
    path: Optional[Union[str, Path]] = None,
    schema: Type[T] = CapkitConfig,
) -> T:
    """
    Load and validate a configuration file.

    Args:
        path: Path to config file. If None, uses $CAPKIT_CONFIG when set,
              otherwise returns the schema defaults.
        schema: Pydantic model to validate against.

    Returns:
        Validated config object

    Raises:
        ConfigNotFoundError: If the resolved file doesn't exist
        ConfigParseError: If YAML is invalid
        ConfigValidationError: If config doesn't match schema
    """
    resolved_path = _resolve_config_path(path)

    if resolved_path is None:
        logger.debug(f"{CONFIG} No config file given, using defaults")
        return schema()

    data = load_yaml(resolved_path)
    return _validate_config(data, schema, resolved_path)


def _resolve_config_path(path: Optional[Union[str, Path]]) -> Optional[Path]:
    """Resolve the actual config path to load, or None for defaults."""
    if path is not None:
        return Path(path)

    env_path = os.environ.get(CONFIG_ENV_VAR)
    if env_path:
        return Path(env_path)

    return None


def _validate_config(data: Dict[str, Any], schema: Type[T], path: Path) -> T:
    """Validate config data against a pydantic schema."""
    try:
        return schema.model_validate(data)
    except ValidationError as e:
        raise ConfigValidationError(f"Config validation failed: {e}", path=path) from e


# =============================================================================
# Config Writing
# =============================================================================


def save_config(data: Union[Dict[str, Any], Any], path: Union[str, Path]) -> Path:
    """
    Save configuration to a YAML file.

    Args:
        data: Config data (dict or pydantic model)
        path: Path to save to

    Returns:
        Path where config was saved
    """
    p = Path(path)
    p.parent.mkdir(parents=True, exist_ok=True)

    if hasattr(data, "model_dump"):
        data = data.model_dump()
    elif not isinstance(data, dict):
        raise ConfigError(f"Cannot save config of type {type(data)}")

    with p.open("w", encoding="utf-8") as f:
        yaml.dump(data, f, default_flow_style=False, sort_keys=False)

    logger.info(f"{CONFIG} Saved config to {p}")
    return p


__all__ = [
    "ConfigError",
    "ConfigNotFoundError",
    "ConfigParseError",
    "ConfigValidationError",
    "CONFIG_ENV_VAR",
    "load_yaml",
    "load_config",
    "save_config",
]
