"""Configuration loader with precedence handling.

Configuration is loaded with the following precedence (highest to lowest):
1. CLI arguments (applied by the caller)
2. Environment variables (DLNANEG_*)
3. Config file (~/.dlnaneg/config.toml)
4. Default values

Environment variables:
- DLNANEG_CONFIG_PATH: Path to config file (overrides default location)
- DLNANEG_PROFILES_DIR: Directory of YAML device profiles
- DLNANEG_DEFAULT_DEVICE: Device friendly name used when none is given
- DLNANEG_LOG_LEVEL: Log level (debug, info, warning, error)
- DLNANEG_SESSION_LOG_LEVEL: Log level for negotiation sessions
"""

from __future__ import annotations

import logging
import os
import sys
from collections.abc import Mapping
from pathlib import Path
from typing import Any

from dlnaneg.config.models import LoggingConfig, NegotiatorConfig, ProfilesConfig

if sys.version_info >= (3, 11):
    import tomllib
else:
    import tomli as tomllib

logger = logging.getLogger(__name__)

DEFAULT_CONFIG_DIR = Path.home() / ".dlnaneg"
DEFAULT_CONFIG_FILE = DEFAULT_CONFIG_DIR / "config.toml"


class ConfigError(Exception):
    """Error loading or validating configuration."""

    pass


def get_default_config_path(env: Mapping[str, str] | None = None) -> Path:
    """Get the config file path, honoring DLNANEG_CONFIG_PATH.

    Args:
        env: Environment mapping (os.environ if None).

    Returns:
        Path to config file.
    """
    env = os.environ if env is None else env
    env_path = env.get("DLNANEG_CONFIG_PATH")
    if env_path:
        return Path(env_path).expanduser()
    return DEFAULT_CONFIG_FILE


def load_config_file(path: Path | None = None) -> dict[str, Any]:
    """Read the TOML config file.

    Args:
        path: Config file path (default location if None).

    Returns:
        Parsed TOML as a dict, empty if the file doesn't exist.

    Raises:
        ConfigError: If the file is not valid TOML.
    """
    config_path = path or get_default_config_path()
    if not config_path.exists():
        return {}
    try:
        with open(config_path, "rb") as f:
            return tomllib.load(f)
    except tomllib.TOMLDecodeError as e:
        raise ConfigError(f"Invalid TOML in {config_path}: {e}") from e


def _section(data: dict[str, Any], name: str) -> dict[str, Any]:
    value = data.get(name, {})
    if not isinstance(value, dict):
        raise ConfigError(f"[{name}] must be a table")
    return value


def _build_logging(data: dict[str, Any], env: Mapping[str, str]) -> LoggingConfig:
    section = dict(_section(data, "logging"))
    if env.get("DLNANEG_LOG_LEVEL"):
        section["level"] = env["DLNANEG_LOG_LEVEL"]
    if env.get("DLNANEG_SESSION_LOG_LEVEL"):
        section["session_level"] = env["DLNANEG_SESSION_LOG_LEVEL"]
    if section.get("file"):
        section["file"] = Path(section["file"]).expanduser()
    try:
        return LoggingConfig(**section)
    except (TypeError, ValueError) as e:
        raise ConfigError(f"Invalid [logging] configuration: {e}") from e


def _build_profiles(data: dict[str, Any], env: Mapping[str, str]) -> ProfilesConfig:
    section = dict(_section(data, "profiles"))
    if env.get("DLNANEG_PROFILES_DIR"):
        section["directory"] = env["DLNANEG_PROFILES_DIR"]
    if env.get("DLNANEG_DEFAULT_DEVICE"):
        section["default_device"] = env["DLNANEG_DEFAULT_DEVICE"]
    if section.get("directory"):
        section["directory"] = Path(section["directory"]).expanduser()
    try:
        return ProfilesConfig(**section)
    except TypeError as e:
        raise ConfigError(f"Invalid [profiles] configuration: {e}") from e


def load_config(
    config_path: Path | None = None,
    env: Mapping[str, str] | None = None,
) -> NegotiatorConfig:
    """Load configuration from file and environment.

    Args:
        config_path: Explicit config file path.
        env: Environment mapping (os.environ if None).

    Returns:
        NegotiatorConfig with environment overrides applied.

    Raises:
        ConfigError: If the file or any value is invalid.
    """
    env = os.environ if env is None else env
    path = config_path or get_default_config_path(env)
    data = load_config_file(path)
    if data:
        logger.debug("Loaded config from %s", path)
    return NegotiatorConfig(
        logging=_build_logging(data, env),
        profiles=_build_profiles(data, env),
    )
