"""Configuration for dlnaneg.

Usage:
    from dlnaneg.config import load_config

    config = load_config()
    print(config.profiles.default_device)
"""

from dlnaneg.config.loader import (
    ConfigError,
    get_default_config_path,
    load_config,
    load_config_file,
)
from dlnaneg.config.models import LoggingConfig, NegotiatorConfig, ProfilesConfig

__all__ = [
    "ConfigError",
    "LoggingConfig",
    "NegotiatorConfig",
    "ProfilesConfig",
    "get_default_config_path",
    "load_config",
    "load_config_file",
]
