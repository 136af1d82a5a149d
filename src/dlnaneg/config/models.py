"""Configuration data models."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path

VALID_LOG_LEVELS = frozenset({"debug", "info", "warning", "error"})
VALID_LOG_FORMATS = frozenset({"text", "json"})


@dataclass(frozen=True)
class LoggingConfig:
    """Configuration for log output."""

    level: str = "info"
    file: Path | None = None
    format: str = "text"
    include_stderr: bool = True
    max_bytes: int = 10 * 1024 * 1024
    backup_count: int = 3

    # Level for negotiation session records; None follows level
    session_level: str | None = None

    def __post_init__(self) -> None:
        """Validate configuration."""
        if self.level.casefold() not in VALID_LOG_LEVELS:
            raise ValueError(
                f"level must be one of {sorted(VALID_LOG_LEVELS)}, got {self.level}"
            )
        if (
            self.session_level is not None
            and self.session_level.casefold() not in VALID_LOG_LEVELS
        ):
            raise ValueError(
                f"session_level must be one of {sorted(VALID_LOG_LEVELS)}, "
                f"got {self.session_level}"
            )
        if self.format.casefold() not in VALID_LOG_FORMATS:
            raise ValueError(
                f"format must be one of {sorted(VALID_LOG_FORMATS)}, got {self.format}"
            )
        if self.max_bytes <= 0:
            raise ValueError("max_bytes must be positive")
        if self.backup_count < 0:
            raise ValueError("backup_count must not be negative")


@dataclass(frozen=True)
class ProfilesConfig:
    """Configuration for device profile lookup."""

    # Directory of YAML device profiles; None uses ~/.dlnaneg/profiles/
    directory: Path | None = None

    # Friendly name used when a command does not name a device
    default_device: str | None = None


@dataclass(frozen=True)
class NegotiatorConfig:
    """Top-level configuration."""

    logging: LoggingConfig = field(default_factory=LoggingConfig)
    profiles: ProfilesConfig = field(default_factory=ProfilesConfig)
