"""Device profile files.

Profiles let users describe additional renderers without code changes.
Each profile is a YAML file in the profiles directory
(``~/.dlnaneg/profiles/`` by default) and may extend a built-in profile:

    name: LG webOS TV
    extends: dlna
    valid_formats: ["mp4,m4a", "mp3", "matroska,webm"]
    video_needs_transcoding_codecs: [hevc]
    flags: [streaming_transfer_mode, connection_stalling, dlna_version_15]
"""

from __future__ import annotations

import logging
import re
from dataclasses import replace
from pathlib import Path
from typing import Any

import yaml
from pydantic import BaseModel, ConfigDict, ValidationError, field_validator

from dlnaneg.profiles.flags import flags_from_names
from dlnaneg.profiles.models import DeviceProfile
from dlnaneg.profiles.registry import ProfileRegistry, default_registry

logger = logging.getLogger(__name__)

_PROFILE_FILE_PATTERN = re.compile(r"^[a-zA-Z0-9_-]+$")


class ProfileError(Exception):
    """Error loading or validating a profile."""

    pass


class ProfileNotFoundError(ProfileError):
    """Profile does not exist."""

    pass


class DeviceProfileModel(BaseModel):
    """Pydantic model for a device profile file."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    name: str | None = None
    description: str | None = None
    extends: str | None = None
    valid_formats: list[str] | None = None
    audio_needs_transcoding_codecs: list[str] | None = None
    video_needs_transcoding_codecs: list[str] | None = None
    transcoded_media_profile: str | None = None
    content_type: str | None = None
    flags: list[str] | None = None
    mime_remap: dict[str, dict[str, str]] | None = None

    @field_validator("flags")
    @classmethod
    def validate_flags(cls, v: list[str] | None) -> list[str] | None:
        """Reject unknown flag names."""
        if v is not None:
            flags_from_names(v)
        return v

    @field_validator("transcoded_media_profile")
    @classmethod
    def validate_media_profile(cls, v: str | None) -> str | None:
        """Media profile ids end up verbatim in the header."""
        if v is not None and not re.match(r"^[A-Za-z0-9_]+$", v):
            raise ValueError(
                f"Invalid transcoded_media_profile '{v}'. "
                "Use letters, digits and underscores (e.g. 'AVC_MP4_HP_HD_AAC')."
            )
        return v


def build_profile(
    model: DeviceProfileModel,
    fallback_name: str,
    registry: ProfileRegistry,
) -> DeviceProfile:
    """Turn a validated profile model into a DeviceProfile.

    Args:
        model: Validated profile file contents.
        fallback_name: Name used when the file has no ``name`` key.
        registry: Registry used to resolve ``extends``.

    Returns:
        The constructed profile.

    Raises:
        ProfileError: If ``extends`` names an unknown profile.
    """
    if model.extends is None:
        base = registry.default
    elif model.extends in registry:
        base = registry[model.extends]
    else:
        raise ProfileError(
            f"Profile '{fallback_name}' extends unknown profile '{model.extends}'"
        )

    overrides: dict[str, Any] = {"name": model.name or fallback_name}
    if model.description is not None:
        overrides["description"] = model.description
    if model.valid_formats is not None:
        overrides["valid_formats"] = frozenset(model.valid_formats)
    if model.audio_needs_transcoding_codecs is not None:
        overrides["audio_needs_transcoding_codecs"] = frozenset(
            model.audio_needs_transcoding_codecs
        )
    if model.video_needs_transcoding_codecs is not None:
        overrides["video_needs_transcoding_codecs"] = frozenset(
            model.video_needs_transcoding_codecs
        )
    if model.transcoded_media_profile is not None:
        overrides["transcoded_media_profile"] = model.transcoded_media_profile
    if model.content_type is not None:
        overrides["content_type"] = model.content_type
    if model.flags is not None:
        overrides["flags"] = flags_from_names(model.flags)
    if model.mime_remap is not None:
        overrides["mime_remap"] = model.mime_remap

    return replace(base, **overrides)


def get_profiles_directory() -> Path:
    """Get the default profiles directory path.

    Returns:
        Path to ~/.dlnaneg/profiles/
    """
    return Path.home() / ".dlnaneg" / "profiles"


def list_profile_files(profiles_dir: Path) -> list[Path]:
    """List profile files in a directory, ignoring hidden files."""
    if not profiles_dir.is_dir():
        return []
    return sorted(
        p
        for p in profiles_dir.glob("*.yaml")
        if p.is_file() and not p.name.startswith(".")
    )


def load_profile_file(
    path: Path,
    registry: ProfileRegistry | None = None,
) -> DeviceProfile:
    """Load a single profile file.

    Args:
        path: Path to the YAML profile.
        registry: Registry used to resolve ``extends`` (built-ins by default).

    Returns:
        Loaded DeviceProfile.

    Raises:
        ProfileNotFoundError: If the file doesn't exist.
        ProfileError: If the file is invalid.
    """
    if not _PROFILE_FILE_PATTERN.match(path.stem):
        raise ProfileError(
            f"Profile file name must be alphanumeric (with - or _): {path.name}"
        )
    if not path.exists():
        raise ProfileNotFoundError(f"Profile not found: {path}")

    try:
        with open(path, encoding="utf-8") as f:
            data = yaml.safe_load(f) or {}
    except yaml.YAMLError as e:
        raise ProfileError(f"Invalid YAML in profile {path.name}: {e}") from e

    if not isinstance(data, dict):
        raise ProfileError(f"Profile {path.name} must be a YAML mapping")

    try:
        model = DeviceProfileModel.model_validate(data)
    except ValidationError as e:
        raise ProfileError(f"Invalid profile {path.name}: {e}") from e

    return build_profile(model, path.stem, registry or default_registry())


def load_registry(profiles_dir: Path | None = None) -> ProfileRegistry:
    """Build a registry from the built-in profiles plus profile files.

    Files are loaded in name order; a later file may extend an earlier one.

    Args:
        profiles_dir: Directory of YAML profiles (default profiles directory
            if None).

    Returns:
        ProfileRegistry with built-in and user profiles.

    Raises:
        ProfileError: If any profile file is invalid.
    """
    registry = default_registry()
    directory = profiles_dir or get_profiles_directory()
    for path in list_profile_files(directory):
        profile = load_profile_file(path, registry)
        logger.debug("Loaded device profile %r from %s", profile.name, path)
        registry = registry.with_profiles([profile])
    return registry
