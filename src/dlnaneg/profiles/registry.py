"""Built-in device profiles and friendly-name lookup.

The registry is read-only after construction and safe to share across
threads.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Iterator, Mapping
from dataclasses import replace
from types import MappingProxyType

from dlnaneg.profiles.flags import DEFAULT_FLAGS
from dlnaneg.profiles.models import DeviceProfile

logger = logging.getLogger(__name__)

SAMSUNG_DTV_DMR = "Samsung DTV DMR"

_SAMSUNG_MIME_REMAP: dict[str, str] = {
    "video/x-matroska": "video/x-mkv",
    "video/x-avi": "video/x-msvideo",
    "application/x-subrip": "smi/caption",
}

DLNA_PROFILE = DeviceProfile(
    name="dlna",
    description="Generic DLNA renderer",
    valid_formats=frozenset({"mp4,m4a", "mp3"}),
    audio_needs_transcoding_codecs=frozenset({"aac"}),
    video_needs_transcoding_codecs=frozenset({"h264"}),
    transcoded_media_profile="AVC_MP4_HP_HD_AAC",
    content_type="video/mp4",
    flags=DEFAULT_FLAGS,
    mime_remap={SAMSUNG_DTV_DMR: _SAMSUNG_MIME_REMAP},
)

# Same capabilities as the generic profile, registered under the renderer's
# friendly name so lookups resolve to an explicit entry
SAMSUNG_PROFILE = replace(
    DLNA_PROFILE,
    name=SAMSUNG_DTV_DMR,
    description="Samsung TVs (DTV DMR)",
)


class ProfileRegistry(Mapping[str, DeviceProfile]):
    """Read-only mapping of device friendly names to profiles.

    Lookups through :meth:`for_device` never fail: unknown renderers get the
    default profile.
    """

    def __init__(
        self,
        profiles: Iterable[DeviceProfile],
        default: DeviceProfile = DLNA_PROFILE,
    ) -> None:
        table: dict[str, DeviceProfile] = {}
        for profile in profiles:
            if profile.name in table:
                logger.debug("Profile %r overrides an earlier entry", profile.name)
            table[profile.name] = profile
        # An entry named like the default replaces it as the fallback too
        self._default = table.setdefault(default.name, default)
        self._profiles = MappingProxyType(table)

    @property
    def default(self) -> DeviceProfile:
        """Profile used for renderers without a dedicated entry."""
        return self._default

    def __getitem__(self, name: str) -> DeviceProfile:
        return self._profiles[name]

    def __iter__(self) -> Iterator[str]:
        return iter(self._profiles)

    def __len__(self) -> int:
        return len(self._profiles)

    def for_device(self, friendly_name: str | None) -> DeviceProfile:
        """Select the profile for a renderer by its UPnP friendly name.

        Args:
            friendly_name: The renderer's friendly name, or None.

        Returns:
            The matching profile, or the default profile.
        """
        if friendly_name and friendly_name in self._profiles:
            return self._profiles[friendly_name]
        logger.debug(
            "No profile for device %r, using %r", friendly_name, self._default.name
        )
        return self._default

    def with_profiles(self, profiles: Iterable[DeviceProfile]) -> ProfileRegistry:
        """Return a new registry with ``profiles`` added or replacing entries."""
        return ProfileRegistry([*self._profiles.values(), *profiles], self._default)


def default_registry() -> ProfileRegistry:
    """Return a registry holding the built-in profiles."""
    return ProfileRegistry([DLNA_PROFILE, SAMSUNG_PROFILE])
