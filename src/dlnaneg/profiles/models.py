"""Device capability profile model."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from types import MappingProxyType

from dlnaneg.profiles.flags import DEFAULT_FLAGS, DlnaFlag


def freeze_mime_remap(
    remap: Mapping[str, Mapping[str, str]],
) -> Mapping[str, Mapping[str, str]]:
    """Return a read-only copy of a nested MIME remap table."""
    return MappingProxyType(
        {device: MappingProxyType(dict(table)) for device, table in remap.items()}
    )


@dataclass(frozen=True)
class DeviceProfile:
    """Capabilities of a class of DLNA renderers.

    Profiles are immutable and shared between concurrent sessions.
    Variants are built with ``dataclasses.replace`` from a base profile.
    """

    name: str
    # ffprobe format_name values the renderer plays without transcoding
    valid_formats: frozenset[str] = frozenset()
    audio_needs_transcoding_codecs: frozenset[str] = frozenset()
    video_needs_transcoding_codecs: frozenset[str] = frozenset()
    transcoded_media_profile: str = "AVC_MP4_HP_HD_AAC"
    content_type: str = "video/mp4"
    flags: DlnaFlag = DEFAULT_FLAGS
    description: str | None = None
    # device friendly name -> source MIME -> replacement MIME
    mime_remap: Mapping[str, Mapping[str, str]] = field(
        default_factory=lambda: MappingProxyType({}), hash=False
    )

    def __post_init__(self) -> None:
        """Normalize collections to immutable types."""
        object.__setattr__(self, "valid_formats", frozenset(self.valid_formats))
        object.__setattr__(
            self,
            "audio_needs_transcoding_codecs",
            frozenset(c.casefold() for c in self.audio_needs_transcoding_codecs),
        )
        object.__setattr__(
            self,
            "video_needs_transcoding_codecs",
            frozenset(c.casefold() for c in self.video_needs_transcoding_codecs),
        )
        object.__setattr__(self, "flags", DlnaFlag(self.flags))
        object.__setattr__(self, "mime_remap", freeze_mime_remap(self.mime_remap))

    def remap_mime(self, device_friendly_name: str, mime: str) -> str:
        """Return the MIME type a specific renderer expects for ``mime``."""
        from dlnaneg.negotiation.mime import remap_mime_type

        return remap_mime_type(self, device_friendly_name, mime)
