"""Domain models for DLNA playback negotiation.

These models describe a probed media item and the derived negotiation
values. They are independent of any prober, encoder or HTTP layer.
"""

from __future__ import annotations

import shlex
import uuid
from dataclasses import dataclass, field
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from dlnaneg.profiles.models import DeviceProfile


@dataclass(frozen=True)
class StreamInfo:
    """A single elementary stream reported by the prober."""

    index: int
    stream_type: str  # "video", "audio", "subtitle", "attachment", "other"
    codec: str | None = None


@dataclass(frozen=True)
class ProbeReport:
    """Structured description of a media item's container and streams."""

    container_format: str | None
    streams: tuple[StreamInfo, ...] = ()

    @property
    def primary_video_stream(self) -> StreamInfo | None:
        """Return the first video stream, or None if there is none."""
        return next((s for s in self.streams if s.stream_type == "video"), None)

    @property
    def primary_audio_stream(self) -> StreamInfo | None:
        """Return the first audio stream, or None if there is none."""
        return next((s for s in self.streams if s.stream_type == "audio"), None)


@dataclass(frozen=True)
class TranscodeDecision:
    """Outcome of matching a probe report against a device profile.

    Computed once per streaming session and consumed by the header and
    encoder directive builders.
    """

    is_video_media: bool
    is_audio_media: bool
    format_needs_transcoding: bool
    audio_needs_transcoding: bool
    video_needs_transcoding: bool
    needs_transcoding: bool
    # Carried for audio passthrough, where the output format is the source's
    container_format: str

    def __post_init__(self) -> None:
        if self.is_video_media and self.is_audio_media:
            raise ValueError("Media cannot be both video and audio-only")


@dataclass(frozen=True)
class FilterDirectives:
    """Optional caller-supplied encoder filter directives."""

    audio_shift_correction: str | None = None
    subtitle_filter: str | None = None
    rescale_filter: str | None = None


@dataclass(frozen=True)
class EncoderDirectives:
    """Ordered directive lists for the external encoding engine."""

    input_options: tuple[str, ...] = ()
    output_options: tuple[str, ...] = ()

    @staticmethod
    def _split(options: tuple[str, ...]) -> list[str]:
        args: list[str] = []
        for option in options:
            args.extend(shlex.split(option))
        return args

    def input_args(self) -> list[str]:
        """Return input options as argv tokens, preserving order."""
        return self._split(self.input_options)

    def output_args(self) -> list[str]:
        """Return output options as argv tokens, preserving order."""
        return self._split(self.output_options)


@dataclass
class MediaItem:
    """Generic wrapper for a file, URL or stream being served.

    Only ``profile`` is read or written by negotiation code; the remaining
    fields belong to the serving layer.
    """

    filename: str | None = None
    size_bytes: int | None = None
    id: str = field(default_factory=lambda: str(uuid.uuid4()))
    profile: DeviceProfile | None = None
    is_analyzed: bool = False

    def attach_profile(self, profile: DeviceProfile) -> MediaItem:
        """Attach a device profile and mark the item as analyzed."""
        self.profile = profile
        self.is_analyzed = True
        return self
