"""Transcode decision engine.

Matches a probe report against a device profile. The result is computed
once per streaming session and shared by the header and directive builders.
"""

from __future__ import annotations

import logging

from dlnaneg.domain import ProbeReport, StreamInfo, TranscodeDecision
from dlnaneg.negotiation.exceptions import InvalidProbeData
from dlnaneg.profiles.models import DeviceProfile

logger = logging.getLogger(__name__)


def _codec_needs_transcoding(
    stream: StreamInfo | None,
    trigger_codecs: frozenset[str],
    format_needs_transcoding: bool,
) -> bool:
    if stream is None:
        return False
    if format_needs_transcoding:
        return True
    # A stream without a codec name cannot be shown to be playable
    if stream.codec is None:
        return True
    return stream.codec.casefold() in trigger_codecs


def evaluate(report: ProbeReport, profile: DeviceProfile) -> TranscodeDecision:
    """Decide whether a media item must be transcoded for a device.

    Only the first video and first audio stream are consulted.

    Args:
        report: Probe report for the media item.
        profile: Capability profile of the target renderer.

    Returns:
        TranscodeDecision for this (report, profile) pair.

    Raises:
        InvalidProbeData: If the report has no container format or no
            streams.
    """
    if not report.container_format:
        raise InvalidProbeData("missing container format")
    if not report.streams:
        raise InvalidProbeData(
            "no streams in probe report", container_format=report.container_format
        )

    video = report.primary_video_stream
    audio = report.primary_audio_stream

    is_video_media = video is not None
    is_audio_media = audio is not None and not is_video_media
    format_needs_transcoding = report.container_format not in profile.valid_formats

    audio_needs_transcoding = _codec_needs_transcoding(
        audio, profile.audio_needs_transcoding_codecs, format_needs_transcoding
    )
    video_needs_transcoding = _codec_needs_transcoding(
        video, profile.video_needs_transcoding_codecs, format_needs_transcoding
    )

    if is_video_media:
        needs_transcoding = audio_needs_transcoding or video_needs_transcoding
    elif is_audio_media:
        needs_transcoding = audio_needs_transcoding
    else:
        needs_transcoding = False

    decision = TranscodeDecision(
        is_video_media=is_video_media,
        is_audio_media=is_audio_media,
        format_needs_transcoding=format_needs_transcoding,
        audio_needs_transcoding=audio_needs_transcoding,
        video_needs_transcoding=video_needs_transcoding,
        needs_transcoding=needs_transcoding,
        container_format=report.container_format,
    )
    logger.debug(
        "Decision for %s on profile %r: needs_transcoding=%s "
        "(format=%s, audio=%s, video=%s)",
        report.container_format,
        profile.name,
        needs_transcoding,
        format_needs_transcoding,
        audio_needs_transcoding,
        video_needs_transcoding,
    )
    return decision
