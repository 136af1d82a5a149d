"""Encoder directive assembly.

Translates a transcode decision into the ordered input and output options
passed to ffmpeg. The encoder applies filters positionally, so the order of
the returned directives is part of the contract.
"""

from __future__ import annotations

from dlnaneg.domain import EncoderDirectives, FilterDirectives, TranscodeDecision

VIDEO_AUDIO_CODEC = "-acodec aac"
VIDEO_CODEC = "-vcodec libx264"
COPY_AUDIO = "-acodec copy"
COPY_VIDEO = "-vcodec copy"

# Appended to every video session, in this order
VIDEO_TRAILER: tuple[str, ...] = (
    "-copyts",
    "-preset ultrafast",
    "-tune zerolatency",
    "-crf 28",
    "-bsf:v h264_mp4toannexb",
    "-f mp4",
)

AUDIO_ONLY_CODEC = "-acodec libvorbis"
AUDIO_ONLY_FORMAT = "-f ogg"


def _video_directives(
    decision: TranscodeDecision,
    filters: FilterDirectives,
) -> EncoderDirectives:
    input_options: list[str] = []
    output_options: list[str] = []

    if decision.audio_needs_transcoding or filters.audio_shift_correction:
        if filters.audio_shift_correction:
            input_options.append(filters.audio_shift_correction)
        output_options.append(VIDEO_AUDIO_CODEC)
    else:
        output_options.append(COPY_AUDIO)

    if (
        decision.video_needs_transcoding
        or filters.subtitle_filter
        or filters.rescale_filter
    ):
        if filters.subtitle_filter:
            output_options.append(filters.subtitle_filter)
        if filters.rescale_filter:
            output_options.append(filters.rescale_filter)
        output_options.append(VIDEO_CODEC)
    else:
        output_options.append(COPY_VIDEO)

    output_options.extend(VIDEO_TRAILER)
    return EncoderDirectives(tuple(input_options), tuple(output_options))


def _audio_directives(decision: TranscodeDecision) -> EncoderDirectives:
    if decision.audio_needs_transcoding:
        return EncoderDirectives((), (AUDIO_ONLY_CODEC, AUDIO_ONLY_FORMAT))
    return EncoderDirectives((), (f"-f {decision.container_format}",))


def build_directives(
    decision: TranscodeDecision,
    filters: FilterDirectives | None = None,
) -> EncoderDirectives:
    """Build ordered encoder directives for a session.

    Args:
        decision: Transcode decision for the session.
        filters: Optional audio shift correction, subtitle and rescale
            filters. Any of them forces re-encoding of its stream type.

    Returns:
        EncoderDirectives with input and output options. Both are empty for
        media that is neither video nor audio.
    """
    filters = filters or FilterDirectives()
    if decision.is_video_media:
        return _video_directives(decision, filters)
    if decision.is_audio_media:
        return _audio_directives(decision)
    return EncoderDirectives()
