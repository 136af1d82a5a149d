"""Pure parsing functions for ffprobe JSON output.

These functions transform the JSON printed by
``ffprobe -print_format json -show_format -show_streams`` into a
ProbeReport. They perform no I/O.
"""

import logging
from typing import Any

from dlnaneg.domain import ProbeReport, StreamInfo
from dlnaneg.introspector.interface import ProbeParseError

logger = logging.getLogger(__name__)

_TRACK_TYPES: dict[str, str] = {
    "video": "video",
    "audio": "audio",
    "subtitle": "subtitle",
    "attachment": "attachment",
}


def map_stream_type(codec_type: str | None) -> str:
    """Map an ffprobe codec_type to a stream type tag.

    Args:
        codec_type: The ``codec_type`` value from ffprobe, or None.

    Returns:
        One of "video", "audio", "subtitle", "attachment" or "other".
    """
    if not codec_type:
        return "other"
    return _TRACK_TYPES.get(codec_type.casefold(), "other")


def parse_stream(stream: dict[str, Any], position: int) -> StreamInfo:
    """Parse a single ffprobe stream dict into a StreamInfo.

    Args:
        stream: Stream dictionary from ffprobe JSON.
        position: Position of the stream in the list, used when ffprobe
            omits ``index``.

    Returns:
        StreamInfo domain object.
    """
    index = stream.get("index", position)
    codec = stream.get("codec_name")
    if codec is not None and not isinstance(codec, str):
        logger.warning("Ignoring non-string codec_name for stream %s", index)
        codec = None
    return StreamInfo(
        index=index,
        stream_type=map_stream_type(stream.get("codec_type")),
        codec=codec.casefold() if codec else None,
    )


def parse_ffprobe_output(data: Any) -> ProbeReport:
    """Build a ProbeReport from parsed ffprobe JSON.

    Missing values are carried through as None or an empty stream list;
    deciding whether they are usable is the decision engine's job.

    Args:
        data: Parsed ffprobe JSON document.

    Returns:
        ProbeReport for the probed item.

    Raises:
        ProbeParseError: If the document is not an object or its ``format``
            or ``streams`` entries have the wrong shape.
    """
    if not isinstance(data, dict):
        raise ProbeParseError(
            f"Expected a JSON object from ffprobe, got {type(data).__name__}"
        )

    format_info = data.get("format", {})
    if not isinstance(format_info, dict):
        raise ProbeParseError("'format' in ffprobe output must be an object")

    raw_streams = data.get("streams", [])
    if not isinstance(raw_streams, list):
        raise ProbeParseError("'streams' in ffprobe output must be a list")

    streams = []
    for position, stream in enumerate(raw_streams):
        if not isinstance(stream, dict):
            logger.warning("Skipping malformed stream entry at position %d", position)
            continue
        streams.append(parse_stream(stream, position))

    return ProbeReport(
        container_format=format_info.get("format_name") or None,
        streams=tuple(streams),
    )
