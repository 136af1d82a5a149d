"""dlnaneg - DLNA playback negotiation.

Decides whether a probed media item must be transcoded for a renderer,
builds the contentFeatures.dlna.org header the renderer reads, and builds
the ordered ffmpeg options for the external encoder.

Example usage:
    from dlnaneg import default_registry, negotiate, parse_ffprobe_output

    report = parse_ffprobe_output(ffprobe_json)
    profile = default_registry().for_device("Samsung DTV DMR")
    result = negotiate(report, profile)
    headers = {"contentFeatures.dlna.org": result.content_features}
"""

__version__ = "0.1.0"

from dlnaneg.domain import (
    EncoderDirectives,
    FilterDirectives,
    MediaItem,
    ProbeReport,
    StreamInfo,
    TranscodeDecision,
)
from dlnaneg.introspector import parse_ffprobe_output
from dlnaneg.negotiation import (
    InvalidProbeData,
    NegotiationResult,
    build_content_features_header,
    build_directives,
    evaluate,
    negotiate,
    remap_mime_type,
)
from dlnaneg.profiles import DeviceProfile, DlnaFlag, ProfileRegistry, default_registry

__all__ = [
    "DeviceProfile",
    "DlnaFlag",
    "EncoderDirectives",
    "FilterDirectives",
    "InvalidProbeData",
    "MediaItem",
    "NegotiationResult",
    "ProbeReport",
    "ProfileRegistry",
    "StreamInfo",
    "TranscodeDecision",
    "build_content_features_header",
    "build_directives",
    "default_registry",
    "evaluate",
    "negotiate",
    "parse_ffprobe_output",
    "remap_mime_type",
]
