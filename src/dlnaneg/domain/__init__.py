"""Domain models for DLNA playback negotiation.

- Probe input: StreamInfo, ProbeReport
- Derived values: TranscodeDecision, EncoderDirectives
- Caller input: FilterDirectives
- Serving-layer wrapper: MediaItem

Usage:
    from dlnaneg.domain import ProbeReport, StreamInfo
"""

from .models import (
    EncoderDirectives,
    FilterDirectives,
    MediaItem,
    ProbeReport,
    StreamInfo,
    TranscodeDecision,
)

__all__ = [
    "StreamInfo",
    "ProbeReport",
    "TranscodeDecision",
    "FilterDirectives",
    "EncoderDirectives",
    "MediaItem",
]
