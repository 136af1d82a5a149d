"""Probe report input for negotiation.

- MediaProber: Protocol implemented by the external prober
- ProbeParseError: Raised for malformed prober output
- parse_ffprobe_output: Convert ffprobe JSON into a ProbeReport
"""

from dlnaneg.introspector.interface import MediaProber, ProbeParseError
from dlnaneg.introspector.parsers import (
    map_stream_type,
    parse_ffprobe_output,
    parse_stream,
)

__all__ = [
    "MediaProber",
    "ProbeParseError",
    "map_stream_type",
    "parse_ffprobe_output",
    "parse_stream",
]
