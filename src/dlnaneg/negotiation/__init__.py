"""Playback negotiation between media items and DLNA renderers.

- evaluate: probe report + profile -> TranscodeDecision
- build_content_features_header: decision + profile -> header value
- remap_mime_type: per-renderer MIME overrides
- build_directives: decision + filters -> ordered encoder directives
- negotiate: all of the above for one session
"""

from dlnaneg.negotiation.decision import evaluate
from dlnaneg.negotiation.exceptions import InvalidProbeData, NegotiationError
from dlnaneg.negotiation.headers import (
    CONTENT_FEATURES_HEADER,
    TRANSFER_MODE_HEADER,
    build_content_features_header,
)
from dlnaneg.negotiation.mime import remap_mime_type
from dlnaneg.negotiation.options import build_directives
from dlnaneg.negotiation.session import NegotiationResult, negotiate

__all__ = [
    "CONTENT_FEATURES_HEADER",
    "TRANSFER_MODE_HEADER",
    "InvalidProbeData",
    "NegotiationError",
    "NegotiationResult",
    "build_content_features_header",
    "build_directives",
    "evaluate",
    "negotiate",
    "remap_mime_type",
]
