"""Per-session negotiation.

Runs the decision engine once and feeds the decision to the header and
directive builders. Each call is independent; any number of sessions may
negotiate concurrently against the same profile.
"""

from __future__ import annotations

import logging
import uuid
from dataclasses import dataclass

from dlnaneg.domain import (
    EncoderDirectives,
    FilterDirectives,
    ProbeReport,
    TranscodeDecision,
)
from dlnaneg.logging.context import session_context
from dlnaneg.negotiation.decision import evaluate
from dlnaneg.negotiation.exceptions import InvalidProbeData
from dlnaneg.negotiation.headers import build_content_features_header
from dlnaneg.negotiation.options import build_directives
from dlnaneg.profiles.models import DeviceProfile

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class NegotiationResult:
    """Everything the serving layer needs to start streaming one item."""

    session_id: str
    profile_name: str
    decision: TranscodeDecision
    content_features: str
    content_type: str
    directives: EncoderDirectives


def negotiate(
    report: ProbeReport,
    profile: DeviceProfile,
    filters: FilterDirectives | None = None,
    session_id: str | None = None,
) -> NegotiationResult:
    """Negotiate playback of one media item with one renderer.

    Args:
        report: Probe report for the media item.
        profile: Profile of the target renderer.
        filters: Optional encoder filter directives.
        session_id: Identifier for log correlation; generated if None.

    Returns:
        NegotiationResult with decision, header and encoder directives.

    Raises:
        InvalidProbeData: If the report cannot be evaluated. Nothing is
            built in that case.
    """
    session_id = session_id or uuid.uuid4().hex[:8]
    with session_context(session_id, profile.name):
        try:
            decision = evaluate(report, profile)
        except InvalidProbeData as e:
            logger.warning("Aborting session: %s", e)
            raise

        content_features = build_content_features_header(decision, profile)
        directives = build_directives(decision, filters)
        logger.debug(
            "Negotiated %s with %r: transcode=%s",
            decision.container_format,
            profile.name,
            decision.needs_transcoding,
        )
        return NegotiationResult(
            session_id=session_id,
            profile_name=profile.name,
            decision=decision,
            content_features=content_features,
            content_type=profile.content_type,
            directives=directives,
        )
