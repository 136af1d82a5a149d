"""DLNA content-features header construction.

The header is sent verbatim by the serving layer and must match what
renderers already accept byte for byte: there is no delimiter between the
play-speed and flags fields, and no trailing semicolon.
"""

from __future__ import annotations

from dlnaneg.domain import TranscodeDecision
from dlnaneg.profiles.flags import format_flags
from dlnaneg.profiles.models import DeviceProfile

CONTENT_FEATURES_HEADER = "contentFeatures.dlna.org"
TRANSFER_MODE_HEADER = "transferMode.dlna.org"

# Time-seek ranges supported, byte ranges not
OPERATIONS_FIELD = "DLNA.ORG_OP=10;"
CONVERSION_FIELD = "DLNA.ORG_CI=1;"
PLAY_SPEED_FIELD = "DLNA.ORG_PS=1"
FLAGS_PADDING = "0" * 24


def build_flags_field(profile: DeviceProfile) -> str:
    """Return the DLNA.ORG_FLAGS field including its reserved zero padding."""
    return f"DLNA.ORG_FLAGS={format_flags(profile.flags)}{FLAGS_PADDING}"


def build_content_features_header(
    decision: TranscodeDecision,
    profile: DeviceProfile,
) -> str:
    """Build the contentFeatures.dlna.org header value.

    Args:
        decision: Transcode decision for the session. Media is always
            advertised as converted by the profile, so the decision does not
            change the value today.
        profile: Target renderer profile.

    Returns:
        Header value, e.g.
        ``DLNA.ORG_PN=AVC_MP4_HP_HD_AAC;DLNA.ORG_OP=10;DLNA.ORG_CI=1;``
        ``DLNA.ORG_PS=1DLNA.ORG_FLAGS=1300000`` followed by 24 zeros.
    """
    return "".join(
        [
            f"DLNA.ORG_PN={profile.transcoded_media_profile};",
            OPERATIONS_FIELD,
            CONVERSION_FIELD,
            PLAY_SPEED_FIELD,
            build_flags_field(profile),
        ]
    )
