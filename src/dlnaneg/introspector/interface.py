"""MediaProber interface for the external media inspection tool."""

from pathlib import Path
from typing import Protocol

from dlnaneg.domain import ProbeReport


class ProbeParseError(Exception):
    """Raised when prober output cannot be turned into a ProbeReport."""

    pass


class MediaProber(Protocol):
    """Protocol for media probing implementations.

    Negotiation code only consumes the resulting ProbeReport; implementations
    (ffprobe, mediainfo, a cached database row) live outside this package.
    """

    def probe(self, path: Path) -> ProbeReport:
        """Inspect a media item.

        Args:
            path: Path to the media file.

        Returns:
            ProbeReport with container format and stream list.

        Raises:
            ProbeParseError: If the item cannot be probed.
        """
        ...
