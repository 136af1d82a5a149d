"""Exceptions raised while negotiating playback."""


class NegotiationError(Exception):
    """Base class for negotiation errors."""

    pass


class InvalidProbeData(NegotiationError):
    """Raised when a probe report cannot support a transcode decision.

    The session must be aborted: no header or directive list may be
    produced from a report that failed this check.
    """

    def __init__(self, reason: str, container_format: str | None = None) -> None:
        """Initialize the error.

        Args:
            reason: Why the report was rejected.
            container_format: Container format from the report, if any.
        """
        self.reason = reason
        self.container_format = container_format
        super().__init__(f"Invalid probe data: {reason}")
