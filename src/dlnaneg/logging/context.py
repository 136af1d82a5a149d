"""Session context for structured logging.

Each streaming session negotiates independently, often on its own thread.
The session id is held in a contextvar and copied onto every log record by
SessionContextFilter.
"""

from __future__ import annotations

import contextvars
import logging
from contextlib import contextmanager
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Generator

_session_id: contextvars.ContextVar[str | None] = contextvars.ContextVar(
    "session_id", default=None
)
_device_name: contextvars.ContextVar[str | None] = contextvars.ContextVar(
    "device_name", default=None
)


def get_session_context() -> tuple[str | None, str | None]:
    """Get the current session context.

    Returns:
        Tuple of (session_id, device_name), either may be None.
    """
    return _session_id.get(), _device_name.get()


@contextmanager
def session_context(
    session_id: str,
    device_name: str | None = None,
) -> Generator[None, None, None]:
    """Context manager for a negotiation session.

    Restores the previous context on exit, so sessions may nest.

    Args:
        session_id: Session identifier.
        device_name: Profile or renderer name for the session.

    Example:
        with session_context("3f2a", "Samsung DTV DMR"):
            logger.info("Negotiating")  # Record carries session_id
    """
    session_token = _session_id.set(session_id)
    device_token = _device_name.set(device_name)
    try:
        yield
    finally:
        _session_id.reset(session_token)
        _device_name.reset(device_token)


class SessionContextFilter(logging.Filter):
    """Logging filter that injects session context into log records.

    Adds session_id and device_name attributes, plus a session_tag such as
    ``[S3f2a] `` for the text format.
    """

    def filter(self, record: logging.LogRecord) -> bool:
        """Inject session context into the record. Never drops records."""
        session_id, device_name = get_session_context()
        record.session_id = session_id
        record.device_name = device_name
        record.session_tag = f"[S{session_id}] " if session_id else ""
        return True
