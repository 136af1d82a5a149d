"""Structured logging for dlnaneg.

Text or JSON output with file rotation, and per-session context for
concurrent negotiations.
"""

from dlnaneg.logging.config import configure_logging
from dlnaneg.logging.context import (
    SessionContextFilter,
    get_session_context,
    session_context,
)
from dlnaneg.logging.handlers import JSONFormatter

__all__ = [
    "JSONFormatter",
    "SessionContextFilter",
    "configure_logging",
    "get_session_context",
    "session_context",
]
