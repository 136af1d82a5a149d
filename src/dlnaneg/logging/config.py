"""Logging setup for the dlnaneg CLI and embedding servers.

dlnaneg usually runs inside a media server that already owns the root
logger, so configure_logging() only replaces the handlers it installed
itself. Negotiation logging can be given its own level, which lets an
operator trace every session decision while keeping the rest quiet.
"""

from __future__ import annotations

import logging
import sys
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import TYPE_CHECKING

from dlnaneg.logging.context import SessionContextFilter
from dlnaneg.logging.handlers import JSONFormatter

if TYPE_CHECKING:
    from dlnaneg.config.models import LoggingConfig

_LEVEL_MAP: dict[str, int] = {
    "debug": logging.DEBUG,
    "info": logging.INFO,
    "warning": logging.WARNING,
    "error": logging.ERROR,
}

# Decision, header and directive records all come from this subtree
SESSION_LOGGER = "dlnaneg.negotiation"

TEXT_FORMAT = "%(asctime)s - %(session_tag)s%(name)s - %(levelname)s - %(message)s"
DATE_FORMAT = "%Y-%m-%dT%H:%M:%S%z"


def _to_level(name: str | None, fallback: int) -> int:
    if name is None:
        return fallback
    return _LEVEL_MAP.get(name.casefold(), fallback)


def _is_session_handler(handler: logging.Handler) -> bool:
    return any(isinstance(f, SessionContextFilter) for f in handler.filters)


def _build_formatter(config: LoggingConfig) -> logging.Formatter:
    if config.format.casefold() == "json":
        return JSONFormatter()
    return logging.Formatter(TEXT_FORMAT, datefmt=DATE_FORMAT)


def _open_file_handler(config: LoggingConfig) -> logging.Handler | None:
    file_path = Path(config.file).expanduser()
    try:
        file_path.parent.mkdir(parents=True, exist_ok=True)
        return RotatingFileHandler(
            file_path,
            maxBytes=config.max_bytes,
            backupCount=config.backup_count,
            encoding="utf-8",
        )
    except OSError as e:
        sys.stderr.write(f"Warning: Could not open log file {file_path}: {e}\n")
        return None


def configure_logging(config: LoggingConfig) -> list[logging.Handler]:
    """Install session-aware log handlers on the root logger.

    Handlers from an earlier call are closed and replaced; handlers owned by
    the host application are left alone. Every installed handler carries a
    SessionContextFilter, so records show the negotiation session they
    belong to.

    When ``config.session_level`` is set, the negotiation loggers use that
    level instead of ``config.level``.

    Args:
        config: Logging configuration.

    Returns:
        The handlers that were installed.
    """
    level = _to_level(config.level, logging.INFO)
    session_level = _to_level(config.session_level, level)

    root_logger = logging.getLogger()
    for handler in root_logger.handlers[:]:
        if _is_session_handler(handler):
            root_logger.removeHandler(handler)
            handler.close()
    root_logger.setLevel(level)

    session_logger = logging.getLogger(SESSION_LOGGER)
    session_logger.setLevel(
        session_level if config.session_level is not None else logging.NOTSET
    )

    formatter = _build_formatter(config)
    context_filter = SessionContextFilter()

    handlers: list[logging.Handler] = []
    if config.file:
        file_handler = _open_file_handler(config)
        if file_handler is not None:
            handlers.append(file_handler)
    if config.include_stderr or not handlers:
        handlers.append(logging.StreamHandler(sys.stderr))

    # Handlers must pass whichever of the two levels is more verbose
    handler_level = min(level, session_level)
    for handler in handlers:
        handler.setLevel(handler_level)
        handler.setFormatter(formatter)
        handler.addFilter(context_filter)
        root_logger.addHandler(handler)
    return handlers
