"""JSON log formatting.

One object per line. Records logged inside a negotiation session carry a
``session`` object so log shippers can group a whole session together.
"""

from __future__ import annotations

import json
import logging
from datetime import datetime, timezone
from typing import Any

# Session fields are reported under "session", not as free-form context
SESSION_FIELDS = ("session_id", "device_name")

_RECORD_ATTRS = frozenset(
    vars(logging.LogRecord("", logging.NOTSET, "", 0, "", None, None))
) | {"message", "asctime", "session_tag", *SESSION_FIELDS}


def record_context(record: logging.LogRecord) -> dict[str, Any]:
    """Return attributes passed to the log call through ``extra``."""
    return {
        key: value
        for key, value in vars(record).items()
        if key not in _RECORD_ATTRS and not key.startswith("_")
    }


class JSONFormatter(logging.Formatter):
    """Format log records as JSON.

    Keys: timestamp (ISO-8601 UTC), level, logger (unless root), message,
    session (when the record was logged inside a session), context (values
    passed via ``extra``) and exception.
    """

    def format(self, record: logging.LogRecord) -> str:
        entry: dict[str, Any] = {
            "timestamp": datetime.fromtimestamp(
                record.created, tz=timezone.utc
            ).isoformat(),
            "level": record.levelname,
        }
        if record.name != "root":
            entry["logger"] = record.name
        entry["message"] = record.getMessage()

        session = {
            key: getattr(record, key)
            for key in SESSION_FIELDS
            if getattr(record, key, None) is not None
        }
        if session:
            entry["session"] = session

        context = record_context(record)
        if context:
            entry["context"] = context

        if record.exc_info:
            entry["exception"] = self.formatException(record.exc_info)
        return json.dumps(entry, default=str)
