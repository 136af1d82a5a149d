"""Unit tests for JSON formatting and logging configuration."""

import json
import logging
from logging.handlers import RotatingFileHandler
from pathlib import Path

from dlnaneg.config import LoggingConfig
from dlnaneg.logging import JSONFormatter, configure_logging, session_context
from dlnaneg.logging.context import SessionContextFilter


def _filtered_record(msg: str = "hello", **extra) -> logging.LogRecord:
    record = logging.LogRecord("dlnaneg.test", logging.INFO, "x.py", 1, msg, (), None)
    for key, value in extra.items():
        setattr(record, key, value)
    SessionContextFilter().filter(record)
    return record


class TestJSONFormatter:
    """Tests for JSONFormatter."""

    def test_basic_fields(self) -> None:
        """Timestamp, level, message and logger are present."""
        entry = json.loads(JSONFormatter().format(_filtered_record()))
        assert entry["level"] == "INFO"
        assert entry["message"] == "hello"
        assert entry["logger"] == "dlnaneg.test"
        assert entry["timestamp"].endswith("+00:00")
        assert "session" not in entry
        assert "context" not in entry

    def test_session_fields(self) -> None:
        """Session context is grouped under 'session'."""
        with session_context("s9", "dlna"):
            record = _filtered_record()
        entry = json.loads(JSONFormatter().format(record))
        assert entry["session"] == {"session_id": "s9", "device_name": "dlna"}

    def test_extra_context(self) -> None:
        """Extra attributes land in 'context'."""
        record = _filtered_record(container="mp4,m4a")
        entry = json.loads(JSONFormatter().format(record))
        assert entry["context"] == {"container": "mp4,m4a"}


class TestConfigureLogging:
    """Tests for configure_logging()."""

    def test_stderr_text(self) -> None:
        """Default config installs one stderr handler with the text format."""
        handlers = configure_logging(LoggingConfig(level="debug"))
        assert logging.getLogger().level == logging.DEBUG
        assert len(handlers) == 1
        handler = handlers[0]
        assert isinstance(handler, logging.StreamHandler)
        assert handler in logging.getLogger().handlers
        assert "%(session_tag)s" in handler.formatter._fmt

    def test_file_json(self, tmp_path: Path) -> None:
        """A log file gets a rotating handler with JSON output."""
        log_file = tmp_path / "logs" / "dlnaneg.log"
        handlers = configure_logging(
            LoggingConfig(file=log_file, format="json", include_stderr=False)
        )
        assert len(handlers) == 1
        assert isinstance(handlers[0], RotatingFileHandler)

        with session_context("ab12", "dlna"):
            logging.getLogger("dlnaneg.test").warning("written")
        handlers[0].flush()
        entry = json.loads(log_file.read_text().strip().splitlines()[-1])
        assert entry["message"] == "written"
        assert entry["session"] == {"session_id": "ab12", "device_name": "dlna"}

    def test_file_plus_stderr(self, tmp_path: Path) -> None:
        """include_stderr adds a stderr handler next to the file."""
        handlers = configure_logging(
            LoggingConfig(file=tmp_path / "a.log", include_stderr=True)
        )
        assert len(handlers) == 2

    def test_unwritable_file_falls_back_to_stderr(self, tmp_path: Path) -> None:
        """A log path that cannot be created falls back to stderr."""
        blocker = tmp_path / "not-a-dir"
        blocker.write_text("")
        handlers = configure_logging(
            LoggingConfig(file=blocker / "dlnaneg.log", include_stderr=False)
        )
        assert len(handlers) == 1
        assert not isinstance(handlers[0], RotatingFileHandler)

    def test_reconfigure_replaces_own_handlers(self) -> None:
        """Repeated calls replace earlier handlers and keep foreign ones."""
        root = logging.getLogger()
        foreign = logging.NullHandler()
        root.addHandler(foreign)
        try:
            first = configure_logging(LoggingConfig())
            second = configure_logging(LoggingConfig(format="json"))
            assert foreign in root.handlers
            assert first[0] not in root.handlers
            assert second[0] in root.handlers
        finally:
            root.removeHandler(foreign)

    def test_session_level(self) -> None:
        """Negotiation loggers may be more verbose than the rest."""
        handlers = configure_logging(
            LoggingConfig(level="warning", session_level="debug")
        )
        assert logging.getLogger().level == logging.WARNING
        assert logging.getLogger("dlnaneg.negotiation").level == logging.DEBUG
        assert handlers[0].level == logging.DEBUG
        assert logging.getLogger("dlnaneg.negotiation.decision").isEnabledFor(
            logging.DEBUG
        )
        assert not logging.getLogger("dlnaneg.profiles").isEnabledFor(logging.INFO)

    def test_session_level_reset(self) -> None:
        """Without session_level the negotiation loggers follow the root."""
        configure_logging(LoggingConfig(level="warning", session_level="debug"))
        configure_logging(LoggingConfig(level="error"))
        assert logging.getLogger("dlnaneg.negotiation").level == logging.NOTSET
        assert not logging.getLogger("dlnaneg.negotiation.decision").isEnabledFor(
            logging.WARNING
        )
