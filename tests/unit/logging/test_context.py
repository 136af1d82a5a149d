"""Unit tests for logging session context."""

import logging
import threading

from dlnaneg.logging.context import (
    SessionContextFilter,
    get_session_context,
    session_context,
)


def _record() -> logging.LogRecord:
    return logging.LogRecord("test", logging.INFO, "x.py", 1, "msg", (), None)


class TestSessionContext:
    """Tests for session_context()."""

    def test_default_is_none(self) -> None:
        """Outside a session there is no context."""
        assert get_session_context() == (None, None)

    def test_sets_and_restores(self) -> None:
        """Context is set inside the block and cleared after."""
        with session_context("s1", "dlna"):
            assert get_session_context() == ("s1", "dlna")
        assert get_session_context() == (None, None)

    def test_nested_restores_outer(self) -> None:
        """Nested sessions restore the outer context."""
        with session_context("outer"):
            with session_context("inner", "tv"):
                assert get_session_context() == ("inner", "tv")
            assert get_session_context() == ("outer", None)

    def test_restored_after_exception(self) -> None:
        """Context is cleared even if the block raises."""
        try:
            with session_context("s1"):
                raise RuntimeError("boom")
        except RuntimeError:
            pass
        assert get_session_context() == (None, None)

    def test_threads_are_isolated(self) -> None:
        """Each thread sees only its own session."""
        seen: dict[str, str | None] = {}
        barrier = threading.Barrier(2)

        def run(session_id: str) -> None:
            with session_context(session_id):
                barrier.wait()
                seen[session_id] = get_session_context()[0]

        threads = [threading.Thread(target=run, args=(s,)) for s in ("a", "b")]
        for t in threads:
            t.start()
        for t in threads:
            t.join()

        assert seen == {"a": "a", "b": "b"}


class TestSessionContextFilter:
    """Tests for SessionContextFilter."""

    def test_injects_context(self) -> None:
        """Session values and tag are added to records."""
        record = _record()
        with session_context("ab12", "Samsung DTV DMR"):
            assert SessionContextFilter().filter(record) is True
        assert record.session_id == "ab12"
        assert record.device_name == "Samsung DTV DMR"
        assert record.session_tag == "[Sab12] "

    def test_empty_tag_outside_session(self) -> None:
        """Outside a session the tag is empty."""
        record = _record()
        SessionContextFilter().filter(record)
        assert record.session_id is None
        assert record.session_tag == ""
