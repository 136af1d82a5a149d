"""Shared test fixtures for dlnaneg."""

import logging

import pytest

from dlnaneg.domain import ProbeReport, StreamInfo
from dlnaneg.logging.context import SessionContextFilter
from dlnaneg.profiles import DLNA_PROFILE, DeviceProfile


@pytest.fixture(autouse=True)
def _restore_root_logging():
    """Remove handlers installed by configure_logging() during a test."""
    root = logging.getLogger()
    level = root.level
    yield
    logging.getLogger("dlnaneg.negotiation").setLevel(logging.NOTSET)
    for handler in root.handlers[:]:
        if any(isinstance(f, SessionContextFilter) for f in handler.filters):
            root.removeHandler(handler)
            handler.close()
    root.setLevel(level)


@pytest.fixture
def dlna_profile() -> DeviceProfile:
    """Return the built-in generic DLNA profile."""
    return DLNA_PROFILE


@pytest.fixture
def make_report():
    """Factory for ProbeReport objects.

    Usage:
        make_report("mp4,m4a", video="h264", audio="aac")
    """

    def _make(
        container_format: str | None = "mp4,m4a",
        video: str | None = None,
        audio: str | None = None,
        subtitle: str | None = None,
    ) -> ProbeReport:
        streams = []
        for stream_type, codec in (
            ("video", video),
            ("audio", audio),
            ("subtitle", subtitle),
        ):
            if codec is not None:
                streams.append(StreamInfo(len(streams), stream_type, codec))
        return ProbeReport(container_format=container_format, streams=tuple(streams))

    return _make


@pytest.fixture
def ffprobe_movie() -> dict:
    """ffprobe JSON for an MKV with HEVC video, AC3 audio and SRT subtitles."""
    return {
        "streams": [
            {"index": 0, "codec_name": "hevc", "codec_type": "video"},
            {"index": 1, "codec_name": "ac3", "codec_type": "audio"},
            {"index": 2, "codec_name": "subrip", "codec_type": "subtitle"},
        ],
        "format": {"format_name": "matroska,webm", "nb_streams": 3},
    }


@pytest.fixture
def ffprobe_song() -> dict:
    """ffprobe JSON for an MP3 file."""
    return {
        "streams": [{"index": 0, "codec_name": "mp3", "codec_type": "audio"}],
        "format": {"format_name": "mp3", "nb_streams": 1},
    }
