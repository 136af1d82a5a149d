"""Tests for ffprobe JSON parsing."""

import pytest

from dlnaneg.domain import StreamInfo
from dlnaneg.introspector import (
    ProbeParseError,
    map_stream_type,
    parse_ffprobe_output,
    parse_stream,
)


class TestMapStreamType:
    """Tests for map_stream_type function."""

    def test_known_types(self):
        """ffprobe codec types map to themselves."""
        for codec_type in ("video", "audio", "subtitle", "attachment"):
            assert map_stream_type(codec_type) == codec_type

    def test_unknown_and_missing(self):
        """Data streams and missing types map to other."""
        assert map_stream_type("data") == "other"
        assert map_stream_type(None) == "other"
        assert map_stream_type("") == "other"

    def test_case_insensitive(self):
        """Codec types are matched case-insensitively."""
        assert map_stream_type("Video") == "video"


class TestParseStream:
    """Tests for parse_stream function."""

    def test_basic_stream(self):
        """Index, type and codec are extracted."""
        stream = {"index": 3, "codec_type": "audio", "codec_name": "AAC"}
        assert parse_stream(stream, 0) == StreamInfo(3, "audio", "aac")

    def test_missing_index_uses_position(self):
        """Position is used when ffprobe omits the index."""
        assert parse_stream({"codec_type": "video"}, 5).index == 5

    def test_non_string_codec_ignored(self, caplog):
        """A non-string codec_name is dropped with a warning."""
        stream = parse_stream({"index": 0, "codec_type": "video", "codec_name": 7}, 0)
        assert stream.codec is None
        assert "non-string codec_name" in caplog.text


class TestParseFfprobeOutput:
    """Tests for parse_ffprobe_output function."""

    def test_movie(self, ffprobe_movie):
        """Container and all streams are parsed in order."""
        report = parse_ffprobe_output(ffprobe_movie)
        assert report.container_format == "matroska,webm"
        assert [s.stream_type for s in report.streams] == [
            "video",
            "audio",
            "subtitle",
        ]
        assert report.primary_video_stream.codec == "hevc"
        assert report.primary_audio_stream.codec == "ac3"

    def test_audio_only(self, ffprobe_song):
        """Audio-only files have no primary video stream."""
        report = parse_ffprobe_output(ffprobe_song)
        assert report.primary_video_stream is None
        assert report.primary_audio_stream.codec == "mp3"

    def test_missing_sections(self):
        """Missing format and streams give an empty report."""
        report = parse_ffprobe_output({})
        assert report.container_format is None
        assert report.streams == ()

    def test_empty_format_name(self):
        """An empty format_name becomes None."""
        report = parse_ffprobe_output({"format": {"format_name": ""}, "streams": []})
        assert report.container_format is None

    def test_malformed_stream_skipped(self, caplog):
        """Non-object stream entries are skipped."""
        report = parse_ffprobe_output(
            {
                "format": {"format_name": "mp3"},
                "streams": ["junk", {"codec_type": "audio"}],
            }
        )
        assert len(report.streams) == 1
        assert report.streams[0].index == 1
        assert "malformed stream" in caplog.text

    @pytest.mark.parametrize(
        "data",
        [[], "text", {"format": []}, {"streams": {}}],
    )
    def test_bad_shapes(self, data):
        """Documents of the wrong shape raise ProbeParseError."""
        with pytest.raises(ProbeParseError):
            parse_ffprobe_output(data)
