"""Unit tests for domain models."""

import uuid

from dlnaneg.domain import EncoderDirectives, MediaItem, ProbeReport, StreamInfo
from dlnaneg.profiles import DLNA_PROFILE


class TestProbeReport:
    """Tests for ProbeReport primary stream selection."""

    def test_primary_streams_are_first_of_type(self) -> None:
        """The first stream of each type is primary."""
        report = ProbeReport(
            "matroska,webm",
            (
                StreamInfo(0, "subtitle", "subrip"),
                StreamInfo(1, "audio", "ac3"),
                StreamInfo(2, "video", "hevc"),
                StreamInfo(3, "audio", "aac"),
            ),
        )
        assert report.primary_video_stream == StreamInfo(2, "video", "hevc")
        assert report.primary_audio_stream == StreamInfo(1, "audio", "ac3")

    def test_no_streams(self) -> None:
        """Empty reports have no primary streams."""
        report = ProbeReport("mp4,m4a")
        assert report.primary_video_stream is None
        assert report.primary_audio_stream is None


class TestEncoderDirectives:
    """Tests for EncoderDirectives argv rendering."""

    def test_output_args_split_in_order(self) -> None:
        """Each directive is split into argv tokens in order."""
        directives = EncoderDirectives(
            input_options=("-itsoffset 0.5",),
            output_options=("-acodec aac", "-vf 'scale=1280:-2'", "-copyts"),
        )
        assert directives.input_args() == ["-itsoffset", "0.5"]
        assert directives.output_args() == [
            "-acodec",
            "aac",
            "-vf",
            "scale=1280:-2",
            "-copyts",
        ]

    def test_empty(self) -> None:
        """Empty directives render no args."""
        assert EncoderDirectives().output_args() == []


class TestMediaItem:
    """Tests for the MediaItem wrapper."""

    def test_new_item_has_uuid(self) -> None:
        """Each item gets a distinct uuid4 id."""
        first, second = MediaItem(), MediaItem()
        assert uuid.UUID(first.id).version == 4
        assert first.id != second.id
        assert first.is_analyzed is False
        assert first.profile is None

    def test_attach_profile(self) -> None:
        """Attaching a profile marks the item analyzed and chains."""
        item = MediaItem(filename="movie.mkv", size_bytes=1024)
        assert item.attach_profile(DLNA_PROFILE) is item
        assert item.profile is DLNA_PROFILE
        assert item.is_analyzed is True
