"""Tests for Chapter and Format."""

from datetime import timedelta

import pytest
from mediaprobe import Chapter, Format
from mediaprobe._internal import build_context
from pydantic import ValidationError


class TestChapter:
    """Test chapter decoding and time accessors."""

    def test_decode(self, chapter_section):
        """Test a decoded chapter."""
        chapter = Chapter.model_validate(chapter_section)
        assert chapter.id == 0
        assert chapter.time_base.render() == "1:1000"
        assert (chapter.start, chapter.end) == (0, 2500)
        assert chapter.start_time_text == "0.000000"
        assert chapter.end_time_text == "2.500000"
        assert chapter.tags.title == "Intro"

    def test_times(self, chapter_section):
        """Test start/end seconds and the millisecond duration."""
        chapter_section.update(start=1000, end=3500)
        chapter = Chapter.model_validate(chapter_section)
        assert chapter.start_time() == 1.0
        assert chapter.end_time() == 3.5
        assert chapter.duration() == timedelta(milliseconds=2500)

    def test_without_tags(self, chapter_section):
        """Test that chapter tags may be absent."""
        del chapter_section["tags"]
        assert Chapter.model_validate(chapter_section).tags.title is None

    def test_zero_denominator(self, chapter_section):
        """Test that a 1:0 time base fails only on conversion."""
        chapter_section["time_base"] = "1:0"
        chapter = Chapter.model_validate(chapter_section)
        with pytest.raises(ZeroDivisionError):
            chapter.duration()

    def test_dump_uses_source_keys(self, chapter_section):
        """Test that the text times dump under ffprobe's key names."""
        dumped = Chapter.model_validate(chapter_section).model_dump(mode="json", by_alias=True)
        assert dumped["start_time"] == "0.000000"
        assert dumped["time_base"] == "1:1000"
        assert dumped["tags"] == {"title": "Intro"}

    def test_strict(self, chapter_section):
        """Test strict mode on chapters."""
        Chapter.model_validate(chapter_section, context=build_context(strict=True))
        chapter_section["chapter_uid"] = 7
        with pytest.raises(ValidationError, match="'chapter_uid'"):
            Chapter.model_validate(chapter_section, context=build_context(strict=True))


class TestFormat:
    """Test format decoding and duration accessors."""

    def test_decode(self, format_section):
        """Test a decoded format section."""
        fmt = Format.model_validate(format_section)
        assert fmt.filename == "movie.mp4"
        assert fmt.nb_streams == 2
        assert fmt.format_name == "mov,mp4,m4a,3gp,3g2,mj2"
        assert fmt.size == "1048576"
        assert fmt.probe_score == 100
        assert fmt.tags.major_brand == "isom"
        assert fmt.tags.encoder == "Lavf60.16.100"

    def test_duration(self, format_section):
        """Test the parsed duration."""
        fmt = Format.model_validate(format_section)
        assert fmt.try_get_duration() == timedelta(seconds=5, microseconds=24000)
        assert fmt.get_duration() == timedelta(seconds=5, microseconds=24000)

    def test_duration_absent(self, format_section):
        """Test that both accessors return None without a duration."""
        del format_section["duration"]
        fmt = Format.model_validate(format_section)
        assert fmt.try_get_duration() is None
        assert fmt.get_duration() is None

    def test_duration_unparsable(self, format_section):
        """Test that only try_get_duration reports an unparsable duration."""
        format_section["duration"] = "N/A"
        fmt = Format.model_validate(format_section)
        with pytest.raises(ValueError, match="Invalid duration"):
            fmt.try_get_duration()
        assert fmt.get_duration() is None

    def test_duration_out_of_range(self, format_section):
        """Test a numeric duration too large for a timedelta."""
        format_section["duration"] = "1e20"
        fmt = Format.model_validate(format_section)
        with pytest.raises(ValueError, match="out of range"):
            fmt.try_get_duration()
        assert fmt.get_duration() is None

    def test_optional_fields(self, format_section):
        """Test output of older ffprobe releases and streamed input."""
        for key in ("nb_stream_groups", "size", "bit_rate", "start_time", "tags"):
            del format_section[key]
        fmt = Format.model_validate(format_section)
        assert fmt.nb_stream_groups == 0
        assert fmt.size is None
        assert fmt.tags is None

    def test_required_fields(self, format_section):
        """Test that the demuxer names are required."""
        del format_section["format_name"]
        with pytest.raises(ValidationError, match="format_name"):
            Format.model_validate(format_section)

    def test_strict(self, format_section):
        """Test strict mode on the format section; tags stay open."""
        format_section["tags"]["anything"] = "goes"
        Format.model_validate(format_section, context=build_context(strict=True))
        format_section["nb_layers"] = 1
        with pytest.raises(ValidationError, match="'nb_layers'"):
            Format.model_validate(format_section, context=build_context(strict=True))
