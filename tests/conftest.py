"""Shared fixtures: ffprobe JSON documents as printed by ffprobe 7.

Every fixture returns a fresh object, so tests may mutate what they get.
"""

import copy
from typing import Any, Dict

import pytest
from mediaprobe import get_settings

DISPOSITION: Dict[str, int] = {
    "default": 0,
    "dub": 0,
    "original": 0,
    "comment": 0,
    "lyrics": 0,
    "karaoke": 0,
    "forced": 0,
    "hearing_impaired": 0,
    "visual_impaired": 0,
    "clean_effects": 0,
    "attached_pic": 0,
    "timed_thumbnails": 0,
    "non_diegetic": 0,
    "captions": 0,
    "descriptions": 0,
    "metadata": 0,
    "dependent": 0,
    "still_image": 0,
    "multilayer": 0,
}

VIDEO_STREAM: Dict[str, Any] = {
    "index": 0,
    "codec_name": "h264",
    "codec_long_name": "H.264 / AVC / MPEG-4 AVC / MPEG-4 part 10",
    "profile": "High",
    "codec_type": "video",
    "codec_tag_string": "avc1",
    "codec_tag": "0x31637661",
    "width": 1920,
    "height": 1080,
    "coded_width": 1920,
    "coded_height": 1080,
    "closed_captions": 0,
    "film_grain": 0,
    "has_b_frames": 2,
    "sample_aspect_ratio": "1:1",
    "display_aspect_ratio": "16:9",
    "pix_fmt": "yuv420p",
    "level": 40,
    "chroma_location": "left",
    "field_order": "progressive",
    "refs": 1,
    "is_avc": "true",
    "nal_length_size": "4",
    "id": "0x1",
    "r_frame_rate": "25/1",
    "avg_frame_rate": "25/1",
    "time_base": "1/1000",
    "start_pts": 2500,
    "start_time": "2.500000",
    "duration_ts": 5000,
    "duration": "5.000000",
    "bit_rate": "1000000",
    "bits_per_raw_sample": "8",
    "nb_frames": "125",
    "extradata_size": 46,
    "disposition": dict(DISPOSITION, default=1),
    "tags": {"language": "und", "handler_name": "VideoHandler", "vendor_id": "[0][0][0][0]"},
}

AUDIO_STREAM: Dict[str, Any] = {
    "index": 1,
    "codec_name": "aac",
    "codec_long_name": "AAC (Advanced Audio Coding)",
    "profile": "LC",
    "codec_type": "audio",
    "codec_tag_string": "mp4a",
    "codec_tag": "0x6134706d",
    "sample_fmt": "fltp",
    "sample_rate": "48000",
    "channels": 2,
    "channel_layout": "stereo",
    "bits_per_sample": 0,
    "initial_padding": 0,
    "id": "0x2",
    "r_frame_rate": "0/0",
    "avg_frame_rate": "0/0",
    "time_base": "1/48000",
    "start_pts": 0,
    "start_time": "0.000000",
    "duration_ts": 240000,
    "duration": "5.000000",
    "bit_rate": "128000",
    "nb_frames": "235",
    "extradata_size": 2,
    "disposition": dict(DISPOSITION, default=1),
    "tags": {"language": "eng", "handler_name": "SoundHandler", "vendor_id": "[0][0][0][0]"},
}

SUBTITLE_STREAM: Dict[str, Any] = {
    "index": 2,
    "codec_name": "subrip",
    "codec_long_name": "SubRip subtitle",
    "codec_type": "subtitle",
    "codec_tag_string": "[0][0][0][0]",
    "codec_tag": "0x0000",
    "r_frame_rate": "0/0",
    "avg_frame_rate": "0/0",
    "time_base": "1/1000",
    "start_pts": 0,
    "start_time": "0.000000",
    "duration_ts": 5000,
    "duration": "5.000000",
    "disposition": dict(DISPOSITION, forced=1),
    "tags": {
        "language": "eng",
        "BPS": "43",
        "DURATION": "00:00:05.000000000",
        "NUMBER_OF_FRAMES": "3",
        "NUMBER_OF_BYTES": "27",
        "_STATISTICS_WRITING_APP": "mkvmerge v80.0 ('Roundabout') 64-bit",
        "_STATISTICS_WRITING_DATE_UTC": "2024-01-02 03:04:05",
        "_STATISTICS_TAGS": "BPS DURATION NUMBER_OF_FRAMES NUMBER_OF_BYTES",
    },
}

ATTACHMENT_STREAM: Dict[str, Any] = {
    "index": 3,
    "codec_name": "ttf",
    "codec_long_name": "TrueType font",
    "codec_type": "attachment",
    "codec_tag_string": "[0][0][0][0]",
    "codec_tag": "0x0000",
    "r_frame_rate": "0/0",
    "avg_frame_rate": "0/0",
    "time_base": "1/90000",
    "start_pts": 0,
    "start_time": "0.000000",
    "duration_ts": 0,
    "duration": "0.000000",
    "extradata_size": 75712,
    "disposition": dict(DISPOSITION),
    "tags": {"filename": "DejaVuSans.ttf", "mimetype": "font/ttf"},
}

DATA_STREAM: Dict[str, Any] = {
    "index": 4,
    "codec_type": "data",
    "codec_tag_string": "tmcd",
    "codec_tag": "0x64636d74",
    "id": "0x3",
    "r_frame_rate": "0/0",
    "avg_frame_rate": "0/0",
    "time_base": "1/25",
    "start_pts": 0,
    "start_time": "0.000000",
    "duration_ts": 125,
    "duration": "5.000000",
    "nb_frames": "1",
    "disposition": dict(DISPOSITION),
    "tags": {
        "creation_time": "2024-01-02T03:04:05.000000Z",
        "language": "eng",
        "handler_name": "TimeCodeHandler",
        "timecode": "00:00:00:00",
    },
}

FORMAT: Dict[str, Any] = {
    "filename": "movie.mp4",
    "nb_streams": 2,
    "nb_programs": 0,
    "nb_stream_groups": 0,
    "format_name": "mov,mp4,m4a,3gp,3g2,mj2",
    "format_long_name": "QuickTime / MOV",
    "start_time": "0.000000",
    "duration": "5.024000",
    "size": "1048576",
    "bit_rate": "1669727",
    "probe_score": 100,
    "tags": {
        "major_brand": "isom",
        "minor_version": "512",
        "compatible_brands": "isomiso2avc1mp41",
        "encoder": "Lavf60.16.100",
    },
}

CHAPTER: Dict[str, Any] = {
    "id": 0,
    "time_base": "1/1000",
    "start": 0,
    "start_time": "0.000000",
    "end": 2500,
    "end_time": "2.500000",
    "tags": {"title": "Intro"},
}


@pytest.fixture(autouse=True)
def clean_settings(monkeypatch: pytest.MonkeyPatch):
    """Isolate every test from MEDIAPROBE_* variables and the cached settings."""
    import os

    for name in list(os.environ):
        if name.upper().startswith("MEDIAPROBE_"):
            monkeypatch.delenv(name)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def video_stream() -> Dict[str, Any]:
    """Raw 1920x1080 H.264 stream, time base 1:1000."""
    return copy.deepcopy(VIDEO_STREAM)


@pytest.fixture
def audio_stream() -> Dict[str, Any]:
    return copy.deepcopy(AUDIO_STREAM)


@pytest.fixture
def subtitle_stream() -> Dict[str, Any]:
    return copy.deepcopy(SUBTITLE_STREAM)


@pytest.fixture
def attachment_stream() -> Dict[str, Any]:
    return copy.deepcopy(ATTACHMENT_STREAM)


@pytest.fixture
def data_stream() -> Dict[str, Any]:
    return copy.deepcopy(DATA_STREAM)


@pytest.fixture
def format_section() -> Dict[str, Any]:
    return copy.deepcopy(FORMAT)


@pytest.fixture
def chapter_section() -> Dict[str, Any]:
    return copy.deepcopy(CHAPTER)


@pytest.fixture
def probe_document() -> Dict[str, Any]:
    """Complete document: one video and one audio stream, format, no chapters."""
    return {
        "streams": [copy.deepcopy(VIDEO_STREAM), copy.deepcopy(AUDIO_STREAM)],
        "chapters": [],
        "format": copy.deepcopy(FORMAT),
    }
