#!/usr/bin/env python3
"""mediaprobe usage demonstration - shows all features from README.

Usage:
    python examples/demo.py               # decode the bundled sample output
    python examples/demo.py movie.mkv     # also probe a real file (needs ffprobe on PATH)
"""

import json
import sys

from mediaprobe import FfProbe, FfProbeDeserializeError, FfProbeError, ProbeSettings, ffprobe

# ============================================================
# Setup: ffprobe output for a short MP4 with one video and one audio stream
# ============================================================
SAMPLE = {
    "streams": [
        {
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
            "pix_fmt": "yuv420p",
            "level": 40,
            "refs": 1,
            "r_frame_rate": "25/1",
            "avg_frame_rate": "25/1",
            "time_base": "1/1000",
            "start_pts": 2500,
            "start_time": "2.500000",
            "duration_ts": 5000,
            "duration": "5.000000",
            "nb_frames": "125",
            "disposition": {"default": 1},
            "tags": {"language": "und", "handler_name": "VideoHandler"},
        },
        {
            "index": 1,
            "codec_name": "aac",
            "codec_long_name": "AAC (Advanced Audio Coding)",
            "codec_type": "audio",
            "codec_tag_string": "mp4a",
            "codec_tag": "0x6134706d",
            "sample_fmt": "fltp",
            "sample_rate": "48000",
            "channels": 2,
            "channel_layout": "stereo",
            "bits_per_sample": 0,
            "initial_padding": 0,
            "r_frame_rate": "0/0",
            "avg_frame_rate": "0/0",
            "time_base": "1/48000",
            "start_pts": 0,
            "duration_ts": 240000,
            "disposition": {"default": 1},
            "tags": {"language": "eng", "replaygain_track_gain": "-6.20 dB"},
        },
    ],
    "format": {
        "filename": "movie.mp4",
        "nb_streams": 2,
        "nb_programs": 0,
        "format_name": "mov,mp4,m4a,3gp,3g2,mj2",
        "format_long_name": "QuickTime / MOV",
        "duration": "5.024000",
        "size": "1048576",
        "probe_score": 100,
        "tags": {"major_brand": "isom", "encoder": "Lavf60.16.100"},
    },
}

print("mediaprobe Demo\n" + "=" * 60)

# ============================================================
# 1. Decoding - JSON text or an already-parsed dict
# ============================================================
print("\n1. Decode ffprobe output")

probe = FfProbe.from_json(json.dumps(SAMPLE))
for stream in probe.streams:
    print(f"   #{stream.index} {stream.codec_type:<6} {stream.codec_name:<5} tag={stream.codec_tag!r}")

# ============================================================
# 2. Typed access - each stream wraps a record for its kind
# ============================================================
print("\n2. Kind-specific records")

video = probe.video_streams()[0]
audio = probe.audio_streams()[0]
print(f"   Video: {video.stream.width}x{video.stream.height} @ {video.avg_frame_rate} fps")
print(f"   Audio: {audio.stream.sample_rate} Hz, {audio.stream.channels} channels ({audio.stream.channel_layout})")

# ============================================================
# 3. Time - timestamps are converted through each stream's time base
# ============================================================
print("\n3. Time base conversions")

print(f"   Video starts at {video.start_time()} s and lasts {video.duration()}")
print(f"   Audio lasts {audio.duration()} (time base {audio.time_base})")
print(f"   Container duration: {probe.format.get_duration()}")

# ============================================================
# 4. Tags - known keys are typed, everything else is kept
# ============================================================
print("\n4. Tags")

print(f"   Audio language: {audio.stream.tags.tags.language}")
print(f"   Audio extra:    {audio.stream.tags.extra}")
print(f"   Major brand:    {probe.format.tags.major_brand}")

# ============================================================
# 5. Strict mode - find fields the models do not know about
# ============================================================
print("\n5. Strict mode")

drifted = json.loads(json.dumps(SAMPLE))
drifted["streams"][0]["view_ids_available"] = ""
FfProbe.from_dict(drifted)  # lenient: unknown keys are ignored
try:
    FfProbe.from_dict(drifted, settings=ProbeSettings(strict=True))
except FfProbeDeserializeError as e:
    print(f"   Rejected: {e.errors()[0]['loc']}")

# ============================================================
# 6. Serialization - dump back to ffprobe-shaped JSON
# ============================================================
print("\n6. Serialization (Pydantic)")

dumped = video.model_dump(mode="json", by_alias=True, exclude_none=True)
print(f"   codec_type={dumped['codec_type']}, time_base={dumped['time_base']}, codec_tag={dumped['codec_tag']}")

# ============================================================
# 7. Running ffprobe - optional, on a file given on the command line
# ============================================================
if len(sys.argv) > 1:
    print(f"\n7. ffprobe {sys.argv[1]}")
    try:
        real = ffprobe(sys.argv[1], settings=ProbeSettings(count_frames=True))
    except FfProbeError as e:
        print(f"   Failed: {e}")
    else:
        for stream in real.streams:
            print(f"   #{stream.index} {stream.codec_type}: {stream.nb_read_frames} frames, {stream.duration()}")

print("\n" + "=" * 60)
print("All features demonstrated successfully")
