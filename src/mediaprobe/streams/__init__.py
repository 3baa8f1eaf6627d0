"""Per-kind stream records and the resolver that picks one.

Classes:
    BaseStreamRecord: Common base of all records
    AudioStream, VideoStream, SubtitleStream, AttachmentStream, DataStream: One record per ``codec_type``

Functions:
    resolve_stream_kind: Decode a generic stream object as its kind-specific record
"""

from .attachment import AttachmentStream
from .audio import AudioStream
from .base import BaseStreamRecord
from .data import DataStream
from .resolver import STREAM_KINDS, StreamKind, resolve_stream_kind
from .subtitle import SubtitleStream
from .video import VideoStream

__all__ = [
    "BaseStreamRecord",
    "AudioStream",
    "VideoStream",
    "SubtitleStream",
    "AttachmentStream",
    "DataStream",
    "StreamKind",
    "STREAM_KINDS",
    "resolve_stream_kind",
]
