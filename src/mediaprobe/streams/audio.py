"""Audio stream record."""

from typing import ClassVar, Optional

from ..coercers import OptStrInt, StrInt
from ..tags import AudioTags
from .base import BaseStreamRecord


class AudioStream(BaseStreamRecord):
    """Stream of type ``audio``.

    Attributes:
        bits_per_sample: Bits per sample of the coded audio (0 for lossy codecs)
        channel_layout: Channel layout, e.g. ``stereo`` or ``5.1(side)``
        channels: Number of channels
        initial_padding: Samples of encoder padding at the start of the stream
        sample_fmt: Sample format, e.g. ``fltp`` or ``s16``
        sample_rate: Sample rate in Hz (ffprobe prints it as a string)
        bit_rate: Bit rate in bits per second
        bits_per_raw_sample: Bits per sample before encoding
    """

    kind: ClassVar[str] = "audio"

    bits_per_sample: int
    channel_layout: Optional[str] = None
    channels: int
    initial_padding: int
    sample_fmt: str
    sample_rate: StrInt
    bit_rate: OptStrInt = None
    codec_long_name: str
    codec_name: str
    profile: Optional[str] = None
    bits_per_raw_sample: OptStrInt = None
    tags: Optional[AudioTags] = None


__all__ = ["AudioStream"]
