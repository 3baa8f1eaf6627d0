"""Video stream record."""

from typing import ClassVar, Optional

from ..ratio import Ratio
from ..tags import VideoTags
from .base import BaseStreamRecord


class VideoStream(BaseStreamRecord):
    """Stream of type ``video`` (also used for still images and cover art).

    ``width``/``height`` are the displayed dimensions; ``coded_width``/
    ``coded_height`` are the dimensions before cropping. Fields that ffprobe
    prints as strings (``bit_rate``, ``bits_per_raw_sample``, ``is_avc``, ...)
    are kept as strings.
    """

    kind: ClassVar[str] = "video"

    width: int
    height: int
    coded_width: int
    coded_height: int
    sample_aspect_ratio: Optional[Ratio] = None
    display_aspect_ratio: Optional[Ratio] = None
    bits_per_raw_sample: Optional[str] = None
    chroma_location: Optional[str] = None
    closed_captions: int
    codec_long_name: str
    codec_name: str
    color_primaries: Optional[str] = None
    color_range: Optional[str] = None
    color_space: Optional[str] = None
    color_transfer: Optional[str] = None
    field_order: Optional[str] = None
    film_grain: int
    has_b_frames: int
    is_avc: Optional[str] = None
    level: int
    nal_length_size: Optional[str] = None
    pix_fmt: Optional[str] = None
    profile: Optional[str] = None
    refs: int
    bit_rate: Optional[str] = None
    divx_packed: Optional[str] = None
    quarter_sample: Optional[str] = None
    tags: Optional[VideoTags] = None

    @property
    def is_interlaced(self) -> bool:
        """True if ffprobe reported a field order other than progressive."""
        return self.field_order not in (None, "progressive", "unknown")


__all__ = ["VideoStream"]
