"""Subtitle stream record."""

from typing import ClassVar, Optional

from ..tags import SubtitleTags
from .base import BaseStreamRecord


class SubtitleStream(BaseStreamRecord):
    """Stream of type ``subtitle``. Bitmap formats also report their canvas size."""

    kind: ClassVar[str] = "subtitle"

    bit_rate: Optional[str] = None
    width: Optional[int] = None
    height: Optional[int] = None
    codec_long_name: str
    codec_name: str
    tags: Optional[SubtitleTags] = None


__all__ = ["SubtitleStream"]
