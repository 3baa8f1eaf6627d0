"""Data stream record."""

from typing import ClassVar, Optional

from pydantic import Field

from ..tags import DataTags
from .base import BaseStreamRecord


class DataStream(BaseStreamRecord):
    """Stream of type ``data``, e.g. timecode (``tmcd``) or GoPro telemetry tracks."""

    kind: ClassVar[str] = "data"

    duration_ts: int = Field(ge=0)
    tags: DataTags
    codec_long_name: Optional[str] = None
    codec_name: Optional[str] = None


__all__ = ["DataStream"]
