"""Attachment stream record."""

from typing import ClassVar, Optional

from pydantic import Field

from ..tags import AttachmentTags
from .base import BaseStreamRecord


class AttachmentStream(BaseStreamRecord):
    """Stream of type ``attachment`` (fonts and other files embedded in Matroska)."""

    kind: ClassVar[str] = "attachment"

    duration_ts: int = Field(ge=0)
    tags: AttachmentTags
    codec_long_name: Optional[str] = None
    codec_name: Optional[str] = None


__all__ = ["AttachmentStream"]
