"""Base class for per-kind stream records."""

from typing import ClassVar, FrozenSet, Optional

from pydantic import Field

from .._internal import ProbeModel


class BaseStreamRecord(ProbeModel):
    """Kind-specific part of a stream.

    A record holds the fields that only make sense for its media kind. The
    envelope fields shared by all streams (index, time base, disposition, ...)
    live on :class:`mediaprobe.Stream`, and the ``codec_type`` discriminator is
    represented by the record's class rather than stored on it.

    Subclasses set ``kind`` to the ``codec_type`` value they decode.
    """

    kind: ClassVar[str]

    # Emitted by ffprobe next to the kind-specific fields but represented at the envelope level.
    redundant_fields: ClassVar[FrozenSet[str]] = frozenset({"codec_type", "start_time", "duration"})

    duration_ts: Optional[int] = Field(default=None, ge=0, description="Duration in time base units")


__all__ = ["BaseStreamRecord"]
