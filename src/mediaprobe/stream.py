"""Stream envelope: the fields every stream has, wrapping its kind-specific record."""

from datetime import timedelta
from typing import Any, ClassVar, Dict, FrozenSet, List, Mapping, Optional

from pydantic import Field, ValidationInfo, field_validator, model_serializer

from ._internal import ProbeModel, accepted_keys
from .coercers import HexBytes, OptStrInt
from .disposition import Disposition
from .ratio import Ratio, ts_to_duration, ts_to_seconds
from .streams import BaseStreamRecord, StreamKind, resolve_stream_kind


class SideData(ProbeModel):
    """One entry of a stream's ``side_data_list``."""

    side_data_type: Optional[str] = None
    service_type: Optional[int] = None
    dv_version_major: Optional[int] = None
    dv_version_minor: Optional[int] = None
    dv_profile: Optional[int] = None
    dv_level: Optional[int] = None
    rpu_present_flag: Optional[int] = None
    el_present_flag: Optional[int] = None
    bl_present_flag: Optional[int] = None
    dv_bl_signal_compatibility_id: Optional[int] = None
    displaymatrix: Optional[str] = None
    rotation: Optional[int] = None
    max_bitrate: Optional[int] = None
    min_bitrate: Optional[int] = None
    avg_bitrate: Optional[int] = None
    buffer_size: Optional[int] = None
    vbv_delay: Optional[int] = None


class Stream(ProbeModel):
    """One elementary stream of the container.

    ffprobe prints envelope and kind-specific fields side by side in one
    object. Decoding keeps the envelope fields here and hands every other key
    to :func:`mediaprobe.streams.resolve_stream_kind`, which produces
    ``stream``.

    Examples:
        >>> stream = probe.streams[0]
        >>> stream.codec_type
        'video'
        >>> stream.stream.width, stream.time_base.render()
        (1920, '1:1000')
    """

    # Unknown keys are forwarded to the stream record, which applies the strict check.
    checks_unknown_fields: ClassVar[bool] = False
    redundant_fields: ClassVar[FrozenSet[str]] = frozenset({"codec_tag_string"})

    id: Optional[str] = Field(default=None, description="Container-level stream identifier, e.g. '0x1e0'")
    index: int = Field(ge=0)
    disposition: Disposition = Field(default_factory=Disposition)
    avg_frame_rate: Ratio
    codec_tag: HexBytes = Field(description="Codec FourCC as bytes, printed by ffprobe as hex")
    time_base: Ratio = Field(description="Unit of all *_pts and *_ts values, e.g. 1:1000")
    start_pts: int
    side_data_list: List[SideData] = Field(default_factory=list)
    extradata_size: Optional[int] = None
    r_frame_rate: Ratio
    nb_frames: OptStrInt = None
    nb_read_frames: OptStrInt = Field(default=None, description="Only set when ffprobe ran with -count_frames")
    stream: StreamKind

    @classmethod
    def _prepare_input(cls, data: Dict[str, Any], info: ValidationInfo) -> Any:
        if isinstance(data.get("stream"), (BaseStreamRecord, Mapping)):
            return data

        envelope_keys = accepted_keys(cls) - {"stream"}
        envelope: Dict[str, Any] = {}
        record: Dict[str, Any] = {}
        for key, value in data.items():
            if key in cls.redundant_fields:
                continue
            if key in envelope_keys:
                envelope[key] = value
            else:
                record[key] = value
        envelope["stream"] = record
        return envelope

    @field_validator("stream", mode="before")
    @classmethod
    def _resolve_kind(cls, value: Any, info: ValidationInfo) -> Any:
        return resolve_stream_kind(value, info.context)

    @model_serializer(mode="wrap")
    def _serialize_flat(self, handler: Any) -> Dict[str, Any]:
        data = handler(self)
        record = data.pop("stream", None) or {}
        return {**data, "codec_type": self.codec_type, **record}

    # ========== Properties ==========

    @property
    def codec_type(self) -> str:
        """Discriminator of the active record (``audio``, ``video``, ...)."""
        return self.stream.kind

    @property
    def codec_name(self) -> Optional[str]:
        return self.stream.codec_name

    # ========== Time conversions ==========

    def start_time(self) -> float:
        """Start of the stream in seconds (``start_pts * time_base``).

        Raises:
            ZeroDivisionError: If the time base has a zero denominator
        """
        return ts_to_seconds(self.start_pts, self.time_base)

    def duration(self) -> Optional[timedelta]:
        """Duration of the stream at millisecond resolution, if the record has one.

        Raises:
            ZeroDivisionError: If the time base has a zero denominator
        """
        duration_ts = self.stream.duration_ts
        if duration_ts is None:
            return None
        return ts_to_duration(duration_ts, self.time_base)


__all__ = ["Stream", "SideData"]
