"""Top-level ffprobe document and the decode entry points."""

import json
from typing import Any, Dict, List, Mapping, Optional, Union

from loguru import logger
from pydantic import Field, ValidationError, ValidationInfo

from ._internal import ProbeModel, enabled_sections, is_strict
from .chapter import Chapter
from .errors import FfProbeDeserializeError
from .format import Format
from .settings import ProbeSettings, get_settings
from .stream import Stream
from .streams import STREAM_KINDS


class FfProbe(ProbeModel):
    """Decoded output of ``ffprobe -print_format json``.

    Which sections are decoded is controlled by :class:`ProbeSettings`. A
    disabled section is skipped: ``streams``/``chapters`` stay empty and
    ``format`` stays ``None``. An enabled ``format`` section must be present;
    enabled ``streams`` and ``chapters`` may be absent.

    Examples:
        >>> probe = FfProbe.from_json(output)
        >>> [stream.codec_type for stream in probe.streams]
        ['video', 'audio']
        >>> probe.video_streams()[0].stream.width
        1920
        >>> probe.format.get_duration()
        datetime.timedelta(seconds=5, microseconds=24000)
    """

    streams: List[Stream] = Field(default_factory=list)
    chapters: List[Chapter] = Field(default_factory=list)
    format: Optional[Format] = None

    @classmethod
    def _prepare_input(cls, data: Dict[str, Any], info: ValidationInfo) -> Any:
        sections = enabled_sections(info)
        for name in ("streams", "chapters", "format"):
            if name in sections:
                continue
            if name in data and is_strict(info):
                raise ValueError(f"unknown field(s) {name!r} in {cls.__name__} (section disabled, strict mode)")
            data.pop(name, None)

        if "format" in sections and data.get("format") is None:
            raise ValueError("missing field 'format'")
        return data

    # ========== Construction ==========

    @classmethod
    def from_json(cls, data: Union[bytes, str], *, settings: Optional[ProbeSettings] = None) -> "FfProbe":
        """Decode ffprobe's JSON output.

        Raises:
            FfProbeDeserializeError: If the text is not JSON or does not match the model
        """
        try:
            document = json.loads(data)
        except ValueError as e:
            raise FfProbeDeserializeError(f"Could not deserialize ffprobe output: {e}", cause=e) from e
        return cls.from_dict(document, settings=settings)

    @classmethod
    def from_dict(cls, data: Any, *, settings: Optional[ProbeSettings] = None) -> "FfProbe":
        """Decode an already-parsed JSON document.

        Raises:
            FfProbeDeserializeError: If the document does not match the model
        """
        settings = settings or get_settings()
        logger.debug(
            "Decoding ffprobe document (strict={}, sections={})", settings.strict, sorted(settings.enabled_sections())
        )
        try:
            probe = cls.model_validate(data, context=settings.validation_context())
        except ValidationError as e:
            logger.debug("ffprobe document failed to decode: {} error(s)", e.error_count())
            raise FfProbeDeserializeError(f"Could not deserialize ffprobe output: {e}", cause=e) from e
        logger.debug("Decoded {} stream(s), {} chapter(s)", len(probe.streams), len(probe.chapters))
        return probe

    # ========== Stream selection ==========

    def streams_of(self, kind: str) -> List[Stream]:
        """Streams whose ``codec_type`` is ``kind``, in index order.

        Raises:
            ValueError: If ``kind`` is not a known stream kind
        """
        if kind not in STREAM_KINDS:
            raise ValueError(f"Unknown stream kind {kind!r}, expected one of {sorted(STREAM_KINDS)}")
        return [stream for stream in self.streams if stream.codec_type == kind]

    def video_streams(self) -> List[Stream]:
        return self.streams_of("video")

    def audio_streams(self) -> List[Stream]:
        return self.streams_of("audio")

    def subtitle_streams(self) -> List[Stream]:
        return self.streams_of("subtitle")


def decode(data: Union[bytes, str, Mapping[str, Any]], *, settings: Optional[ProbeSettings] = None) -> FfProbe:
    """Decode ffprobe output given as JSON text or as a parsed mapping."""
    if isinstance(data, Mapping):
        return FfProbe.from_dict(data, settings=settings)
    return FfProbe.from_json(data, settings=settings)


__all__ = ["FfProbe", "decode"]
