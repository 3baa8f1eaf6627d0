"""Resolve a generic stream object into its kind-specific record.

ffprobe describes every stream with one JSON object whose shape depends on
its ``codec_type``. The object has already been parsed into a ``dict`` by the
time it gets here, so resolution peeks the discriminator on that same value
and validates it as the matching record, without touching the source bytes
again. A match is all or nothing: either the record named by the
discriminator validates completely, or resolution fails with a message that
embeds the nested error and the raw value.
"""

from pprint import pformat
from typing import Any, Dict, Mapping, Optional, Type, Union

from loguru import logger
from pydantic import ValidationError

from .attachment import AttachmentStream
from .audio import AudioStream
from .base import BaseStreamRecord
from .data import DataStream
from .subtitle import SubtitleStream
from .video import VideoStream

StreamKind = Union[AudioStream, VideoStream, SubtitleStream, AttachmentStream, DataStream]

STREAM_KINDS: Dict[str, Type[BaseStreamRecord]] = {
    record.kind: record for record in (AudioStream, VideoStream, SubtitleStream, AttachmentStream, DataStream)
}


def resolve_stream_kind(value: Any, context: Optional[Dict[str, Any]] = None) -> StreamKind:
    """Decode ``value`` as the stream record named by its ``codec_type``.

    Args:
        value: Parsed JSON object of one stream (envelope fields may be present or not)
        context: Pydantic validation context (strict mode, sections)

    Returns:
        The validated record; its class identifies the stream kind

    Raises:
        ValueError: If ``codec_type`` is absent or unknown, or the matching record fails to validate

    Examples:
        >>> record = resolve_stream_kind({"codec_type": "data", "duration_ts": 0, "tags": {}})
        >>> type(record).__name__
        'DataStream'
    """
    if isinstance(value, BaseStreamRecord):
        return value  # type: ignore[return-value]

    codec_type = value.get("codec_type") if isinstance(value, Mapping) else None
    record_cls = STREAM_KINDS.get(codec_type) if isinstance(codec_type, str) else None

    error: Optional[str] = None
    if record_cls is not None:
        try:
            return record_cls.model_validate(value, context=context)  # type: ignore[return-value]
        except ValidationError as e:
            error = str(e)

    raw = pformat(value)
    if error is not None:
        logger.debug("Stream of kind {!r} failed to validate: {}", codec_type, error)
        raise ValueError(f"StreamKind: {error} {raw}")

    logger.debug("Stream has no usable codec_type: {!r}", codec_type)
    raise ValueError(
        f"data did not match any variant of StreamKind (codec_type={codec_type!r}, "
        f"expected one of {sorted(STREAM_KINDS)}): {raw}"
    )


__all__ = ["StreamKind", "STREAM_KINDS", "resolve_stream_kind"]
