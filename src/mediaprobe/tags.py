"""Tag bags: metadata mappings with typed known keys and an overflow mapping.

ffprobe copies container metadata verbatim into ``tags`` objects, so the key
set is open-ended. Each bag promotes the keys it knows to typed fields and
keeps every other key, untouched, in ``extra``. Keys are matched exactly and
case-sensitively against each field's aliases; when two aliases of one field
are both present, the first one populates the field and the later one is kept
in ``extra``.

Shared fields are factored into embedded bags (``flattened``) that read from
the same flat mapping, e.g. :class:`AudioTags` embeds :class:`StreamTags`.

Examples:
    >>> tags = AudioTags.model_validate({"language": "eng", "track": "3", "replaygain": "-6 dB"})
    >>> tags.tags.language, tags.track, tags.extra
    ('eng', 3, {'replaygain': '-6 dB'})
    >>> tags.model_dump(by_alias=True, exclude_none=True)
    {'language': 'eng', 'track': 3, 'replaygain': '-6 dB'}
"""

from functools import lru_cache
from typing import Any, ClassVar, Dict, Hashable, Optional, Tuple, Type

from pydantic import AliasChoices, Field, ValidationInfo, model_serializer

from ._internal import ProbeModel, field_source_keys
from .coercers import ClockDuration, NaiveDateTime, OptStrInt, Rfc3339DateTime


def tag(*keys: str, default: Any = None) -> Any:
    """Declare a tag field read from ``keys`` (first key is the canonical one)."""
    alias = AliasChoices(*keys) if len(keys) > 1 else keys[0]
    return Field(default=default, validation_alias=alias, serialization_alias=keys[0])


@lru_cache(maxsize=None)
def _key_owners(bag_cls: Type["TagBag"]) -> Dict[str, Tuple[Optional[str], Hashable]]:
    """Map each source key to ``(embedded bag field or None, owning field identity)``."""
    owners: Dict[str, Tuple[Optional[str], Hashable]] = {}
    for name in bag_cls.flattened:
        embedded_cls = bag_cls.model_fields[name].annotation
        for key, owner in _key_owners(embedded_cls).items():
            owners[key] = (name, owner)
    for name, field in bag_cls.model_fields.items():
        if name == "extra" or name in bag_cls.flattened:
            continue
        for key in field_source_keys(name, field):
            owners[key] = (None, name)
    return owners


class TagBag(ProbeModel):
    """Base for all tag mappings."""

    checks_unknown_fields: ClassVar[bool] = False
    flattened: ClassVar[Tuple[str, ...]] = ()

    extra: Dict[str, Any] = Field(default_factory=dict, description="Tags without a typed field")

    @classmethod
    def _prepare_input(cls, data: Dict[str, Any], info: ValidationInfo) -> Any:
        owners = _key_owners(cls)
        fields: Dict[str, Any] = {}
        embedded: Dict[str, Any] = {name: {} for name in cls.flattened}
        extra: Dict[str, Any] = {}
        seen = set()

        for key, value in data.items():
            # Already-structured input (model construction or a re-validated model)
            if key in embedded and not isinstance(value, str) and key not in owners:
                embedded[key] = value
                continue
            if key == "extra" and isinstance(value, dict) and key not in owners:
                extra.update(value)
                continue

            owner = owners.get(key)
            if owner is None or owner in seen:
                extra[key] = value
                continue
            seen.add(owner)
            bag_name, field_name = owner
            if bag_name is None:
                fields[field_name] = value
            else:
                embedded[bag_name][key] = value

        fields.update(embedded)
        fields["extra"] = extra
        return fields

    @model_serializer(mode="wrap")
    def _serialize_flat(self, handler: Any) -> Dict[str, Any]:
        data = handler(self)
        extra = data.pop("extra", None) or {}
        flat: Dict[str, Any] = {}
        for name in self.flattened:
            flat.update(data.pop(name, None) or {})
        flat.update(data)
        flat.update(extra)
        return flat


# ============================================================================
# Stream tags
# ============================================================================


class StreamTags(TagBag):
    """Tags shared by audio, video and subtitle streams.

    Covers the Matroska statistics tags (``BPS``, ``DURATION``, ...) as well as
    the common descriptive ones.
    """

    bps: OptStrInt = tag("BPS")
    duration: ClockDuration = tag("DURATION")
    number_of_bytes: OptStrInt = tag("NUMBER_OF_BYTES")
    number_of_frames: OptStrInt = tag("NUMBER_OF_FRAMES")
    statistics_tags: Optional[str] = tag("_STATISTICS_TAGS")
    statistics_writing_app: Optional[str] = tag("_STATISTICS_WRITING_APP")
    statistics_writing_date_utc: NaiveDateTime = tag("_STATISTICS_WRITING_DATE_UTC")
    handler_name: Optional[str] = tag("handler_name", "HANDLER_NAME")
    creation_time: Rfc3339DateTime = tag("creation_time")
    encoder: Optional[str] = tag("encoder", "ENCODER")
    vendor_id: Optional[str] = tag("vendor_id", "VENDOR_ID")
    title: Optional[str] = tag("title")
    language: Optional[str] = tag("language")


class AudioTags(TagBag):
    flattened: ClassVar[Tuple[str, ...]] = ("tags",)

    tags: StreamTags = Field(default_factory=StreamTags)
    encoder_options: Optional[str] = tag("ENCODER_OPTIONS")
    source_id: Optional[str] = tag("SOURCE_ID")
    comment: Optional[str] = tag("COMMENT")
    track: OptStrInt = tag("track")


class VideoTags(TagBag):
    flattened: ClassVar[Tuple[str, ...]] = ("tags",)

    tags: StreamTags = Field(default_factory=StreamTags)
    filename: Optional[str] = tag("filename")
    mimetype: Optional[str] = tag("mimetype")


class SubtitleTags(TagBag):
    flattened: ClassVar[Tuple[str, ...]] = ("tags",)

    tags: StreamTags = Field(default_factory=StreamTags)
    filename: Optional[str] = tag("filename")
    mimetype: Optional[str] = tag("mimetype")
    width: Optional[int] = tag("width")
    height: Optional[int] = tag("height")
    bit_rate: Optional[str] = tag("bit_rate")
    source_id: Optional[str] = tag("SOURCE_ID")


class AttachmentTags(TagBag):
    """Attachments (fonts, cover art) always name their file and MIME type."""

    filename: str = tag("filename", default=...)
    mimetype: str = tag("mimetype", default=...)
    title: Optional[str] = tag("title")


class DataTags(TagBag):
    creation_time: Optional[str] = tag("creation_time")
    language: Optional[str] = tag("language")


# ============================================================================
# Chapter and format tags
# ============================================================================


class ChapterTags(TagBag):
    title: Optional[str] = tag("title")


class SonyXdcamTags(TagBag):
    """MXF descriptive metadata written by Sony XDCAM cameras."""

    operational_pattern_ul: Optional[str] = tag("operational_pattern_ul")
    uid: Optional[str] = tag("uid")
    generation_uid: Optional[str] = tag("generation_uid")
    company_name: Optional[str] = tag("company_name")
    product_name: Optional[str] = tag("product_name")
    product_version: Optional[str] = tag("product_version")
    product_uid: Optional[str] = tag("product_uid")
    modification_date: Optional[str] = tag("modification_date")
    material_package_umid: Optional[str] = tag("material_package_umid")
    timecode: Optional[str] = tag("timecode")


class FormatTags(TagBag):
    """Container-level metadata.

    ``ENCODER`` and ``MOVIE/ENCODER`` are different keys and land in different
    fields (``encoder`` and ``movie_encoder``); the same goes for
    ``encoded_by``/``ENCODED_BY`` versus ``Encoded by``.
    """

    flattened: ClassVar[Tuple[str, ...]] = ("sony_xdcam",)

    wmfsdkneeded: Optional[str] = tag("WMFSDKNeeded")
    device_conformance_template: Optional[str] = tag("DeviceConformanceTemplate")
    wmfsdkversion: Optional[str] = tag("WMFSDKVersion")
    is_vbr: Optional[str] = tag("IsVBR")
    major_brand: Optional[str] = tag("major_brand", "MAJOR_BRAND")
    minor_version: Optional[str] = tag("minor_version", "MINOR_VERSION")
    compatible_brands: Optional[str] = tag("compatible_brands", "COMPATIBLE_BRANDS")
    encoder: Optional[str] = tag("encoder", "ENCODER")
    movie_encoder: Optional[str] = tag("MOVIE/ENCODER")
    artist: Optional[str] = tag("artist", "ARTIST")
    album_artist: Optional[str] = tag("album_artist")
    album: Optional[str] = tag("album")
    comment: Optional[str] = tag("comment", "COMMENT")
    subject: Optional[str] = tag("SUBJECT")
    product: Optional[str] = tag("PRODUCT")
    irtd: Optional[str] = tag("IRTD")
    title: Optional[str] = tag("title")
    copyright: Optional[str] = tag("COPYRIGHT")
    software: Optional[str] = tag("SOFTWARE")
    language: Optional[str] = tag("LANGUAGE")
    track: Optional[str] = tag("track")
    disc: Optional[str] = tag("disc")
    tdtg: Optional[str] = tag("TDTG")
    encoded_by: Optional[str] = tag("encoded_by", "ENCODED_BY")
    encoded_by_label: Optional[str] = tag("Encoded by")
    date: Optional[str] = tag("date")
    tlen: Optional[str] = tag("TLEN")
    description: Optional[str] = tag("DESCRIPTION")
    source: Optional[str] = tag("Source")
    imdb: Optional[str] = tag("IMDB")
    tmdb: Optional[str] = tag("TMDB")
    creation_time: Optional[str] = tag("creation_time", "CREATION_TIME")
    genre: Optional[str] = tag("genre")
    sony_xdcam: SonyXdcamTags = Field(default_factory=SonyXdcamTags)


__all__ = [
    "TagBag",
    "StreamTags",
    "AudioTags",
    "VideoTags",
    "SubtitleTags",
    "AttachmentTags",
    "DataTags",
    "ChapterTags",
    "SonyXdcamTags",
    "FormatTags",
]
