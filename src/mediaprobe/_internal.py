"""Internal model plumbing shared by every decoded section.

Two switches travel through the pydantic validation context instead of global
state, so strict and lenient decodes can run side by side:

- ``strict``: reject keys a model neither declares nor lists as redundant
- ``sections``: which top-level sections of the document are decoded
"""

from functools import lru_cache
from typing import Any, ClassVar, Dict, FrozenSet, Mapping, Optional, Tuple, Type

from pydantic import AliasChoices, BaseModel, ConfigDict, ValidationInfo, model_validator
from pydantic.fields import FieldInfo

STRICT_KEY = "strict"
SECTIONS_KEY = "sections"
ALL_SECTIONS: FrozenSet[str] = frozenset({"streams", "format", "chapters"})


def build_context(strict: bool = False, sections: FrozenSet[str] = ALL_SECTIONS) -> Dict[str, Any]:
    """Build the validation context understood by all models."""
    return {STRICT_KEY: strict, SECTIONS_KEY: frozenset(sections)}


def is_strict(info: Optional[ValidationInfo]) -> bool:
    return bool(info is not None and info.context and info.context.get(STRICT_KEY))


def enabled_sections(info: Optional[ValidationInfo]) -> FrozenSet[str]:
    if info is None or not info.context:
        return ALL_SECTIONS
    return frozenset(info.context.get(SECTIONS_KEY, ALL_SECTIONS))


def field_source_keys(name: str, field: FieldInfo) -> Tuple[str, ...]:
    """Return the JSON keys a field is read from (aliases first, else its name)."""
    alias = field.validation_alias
    if isinstance(alias, AliasChoices):
        return tuple(choice for choice in alias.choices if isinstance(choice, str))
    if isinstance(alias, str):
        return (alias,)
    if field.alias:
        return (field.alias,)
    return (name,)


@lru_cache(maxsize=None)
def accepted_keys(model_cls: Type["ProbeModel"]) -> FrozenSet[str]:
    """All keys a model accepts in strict mode: its fields plus redundant ones."""
    keys = set(model_cls.redundant_fields)
    for name, field in model_cls.model_fields.items():
        keys.add(name)
        keys.update(field_source_keys(name, field))
    return frozenset(keys)


class ProbeModel(BaseModel):
    """Base for all decoded ffprobe models.

    Subclasses customise decoding through two class-level hooks:

    - ``redundant_fields``: keys ffprobe emits that are represented elsewhere
      (e.g. ``codec_type`` inside a stream record). They are accepted in strict
      mode and never stored.
    - ``_prepare_input``: reshapes the raw mapping before field validation.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True, extra="ignore")

    redundant_fields: ClassVar[FrozenSet[str]] = frozenset()
    # Models that forward or keep unknown keys themselves opt out of the strict check.
    checks_unknown_fields: ClassVar[bool] = True

    @model_validator(mode="before")
    @classmethod
    def _decode_input(cls, data: Any, info: ValidationInfo) -> Any:
        if not isinstance(data, Mapping):
            return data
        if cls.checks_unknown_fields and is_strict(info):
            cls._reject_unknown_fields(data)
        return cls._prepare_input(dict(data), info)

    @classmethod
    def _reject_unknown_fields(cls, data: Mapping[str, Any]) -> None:
        known = accepted_keys(cls)
        unexpected = [key for key in data if key not in known]
        if unexpected:
            names = ", ".join(repr(key) for key in unexpected)
            raise ValueError(f"unknown field(s) {names} in {cls.__name__} (strict mode)")

    @classmethod
    def _prepare_input(cls, data: Dict[str, Any], info: ValidationInfo) -> Any:
        return data
