"""Ratio value type (time bases, frame rates, aspect ratios)."""

import re
from datetime import timedelta
from fractions import Fraction
from typing import Any, Tuple

from pydantic import BaseModel, ConfigDict, Field, model_serializer, model_validator

U64_MAX = 2**64 - 1
_SEPARATOR_RE = re.compile(r"[:/]")
_UNSIGNED_RE = re.compile(r"\+?\d+")


def _parse_unsigned(part: str, text: str) -> int:
    if not _UNSIGNED_RE.fullmatch(part):
        raise ValueError(f"Invalid ratio {text!r}: {part!r} is not an unsigned integer")
    value = int(part)
    if value > U64_MAX:
        raise ValueError(f"Invalid ratio {text!r}: {part!r} is out of range")
    return value


def split_ratio(text: str) -> Tuple[int, int]:
    """Split ``"N:D"`` or ``"N/D"`` into its two unsigned integer parts.

    Raises:
        ValueError: If the text does not have exactly two numeric parts
    """
    parts = _SEPARATOR_RE.split(text)
    if len(parts) != 2:
        raise ValueError(
            f"Invalid ratio {text!r}: expected 'numerator:denominator' or 'numerator/denominator'"
        )
    return _parse_unsigned(parts[0], text), _parse_unsigned(parts[1], text)


class Ratio(BaseModel):
    """Ratio such as a time base ``1/1000`` or an aspect ratio ``16:9``.

    Both separators are accepted on input; the canonical rendering always uses
    ``:``. Values are kept as given (``2:4`` is not reduced), and a zero
    denominator is only an error once something divides by it.

    Examples:
        >>> ratio = Ratio.parse("1/1000")
        >>> ratio.numerator, ratio.denominator
        (1, 1000)
        >>> ratio.render()
        '1:1000'
    """

    model_config = ConfigDict(frozen=True)

    numerator: int = Field(ge=0, le=U64_MAX)
    denominator: int = Field(ge=0, le=U64_MAX)

    @model_validator(mode="before")
    @classmethod
    def _parse_text(cls, data: Any) -> Any:
        if isinstance(data, str):
            numerator, denominator = split_ratio(data)
            return {"numerator": numerator, "denominator": denominator}
        return data

    @model_serializer
    def _serialize(self) -> str:
        return self.render()

    # ========== Construction ==========

    @classmethod
    def parse(cls, text: str) -> "Ratio":
        """Parse ``"N:D"`` or ``"N/D"``.

        Raises:
            ValueError: If the text is not a ratio of two unsigned integers
        """
        numerator, denominator = split_ratio(text)
        return cls(numerator=numerator, denominator=denominator)

    # ========== Conversion ==========

    def render(self) -> str:
        """Canonical text form, always ``"N:D"``."""
        return f"{self.numerator}:{self.denominator}"

    def to_fraction(self) -> Fraction:
        """Exact value as a Fraction.

        Raises:
            ZeroDivisionError: If the denominator is zero
        """
        return Fraction(self.numerator, self.denominator)

    def __float__(self) -> float:
        return self.numerator / self.denominator

    def __str__(self) -> str:
        return self.render()


# ============================================================================
# Time base conversions
# ============================================================================


def ts_to_seconds(ts: int, time_base: Ratio) -> float:
    """Convert a timestamp in ``time_base`` units to seconds.

    Raises:
        ZeroDivisionError: If the time base has a zero denominator
    """
    return ts * time_base.numerator / time_base.denominator


def ts_to_duration(ts: int, time_base: Ratio) -> timedelta:
    """Convert a timestamp in ``time_base`` units to a whole-millisecond timedelta.

    Raises:
        ZeroDivisionError: If the time base has a zero denominator
    """
    return timedelta(milliseconds=ts * time_base.numerator * 1000 // time_base.denominator)


__all__ = ["Ratio", "split_ratio", "ts_to_seconds", "ts_to_duration", "U64_MAX"]
