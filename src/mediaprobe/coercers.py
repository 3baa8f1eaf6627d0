"""Field-level coercion rules for ffprobe scalars.

ffprobe is inconsistent about how it spells a value: the same integer can be a
JSON number in one release and a JSON string in another, durations come in
several textual grammars, and codec tags are hex strings. Every function in
this module takes one raw scalar and either returns the canonical Python value
or raises ``ValueError`` naming the raw input and the grammar it was expected
to match. None of them fall back to another grammar; the field declaration
picks the coercer.

The ``Annotated`` aliases at the bottom plug the coercers into pydantic models,
which wrap the ``ValueError`` into a ``ValidationError`` carrying the field
location.
"""

import math
import re
from datetime import datetime, timedelta, timezone
from typing import Annotated, Any, Optional

from pydantic import BeforeValidator, PlainSerializer

_INT_RE = re.compile(r"[+-]?\d+")
_HEX_RE = re.compile(r"[0-9a-fA-F]*")
_DECIMAL_RE = re.compile(r"[+-]?(?:\d+(?:\.\d*)?|\.\d+)(?:[eE][+-]?\d+)?")
# Hours are unbounded; Matroska DURATION tags may exceed a day.
_CLOCK_RE = re.compile(r"(\d+):([0-5]\d):([0-5]\d)(?:\.(\d{1,9}))?")
_RFC3339_RE = re.compile(
    r"(\d{4})-(\d{2})-(\d{2})[Tt ](\d{2}):(\d{2}):(\d{2})(?:\.(\d+))?([Zz]|[+-]\d{2}:\d{2})"
)
NAIVE_DATETIME_FORMAT = "%Y-%m-%d %H:%M:%S"


# ============================================================================
# Integers
# ============================================================================


def string_to_int(value: Any) -> int:
    """Decode a required integer given natively or as decimal text.

    Raises:
        ValueError: If the value is neither an integer nor a string of decimal digits
    """
    if isinstance(value, bool):
        raise ValueError(f"Invalid integer {value!r}: expected an integer or decimal digits")
    if isinstance(value, int):
        return value
    if isinstance(value, str) and _INT_RE.fullmatch(value):
        return int(value)
    raise ValueError(f"Invalid integer {value!r}: expected an integer or decimal digits")


def option_string_to_int(value: Any) -> Optional[int]:
    """Like :func:`string_to_int`, but ``None`` passes through."""
    if value is None:
        return None
    return string_to_int(value)


# ============================================================================
# Hex byte strings
# ============================================================================


def string_to_bytes(value: Any) -> bytes:
    """Decode a hex string such as ``"0x31637661"`` into bytes.

    The ``0x`` prefix is optional. Already-decoded ``bytes`` pass through.

    Raises:
        ValueError: If the text has an odd number of digits or a non-hex pair
    """
    if isinstance(value, (bytes, bytearray)):
        return bytes(value)
    if not isinstance(value, str):
        raise ValueError(f"Invalid hex string {value!r}: expected text")

    digits = value[2:] if value.startswith("0x") else value
    if len(digits) % 2 != 0:
        raise ValueError(f"Invalid hex string {value!r}: hex string must have an even number of digits")
    if not _HEX_RE.fullmatch(digits):
        raise ValueError(f"Invalid hex string {value!r}: contains non-hex digits")
    return bytes.fromhex(digits)


def bytes_to_hex(data: bytes) -> str:
    """Render bytes the way ffprobe prints codec tags (``0x`` + lowercase hex)."""
    return "0x" + data.hex()


# ============================================================================
# Durations
# ============================================================================


def option_string_to_duration(value: Any) -> Optional[timedelta]:
    """Decode decimal seconds (``"1.500000"`` or ``1.5``) into a timedelta.

    Raises:
        ValueError: On non-numeric, negative or non-finite input
    """
    if value is None or isinstance(value, timedelta):
        return value
    if isinstance(value, bool):
        raise ValueError(f"Invalid duration {value!r}: expected decimal seconds")
    if isinstance(value, (int, float)):
        seconds = float(value)
    elif isinstance(value, str) and _DECIMAL_RE.fullmatch(value):
        seconds = float(value)
    else:
        raise ValueError(f"Invalid duration {value!r}: expected decimal seconds")

    if not math.isfinite(seconds) or seconds < 0:
        raise ValueError(f"Invalid duration {value!r}: seconds must be finite and non-negative")
    try:
        return timedelta(seconds=seconds)
    except OverflowError as e:
        raise ValueError(f"Invalid duration {value!r}: out of range") from e


def option_chronostring_to_duration(value: Any) -> Optional[timedelta]:
    """Decode a clock string ``HH:MM:SS[.fffffffff]`` into a timedelta.

    Matroska statistics tags carry nanosecond fractions; anything finer than a
    microsecond is truncated because ``timedelta`` cannot hold it.

    Raises:
        ValueError: If the text does not match the clock grammar or exceeds the timedelta range
    """
    if value is None or isinstance(value, timedelta):
        return value
    match = _CLOCK_RE.fullmatch(value) if isinstance(value, str) else None
    if match is None:
        raise ValueError(f"Invalid clock duration {value!r}: expected HH:MM:SS[.fraction]")

    hours, minutes, seconds, fraction = match.groups()
    nanoseconds = int((fraction or "").ljust(9, "0"))
    try:
        return timedelta(
            seconds=int(hours) * 3600 + int(minutes) * 60 + int(seconds),
            microseconds=nanoseconds // 1000,
        )
    except OverflowError as e:
        raise ValueError(f"Invalid clock duration {value!r}: out of range") from e


def duration_to_seconds_string(duration: timedelta) -> str:
    return f"{duration.total_seconds():.6f}"


def duration_to_clock_string(duration: timedelta) -> str:
    total_us = duration // timedelta(microseconds=1)
    seconds, micro = divmod(total_us, 1_000_000)
    hours, seconds = divmod(seconds, 3600)
    minutes, seconds = divmod(seconds, 60)
    return f"{hours:02d}:{minutes:02d}:{seconds:02d}.{micro * 1000:09d}"


# ============================================================================
# Timestamps
# ============================================================================


def option_string_to_datetime(value: Any) -> Optional[datetime]:
    """Decode an RFC 3339 timestamp (offset required) into an aware datetime.

    A leap second (``:60``) is clamped to the last microsecond of the minute,
    since ``datetime`` cannot represent it.

    Raises:
        ValueError: If the text is not RFC 3339 or names an impossible date
    """
    if value is None or isinstance(value, datetime):
        return value
    match = _RFC3339_RE.fullmatch(value) if isinstance(value, str) else None
    if match is None:
        raise ValueError(f"Invalid RFC 3339 timestamp {value!r}: expected YYYY-MM-DDTHH:MM:SS[.frac](Z|+HH:MM)")

    year, month, day, hour, minute, second, fraction, offset = match.groups()
    microsecond = int((fraction or "0")[:6].ljust(6, "0"))
    if second == "60":
        second, microsecond = "59", 999999
    if offset in ("Z", "z"):
        tz = timezone.utc
    else:
        sign = -1 if offset[0] == "-" else 1
        tz = timezone(sign * timedelta(hours=int(offset[1:3]), minutes=int(offset[4:6])))
    try:
        return datetime(
            int(year),
            int(month),
            int(day),
            int(hour),
            int(minute),
            int(second),
            microsecond,
            tzinfo=tz,
        )
    except ValueError as e:
        raise ValueError(f"Invalid RFC 3339 timestamp {value!r}: {e}") from e


def option_string_to_naivedatetime(value: Any) -> Optional[datetime]:
    """Decode ``YYYY-MM-DD HH:MM:SS`` into a naive datetime.

    Raises:
        ValueError: If the text does not match the format
    """
    if value is None or isinstance(value, datetime):
        return value
    if not isinstance(value, str):
        raise ValueError(f"Invalid timestamp {value!r}: expected {NAIVE_DATETIME_FORMAT}")
    try:
        return datetime.strptime(value, NAIVE_DATETIME_FORMAT)
    except ValueError as e:
        raise ValueError(f"Invalid timestamp {value!r}: expected {NAIVE_DATETIME_FORMAT}") from e


def datetime_to_rfc3339(value: datetime) -> str:
    offset = value.utcoffset()
    if offset is None or offset == timedelta(0):
        suffix = "Z"
    else:
        minutes = int(offset.total_seconds()) // 60
        sign = "-" if minutes < 0 else "+"
        suffix = f"{sign}{abs(minutes) // 60:02d}:{abs(minutes) % 60:02d}"
    return value.strftime("%Y-%m-%dT%H:%M:%S.%f") + suffix


def naivedatetime_to_string(value: datetime) -> str:
    return value.strftime(NAIVE_DATETIME_FORMAT)


# ============================================================================
# Pydantic field types
# ============================================================================

StrInt = Annotated[int, BeforeValidator(string_to_int)]
OptStrInt = Annotated[Optional[int], BeforeValidator(option_string_to_int)]
HexBytes = Annotated[bytes, BeforeValidator(string_to_bytes), PlainSerializer(bytes_to_hex, return_type=str)]
SecondsDuration = Annotated[
    Optional[timedelta],
    BeforeValidator(option_string_to_duration),
    PlainSerializer(duration_to_seconds_string, return_type=str, when_used="json-unless-none"),
]
ClockDuration = Annotated[
    Optional[timedelta],
    BeforeValidator(option_chronostring_to_duration),
    PlainSerializer(duration_to_clock_string, return_type=str, when_used="json-unless-none"),
]
Rfc3339DateTime = Annotated[
    Optional[datetime],
    BeforeValidator(option_string_to_datetime),
    PlainSerializer(datetime_to_rfc3339, return_type=str, when_used="json-unless-none"),
]
NaiveDateTime = Annotated[
    Optional[datetime],
    BeforeValidator(option_string_to_naivedatetime),
    PlainSerializer(naivedatetime_to_string, return_type=str, when_used="json-unless-none"),
]

__all__ = [
    "string_to_int",
    "option_string_to_int",
    "string_to_bytes",
    "bytes_to_hex",
    "option_string_to_duration",
    "option_chronostring_to_duration",
    "option_string_to_datetime",
    "option_string_to_naivedatetime",
    "duration_to_seconds_string",
    "duration_to_clock_string",
    "datetime_to_rfc3339",
    "naivedatetime_to_string",
    "StrInt",
    "OptStrInt",
    "HexBytes",
    "SecondsDuration",
    "ClockDuration",
    "Rfc3339DateTime",
    "NaiveDateTime",
]
