"""Exceptions raised by :mod:`mediaprobe`."""

from typing import Any, Dict, List, Optional

from pydantic import ValidationError


class FfProbeError(Exception):
    """Base class for every error raised while running or decoding ffprobe."""


class FfProbeIoError(FfProbeError):
    """The ffprobe binary could not be executed (missing binary, permissions, timeout)."""


class FfProbeStatusError(FfProbeError):
    """ffprobe ran but exited with a non-zero status."""

    def __init__(self, returncode: int, stdout: bytes = b"", stderr: bytes = b""):
        self.returncode = returncode
        self.stdout = stdout
        self.stderr = stderr
        detail = (stderr or stdout).decode("utf-8", errors="replace").strip()
        super().__init__(f"ffprobe exited with status code {returncode}: {detail}")


class FfProbeDeserializeError(FfProbeError, ValueError):
    """ffprobe output could not be decoded into the typed model.

    The underlying ``pydantic.ValidationError`` or ``json.JSONDecodeError`` is
    chained as ``__cause__``.
    """

    def __init__(self, message: str, cause: Optional[Exception] = None):
        super().__init__(message)
        self.cause = cause

    def errors(self) -> List[Dict[str, Any]]:
        """Structured error list (``loc``, ``input``, ``msg``, ...), empty for JSON syntax errors."""
        if isinstance(self.cause, ValidationError):
            return self.cause.errors()
        return []


__all__ = ["FfProbeError", "FfProbeIoError", "FfProbeStatusError", "FfProbeDeserializeError"]
