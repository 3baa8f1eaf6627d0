"""Container format section."""

from datetime import timedelta
from typing import Optional

from pydantic import Field

from ._internal import ProbeModel
from .coercers import option_string_to_duration
from .tags import FormatTags


class Format(ProbeModel):
    """Container-level facts: file name, demuxer, duration, size and metadata.

    ffprobe prints ``duration``, ``start_time``, ``size`` and ``bit_rate`` as
    text; they are kept as text and parsed on demand.
    """

    filename: str
    nb_streams: int = Field(ge=0)
    nb_programs: int = Field(ge=0)
    nb_stream_groups: int = Field(default=0, ge=0, description="Printed by ffprobe 7 and later")
    format_name: str = Field(description="Short demuxer name(s), e.g. 'matroska,webm'")
    format_long_name: str
    start_time: Optional[str] = None
    duration: Optional[str] = Field(default=None, description="Length in seconds")
    size: Optional[str] = Field(default=None, description="Size in bytes")
    bit_rate: Optional[str] = None
    probe_score: int = Field(ge=0, description="Demuxer confidence, 0-100")
    tags: Optional[FormatTags] = None

    def try_get_duration(self) -> Optional[timedelta]:
        """Parse ``duration`` into a timedelta.

        Returns:
            The duration, or None if ffprobe did not print one

        Raises:
            ValueError: If the duration text is not a non-negative number of seconds
        """
        return option_string_to_duration(self.duration)

    def get_duration(self) -> Optional[timedelta]:
        """Like :meth:`try_get_duration`, but an unparsable duration also yields None."""
        try:
            return self.try_get_duration()
        except ValueError:
            return None


__all__ = ["Format"]
