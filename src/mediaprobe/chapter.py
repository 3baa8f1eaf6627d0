"""Chapter markers."""

from datetime import timedelta

from pydantic import Field

from ._internal import ProbeModel
from .ratio import Ratio, ts_to_duration, ts_to_seconds
from .tags import ChapterTags


class Chapter(ProbeModel):
    """One chapter of the container.

    ``start`` and ``end`` are in ``time_base`` units. ffprobe also prints them
    as seconds text (``start_time``/``end_time``); that text is kept verbatim in
    ``start_time_text``/``end_time_text``, while :meth:`start_time` and
    :meth:`end_time` compute the values from the integer timestamps.
    """

    id: int
    time_base: Ratio
    start: int
    start_time_text: str = Field(alias="start_time")
    end: int
    end_time_text: str = Field(alias="end_time")
    tags: ChapterTags = Field(default_factory=ChapterTags)

    def start_time(self) -> float:
        return ts_to_seconds(self.start, self.time_base)

    def end_time(self) -> float:
        return ts_to_seconds(self.end, self.time_base)

    def duration(self) -> timedelta:
        """Length of the chapter at millisecond resolution.

        Raises:
            ZeroDivisionError: If the time base has a zero denominator
        """
        return ts_to_duration(self.end - self.start, self.time_base)


__all__ = ["Chapter"]
