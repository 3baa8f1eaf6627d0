"""Runtime configuration, read from ``MEDIAPROBE_*`` environment variables."""

from functools import lru_cache
from typing import Any, Dict, FrozenSet, Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from ._internal import build_context


class ProbeSettings(BaseSettings):
    """Decoding and runner options.

    Examples:
        >>> sorted(ProbeSettings(strict=True, chapters=False).enabled_sections())
        ['format', 'streams']
    """

    model_config = SettingsConfigDict(env_prefix="MEDIAPROBE_", case_sensitive=False, extra="ignore", frozen=True)

    # -------- Decoding --------
    strict: bool = Field(False, description="Reject keys the models do not declare")
    streams: bool = Field(True, description="Decode the streams section")
    format: bool = Field(True, description="Decode the format section")
    chapters: bool = Field(True, description="Decode the chapters section")

    # -------- Runner --------
    ffprobe_bin: str = Field("ffprobe", description="Binary name (e.g. 'ffprobe-6') or path")
    count_frames: bool = Field(False, description="Pass -count_frames; fills Stream.nb_read_frames")
    timeout_sec: Optional[float] = Field(None, gt=0)

    def enabled_sections(self) -> FrozenSet[str]:
        flags = {"streams": self.streams, "format": self.format, "chapters": self.chapters}
        return frozenset(name for name, enabled in flags.items() if enabled)

    def validation_context(self) -> Dict[str, Any]:
        """Pydantic validation context carrying the strict flag and enabled sections."""
        return build_context(strict=self.strict, sections=self.enabled_sections())


@lru_cache(maxsize=1)
def get_settings() -> ProbeSettings:
    """Process-wide settings (cached; call ``get_settings.cache_clear()`` after changing the environment)."""
    return ProbeSettings()


__all__ = ["ProbeSettings", "get_settings"]
