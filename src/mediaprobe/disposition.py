"""Stream disposition flags."""

from typing import Any, FrozenSet

from pydantic import Field

from ._internal import ProbeModel


def _flag(description: str) -> Any:
    return Field(default=0, ge=0, le=1, description=description)


class Disposition(ProbeModel):
    """Fixed set of 0/1 flags describing the role of a stream.

    Flags that an older ffprobe does not print default to 0.

    Examples:
        >>> Disposition.model_validate({"default": 1, "forced": 0}).active()
        frozenset({'default'})
    """

    attached_pic: int = _flag("Cover art / attached picture")
    captions: int = _flag("Captions for the hearing impaired")
    clean_effects: int = _flag("Audio without dialogue")
    comment: int = _flag("Commentary track")
    default: int = _flag("Selected by default")
    dependent: int = _flag("Only meaningful combined with another stream")
    descriptions: int = _flag("Audio or text descriptions for the visually impaired")
    dub: int = _flag("Dubbed audio")
    forced: int = _flag("Forced subtitles")
    hearing_impaired: int = _flag("For the hearing impaired")
    karaoke: int = _flag("Karaoke track")
    lyrics: int = _flag("Lyrics")
    metadata: int = _flag("Metadata track")
    multilayer: int = _flag("Multiple layers (e.g. stereoscopic views)")
    non_diegetic: int = _flag("Sound not part of the scene")
    original: int = _flag("Original language")
    still_image: int = _flag("Single still image")
    timed_thumbnails: int = _flag("Sparse thumbnail images")
    visual_impaired: int = _flag("For the visually impaired")

    def active(self) -> FrozenSet[str]:
        """Names of the flags that are set."""
        return frozenset(name for name in type(self).model_fields if getattr(self, name))


__all__ = ["Disposition"]
