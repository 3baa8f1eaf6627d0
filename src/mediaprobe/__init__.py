"""mediaprobe - Typed models for ffprobe's JSON output.

Public API:
    - FfProbe: Decoded ffprobe document (streams, format, chapters)
    - decode: Decode JSON text or a parsed mapping into an FfProbe
    - ffprobe: Run the ffprobe binary on a file and decode its output
    - Stream, Chapter, Format: Sections of the document
    - ProbeSettings, get_settings: Decoding and runner options
    - FfProbeError and subclasses: Everything the package raises
"""

from loguru import logger

from .chapter import Chapter
from .disposition import Disposition
from .errors import FfProbeDeserializeError, FfProbeError, FfProbeIoError, FfProbeStatusError
from .format import Format
from .probe import FfProbe, decode
from .ratio import Ratio
from .settings import ProbeSettings, get_settings
from .stream import SideData, Stream
from .streams import AttachmentStream, AudioStream, DataStream, StreamKind, SubtitleStream, VideoStream

# Disable logging by default, which is best practice for library code
logger.disable("mediaprobe")

try:
    from importlib.metadata import version

    __version__ = version("mediaprobe")
except Exception:
    __version__ = "0.0.0.dev0"


# Lazy import for the runner so decoding never touches subprocess machinery
def __getattr__(name: str):
    """Lazy import for ffprobe and build_command."""
    if name == "ffprobe":
        from .runner import ffprobe

        return ffprobe
    elif name == "build_command":
        from .runner import build_command

        return build_command
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")


__all__ = [
    "FfProbe",
    "decode",
    "ffprobe",
    "build_command",
    "Stream",
    "SideData",
    "Disposition",
    "StreamKind",
    "AudioStream",
    "VideoStream",
    "SubtitleStream",
    "AttachmentStream",
    "DataStream",
    "Chapter",
    "Format",
    "Ratio",
    "ProbeSettings",
    "get_settings",
    "FfProbeError",
    "FfProbeIoError",
    "FfProbeStatusError",
    "FfProbeDeserializeError",
]
