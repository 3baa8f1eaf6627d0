"""Run the ffprobe binary and decode what it prints."""

import os
import subprocess
from pathlib import Path
from typing import List, Optional, Union

from loguru import logger

from .errors import FfProbeIoError, FfProbeStatusError
from .probe import FfProbe
from .settings import ProbeSettings, get_settings


def build_command(path: Union[str, Path], settings: ProbeSettings) -> List[str]:
    """Command line for probing ``path``; only enabled sections are requested."""
    command = [settings.ffprobe_bin, "-v", "quiet"]
    if settings.format:
        command.append("-show_format")
    if settings.streams:
        command.append("-show_streams")
    if settings.chapters:
        command.append("-show_chapters")
    if settings.count_frames:
        command.append("-count_frames")
    command += ["-print_format", "json", os.fspath(path)]
    return command


def ffprobe(path: Union[str, Path], *, settings: Optional[ProbeSettings] = None) -> FfProbe:
    """Probe a media file.

    Args:
        path: File path or any URL ffprobe understands
        settings: Options; defaults to :func:`get_settings`

    Returns:
        The decoded probe result

    Raises:
        FfProbeIoError: If the binary cannot be executed or times out
        FfProbeStatusError: If ffprobe exits with a non-zero status
        FfProbeDeserializeError: If the output cannot be decoded

    Examples:
        >>> probe = ffprobe("movie.mkv", settings=ProbeSettings(count_frames=True))
        >>> probe.streams[0].nb_read_frames
        126
    """
    settings = settings or get_settings()
    command = build_command(path, settings)
    logger.debug("Running {}", " ".join(command))

    try:
        completed = subprocess.run(command, capture_output=True, timeout=settings.timeout_sec, check=False)
    except subprocess.TimeoutExpired as e:
        raise FfProbeIoError(f"ffprobe timed out after {settings.timeout_sec}s: {os.fspath(path)}") from e
    except OSError as e:
        raise FfProbeIoError(f"Could not execute ffprobe: {e}") from e

    if completed.returncode != 0:
        logger.debug("ffprobe exited with status code {}", completed.returncode)
        raise FfProbeStatusError(completed.returncode, completed.stdout, completed.stderr)

    return FfProbe.from_json(completed.stdout, settings=settings)


__all__ = ["ffprobe", "build_command"]
