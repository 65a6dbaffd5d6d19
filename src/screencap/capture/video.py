"""Screen recording via ffmpeg's x11grab and PulseAudio inputs.

Recording negotiates everything it can with the installed ffmpeg before
starting: the container format, the screen and audio inputs, and the audio
and video encoders are each picked from a preference list against what
`ffmpeg -formats` and `ffmpeg -encoders` report.
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from pathlib import Path

from screencap.capture.models import CaptureRegion
from screencap.capture.region import RegionDescriptor, resolve_region
from screencap.config.models import CaptureSettings, CodecPreferences, ToolPathsConfig
from screencap.core.subprocess_utils import find_tool, run_command
from screencap.exceptions import CaptureError, CodecNotFoundError
from screencap.tools.capabilities import audio_encoders, formats, video_encoders
from screencap.tools.encoders import (
    AUDIO_INPUT_CANDIDATES,
    SCREEN_INPUT_CANDIDATES,
    can_decode,
    can_encode,
    find_codec,
)

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class CaptureCodecs:
    """ffmpeg formats and encoders selected for a recording."""

    container: str
    """Output container format (e.g. 'matroska')."""

    screen_input: str
    """Screen grabbing input format (e.g. 'x11grab')."""

    audio_input: str
    """Audio input format (e.g. 'pulse')."""

    audio_encoder: str
    """Audio encoder (e.g. 'aac')."""

    video_encoder: str
    """Video encoder (e.g. 'libx264')."""


def _require(selected: str | None, capability: str, candidates: list[str]) -> str:
    if selected is None:
        raise CodecNotFoundError(capability, candidates)
    logger.info("%s: %s", capability, selected)
    return selected


def select_capture_codecs(
    preferences: CodecPreferences | None = None,
    ffmpeg_path: Path | None = None,
) -> CaptureCodecs:
    """Select the formats and encoders used for recording.

    Each capability queries ffmpeg afresh.

    Raises:
        ToolNotFoundError: If ffmpeg cannot be found.
        CodecNotFoundError: If no candidate is available for a capability.
    """
    preferences = preferences or CodecPreferences()

    container = _require(
        find_codec(formats(ffmpeg_path), preferences.formats, can_encode),
        "Format",
        preferences.formats,
    )
    screen_input = _require(
        find_codec(formats(ffmpeg_path), SCREEN_INPUT_CANDIDATES, can_decode),
        "X11",
        list(SCREEN_INPUT_CANDIDATES),
    )
    audio_input = _require(
        find_codec(formats(ffmpeg_path), AUDIO_INPUT_CANDIDATES, can_decode),
        "Pulseaudio",
        list(AUDIO_INPUT_CANDIDATES),
    )
    audio_encoder = _require(
        find_codec(audio_encoders(ffmpeg_path), preferences.audio, can_encode),
        "Audio",
        preferences.audio,
    )
    video_encoder = _require(
        find_codec(video_encoders(ffmpeg_path), preferences.video, can_encode),
        "Video",
        preferences.video,
    )

    return CaptureCodecs(
        container=container,
        screen_input=screen_input,
        audio_input=audio_input,
        audio_encoder=audio_encoder,
        video_encoder=video_encoder,
    )


def build_video_command(
    ffmpeg: Path,
    filename: Path,
    region: RegionDescriptor,
    codecs: CaptureCodecs,
    framerate: int,
    settings: CaptureSettings | None = None,
    threads: int | None = None,
) -> list[str]:
    """Build the ffmpeg command line for a recording.

    Input 0 is the screen region and input 1 the PulseAudio source.
    """
    settings = settings or CaptureSettings()
    threads = threads or os.cpu_count() or 1

    return [
        str(ffmpeg),
        "-hide_banner",
        "-threads", str(threads),
        "-y",
        "-f", codecs.screen_input,
        "-draw_mouse", "1" if settings.draw_mouse else "0",
        "-framerate", str(framerate),
        "-show_region", "1" if settings.show_region else "0",
        "-video_size", region.resolution,
        "-i", region.offset,
        "-f", codecs.audio_input,
        "-i", settings.audio_source,
        "-f", codecs.container,
        "-map", "0:0",
        "-c:v", codecs.video_encoder,
        "-preset:v", settings.video_preset,
        "-crf", str(settings.crf),
        "-map", "1:0",
        "-c:a", codecs.audio_encoder,
        "-b:a", settings.audio_bitrate,
        str(filename),
    ]  # fmt: skip


def capture_video(
    filename: Path,
    region: CaptureRegion,
    framerate: int,
    settings: CaptureSettings | None = None,
    preferences: CodecPreferences | None = None,
    tools: ToolPathsConfig | None = None,
) -> None:
    """Record region to filename until ffmpeg exits or Ctrl+C is pressed.

    Raises:
        ToolNotFoundError: If a required tool cannot be found.
        CodecNotFoundError: If ffmpeg lacks a required capability.
        ParseMismatchError: If the region geometry cannot be read.
        CaptureError: If ffmpeg fails.
    """
    tools = tools or ToolPathsConfig()
    ffmpeg = find_tool("ffmpeg", tools.ffmpeg)

    codecs = select_capture_codecs(preferences, tools.ffmpeg)
    descriptor = resolve_region(region, tools)
    command = build_video_command(
        ffmpeg, filename, descriptor, codecs, framerate, settings
    )

    logger.info(
        "Recording %s (%s at %s) to %s",
        region.value,
        descriptor.resolution,
        descriptor.offset,
        filename,
    )
    try:
        returncode = run_command(command)
    except KeyboardInterrupt:
        # ffmpeg finalizes the file when interrupted
        logger.info("Recording stopped")
        return
    if returncode != 0:
        raise CaptureError("ffmpeg", returncode)
