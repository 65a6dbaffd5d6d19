"""Configuration data models.

This module defines dataclasses for screencap configuration options. Values
may come from a TOML file, so every model checks the types of its fields as
well as their ranges and raises ValueError for anything it cannot use.
"""

from dataclasses import dataclass, field
from pathlib import Path

from screencap.tools.encoders import (
    AUDIO_ENCODER_CANDIDATES,
    FORMAT_CANDIDATES,
    VIDEO_ENCODER_CANDIDATES,
)


def _check_type(name: str, value: object, expected: type) -> None:
    # bool is a subclass of int but is never a valid number here
    wrong_bool = expected is not bool and isinstance(value, bool)
    if wrong_bool or not isinstance(value, expected):
        raise ValueError(
            f"{name} must be of type {expected.__name__}, got {value!r}"
        )


def _check_names(name: str, value: object) -> None:
    if not isinstance(value, list) or not all(isinstance(v, str) for v in value):
        raise ValueError(f"{name} must be a list of names, got {value!r}")
    if not value:
        raise ValueError(f"{name} candidate list must not be empty")


@dataclass
class ToolPathsConfig:
    """Configuration for external tool paths.

    All paths are optional. If not specified, tools are looked up in PATH.
    """

    ffmpeg: Path | None = None
    xdpyinfo: Path | None = None
    xprop: Path | None = None
    xwininfo: Path | None = None
    gnome_screenshot: Path | None = None


@dataclass
class CodecPreferences:
    """Ordered candidate names used when selecting codecs.

    Each list is in priority order, most preferred first.
    """

    formats: list[str] = field(default_factory=lambda: list(FORMAT_CANDIDATES))
    audio: list[str] = field(default_factory=lambda: list(AUDIO_ENCODER_CANDIDATES))
    video: list[str] = field(default_factory=lambda: list(VIDEO_ENCODER_CANDIDATES))

    def __post_init__(self) -> None:
        """Validate configuration."""
        _check_names("formats", self.formats)
        _check_names("audio", self.audio)
        _check_names("video", self.video)


@dataclass
class CaptureSettings:
    """Settings for the screenshot and recording commands."""

    # Default video framerate (fps)
    framerate: int = 30

    # x264-style constant rate factor (0-51, lower is better quality)
    crf: int = 16

    video_preset: str = "fast"
    audio_bitrate: str = "256k"

    # PulseAudio source recorded alongside video
    audio_source: str = "default"

    draw_mouse: bool = True
    show_region: bool = True

    pictures_dir: Path = field(
        default_factory=lambda: Path.home() / "Pictures" / "Screenshot"
    )
    videos_dir: Path = field(
        default_factory=lambda: Path.home() / "Videos" / "Screenshot"
    )

    def __post_init__(self) -> None:
        """Validate configuration."""
        _check_type("framerate", self.framerate, int)
        _check_type("crf", self.crf, int)
        for name in ("video_preset", "audio_bitrate", "audio_source"):
            _check_type(name, getattr(self, name), str)
        _check_type("draw_mouse", self.draw_mouse, bool)
        _check_type("show_region", self.show_region, bool)

        if self.framerate <= 0:
            raise ValueError(f"framerate must be positive, got {self.framerate}")
        if not 0 <= self.crf <= 51:
            raise ValueError(f"crf must be between 0 and 51, got {self.crf}")


@dataclass
class LoggingConfig:
    """Configuration for logging output."""

    level: str = "info"
    file: Path | None = None
    format: str = "text"
    include_stderr: bool = True
    max_bytes: int = 10_485_760  # 10 MB
    backup_count: int = 5

    # Keep the DEBUG record the process runner writes for every tool query
    log_commands: bool = False

    def __post_init__(self) -> None:
        """Validate configuration."""
        _check_type("level", self.level, str)
        _check_type("format", self.format, str)
        _check_type("include_stderr", self.include_stderr, bool)
        _check_type("max_bytes", self.max_bytes, int)
        _check_type("backup_count", self.backup_count, int)
        _check_type("log_commands", self.log_commands, bool)

        valid_levels = {"debug", "info", "warning", "error"}
        if self.level.casefold() not in valid_levels:
            raise ValueError(f"level must be one of {valid_levels}, got {self.level}")
        valid_formats = {"text", "json"}
        if self.format.casefold() not in valid_formats:
            raise ValueError(
                f"format must be one of {valid_formats}, got {self.format}"
            )
        if self.max_bytes <= 0:
            raise ValueError("max_bytes must be positive")
        if self.backup_count < 0:
            raise ValueError("backup_count must not be negative")


@dataclass
class ScreencapConfig:
    """Main configuration container for screencap."""

    tools: ToolPathsConfig = field(default_factory=ToolPathsConfig)
    codecs: CodecPreferences = field(default_factory=CodecPreferences)
    capture: CaptureSettings = field(default_factory=CaptureSettings)
    logging: LoggingConfig = field(default_factory=LoggingConfig)
