"""Configuration loader with precedence handling.

Configuration is loaded with the following precedence (highest to lowest):
1. CLI arguments (passed directly to functions)
2. Environment variables (SCREENCAP_*)
3. Config file (~/.screencap/config.toml)
4. Default values

Environment variables:
- SCREENCAP_CONFIG_PATH: Path to config file (overrides default location)
- SCREENCAP_FFMPEG_PATH: Path to ffmpeg executable
- SCREENCAP_XDPYINFO_PATH: Path to xdpyinfo executable
- SCREENCAP_XPROP_PATH: Path to xprop executable
- SCREENCAP_XWININFO_PATH: Path to xwininfo executable
- SCREENCAP_GNOME_SCREENSHOT_PATH: Path to gnome-screenshot executable
- SCREENCAP_FORMATS, SCREENCAP_AUDIO_CODECS, SCREENCAP_VIDEO_CODECS:
  Comma-separated codec candidates, most preferred first
- SCREENCAP_FRAMERATE: Default video framerate
- SCREENCAP_AUDIO_SOURCE: PulseAudio source to record
- SCREENCAP_DRAW_MOUSE, SCREENCAP_SHOW_REGION: Recording overlays (true/false)
- SCREENCAP_PICTURES_DIR, SCREENCAP_VIDEOS_DIR: Output directories
- SCREENCAP_LOG_LEVEL, SCREENCAP_LOG_FILE, SCREENCAP_LOG_FORMAT: Logging
- SCREENCAP_LOG_COMMANDS: Log every external tool invocation (true/false)
"""

from __future__ import annotations

import logging
import tomllib
from collections.abc import Mapping
from pathlib import Path
from typing import Any

from screencap.config.env import EnvReader
from screencap.config.models import (
    CaptureSettings,
    CodecPreferences,
    LoggingConfig,
    ScreencapConfig,
    ToolPathsConfig,
)

logger = logging.getLogger(__name__)

# Default config location
DEFAULT_CONFIG_DIR = Path.home() / ".screencap"
DEFAULT_CONFIG_FILE = DEFAULT_CONFIG_DIR / "config.toml"

# Tool name -> (ToolPathsConfig field, environment variable)
_TOOL_SETTINGS: dict[str, tuple[str, str]] = {
    "ffmpeg": ("ffmpeg", "SCREENCAP_FFMPEG_PATH"),
    "xdpyinfo": ("xdpyinfo", "SCREENCAP_XDPYINFO_PATH"),
    "xprop": ("xprop", "SCREENCAP_XPROP_PATH"),
    "xwininfo": ("xwininfo", "SCREENCAP_XWININFO_PATH"),
    "gnome-screenshot": ("gnome_screenshot", "SCREENCAP_GNOME_SCREENSHOT_PATH"),
}


def get_default_config_path(env: Mapping[str, str] | None = None) -> Path:
    """Get the default config file path.

    Can be overridden by SCREENCAP_CONFIG_PATH environment variable.
    """
    env_path = EnvReader(env).get_str("SCREENCAP_CONFIG_PATH")
    if env_path:
        return Path(env_path).expanduser()
    return DEFAULT_CONFIG_FILE


def load_config_file(
    path: Path | None = None, env: Mapping[str, str] | None = None
) -> dict[str, Any]:
    """Load configuration from TOML file.

    Args:
        path: Path to config file. If None, uses default location.
        env: Optional environment mapping used to find the default location.

    Returns:
        Parsed configuration dict. Empty dict if the file doesn't exist or
        cannot be parsed.
    """
    if path is None:
        path = get_default_config_path(env)

    if not path.exists():
        logger.debug("Config file not found: %s", path)
        return {}

    try:
        with path.open("rb") as f:
            config = tomllib.load(f)
    except (OSError, tomllib.TOMLDecodeError) as e:
        logger.warning("Failed to load config file %s: %s", path, e)
        return {}

    logger.debug("Loaded config from %s", path)
    return config


def _file_table(file_config: dict[str, Any], name: str) -> dict[str, Any]:
    table = file_config.get(name, {})
    if not isinstance(table, dict):
        raise ValueError(f"[{name}] must be a table, got {table!r}")
    return table


def _file_path(value: Any) -> Path | None:
    if not value:
        return None
    if not isinstance(value, str):
        raise ValueError(f"expected a path string, got {value!r}")
    return Path(value).expanduser()


def get_config(
    config_path: Path | None = None,
    env: Mapping[str, str] | None = None,
) -> ScreencapConfig:
    """Get screencap configuration with full precedence handling.

    CLI flags are applied on top of the result by the commands themselves.

    Args:
        config_path: Path to config file (overrides SCREENCAP_CONFIG_PATH).
        env: Optional environment mapping (defaults to os.environ).

    Returns:
        ScreencapConfig with merged configuration.

    Raises:
        ValueError: If a merged value has the wrong type or fails validation.
    """
    reader = EnvReader(env)
    file_config = load_config_file(config_path, env)

    # Build tool paths config
    tools_file = _file_table(file_config, "tools")
    tool_paths: dict[str, Path | None] = {}
    for tool_name, (field_name, env_var) in _TOOL_SETTINGS.items():
        tool_paths[field_name] = reader.get_path(env_var) or _file_path(
            tools_file.get(tool_name) or tools_file.get(field_name)
        )
    tools = ToolPathsConfig(**tool_paths)

    # Build codec preferences
    codecs_file = _file_table(file_config, "codecs")
    defaults = CodecPreferences()
    codecs = CodecPreferences(
        formats=reader.get_list("SCREENCAP_FORMATS")
        or codecs_file.get("formats", defaults.formats),
        audio=reader.get_list("SCREENCAP_AUDIO_CODECS")
        or codecs_file.get("audio", defaults.audio),
        video=reader.get_list("SCREENCAP_VIDEO_CODECS")
        or codecs_file.get("video", defaults.video),
    )

    # Build capture settings
    capture_file = _file_table(file_config, "capture")
    capture_defaults = CaptureSettings()
    capture = CaptureSettings(
        framerate=reader.get_int(
            "SCREENCAP_FRAMERATE",
            capture_file.get("framerate", capture_defaults.framerate),
        ),
        crf=capture_file.get("crf", capture_defaults.crf),
        video_preset=capture_file.get("video_preset", capture_defaults.video_preset),
        audio_bitrate=capture_file.get(
            "audio_bitrate", capture_defaults.audio_bitrate
        ),
        audio_source=reader.get_str(
            "SCREENCAP_AUDIO_SOURCE",
            capture_file.get("audio_source", capture_defaults.audio_source),
        ),
        draw_mouse=reader.get_bool(
            "SCREENCAP_DRAW_MOUSE",
            capture_file.get("draw_mouse", capture_defaults.draw_mouse),
        ),
        show_region=reader.get_bool(
            "SCREENCAP_SHOW_REGION",
            capture_file.get("show_region", capture_defaults.show_region),
        ),
        pictures_dir=reader.get_path("SCREENCAP_PICTURES_DIR", must_exist=False)
        or _file_path(capture_file.get("pictures_dir"))
        or capture_defaults.pictures_dir,
        videos_dir=reader.get_path("SCREENCAP_VIDEOS_DIR", must_exist=False)
        or _file_path(capture_file.get("videos_dir"))
        or capture_defaults.videos_dir,
    )

    # Build logging config
    logging_file = _file_table(file_config, "logging")
    logging_defaults = LoggingConfig()
    logging_config = LoggingConfig(
        level=reader.get_str(
            "SCREENCAP_LOG_LEVEL", logging_file.get("level", logging_defaults.level)
        ),
        file=reader.get_path("SCREENCAP_LOG_FILE", must_exist=False)
        or _file_path(logging_file.get("file")),
        format=reader.get_str(
            "SCREENCAP_LOG_FORMAT",
            logging_file.get("format", logging_defaults.format),
        ),
        include_stderr=logging_file.get(
            "include_stderr", logging_defaults.include_stderr
        ),
        max_bytes=logging_file.get("max_bytes", logging_defaults.max_bytes),
        backup_count=logging_file.get("backup_count", logging_defaults.backup_count),
        log_commands=reader.get_bool(
            "SCREENCAP_LOG_COMMANDS",
            logging_file.get("log_commands", logging_defaults.log_commands),
        ),
    )

    return ScreencapConfig(
        tools=tools,
        codecs=codecs,
        capture=capture,
        logging=logging_config,
    )
