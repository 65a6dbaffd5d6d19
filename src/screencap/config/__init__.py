"""Configuration management for screencap.

This module provides configuration loading with precedence handling:
1. CLI flags (highest priority)
2. Environment variables (SCREENCAP_*)
3. Config file (~/.screencap/config.toml)
4. Default values (lowest priority)
"""

from screencap.config.env import EnvReader
from screencap.config.loader import (
    get_config,
    get_default_config_path,
    load_config_file,
)
from screencap.config.logging_factory import (
    apply_logging_overrides,
    configure_logging_from_cli,
)
from screencap.config.models import (
    CaptureSettings,
    CodecPreferences,
    LoggingConfig,
    ScreencapConfig,
    ToolPathsConfig,
)

__all__ = [
    # Models
    "CaptureSettings",
    "CodecPreferences",
    "LoggingConfig",
    "ScreencapConfig",
    "ToolPathsConfig",
    # Loader
    "EnvReader",
    "get_config",
    "get_default_config_path",
    "load_config_file",
    # Logging
    "apply_logging_overrides",
    "configure_logging_from_cli",
]
