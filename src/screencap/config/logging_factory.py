"""Apply the CLI logging flags to the loaded logging configuration."""

from __future__ import annotations

from dataclasses import replace
from pathlib import Path
from typing import Any

from screencap.config.models import LoggingConfig


def apply_logging_overrides(
    base: LoggingConfig,
    *,
    level: str | None = None,
    file: Path | None = None,
    json_format: bool = False,
) -> LoggingConfig:
    """Return base with the --log-level, --log-file and --log-json flags applied.

    Flags left at their defaults keep the configured value. The result is a
    new LoggingConfig, validated like any other.
    """
    overrides: dict[str, Any] = {}
    if level is not None:
        overrides["level"] = level
    if file is not None:
        overrides["file"] = file
    if json_format:
        overrides["format"] = "json"
    return replace(base, **overrides)


def configure_logging_from_cli(
    base: LoggingConfig,
    *,
    level: str | None = None,
    file: Path | None = None,
    json_format: bool = False,
) -> None:
    """Configure logging from the loaded config and the CLI flags."""
    from screencap.logging import configure_logging

    configure_logging(
        apply_logging_overrides(base, level=level, file=file, json_format=json_format)
    )
