"""Logging setup for the screencap CLI.

Records go to stderr, to a rotating log file, or to both. The process runner
logs each external tool it starts at DEBUG, and a single capture runs several
ffmpeg and X11 queries. Those records are therefore dropped, even at debug
level, unless LoggingConfig.log_commands is set.
"""

from __future__ import annotations

import logging
import sys
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import TYPE_CHECKING

from screencap.logging.handlers import JSONFormatter

if TYPE_CHECKING:
    from screencap.config.models import LoggingConfig

# Logger of the process runner, which records every tool invocation
COMMAND_LOGGER = "screencap.core.subprocess_utils"

TEXT_FORMAT = "%(asctime)s %(levelname)-7s %(name)s: %(message)s"
DATE_FORMAT = "%Y-%m-%dT%H:%M:%S%z"


def _build_formatter(config: LoggingConfig) -> logging.Formatter:
    if config.format.casefold() == "json":
        return JSONFormatter()
    return logging.Formatter(TEXT_FORMAT, datefmt=DATE_FORMAT)


def _open_log_file(config: LoggingConfig) -> logging.Handler | None:
    """Open the configured log file, or return None if there is none.

    A file that cannot be opened is reported on stderr and skipped.
    """
    if config.file is None:
        return None

    path = Path(config.file).expanduser()
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        return RotatingFileHandler(
            path,
            maxBytes=config.max_bytes,
            backupCount=config.backup_count,
            encoding="utf-8",
        )
    except OSError as e:
        sys.stderr.write(f"Warning: Could not open log file {path}: {e}\n")
        return None


def configure_logging(config: LoggingConfig) -> None:
    """Replace the root logger's handlers according to config.

    Output goes to the log file if one is configured and can be opened, and
    to stderr if include_stderr is set or there is no usable log file.
    """
    level = logging.getLevelNamesMapping()[config.level.upper()]

    handlers: list[logging.Handler] = []
    file_handler = _open_log_file(config)
    if file_handler is not None:
        handlers.append(file_handler)
    if config.include_stderr or file_handler is None:
        handlers.append(logging.StreamHandler(sys.stderr))

    formatter = _build_formatter(config)
    root_logger = logging.getLogger()
    root_logger.handlers.clear()
    root_logger.setLevel(level)
    for handler in handlers:
        handler.setFormatter(formatter)
        root_logger.addHandler(handler)

    if config.log_commands:
        command_level = logging.NOTSET
    else:
        command_level = max(level, logging.INFO)
    logging.getLogger(COMMAND_LOGGER).setLevel(command_level)
