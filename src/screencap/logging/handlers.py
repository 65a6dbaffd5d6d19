"""JSON log formatting for screencap.

The process runner attaches the external command it is running to its log
records (command, pid, returncode, elapsed_seconds, arg_count). Those fields
are lifted to the top level of each JSON entry so tool invocations can be
filtered directly. Any other extra fields are grouped under "context".
"""

from __future__ import annotations

import json
import logging
from datetime import datetime, timezone
from typing import Any

# Extra fields set by screencap.core.subprocess_utils
COMMAND_FIELDS: tuple[str, ...] = (
    "command",
    "pid",
    "returncode",
    "elapsed_seconds",
    "arg_count",
)

# Attributes of a bare LogRecord, plus the ones formatting adds
_RECORD_ATTRS = frozenset(
    vars(logging.LogRecord("", logging.NOTSET, "", 0, "", None, None))
) | {"message", "asctime"}


class JSONFormatter(logging.Formatter):
    """Format each log record as a single-line JSON object.

    Every entry has timestamp (UTC, millisecond precision), level, logger and
    message. Command fields and context are present only when set, and
    exception holds the formatted traceback of a logged exception.
    """

    def format(self, record: logging.LogRecord) -> str:
        """Format the log record as JSON."""
        created = datetime.fromtimestamp(record.created, tz=timezone.utc)
        entry: dict[str, Any] = {
            "timestamp": created.isoformat(timespec="milliseconds"),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }

        extras = {
            key: value
            for key, value in vars(record).items()
            if key not in _RECORD_ATTRS and not key.startswith("_")
        }
        for name in COMMAND_FIELDS:
            if name in extras:
                entry[name] = extras.pop(name)
        if extras:
            entry["context"] = extras

        if record.exc_info:
            entry["exception"] = self.formatException(record.exc_info)

        return json.dumps(entry, default=str)
