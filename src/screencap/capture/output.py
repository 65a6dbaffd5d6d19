"""Output file naming for captures.

Captures are named after the short hostname and the local time, e.g.
`~/Pictures/Screenshot/workstation.2024-05-01.1432.07.png`.
"""

from __future__ import annotations

import socket
from datetime import datetime
from pathlib import Path

from screencap.capture.models import CaptureMode
from screencap.config.models import CaptureSettings

TIMESTAMP_FORMAT = "%Y-%m-%d.%H%M.%S"

# File extension per capture mode
EXTENSIONS: dict[CaptureMode, str] = {
    CaptureMode.IMAGE: "png",
    CaptureMode.VIDEO: "mkv",
}


def short_hostname(hostname: str | None = None) -> str:
    """Get the hostname up to its first dot."""
    hostname = hostname if hostname is not None else socket.gethostname()
    return hostname.split(".")[0]


def capture_filename(
    mode: CaptureMode,
    now: datetime | None = None,
    hostname: str | None = None,
    settings: CaptureSettings | None = None,
) -> Path:
    """Determine the file a capture is saved to.

    Images are saved as PNG under settings.pictures_dir and videos as
    Matroska under settings.videos_dir.

    Args:
        mode: Capture mode.
        now: Timestamp to use (defaults to the current local time).
        hostname: Hostname to use (defaults to the machine hostname).
        settings: Capture settings holding the output directories.

    Returns:
        Path for the capture file.
    """
    settings = settings or CaptureSettings()
    now = now or datetime.now()
    directory = (
        settings.pictures_dir if mode is CaptureMode.IMAGE else settings.videos_dir
    )
    filename = (
        f"{short_hostname(hostname)}.{now.strftime(TIMESTAMP_FORMAT)}"
        f".{EXTENSIONS[mode]}"
    )
    return Path(directory).expanduser() / filename


def ensure_output_dir(path: Path) -> None:
    """Create the parent directory of an output file if needed."""
    path.parent.mkdir(parents=True, exist_ok=True)
