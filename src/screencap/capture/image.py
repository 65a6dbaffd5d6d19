"""Still image capture via gnome-screenshot."""

from __future__ import annotations

import logging
from pathlib import Path

from screencap.capture.models import CaptureRegion
from screencap.config.models import ToolPathsConfig
from screencap.core.subprocess_utils import find_tool, run_command
from screencap.exceptions import CaptureError

logger = logging.getLogger(__name__)

# gnome-screenshot flags selecting the capture region
REGION_FLAGS: dict[CaptureRegion, list[str]] = {
    CaptureRegion.SCREEN: [],
    CaptureRegion.WINDOW: ["-w"],
    CaptureRegion.SELECT: ["-a"],
}


def build_image_command(
    executable: Path, filename: Path, region: CaptureRegion
) -> list[str]:
    """Build the gnome-screenshot command line for a capture."""
    return [str(executable), "-B", "-f", str(filename), *REGION_FLAGS[region]]


def capture_image(
    filename: Path,
    region: CaptureRegion,
    tools: ToolPathsConfig | None = None,
) -> None:
    """Take a screenshot of region and save it to filename.

    Raises:
        ToolNotFoundError: If gnome-screenshot cannot be found.
        CaptureError: If gnome-screenshot fails.
    """
    tools = tools or ToolPathsConfig()
    executable = find_tool("gnome-screenshot", tools.gnome_screenshot)
    command = build_image_command(executable, filename, region)

    logger.info("Capturing %s image to %s", region.value, filename)
    returncode = run_command(command)
    if returncode != 0:
        raise CaptureError("gnome-screenshot", returncode)
