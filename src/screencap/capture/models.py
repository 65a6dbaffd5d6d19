"""Capture request models."""

from dataclasses import dataclass
from enum import Enum


class CaptureMode(Enum):
    """Whether to capture a still image or a video."""

    IMAGE = "image"
    VIDEO = "video"


class CaptureRegion(Enum):
    """Region of the screen to capture."""

    SCREEN = "screen"  # Whole screen
    WINDOW = "window"  # Currently focused window
    SELECT = "select"  # Interactive selection (image only)


@dataclass(frozen=True)
class CaptureRequest:
    """A validated capture request.

    Interactive selection is only available for images, and a framerate is
    only meaningful for video.
    """

    mode: CaptureMode = CaptureMode.IMAGE
    region: CaptureRegion = CaptureRegion.SCREEN
    framerate: int | None = None

    def __post_init__(self) -> None:
        """Validate request."""
        if self.mode is CaptureMode.VIDEO and self.region is CaptureRegion.SELECT:
            raise ValueError("Cannot select region for video capture")
        if self.framerate is not None and self.framerate <= 0:
            raise ValueError(f"framerate must be positive, got {self.framerate}")
