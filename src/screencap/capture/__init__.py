"""Screen capture: region resolution, output naming and capture commands."""

from screencap.capture.image import capture_image
from screencap.capture.models import CaptureMode, CaptureRegion, CaptureRequest
from screencap.capture.output import capture_filename, ensure_output_dir
from screencap.capture.region import (
    RegionDescriptor,
    resolve_region,
    x11_current_window,
    x11_fullscreen,
    x11_screen,
    x11_window_id,
)
from screencap.capture.video import (
    CaptureCodecs,
    build_video_command,
    capture_video,
    select_capture_codecs,
)

__all__ = [
    # Models
    "CaptureMode",
    "CaptureRegion",
    "CaptureRequest",
    "RegionDescriptor",
    "CaptureCodecs",
    # Region
    "resolve_region",
    "x11_current_window",
    "x11_fullscreen",
    "x11_screen",
    "x11_window_id",
    # Output
    "capture_filename",
    "ensure_output_dir",
    # Capture
    "build_video_command",
    "capture_image",
    "capture_video",
    "select_capture_codecs",
]
