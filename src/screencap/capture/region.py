"""X11 capture region resolution.

Turns "full screen" or "current window" into the geometry strings that
ffmpeg's x11grab input expects: a "<width>x<height>" video size and a
"<display>+<x>,<y>" input offset. The geometry is scraped from xdpyinfo,
xprop and xwininfo output; any missing line or token aborts resolution.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from dataclasses import dataclass

from screencap.capture.models import CaptureRegion
from screencap.config.env import EnvReader
from screencap.config.models import ToolPathsConfig
from screencap.core.lines import contains, extract_token, find_line
from screencap.core.subprocess_utils import tool_output
from screencap.exceptions import DisplayNotFoundError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class RegionDescriptor:
    """Geometry of a capture region in x11grab syntax."""

    resolution: str
    """Capture size as "<width>x<height>"."""

    offset: str
    """Input position as "<display>+<x>,<y>"."""


def x11_screen(env: Mapping[str, str] | None = None) -> str:
    """Get the X11 screen identifier of the current display (e.g. ":0.0").

    Raises:
        DisplayNotFoundError: If DISPLAY is not set.
    """
    display = EnvReader(env).get_str("DISPLAY")
    if not display:
        raise DisplayNotFoundError()
    return f"{display}.0"


def x11_fullscreen(
    tools: ToolPathsConfig | None = None,
    env: Mapping[str, str] | None = None,
) -> RegionDescriptor:
    """Get the region covering the whole of screen #0.

    Raises:
        ToolNotFoundError: If xdpyinfo cannot be found.
        ParseMismatchError: If xdpyinfo output lacks the screen dimensions.
    """
    tools = tools or ToolPathsConfig()
    with tool_output("xdpyinfo", configured_path=tools.xdpyinfo) as lines:
        _, remaining = find_line(lines, contains("screen #0"))
        _, dimensions = extract_token(remaining, contains("dimensions:"), 1)

    region = RegionDescriptor(resolution=dimensions, offset=f"{x11_screen(env)}+0,0")
    logger.debug("Full screen region: %s at %s", region.resolution, region.offset)
    return region


def x11_window_id(tools: ToolPathsConfig | None = None) -> str:
    """Get the X11 ID of the currently active window.

    Raises:
        ToolNotFoundError: If xprop cannot be found.
        ParseMismatchError: If xprop output lacks the active window.
    """
    tools = tools or ToolPathsConfig()
    with tool_output("xprop", "-root", configured_path=tools.xprop) as lines:
        # _NET_ACTIVE_WINDOW(WINDOW): window id # 0x3a00007
        _, window_id = extract_token(lines, contains("_NET_ACTIVE_WINDOW(WINDOW)"), 4)
    return window_id


def x11_current_window(
    tools: ToolPathsConfig | None = None,
    env: Mapping[str, str] | None = None,
) -> RegionDescriptor:
    """Get the region covered by the currently active window.

    Raises:
        ToolNotFoundError: If xprop or xwininfo cannot be found.
        ParseMismatchError: If their output lacks the window geometry.
    """
    tools = tools or ToolPathsConfig()
    window_id = x11_window_id(tools)

    with tool_output(
        "xwininfo", "-id", window_id, configured_path=tools.xwininfo
    ) as lines:
        remaining, xpos = extract_token(lines, contains("Absolute upper-left X:"), 3)
        remaining, ypos = extract_token(
            remaining, contains("Absolute upper-left Y:"), 3
        )
        remaining, width = extract_token(remaining, contains("Width:"), 1)
        _, height = extract_token(remaining, contains("Height:"), 1)

    region = RegionDescriptor(
        resolution=f"{width}x{height}",
        offset=f"{x11_screen(env)}+{xpos},{ypos}",
    )
    logger.debug(
        "Window %s region: %s at %s", window_id, region.resolution, region.offset
    )
    return region


def resolve_region(
    region: CaptureRegion,
    tools: ToolPathsConfig | None = None,
    env: Mapping[str, str] | None = None,
) -> RegionDescriptor:
    """Resolve a capture region to its x11grab geometry.

    Raises:
        ValueError: For CaptureRegion.SELECT, which has no fixed geometry.
    """
    if region is CaptureRegion.SCREEN:
        return x11_fullscreen(tools, env)
    if region is CaptureRegion.WINDOW:
        return x11_current_window(tools, env)
    raise ValueError(f"Cannot resolve geometry for region: {region.value}")
