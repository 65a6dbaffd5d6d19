"""Tests for capture/region.py - X11 region geometry."""

from pathlib import Path
from unittest.mock import patch

import pytest

from screencap.capture.models import CaptureRegion
from screencap.capture.region import (
    RegionDescriptor,
    resolve_region,
    x11_current_window,
    x11_fullscreen,
    x11_screen,
    x11_window_id,
)
from screencap.config.models import ToolPathsConfig
from screencap.exceptions import (
    DisplayNotFoundError,
    LineNotFoundError,
    TokenNotFoundError,
)

DISPLAY_ENV = {"DISPLAY": ":0"}


@pytest.fixture
def patch_x11(fake_tool_output, x11_outputs):
    """Patch tool_output to serve canned X11 tool output."""

    def apply(**overrides: str):
        outputs = {**x11_outputs, **overrides}
        return patch(
            "screencap.capture.region.tool_output",
            side_effect=fake_tool_output(outputs),
        )

    return apply


class TestX11Screen:
    """Tests for x11_screen function."""

    def test_appends_screen_number(self):
        """The screen is the display with screen number 0."""
        assert x11_screen({"DISPLAY": ":1"}) == ":1.0"

    def test_missing_display_raises(self):
        """An unset DISPLAY raises DisplayNotFoundError."""
        with pytest.raises(DisplayNotFoundError):
            x11_screen({})

    def test_empty_display_raises(self):
        """An empty DISPLAY is treated as unset."""
        with pytest.raises(DisplayNotFoundError):
            x11_screen({"DISPLAY": ""})


class TestX11Fullscreen:
    """Tests for x11_fullscreen function."""

    def test_reads_screen_dimensions(self, patch_x11):
        """Resolution comes from screen #0 and offset is the origin."""
        with patch_x11():
            region = x11_fullscreen(env=DISPLAY_ENV)

        assert region == RegionDescriptor(resolution="1920x1080", offset=":0.0+0,0")

    def test_uses_configured_xdpyinfo(self, patch_x11):
        """A configured xdpyinfo path is passed to tool_output."""
        tools = ToolPathsConfig(xdpyinfo=Path("/opt/x11/xdpyinfo"))
        with patch_x11() as mock_tool_output:
            x11_fullscreen(tools, env=DISPLAY_ENV)

        assert mock_tool_output.call_args.kwargs["configured_path"] == Path(
            "/opt/x11/xdpyinfo"
        )

    def test_dimensions_before_screen_are_ignored(self, patch_x11):
        """Only a dimensions line after the screen #0 line counts."""
        output = "  dimensions:    800x600 pixels\nscreen #0:\n"
        with patch_x11(xdpyinfo=output), pytest.raises(LineNotFoundError):
            x11_fullscreen(env=DISPLAY_ENV)

    def test_missing_screen_raises(self, patch_x11):
        """Output without a screen #0 line raises."""
        with patch_x11(xdpyinfo="name of display:    :0\n"):
            with pytest.raises(LineNotFoundError, match="screen #0"):
                x11_fullscreen(env=DISPLAY_ENV)

    def test_missing_dimensions_token_raises(self, patch_x11):
        """A dimensions line without a value raises."""
        with patch_x11(xdpyinfo="screen #0:\n  dimensions:\n"):
            with pytest.raises(TokenNotFoundError):
                x11_fullscreen(env=DISPLAY_ENV)

    def test_missing_display_raises(self, patch_x11):
        """Geometry without a DISPLAY still fails."""
        with patch_x11(), pytest.raises(DisplayNotFoundError):
            x11_fullscreen(env={})


class TestX11WindowId:
    """Tests for x11_window_id function."""

    def test_reads_active_window(self, patch_x11):
        """The active window ID is the fifth token of its xprop line."""
        with patch_x11() as mock_tool_output:
            assert x11_window_id() == "0x3a00007"

        assert mock_tool_output.call_args.args == ("xprop", "-root")

    def test_supported_atoms_line_does_not_match(self, patch_x11):
        """The _NET_SUPPORTED list mentioning the atom is skipped."""
        output = "_NET_SUPPORTED(ATOM) = _NET_ACTIVE_WINDOW, _NET_WM_NAME\n"
        with patch_x11(**{"xprop -root": output}):
            with pytest.raises(LineNotFoundError):
                x11_window_id()

    def test_truncated_line_raises(self, patch_x11):
        """A line with too few tokens raises TokenNotFoundError."""
        output = "_NET_ACTIVE_WINDOW(WINDOW): window id #\n"
        with patch_x11(**{"xprop -root": output}):
            with pytest.raises(TokenNotFoundError):
                x11_window_id()


class TestX11CurrentWindow:
    """Tests for x11_current_window function."""

    def test_reads_window_geometry(self, patch_x11):
        """Resolution and offset come from xwininfo."""
        with patch_x11():
            region = x11_current_window(env=DISPLAY_ENV)

        assert region.resolution == "1024x768"
        assert region.offset == ":0.0+120,64"

    def test_queries_active_window_id(self, patch_x11):
        """xwininfo is run for the active window."""
        with patch_x11() as mock_tool_output:
            x11_current_window(env=DISPLAY_ENV)

        assert mock_tool_output.call_args.args == ("xwininfo", "-id", "0x3a00007")

    def test_fields_must_appear_in_order(self, patch_x11):
        """Height before Width is not found once Width has been read."""
        output = (
            "  Absolute upper-left X:  1\n"
            "  Absolute upper-left Y:  2\n"
            "  Height: 3\n"
            "  Width: 4\n"
        )
        with patch_x11(**{"xwininfo -id": output}):
            with pytest.raises(LineNotFoundError, match="Height:"):
                x11_current_window(env=DISPLAY_ENV)

    def test_missing_width_raises(self, patch_x11):
        """Output without a Width line raises."""
        output = "  Absolute upper-left X:  1\n  Absolute upper-left Y:  2\n"
        with patch_x11(**{"xwininfo -id": output}):
            with pytest.raises(LineNotFoundError, match="Width:"):
                x11_current_window(env=DISPLAY_ENV)


class TestResolveRegion:
    """Tests for resolve_region function."""

    def test_screen(self, patch_x11):
        """SCREEN resolves to the full screen."""
        with patch_x11():
            region = resolve_region(CaptureRegion.SCREEN, env=DISPLAY_ENV)
        assert region.resolution == "1920x1080"

    def test_window(self, patch_x11):
        """WINDOW resolves to the active window."""
        with patch_x11():
            region = resolve_region(CaptureRegion.WINDOW, env=DISPLAY_ENV)
        assert region.resolution == "1024x768"

    def test_select_has_no_geometry(self):
        """SELECT cannot be resolved."""
        with pytest.raises(ValueError, match="select"):
            resolve_region(CaptureRegion.SELECT)
