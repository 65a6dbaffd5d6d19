"""Tests for CLI exit codes."""

import pytest

from screencap.cli.exit_codes import ExitCode, exit_code_for
from screencap.exceptions import (
    CaptureError,
    CodecNotFoundError,
    DisplayNotFoundError,
    LineNotFoundError,
    ScreencapError,
    TokenNotFoundError,
    ToolNotFoundError,
)


class TestExitCodeFor:
    """Tests for exit_code_for function."""

    @pytest.mark.parametrize(
        ("error", "expected"),
        [
            (ToolNotFoundError("ffmpeg"), ExitCode.TOOL_NOT_AVAILABLE),
            (CodecNotFoundError("Video", ["libx264"]), ExitCode.CODEC_NOT_AVAILABLE),
            (DisplayNotFoundError(), ExitCode.DISPLAY_NOT_AVAILABLE),
            (LineNotFoundError("contains('Width:')"), ExitCode.PARSE_ERROR),
            (TokenNotFoundError(4, "Width:"), ExitCode.PARSE_ERROR),
            (CaptureError("ffmpeg", 1), ExitCode.CAPTURE_FAILED),
            (ScreencapError("other"), ExitCode.GENERAL_ERROR),
        ],
    )
    def test_mapping(self, error: ScreencapError, expected: ExitCode):
        """Each error category has its own exit code."""
        assert exit_code_for(error) is expected

    def test_codes_are_unique(self):
        """No two exit codes share a value."""
        values = [code.value for code in ExitCode]
        assert len(values) == len(set(values))

    def test_success_is_zero(self):
        """Success is exit status 0."""
        assert ExitCode.SUCCESS == 0


class TestErrorMessages:
    """Tests for error messages shown to users."""

    def test_tool_not_found(self):
        """The tool name and reason are reported."""
        assert str(ToolNotFoundError("xprop")) == "No command 'xprop' found"
        assert str(ToolNotFoundError("xprop", "PATH is not set")) == (
            "No command 'xprop' found: PATH is not set"
        )

    def test_token_not_found(self):
        """The index and line are reported."""
        error = TokenNotFoundError(3, "Width:")
        assert str(error) == "Read item #3 from 'Width:'"

    def test_display_not_found(self):
        """A missing DISPLAY is reported."""
        assert "DISPLAY" in str(DisplayNotFoundError())

    def test_capture_error(self):
        """The failing command and status are reported."""
        assert str(CaptureError("ffmpeg", 255)) == "ffmpeg exited with status 255"
