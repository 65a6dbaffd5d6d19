"""Centralized exit codes for all CLI commands.

Exit code ranges:
    0: Success
    1-9: General errors
    10-19: Validation errors (request, config)
    30-39: Tool/dependency errors
    40-49: Operation errors
    50-59: Parse errors
"""

from enum import IntEnum

from screencap.exceptions import (
    CaptureError,
    CodecNotFoundError,
    DisplayNotFoundError,
    ParseMismatchError,
    ScreencapError,
    ToolNotFoundError,
)


class ExitCode(IntEnum):
    """Exit codes for screencap CLI commands."""

    # Success (0)
    SUCCESS = 0

    # General errors (1-9)
    GENERAL_ERROR = 1
    INTERRUPTED = 2

    # Validation errors (10-19)
    INVALID_REQUEST = 10
    CONFIG_ERROR = 11

    # Tool/dependency errors (30-39)
    TOOL_NOT_AVAILABLE = 30
    CODEC_NOT_AVAILABLE = 31
    DISPLAY_NOT_AVAILABLE = 32

    # Operation errors (40-49)
    CAPTURE_FAILED = 40

    # Parse errors (50-59)
    PARSE_ERROR = 51


# Most specific exception types first
_ERROR_EXIT_CODES: tuple[tuple[type[ScreencapError], ExitCode], ...] = (
    (ToolNotFoundError, ExitCode.TOOL_NOT_AVAILABLE),
    (CodecNotFoundError, ExitCode.CODEC_NOT_AVAILABLE),
    (DisplayNotFoundError, ExitCode.DISPLAY_NOT_AVAILABLE),
    (ParseMismatchError, ExitCode.PARSE_ERROR),
    (CaptureError, ExitCode.CAPTURE_FAILED),
)


def exit_code_for(error: ScreencapError) -> ExitCode:
    """Map a screencap error to the exit code reported for it."""
    for error_type, code in _ERROR_EXIT_CODES:
        if isinstance(error, error_type):
            return code
    return ExitCode.GENERAL_ERROR
