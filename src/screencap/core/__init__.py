"""Core utilities shared across screencap modules."""

from screencap.core.lines import (
    contains,
    extract_token,
    find_line,
    nth_token,
)
from screencap.core.subprocess_utils import (
    LineStream,
    command_output,
    find_tool,
    run_command,
    tool_output,
)

__all__ = [
    # Line matching
    "contains",
    "extract_token",
    "find_line",
    "nth_token",
    # Subprocess
    "LineStream",
    "command_output",
    "find_tool",
    "run_command",
    "tool_output",
]
