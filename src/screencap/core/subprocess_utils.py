"""Subprocess utilities for external tool invocation.

This module locates external tools (ffmpeg, xdpyinfo, xprop, xwininfo,
gnome-screenshot) and runs them in two ways:

- command_output: stream a tool's standard output as text lines, for the
  short capability and geometry queries whose output is scraped.
- run_command: run a capture command to completion and report its status.
"""

from __future__ import annotations

import logging
import os
import shutil
import subprocess  # nosec B404 - subprocess is required for tool invocation
import time
from collections.abc import Mapping
from pathlib import Path
from types import TracebackType

from screencap.exceptions import ToolNotFoundError

logger = logging.getLogger(__name__)

# Seconds to wait for a terminated child before killing it
TERMINATE_TIMEOUT = 5


def _is_executable(path: Path) -> bool:
    return path.is_file() and os.access(path, os.X_OK)


def find_tool(
    name: str,
    configured_path: Path | None = None,
    env: Mapping[str, str] | None = None,
) -> Path:
    """Resolve a tool name to an absolute executable path.

    Resolution order:
    1. configured_path, if it exists. It must be an executable file.
    2. name itself, if it is a relative path starting with "./" that exists
       and is executable.
    3. The first directory of PATH (in order) containing an executable name.

    Args:
        name: Tool name (e.g., "ffmpeg") or "./relative/path".
        configured_path: Optional configured path override.
        env: Mapping to read PATH from. Defaults to os.environ.

    Returns:
        Absolute path to the executable.

    Raises:
        ToolNotFoundError: If the tool cannot be resolved, or configured_path
            exists but is not an executable file.
    """
    if configured_path is not None and configured_path.exists():
        if not _is_executable(configured_path):
            raise ToolNotFoundError(
                name, f"configured path {configured_path} is not executable"
            )
        return configured_path.absolute()

    if name.startswith("./"):
        candidate = Path(name)
        if _is_executable(candidate):
            return candidate.absolute()

    environ = env if env is not None else os.environ
    search_path = environ.get("PATH")
    if search_path is None:
        raise ToolNotFoundError(name, "PATH is not set")

    found = shutil.which(name, path=search_path)
    if found is None:
        raise ToolNotFoundError(name)
    return Path(found).absolute()


class LineStream:
    """Lazy iterator over the standard output lines of a running process.

    The stream owns the process. Lines are yielded on demand without their
    trailing newline; the iterator is forward-only and cannot be restarted.

    Decode policy: every line is decoded as UTF-8 and lines that are not
    valid UTF-8 are skipped. Skipped lines are counted in skipped_lines and
    logged at debug level, but never raise.

    Closing the stream (explicitly, via the context manager, or by reading
    it to the end) terminates the process if it is still running and reaps
    it. A caller that stops reading once it has found the line it needs
    should therefore use the stream as a context manager.
    """

    def __init__(self, process: subprocess.Popen[bytes], command: str) -> None:
        self._process = process
        self.command = command
        self.skipped_lines = 0
        self._closed = False

    def __iter__(self) -> LineStream:
        return self

    def __next__(self) -> str:
        stdout = self._process.stdout
        if self._closed or stdout is None:
            raise StopIteration

        for raw in stdout:
            try:
                return raw.decode("utf-8").rstrip("\r\n")
            except UnicodeDecodeError:
                self.skipped_lines += 1
                logger.debug(
                    "Skipping undecodable line from %s",
                    self.command,
                    extra={"command": self.command},
                )

        self.close()
        raise StopIteration

    def __enter__(self) -> LineStream:
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc_value: BaseException | None,
        traceback: TracebackType | None,
    ) -> None:
        self.close()

    def __del__(self) -> None:
        self.close()

    @property
    def closed(self) -> bool:
        """True once the stream has been closed."""
        return self._closed

    def close(self) -> None:
        """Release the process, terminating it if it is still running."""
        if self._closed:
            return
        self._closed = True

        process = self._process
        if process.poll() is None:
            logger.debug(
                "Terminating %s with unread output",
                self.command,
                extra={"command": self.command, "pid": process.pid},
            )
            process.terminate()
        try:
            process.wait(timeout=TERMINATE_TIMEOUT)
        except subprocess.TimeoutExpired:
            process.kill()
            process.wait()
        finally:
            if process.stdout is not None:
                process.stdout.close()


def command_output(args: list[str | Path]) -> LineStream:
    """Start a command and stream its standard output as lines.

    Standard error is discarded and standard input is not connected.

    Args:
        args: Command and arguments. Path objects are converted to strings.

    Returns:
        LineStream over the command's output.

    Raises:
        OSError: If the process cannot be started.
    """
    str_args = [str(arg) for arg in args]
    command_text = " ".join(str_args)

    logger.debug(
        "Executing command: %s",
        command_text,
        extra={"command": Path(str_args[0]).name, "arg_count": len(str_args)},
    )

    process = subprocess.Popen(  # nosec B603 - executable resolved by find_tool
        str_args,
        stdin=subprocess.DEVNULL,
        stdout=subprocess.PIPE,
        stderr=subprocess.DEVNULL,
    )
    return LineStream(process, command_text)


def tool_output(
    name: str,
    *args: str,
    configured_path: Path | None = None,
) -> LineStream:
    """Resolve a tool by name and stream the output of running it.

    Args:
        name: Tool name to resolve with find_tool.
        *args: Arguments passed to the tool.
        configured_path: Optional configured path override.

    Returns:
        LineStream over the tool's output.

    Raises:
        ToolNotFoundError: If the tool cannot be resolved.
    """
    path = find_tool(name, configured_path)
    return command_output([path, *args])


def run_command(args: list[str | Path]) -> int:
    """Run a command to completion with its standard streams detached.

    Used for the final screenshot and recording commands, whose exit status
    matters but whose output does not.

    Args:
        args: Command and arguments. Path objects are converted to strings.

    Returns:
        The process exit status.

    Raises:
        OSError: If the process cannot be started.
        KeyboardInterrupt: If interrupted; raised once the child has exited.
    """
    str_args = [str(arg) for arg in args]
    command_name = Path(str_args[0]).name

    logger.debug(
        "Executing command: %s",
        " ".join(str_args),
        extra={"command": command_name, "arg_count": len(str_args)},
    )

    start_time = time.monotonic()
    process = subprocess.Popen(  # nosec B603 - executable resolved by find_tool
        str_args,
        stdin=subprocess.DEVNULL,
        stdout=subprocess.DEVNULL,
        stderr=subprocess.DEVNULL,
    )
    logger.info(
        "Started '%s' with PID #%d",
        command_name,
        process.pid,
        extra={"command": command_name, "pid": process.pid},
    )

    try:
        returncode = process.wait()
    except KeyboardInterrupt:
        # The child shares our terminal and got the interrupt too
        logger.info("Interrupted, waiting for '%s' to finish", command_name)
        process.wait()
        raise

    elapsed = time.monotonic() - start_time
    logger.debug(
        "Command completed",
        extra={
            "command": command_name,
            "elapsed_seconds": round(elapsed, 3),
            "returncode": returncode,
        },
    )
    return returncode
