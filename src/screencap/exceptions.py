"""Exceptions raised by screencap."""


class ScreencapError(Exception):
    """Base exception for screencap errors."""


class ToolNotFoundError(ScreencapError):
    """External executable could not be resolved."""

    def __init__(self, name: str, reason: str | None = None) -> None:
        self.name = name
        self.reason = reason
        message = f"No command {name!r} found"
        if reason:
            message = f"{message}: {reason}"
        super().__init__(message)


class ParseMismatchError(ScreencapError):
    """External tool output did not contain an expected line or token."""


class LineNotFoundError(ParseMismatchError):
    """No line in the output satisfied the predicate."""

    def __init__(self, expected: str) -> None:
        self.expected = expected
        super().__init__(f"Read line matching {expected}")


class TokenNotFoundError(ParseMismatchError):
    """The matched line has too few whitespace-delimited tokens."""

    def __init__(self, index: int, line: str) -> None:
        self.index = index
        self.line = line
        super().__init__(f"Read item #{index} from {line!r}")


class DisplayNotFoundError(ScreencapError):
    """The DISPLAY environment variable is not set."""

    def __init__(self) -> None:
        super().__init__("Get DISPLAY environment variable")


class CodecNotFoundError(ScreencapError):
    """None of the candidate codecs is supported by ffmpeg."""

    def __init__(self, capability: str, candidates: list[str]) -> None:
        self.capability = capability
        self.candidates = candidates
        super().__init__(
            f"ffmpeg supports none of {', '.join(candidates)} for {capability}"
        )


class CaptureError(ScreencapError):
    """Capture command failed."""

    def __init__(self, command: str, returncode: int) -> None:
        self.command = command
        self.returncode = returncode
        super().__init__(f"{command} exited with status {returncode}")
