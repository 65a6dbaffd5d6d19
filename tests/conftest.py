"""Shared test fixtures for screencap."""

import stat
from collections.abc import Callable, Iterable
from pathlib import Path

import pytest

FFMPEG_FORMATS_OUTPUT = """\
File formats:
 D. = Demuxing supported
 .E = Muxing supported
 --
 D  aac             raw ADTS AAC (Advanced Audio Coding)
 DE matroska,webm   Matroska / WebM
  E mp4             MP4 (MPEG-4 Part 14)
 D  pulse           Pulse audio input
 DE wav             WAV / WAVE (Waveform Audio)
 D  x11grab         X11 screen capture, using XCB
"""

FFMPEG_ENCODERS_OUTPUT = """\
Encoders:
 V..... = Video
 A..... = Audio
 S..... = Subtitle
 .F.... = Frame-level multithreading
 ..S... = Slice-level multithreading
 ...X.. = Codec is experimental
 ....B. = Supports draw_horiz_band
 .....D = Supports direct rendering method 1
 ------
 V....D libx264              libx264 H.264 / AVC / MPEG-4 AVC (codec h264)
 V....D libx264rgb           libx264 H.264 RGB (codec h264)
 V....D h264_vaapi           H.264/AVC (VAAPI) (codec h264)
 V..... libx265              libx265 H.265 / HEVC (codec hevc)
 A....D aac                  AAC (Advanced Audio Coding)
 A....D libopus              libopus Opus (codec opus)
 S..... srt                  SubRip subtitle
"""

XDPYINFO_OUTPUT = """\
name of display:    :0
version number:    11.0
vendor string:    The X.Org Foundation
number of screens:    1

screen #0:
  dimensions:    1920x1080 pixels (508x285 millimeters)
  resolution:    96x96 dots per inch
  depths (7):    24, 1, 4, 8, 15, 16, 32
"""

XPROP_ROOT_OUTPUT = """\
_NET_SUPPORTED(ATOM) = _NET_WM_NAME, _NET_ACTIVE_WINDOW, _NET_CLIENT_LIST
_NET_CLIENT_LIST(WINDOW): window id # 0x1e00003, 0x3a00007
_NET_ACTIVE_WINDOW(WINDOW): window id # 0x3a00007
_NET_CURRENT_DESKTOP(CARDINAL) = 0
"""

XWININFO_OUTPUT = """\

xwininfo: Window id: 0x3a00007 "Terminal"

  Absolute upper-left X:  120
  Absolute upper-left Y:  64
  Relative upper-left X:  0
  Relative upper-left Y:  0
  Width: 1024
  Height: 768
  Depth: 24
  Visual: 0x21
"""


class FakeLineStream:
    """Stand-in for LineStream that serves canned output lines."""

    def __init__(self, lines: Iterable[str]) -> None:
        self._lines = iter(lines)
        self.skipped_lines = 0
        self.closed = False

    def __iter__(self) -> "FakeLineStream":
        return self

    def __next__(self) -> str:
        return next(self._lines)

    def __enter__(self) -> "FakeLineStream":
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.closed = True


@pytest.fixture
def fake_stream() -> Callable[[str], FakeLineStream]:
    """Factory building a FakeLineStream from multi-line text."""

    def factory(text: str) -> FakeLineStream:
        return FakeLineStream(text.splitlines())

    return factory


@pytest.fixture
def fake_tool_output(
    fake_stream: Callable[[str], FakeLineStream],
) -> Callable[[dict[str, str]], Callable[..., FakeLineStream]]:
    """Factory for a tool_output replacement keyed by tool name and first arg.

    Keys are either a tool name ("xdpyinfo") or "tool arg" ("ffmpeg -formats").
    """

    def factory(outputs: dict[str, str]) -> Callable[..., FakeLineStream]:
        def tool_output(name: str, *args: str, configured_path=None):
            flags = [arg for arg in args if arg != "-hide_banner"]
            key = f"{name} {flags[0]}" if flags else name
            if key not in outputs:
                key = name
            return fake_stream(outputs[key])

        return tool_output

    return factory


@pytest.fixture
def x11_outputs() -> dict[str, str]:
    """Canned output of the X11 introspection tools."""
    return {
        "xdpyinfo": XDPYINFO_OUTPUT,
        "xprop -root": XPROP_ROOT_OUTPUT,
        "xwininfo -id": XWININFO_OUTPUT,
    }


@pytest.fixture
def ffmpeg_outputs() -> dict[str, str]:
    """Canned output of the ffmpeg capability listings."""
    return {
        "ffmpeg -formats": FFMPEG_FORMATS_OUTPUT,
        "ffmpeg -encoders": FFMPEG_ENCODERS_OUTPUT,
    }


@pytest.fixture
def make_executable() -> Callable[[Path, str, str], Path]:
    """Factory creating an executable shell script."""

    def factory(directory: Path, name: str, body: str = "exit 0") -> Path:
        directory.mkdir(parents=True, exist_ok=True)
        path = directory / name
        path.write_text(f"#!/bin/sh\n{body}\n")
        path.chmod(path.stat().st_mode | stat.S_IXUSR | stat.S_IXGRP | stat.S_IXOTH)
        return path

    return factory
