"""Parsing of ffmpeg capability listings.

`ffmpeg -formats` and `ffmpeg -encoders` print a table whose data rows look
like:

    Formats:                           Encoders:
     DE matroska        Matroska        V....D libx264   libx264 H.264 / AVC
     D  x11grab         X11 grab        A....D aac       AAC (Advanced Audio)

Each row starts with a capability code, then a comma-separated list of
names, then a free-text description. Header, legend and banner lines are
interleaved with the data rows; rows that do not have this shape are skipped
rather than treated as errors.
"""

from __future__ import annotations

import logging
import re
from collections.abc import Iterable, Iterator
from dataclasses import replace
from pathlib import Path

from screencap.core.subprocess_utils import tool_output
from screencap.tools.models import CapabilityRecord, MediaKind

logger = logging.getLogger(__name__)

# Codes used by the format listing (D=demuxing, E=muxing)
FORMAT_CODES = frozenset({"D", "E", "DE"})

# Length of the flag column in codec/encoder listings (e.g. "V....D")
CODEC_CODE_LENGTH = 6

# Kind markers checked at positions 0 and 2 of a codec code, in order
_KIND_MARKERS: tuple[tuple[str, MediaKind], ...] = (
    ("A", MediaKind.AUDIO),
    ("V", MediaKind.VIDEO),
    ("S", MediaKind.SUBTITLE),
)

_WHITESPACE = re.compile(r"\s+")


def classify_code(code: str) -> MediaKind | None:
    """Classify a capability code into a MediaKind.

    Args:
        code: Flag column of a listing row (e.g. "DE", "V....D").

    Returns:
        The MediaKind, or None if the code is not a data row code.
    """
    if code in FORMAT_CODES:
        return MediaKind.FORMAT

    if len(code) != CODEC_CODE_LENGTH:
        return None

    markers = (code[0], code[2])
    for marker, kind in _KIND_MARKERS:
        if marker in markers:
            return kind
    return None


def _split_first(text: str) -> tuple[str, str] | None:
    """Split text at its first whitespace run, trimming both parts."""
    match = _WHITESPACE.search(text)
    if match is None:
        return None
    return text[: match.start()], text[match.end() :].strip()


def decode_line(line: str) -> tuple[CapabilityRecord, MediaKind] | None:
    """Decode one line of a capability listing.

    Args:
        line: Raw output line.

    Returns:
        Tuple of (record, kind), or None if the line is not a data row.
    """
    head = _split_first(line.strip())
    if head is None:
        return None
    code, remainder = head

    kind = classify_code(code)
    if kind is None:
        return None

    body = _split_first(remainder)
    if body is None:
        return None
    names_field, description = body

    names = tuple(names_field.split(","))

    if kind is MediaKind.FORMAT:
        decode, encode = "D" in code, "E" in code
    else:
        decode, encode = code[0] == "D", code[1] == "E"

    record = CapabilityRecord(
        names=names,
        description=description,
        supports_decode=decode,
        supports_encode=encode,
    )
    return record, kind


def parse_capabilities(
    lines: Iterable[str],
) -> Iterator[tuple[CapabilityRecord, MediaKind]]:
    """Decode every data row of a capability listing.

    Lines that are not data rows are skipped.

    Yields:
        Tuples of (record, kind) in listing order.
    """
    for line in lines:
        decoded = decode_line(line)
        if decoded is not None:
            yield decoded


def _query(
    flag: str, ffmpeg_path: Path | None
) -> Iterator[tuple[CapabilityRecord, MediaKind]]:
    with tool_output(
        "ffmpeg", "-hide_banner", flag, configured_path=ffmpeg_path
    ) as lines:
        yield from parse_capabilities(lines)
        if lines.skipped_lines:
            logger.debug(
                "Skipped %d undecodable lines from ffmpeg %s",
                lines.skipped_lines,
                flag,
            )


def formats(ffmpeg_path: Path | None = None) -> Iterator[CapabilityRecord]:
    """List the container formats and devices ffmpeg supports.

    Runs `ffmpeg -formats`.

    Args:
        ffmpeg_path: Optional configured path to ffmpeg.

    Yields:
        CapabilityRecord for every format row.

    Raises:
        ToolNotFoundError: If ffmpeg cannot be found.
    """
    for record, kind in _query("-formats", ffmpeg_path):
        if kind is MediaKind.FORMAT:
            yield record


def encoders(
    ffmpeg_path: Path | None = None,
) -> Iterator[tuple[CapabilityRecord, MediaKind]]:
    """List the encoders ffmpeg supports.

    Runs `ffmpeg -encoders`. The encoder listing's flag column does not
    describe decode support, so every record is marked encode-only.

    Args:
        ffmpeg_path: Optional configured path to ffmpeg.

    Yields:
        Tuples of (record, kind) for every encoder row.

    Raises:
        ToolNotFoundError: If ffmpeg cannot be found.
    """
    for record, kind in _query("-encoders", ffmpeg_path):
        yield replace(record, supports_encode=True, supports_decode=False), kind


def video_encoders(ffmpeg_path: Path | None = None) -> Iterator[CapabilityRecord]:
    """List the video encoders ffmpeg supports."""
    for record, kind in encoders(ffmpeg_path):
        if kind is MediaKind.VIDEO:
            yield record


def audio_encoders(ffmpeg_path: Path | None = None) -> Iterator[CapabilityRecord]:
    """List the audio encoders ffmpeg supports."""
    for record, kind in encoders(ffmpeg_path):
        if kind is MediaKind.AUDIO:
            yield record
