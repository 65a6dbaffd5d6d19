"""Codec and format selection from ffmpeg capability listings.

Callers express preference as an ordered list of candidate names, most
preferred first. The position of a codec in ffmpeg's own listing says
nothing about how desirable it is, so selection always scans the whole
listing before walking the candidates in priority order.

Functions in this module:
- can_encode / can_decode: Capability predicates for find_codec
- find_codec: Select the best available codec from a candidate list
"""

import logging
from collections.abc import Callable, Iterable, Sequence

from screencap.tools.models import CapabilityRecord

logger = logging.getLogger(__name__)

CapabilityPredicate = Callable[[CapabilityRecord], bool]

# Default candidate lists, most preferred first
FORMAT_CANDIDATES: tuple[str, ...] = ("matroska", "mp4")
SCREEN_INPUT_CANDIDATES: tuple[str, ...] = ("x11grab",)
AUDIO_INPUT_CANDIDATES: tuple[str, ...] = ("pulse",)
AUDIO_ENCODER_CANDIDATES: tuple[str, ...] = ("aac", "libvo_aac")
VIDEO_ENCODER_CANDIDATES: tuple[str, ...] = (
    "h264_nvenc",  # NVIDIA NVENC
    "h264_qsv",  # Intel Quick Sync Video
    "libx264",
    "h264",
)


def can_encode(record: CapabilityRecord) -> bool:
    """Return True if ffmpeg can encode (or mux) this entry."""
    return record.supports_encode


def can_decode(record: CapabilityRecord) -> bool:
    """Return True if ffmpeg can decode (or demux) this entry."""
    return record.supports_decode


def find_codec(
    records: Iterable[CapabilityRecord],
    names: Sequence[str],
    predicate: CapabilityPredicate,
) -> str | None:
    """Select the most preferred available codec.

    Every record is scanned once. Each record that satisfies predicate is
    remembered under every candidate name it carries as an alias, the later
    record winning when two share a candidate. The candidates are then walked
    in priority order and the first one with a remembered record wins.

    Args:
        records: Capability records, typically a formats() or encoder query.
        names: Candidate names, most preferred first.
        predicate: Capability filter such as can_encode or can_decode.

    Returns:
        Canonical name of the selected record, or None if no candidate is
        available.
    """
    found: dict[str, CapabilityRecord] = {}

    for record in records:
        for name in names:
            if record.has_name(name) and predicate(record):
                found[name] = record

    for name in names:
        record = found.get(name)
        if record is not None:
            logger.debug(
                "Selected %s for candidate %s (%s)",
                record.name,
                name,
                record.description,
            )
            return record.name

    logger.debug("No available codec among candidates: %s", ", ".join(names))
    return None
