"""Data models for ffmpeg capability listings.

This module defines the record parsed from one row of `ffmpeg -formats` or
`ffmpeg -encoders` output, and the media kind that row was classified as.
"""

from dataclasses import dataclass
from enum import Enum


class MediaKind(Enum):
    """Kind of entry in an ffmpeg capability listing."""

    AUDIO = "audio"
    VIDEO = "video"
    SUBTITLE = "subtitle"
    FORMAT = "format"  # Container or device (muxer/demuxer)


@dataclass(frozen=True)
class CapabilityRecord:
    """One row of an ffmpeg capability table.

    Records are built once per parsed line and are not modified afterwards.
    """

    names: tuple[str, ...]
    """Alias names for the codec or format. The first one is canonical."""

    description: str = ""
    """Human-readable label, kept for diagnostics only."""

    supports_decode: bool = False
    """True if ffmpeg can decode (demux, for formats) this entry."""

    supports_encode: bool = False
    """True if ffmpeg can encode (mux, for formats) this entry."""

    def __post_init__(self) -> None:
        """Validate record."""
        if not self.names:
            raise ValueError("CapabilityRecord requires at least one name")

    @property
    def name(self) -> str:
        """Canonical name (first alias)."""
        return self.names[0]

    def has_name(self, name: str) -> bool:
        """Check if name is one of this record's aliases."""
        return name in self.names
