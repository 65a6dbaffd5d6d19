"""ffmpeg capability detection and codec selection.

This module provides parsing of ffmpeg's format and encoder listings and
priority-ordered selection of codecs from them.
"""

from screencap.tools.capabilities import (
    audio_encoders,
    classify_code,
    decode_line,
    encoders,
    formats,
    parse_capabilities,
    video_encoders,
)
from screencap.tools.encoders import (
    AUDIO_ENCODER_CANDIDATES,
    AUDIO_INPUT_CANDIDATES,
    FORMAT_CANDIDATES,
    SCREEN_INPUT_CANDIDATES,
    VIDEO_ENCODER_CANDIDATES,
    can_decode,
    can_encode,
    find_codec,
)
from screencap.tools.models import CapabilityRecord, MediaKind

__all__ = [
    # Models
    "CapabilityRecord",
    "MediaKind",
    # Parsing
    "audio_encoders",
    "classify_code",
    "decode_line",
    "encoders",
    "formats",
    "parse_capabilities",
    "video_encoders",
    # Selection
    "AUDIO_ENCODER_CANDIDATES",
    "AUDIO_INPUT_CANDIDATES",
    "FORMAT_CANDIDATES",
    "SCREEN_INPUT_CANDIDATES",
    "VIDEO_ENCODER_CANDIDATES",
    "can_decode",
    "can_encode",
    "find_codec",
]
