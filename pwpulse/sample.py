"""Sample formats and sample specifications."""

from __future__ import annotations

import enum
import sys
from dataclasses import dataclass
from typing import Optional

__all__ = [
    "RATE_MAX",
    "CHANNELS_MAX",
    "USEC_PER_SEC",
    "SampleFormat",
    "SampleSpec",
    "sample_format_valid",
    "sample_rate_valid",
    "channels_valid",
    "sample_size_of_format",
    "sample_format_to_string",
    "parse_sample_format",
    "sample_format_is_le",
    "sample_format_is_be",
    "bytes_to_string",
]

RATE_MAX = 48000 * 8
CHANNELS_MAX = 32
USEC_PER_SEC = 1_000_000

_LITTLE_ENDIAN = sys.byteorder == "little"
_SAMPLE_MAX = 13


class SampleFormat(enum.IntEnum):
    """Sample formats; the NE/RE names alias the host's native/reverse order."""

    INVALID = -1
    U8 = 0
    ALAW = 1
    ULAW = 2
    S16LE = 3
    S16BE = 4
    FLOAT32LE = 5
    FLOAT32BE = 6
    S32LE = 7
    S32BE = 8
    S24LE = 9
    S24BE = 10
    S24_32LE = 11
    S24_32BE = 12

    S16NE = 3 if _LITTLE_ENDIAN else 4
    S16RE = 4 if _LITTLE_ENDIAN else 3
    FLOAT32NE = 5 if _LITTLE_ENDIAN else 6
    FLOAT32RE = 6 if _LITTLE_ENDIAN else 5
    S32NE = 7 if _LITTLE_ENDIAN else 8
    S32RE = 8 if _LITTLE_ENDIAN else 7
    S24NE = 9 if _LITTLE_ENDIAN else 10
    S24RE = 10 if _LITTLE_ENDIAN else 9
    S24_32NE = 11 if _LITTLE_ENDIAN else 12
    S24_32RE = 12 if _LITTLE_ENDIAN else 11


_SIZES = {
    SampleFormat.U8: 1,
    SampleFormat.ULAW: 1,
    SampleFormat.ALAW: 1,
    SampleFormat.S16LE: 2,
    SampleFormat.S16BE: 2,
    SampleFormat.FLOAT32LE: 4,
    SampleFormat.FLOAT32BE: 4,
    SampleFormat.S32LE: 4,
    SampleFormat.S32BE: 4,
    SampleFormat.S24LE: 3,
    SampleFormat.S24BE: 3,
    SampleFormat.S24_32LE: 4,
    SampleFormat.S24_32BE: 4,
}

_NAMES = {
    SampleFormat.U8: "u8",
    SampleFormat.ALAW: "aLaw",
    SampleFormat.ULAW: "uLaw",
    SampleFormat.S16LE: "s16le",
    SampleFormat.S16BE: "s16be",
    SampleFormat.FLOAT32LE: "float32le",
    SampleFormat.FLOAT32BE: "float32be",
    SampleFormat.S32LE: "s32le",
    SampleFormat.S32BE: "s32be",
    SampleFormat.S24LE: "s24le",
    SampleFormat.S24BE: "s24be",
    SampleFormat.S24_32LE: "s24-32le",
    SampleFormat.S24_32BE: "s24-32be",
}

_PARSE_TABLE = {
    "s16le": SampleFormat.S16LE,
    "s16be": SampleFormat.S16BE,
    "s16ne": SampleFormat.S16NE,
    "s16": SampleFormat.S16NE,
    "16": SampleFormat.S16NE,
    "s16re": SampleFormat.S16RE,
    "u8": SampleFormat.U8,
    "8": SampleFormat.U8,
    "float32": SampleFormat.FLOAT32NE,
    "float32ne": SampleFormat.FLOAT32NE,
    "float": SampleFormat.FLOAT32NE,
    "float32re": SampleFormat.FLOAT32RE,
    "float32le": SampleFormat.FLOAT32LE,
    "float32be": SampleFormat.FLOAT32BE,
    "ulaw": SampleFormat.ULAW,
    "mulaw": SampleFormat.ULAW,
    "alaw": SampleFormat.ALAW,
    "s32le": SampleFormat.S32LE,
    "s32be": SampleFormat.S32BE,
    "s32ne": SampleFormat.S32NE,
    "s32": SampleFormat.S32NE,
    "32": SampleFormat.S32NE,
    # Historically "s32re" resolves to the reverse-endian 24-bit format.
    "s32re": SampleFormat.S24RE,
    "s24le": SampleFormat.S24LE,
    "s24be": SampleFormat.S24BE,
    "s24ne": SampleFormat.S24NE,
    "s24": SampleFormat.S24NE,
    "24": SampleFormat.S24NE,
    "s24re": SampleFormat.S24RE,
    "s24-32le": SampleFormat.S24_32LE,
    "s24-32be": SampleFormat.S24_32BE,
    "s24-32ne": SampleFormat.S24_32NE,
    "s24-32": SampleFormat.S24_32NE,
    "s24-32re": SampleFormat.S24_32RE,
}

_LE_FORMATS = frozenset(
    {
        SampleFormat.S16LE,
        SampleFormat.S24LE,
        SampleFormat.S32LE,
        SampleFormat.S24_32LE,
        SampleFormat.FLOAT32LE,
    }
)
_BE_FORMATS = frozenset(
    {
        SampleFormat.S16BE,
        SampleFormat.S24BE,
        SampleFormat.S32BE,
        SampleFormat.S24_32BE,
        SampleFormat.FLOAT32BE,
    }
)


def sample_format_valid(fmt: int) -> bool:
    """True if ``fmt`` names a known sample format."""
    return 0 <= int(fmt) < _SAMPLE_MAX


def sample_rate_valid(rate: int) -> bool:
    """True if ``rate`` is positive and at most 1% above ``RATE_MAX``."""
    return 0 < rate <= RATE_MAX * 101 // 100


def channels_valid(channels: int) -> bool:
    """True if ``channels`` lies between 1 and ``CHANNELS_MAX``."""
    return 0 < channels <= CHANNELS_MAX


def _require_format(fmt: int) -> SampleFormat:
    if not sample_format_valid(fmt):
        raise ValueError(f"invalid sample format: {fmt}")
    return SampleFormat(int(fmt))


def sample_size_of_format(fmt: int) -> int:
    """Bytes per single sample of ``fmt``."""
    return _SIZES[_require_format(fmt)]


def sample_format_to_string(fmt: int) -> Optional[str]:
    """Short name of ``fmt``, or None for an invalid format."""
    if not sample_format_valid(fmt):
        return None
    return _NAMES[SampleFormat(int(fmt))]


def parse_sample_format(name: str) -> SampleFormat:
    """Parse a format name (case-insensitive); INVALID if unknown."""
    return _PARSE_TABLE.get(name.lower(), SampleFormat.INVALID)


def sample_format_is_le(fmt: int) -> Optional[bool]:
    """Whether ``fmt`` is little endian; None when byte order does not apply."""
    fmt = _require_format(fmt)
    if fmt in _LE_FORMATS:
        return True
    if fmt in _BE_FORMATS:
        return False
    return None


def sample_format_is_be(fmt: int) -> Optional[bool]:
    """Whether ``fmt`` is big endian; None when byte order does not apply."""
    little = sample_format_is_le(fmt)
    return None if little is None else not little


def bytes_to_string(value: int) -> str:
    """Human-readable size using binary prefixes."""
    if value >= 1024 * 1024 * 1024:
        return f"{value / 1024 / 1024 / 1024:0.1f} GiB"
    if value >= 1024 * 1024:
        return f"{value / 1024 / 1024:0.1f} MiB"
    if value >= 1024:
        return f"{value / 1024:0.1f} KiB"
    return f"{value} B"


@dataclass(eq=False)
class SampleSpec:
    """Format, rate and channel count of an audio stream."""

    format: int = SampleFormat.INVALID
    rate: int = 0
    channels: int = 0

    def valid(self) -> bool:
        """True if rate, channel count and format are all valid."""
        return (
            sample_rate_valid(self.rate)
            and channels_valid(self.channels)
            and sample_format_valid(self.format)
        )

    def _require_valid(self) -> None:
        if not self.valid():
            raise ValueError(f"invalid sample spec: {self!r}")

    def sample_size(self) -> int:
        """Bytes per sample."""
        self._require_valid()
        return _SIZES[SampleFormat(int(self.format))]

    def frame_size(self) -> int:
        """Bytes per frame (one sample for every channel)."""
        return self.sample_size() * self.channels

    def bytes_per_second(self) -> int:
        """Bytes needed for one second of audio."""
        return self.rate * self.frame_size()

    def bytes_to_usec(self, length: int) -> int:
        """Duration in microseconds of ``length`` bytes, rounded down."""
        return (length // self.frame_size()) * USEC_PER_SEC // self.rate

    def usec_to_bytes(self, usec: int) -> int:
        """Whole frames' worth of bytes that fit in ``usec`` microseconds."""
        return (usec * self.rate // USEC_PER_SEC) * self.frame_size()

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, SampleSpec):
            return NotImplemented
        if not self.valid():
            return False
        if self is other:
            return True
        if not other.valid():
            return False
        return (
            int(self.format) == int(other.format)
            and self.rate == other.rate
            and self.channels == other.channels
        )

    __hash__ = None  # type: ignore[assignment]

    def __str__(self) -> str:
        if not self.valid():
            return "(invalid)"
        return f"{sample_format_to_string(self.format)} {self.channels}ch {self.rate}Hz"