"""UTF-8 validation and filtering, plus ASCII and locale helpers.

Byte strings are treated like NUL-terminated text: a zero byte ends the
data that is looked at.
"""

from __future__ import annotations

import locale
from typing import Optional, Union

__all__ = [
    "FILTER_CHAR",
    "utf8_valid",
    "utf8_filter",
    "utf8_to_locale",
    "locale_to_utf8",
    "ascii_valid",
    "ascii_filter",
]

FILTER_CHAR = "_"

_BytesLike = Union[bytes, bytearray, memoryview]


def _is_unicode_valid(ch: int) -> bool:
    if ch >= 0x110000:  # beyond the Unicode range
        return False
    if (ch & 0xFFFFF800) == 0xD800:  # UTF-16 surrogates
        return False
    if 0xFDD0 <= ch <= 0xFDEF:  # reserved noncharacters
        return False
    if (ch & 0xFFFE) == 0xFFFE:  # U+xxFFFE / U+xxFFFF
        return False
    return True


def _is_continuation(byte: int) -> bool:
    return (byte & 0xC0) == 0x80


def _sequence_length(data: bytes, start: int) -> int:
    """Length of the valid multi-byte sequence at ``start``, or 0."""
    lead = data[start]
    if (lead & 0xE0) == 0xC0:
        size, minimum, value = 2, 128, lead & 0x1E
    elif (lead & 0xF0) == 0xE0:
        size, minimum, value = 3, 1 << 11, lead & 0x0F
    elif (lead & 0xF8) == 0xF0:
        size, minimum, value = 4, 1 << 16, lead & 0x07
    else:
        return 0

    for position in range(start + 1, start + size):
        if position >= len(data) or not _is_continuation(data[position]):
            return 0
        value = (value << 6) | (data[position] & 0x3F)

    if value < minimum or not _is_unicode_valid(value):
        return 0
    return size


def _terminated(data: _BytesLike) -> bytes:
    return bytes(data).split(b"\0", 1)[0]


def _validate(data: bytes, replace: bool) -> Optional[bytes]:
    out = bytearray()
    position = 0
    while position < len(data):
        byte = data[position]
        if byte < 128:
            out.append(byte)
            position += 1
            continue
        size = _sequence_length(data, position)
        if size:
            out += data[position:position + size]
            position += size
        elif replace:
            out += FILTER_CHAR.encode("ascii")
            position += 1  # retry at the following byte
        else:
            return None
    return bytes(out)


def utf8_valid(data: _BytesLike) -> Optional[_BytesLike]:
    """Return ``data`` itself if it is valid UTF-8, otherwise None."""
    if _validate(_terminated(data), replace=False) is None:
        return None
    return data


def utf8_filter(data: _BytesLike) -> bytes:
    """Copy ``data``, replacing each byte that starts no valid sequence by '_'."""
    result = _validate(_terminated(data), replace=True)
    assert result is not None
    return result


def _convert(data: bytes, source: str, target: str) -> Optional[bytes]:
    try:
        return data.decode(source).encode(target)
    except (UnicodeError, LookupError):
        return None


def utf8_to_locale(data: _BytesLike) -> Optional[bytes]:
    """Convert UTF-8 bytes to the locale's encoding; None if not possible."""
    return _convert(_terminated(data), "utf-8", locale.getpreferredencoding(False))


def locale_to_utf8(data: _BytesLike) -> Optional[bytes]:
    """Convert bytes in the locale's encoding to UTF-8; None if not possible."""
    return _convert(_terminated(data), locale.getpreferredencoding(False), "utf-8")


def _is_ascii_unit(unit: Union[int, str]) -> bool:
    code = unit if isinstance(unit, int) else ord(unit)
    return code < 128


def ascii_valid(text: Union[str, bytes]) -> Optional[Union[str, bytes]]:
    """Return ``text`` if every character is 7-bit ASCII, otherwise None."""
    if all(_is_ascii_unit(unit) for unit in text):
        return text
    return None


def ascii_filter(text: Union[str, bytes]) -> Union[str, bytes]:
    """Copy ``text`` with every non-ASCII character dropped."""
    if isinstance(text, (bytes, bytearray)):
        return bytes(byte for byte in text if byte < 128)
    return "".join(char for char in text if ord(char) < 128)