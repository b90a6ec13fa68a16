"""Software volume values and their conversions.

A volume is an unsigned integer where ``VOLUME_NORM`` means 100 % and
``VOLUME_MUTED`` means silence. Conversion to and from linear amplitude
uses a cubic curve, so that a round trip gives back the same volume.
"""

from __future__ import annotations

import logging
import math

__all__ = [
    "VOLUME_MUTED",
    "VOLUME_NORM",
    "VOLUME_MAX",
    "VOLUME_INVALID",
    "DECIBEL_MININFTY",
    "volume_is_valid",
    "clamp_volume",
    "sw_volume_multiply",
    "sw_volume_divide",
    "sw_volume_from_db",
    "sw_volume_to_db",
    "sw_volume_from_linear",
    "sw_volume_to_linear",
    "volume_to_string",
    "sw_volume_to_db_string",
    "volume_to_verbose_string",
]

VOLUME_MUTED = 0
VOLUME_NORM = 0x10000
VOLUME_MAX = 0xFFFFFFFF // 2
VOLUME_INVALID = 0xFFFFFFFF
DECIBEL_MININFTY = -math.inf

_INVALID_TEXT = "(invalid)"

_log = logging.getLogger(__name__)


def volume_is_valid(v: int) -> bool:
    """True if ``v`` lies between VOLUME_MUTED and VOLUME_MAX."""
    return VOLUME_MUTED <= v <= VOLUME_MAX


def clamp_volume(v: int) -> int:
    """Limit ``v`` to the range VOLUME_MUTED..VOLUME_MAX."""
    return min(max(v, VOLUME_MUTED), VOLUME_MAX)


def _require_valid(v: int) -> None:
    if not volume_is_valid(v):
        raise ValueError(f"invalid volume: {v}")


def sw_volume_multiply(a: int, b: int) -> int:
    """Combine two volumes as if applied one after the other."""
    _require_valid(a)
    _require_valid(b)
    result = (a * b + VOLUME_NORM // 2) // VOLUME_NORM
    if result > VOLUME_MAX:
        _log.warning(
            "sw_volume_multiply: Volume exceeds maximum allowed value and will be clipped."
        )
    return clamp_volume(result)


def sw_volume_divide(a: int, b: int) -> int:
    """Inverse of sw_volume_multiply; dividing by a muted volume gives 0."""
    _require_valid(a)
    _require_valid(b)
    if b <= VOLUME_MUTED:
        return 0
    result = (a * VOLUME_NORM + b // 2) // b
    if result > VOLUME_MAX:
        _log.warning(
            "sw_volume_divide: Volume exceeds maximum allowed value and will be clipped."
        )
    return clamp_volume(result)


def _cbrt(x: float) -> float:
    root = x ** (1.0 / 3.0)
    if root > 0.0 and math.isfinite(root):
        # One Newton step sharpens the floating-point power.
        root -= (root * root * root - x) / (3.0 * root * root)
    return root


def sw_volume_from_linear(v: float) -> int:
    """Volume for a linear amplitude factor (cubic mapping)."""
    if math.isnan(v):
        raise ValueError("linear factor is not a number")
    if v <= 0.0:
        return VOLUME_MUTED
    if math.isinf(v):
        return VOLUME_MAX
    scaled = _cbrt(v) * VOLUME_NORM
    if not math.isfinite(scaled):
        return VOLUME_MAX
    return clamp_volume(math.floor(scaled + 0.5))


def sw_volume_to_linear(v: int) -> float:
    """Linear amplitude factor of a volume."""
    _require_valid(v)
    if v <= VOLUME_MUTED:
        return 0.0
    if v == VOLUME_NORM:
        return 1.0
    f = v / VOLUME_NORM
    return f * f * f


def sw_volume_from_db(db: float) -> int:
    """Volume for an amplitude in decibels."""
    if db <= DECIBEL_MININFTY:
        return VOLUME_MUTED
    return sw_volume_from_linear(10.0 ** (db / 20.0))


def sw_volume_to_db(v: int) -> float:
    """Amplitude of a volume in decibels; muted is minus infinity."""
    _require_valid(v)
    if v <= VOLUME_MUTED:
        return DECIBEL_MININFTY
    return 20.0 * math.log10(sw_volume_to_linear(v))


def _percent(v: int) -> int:
    return (v * 100 + VOLUME_NORM // 2) // VOLUME_NORM


def volume_to_string(v: int) -> str:
    """Volume as a percentage, e.g. ``100%``."""
    if not volume_is_valid(v):
        return _INVALID_TEXT
    return f"{_percent(v):3d}%"


def sw_volume_to_db_string(v: int) -> str:
    """Volume in decibels with two decimals, e.g. ``0.00 dB``."""
    if not volume_is_valid(v):
        return _INVALID_TEXT
    db = sw_volume_to_db(v)
    if db <= DECIBEL_MININFTY:
        db = -math.inf
    return f"{db:0.2f} dB"


def volume_to_verbose_string(v: int, print_db: bool = False) -> str:
    """Raw value and percentage, optionally followed by decibels."""
    if not volume_is_valid(v):
        return _INVALID_TEXT
    text = f"{v} / {_percent(v):3d}%"
    if print_db:
        text += " / " + sw_volume_to_db_string(v)
    return text