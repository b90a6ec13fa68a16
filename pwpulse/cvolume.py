"""Per-channel volume sets."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable

from .sample import SampleSpec, channels_valid
from .volume import (
    VOLUME_MAX,
    VOLUME_MUTED,
    clamp_volume,
    sw_volume_divide,
    sw_volume_multiply,
    sw_volume_to_db_string,
    volume_is_valid,
    volume_to_string,
    volume_to_verbose_string,
)

__all__ = ["Cvolume"]

_INVALID_TEXT = "(invalid)"
_UINT_MASK = 0xFFFFFFFF


def _require_volume(v: int) -> None:
    if not volume_is_valid(v):
        raise ValueError(f"invalid volume: {v}")


@dataclass(frozen=True, eq=False)
class Cvolume:
    """One volume per channel; operations return new instances."""

    values: tuple = ()

    def __post_init__(self) -> None:
        object.__setattr__(self, "values", tuple(int(v) for v in self.values))

    @classmethod
    def uniform(cls, channels: int, v: int) -> "Cvolume":
        """A set of ``channels`` volumes all equal to ``v`` (clamped)."""
        if not channels_valid(channels):
            raise ValueError(f"invalid channel count: {channels}")
        return cls((clamp_volume(v),) * channels)

    @property
    def channels(self) -> int:
        return len(self.values)

    def __len__(self) -> int:
        return len(self.values)

    def __iter__(self):
        return iter(self.values)

    def __getitem__(self, index: int) -> int:
        return self.values[index]

    def valid(self) -> bool:
        """True if the channel count and every volume are valid."""
        return channels_valid(self.channels) and all(
            volume_is_valid(v) for v in self.values
        )

    def _require_valid(self) -> None:
        if not self.valid():
            raise ValueError(f"invalid channel volumes: {self.values!r}")

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Cvolume):
            return NotImplemented
        if not self.valid():
            return False
        if self is other:
            return True
        if not other.valid():
            return False
        return self.values == other.values

    __hash__ = None  # type: ignore[assignment]

    def avg(self) -> int:
        """Average of all channel volumes, rounded down."""
        self._require_valid()
        return sum(self.values) // self.channels

    def max(self) -> int:
        """Loudest channel volume."""
        self._require_valid()
        return max(self.values, default=VOLUME_MUTED)

    def min(self) -> int:
        """Quietest channel volume."""
        self._require_valid()
        return min(self.values, default=VOLUME_MAX)

    def channels_equal_to(self, v: int) -> bool:
        """True if every channel has volume ``v``."""
        self._require_valid()
        _require_volume(v)
        return all(value == v for value in self.values)

    def _pairwise(self, other: "Cvolume", op) -> "Cvolume":
        self._require_valid()
        other._require_valid()
        return Cvolume(op(a, b) for a, b in zip(self.values, other.values))

    def multiply(self, other: "Cvolume") -> "Cvolume":
        """Channel-wise product over the shorter of the two sets."""
        return self._pairwise(other, sw_volume_multiply)

    def multiply_scalar(self, v: int) -> "Cvolume":
        """Multiply every channel by ``v``."""
        self._require_valid()
        _require_volume(v)
        return Cvolume(sw_volume_multiply(a, v) for a in self.values)

    def divide(self, other: "Cvolume") -> "Cvolume":
        """Channel-wise quotient over the shorter of the two sets."""
        return self._pairwise(other, sw_volume_divide)

    def divide_scalar(self, v: int) -> "Cvolume":
        """Divide every channel by ``v``."""
        self._require_valid()
        _require_volume(v)
        return Cvolume(sw_volume_divide(a, v) for a in self.values)

    def merge(self, other: "Cvolume") -> "Cvolume":
        """Channel-wise maximum over the shorter of the two sets."""
        return self._pairwise(other, max)

    def scale(self, maximum: int) -> "Cvolume":
        """Scale proportionally so the loudest channel becomes ``maximum``."""
        self._require_valid()
        _require_volume(maximum)
        top = self.max()
        if top <= VOLUME_MUTED:
            return Cvolume.uniform(self.channels, maximum)
        return Cvolume(clamp_volume(v * maximum // top) for v in self.values)

    def inc_clamp(self, inc: int, limit: int) -> "Cvolume":
        """Raise the loudest channel by ``inc`` but not beyond ``limit``."""
        self._require_valid()
        _require_volume(inc)
        top = self.max()
        # The threshold wraps like unsigned 32-bit arithmetic.
        if top >= (limit - inc) & _UINT_MASK:
            top = limit
        else:
            top += inc
        return self.scale(top)

    def inc(self, inc: int) -> "Cvolume":
        """Raise the loudest channel by ``inc``, clamped at VOLUME_MAX."""
        return self.inc_clamp(inc, VOLUME_MAX)

    def dec(self, dec: int) -> "Cvolume":
        """Lower the loudest channel by ``dec``, not below muted."""
        self._require_valid()
        _require_volume(dec)
        top = self.max()
        if top <= VOLUME_MUTED + dec:
            top = VOLUME_MUTED
        else:
            top -= dec
        return self.scale(top)

    def compatible(self, spec: SampleSpec) -> bool:
        """True if the channel count matches the sample spec."""
        self._require_valid()
        if not spec.valid():
            raise ValueError(f"invalid sample spec: {spec!r}")
        return self.channels == spec.channels

    def _render(self, items: Iterable[str], sep: str) -> str:
        if not self.valid():
            return _INVALID_TEXT
        return sep.join(f"{index}: {text}" for index, text in enumerate(items))

    def to_string(self) -> str:
        """Per-channel percentages, e.g. ``0: 100% 1: 100%``."""
        return self._render((volume_to_string(v) for v in self.values), " ")

    def to_db_string(self) -> str:
        """Per-channel decibel values, e.g. ``0: 0.00 dB``."""
        return self._render((sw_volume_to_db_string(v) for v in self.values), " ")

    def to_verbose_string(self, print_db: bool = False) -> str:
        """Raw value and percentage per channel, optionally with decibels."""
        return self._render(
            (volume_to_verbose_string(v, print_db) for v in self.values), ",   "
        )

    def __str__(self) -> str:
        return self.to_string()