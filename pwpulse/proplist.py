"""Ordered string property lists."""

from __future__ import annotations

import enum
from typing import Iterable, Iterator, Mapping, Optional

__all__ = ["UpdateMode", "Proplist", "key_valid"]


class UpdateMode(enum.IntEnum):
    """How Proplist.update combines two lists."""

    SET = 0
    MERGE = 1
    REPLACE = 2


def key_valid(key: str) -> bool:
    """A key is valid when it is non-empty and plain 7-bit ASCII."""
    return len(key) >= 1 and all(ord(char) < 128 for char in key)


def _require_key(key: str) -> None:
    if not key_valid(key):
        raise ValueError(f"invalid property key: {key!r}")


class Proplist:
    """A mapping of string keys to string values that keeps insertion order."""

    __slots__ = ("_props",)

    def __init__(self, items: Optional[Mapping[str, str]] = None) -> None:
        self._props: dict[str, str] = {}
        if items:
            for key, value in items.items():
                self.sets(key, value)

    def sets(self, key: str, value: str) -> None:
        """Set ``key`` to ``value``."""
        _require_key(key)
        self._props[key] = value

    def setp(self, pair: str) -> None:
        """Set a property from a ``key=value`` string."""
        key, sep, value = pair.partition("=")
        if not sep:
            raise ValueError(f"no '=' in property pair: {pair!r}")
        self.sets(key, value)

    def gets(self, key: str) -> Optional[str]:
        """Value of ``key``, or None if it is not set."""
        return self._props.get(key)

    def unset(self, key: str) -> bool:
        """Remove ``key``; True if it was present."""
        _require_key(key)
        return self._props.pop(key, None) is not None

    def unset_many(self, keys: Iterable[str]) -> int:
        """Remove several keys after checking them all; returns how many were handled."""
        keys = list(keys)
        for key in keys:
            _require_key(key)
        for key in keys:
            self.unset(key)
        return len(keys)

    def update(self, mode: UpdateMode, other: "Proplist") -> None:
        """Combine ``other`` into this list according to ``mode``."""
        mode = UpdateMode(mode)
        if mode is UpdateMode.REPLACE:
            self._props.update(other._props)
            return
        if mode is UpdateMode.SET:
            self.clear()
        for key, value in other._props.items():
            self._props.setdefault(key, value)

    def contains(self, key: str) -> bool:
        """True if ``key`` is set."""
        _require_key(key)
        return key in self._props

    def clear(self) -> None:
        """Remove every property."""
        self._props.clear()

    def copy(self) -> "Proplist":
        """An independent copy."""
        result = Proplist()
        result._props = dict(self._props)
        return result

    def to_string(self, sep: str = ",") -> str:
        """Render as ``key = "value"`` entries joined by ``sep``."""
        parts = []
        for key, value in self._props.items():
            escaped = value.replace('"', '\\"')
            parts.append(f'{key} = "{escaped}"')
        return sep.join(parts)

    def __str__(self) -> str:
        return self.to_string()

    def __repr__(self) -> str:
        return f"Proplist({self._props!r})"

    def __len__(self) -> int:
        return len(self._props)

    def __iter__(self) -> Iterator[str]:
        return iter(list(self._props))

    def __contains__(self, key: object) -> bool:
        return key in self._props

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Proplist):
            return NotImplemented
        if self is other:
            return True
        if len(self) != len(other):
            return False
        return all(other._props.get(key) == value for key, value in self._props.items())

    __hash__ = None  # type: ignore[assignment]