"""A small, strict JSON reader for property values.

Only printable ASCII is accepted inside strings, ``\\u`` escapes are
rejected, integers are 32-bit and nesting is limited to
``MAX_NESTING_DEPTH`` levels.
"""

from __future__ import annotations

import enum
from typing import Any, Optional

__all__ = [
    "MAX_NESTING_DEPTH",
    "DOUBLE_TOLERANCE",
    "JsonType",
    "JsonParseError",
    "JsonObject",
    "parse",
]

MAX_NESTING_DEPTH = 20
DOUBLE_TOLERANCE = 0.000001

_WHITESPACE = "\t\n\r "
_DIGITS = "0123456789"
_INT_MAX = 2**31 - 1
_UINT_MAX = 2**32 - 1
_UINT_MASK = 0xFFFFFFFF

_ESCAPES = {
    '"': '"',
    "\\": "\\",
    "/": "/",
    "b": "\b",
    "f": "\f",
    "n": "\n",
    "r": "\r",
    "t": "\t",
}


class JsonType(enum.IntEnum):
    """Kind of a parsed JSON value."""

    NULL = 1
    INT = 2
    DOUBLE = 3
    BOOL = 4
    STRING = 5
    ARRAY = 6
    OBJECT = 7


class JsonParseError(ValueError):
    """Raised when a text is not acceptable JSON."""


def _to_int32(value: int) -> int:
    value &= _UINT_MASK
    return value - 2**32 if value > _INT_MAX else value


def _pow10(exponent: int) -> float:
    try:
        return 10.0**exponent
    except OverflowError:
        return float("inf")


class JsonObject:
    """A parsed JSON value.

    ``value`` holds ``None``, an ``int``, a ``float``, a ``bool``, a ``str``,
    a tuple of ``JsonObject`` (arrays) or a tuple of ``(key, JsonObject)``
    pairs in document order (objects).
    """

    __slots__ = ("type", "value")

    def __init__(self, type: JsonType, value: Any = None) -> None:
        self.type = type
        self.value = value

    def __repr__(self) -> str:
        return f"JsonObject({self.type.name}, {self.value!r})"

    def __len__(self) -> int:
        if self.type not in (JsonType.ARRAY, JsonType.OBJECT):
            raise TypeError(f"{self.type.name} value has no length")
        return len(self.value)

    def member(self, name: str) -> Optional["JsonObject"]:
        """Return the first member called ``name`` of an object, or None."""
        if self.type is not JsonType.OBJECT:
            raise TypeError(f"{self.type.name} value has no members")
        return next((value for key, value in self.value if key == name), None)

    def item(self, index: int) -> "JsonObject":
        """Return the element at ``index`` of an array."""
        if self.type is not JsonType.ARRAY:
            raise TypeError(f"{self.type.name} value has no items")
        return self.value[index]

    def equal(self, other: "JsonObject") -> bool:
        """Compare two values; doubles match within ``DOUBLE_TOLERANCE``."""
        if self.type is not other.type:
            return False
        if self.type is JsonType.NULL:
            return True
        if self.type is JsonType.DOUBLE:
            diff = self.value - other.value
            return -DOUBLE_TOLERANCE < diff < DOUBLE_TOLERANCE
        if self.type is JsonType.ARRAY:
            return len(self.value) == len(other.value) and all(
                a.equal(b) for a, b in zip(self.value, other.value)
            )
        if self.type is JsonType.OBJECT:
            if len(self.value) != len(other.value):
                return False
            for key, value in self.value:
                found = other.member(key)
                if found is None or not value.equal(found):
                    return False
            return True
        return self.value == other.value

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, JsonObject):
            return NotImplemented
        return self.equal(other)

    __hash__ = None  # type: ignore[assignment]


class _Parser:
    def __init__(self, text: str) -> None:
        # A NUL character terminates the input.
        self._text = text.split("\0", 1)[0]
        self._pos = 0

    def _peek(self) -> str:
        if self._pos < len(self._text):
            return self._text[self._pos]
        return "\0"

    def _rest(self) -> str:
        return self._text[self._pos:]

    def _at_end(self, end: Optional[str]) -> bool:
        char = self._peek()
        if end is None:
            return char == "\0"
        return char in end

    def document(self) -> JsonObject:
        result = self.value(None, 0)
        if self._peek() != "\0":
            raise JsonParseError(
                f"Unable to parse complete JSON string, remainder is: {self._rest()}"
            )
        return result

    def value(self, end: Optional[str], depth: int) -> JsonObject:
        if depth > MAX_NESTING_DEPTH:
            raise JsonParseError(
                f"Exceeded maximum permitted nesting depth of objects ({MAX_NESTING_DEPTH})"
            )
        result: Optional[JsonObject] = None
        while not self._at_end(end):
            char = self._peek()
            if char in _WHITESPACE:
                self._pos += 1
            elif result is not None:
                raise JsonParseError(f"Unexpected data after value: {self._rest()}")
            elif char == "n":
                result = self._null()
            elif char in "tf":
                result = self._boolean()
            elif char == '"':
                result = self._string()
            elif char in _DIGITS or char == "-":
                result = self._number()
            elif char == "{":
                result = self._object(depth)
            elif char == "[":
                result = self._array(depth)
            else:
                raise JsonParseError(f"Invalid JSON string: {self._rest()}")
        if result is None:
            raise JsonParseError(f"No data while parsing json string: '{self._rest()}'")
        return result

    def _consume(self, word: str) -> bool:
        if self._text.startswith(word, self._pos):
            self._pos += len(word)
            return True
        return False

    def _null(self) -> JsonObject:
        if not self._consume("null"):
            raise JsonParseError(f"Invalid JSON string: {self._rest()}")
        return JsonObject(JsonType.NULL)

    def _boolean(self) -> JsonObject:
        if self._consume("true"):
            return JsonObject(JsonType.BOOL, True)
        if self._consume("false"):
            return JsonObject(JsonType.BOOL, False)
        raise JsonParseError(f"Invalid JSON string: {self._rest()}")

    def _string(self) -> JsonObject:
        self._pos += 1
        chars = []
        while (char := self._peek()) not in ("\0", '"'):
            if char != "\\":
                if not 0x20 <= ord(char) <= 0x7E:
                    raise JsonParseError(f"Invalid non-ASCII character: {ord(char):#x}")
                chars.append(char)
            else:
                self._pos += 1
                escape = self._peek()
                if escape == "u":
                    raise JsonParseError("Unicode code points are currently unsupported")
                if escape not in _ESCAPES:
                    raise JsonParseError(f"Unexpected escape value: {escape!r}")
                chars.append(_ESCAPES[escape])
            self._pos += 1
        if self._peek() != '"':
            raise JsonParseError(f"Failed to parse remainder of string: {self._rest()}")
        self._pos += 1
        return JsonObject(JsonType.STRING, "".join(chars))

    def _digits(self, limit: int, what: str):
        """Read a run of digits with a pre-multiplication overflow check."""
        total = 0
        count = 0
        while (char := self._peek()) in _DIGITS and char != "\0":
            if total > limit // 10:
                raise JsonParseError(f"Integer overflow while parsing {what}")
            total = (total * 10 + int(char)) & _UINT_MASK
            count += 1
            self._pos += 1
        return total, count

    def _number(self) -> JsonObject:
        negative = False
        if self._peek() == "-":
            negative = True
            self._pos += 1

        if self._peek() == "0":
            integer = 0
            self._pos += 1
        else:
            limit = _INT_MAX if negative else _UINT_MAX
            integer, count = self._digits(limit, "number")
            if count == 0:
                raise JsonParseError("Missing digits while parsing number")

        has_fraction = has_exponent = False
        fraction = fraction_digits = 0
        exponent = 0

        if self._peek() == ".":
            has_fraction = True
            self._pos += 1
            fraction, fraction_digits = self._digits(_UINT_MAX, "fractional part of number")
            if fraction_digits == 0:
                raise JsonParseError("No digit after '.' while parsing fraction")

        if self._peek() in "eE" and self._peek() != "\0":
            has_exponent = True
            self._pos += 1
            exponent_negative = False
            if self._peek() == "-":
                exponent_negative = True
                self._pos += 1
            elif self._peek() == "+":
                self._pos += 1
            exponent, count = self._digits(_INT_MAX, "exponent part of number")
            if count == 0:
                raise JsonParseError("No digit in exponent while parsing fraction")
            exponent = _to_int32(exponent)
            if exponent_negative:
                exponent = -exponent

        sign = -1 if negative else 1
        if has_fraction or has_exponent:
            mantissa = integer + fraction / _pow10(fraction_digits)
            return JsonObject(JsonType.DOUBLE, float(sign) * mantissa * _pow10(exponent))
        return JsonObject(JsonType.INT, _to_int32(sign * integer))

    def _object(self, depth: int) -> JsonObject:
        pairs = []
        while self._peek() != "}":
            self._pos += 1  # '{' or ','
            name = self.value(":", depth + 1)
            if name.type is not JsonType.STRING:
                raise JsonParseError("Could not parse key for object")
            self._pos += 1  # ':'
            pairs.append((name.value, self.value(",}", depth + 1)))
        self._pos += 1
        return JsonObject(JsonType.OBJECT, tuple(pairs))

    def _array(self, depth: int) -> JsonObject:
        items = []
        while self._peek() != "]":
            self._pos += 1  # '[' or ','
            while self._peek() in _WHITESPACE and self._peek() != "\0":
                self._pos += 1
            if self._peek() == "]":
                break
            items.append(self.value(",]", depth + 1))
        self._pos += 1
        return JsonObject(JsonType.ARRAY, tuple(items))


def parse(text: str) -> JsonObject:
    """Parse a complete JSON document, raising JsonParseError on bad input."""
    return _Parser(text).document()