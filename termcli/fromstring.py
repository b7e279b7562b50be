"""Strict conversion of command arguments to C-like scalar types."""

from __future__ import annotations

import math
import re
import struct
from enum import Enum
from typing import Any, Callable

__all__ = ["BadConversion", "CType", "from_string"]


class BadConversion(ValueError):
    """Raised when a string cannot be read as the requested type."""

    def __init__(self, message: str | None = None) -> None:
        super().__init__(
            message
            or "bad from_string conversion: "
            "source string value could not be interpreted as target"
        )


class CType(Enum):
    """The scalar types an argument can be converted to."""

    SIGNED_CHAR = "signed char"
    SHORT = "short"
    INT = "int"
    LONG = "long"
    LONG_LONG = "long long"
    UNSIGNED_CHAR = "unsigned char"
    UNSIGNED_SHORT = "unsigned short"
    UNSIGNED_INT = "unsigned int"
    UNSIGNED_LONG = "unsigned long"
    UNSIGNED_LONG_LONG = "unsigned long long"
    BOOL = "bool"
    CHAR = "char"
    FLOAT = "float"
    DOUBLE = "double"
    LONG_DOUBLE = "long double"
    STRING = "string"
    NONE = "nullptr"


_SIGNED_BITS = {
    CType.SIGNED_CHAR: 8,
    CType.SHORT: 16,
    CType.INT: 32,
    CType.LONG: 64,
    CType.LONG_LONG: 64,
}

_UNSIGNED_BITS = {
    CType.UNSIGNED_CHAR: 8,
    CType.UNSIGNED_SHORT: 16,
    CType.UNSIGNED_INT: 32,
    CType.UNSIGNED_LONG: 64,
    CType.UNSIGNED_LONG_LONG: 64,
}

_PYTHON_TYPES: dict[Any, CType] = {
    str: CType.STRING,
    int: CType.INT,
    float: CType.DOUBLE,
    bool: CType.BOOL,
    type(None): CType.NONE,
}

_FLT_MAX = 3.4028234663852886e38

_DECIMAL = re.compile(r"[+-]?(?P<mantissa>\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?")
_HEX = re.compile(
    r"[+-]?0[xX](?P<mantissa>[0-9a-fA-F]+\.?[0-9a-fA-F]*|\.[0-9a-fA-F]+)"
    r"(?:[pP][+-]?\d+)?"
)
_SPECIAL = re.compile(r"(?P<sign>[+-]?)(?:(?P<inf>inf(?:inity)?)|nan(?:\(\w*\))?)", re.I)


def _unsigned_digits(text: str, bits: int) -> int:
    if not text or any(c not in "0123456789" for c in text):
        raise BadConversion()
    value = int(text)
    if value >= 1 << bits:
        raise BadConversion()
    return value


def _unsigned(text: str, bits: int) -> int:
    if text.startswith("+"):
        text = text[1:]
    return _unsigned_digits(text, bits)


def _signed(text: str, bits: int) -> int:
    if not text:
        raise BadConversion()
    if text.startswith("-"):
        value = _unsigned_digits(text[1:], bits)
        if value > 1 << (bits - 1):
            raise BadConversion()
        return -value
    if text.startswith("+"):
        text = text[1:]
    value = _unsigned_digits(text, bits)
    if value > (1 << (bits - 1)) - 1:
        raise BadConversion()
    return value


def _to_bool(text: str) -> bool:
    if text == "true":
        return True
    if text == "false":
        return False
    value = _signed(text, 64)
    if value == 1:
        return True
    if value == 0:
        return False
    raise BadConversion()


def _to_char(text: str) -> str:
    if len(text) != 1:
        raise BadConversion()
    return text


def _to_floating(text: str, single: bool) -> float:
    if not text or any(c.isspace() for c in text):
        raise BadConversion()

    special = _SPECIAL.fullmatch(text)
    if special:
        if special.group("inf"):
            return -math.inf if special.group("sign") == "-" else math.inf
        return -math.nan if special.group("sign") == "-" else math.nan

    hexadecimal = _HEX.fullmatch(text)
    if hexadecimal:
        try:
            value = float.fromhex(text)
        except (OverflowError, ValueError) as exc:
            raise BadConversion() from exc
        mantissa = hexadecimal.group("mantissa")
        nonzero = any(c not in "0." for c in mantissa)
    else:
        decimal = _DECIMAL.fullmatch(text)
        if not decimal:
            raise BadConversion()
        value = float(text)
        nonzero = any(c in "123456789" for c in decimal.group("mantissa"))

    if math.isinf(value) or (single and abs(value) > _FLT_MAX):
        raise BadConversion()
    if single:
        value = struct.unpack("f", struct.pack("f", value))[0]
    if nonzero and value == 0.0:
        raise BadConversion()
    return value


def _convert(text: str, ctype: CType) -> Any:
    if ctype in _SIGNED_BITS:
        return _signed(text, _SIGNED_BITS[ctype])
    if ctype in _UNSIGNED_BITS:
        return _unsigned(text, _UNSIGNED_BITS[ctype])
    if ctype is CType.BOOL:
        return _to_bool(text)
    if ctype is CType.CHAR:
        return _to_char(text)
    if ctype is CType.FLOAT:
        return _to_floating(text, single=True)
    if ctype in (CType.DOUBLE, CType.LONG_DOUBLE):
        return _to_floating(text, single=False)
    if ctype is CType.STRING:
        return text
    return None


def from_string(text: str, target: CType | type | Callable[[str], Any]) -> Any:
    """Convert *text* to *target*, raising :class:`BadConversion` on failure.

    *target* is a :class:`CType`, one of the Python types ``str``, ``int``
    (read as a C ``int``), ``float`` (a ``double``), ``bool`` or
    ``type(None)``, or any other callable that builds a value from a string.
    """
    if isinstance(target, CType):
        return _convert(text, target)
    if target in _PYTHON_TYPES:
        return _convert(text, _PYTHON_TYPES[target])
    if text != text.strip() or not text:
        raise BadConversion()
    try:
        return target(text)
    except (ValueError, TypeError) as exc:
        raise BadConversion() from exc