# src/bigint_logical/codec.py
"""
Integer <-> physical value conversions.

Text is base-10 with an optional sign; bytes are two's-complement, big-endian and
minimal in length:

>>> int_to_twos_complement(127).hex(), int_to_twos_complement(128).hex()
('7f', '0080')
>>> twos_complement_to_int(bytes.fromhex("ff"))
-1
>>> decimal_to_int("+007"), int_to_decimal(-42)
(7, '-42')

Python refuses int/str conversions past sys.get_int_max_str_digits() digits, so long
values are split and converted piecewise.
"""

from __future__ import annotations

import io
import re
import sys
from functools import lru_cache

from .errors import MalformedValue

_DECIMAL_RE = re.compile(r"[+-]?[0-9]+")

# Well under the interpreter's default int/str conversion limit of 4300 digits
_CHUNK_DIGITS = 2048


def _chunk_digits() -> int:
    """Digits converted in one piece; the limit is read per call since a process may lower it."""
    limit = sys.get_int_max_str_digits()
    if limit:
        return min(_CHUNK_DIGITS, limit)
    return _CHUNK_DIGITS


@lru_cache(maxsize=8)
def _pow10(exponent: int) -> int:
    return 10**exponent


def _require_int(value: object) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise MalformedValue(f"bigint values must be int, got {type(value).__name__}")
    return value


def _digits_to_int(digits: str) -> int:
    if len(digits) <= _chunk_digits():
        return int(digits)
    split = len(digits) // 2
    low_len = len(digits) - split
    return _digits_to_int(digits[:split]) * 10**low_len + _digits_to_int(digits[split:])


def _int_to_digits(n: int, width: int = 0) -> str:
    """Digits of a non-negative int, left-padded with zeros to width."""
    if n < _pow10(_chunk_digits()):
        return str(n).zfill(width)
    half = 1
    while 10 ** (half * 2) <= n:
        half *= 2
    high, low = divmod(n, 10**half)
    return _int_to_digits(high, width - half) + _int_to_digits(low, half)


def decimal_to_int(text: str | bytes) -> int:
    if isinstance(text, (bytes, bytearray)):
        try:
            text = text.decode("ascii")
        except UnicodeDecodeError as e:
            raise MalformedValue(f"bigint text must be ASCII digits: {e}") from e
    if not isinstance(text, str):
        raise MalformedValue(f"bigint text must be str, got {type(text).__name__}")
    if not _DECIMAL_RE.fullmatch(text):
        shown = text if len(text) <= 40 else text[:37] + "..."
        raise MalformedValue(f"Not a base-10 integer: {shown!r}")

    negative = text[0] == "-"
    digits = text.lstrip("+-")
    value = _digits_to_int(digits)
    return -value if negative else value


def int_to_decimal(value: int) -> str:
    value = _require_int(value)
    if value < 0:
        return "-" + _int_to_digits(-value)
    return _int_to_digits(value)


def int_to_twos_complement(value: int) -> bytes:
    value = _require_int(value)
    # ~value has the same magnitude bits as a negative value minus its sign
    magnitude = value if value >= 0 else ~value
    length = magnitude.bit_length() // 8 + 1
    return value.to_bytes(length, "big", signed=True)


def twos_complement_to_int(data: bytes | bytearray | memoryview | io.BytesIO) -> int:
    if isinstance(data, io.BytesIO):
        # whole buffer, whatever the cursor position
        data = data.getvalue()
    if not isinstance(data, (bytes, bytearray, memoryview)):
        raise MalformedValue(f"bigint bytes must be a byte sequence, got {type(data).__name__}")
    if len(data) == 0:
        raise MalformedValue("Cannot read a bigint from an empty byte sequence")
    return int.from_bytes(data, "big", signed=True)
