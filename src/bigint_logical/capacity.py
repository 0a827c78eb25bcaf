# src/bigint_logical/capacity.py
"""
Decimal-digit capacity of physical types.

A fixed(n) holds a two's-complement integer of 8*n bits, so its largest value is
2**(8*n - 1) - 1 and its capacity is floor(log10(that value)) digits. The digit count
is taken from the integer itself, never from math.log10, so sizes whose maximum sits
next to a power of ten are classified exactly.
"""

from __future__ import annotations

from functools import lru_cache

from .enums import PhysicalKind
from .schema import PhysicalSchema

# Reported for bytes and string, which are unbounded. validate() never compares against it.
UNBOUNDED_PRECISION = 2**31 - 1


def digit_count(value: int) -> int:
    """Number of decimal digits in abs(value); 0 has one digit."""
    n = abs(value)
    if n < 10:
        return 1
    # 1233 / 4096 ~ log10(2); correct the estimate against exact powers of ten
    exponent = (n.bit_length() * 1233) >> 12
    while 10**exponent > n:
        exponent -= 1
    while 10 ** (exponent + 1) <= n:
        exponent += 1
    return exponent + 1


def floor_log10(value: int) -> int:
    if value < 1:
        raise ValueError(f"floor_log10 is undefined for {value}")
    return digit_count(value) - 1


@lru_cache(maxsize=128)
def fixed_capacity(size: int) -> int:
    """Whole decimal digits a signed fixed(size) can store."""
    if size < 1:
        return 0
    return floor_log10(2 ** (8 * size - 1) - 1)


def max_precision(schema: PhysicalSchema) -> int:
    if schema.kind in (PhysicalKind.bytes, PhysicalKind.string):
        return UNBOUNDED_PRECISION
    if schema.kind is PhysicalKind.fixed:
        return fixed_capacity(schema.fixed_size or 0)
    return 0
