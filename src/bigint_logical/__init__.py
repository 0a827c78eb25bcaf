"""
bigint logical type: arbitrary-precision signed integers with a declared decimal precision,
carried by fixed, bytes or string schemas.
"""

from .bigint import LOGICAL_TYPE_NAME, BigIntLogicalType
from .capacity import UNBOUNDED_PRECISION, digit_count, fixed_capacity, max_precision
from .enums import PhysicalKind
from .errors import BigIntError, InvalidConfiguration, MalformedValue, UnsupportedOperation
from .protocol import LogicalTypeCodec
from .schema import PhysicalSchema

__all__ = [
    "BigIntError",
    "BigIntLogicalType",
    "InvalidConfiguration",
    "LOGICAL_TYPE_NAME",
    "LogicalTypeCodec",
    "MalformedValue",
    "PhysicalKind",
    "PhysicalSchema",
    "UNBOUNDED_PRECISION",
    "UnsupportedOperation",
    "digit_count",
    "fixed_capacity",
    "max_precision",
]
