# src/bigint_logical/bigint.py
"""
The bigint logical type: an arbitrary-precision signed integer with a maximum number of
decimal digits, stored as fixed, bytes or string.

Construction checks precision, validate() checks the schema it is attached to, and
serialize/deserialize convert values for bytes and string. Fixed values are framed by
the container layer, so fixed is validated but has no value conversion here.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from pydantic import ValidationError

from .capacity import max_precision
from .codec import decimal_to_int, int_to_decimal, int_to_twos_complement, twos_complement_to_int
from .enums import PhysicalKind
from .errors import InvalidConfiguration, UnsupportedOperation
from .metadata import BigIntMetadata
from .props import LogicalTypeProps, reserved_set
from .schema import PhysicalSchema

LOGICAL_TYPE_NAME = "bigint"
RESERVED = reserved_set("precision")
BACKING_KINDS = (PhysicalKind.fixed, PhysicalKind.bytes, PhysicalKind.string)


class BigIntLogicalType:
    __slots__ = ("_props", "_precision", "_type")

    native_type = int
    reserved_attributes = RESERVED

    def __init__(self, precision: int, physical_type: PhysicalKind | str) -> None:
        try:
            self._type = PhysicalKind(physical_type)
        except ValueError:
            raise InvalidConfiguration(f"Unknown physical type for {LOGICAL_TYPE_NAME}: {physical_type!r}") from None

        if isinstance(precision, bool) or not isinstance(precision, int):
            raise InvalidConfiguration(f"Invalid {LOGICAL_TYPE_NAME} precision: {precision!r} (must be an integer)")
        if precision <= 0:
            raise InvalidConfiguration(f"Invalid {LOGICAL_TYPE_NAME} precision: {precision!r} (must be positive)")

        self._precision = precision
        self._props = LogicalTypeProps(LOGICAL_TYPE_NAME, RESERVED, {"precision": precision})

    @classmethod
    def from_metadata(cls, metadata: Mapping[str, Any], physical_type: PhysicalKind | str) -> BigIntLogicalType:
        try:
            meta = BigIntMetadata.model_validate(dict(metadata))
        except ValidationError as e:
            raise InvalidConfiguration(f"Invalid {LOGICAL_TYPE_NAME} metadata: {e}") from e
        return cls(meta.precision, physical_type)

    @classmethod
    def from_schema(cls, node: Mapping[str, Any]) -> BigIntLogicalType:
        """Build from an annotated schema node and validate against that node."""
        schema = PhysicalSchema.of(node)
        instance = cls.from_metadata(node, schema.kind)
        instance.validate(schema)
        return instance

    @property
    def name(self) -> str:
        return self._props.name

    @property
    def precision(self) -> int:
        return self._precision

    @property
    def physical_type(self) -> PhysicalKind:
        return self._type

    @property
    def props(self) -> Mapping[str, Any]:
        return self._props.props

    def reserved(self) -> frozenset[str]:
        return self._props.reserved

    def validate(self, schema: PhysicalSchema | Any) -> None:
        schema = PhysicalSchema.of(schema)

        if schema.kind not in BACKING_KINDS:
            raise InvalidConfiguration(f"{self.name} must be backed by fixed, bytes or string, not {schema}")

        if schema.kind is not self._type:
            raise InvalidConfiguration(f"{self.name} bound to {self._type.value} cannot be attached to {schema}")

        # bytes and string hold any number of digits
        if schema.kind is not PhysicalKind.fixed:
            return

        capacity = max_precision(schema)
        if self._precision > capacity:
            raise InvalidConfiguration(f"{schema} cannot store {self._precision} digits (max {capacity})")

    def deserialize(self, value: Any) -> int:
        if self._type is PhysicalKind.string:
            return decimal_to_int(value)
        if self._type is PhysicalKind.bytes:
            return twos_complement_to_int(value)
        raise UnsupportedOperation(f"Unsupported type {self._type.value} for {self!r}")

    def serialize(self, value: int) -> str | bytes:
        if self._type is PhysicalKind.string:
            return int_to_decimal(value)
        if self._type is PhysicalKind.bytes:
            return int_to_twos_complement(value)
        raise UnsupportedOperation(f"Unsupported type {self._type.value} for {self!r}")

    def __repr__(self) -> str:
        return f"{type(self).__name__}(precision={self._precision}, physical_type={self._type.value!r})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, BigIntLogicalType):
            return NotImplemented
        return (self._precision, self._type) == (other._precision, other._type)

    def __hash__(self) -> int:
        return hash((LOGICAL_TYPE_NAME, self._precision, self._type))
