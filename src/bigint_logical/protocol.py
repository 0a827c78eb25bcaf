# src/bigint_logical/protocol.py
"""Capability a schema registry needs from a logical-type codec."""

from typing import Any, Protocol


class LogicalTypeCodec(Protocol):
    """Protocol for logical types plugged into a schema registry.

    The registry resolves a logicalType annotation to one of these, validates it once
    against the schema node it decorates, then calls serialize/deserialize per value.

    Attributes:
        name: Tag written as "logicalType" in schema metadata
        native_type: Python type values are boxed as
        reserved_attributes: Metadata keys the registry must not let custom attributes reuse
    """

    name: str
    native_type: type
    reserved_attributes: frozenset[str]

    def validate(self, schema: Any) -> None:
        """Raise if the physical schema cannot carry this logical type."""
        ...

    def serialize(self, value: Any) -> Any: ...

    def deserialize(self, value: Any) -> Any: ...
