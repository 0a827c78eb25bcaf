# src/bigint_logical/props.py
"""Named logical type with an attribute map."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any

LOGICAL_TYPE_KEY = "logicalType"


def reserved_set(*names: str) -> frozenset[str]:
    """Attribute names a logical type claims: its identity key plus its own parameters."""
    return frozenset((LOGICAL_TYPE_KEY, *names))


@dataclass(frozen=True, slots=True)
class LogicalTypeProps:
    name: str
    reserved: frozenset[str]
    params: Mapping[str, Any] = field(default_factory=dict)

    def __post_init__(self) -> None:
        unclaimed = set(self.params) - self.reserved
        if unclaimed:
            raise ValueError(f"{self.name} parameters not in its reserved set: {sorted(unclaimed)}")
        object.__setattr__(self, "params", MappingProxyType(dict(self.params)))

    @property
    def props(self) -> Mapping[str, Any]:
        """Schema attributes to write for this logical type, identity key first."""
        return MappingProxyType({LOGICAL_TYPE_KEY: self.name, **self.params})

