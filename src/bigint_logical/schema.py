# src/bigint_logical/schema.py
"""Physical schema descriptors and schema document loading."""

from __future__ import annotations

import json
from dataclasses import dataclass
from pathlib import Path
from typing import Any

from .enums import PhysicalKind
from .errors import InvalidConfiguration

SCHEMA_SUFFIXES = (".avsc", ".json", ".yaml", ".yml")


@dataclass(frozen=True, slots=True)
class PhysicalSchema:
    """The schema node a logical type decorates: its kind and, for fixed, its size."""

    kind: PhysicalKind
    fixed_size: int | None = None
    name: str | None = None

    @classmethod
    def of(cls, node: Any) -> PhysicalSchema:
        """
        Build a descriptor from a JSON-like schema node.

        Accepts a bare type name ("bytes"), a list (union) or a dict with a "type" key.
        A dict whose "type" is itself a nested schema is unwrapped.
        """
        if isinstance(node, PhysicalSchema):
            return node
        if isinstance(node, list):
            return cls(PhysicalKind.union)
        if isinstance(node, str):
            return cls(_kind_of(node))
        if not isinstance(node, dict) or "type" not in node:
            raise InvalidConfiguration(f"Not a schema node: {node!r}")

        type_ = node["type"]
        if isinstance(type_, (dict, list)):
            return cls.of(type_)

        kind = _kind_of(type_)
        if kind is PhysicalKind.fixed:
            size = node.get("size")
            if isinstance(size, bool) or not isinstance(size, int):
                raise InvalidConfiguration(f"fixed schema needs an integer size, got {size!r}")
            return cls(kind, fixed_size=size, name=node.get("name"))
        return cls(kind, name=node.get("name"))

    def __str__(self) -> str:
        if self.kind is PhysicalKind.fixed:
            return f"fixed({self.fixed_size})"
        return self.kind.value


def _kind_of(type_name: Any) -> PhysicalKind:
    try:
        return PhysicalKind(type_name)
    except ValueError:
        raise InvalidConfiguration(f"Unknown schema type: {type_name!r}") from None


def load_schema_document(path: Path) -> Any:
    if path.suffix in (".yaml", ".yml"):
        import yaml

        with path.open("r", encoding="utf-8") as f:
            return yaml.safe_load(f)

    with path.open("r", encoding="utf-8") as f:
        return json.load(f)


def find_schema_files(root: Path) -> list[Path]:
    if root.is_file():
        return [root]
    return sorted(p for p in root.rglob("*") if p.is_file() and p.suffix in SCHEMA_SUFFIXES)
