# src/bigint_logical/walker.py

from __future__ import annotations

from collections.abc import Iterator
from typing import Any

NAMED_KINDS = ("record", "error", "enum", "fixed")


def _escape(token: str) -> str:
    return token.replace("~", "~0").replace("/", "~1")


def _children(schema: dict, json_ptr: str) -> Iterator[tuple[Any, str]]:
    """Yield (child, json_pointer) for each nested schema position of a node."""
    # Nested type: {"type": {...}} or {"type": [...]}
    if isinstance(schema.get("type"), (dict, list)):
        yield (schema["type"], f"{json_ptr}/type")

    # Record fields
    if isinstance(schema.get("fields"), list):
        for i, field in enumerate(schema["fields"]):
            yield (field, f"{json_ptr}/fields/{i}")

    # Arrays and maps
    for keyword in ("items", "values"):
        if keyword in schema:
            yield (schema[keyword], f"{json_ptr}/{keyword}")

    # Protocol type lists
    if isinstance(schema.get("types"), list):
        yield (schema["types"], f"{json_ptr}/types")

    # Definitions, for JSON documents that group schemas by name
    for def_key in ("$defs", "definitions"):
        if isinstance(schema.get(def_key), dict):
            for name, def_schema in schema[def_key].items():
                yield (def_schema, f"{json_ptr}/{def_key}/{_escape(name)}")


def walk_schema_nodes(schema: Any, json_ptr: str = "#") -> Iterator[tuple[dict, str]]:
    """
    Walk all schema nodes in an Avro-style schema document.

    Yields (node, json_pointer) for every dict that can carry type attributes,
    including logicalType annotations.

    Args:
        schema: Root schema, a union list, or any node
        json_ptr: Current JSON Pointer path

    Yields:
        (node_dict, json_pointer_string) tuples
    """
    if isinstance(schema, list):
        # Unions, or a file holding several top-level schemas
        for i, branch in enumerate(schema):
            yield from walk_schema_nodes(branch, f"{json_ptr}/{i}")
        return

    if not isinstance(schema, dict):
        return

    yield (schema, json_ptr)

    for child, child_ptr in _children(schema, json_ptr):
        yield from walk_schema_nodes(child, child_ptr)


def collect_named_types(schema: Any, namespace: str | None = None) -> dict[str, dict]:
    """
    Map short and namespace-qualified names of record/enum/fixed definitions to their nodes.

    A definition with neither a namespace attribute nor a dotted name takes the namespace
    of the nearest enclosing definition or protocol.
    """
    named: dict[str, dict] = {}
    _collect_named(schema, namespace, named)
    return named


def _collect_named(schema: Any, namespace: str | None, named: dict[str, dict]) -> None:
    if isinstance(schema, list):
        for branch in schema:
            _collect_named(branch, namespace, named)
        return

    if not isinstance(schema, dict):
        return

    own_namespace = schema.get("namespace")
    name = schema.get("name")
    if schema.get("type") in NAMED_KINDS and isinstance(name, str):
        if "." in name:
            namespace, _, short = name.rpartition(".")
        else:
            if isinstance(own_namespace, str):
                namespace = own_namespace or None
            short = name
        named.setdefault(short, schema)
        if namespace:
            named.setdefault(f"{namespace}.{short}", schema)
    elif "protocol" in schema and isinstance(own_namespace, str):
        namespace = own_namespace or None

    for child, _ in _children(schema, "#"):
        _collect_named(child, namespace, named)
