# src/bigint_logical/checker.py
"""Check runner - finds bigint annotations in schema files and validates each one."""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Protocol

import yaml

from .bigint import LOGICAL_TYPE_NAME, BigIntLogicalType
from .enums import PhysicalKind
from .errors import InvalidConfiguration
from .props import LOGICAL_TYPE_KEY
from .schema import PhysicalSchema, find_schema_files, load_schema_document
from .walker import collect_named_types, walk_schema_nodes


@dataclass(slots=True)
class CheckConfig:
    schemas: Path
    verbose: int = 0


@dataclass
class CheckProblem:
    """Structured check error with context."""

    file: str
    json_pointer: str
    message: str

    def __str__(self) -> str:
        return f"{self.file}:{self.json_pointer}\n  {self.message}"


@dataclass(slots=True)
class BoundAnnotation:
    file: str
    json_pointer: str
    logical_type: BigIntLogicalType
    schema_label: str


@dataclass(slots=True)
class CheckResult:
    files: int = 0
    annotations: list[BoundAnnotation] = field(default_factory=list)
    problems: list[CheckProblem] = field(default_factory=list)
    warnings: list[str] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        return not self.problems

    def human_summary(self) -> str:
        if self.ok:
            return f"[OK] {len(self.annotations)} bigint annotation(s) valid across {self.files} file(s)"
        total = len(self.annotations) + len(self.problems)
        return f"[FAIL] {len(self.problems)} of {total} bigint annotation(s) invalid"


class Reporter(Protocol):
    def task(self, label: str): ...
    def info(self, msg: str): ...


class SimpleReporter:
    def task(self, label: str):
        print(label)
        return self

    def __enter__(self):
        return self

    def __exit__(self, *args):
        pass

    def info(self, msg: str):
        print(msg)


_PRIMITIVE_NAMES = frozenset(k.value for k in PhysicalKind)


def _resolve_named_type(node: dict, named: dict[str, dict]) -> dict:
    """Replace a reference to a named fixed/record/enum with its definition."""
    type_ = node.get("type")
    if not isinstance(type_, str) or type_ in _PRIMITIVE_NAMES or type_ not in named:
        return node
    return {**node, "type": named[type_]}


def check_document(doc: Any, label: str, result: CheckResult, verbose: int = 0, r: Reporter | None = None) -> None:
    named = collect_named_types(doc)

    for node, json_ptr in walk_schema_nodes(doc):
        logical = node.get(LOGICAL_TYPE_KEY)
        if logical != LOGICAL_TYPE_NAME:
            # decimal declares its own precision
            if logical not in (None, "decimal") and "precision" in node:
                result.warnings.append(f"[foreign-precision] {label}:{json_ptr}: logicalType {logical!r} has precision")
            continue

        resolved = _resolve_named_type(node, named)
        try:
            schema = PhysicalSchema.of(resolved)
            bound = BigIntLogicalType.from_schema(resolved)
        except InvalidConfiguration as e:
            result.problems.append(CheckProblem(label, json_ptr, str(e)))
            continue

        result.annotations.append(BoundAnnotation(label, json_ptr, bound, str(schema)))
        if verbose >= 2 and r is not None:
            r.info(f"[check] {label}:{json_ptr} precision={bound.precision} on {schema}")


def run_check(cfg: CheckConfig, r: Reporter) -> CheckResult:
    result = CheckResult()
    files = find_schema_files(cfg.schemas)
    root = cfg.schemas if cfg.schemas.is_dir() else cfg.schemas.parent

    with r.task(f"Checking {len(files)} schema file(s)..."):
        for path in files:
            label = str(path.relative_to(root))
            try:
                doc = load_schema_document(path)
            except (json.JSONDecodeError, yaml.YAMLError, UnicodeDecodeError) as e:
                result.warnings.append(f"[unreadable] {label}: {e}")
                continue

            result.files += 1
            if cfg.verbose >= 1:
                r.info(f"[check] {label}")
            check_document(doc, label, result, cfg.verbose, r)

    return result
