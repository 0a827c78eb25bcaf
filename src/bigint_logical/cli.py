#!/usr/bin/env python3
# src/bigint_logical/cli.py


from __future__ import annotations

import sys
from pathlib import Path

import typer

from .bigint import BigIntLogicalType
from .capacity import UNBOUNDED_PRECISION, fixed_capacity
from .checker import CheckConfig, SimpleReporter, run_check
from .enums import ValueType

app = typer.Typer(
    name="bigint-logical",
    help="Validate and exercise the bigint logical type: arbitrary-precision integers on fixed, bytes or string.",
    add_completion=False,
)


def _verbosity_callback(value: int):
    return max(0, min(value, 3))


def _codec(value_type: ValueType) -> BigIntLogicalType:
    # Value conversion ignores precision; the schema check is where it matters
    return BigIntLogicalType(UNBOUNDED_PRECISION, value_type.value)


_TEXT = _codec(ValueType.string)


@app.command()
def info(
    max_size: int = typer.Option(16, "--max-size", min=1, help="Largest fixed size (bytes) to list"),
) -> None:
    print("bigint Capacity by Physical Type")
    print("-" * 50)
    print(f"{'Physical type':<20} {'Max digits':<12} {'Largest value'}")
    print("-" * 50)
    for size in range(1, max_size + 1):
        largest = 2 ** (8 * size - 1) - 1
        shown = str(largest) if size <= 16 else f"2**{8 * size - 1} - 1"
        print(f"{f'fixed({size})':<20} {fixed_capacity(size):<12} {shown}")
    print(f"{'bytes':<20} {'unbounded':<12} -")
    print(f"{'string':<20} {'unbounded':<12} -")
    print("-" * 50)
    print("\nExample annotation:")
    print('  {"type": "fixed", "name": "Amount", "size": 8, "logicalType": "bigint", "precision": 18}')


@app.command()
def diagnose() -> None:
    print("bigint-logical Environment Check\n")

    deps = {
        "yaml": "PyYAML",
        "pydantic": "Pydantic",
        "typer": "Typer",
    }

    print("Dependencies")
    print("-" * 50)
    print(f"{'Package':<30} {'Status':<10} {'Version'}")
    print("-" * 50)

    for module, name in deps.items():
        try:
            m = __import__(module)
            version = getattr(m, "__version__", "unknown")
            print(f"{name:<30} {'[OK]':<10} {version}")
        except ImportError:
            print(f"{name:<30} {'[MISSING]':<10} {'not installed'}")

    limit = sys.get_int_max_str_digits()
    print(f"\nint/str digit limit: {limit or 'none'} (longer values are converted in chunks)")
    print(f"Python: {sys.version}")


@app.command()
def check(
    schemas: Path = typer.Option(..., "--schemas", exists=True, help="Schema file or directory (.avsc, .json, .yaml)"),
    strict_warnings: bool = typer.Option(False, "--strict-warnings", help="Treat warnings as errors"),
    verbose: int = typer.Option(0, "--verbose", "-v", count=True, callback=_verbosity_callback),
) -> None:
    cfg = CheckConfig(schemas=schemas, verbose=verbose)
    result = run_check(cfg, SimpleReporter())

    for w in result.warnings:
        typer.secho(f"Warning: {w}", fg=typer.colors.YELLOW)
    for p in result.problems:
        typer.secho(f"Error: {p}", fg=typer.colors.RED)

    if verbose >= 1:
        for a in result.annotations:
            typer.echo(f"[check] {a.file}:{a.json_pointer} -> {a.logical_type!r} on {a.schema_label}")

    print(f"\n{result.human_summary()}")
    if not result.ok or (strict_warnings and result.warnings):
        raise typer.Exit(1)


@app.command()
def encode(
    value: str = typer.Argument(..., help="Base-10 integer; put negatives after --, e.g. -- -42"),
    value_type: ValueType = typer.Option(
        ValueType.bytes, "--type", help="Physical type to encode to", case_sensitive=False
    ),
) -> None:
    codec = _codec(value_type)
    try:
        encoded = codec.serialize(_TEXT.deserialize(value))
    except ValueError as e:
        typer.secho(f"Error: {e}", fg=typer.colors.RED)
        raise typer.Exit(1) from e

    print(encoded.hex() if isinstance(encoded, bytes) else encoded)


@app.command()
def decode(
    value: str = typer.Argument(..., help="Hex bytes (for --type bytes) or decimal text (for --type string)"),
    value_type: ValueType = typer.Option(
        ValueType.bytes, "--type", help="Physical type to decode from", case_sensitive=False
    ),
) -> None:
    codec = _codec(value_type)
    try:
        raw: str | bytes = value
        if value_type == ValueType.bytes:
            raw = bytes.fromhex(value)
        decoded = codec.deserialize(raw)
    except ValueError as e:
        typer.secho(f"Error: {e}", fg=typer.colors.RED)
        raise typer.Exit(1) from e

    print(_TEXT.serialize(decoded))


if __name__ == "__main__":
    app()
