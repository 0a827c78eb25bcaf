# src/bigint_logical/metadata.py
"""Logical-type metadata as it appears on a schema node."""

from __future__ import annotations

from typing import Annotated, Literal

from pydantic import BaseModel, BeforeValidator, ConfigDict, Field


def _precision_from_json(v):
    if isinstance(v, bool):
        raise ValueError("precision must be an integer, not boolean")
    return v


Precision = Annotated[int, BeforeValidator(_precision_from_json)]


class BigIntMetadata(BaseModel):
    """The bigint annotation; other keys on the node belong to the schema and are ignored."""

    model_config = ConfigDict(frozen=True, extra="ignore", populate_by_name=True)

    logical_type: Literal["bigint"] = Field(default="bigint", alias="logicalType")
    precision: Precision
