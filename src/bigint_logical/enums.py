# src/bigint_logical/enums.py
from enum import Enum


class PhysicalKind(str, Enum):
    null = "null"
    boolean = "boolean"
    int = "int"
    long = "long"
    float = "float"
    double = "double"
    bytes = "bytes"
    string = "string"
    record = "record"
    enum = "enum"
    array = "array"
    map = "map"
    union = "union"
    fixed = "fixed"


class ValueType(str, Enum):
    string = "string"
    bytes = "bytes"
