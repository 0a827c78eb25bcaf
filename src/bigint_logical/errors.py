# src/bigint_logical/errors.py
"""Error kinds raised while configuring or using a logical type."""


class BigIntError(ValueError):
    pass


class InvalidConfiguration(BigIntError):
    """Precision or physical type does not describe a usable bigint."""


class UnsupportedOperation(BigIntError, NotImplementedError):
    """Value conversion requested for a physical kind without one."""


class MalformedValue(BigIntError):
    """Input cannot be read as (or written from) an integer."""
