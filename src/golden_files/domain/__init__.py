"""Domain layer: errors, schemas and constants."""

from .errors import (
    ConfigError,
    ErrorCodes,
    GoldenError,
    GoldenIOError,
    MalformedUUIDError,
    MismatchError,
    NotFoundError,
    SerializationError,
    UnsupportedTypeError,
    UpdateBlockedError,
)
from .schemas import (
    CompareOptions,
    DiffOp,
    DiffSegment,
    NormalizationStats,
    VolatileKind,
    VolatileValue,
)

__all__ = [
    # errors
    "GoldenError",
    "ErrorCodes",
    "SerializationError",
    "UnsupportedTypeError",
    "MalformedUUIDError",
    "NotFoundError",
    "GoldenIOError",
    "MismatchError",
    "UpdateBlockedError",
    "ConfigError",
    # schemas
    "CompareOptions",
    "VolatileKind",
    "VolatileValue",
    "NormalizationStats",
    "DiffOp",
    "DiffSegment",
]
