"""
Golden file assertions with UUID / datetime agnostic normalization.

Compare generated output (a JSON-marshaled object or raw text) against a
stored reference file:
- Normalize volatile elements (UUIDs, RFC3339 / RFC7232 times)
- Keep UUID identity: repeated UUIDs map to the same placeholder
- Fail with a readable diff; optionally regenerate the golden file

Usage:
    from golden_files import CompareOptions, compare_with_golden

    compare_with_golden(
        "testdata/person.golden.json",
        person,
        CompareOptions(marshal_input_as_json=True, datetime_agnostic=True),
        update=False,
    )
"""

from .config import GoldenConfig, load_config
from .core.compare import GoldenComparer, compare_with_golden
from .core.normalize import NormalizationWarning, Normalizer
from .domain.errors import (
    ConfigError,
    GoldenError,
    GoldenIOError,
    MalformedUUIDError,
    MismatchError,
    NotFoundError,
    SerializationError,
    UnsupportedTypeError,
    UpdateBlockedError,
)
from .domain.schemas import CompareOptions

__version__ = "0.1.0"

__all__ = [
    # Comparison
    "compare_with_golden",
    "GoldenComparer",
    "CompareOptions",
    # Normalization
    "Normalizer",
    "NormalizationWarning",
    # Config
    "GoldenConfig",
    "load_config",
    # Errors
    "GoldenError",
    "SerializationError",
    "UnsupportedTypeError",
    "MalformedUUIDError",
    "NotFoundError",
    "GoldenIOError",
    "MismatchError",
    "UpdateBlockedError",
    "ConfigError",
]
