"""
Serializer: actual object → canonical text.

Two modes:
- JSON (marshal_input_as_json=True): 2-space indented, keys in the order the
  object provides them
- Raw: bytes-like → str → value with its own __str__ (this precedence)

Bytes are decoded as UTF-8 with surrogateescape so that arbitrary byte
sequences round-trip through the golden file unchanged.
"""

import base64
import dataclasses
import json
import logging
import uuid
from datetime import UTC, date, datetime, time
from decimal import Decimal
from enum import Enum
from pathlib import PurePath
from typing import Any

from golden_files.domain.constants import JSON_INDENT
from golden_files.domain.errors import SerializationError, UnsupportedTypeError

logger = logging.getLogger(__name__)

TEXT_ENCODING = "utf-8"
TEXT_ERRORS = "surrogateescape"


# =============================================================================
# Text <-> Bytes
# =============================================================================


def to_bytes(text: str) -> bytes:
    """Encode text for the golden file."""
    return text.encode(TEXT_ENCODING, TEXT_ERRORS)


def from_bytes(data: bytes | bytearray | memoryview) -> str:
    """Decode golden file bytes (never fails)."""
    return bytes(data).decode(TEXT_ENCODING, TEXT_ERRORS)


# =============================================================================
# JSON
# =============================================================================


def format_datetime(value: datetime) -> str:
    """
    RFC3339 text for a datetime.

    Naive values are treated as UTC. UTC is written as "Z".
    """
    if value.tzinfo is None:
        value = value.replace(tzinfo=UTC)
    text = value.isoformat()
    if text.endswith("+00:00"):
        text = text[: -len("+00:00")] + "Z"
    return text


def _public_attributes(items: Any) -> dict[str, Any]:
    return {k: v for k, v in items if not k.startswith("_")}


def _json_default(value: Any) -> Any:
    """
    json.dumps hook for values the json module does not know.

    Fields starting with "_" are invisible, the same way unexported fields
    are left out by other JSON encoders.
    """
    to_dict = getattr(value, "to_dict", None)
    if callable(to_dict) and not isinstance(value, type):
        return to_dict()

    if dataclasses.is_dataclass(value) and not isinstance(value, type):
        return _public_attributes(
            (f.name, getattr(value, f.name)) for f in dataclasses.fields(value)
        )

    if isinstance(value, uuid.UUID):
        return str(value)

    if isinstance(value, datetime):
        return format_datetime(value)

    if isinstance(value, (date, time)):
        return value.isoformat()

    if isinstance(value, Decimal):
        return str(value)

    if isinstance(value, Enum):
        return value.value

    if isinstance(value, PurePath):
        return str(value)

    if isinstance(value, (bytes, bytearray, memoryview)):
        return base64.b64encode(bytes(value)).decode("ascii")

    if isinstance(value, (set, frozenset)):
        return sorted(value, key=repr)

    if hasattr(value, "__dict__") and not isinstance(value, type):
        return _public_attributes(vars(value).items())

    raise TypeError(f"Object of type {type(value).__name__} is not JSON serializable")


def marshal_json(value: Any) -> str:
    """
    Marshal a value to indented JSON.

    Raises:
        SerializationError: unsupported value, circular reference, NaN/Inf
    """
    try:
        return json.dumps(
            value,
            indent=JSON_INDENT,
            ensure_ascii=False,
            allow_nan=False,
            default=_json_default,
        )
    except (TypeError, ValueError, RecursionError) as e:
        raise SerializationError(
            "failed to marshal actual object",
            type=type(value).__name__,
            cause=e,
        ) from e


# =============================================================================
# Raw
# =============================================================================


def has_own_str(value: Any) -> bool:
    """True if the value's class renders itself via its own __str__."""
    return type(value).__str__ is not object.__str__


def render_raw(value: Any) -> str:
    """
    Text of a raw value.

    Precedence: bytes-like, then str, then a value with its own __str__.

    Raises:
        UnsupportedTypeError: none of the above applies
    """
    if isinstance(value, (bytes, bytearray, memoryview)):
        return from_bytes(value)

    if isinstance(value, str):
        return value

    if has_own_str(value):
        return str(value)

    raise UnsupportedTypeError(
        "don't know how to convert object to string "
        "(consider enabling the marshal_input_as_json option)",
        type=type(value).__name__,
        value=repr(value),
    )


def serialize(value: Any, marshal_input_as_json: bool = False) -> str:
    """
    Convert the actual object to text.

    Args:
        value: Actual object under test
        marshal_input_as_json: JSON-encode instead of treating as raw text

    Returns:
        Text to compare against the golden file
    """
    if marshal_input_as_json:
        text = marshal_json(value)
    else:
        text = render_raw(value)

    logger.debug(
        f"Serialized {type(value).__name__} "
        f"({'json' if marshal_input_as_json else 'raw'}, {len(text)} chars)"
    )
    return text
