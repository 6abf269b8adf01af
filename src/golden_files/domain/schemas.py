"""
Data schemas for golden comparisons.

- CompareOptions: immutable per comparison call
- VolatileValue: identity is the exact matched text
- NormalizationStats: counters for one normalization pass
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any

from golden_files.domain.constants import UUID_PLACEHOLDER_PATTERN

# =============================================================================
# Options
# =============================================================================

@dataclass(frozen=True)
class CompareOptions:
    """
    How the comparison and golden file production take place.

    uuid_agnostic:
        Replace UUIDs in both the golden text and the actual text before
        comparing. Each distinct UUID becomes
        "00000000-0000-0000-0000-000000000001", "...002", ... in order of
        first appearance, so locality is still compared.
    datetime_agnostic:
        Replace RFC3339 times with "0001-01-01T00:00:00Z" and RFC7232
        last-modified times with "Mon, 01 Jan 0001 00:00:00 GMT".
    marshal_input_as_json:
        JSON-encode the actual object. Otherwise it must be bytes, str or a
        value with its own __str__.
    """
    uuid_agnostic: bool = False
    datetime_agnostic: bool = False
    marshal_input_as_json: bool = False

    @classmethod
    def agnostic(cls, marshal_input_as_json: bool = True) -> "CompareOptions":
        """Both UUID and datetime normalization enabled."""
        return cls(
            uuid_agnostic=True,
            datetime_agnostic=True,
            marshal_input_as_json=marshal_input_as_json,
        )

    @property
    def normalizes(self) -> bool:
        """True if any normalization is enabled."""
        return self.uuid_agnostic or self.datetime_agnostic


# =============================================================================
# Volatile Values
# =============================================================================

class VolatileKind(str, Enum):
    """Kinds of volatile substrings."""
    UUID = "uuid"
    TIMESTAMP = "timestamp"


@dataclass(frozen=True)
class VolatileValue:
    """A matched volatile substring; offset is its first occurrence."""
    text: str
    kind: VolatileKind
    offset: int = field(default=0, compare=False)


PlaceholderMapping = dict[str, str]


def uuid_placeholder(index: int) -> str:
    """Placeholder for the index-th (1-based) distinct UUID."""
    return UUID_PLACEHOLDER_PATTERN % index


def build_placeholder_mapping(values: list[VolatileValue]) -> PlaceholderMapping:
    """
    Map each distinct value text to its sequential placeholder.

    Args:
        values: Values in first-appearance order (as returned by find)

    Returns:
        Ordered mapping {value text: placeholder}
    """
    mapping: PlaceholderMapping = {}
    for value in values:
        if value.text not in mapping:
            mapping[value.text] = uuid_placeholder(len(mapping) + 1)
    return mapping


# =============================================================================
# Stats
# =============================================================================

@dataclass
class NormalizationStats:
    """Replacement counts of one normalization pass."""
    uuid_count: int = 0
    rfc3339_count: int = 0
    rfc7232_count: int = 0

    @property
    def timestamp_count(self) -> int:
        """RFC3339 + RFC7232 spans replaced."""
        return self.rfc3339_count + self.rfc7232_count

    def total(self) -> int:
        """Total replacement count."""
        return self.uuid_count + self.timestamp_count

    def to_dict(self) -> dict[str, int]:
        """Convert to dictionary."""
        return {
            "UUID": self.uuid_count,
            "RFC3339": self.rfc3339_count,
            "RFC7232": self.rfc7232_count,
            "total": self.total(),
        }


# =============================================================================
# Diff
# =============================================================================

class DiffOp(str, Enum):
    """Diff operation of a segment."""
    EQUAL = "equal"
    INSERT = "insert"
    DELETE = "delete"


@dataclass(frozen=True)
class DiffSegment:
    """One span of a text diff."""
    op: DiffOp
    text: str

    def to_dict(self) -> dict[str, Any]:
        """JSON serialization."""
        return {"op": self.op.value, "text": self.text}
