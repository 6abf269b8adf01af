"""
Pattern Finder: locate volatile substrings (UUIDs, timestamps) in text.

find() is a pure, eager scan:
- results ordered by first appearance (smallest offset first)
- duplicates (identical text) collapsed to one entry
"""

import re
import uuid

from golden_files.domain.errors import MalformedUUIDError
from golden_files.domain.schemas import VolatileKind, VolatileValue

# =============================================================================
# Patterns
# =============================================================================

# RFC 4122: version digit 1-5, variant nibble 8/9/a/b
UUID_PATTERN = re.compile(
    r"[0-9a-fA-F]{8}-[0-9a-fA-F]{4}-[1-5][0-9a-fA-F]{3}-[89abAB][0-9a-fA-F]{3}-[0-9a-fA-F]{12}"
)


def _rfc3339_pattern() -> re.Pattern[str]:
    year = r"([0-9]+)"
    month = r"(0[1-9]|1[012])"
    day = r"(0[1-9]|[12][0-9]|3[01])"
    date_pattern = f"{year}-{month}-{day}"

    hour = r"([01][0-9]|2[0-3])"
    minute = r"([0-5][0-9])"
    second = r"([0-5][0-9]|60)"
    sub_second = r"(\.[0-9]+)?"
    time_pattern = f"{hour}:{minute}:{second}{sub_second}"

    time_zone_offset = r"(([Zz])|([+-]([01][0-9]|2[0-3]):[0-5][0-9]))"

    return re.compile(f"{date_pattern}[Tt]{time_pattern}{time_zone_offset}")


def _rfc7232_pattern() -> re.Pattern[str]:
    day_name = r"(Mon|Tue|Wed|Thu|Fri|Sat|Sun)"
    day = r"[0-9]{2}"
    month = r"(Jan|Feb|Mar|Apr|May|Jun|Jul|Aug|Sep|Oct|Nov|Dec)"
    year = r"[0-9]{4}"
    hour = r"([01][0-9]|2[0-3])"
    minute = r"([0-5][0-9])"
    second = r"([0-5][0-9]|60)"
    # Known zones first; any uppercase token keeps locale abbreviations (BST, ...)
    tz = r"(GMT|CEST|UTC|IST|[A-Z]+)"

    return re.compile(
        f"{day_name}, {day} {month} {year} {hour}:{minute}:{second} {tz}"
    )


RFC3339_PATTERN = _rfc3339_pattern()

# RFC 7232 section 2.2 (Last-Modified)
RFC7232_PATTERN = _rfc7232_pattern()

TIMESTAMP_PATTERNS = (RFC3339_PATTERN, RFC7232_PATTERN)


# =============================================================================
# Finders
# =============================================================================


def _unique_in_order(
    matches: list[tuple[int, str]],
    kind: VolatileKind,
) -> list[VolatileValue]:
    seen: set[str] = set()
    values: list[VolatileValue] = []
    for offset, text in sorted(matches, key=lambda m: m[0]):
        if text not in seen:
            seen.add(text)
            values.append(VolatileValue(text=text, kind=kind, offset=offset))
    return values


def find_uuids(text: str) -> list[VolatileValue]:
    """
    Find unique UUIDs in order of first appearance.

    Args:
        text: Text to scan

    Returns:
        One VolatileValue per distinct UUID text

    Raises:
        MalformedUUIDError: a match fails the strict UUID parse
    """
    matches: list[tuple[int, str]] = []
    for match in UUID_PATTERN.finditer(text):
        uuid_str = match.group(0)
        try:
            uuid.UUID(uuid_str)
        except ValueError as e:
            raise MalformedUUIDError(
                "failed to parse UUID",
                uuid=uuid_str,
                offset=match.start(),
                cause=e,
            ) from e
        matches.append((match.start(), uuid_str))

    return _unique_in_order(matches, VolatileKind.UUID)


def find_timestamps(text: str) -> list[VolatileValue]:
    """
    Find unique RFC3339 and RFC7232 timestamps in order of first appearance.

    Both patterns are applied to the same text; results are merged by offset.
    """
    matches = [
        (match.start(), match.group(0))
        for pattern in TIMESTAMP_PATTERNS
        for match in pattern.finditer(text)
    ]
    return _unique_in_order(matches, VolatileKind.TIMESTAMP)


def find(text: str, kind: VolatileKind) -> list[VolatileValue]:
    """Find unique volatile values of the given kind."""
    if VolatileKind(kind) is VolatileKind.UUID:
        return find_uuids(text)
    return find_timestamps(text)
