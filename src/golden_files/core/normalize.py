"""
Normalizer for golden file comparisons.

Handles volatile elements that would cause false test failures:
- UUIDs → 00000000-0000-0000-0000-000000000001, ...002, ... (identity kept)
- RFC3339 times → 0001-01-01T00:00:00Z (all collapse to one constant)
- RFC7232 times → Mon, 01 Jan 0001 00:00:00 GMT (all collapse to one constant)

Every pass is a pure function of its input text. Includes replacement
counting to detect over-normalization.
"""

import logging
import warnings

from golden_files.core.patterns import RFC3339_PATTERN, RFC7232_PATTERN, find_uuids
from golden_files.domain.constants import (
    DEFAULT_TIMESTAMP_THRESHOLD,
    DEFAULT_UUID_THRESHOLD,
    RFC3339_PLACEHOLDER,
    RFC7232_PLACEHOLDER,
)
from golden_files.domain.schemas import (
    CompareOptions,
    NormalizationStats,
    VolatileKind,
    build_placeholder_mapping,
)

logger = logging.getLogger(__name__)


class NormalizationWarning(UserWarning):
    """Warning for suspicious normalization patterns."""
    pass


class Normalizer:
    """
    Normalize text for stable golden comparisons.

    Tracks replacement counts of the last pass to detect over-normalization:
    if too many UUIDs or timestamps are replaced, real content may be masked.

    Usage:
        normalizer = Normalizer()
        text = normalizer.normalize_text(text, CompareOptions.agnostic())
        normalizer.stats.to_dict()
    """

    def __init__(
        self,
        uuid_threshold: int | None = None,
        timestamp_threshold: int | None = None,
    ):
        """
        Args:
            uuid_threshold: Max distinct UUIDs per pass before warning (None = default 20)
            timestamp_threshold: Max timestamp spans per pass before warning (None = default 20)
        """
        self.uuid_threshold = uuid_threshold if uuid_threshold is not None else DEFAULT_UUID_THRESHOLD
        self.timestamp_threshold = (
            timestamp_threshold if timestamp_threshold is not None else DEFAULT_TIMESTAMP_THRESHOLD
        )
        self._stats = NormalizationStats()

    @property
    def stats(self) -> NormalizationStats:
        """Statistics of the last normalization pass."""
        return self._stats

    def reset_stats(self) -> None:
        """Reset replacement counters."""
        self._stats = NormalizationStats()

    def check_thresholds(self) -> list[str]:
        """
        Check if replacement counts of the last pass exceed thresholds.

        Returns:
            List of warning messages (empty if all OK)
        """
        messages = []

        if self._stats.uuid_count > self.uuid_threshold:
            messages.append(
                f"UUID replacements ({self._stats.uuid_count}) exceed threshold ({self.uuid_threshold}). "
                f"Text may contain abnormally many UUIDs or false positives."
            )

        if self._stats.timestamp_count > self.timestamp_threshold:
            messages.append(
                f"Timestamp replacements ({self._stats.timestamp_count}) exceed threshold "
                f"({self.timestamp_threshold}). "
                f"Text may contain abnormally many timestamps or false positives."
            )

        return messages

    def replace_uuids(self, text: str) -> str:
        """
        Replace every distinct UUID with its sequential placeholder.

        Replacement is literal, so a UUID embedded in a larger token
        (e.g. a URL) is replaced as well.
        """
        mapping = build_placeholder_mapping(find_uuids(text))
        result = text
        for uuid_str, placeholder in mapping.items():
            result = result.replace(uuid_str, placeholder)

        self._stats.uuid_count += len(mapping)
        logger.debug(f"Replaced {len(mapping)} distinct UUID(s)")
        return result

    def replace_times(self, text: str) -> str:
        """
        Replace all RFC3339 times, then all RFC7232 times in the result.
        """
        result, rfc3339_count = RFC3339_PATTERN.subn(RFC3339_PLACEHOLDER, text)
        result, rfc7232_count = RFC7232_PATTERN.subn(RFC7232_PLACEHOLDER, result)

        self._stats.rfc3339_count += rfc3339_count
        self._stats.rfc7232_count += rfc7232_count
        logger.debug(
            f"Replaced {rfc3339_count} RFC3339 and {rfc7232_count} RFC7232 time(s)"
        )
        return result

    def normalize(self, text: str, kind: VolatileKind) -> str:
        """
        Run a single pass of the given kind.

        Args:
            text: Text to normalize
            kind: VolatileKind.UUID or VolatileKind.TIMESTAMP

        Returns:
            Normalized text
        """
        self.reset_stats()
        if VolatileKind(kind) is VolatileKind.UUID:
            result = self.replace_uuids(text)
        else:
            result = self.replace_times(text)
        self.warn_on_thresholds()
        return result

    def normalize_text(self, text: str, options: CompareOptions, warn: bool = True) -> str:
        """
        Run the passes enabled by options: UUIDs first, then times.

        Args:
            text: Text to normalize
            options: Comparison options
            warn: Emit threshold warnings for this pass; pass False and call
                  warn_on_thresholds() later to report once for several passes

        Returns:
            Normalized text (unchanged if no normalization is enabled)
        """
        self.reset_stats()
        result = text
        if options.uuid_agnostic:
            result = self.replace_uuids(result)
        if options.datetime_agnostic:
            result = self.replace_times(result)
        if warn:
            self.warn_on_thresholds()
        return result

    def warn_on_thresholds(self, stacklevel: int = 2) -> list[str]:
        """
        Log and emit a NormalizationWarning per exceeded threshold of the last pass.

        Args:
            stacklevel: warnings.warn stack level as seen from the caller

        Returns:
            Warning messages emitted
        """
        messages = self.check_thresholds()
        for message in messages:
            logger.warning(message)
            warnings.warn(message, NormalizationWarning, stacklevel=stacklevel + 1)
        return messages


# =============================================================================
# Convenience Functions
# =============================================================================


def replace_uuids(text: str) -> str:
    """
    Replace UUIDs with "00000000-0000-0000-0000-000000000001",
    "00000000-0000-0000-0000-000000000002", ... in order of first appearance.
    """
    return Normalizer().replace_uuids(text)


def replace_times(text: str) -> str:
    """
    Replace RFC3339 times with "0001-01-01T00:00:00Z" and RFC7232
    (section 2.2) times with "Mon, 01 Jan 0001 00:00:00 GMT".
    """
    return Normalizer().replace_times(text)


def normalize(text: str, kind: VolatileKind) -> str:
    """Normalize text for a single volatile kind."""
    return Normalizer().normalize(text, kind)


def normalize_text(text: str, options: CompareOptions) -> str:
    """Normalize text according to the enabled options."""
    return Normalizer().normalize_text(text, options)
