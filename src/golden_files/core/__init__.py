"""
Core layer: serialize, find, normalize, store, compare.

Everything here is synchronous and free of process-wide state.
"""

from .compare import GoldenComparer, compare_with_golden
from .diff import compute_diff, pretty_diff, render_pretty
from .normalize import (
    NormalizationWarning,
    Normalizer,
    normalize,
    normalize_text,
    replace_times,
    replace_uuids,
)
from .patterns import find, find_timestamps, find_uuids
from .serialize import serialize
from .store import read_reference, write_reference

__all__ = [
    # serialize
    "serialize",
    # patterns
    "find",
    "find_uuids",
    "find_timestamps",
    # normalize
    "Normalizer",
    "NormalizationWarning",
    "normalize",
    "normalize_text",
    "replace_uuids",
    "replace_times",
    # store
    "read_reference",
    "write_reference",
    # diff
    "compute_diff",
    "render_pretty",
    "pretty_diff",
    # compare
    "compare_with_golden",
    "GoldenComparer",
]
