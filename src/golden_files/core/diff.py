"""
Golden diff utilities.

Provides human-readable diff output for golden test failures: a line-level
diff refined to characters inside changed blocks, rendered as
equal / insert / delete spans.
"""

import difflib

from golden_files.domain.constants import DIFF_CHAR_LIMIT
from golden_files.domain.schemas import DiffOp, DiffSegment

ANSI_INSERT = "\x1b[32m"
ANSI_DELETE = "\x1b[31m"
ANSI_RESET = "\x1b[0m"


def _append(segments: list[DiffSegment], op: DiffOp, text: str) -> None:
    """Append a span, merging it into the previous one with the same op."""
    if not text:
        return
    if segments and segments[-1].op is op:
        segments[-1] = DiffSegment(op, segments[-1].text + text)
    else:
        segments.append(DiffSegment(op, text))


def _diff_chars(
    segments: list[DiffSegment],
    old: str,
    new: str,
    char_limit: int = DIFF_CHAR_LIMIT,
) -> None:
    if len(old) > char_limit or len(new) > char_limit:
        # Whole block replaced
        _append(segments, DiffOp.DELETE, old)
        _append(segments, DiffOp.INSERT, new)
        return

    matcher = difflib.SequenceMatcher(None, old, new, autojunk=False)
    for tag, i1, i2, j1, j2 in matcher.get_opcodes():
        if tag == "equal":
            _append(segments, DiffOp.EQUAL, old[i1:i2])
            continue
        # replace = delete + insert
        _append(segments, DiffOp.DELETE, old[i1:i2])
        _append(segments, DiffOp.INSERT, new[j1:j2])


def compute_diff(
    expected: str,
    actual: str,
    char_limit: int = DIFF_CHAR_LIMIT,
) -> list[DiffSegment]:
    """
    Diff expected (golden) text against actual text.

    Args:
        expected: Golden text (old side)
        actual: Actual text (new side)
        char_limit: Changed blocks longer than this are shown as one
                    delete + one insert instead of a character diff

    Returns:
        Ordered spans; concatenating EQUAL+DELETE gives expected,
        EQUAL+INSERT gives actual
    """
    segments: list[DiffSegment] = []
    old_lines = expected.splitlines(keepends=True)
    new_lines = actual.splitlines(keepends=True)

    matcher = difflib.SequenceMatcher(None, old_lines, new_lines, autojunk=False)
    for tag, i1, i2, j1, j2 in matcher.get_opcodes():
        old = "".join(old_lines[i1:i2])
        new = "".join(new_lines[j1:j2])

        if tag == "equal":
            _append(segments, DiffOp.EQUAL, old)
        elif tag == "delete":
            _append(segments, DiffOp.DELETE, old)
        elif tag == "insert":
            _append(segments, DiffOp.INSERT, new)
        else:
            _diff_chars(segments, old, new, char_limit)

    return segments


def render_pretty(segments: list[DiffSegment], color: bool = True) -> str:
    """
    Render diff spans as text.

    Args:
        segments: Spans from compute_diff
        color: ANSI colors (green insert, red delete) instead of
               {+insert+} / [-delete-] markers

    Returns:
        Rendered diff
    """
    parts = []
    for segment in segments:
        if segment.op is DiffOp.INSERT:
            if color:
                parts.append(f"{ANSI_INSERT}{segment.text}{ANSI_RESET}")
            else:
                parts.append(f"{{+{segment.text}+}}")
        elif segment.op is DiffOp.DELETE:
            if color:
                parts.append(f"{ANSI_DELETE}{segment.text}{ANSI_RESET}")
            else:
                parts.append(f"[-{segment.text}-]")
        else:
            parts.append(segment.text)
    return "".join(parts)


def pretty_diff(expected: str, actual: str, color: bool = True) -> str:
    """Convenience: compute and render the diff in one call."""
    return render_pretty(compute_diff(expected, actual), color=color)
