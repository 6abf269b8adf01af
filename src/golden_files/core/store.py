"""
Reference Store: read/write golden file bytes.

- read: missing file → NotFoundError (OSError chained)
- write: parent directories created first, unconditional overwrite
- No locking: one golden path per comparison at a time is the caller's job
"""

import logging
import os
from pathlib import Path

from golden_files.domain.constants import GOLDEN_DIR_MODE, GOLDEN_FILE_MODE
from golden_files.domain.errors import GoldenIOError, NotFoundError

logger = logging.getLogger(__name__)


def read_reference(path: Path) -> bytes:
    """
    Read golden file contents.

    Args:
        path: Golden file path

    Returns:
        Raw file bytes

    Raises:
        NotFoundError: file missing or unreadable
    """
    try:
        data = path.read_bytes()
    except OSError as e:
        raise NotFoundError(
            "failed to read golden file",
            path=str(path),
            cause=e,
        ) from e

    logger.debug(f"Read golden file {path} ({len(data)} bytes)")
    return data


def write_reference(path: Path, data: bytes) -> Path:
    """
    Write golden file contents, creating parent directories.

    Args:
        path: Golden file path
        data: Bytes to write

    Returns:
        The written path

    Raises:
        GoldenIOError: directory creation or write failed
    """
    try:
        path.parent.mkdir(parents=True, exist_ok=True, mode=GOLDEN_DIR_MODE)
    except OSError as e:
        raise GoldenIOError(
            "failed to create directory (and potential parent dirs) to write golden file to",
            path=str(path.parent),
            cause=e,
        ) from e

    try:
        fd = os.open(path, os.O_WRONLY | os.O_CREAT | os.O_TRUNC, GOLDEN_FILE_MODE)
        with os.fdopen(fd, "wb") as f:
            f.write(data)
    except OSError as e:
        raise GoldenIOError(
            "failed to update golden file",
            path=str(path),
            cause=e,
        ) from e

    logger.info(f"Updated golden file {path} ({len(data)} bytes)")
    return path
