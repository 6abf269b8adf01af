"""
Comparator: actual object vs. golden file.

Steps (linear, any failure aborts):
1. serialize actual object
2. update mode: normalize + write golden file
3. read golden file (always, even right after an update)
4. normalize golden text and actual text independently
5. exact comparison → MismatchError with pretty diff
"""

import logging
import os
from pathlib import Path
from typing import Any

from golden_files.config import GoldenConfig
from golden_files.core.diff import pretty_diff
from golden_files.core.normalize import Normalizer
from golden_files.core.serialize import from_bytes, serialize, to_bytes
from golden_files.core.store import read_reference, write_reference
from golden_files.domain.constants import ENV_NO_COLOR
from golden_files.domain.errors import MismatchError
from golden_files.domain.schemas import CompareOptions

logger = logging.getLogger(__name__)


def compare_with_golden(
    golden_file: str | Path,
    actual: Any,
    options: CompareOptions | None = None,
    *,
    update: bool = False,
    color: bool | None = None,
    normalizer: Normalizer | None = None,
) -> None:
    """
    Compare the actual object against the golden file.

    When adding new tests, run them once with update=True to create the
    initial golden version.

    Args:
        golden_file: Golden file path (relative paths resolve against cwd)
        actual: Actual object under test
        options: Serialization / normalization options
        update: Rewrite the golden file with the (normalized) actual text first
        color: ANSI colors in the mismatch diff (None: on unless NO_COLOR is set)
        normalizer: Normalizer to use (thresholds); a fresh one by default

    Raises:
        SerializationError / UnsupportedTypeError: actual has no text form
        MalformedUUIDError: UUID-shaped text failed to parse
        GoldenIOError: golden file could not be written
        NotFoundError: golden file could not be read
        MismatchError: normalized texts differ
    """
    options = options or CompareOptions()
    normalizer = normalizer or Normalizer()
    path = Path(golden_file).resolve()
    if color is None:
        color = not os.environ.get(ENV_NO_COLOR)

    actual_text = serialize(actual, options.marshal_input_as_json)

    if update:
        # Concrete UUIDs/times never reach the golden file
        write_reference(path, to_bytes(normalizer.normalize_text(actual_text, options, warn=False)))

    expected_text = from_bytes(read_reference(path))

    # Independent passes: each side builds its own placeholder mapping
    expected_normalized = normalizer.normalize_text(expected_text, options, warn=False)
    actual_normalized = normalizer.normalize_text(actual_text, options, warn=False)

    # Thresholds are reported once per comparison, for the actual output
    normalizer.warn_on_thresholds()

    if expected_normalized != actual_normalized:
        logger.debug(f"Golden file mismatch: {path}")
        raise MismatchError(
            str(path),
            pretty_diff(expected_normalized, actual_normalized, color=color),
        )

    logger.debug(f"Golden file match: {path}")


class GoldenComparer:
    """
    Compare objects against golden files with shared settings.

    Usage:
        comparer = GoldenComparer(load_config(), base_dir=Path(__file__).parent)
        comparer.compare("person.golden.json", person, CompareOptions(marshal_input_as_json=True))
    """

    def __init__(
        self,
        config: GoldenConfig | None = None,
        base_dir: Path | None = None,
    ):
        """
        Args:
            config: Settings (update mode, colors, thresholds)
            base_dir: Directory relative golden paths resolve against
                      (default: config.base_dir, then cwd)
        """
        self.config = config or GoldenConfig()
        self.base_dir = base_dir or self.config.base_dir

    @property
    def update(self) -> bool:
        """Whether golden files are rewritten."""
        return self.config.update

    def resolve(self, golden_file: str | Path) -> Path:
        """Absolute golden file path."""
        path = Path(golden_file)
        if not path.is_absolute() and self.base_dir is not None:
            path = Path(self.base_dir) / path
        return path.resolve()

    def compare(
        self,
        golden_file: str | Path,
        actual: Any,
        options: CompareOptions | None = None,
    ) -> Path:
        """
        Compare actual against a golden file (see compare_with_golden).

        Returns:
            The resolved golden file path
        """
        path = self.resolve(golden_file)
        compare_with_golden(
            path,
            actual,
            options,
            update=self.config.update,
            color=self.config.color,
            normalizer=Normalizer(
                uuid_threshold=self.config.uuid_threshold,
                timestamp_threshold=self.config.timestamp_threshold,
            ),
        )
        return path

    __call__ = compare
