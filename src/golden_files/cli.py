#!/usr/bin/env python
"""
Normalize existing golden files in place.

Useful after enabling uuid/datetime agnostic options on tests whose golden
files still contain concrete values.

Usage:
    python -m golden_files normalize --uuid --datetime testdata/*.golden.json

    # Report files that would change without writing:
    python -m golden_files normalize --uuid --check testdata/*.golden.json
"""

import argparse
import logging
import sys
from pathlib import Path

from golden_files.core.normalize import Normalizer
from golden_files.core.serialize import from_bytes, to_bytes
from golden_files.core.store import read_reference, write_reference
from golden_files.domain.errors import GoldenError
from golden_files.domain.schemas import CompareOptions

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="golden_files",
        description="Golden file utilities",
    )
    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Enable debug logging",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    normalize_parser = subparsers.add_parser(
        "normalize",
        help="Replace UUIDs / times in golden files with placeholders",
        epilog="Review rewritten files before committing!",
    )
    normalize_parser.add_argument(
        "files",
        nargs="+",
        type=Path,
        help="Golden files to normalize",
    )
    normalize_parser.add_argument(
        "--uuid",
        action="store_true",
        help="Replace UUIDs with sequential placeholders",
    )
    normalize_parser.add_argument(
        "--datetime",
        action="store_true",
        help="Replace RFC3339 / RFC7232 times with fixed values",
    )
    normalize_parser.add_argument(
        "--check",
        action="store_true",
        help="Do not write; exit 1 if any file would change",
    )
    return parser


def run_normalize(files: list[Path], options: CompareOptions, check: bool) -> int:
    """
    Normalize each file; in check mode only report.

    Returns:
        Exit code
    """
    normalizer = Normalizer()
    changed: list[Path] = []

    for path in files:
        text = from_bytes(read_reference(path))
        normalized = normalizer.normalize_text(text, options)
        if normalized == text:
            logger.debug(f"Already normalized: {path}")
            continue

        changed.append(path)
        if check:
            print(f"would normalize: {path}")
        else:
            write_reference(path, to_bytes(normalized))
            print(f"normalized: {path} ({normalizer.stats.total()} replacement(s))")

    if check and changed:
        return 1
    return 0


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    if args.command == "normalize":
        if not (args.uuid or args.datetime):
            parser.error("normalize: pass --uuid and/or --datetime")

        options = CompareOptions(uuid_agnostic=args.uuid, datetime_agnostic=args.datetime)
        try:
            return run_normalize(args.files, options, args.check)
        except GoldenError as e:
            print(str(e), file=sys.stderr)
            return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())
