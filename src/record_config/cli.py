"""Command line entry point: extract record configs from a definition file."""

from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path

from record_config.builder import extract_records
from record_config.parsing import RecordParser
from record_config.types import Outcome

logger = logging.getLogger(__name__)


def run_file(path: Path, output: Path | None, indent: int | None, include_all: bool) -> int:
    """Extract every record in path and write the JSON result."""
    try:
        records = RecordParser().parse(path.read_text(encoding="utf-8"))
    except (OSError, SyntaxError, ValueError) as e:
        print(f"Error: {path}: {e}", file=sys.stderr)
        return 1

    extractions = extract_records(records)
    failed = [e for e in extractions if e.outcome is Outcome.FAILED]
    for extraction in failed:
        print(f"Error: {extraction.record_name}: {extraction.error}", file=sys.stderr)

    if include_all:
        payload = [e.to_dict() for e in extractions]
    else:
        payload = [e.config.to_dict() for e in extractions if e.config is not None]

    text = json.dumps(payload, indent=indent)
    if output is not None:
        output.write_text(text + "\n", encoding="utf-8")
        logger.info("Wrote %d record(s) to %s", len(payload), output)
    else:
        print(text)

    return 1 if failed else 0


def main(argv: list[str] | None = None) -> int:
    """Main entry point."""
    arg_parser = argparse.ArgumentParser(
        description="Extract record configs from annotated record definitions"
    )
    arg_parser.add_argument(
        "file",
        type=Path,
        help="Path to the record definition file",
    )
    arg_parser.add_argument(
        "-o", "--output",
        type=Path,
        default=None,
        help="Write JSON to this file instead of stdout",
    )
    arg_parser.add_argument(
        "--indent",
        type=int,
        default=2,
        help="JSON indentation (default: 2)",
    )
    arg_parser.add_argument(
        "--all",
        action="store_true",
        dest="include_all",
        help="Report every record, including ones without a primary key",
    )
    arg_parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Enable debug logging",
    )

    args = arg_parser.parse_args(argv)

    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.WARNING)

    if not args.file.exists():
        print(f"Error: File not found: {args.file}", file=sys.stderr)
        return 1

    return run_file(args.file, args.output, args.indent, args.include_all)


if __name__ == "__main__":
    sys.exit(main())
