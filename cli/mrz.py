"""MRZ command CLI parsing and control flow."""

from __future__ import annotations

import argparse
import json
import logging
import sys

from mrz_text import DocumentKind, check_digit_report, read_mrz

logger = logging.getLogger(__name__)

# Exit code for input that parsed but did not yield a valid record
EXIT_INVALID = 2


def add_mrz_subparser(subparsers: argparse._SubParsersAction) -> None:
    mrz_parser = subparsers.add_parser(
        "mrz",
        help="Parse an MRZ out of OCR text",
    )
    mrz_parser.add_argument(
        "source",
        nargs="?",
        help="Text file with OCR output (default: stdin)",
    )
    mrz_parser.add_argument(
        "--kind", "-k",
        choices=[kind.value for kind in DocumentKind],
        default=DocumentKind.PASSPORT.value,
        help="Document layout to parse (default: passport)",
    )
    mrz_parser.add_argument(
        "--pairs",
        action="store_true",
        help="Print display label/value pairs instead of the full record",
    )
    mrz_parser.add_argument(
        "--check-digits",
        action="store_true",
        help="Include ICAO 9303 check-digit verification in the output",
    )
    mrz_parser.set_defaults(_cmd=cmd_mrz)


def _read_source(source: str | None) -> str:
    if not source or source == "-":
        return sys.stdin.read()
    with open(source, "r", encoding="utf-8") as f:
        return f.read()


def cmd_mrz(args: argparse.Namespace) -> int:
    try:
        raw_text = _read_source(args.source)
    except OSError as exc:
        logger.error("Cannot read %s: %s", args.source, exc)
        return 1

    record = read_mrz(raw_text, args.kind)
    if args.pairs:
        output = [{"label": label, "value": value} for label, value in record.to_key_value_pairs()]
    else:
        output = record.to_dict()
        if args.check_digits:
            output["check_digits"] = check_digit_report(record)

    print(json.dumps(output, indent=2))

    if not record.is_valid:
        logger.warning("No valid %s MRZ found", args.kind)
        return EXIT_INVALID
    logger.info("Parsed %s MRZ for %s", args.kind, record.document_number)
    return 0
