#!/usr/bin/env python3
"""
Unified CLI for document scanning checks.

Usage:
    docscan mrz ocr.txt --kind id-card     # Parse an ID-card MRZ from OCR text
    docscan mrz --kind passport < ocr.txt  # Parse a passport MRZ from stdin
    docscan mrz ocr.txt --pairs            # Print display label/value pairs
    docscan frame request.json             # Check a rectangle against the mask
"""

import argparse
import logging
import sys

from logging_utils import configure_logging, add_logging_args
from cli.mrz import add_mrz_subparser
from cli.frame import add_frame_subparser

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="docscan",
        description="Document scanner core - MRZ parsing and capture framing checks",
    )
    add_logging_args(parser)
    subparsers = parser.add_subparsers(dest="command", help="Command to run")

    add_mrz_subparser(subparsers)
    add_frame_subparser(subparsers)
    return parser


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    configure_logging(args.log_level, args.verbose, args.quiet)

    cmd = getattr(args, "_cmd", None)
    if cmd is None:
        parser.print_help()
        return 1
    return cmd(args)


if __name__ == "__main__":
    sys.exit(main())
