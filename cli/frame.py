"""Frame command CLI parsing and control flow."""

from __future__ import annotations

import argparse
import json
import logging
import sys

from pydantic import ValidationError

from framing import evaluate_rectangle

from .schemas import FrameCheckRequest

logger = logging.getLogger(__name__)

EXIT_REJECTED = 2


def add_frame_subparser(subparsers: argparse._SubParsersAction) -> None:
    frame_parser = subparsers.add_parser(
        "frame",
        help="Check a detected document rectangle against the capture mask",
    )
    frame_parser.add_argument(
        "source",
        nargs="?",
        help="JSON request file (default: stdin)",
    )
    frame_parser.set_defaults(_cmd=cmd_frame)


def cmd_frame(args: argparse.Namespace) -> int:
    try:
        if not args.source or args.source == "-":
            request = FrameCheckRequest.model_validate_json(sys.stdin.read())
        else:
            with open(args.source, "r", encoding="utf-8") as f:
                request = FrameCheckRequest.model_validate_json(f.read())
    except OSError as exc:
        logger.error("Cannot read %s: %s", args.source, exc)
        return 1
    except ValidationError as exc:
        logger.error("Invalid frame request: %s", exc)
        return 1

    report = evaluate_rectangle(
        request.observation(),
        request.mask.to_rect(),
        request.tolerances.to_tolerances(),
    )
    print(json.dumps(report.to_dict(), indent=2))

    if not report.accepted:
        logger.info("Frame rejected: %s", report.rejection_reason)
        return EXIT_REJECTED
    return 0
