"""
MRZ line classification and extraction from raw OCR text.

OCR output is noisy: lines arrive with stray characters, out of order
captions and partial reads. Classification is therefore permissive (a
pattern may match anywhere inside the line) and extraction never raises.
"""

from __future__ import annotations

import logging

from config import MAX_MRZ_LINE_LENGTH, MIN_MRZ_LINE_LENGTH

from .patterns import MRZ_LINE_PATTERNS, compile_pattern

logger = logging.getLogger(__name__)


def is_candidate_line(line: str) -> bool:
    """Check if a line looks like part of an MRZ.

    Args:
        line: A single OCR text line.

    Returns:
        True if the line length is within the MRZ bounds and at least one
        MRZ line shape occurs somewhere in it.
    """
    if not MIN_MRZ_LINE_LENGTH <= len(line) <= MAX_MRZ_LINE_LENGTH:
        return False
    return any(compile_pattern(p).search(line) for p in MRZ_LINE_PATTERNS)


def split_ocr_lines(raw_text: str) -> list[str]:
    """Split OCR text into stripped, non-empty lines, preserving order."""
    lines = (line.strip() for line in raw_text.splitlines())
    return [line for line in lines if line]


def extract_mrz_lines(raw_text: str) -> list[str]:
    """Extract the first contiguous run of MRZ-shaped lines.

    Scanning stops at the first non-candidate line after the run has
    started, so only the first MRZ-shaped block in the text is returned.

    Args:
        raw_text: Multi-line OCR output.

    Returns:
        The run of candidate lines in original order (empty if none).
    """
    lines = split_ocr_lines(raw_text)

    start = next((i for i, line in enumerate(lines) if is_candidate_line(line)), None)
    if start is None:
        logger.debug("No MRZ lines found in %d OCR lines", len(lines))
        return []

    mrz_lines = []
    for line in lines[start:]:
        if not is_candidate_line(line):
            break
        mrz_lines.append(line)

    logger.debug("Extracted MRZ lines: %s", mrz_lines)
    return mrz_lines
