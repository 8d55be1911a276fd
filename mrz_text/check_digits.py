"""
ICAO 9303 check-digit arithmetic.

Check digits are read into every record but are not part of `is_valid`.
`check_digit_report` is an opt-in diagnostic for callers that want to
reject misreads more aggressively.
"""

from __future__ import annotations

from config import (
    CHECK_DIGIT_WEIGHTS,
    TD1_LINE_COUNT,
    TD1_LINE_LENGTH,
    TD3_LINE_COUNT,
    TD3_LINE_LENGTH,
)

from .fields import ID_CARD_CHECKS, PASSPORT_CHECKS, pad_line
from .records import DocumentKind, MRZRecord


def character_value(char: str) -> int:
    """Numeric value of an MRZ character: digits as-is, A=10 .. Z=35.

    The filler and characters outside the MRZ alphabet count as 0.
    """
    if char.isascii() and char.isdigit():
        return int(char)
    if "A" <= char <= "Z":
        return ord(char) - ord("A") + 10
    return 0


def compute_check_digit(value: str) -> int:
    """Compute the weighted 7-3-1 check digit of an MRZ field."""
    weights = CHECK_DIGIT_WEIGHTS
    total = sum(
        character_value(char) * weights[i % len(weights)]
        for i, char in enumerate(value)
    )
    return total % 10


def check_digit_report(record: MRZRecord) -> dict[str, bool]:
    """Verify every check digit of a record against its raw line run.

    Returns:
        Mapping of protected field name ("document_number", "date_of_birth",
        "expiry_date", "composite" and, for passports, "personal_number")
        to whether its check digit matches. Empty for records parsed from
        too few lines.
    """
    if record.kind is DocumentKind.ID_CARD:
        checks, width, count = ID_CARD_CHECKS, TD1_LINE_LENGTH, TD1_LINE_COUNT
    else:
        checks, width, count = PASSPORT_CHECKS, TD3_LINE_LENGTH, TD3_LINE_COUNT

    if len(record.raw_lines) < count:
        return {}

    lines = [pad_line(line, width) for line in record.raw_lines[:count]]
    report = {}
    for spec in checks:
        digit = spec.check.raw(lines)
        report[spec.name] = (
            digit.isascii()
            and digit.isdigit()
            and int(digit) == compute_check_digit(spec.value(lines))
        )
    return report
