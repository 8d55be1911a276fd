"""
Fixed-width field layouts for TD1 (ID card) and TD3 (passport) MRZ records.

Each layout is an explicit table of (name, line, offset, length) entries
walked mechanically by `read_fields`, so a change in one field's width
cannot shift its neighbours.
"""

from __future__ import annotations

from dataclasses import dataclass

from config import CENTURY_PIVOT_YEAR, MRZ_FILLER


@dataclass(frozen=True)
class FieldSpec:
    """Location of one field inside a padded MRZ line run.

    Attributes:
        name: Record attribute the field populates.
        line: 0-based index of the line in the run.
        offset: 0-based character offset in the padded line.
        length: Number of characters; None reads to the end of the line.
        strip_filler: Remove every filler character from the value.
        is_date: Normalize a raw YYMMDD value to DD/MM/YYYY.
    """

    name: str
    line: int
    offset: int
    length: int | None = 1
    strip_filler: bool = False
    is_date: bool = False

    def raw(self, lines: list[str]) -> str:
        """Return the unprocessed characters covered by this field."""
        line = lines[self.line]
        end = None if self.length is None else self.offset + self.length
        return line[self.offset:end]

    def read(self, lines: list[str]) -> str:
        value = self.raw(lines)
        if self.strip_filler:
            value = value.replace(MRZ_FILLER, "")
        if self.is_date:
            value = normalize_mrz_date(value)
        return value


@dataclass(frozen=True)
class CheckSpec:
    """A check digit and the field segments it protects."""

    name: str
    segments: tuple[FieldSpec, ...]
    check: FieldSpec

    def value(self, lines: list[str]) -> str:
        return "".join(segment.raw(lines) for segment in self.segments)


# TD1: 3 lines x 30 characters. Names (line 3) are parsed separately.
ID_CARD_FIELDS: tuple[FieldSpec, ...] = (
    FieldSpec("document_type", 0, 0, 2),
    FieldSpec("country_code", 0, 2, 3),
    FieldSpec("document_number", 0, 5, 9, strip_filler=True),
    FieldSpec("document_number_check_digit", 0, 14, 1),
    FieldSpec("personal_number", 0, 15, 14, strip_filler=True),
    FieldSpec("date_of_birth", 1, 0, 6, is_date=True),
    FieldSpec("dob_check_digit", 1, 6, 1),
    FieldSpec("sex", 1, 7, 1),
    FieldSpec("expiry_date", 1, 8, 6, is_date=True),
    FieldSpec("expiry_check_digit", 1, 14, 1),
    FieldSpec("nationality", 1, 15, 3),
    FieldSpec("personal_number_check_digit", 1, 29, 1),
)

ID_CARD_NAMES = FieldSpec("names", 2, 0, None)

ID_CARD_CHECKS: tuple[CheckSpec, ...] = (
    CheckSpec("document_number", (FieldSpec("", 0, 5, 9),), FieldSpec("", 0, 14)),
    CheckSpec("date_of_birth", (FieldSpec("", 1, 0, 6),), FieldSpec("", 1, 6)),
    CheckSpec("expiry_date", (FieldSpec("", 1, 8, 6),), FieldSpec("", 1, 14)),
    CheckSpec(
        "composite",
        (
            FieldSpec("", 0, 5, 25),
            FieldSpec("", 1, 0, 7),
            FieldSpec("", 1, 8, 7),
            FieldSpec("", 1, 18, 11),
        ),
        FieldSpec("", 1, 29),
    ),
)

# TD3: 2 lines x 44 characters. Names (line 1 from offset 5) are parsed separately.
PASSPORT_FIELDS: tuple[FieldSpec, ...] = (
    FieldSpec("document_type", 0, 0, 1),
    FieldSpec("country_code", 0, 2, 3),
    FieldSpec("document_number", 1, 0, 9, strip_filler=True),
    FieldSpec("document_number_check_digit", 1, 9, 1),
    FieldSpec("nationality", 1, 10, 3),
    FieldSpec("date_of_birth", 1, 13, 6, is_date=True),
    FieldSpec("dob_check_digit", 1, 19, 1),
    FieldSpec("sex", 1, 20, 1),
    FieldSpec("expiry_date", 1, 21, 6, is_date=True),
    FieldSpec("expiry_check_digit", 1, 27, 1),
    FieldSpec("personal_number", 1, 28, 14, strip_filler=True),
    FieldSpec("personal_number_check_digit", 1, 42, 1),
    FieldSpec("final_check_digit", 1, 43, 1),
)

PASSPORT_NAMES = FieldSpec("names", 0, 5, None)

PASSPORT_CHECKS: tuple[CheckSpec, ...] = (
    CheckSpec("document_number", (FieldSpec("", 1, 0, 9),), FieldSpec("", 1, 9)),
    CheckSpec("date_of_birth", (FieldSpec("", 1, 13, 6),), FieldSpec("", 1, 19)),
    CheckSpec("expiry_date", (FieldSpec("", 1, 21, 6),), FieldSpec("", 1, 27)),
    CheckSpec("personal_number", (FieldSpec("", 1, 28, 14),), FieldSpec("", 1, 42)),
    CheckSpec(
        "composite",
        (
            FieldSpec("", 1, 0, 10),
            FieldSpec("", 1, 13, 7),
            FieldSpec("", 1, 21, 22),
        ),
        FieldSpec("", 1, 43),
    ),
)


def pad_line(line: str, width: int) -> str:
    """Pad with filler or truncate a line to exactly `width` characters."""
    return line[:width].ljust(width, MRZ_FILLER)


def read_fields(layout: tuple[FieldSpec, ...], lines: list[str]) -> dict[str, str]:
    """Read every field of a layout from padded lines."""
    return {spec.name: spec.read(lines) for spec in layout}


def normalize_mrz_date(value: str) -> str:
    """Convert a raw YYMMDD date to DD/MM/YYYY.

    Years up to CENTURY_PIVOT_YEAR map to 20YY, later ones to 19YY.
    Anything that is not exactly six ASCII digits is returned unchanged.

    Examples:
        >>> normalize_mrz_date("951209")
        '09/12/1995'
        >>> normalize_mrz_date("3303<9")
        '3303<9'
    """
    if len(value) != 6 or not (value.isascii() and value.isdigit()):
        return value
    year, month, day = value[:2], value[2:4], value[4:]
    century = "20" if int(year) <= CENTURY_PIVOT_YEAR else "19"
    return f"{day}/{month}/{century}{year}"
