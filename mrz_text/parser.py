"""
MRZ record parsing for ID cards (TD1) and passports (TD3).

Parsing never raises on OCR input. A run with too few lines produces the
record kind's all-empty sentinel with `is_valid=False`, so callers polling
OCR results frame after frame are not interrupted by partial reads.
"""

from __future__ import annotations

import logging
from typing import Sequence

from config import (
    EXPECTED_COUNTRY_CODE,
    MRZ_FILLER,
    PASSPORT_DOCUMENT_TYPE,
    TD1_LINE_COUNT,
    TD1_LINE_LENGTH,
    TD3_LINE_COUNT,
    TD3_LINE_LENGTH,
    VALID_SEX_CODES,
)

from .fields import (
    ID_CARD_FIELDS,
    ID_CARD_NAMES,
    PASSPORT_FIELDS,
    PASSPORT_NAMES,
    pad_line,
    read_fields,
)
from .lines import extract_mrz_lines
from .records import DocumentKind, IDCardMRZ, MRZRecord, PassportMRZ, empty_record

logger = logging.getLogger(__name__)


def split_td1_names(names_line: str) -> tuple[str, str]:
    """Split a TD1 name line into (surname, given names).

    Fillers become spaces, components are separated by double spaces;
    the first component is the surname, the rest are the given names.
    """
    spaced = names_line.replace(MRZ_FILLER, " ")
    components = [part.strip() for part in spaced.split("  ")]
    components = [part for part in components if part]
    if not components:
        return "", ""
    return components[0], " ".join(components[1:])


def split_td3_names(names_region: str) -> tuple[str, str]:
    """Split a TD3 name region on the first "<<" into (surname, given names)."""
    separator = MRZ_FILLER * 2
    if separator not in names_region:
        return names_region.replace(MRZ_FILLER, ""), ""
    surname, given = names_region.split(separator, 1)
    return surname.replace(MRZ_FILLER, ""), given.replace(MRZ_FILLER, " ").strip()


def _has_required_fields(values: dict[str, str]) -> bool:
    return (
        bool(values["document_number"])
        and bool(values["date_of_birth"])
        and bool(values["surname"])
        and values["country_code"] == EXPECTED_COUNTRY_CODE
        and values["sex"] in VALID_SEX_CODES
    )


def parse_id_card(mrz_lines: Sequence[str]) -> IDCardMRZ:
    """Parse a TD1 ID-card line run.

    Args:
        mrz_lines: Line run from `extract_mrz_lines`; only the first three
            lines are used, each padded or truncated to 30 characters.

    Returns:
        Parsed record, or the empty invalid record if fewer than three
        lines were supplied.
    """
    raw_lines = tuple(mrz_lines)
    if len(raw_lines) < TD1_LINE_COUNT:
        return empty_record(IDCardMRZ, raw_lines)

    lines = [pad_line(line, TD1_LINE_LENGTH) for line in raw_lines[:TD1_LINE_COUNT]]
    logger.debug("Parsing ID card MRZ lines: %s", lines)

    values = read_fields(ID_CARD_FIELDS, lines)
    values["surname"], values["given_names"] = split_td1_names(ID_CARD_NAMES.read(lines))

    return IDCardMRZ(
        **values,
        is_valid=_has_required_fields(values),
        raw_lines=raw_lines,
    )


def parse_passport(mrz_lines: Sequence[str]) -> PassportMRZ:
    """Parse a TD3 passport line run.

    Args:
        mrz_lines: Line run from `extract_mrz_lines`; only the first two
            lines are used, each padded or truncated to 44 characters.

    Returns:
        Parsed record, or the empty invalid record if fewer than two
        lines were supplied.
    """
    raw_lines = tuple(mrz_lines)
    if len(raw_lines) < TD3_LINE_COUNT:
        return empty_record(PassportMRZ, raw_lines)

    lines = [pad_line(line, TD3_LINE_LENGTH) for line in raw_lines[:TD3_LINE_COUNT]]
    logger.debug("Parsing passport MRZ lines: %s", lines)

    values = read_fields(PASSPORT_FIELDS, lines)
    values["surname"], values["given_names"] = split_td3_names(PASSPORT_NAMES.read(lines))

    is_valid = (
        _has_required_fields(values)
        and values["document_type"] == PASSPORT_DOCUMENT_TYPE
    )
    return PassportMRZ(**values, is_valid=is_valid, raw_lines=raw_lines)


_PARSERS = {
    DocumentKind.ID_CARD: parse_id_card,
    DocumentKind.PASSPORT: parse_passport,
}


def parse_mrz(mrz_lines: Sequence[str], kind: DocumentKind | str) -> MRZRecord:
    """Parse a line run with the parser for the given document kind.

    Raises:
        ValueError: If `kind` is not a known document kind.
    """
    return _PARSERS[DocumentKind(kind)](mrz_lines)


def read_mrz(raw_text: str, kind: DocumentKind | str) -> MRZRecord:
    """Extract the MRZ line run from OCR text and parse it."""
    record = parse_mrz(extract_mrz_lines(raw_text), kind)
    logger.debug("Parsed %s MRZ (valid=%s)", record.kind.value, record.is_valid)
    return record
