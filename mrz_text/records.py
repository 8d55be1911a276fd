"""
Type definitions for parsed MRZ records.

ID cards (TD1) and passports (TD3) share the `MRZRecord` protocol but are
independent frozen dataclasses: the layouts differ and neither is a
specialisation of the other. Display and serialization are module-level
functions over the protocol.
"""

from __future__ import annotations

from dataclasses import asdict, dataclass, fields
from enum import Enum
from typing import Protocol, TypeVar


class DocumentKind(str, Enum):
    """Document layouts the parser understands."""

    ID_CARD = "id-card"
    PASSPORT = "passport"


class MRZRecord(Protocol):
    """Fields every parsed MRZ record exposes."""

    document_type: str
    country_code: str
    document_number: str
    document_number_check_digit: str
    date_of_birth: str
    dob_check_digit: str
    sex: str
    expiry_date: str
    expiry_check_digit: str
    nationality: str
    personal_number: str
    personal_number_check_digit: str
    surname: str
    given_names: str
    is_valid: bool
    raw_lines: tuple[str, ...]

    @property
    def kind(self) -> DocumentKind: ...

    def to_key_value_pairs(self) -> list[tuple[str, str]]: ...

    def to_dict(self) -> dict: ...


# (display label, attribute) in display order
ID_CARD_LABELS: tuple[tuple[str, str], ...] = (
    ("Document Type", "document_type"),
    ("Nationality", "country_code"),
    ("Document Number", "document_number"),
    ("Document Number Check Digit", "document_number_check_digit"),
    ("Personal ID Number", "personal_number"),
    ("Surname", "surname"),
    ("Given Names", "given_names"),
    ("Date of Birth", "date_of_birth"),
    ("DOB Check Digit", "dob_check_digit"),
    ("Sex", "sex"),
    ("Expiry Date", "expiry_date"),
    ("Expiry Check Digit", "expiry_check_digit"),
    ("Issuing Country", "nationality"),
    ("Final Check Digit", "personal_number_check_digit"),
)

PASSPORT_LABELS: tuple[tuple[str, str], ...] = (
    ("Document Type", "document_type"),
    ("Country Code", "country_code"),
    ("Surname", "surname"),
    ("Given Names", "given_names"),
    ("Passport Number", "document_number"),
    ("Passport Check Digit", "document_number_check_digit"),
    ("Nationality", "nationality"),
    ("Date of Birth", "date_of_birth"),
    ("DOB Check Digit", "dob_check_digit"),
    ("Sex", "sex"),
    ("Expiry Date", "expiry_date"),
    ("Expiry Check Digit", "expiry_check_digit"),
    ("Personal Number", "personal_number"),
    ("Personal Check Digit", "personal_number_check_digit"),
    ("Final Check Digit", "final_check_digit"),
)

DISPLAY_LABELS = {
    DocumentKind.ID_CARD: ID_CARD_LABELS,
    DocumentKind.PASSPORT: PASSPORT_LABELS,
}

R = TypeVar("R")


def empty_record(record_type: type[R], raw_lines=()) -> R:
    """Return the all-empty, invalid record used for insufficient input."""
    values = {
        f.name: "" for f in fields(record_type) if f.name not in ("is_valid", "raw_lines")
    }
    return record_type(**values, is_valid=False, raw_lines=tuple(raw_lines))


def record_key_value_pairs(record: MRZRecord) -> list[tuple[str, str]]:
    """Return ordered (label, value) pairs for display, ending with validity."""
    pairs = [(label, getattr(record, attr)) for label, attr in DISPLAY_LABELS[record.kind]]
    pairs.append(("Valid", str(record.is_valid)))
    return pairs


def record_to_dict(record: MRZRecord) -> dict:
    """Convert a record to a JSON-friendly dictionary."""
    d = asdict(record)
    d["kind"] = record.kind.value
    d["raw_lines"] = list(record.raw_lines)
    return d


@dataclass(frozen=True)
class IDCardMRZ:
    """A TD1 (3 x 30) ID-card MRZ record.

    Attributes:
        document_type: Two-character type code, e.g. "IU".
        country_code: Issuing state from line 1.
        document_number: Card number with fillers removed.
        personal_number: Optional data from line 1 with fillers removed.
        date_of_birth: DD/MM/YYYY, or the raw text when not six digits.
        expiry_date: DD/MM/YYYY, or the raw text when not six digits.
        nationality: Nationality from line 2.
        personal_number_check_digit: The final (composite) check digit.
        raw_lines: The line run the record was parsed from, unpadded.
    """

    document_type: str
    country_code: str
    document_number: str
    document_number_check_digit: str
    personal_number: str
    date_of_birth: str
    dob_check_digit: str
    sex: str
    expiry_date: str
    expiry_check_digit: str
    nationality: str
    personal_number_check_digit: str
    surname: str
    given_names: str
    is_valid: bool
    raw_lines: tuple[str, ...] = ()

    @property
    def kind(self) -> DocumentKind:
        return DocumentKind.ID_CARD

    def to_key_value_pairs(self) -> list[tuple[str, str]]:
        return record_key_value_pairs(self)

    def to_dict(self) -> dict:
        return record_to_dict(self)


@dataclass(frozen=True)
class PassportMRZ:
    """A TD3 (2 x 44) passport MRZ record."""

    document_type: str
    country_code: str
    surname: str
    given_names: str
    document_number: str
    document_number_check_digit: str
    nationality: str
    date_of_birth: str
    dob_check_digit: str
    sex: str
    expiry_date: str
    expiry_check_digit: str
    personal_number: str
    personal_number_check_digit: str
    final_check_digit: str
    is_valid: bool
    raw_lines: tuple[str, ...] = ()

    @property
    def kind(self) -> DocumentKind:
        return DocumentKind.PASSPORT

    def to_key_value_pairs(self) -> list[tuple[str, str]]:
        return record_key_value_pairs(self)

    def to_dict(self) -> dict:
        return record_to_dict(self)
