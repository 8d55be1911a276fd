"""Reading validators: decide whether a frame's OCR readings are usable."""

from __future__ import annotations

from enum import Enum
from typing import Callable

from config import ID_CARD_MASK_ASPECT_RATIO, PASSPORT_MASK_ASPECT_RATIO
from mrz_text import DocumentKind, is_document_number, read_mrz

ReadingValidator = Callable[[list[str]], bool]


class DocumentSide(str, Enum):
    """What the camera is pointed at."""

    ID_FRONT = "id-front"
    ID_BACK = "id-back"
    PASSPORT = "passport"

    @property
    def mrz_kind(self) -> DocumentKind | None:
        """MRZ layout printed on this side, if any."""
        return {
            DocumentSide.ID_BACK: DocumentKind.ID_CARD,
            DocumentSide.PASSPORT: DocumentKind.PASSPORT,
        }.get(self)

    @property
    def mask_aspect_ratio(self) -> float:
        if self is DocumentSide.PASSPORT:
            return PASSPORT_MASK_ASPECT_RATIO
        return ID_CARD_MASK_ASPECT_RATIO


def find_document_number(readings: list[str]) -> str | None:
    """Return the first reading that is a bare document number."""
    return next((r for r in readings if is_document_number(r)), None)


def validate_id_front_readings(readings: list[str]) -> bool:
    """The front of an ID card is usable once its document number is legible."""
    return find_document_number(readings) is not None


def validate_id_back_readings(readings: list[str]) -> bool:
    return read_mrz("\n".join(readings), DocumentKind.ID_CARD).is_valid


def validate_passport_readings(readings: list[str]) -> bool:
    return read_mrz("\n".join(readings), DocumentKind.PASSPORT).is_valid


_VALIDATORS: dict[DocumentSide, ReadingValidator] = {
    DocumentSide.ID_FRONT: validate_id_front_readings,
    DocumentSide.ID_BACK: validate_id_back_readings,
    DocumentSide.PASSPORT: validate_passport_readings,
}


def validator_for(side: DocumentSide | str) -> ReadingValidator:
    """Return the default reading validator for a document side."""
    return _VALIDATORS[DocumentSide(side)]
