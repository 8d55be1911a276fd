"""Shared OCR fixtures for MRZ and scan session tests."""
import pytest

from mrz_samples import (
    ID_CARD_LINE1,
    ID_CARD_LINE2,
    ID_CARD_LINE3,
    PASSPORT_LINE1,
    PASSPORT_LINE2,
)


@pytest.fixture
def passport_lines():
    return [PASSPORT_LINE1, PASSPORT_LINE2]


@pytest.fixture
def id_card_lines():
    return [ID_CARD_LINE1, ID_CARD_LINE2, ID_CARD_LINE3]


@pytest.fixture
def passport_ocr_text():
    """OCR output of a passport data page: captions, then the MRZ, then noise."""
    return "\n".join([
        "REPUBLIC OF UZBEKISTAN",
        "PASSPORT / PASPORT",
        "Surname IVANOV",
        "",
        f"  {PASSPORT_LINE1}  ",
        PASSPORT_LINE2,
        "Signature",
    ])


@pytest.fixture
def id_card_ocr_text():
    """OCR output of the back of an ID card."""
    return "\n".join([
        "Place of birth TOSHKENT",
        ID_CARD_LINE1,
        ID_CARD_LINE2,
        ID_CARD_LINE3,
    ])
