"""Scan session package: reading validators and the one-shot session."""

from .validators import (
    DocumentSide,
    ReadingValidator,
    find_document_number,
    validate_id_back_readings,
    validate_id_front_readings,
    validate_passport_readings,
    validator_for,
)
from .session import ScanResult, ScanSession

__all__ = [
    "DocumentSide",
    "ReadingValidator",
    "find_document_number",
    "validate_id_back_readings",
    "validate_id_front_readings",
    "validate_passport_readings",
    "validator_for",
    "ScanResult",
    "ScanSession",
]
