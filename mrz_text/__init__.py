"""
Machine-readable zone (MRZ) reading.

This module turns raw OCR text into structured passport (TD3) and ID-card
(TD1) records. All functions are pure: noisy or partial input degrades to
an empty line run or an all-empty invalid record, never an exception.

Key components:
- patterns: DocumentTextPattern catalog of MRZ line shapes
- lines: Candidate-line classification and MRZ run extraction
- fields: Fixed-width field tables and date normalization
- records: IDCardMRZ / PassportMRZ value types
- parser: parse_id_card(), parse_passport() and the read_mrz() entry point
- check_digits: Opt-in ICAO 9303 check-digit verification
"""

from .patterns import (
    DocumentTextPattern,
    MRZ_LINE_PATTERNS,
    PatternCompileError,
    compile_pattern,
    is_document_number,
    validate_catalog,
)
from .lines import extract_mrz_lines, is_candidate_line, split_ocr_lines
from .fields import FieldSpec, normalize_mrz_date, pad_line
from .records import (
    DocumentKind,
    IDCardMRZ,
    MRZRecord,
    PassportMRZ,
    record_key_value_pairs,
    record_to_dict,
)
from .parser import parse_id_card, parse_mrz, parse_passport, read_mrz
from .check_digits import check_digit_report, compute_check_digit

__all__ = [
    "DocumentTextPattern",
    "MRZ_LINE_PATTERNS",
    "PatternCompileError",
    "compile_pattern",
    "is_document_number",
    "validate_catalog",
    "extract_mrz_lines",
    "is_candidate_line",
    "split_ocr_lines",
    "FieldSpec",
    "normalize_mrz_date",
    "pad_line",
    "DocumentKind",
    "IDCardMRZ",
    "MRZRecord",
    "PassportMRZ",
    "record_key_value_pairs",
    "record_to_dict",
    "parse_id_card",
    "parse_mrz",
    "parse_passport",
    "read_mrz",
    "check_digit_report",
    "compute_check_digit",
]
