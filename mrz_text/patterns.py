"""
Regular-expression templates describing the shapes of MRZ lines.

Templates are fixed constants. A template that fails to compile is a
programming error, reported as `PatternCompileError`; `validate_catalog()`
compiles every template so the test suite catches such errors early.
"""

from __future__ import annotations

import re
from enum import Enum
from functools import lru_cache


class PatternCompileError(ValueError):
    """Raised when a hard-coded pattern template is not a valid regex."""


class DocumentTextPattern(Enum):
    """Named MRZ text shapes (passport TD3, ID card TD1, document number)."""

    DOCUMENT_NUMBER = r"^[A-Z]{2}\d{7}$"
    PASSPORT_LINE1 = r"(P[A-Z0-9<]{1})([A-Z]{3})([A-Z0-9<]{39})"
    PASSPORT_LINE2 = (
        r"([A-Z0-9<]{9})([0-9]{1})([A-Z]{3})([0-9]{6})([0-9]{1})([M|F|X|<]{1})"
        r"([0-9]{6})([0-9]{1})([A-Z0-9<]{14})([0-9]{1})([0-9]{1})"
    )
    ID_CARD_LINE1 = r"([A|C|I][A-Z0-9<]{1})([A-Z]{3})([A-Z0-9<]{9})([0-9]{1})([A-Z0-9<]{15})"
    ID_CARD_LINE2 = (
        r"([0-9]{6})([0-9]{1})([M|F|X|<]{1})([0-9]{6})([0-9]{1})([A-Z]{3})"
        r"([A-Z0-9<]{11})([0-9]{1})"
    )
    ID_CARD_LINE3 = r"([A-Z0-9<]{30})"


# Shapes an individual MRZ line can take. DOCUMENT_NUMBER is a field
# pattern, not a line shape.
MRZ_LINE_PATTERNS: tuple[DocumentTextPattern, ...] = (
    DocumentTextPattern.PASSPORT_LINE1,
    DocumentTextPattern.PASSPORT_LINE2,
    DocumentTextPattern.ID_CARD_LINE1,
    DocumentTextPattern.ID_CARD_LINE2,
    DocumentTextPattern.ID_CARD_LINE3,
)


@lru_cache(maxsize=None)
def compile_pattern(pattern: DocumentTextPattern) -> re.Pattern[str]:
    """Compile a catalog template.

    Args:
        pattern: Catalog member to compile.

    Returns:
        Compiled regular expression (cached per member).

    Raises:
        PatternCompileError: If the template is not a valid regex.
    """
    try:
        return re.compile(pattern.value)
    except re.error as exc:
        raise PatternCompileError(f"Invalid template for {pattern.name}: {exc}") from exc


def validate_catalog() -> None:
    """Compile every template, raising PatternCompileError on the first bad one."""
    for pattern in DocumentTextPattern:
        compile_pattern(pattern)


def is_document_number(text: str) -> bool:
    """Check if text is exactly a document number such as "AD2904903".

    The reading is matched as-is; surrounding whitespace fails the match.
    """
    return compile_pattern(DocumentTextPattern.DOCUMENT_NUMBER).fullmatch(text) is not None
