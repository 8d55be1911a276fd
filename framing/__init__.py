"""
Document framing checks.

Decides whether a detected document quadrilateral is an acceptable
photograph relative to the on-screen capture mask. All functions are pure
comparisons; degenerate geometry is rejected, never raised.

Key components:
- types: ValidationTolerances and FramingReport
- validation: evaluate_rectangle() and is_acceptable()
- mask: mask_frame_for() mask layout helper
"""

from .types import DEFAULT_TOLERANCES, FramingReport, ValidationTolerances
from .validation import evaluate_rectangle, is_acceptable
from .mask import mask_frame_for

__all__ = [
    "DEFAULT_TOLERANCES",
    "FramingReport",
    "ValidationTolerances",
    "evaluate_rectangle",
    "is_acceptable",
    "mask_frame_for",
]
