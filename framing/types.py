"""
Type definitions for the framing module.
"""

from __future__ import annotations

from dataclasses import dataclass

from config import ASPECT_RATIO_TOLERANCE, MAX_TILT_ANGLE, SIZE_TOLERANCE


@dataclass(frozen=True)
class ValidationTolerances:
    """Tolerances for accepting a detected document rectangle.

    Attributes:
        max_tilt_angle: Largest allowed tilt of the top edge, in degrees.
        aspect_ratio_tolerance: Allowed relative difference between the
            observed and mask aspect ratios (0.2 = 20%).
        size_tolerance: Allowed relative difference between observed and
            mask width, and between observed and mask height.
    """

    max_tilt_angle: float = MAX_TILT_ANGLE
    aspect_ratio_tolerance: float = ASPECT_RATIO_TOLERANCE
    size_tolerance: float = SIZE_TOLERANCE

    def validate(self) -> None:
        """Validate tolerance values.

        Raises:
            ValueError: If any tolerance is out of range.
        """
        if not 0.0 <= self.max_tilt_angle <= 90.0:
            raise ValueError(
                f"max_tilt_angle must be within [0, 90] degrees, got {self.max_tilt_angle}"
            )
        if self.aspect_ratio_tolerance < 0:
            raise ValueError(
                f"aspect_ratio_tolerance must be non-negative, got {self.aspect_ratio_tolerance}"
            )
        if self.size_tolerance < 0:
            raise ValueError(f"size_tolerance must be non-negative, got {self.size_tolerance}")


DEFAULT_TOLERANCES = ValidationTolerances()


@dataclass(frozen=True)
class FramingReport:
    """Outcome of checking one detected rectangle against the mask frame.

    Keeps every criterion and measurement so callers can explain why a
    frame was not captured.

    Attributes:
        aligned: Top edge tilt within max_tilt_angle.
        contained: Bounding box fully inside the mask frame.
        aspect_ratio_ok: Aspect ratio within tolerance of the mask's.
        size_ok: Width and height both within tolerance of the mask's.
        tilt_angle: Measured tilt in degrees.
        aspect_ratio_diff: Relative aspect-ratio difference.
        width_diff: Relative width difference.
        height_diff: Relative height difference.
        rejection_reason: First failed criterion (None if accepted).
    """

    aligned: bool
    contained: bool
    aspect_ratio_ok: bool
    size_ok: bool
    tilt_angle: float
    aspect_ratio_diff: float
    width_diff: float
    height_diff: float
    rejection_reason: str | None = None

    @property
    def accepted(self) -> bool:
        return self.aligned and self.contained and self.aspect_ratio_ok and self.size_ok

    @classmethod
    def degenerate(cls) -> "FramingReport":
        """Report for a zero-area mask or box, which is always rejected."""
        return cls(
            aligned=False,
            contained=False,
            aspect_ratio_ok=False,
            size_ok=False,
            tilt_angle=0.0,
            aspect_ratio_diff=0.0,
            width_diff=0.0,
            height_diff=0.0,
            rejection_reason="degenerate_rectangle",
        )

    def to_dict(self) -> dict:
        return {
            "accepted": self.accepted,
            "aligned": self.aligned,
            "contained": self.contained,
            "aspect_ratio_ok": self.aspect_ratio_ok,
            "size_ok": self.size_ok,
            "tilt_angle": self.tilt_angle,
            "aspect_ratio_diff": self.aspect_ratio_diff,
            "width_diff": self.width_diff,
            "height_diff": self.height_diff,
            "rejection_reason": self.rejection_reason,
        }
