"""Pydantic schemas for CLI request bodies.

Domain types (Rect, ValidationTolerances, FramingReport) live in geometry.py
and framing/. These schemas define the exact JSON accepted by `docscan frame`.
"""

from __future__ import annotations

from pydantic import BaseModel, Field, model_validator

from config import ASPECT_RATIO_TOLERANCE, MAX_TILT_ANGLE, SIZE_TOLERANCE
from framing import ValidationTolerances
from geometry import Bbox, Rect, denormalize_bbox, denormalize_rect


class RectIn(BaseModel):
    """Axis-aligned rectangle: top-left corner plus size."""
    x: float
    y: float
    w: float
    h: float

    def to_rect(self) -> Rect:
        return Rect(self.x, self.y, self.w, self.h)


class TolerancesIn(BaseModel):
    max_tilt_angle: float = Field(default=MAX_TILT_ANGLE, ge=0, le=90)
    aspect_ratio_tolerance: float = Field(default=ASPECT_RATIO_TOLERANCE, ge=0)
    size_tolerance: float = Field(default=SIZE_TOLERANCE, ge=0)

    def to_tolerances(self) -> ValidationTolerances:
        return ValidationTolerances(
            max_tilt_angle=self.max_tilt_angle,
            aspect_ratio_tolerance=self.aspect_ratio_tolerance,
            size_tolerance=self.size_tolerance,
        )


class FrameCheckRequest(BaseModel):
    """Body for `docscan frame`.

    Exactly one of `box` (axis-aligned bounding box) or `corners`
    ([top_left, top_right, bottom_right, bottom_left]) must be given.
    Set `normalized` when the observation is in 0..1 vision coordinates
    and should be mapped into `view` first.
    """
    box: RectIn | None = None
    corners: list[tuple[float, float]] | None = Field(default=None, min_length=4, max_length=4)
    mask: RectIn
    tolerances: TolerancesIn = Field(default_factory=TolerancesIn)
    normalized: bool = False
    view: RectIn | None = None

    @model_validator(mode="after")
    def _check_observation(self) -> "FrameCheckRequest":
        if (self.box is None) == (self.corners is None):
            raise ValueError("Provide exactly one of 'box' or 'corners'")
        if self.normalized and self.view is None:
            raise ValueError("'view' is required when 'normalized' is true")
        return self

    def observation(self) -> Rect | Bbox:
        """Return the observation in the mask's coordinate space.

        Normalized observations are scaled to the view size and offset by
        the view's top-left corner.
        """
        origin = (self.view.x, self.view.y) if self.view is not None else (0.0, 0.0)
        if self.corners is not None:
            bbox = [list(p) for p in self.corners]
            if self.normalized:
                return denormalize_bbox(bbox, self.view.w, self.view.h, origin=origin)
            return bbox
        rect = self.box.to_rect()
        if self.normalized:
            return denormalize_rect(rect, self.view.w, self.view.h, origin=origin)
        return rect
