"""
Geometric acceptance test for a detected document rectangle.

A frame is worth capturing when the detected document is level, sits
inside the on-screen mask, and has roughly the mask's proportions and
size. The four criteria are independent comparisons; all must hold.
"""

from __future__ import annotations

import logging

from geometry import Bbox, Rect, bbox_to_rect, top_edge_angle

from .types import DEFAULT_TOLERANCES, FramingReport, ValidationTolerances

logger = logging.getLogger(__name__)


def evaluate_rectangle(
    observation: Rect | Bbox,
    mask_frame: Rect,
    tolerances: ValidationTolerances | None = None,
) -> FramingReport:
    """Check a detected rectangle against the mask frame.

    Args:
        observation: Either the axis-aligned bounding box of the detection
            or its four corners [top_left, top_right, bottom_right,
            bottom_left], in the mask's coordinate space. Tilt is measured
            on the top edge; the other criteria use the bounding box.
        mask_frame: Target capture frame.
        tolerances: Acceptance tolerances (defaults from config).

    Returns:
        FramingReport with every criterion. Zero-area boxes or masks are
        rejected with reason "degenerate_rectangle".
    """
    tolerances = tolerances or DEFAULT_TOLERANCES

    if isinstance(observation, Rect):
        box = observation
        tilt = 0.0
    else:
        box = bbox_to_rect(observation)
        tilt = top_edge_angle(observation)

    if box.is_degenerate or mask_frame.is_degenerate:
        logger.debug("Rejected rectangle %s in mask %s: degenerate", box, mask_frame)
        return FramingReport.degenerate()

    aligned = tilt <= tolerances.max_tilt_angle
    contained = mask_frame.contains(box)

    mask_ratio = mask_frame.aspect_ratio
    aspect_ratio_diff = abs(box.aspect_ratio - mask_ratio) / mask_ratio
    aspect_ratio_ok = aspect_ratio_diff <= tolerances.aspect_ratio_tolerance

    width_diff = abs(box.w - mask_frame.w) / mask_frame.w
    height_diff = abs(box.h - mask_frame.h) / mask_frame.h
    size_ok = width_diff <= tolerances.size_tolerance and height_diff <= tolerances.size_tolerance

    rejection_reason = None
    if not aligned:
        rejection_reason = f"tilt {tilt:.1f} exceeds {tolerances.max_tilt_angle}"
    elif not contained:
        rejection_reason = "not contained in mask frame"
    elif not aspect_ratio_ok:
        rejection_reason = (
            f"aspect_ratio diff {aspect_ratio_diff:.2f} exceeds {tolerances.aspect_ratio_tolerance}"
        )
    elif not size_ok:
        rejection_reason = (
            f"size diff (w={width_diff:.2f}, h={height_diff:.2f}) "
            f"exceeds {tolerances.size_tolerance}"
        )

    if rejection_reason:
        logger.debug("Rejected rectangle %s in mask %s: %s", box, mask_frame, rejection_reason)

    return FramingReport(
        aligned=aligned,
        contained=contained,
        aspect_ratio_ok=aspect_ratio_ok,
        size_ok=size_ok,
        tilt_angle=tilt,
        aspect_ratio_diff=aspect_ratio_diff,
        width_diff=width_diff,
        height_diff=height_diff,
        rejection_reason=rejection_reason,
    )


def is_acceptable(
    observation: Rect | Bbox,
    mask_frame: Rect,
    tolerances: ValidationTolerances | None = None,
) -> bool:
    """Check whether a detected rectangle is good enough to capture."""
    return evaluate_rectangle(observation, mask_frame, tolerances).accepted
