"""Shared geometry utilities for document rectangles and quadrilaterals.

Coordinates follow screen conventions: origin at the top-left, y grows
downwards. Vision-style normalized coordinates (0..1, origin at the
bottom-left) are converted with `denormalize_rect` / `denormalize_bbox`.
"""

from __future__ import annotations

import math
from dataclasses import dataclass

import numpy as np

# Quadrilateral as list of 4 [x, y] points: top-left, top-right,
# bottom-right, bottom-left
Bbox = list[list[float]]


@dataclass(frozen=True)
class Rect:
    """Axis-aligned rectangle given by its top-left corner and size."""

    x: float
    y: float
    w: float
    h: float

    @property
    def max_x(self) -> float:
        return self.x + self.w

    @property
    def max_y(self) -> float:
        return self.y + self.h

    @property
    def is_degenerate(self) -> bool:
        """True if the rectangle has no area (zero or negative width/height)."""
        return not (self.w > 0 and self.h > 0)

    @property
    def aspect_ratio(self) -> float:
        """Width / height ratio. Only meaningful for non-degenerate rectangles."""
        return self.w / self.h

    def contains(self, other: Rect) -> bool:
        """Check whether `other` lies entirely within this rectangle.

        Edges may touch; any overflow, however small, fails the test.
        """
        return (
            other.x >= self.x
            and other.y >= self.y
            and other.max_x <= self.max_x
            and other.max_y <= self.max_y
        )


def rect_to_bbox(rect: Rect) -> Bbox:
    """Convert a rectangle to a quadrilateral bbox."""
    return [
        [rect.x, rect.y],
        [rect.max_x, rect.y],
        [rect.max_x, rect.max_y],
        [rect.x, rect.max_y],
    ]


def bbox_to_rect(bbox: Bbox) -> Rect:
    """Convert a quadrilateral bbox to its axis-aligned bounding rectangle."""
    x_coords = [p[0] for p in bbox]
    y_coords = [p[1] for p in bbox]
    x1, y1, x2, y2 = min(x_coords), min(y_coords), max(x_coords), max(y_coords)
    return Rect(x1, y1, x2 - x1, y2 - y1)


def top_edge_angle(bbox: Bbox) -> float:
    """Absolute angle of the top edge (top-right minus top-left), in degrees.

    0 for a level edge, 90 for a vertical one, up to 180 when the
    top-right corner lies left of the top-left corner.
    """
    (x1, y1), (x2, y2) = bbox[0], bbox[1]
    return abs(math.degrees(math.atan2(y2 - y1, x2 - x1)))


def denormalize_rect(
    rect: Rect,
    width: float,
    height: float,
    flip_y: bool = True,
    origin: tuple[float, float] = (0.0, 0.0),
) -> Rect:
    """Map a normalized (0..1) rectangle into a view of the given size.

    Args:
        rect: Rectangle in normalized coordinates.
        width: View width in points/pixels.
        height: View height in points/pixels.
        flip_y: Treat the normalized origin as bottom-left (vision convention).
        origin: Top-left corner of the view in the target coordinate space.

    Returns:
        Rectangle in target coordinates with a top-left origin.
    """
    y = 1.0 - rect.y - rect.h if flip_y else rect.y
    x0, y0 = origin
    return Rect(x0 + rect.x * width, y0 + y * height, rect.w * width, rect.h * height)


def denormalize_bbox(
    bbox: Bbox,
    width: float,
    height: float,
    flip_y: bool = True,
    origin: tuple[float, float] = (0.0, 0.0),
) -> Bbox:
    """Map normalized (0..1) corner points into a view of the given size.

    Corner order is preserved, so a vision observation passed in as
    [top_left, top_right, bottom_right, bottom_left] keeps those roles.
    Points are offset by the view's `origin`.
    """
    points = np.asarray(bbox, dtype=float).reshape(-1, 2)
    if flip_y:
        points[:, 1] = 1.0 - points[:, 1]
    points = points * np.array([width, height]) + np.array(origin, dtype=float)
    return points.tolist()
