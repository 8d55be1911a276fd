"""
On-screen mask layout.

The mask is centered in the view, spans the view width minus a margin on
each side, and takes its height from the document outline's aspect ratio.
"""

from __future__ import annotations

from config import MASK_HORIZONTAL_MARGIN
from geometry import Rect


def mask_frame_for(
    aspect_ratio: float,
    view_width: float,
    view_height: float,
    margin: float = MASK_HORIZONTAL_MARGIN,
) -> Rect:
    """Compute the mask frame for a document outline inside a view.

    Args:
        aspect_ratio: Outline width / height.
        view_width: View width.
        view_height: View height.
        margin: Horizontal margin on each side.

    Returns:
        Mask rectangle in view coordinates.

    Raises:
        ValueError: If the aspect ratio is not positive or the margins
            leave no room for the mask.
    """
    if aspect_ratio <= 0:
        raise ValueError(f"aspect_ratio must be positive, got {aspect_ratio}")
    width = view_width - 2 * margin
    if width <= 0:
        raise ValueError(
            f"view_width={view_width} leaves no room for a mask with margin={margin}"
        )
    height = width / aspect_ratio
    return Rect(
        x=(view_width - width) / 2,
        y=(view_height - height) / 2,
        w=width,
        h=height,
    )
