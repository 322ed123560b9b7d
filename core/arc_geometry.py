"""
Arc Geometry - Where the spinner's arc sits inside its canvas

PURPOSE: Map logical size and stroke width to the pixel box the arc is drawn in.
CONTEXT: The stroke is centered on the arc's circular path, so the path box is
         inset by half a stroke on every side.
"""
from dataclasses import dataclass
from typing import Tuple


@dataclass(frozen=True)
class ArcGeometry:
    """Fixed drawing geometry for one spinner configuration"""

    top_left: Tuple[float, float]
    arc_size: Tuple[float, float]
    stroke_width_pixels: float
    center: Tuple[float, float]
    canvas_size_pixels: float


def compute_arc_geometry(size: float, stroke_width: float, density: float = 1.0) -> ArcGeometry:
    """
    Compute the arc's bounding box for a ``size x size`` canvas.

    Args:
        size: Canvas edge length in logical units
        stroke_width: Stroke width in logical units
        density: Pixels per logical unit

    Returns:
        ArcGeometry in pixels

    Example:
        >>> compute_arc_geometry(36, 6).arc_size
        (30.0, 30.0)
    """
    canvas_pixels = size * density
    stroke_pixels = stroke_width * density
    arc_side = canvas_pixels - stroke_pixels
    center = (canvas_pixels / 2, canvas_pixels / 2)

    return ArcGeometry(
        top_left=(center[0] - arc_side / 2, center[1] - arc_side / 2),
        arc_size=(arc_side, arc_side),
        stroke_width_pixels=stroke_pixels,
        center=center,
        canvas_size_pixels=canvas_pixels,
    )
