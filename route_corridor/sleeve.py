# -*- coding: utf-8 -*-
"""
Sleeve generation between two consecutive route points.

A sleeve is the quadrilateral joining the lateral edges of the discs at
both ends of a segment. Together with those discs it covers the buffered
region of the segment.
"""

import math

from shapely.geometry import Polygon

from .constants import LEFT, RIGHT
from .errors import DegenerateInput, InvalidArgument
from .geodesic import bearing, destination


def is_degenerate(p1: tuple[float, float], p2: tuple[float, float]) -> bool:
    """True if the segment p1 -> p2 has zero length."""
    return tuple(p1) == tuple(p2)


def sleeve_between(p1: tuple[float, float], p2: tuple[float, float],
                   width_m: float) -> Polygon:
    """
    Create the sleeve covering segment p1 -> p2 at lateral distance width_m.

    The ring is ordered:
        p1 offset at b+90, p1 offset at b-90,
        p2 offset at b-90, p2 offset at b+90, back to the first vertex
    where b is the bearing from p1 to p2. On a sphere this is not an exact
    rectangle, but the deviation is negligible for offsets up to about a
    kilometre.

    Args:
        p1: (lon, lat) segment start
        p2: (lon, lat) segment end
        width_m: Lateral offset in meters, must be > 0

    Returns:
        Quadrilateral Polygon

    Raises:
        DegenerateInput: p1 and p2 are identical
        InvalidArgument: width_m is not positive
    """
    if not math.isfinite(width_m) or width_m <= 0:
        raise InvalidArgument(f"Sleeve width must be > 0, got {width_m}")
    if is_degenerate(p1, p2):
        raise DegenerateInput(f"Zero-length segment at {tuple(p1)}")

    b = bearing(p1, p2)
    right = (b + RIGHT) % 360
    left = (b + LEFT) % 360

    start = destination(p1, width_m, right)
    return Polygon([
        start,
        destination(p1, width_m, left),
        destination(p2, width_m, left),
        destination(p2, width_m, right),
        start,
    ])
