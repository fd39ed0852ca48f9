# -*- coding: utf-8 -*-
"""
Disc generation around a single route point.
"""

import math

import numpy as np
from shapely.geometry import Polygon

from .constants import DEFAULT_DISC_STEPS
from .errors import InvalidArgument
from .geodesic import destinations


def disc_around(center: tuple[float, float], radius_m: float,
                steps: int = DEFAULT_DISC_STEPS) -> Polygon:
    """
    Create a polygon approximating a disc of radius_m around center.

    Vertex k is the destination from center at bearing k * 360 / steps, so
    the ring starts due North and runs clockwise. The approximation error
    shrinks as steps grows; 64 keeps the disc edges aligned with the sleeves
    at city-scale offsets.

    Args:
        center: (lon, lat) of the disc center
        radius_m: Disc radius in meters, must be > 0
        steps: Number of distinct vertices, at least 3

    Returns:
        Polygon with a closed ring of steps + 1 coordinates
    """
    if not math.isfinite(radius_m) or radius_m <= 0:
        raise InvalidArgument(f"Disc radius must be > 0, got {radius_m}")
    if steps < 3:
        raise InvalidArgument(f"A disc needs at least 3 steps, got {steps}")

    bearings = np.arange(steps) * (360.0 / steps)
    ring = destinations(center, radius_m, bearings)
    return Polygon(np.vstack([ring, ring[:1]]))
