# -*- coding: utf-8 -*-
"""
Coordinate conventions at the boundary of the corridor builder.

Internally every coordinate is a (lon, lat) pair, matching GeoJSON. Map
clients hand over routes as (lat, lon) pairs, so they must be transposed
with ``latlng_to_lnglat`` before entering the builder. Swapping this step
silently mirrors the corridor across the lon = lat diagonal.
"""

import math

from .errors import InvalidArgument


def latlng_to_lnglat(route) -> list[tuple[float, float]]:
    """
    Transpose a (lat, lon) route from a map client to (lon, lat) order.

    Args:
        route: Iterable of (lat, lon) pairs

    Returns:
        List of (lon, lat) tuples
    """
    return [(float(p[1]), float(p[0])) for p in route]


def validate_lnglat(point) -> tuple[float, float]:
    """
    Check that point is a finite (lon, lat) pair inside the valid range.

    Values out of range are a caller error and are not wrapped or clamped.

    Returns:
        The point as a tuple of floats

    Raises:
        InvalidArgument: malformed or out-of-range coordinate
    """
    try:
        lon, lat = point
        lon, lat = float(lon), float(lat)
    except (TypeError, ValueError) as e:
        raise InvalidArgument(f"Malformed coordinate {point!r}") from e

    if not (math.isfinite(lon) and math.isfinite(lat)):
        raise InvalidArgument(f"Coordinate must be finite, got {point!r}")
    if not -180.0 <= lon <= 180.0:
        raise InvalidArgument(f"Longitude {lon} outside [-180, 180]")
    if not -90.0 <= lat <= 90.0:
        raise InvalidArgument(f"Latitude {lat} outside [-90, 90]")
    return (lon, lat)
