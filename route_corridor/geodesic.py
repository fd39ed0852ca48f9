# -*- coding: utf-8 -*-
"""
Geodesic projection on a spherical Earth.

Every call goes through the same pyproj ``Geod`` built on a sphere of radius
``EARTH_RADIUS_M`` so discs and sleeves computed for one corridor line up
with each other. On a sphere the geodesic is the great circle.
"""

import numpy as np
from pyproj import Geod

from .constants import EARTH_RADIUS_M
from .errors import DegenerateInput

GEOD = Geod(a=EARTH_RADIUS_M, f=0.0)


def bearing(origin: tuple[float, float], destination: tuple[float, float]) -> float:
    """
    Initial compass bearing of the great circle from origin to destination.

    Args:
        origin: (lon, lat) start point in degrees
        destination: (lon, lat) end point in degrees

    Returns:
        Bearing in degrees in [0, 360), 0 = North, 90 = East

    Raises:
        DegenerateInput: if both points are identical
    """
    if tuple(origin) == tuple(destination):
        raise DegenerateInput(f"Bearing undefined between identical points {tuple(origin)}")
    az12, _, _ = GEOD.inv(origin[0], origin[1], destination[0], destination[1])
    return float(az12) % 360.0


def destination(origin: tuple[float, float], distance_m: float,
                bearing_deg: float) -> tuple[float, float]:
    """
    Point reached by travelling distance_m from origin along bearing_deg.

    Args:
        origin: (lon, lat) start point in degrees
        distance_m: Great-circle distance in meters
        bearing_deg: Compass bearing in degrees

    Returns:
        (lon, lat) of the destination
    """
    lon, lat, _ = GEOD.fwd(origin[0], origin[1], bearing_deg, distance_m)
    return (float(lon), float(lat))


def destinations(origin: tuple[float, float], distance_m: float,
                 bearings) -> np.ndarray:
    """Vectorised ``destination`` for many bearings; returns an (n, 2) lon/lat array."""
    bearings = np.asarray(bearings, dtype=float)
    lons = np.full(bearings.shape, float(origin[0]))
    lats = np.full(bearings.shape, float(origin[1]))
    dists = np.full(bearings.shape, float(distance_m))
    out_lons, out_lats, _ = GEOD.fwd(lons, lats, bearings, dists)
    return np.column_stack([out_lons, out_lats])
