# -*- coding: utf-8 -*-
"""
Shared constants for corridor calculations.

Bearings use the compass convention (clockwise from North):
    0° = North
    90° = East
    180° = South
    270° = West
"""

# Mean Earth radius (IUGG) in meters, used for every projection
EARTH_RADIUS_M = 6371008.8

# Number of vertices used to approximate a disc
DEFAULT_DISC_STEPS = 64

# Side offsets of a sleeve relative to the segment bearing
LEFT = -90.0
RIGHT = 90.0
