# -*- coding: utf-8 -*-
"""
Route corridor package

Buffers a route of (lon, lat) points into a corridor polygon: a disc per
point, a sleeve per segment, a Boolean union of all of them and, in closed
mode, the interior holes filled in.
"""

from .constants import EARTH_RADIUS_M, DEFAULT_DISC_STEPS
from .errors import (
    CorridorError,
    InvalidArgument,
    DegenerateInput,
    UnionFailure,
)
from .coordinates import (
    latlng_to_lnglat,
    validate_lnglat,
)
from .geodesic import (
    bearing,
    destination,
)
from .disc import disc_around
from .sleeve import sleeve_between
from .overlay import (
    union,
    union_all,
)
from .builder import (
    BufferResult,
    build_corridor,
    fill_holes,
)
from .geojson import (
    to_feature,
    to_feature_collection,
)
from .settings import CorridorSettings, load_settings
from .session import CorridorSession

__all__ = [
    # Constants
    'EARTH_RADIUS_M',
    'DEFAULT_DISC_STEPS',
    # Errors
    'CorridorError',
    'InvalidArgument',
    'DegenerateInput',
    'UnionFailure',
    # Coordinates
    'latlng_to_lnglat',
    'validate_lnglat',
    # Geodesic
    'bearing',
    'destination',
    # Shapes
    'disc_around',
    'sleeve_between',
    # Union
    'union',
    'union_all',
    # Builder
    'BufferResult',
    'build_corridor',
    'fill_holes',
    # Output
    'to_feature',
    'to_feature_collection',
    # Settings
    'CorridorSettings',
    'load_settings',
    # Session
    'CorridorSession',
]
