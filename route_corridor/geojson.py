# -*- coding: utf-8 -*-
"""
GeoJSON interchange output for computed corridors.

Coordinates stay in (lon, lat) order as GeoJSON requires. Every feature
carries the result id so a renderer can tell a new corridor from a reused
one.
"""

from typing import TYPE_CHECKING

from shapely.geometry import mapping

if TYPE_CHECKING:
    from .builder import BufferResult


def _to_lists(coords):
    if isinstance(coords, (tuple, list)) and coords and isinstance(coords[0], (tuple, list)):
        return [_to_lists(c) for c in coords]
    return [float(c) for c in coords]


def geometry_to_geojson(geom) -> dict:
    """GeoJSON geometry dict with nested lists instead of shapely's tuples."""
    geo = mapping(geom)
    return {'type': geo['type'], 'coordinates': _to_lists(geo['coordinates'])}


def to_feature(result: 'BufferResult') -> dict:
    return {
        'type': 'Feature',
        'id': result.id,
        'geometry': geometry_to_geojson(result.geometry),
        'properties': {
            'offset_m': result.offset_m,
            'closed': result.closed,
        },
    }


def to_feature_collection(results) -> dict:
    return {
        'type': 'FeatureCollection',
        'features': [to_feature(r) for r in results if r is not None],
    }
