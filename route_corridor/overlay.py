# -*- coding: utf-8 -*-
"""
Boolean union of polygonal regions.

Backed by the GEOS overlay in shapely. Overlapping and touching inputs
merge, disjoint inputs give one MultiPolygon component per connected
cluster and enclosed gaps become holes. Inputs are repaired with
``make_valid`` first; if the overlay still hits a robustness error the
union is retried once snapped to ``SNAP_GRID_DEG`` before giving up.
"""

from __future__ import annotations

import logging

import shapely
from shapely.errors import GEOSException
from shapely.geometry import Polygon, MultiPolygon, GeometryCollection
from shapely.geometry.base import BaseGeometry
from shapely.ops import unary_union
from shapely.validation import make_valid

from .errors import UnionFailure

logger = logging.getLogger(__name__)

# About 0.1 mm at the equator
SNAP_GRID_DEG = 1e-9


def extract_polygons(geom) -> list[Polygon]:
    """
    Split an overlay output or corridor into its polygon components.

    Overlays and make_valid can return collections that mix polygons with
    the lines and points left where edges touch. Only parts with area are
    kept, so every returned polygon is one outer boundary of the region.

    Args:
        geom: Polygon, MultiPolygon, GeometryCollection or None

    Returns:
        List of Polygon components with area > 0
    """
    if geom is None or geom.is_empty:
        return []
    if isinstance(geom, Polygon):
        return [geom] if geom.area > 0 else []
    if isinstance(geom, (MultiPolygon, GeometryCollection)):
        return [p for part in geom.geoms for p in extract_polygons(part)]
    return []


def _as_polygonal(geom: BaseGeometry) -> Polygon | MultiPolygon:
    """Reduce an overlay output to a Polygon or MultiPolygon."""
    if isinstance(geom, (Polygon, MultiPolygon)) and geom.is_valid and not geom.is_empty:
        return geom

    polys = extract_polygons(make_valid(geom))
    if not polys:
        raise UnionFailure(f"Union produced no polygonal area ({geom.geom_type})")
    merged = unary_union(polys)
    if not isinstance(merged, (Polygon, MultiPolygon)):
        raise UnionFailure(f"Union produced {merged.geom_type}, expected polygonal output")
    return merged


def _prepare(geom: BaseGeometry) -> BaseGeometry:
    if geom is None or geom.is_empty:
        raise UnionFailure("Cannot union an empty geometry")
    if not geom.is_valid:
        geom = make_valid(geom)
    return geom


def union(a: BaseGeometry, b: BaseGeometry) -> Polygon | MultiPolygon:
    """
    Union two polygonal regions.

    Args:
        a: Polygon or MultiPolygon
        b: Polygon or MultiPolygon

    Returns:
        The merged region as a Polygon, or a MultiPolygon when disjoint

    Raises:
        UnionFailure: the overlay failed even after snapping
    """
    a = _prepare(a)
    b = _prepare(b)
    try:
        merged = a.union(b)
    except GEOSException as e:
        logger.debug(f"Union failed ({e}), retrying on a {SNAP_GRID_DEG} grid")
        try:
            merged = shapely.union(a, b, grid_size=SNAP_GRID_DEG)
        except GEOSException as e2:
            raise UnionFailure(f"Union failed: {e2}") from e2
    return _as_polygonal(merged)


def union_all(shapes) -> Polygon | MultiPolygon:
    """
    Fold shapes into one region, left to right.

    The first shape is the seed; the order only affects intermediate cost.

    Raises:
        UnionFailure: no shapes, or any pairwise union failed
    """
    shapes = list(shapes)
    if not shapes:
        raise UnionFailure("Nothing to union")

    merged = _as_polygonal(_prepare(shapes[0]))
    for shape in shapes[1:]:
        merged = union(merged, shape)
    return merged
