# -*- coding: utf-8 -*-
"""
Corridor builder.

Turns a route and a lateral offset into a buffered corridor:
1. One disc per route point
2. One sleeve per non-degenerate segment
3. Union of everything, seeded with the first disc
4. In closed mode, every component keeps only its exterior ring

The builder is a pure function. All validation happens before any
projection or union work, so a failure never leaves a partial result.
"""

from __future__ import annotations

import logging
import uuid
from dataclasses import dataclass, field

from shapely.geometry import Point, Polygon, MultiPolygon

from .constants import DEFAULT_DISC_STEPS
from .disc import disc_around
from .sleeve import is_degenerate, sleeve_between
from .overlay import extract_polygons, union_all
from .validate_data import parse_request

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class BufferResult:
    """
    One computed corridor.

    ``id`` is generated for every computation, so two results built from
    identical inputs are geometrically equal but never share an id.
    """
    geometry: Polygon | MultiPolygon
    offset_m: float
    closed: bool
    id: str = field(default_factory=lambda: uuid.uuid4().hex)

    @property
    def geom_type(self) -> str:
        return self.geometry.geom_type

    @property
    def polygons(self) -> list[Polygon]:
        """Components of the corridor, one per outer boundary."""
        return extract_polygons(self.geometry)

    @property
    def hole_count(self) -> int:
        return sum(len(p.interiors) for p in self.polygons)

    def contains(self, lnglat: tuple[float, float]) -> bool:
        """True if the (lon, lat) point lies inside or on the corridor."""
        return self.geometry.covers(Point(lnglat))

    def to_geojson(self) -> dict:
        from .geojson import to_feature
        return to_feature(self)


def fill_holes(geom: Polygon | MultiPolygon) -> Polygon | MultiPolygon:
    """
    Drop the interior rings of every component.

    Each component is closed independently. A component that sat inside a
    hole of another one is covered once that hole is filled, so it is
    dropped to keep the MultiPolygon valid.

    Args:
        geom: Polygon or MultiPolygon

    Returns:
        Polygon or MultiPolygon without holes
    """
    filled = [Polygon(p.exterior) for p in extract_polygons(geom)]
    filled.sort(key=lambda p: p.area, reverse=True)

    kept: list[Polygon] = []
    for poly in filled:
        if any(k.covers(poly) for k in kept):
            continue
        kept.append(poly)

    if len(kept) == 1:
        return kept[0]
    return MultiPolygon(kept)


def build_corridor(route, offset_m: float, closed: bool = False,
                   steps: int = DEFAULT_DISC_STEPS) -> BufferResult | None:
    """
    Build the buffered corridor around a route.

    Args:
        route: Sequence of (lon, lat) points; transpose (lat, lon) input
            with ``coordinates.latlng_to_lnglat`` first
        offset_m: Lateral distance in meters, must be > 0
        closed: Fill the interior holes of the result
        steps: Number of vertices per disc

    Returns:
        BufferResult, or None when the route has fewer than 2 points

    Raises:
        InvalidArgument: non-positive offset or malformed coordinates
        UnionFailure: the union could not be resolved
    """
    request = parse_request(route, offset_m, closed, steps)
    points = request.route
    if len(points) < 2:
        return None

    discs = [disc_around(p, request.offset_m, request.steps) for p in points]

    sleeves = []
    for i, (p1, p2) in enumerate(zip(points[:-1], points[1:])):
        if is_degenerate(p1, p2):
            logger.debug(f"Skipping sleeve for zero-length segment {i} at {p1}")
            continue
        sleeves.append(sleeve_between(p1, p2, request.offset_m))

    merged = union_all(discs + sleeves)

    if request.closed:
        merged = fill_holes(merged)

    result = BufferResult(merged, request.offset_m, request.closed)
    logger.info(
        f"Corridor {result.id}: {len(points)} points, {len(sleeves)} sleeves, "
        f"offset {request.offset_m} m, closed={request.closed} -> "
        f"{result.geom_type} with {len(result.polygons)} component(s), {result.hole_count} hole(s)"
    )
    return result
