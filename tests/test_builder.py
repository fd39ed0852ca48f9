# -*- coding: utf-8 -*-
"""
Tests for the corridor builder.

These tests verify:
1. Short routes give no corridor
2. Every route point lies inside the corridor
3. Identical inputs give identical regions with distinct ids
4. Closed mode removes every hole
5. A larger offset gives a superset region
6. Zero-length segments are skipped without breaking the union
7. Invalid input fails before any geometry work starts
"""

import logging

import pytest
from shapely.geometry import Point, Polygon, MultiPolygon, box

from route_corridor import builder
from route_corridor.builder import BufferResult, build_corridor, fill_holes
from route_corridor.coordinates import latlng_to_lnglat
from route_corridor.disc import disc_around
from route_corridor.errors import InvalidArgument, UnionFailure


def _same_region(a, b, rel=1e-9):
    return a.symmetric_difference(b).area <= max(a.area, b.area) * rel


class TestShortRoutes:
    """Routes with fewer than two points have no corridor."""

    @pytest.mark.parametrize("closed", [False, True])
    @pytest.mark.parametrize("offset", [1, 100, 1000])
    def test_single_point(self, offset, closed):
        """A one-point route has no corridor for any offset or mode."""
        assert build_corridor([(14.5, 46.05)], offset, closed) is None

    def test_empty_route(self):
        """An empty route has no corridor."""
        assert build_corridor([], 100) is None


class TestScenarios:
    """End-to-end corridors for typical routes."""

    def test_two_point_route_is_single_polygon(self, short_route):
        """Two discs joined by one sleeve give a single Polygon without holes."""
        result = build_corridor(short_route, 100, closed=False)
        assert isinstance(result, BufferResult)
        assert isinstance(result.geometry, Polygon)
        assert result.hole_count == 0
        assert result.geometry.is_valid

    def test_loop_is_hollow_when_open(self, loop_route, loop_centroid):
        """An open loop leaves its unbuffered interior as a hole."""
        result = build_corridor(loop_route, 50, closed=False)
        assert result.hole_count >= 1
        assert not result.contains(loop_centroid)

    def test_loop_is_filled_when_closed(self, loop_route, loop_centroid):
        """Closed mode fills the loop interior and covers the open corridor."""
        open_result = build_corridor(loop_route, 50, closed=False)
        closed_result = build_corridor(loop_route, 50, closed=True)
        assert closed_result.hole_count == 0
        assert closed_result.closed
        assert closed_result.contains(loop_centroid)
        assert closed_result.geometry.area > open_result.geometry.area
        assert closed_result.geometry.buffer(1e-9).covers(open_result.geometry)

    def test_duplicate_consecutive_points(self, monkeypatch):
        """No sleeve is built for a zero-length segment; coincident discs still merge."""
        route = latlng_to_lnglat([(46.05, 14.50), (46.05, 14.50), (46.06, 14.51)])
        calls = []
        real_sleeve = builder.sleeve_between

        def counting_sleeve(p1, p2, width_m):
            calls.append((p1, p2))
            return real_sleeve(p1, p2, width_m)

        monkeypatch.setattr(builder, 'sleeve_between', counting_sleeve)
        result = build_corridor(route, 100)

        assert calls == [(route[1], route[2])]
        assert isinstance(result.geometry, Polygon)
        deduped = build_corridor([route[0], route[2]], 100)
        assert _same_region(result.geometry, deduped.geometry)

    def test_all_points_identical(self):
        """A route of identical points reduces to a single disc."""
        route = [(14.5, 46.05), (14.5, 46.05)]
        result = build_corridor(route, 100)
        assert isinstance(result.geometry, Polygon)
        assert result.geometry.area == pytest.approx(disc_around(route[0], 100).area)


class TestProperties:
    """Properties that hold for every route."""

    @pytest.mark.parametrize("closed", [False, True])
    def test_route_points_inside(self, zigzag_route, loop_route, closed):
        """Every route point is the center of a disc in the union."""
        for route in (zigzag_route, loop_route):
            result = build_corridor(route, 30, closed)
            for point in route:
                assert result.geometry.contains(Point(point))

    def test_idempotent_with_fresh_ids(self, zigzag_route):
        """Identical inputs give the same region but a new id."""
        first = build_corridor(zigzag_route, 80)
        second = build_corridor(zigzag_route, 80)
        assert _same_region(first.geometry, second.geometry)
        assert first.id != second.id

    def test_closed_has_no_holes(self, zigzag_route, loop_route, short_route):
        """No component has an interior ring in closed mode."""
        for route in (zigzag_route, loop_route, short_route):
            result = build_corridor(route, 50, closed=True)
            assert all(len(p.interiors) == 0 for p in result.polygons)

    def test_open_zigzag_has_no_holes(self, zigzag_route):
        """An open route that encloses nothing has no holes."""
        assert build_corridor(zigzag_route, 50).hole_count == 0

    @pytest.mark.parametrize("closed", [False, True])
    def test_monotonic_in_offset(self, zigzag_route, closed):
        """A larger offset gives a superset of the smaller corridor."""
        small = build_corridor(zigzag_route, 50, closed)
        large = build_corridor(zigzag_route, 150, closed)
        assert large.geometry.buffer(1e-9).covers(small.geometry)
        assert large.geometry.area > small.geometry.area

    def test_accepts_lists(self):
        """Points given as lists are accepted."""
        result = build_corridor([[14.5, 46.05], [14.51, 46.06]], 100)
        assert result is not None


class TestInvalidInput:
    """Invalid input fails fast with InvalidArgument."""

    @pytest.fixture(autouse=True)
    def no_geometry_work(self, monkeypatch):
        def fail(*args, **kwargs):
            raise AssertionError("geometry work started before validation")

        monkeypatch.setattr(builder, 'disc_around', fail)
        monkeypatch.setattr(builder, 'union_all', fail)

    @pytest.mark.parametrize("offset", [0, -5, float('nan'), float('inf')])
    def test_bad_offset(self, short_route, offset):
        """Zero, negative and non-finite offsets are rejected."""
        with pytest.raises(InvalidArgument):
            build_corridor(short_route, offset)

    def test_bad_offset_on_short_route(self):
        """Offset validation also runs for routes too short to build."""
        with pytest.raises(InvalidArgument):
            build_corridor([(14.5, 46.05)], 0)

    @pytest.mark.parametrize("route", [
        [(14.5, 46.05), (14.5, 95.0)],
        [(14.5, 46.05), (200.0, 46.0)],
        [(14.5, 46.05), (14.5,)],
        [(14.5, 46.05), None],
        None,
    ])
    def test_bad_route(self, route):
        """Out-of-range and malformed coordinates are rejected."""
        with pytest.raises(InvalidArgument):
            build_corridor(route, 100)

    def test_bad_steps(self, short_route):
        """A disc needs at least three steps."""
        with pytest.raises(InvalidArgument):
            build_corridor(short_route, 100, steps=2)

    @pytest.mark.parametrize("offset", [True, "100", b"100"])
    def test_offset_is_not_coerced(self, short_route, offset):
        """Booleans and strings are not converted into offsets."""
        with pytest.raises(InvalidArgument):
            build_corridor(short_route, offset)

    @pytest.mark.parametrize("closed", ["yes", 1, None])
    def test_closed_must_be_bool(self, short_route, closed):
        """The closed flag must be a real bool."""
        with pytest.raises(InvalidArgument):
            build_corridor(short_route, 100, closed)

    def test_steps_must_be_int(self, short_route):
        """Disc steps must be an integer."""
        with pytest.raises(InvalidArgument):
            build_corridor(short_route, 100, steps=64.0)


class TestUnionFailure:
    """Union errors surface to the caller, never a partial shape."""

    def test_propagates(self, short_route, monkeypatch):
        """UnionFailure reaches the caller instead of a partial shape."""
        def fail(shapes):
            raise UnionFailure("side location conflict")

        monkeypatch.setattr(builder, 'union_all', fail)
        with pytest.raises(UnionFailure):
            build_corridor(short_route, 100)


class TestFillHoles:
    """Test hole stripping for closed mode."""

    def test_polygon_with_hole(self):
        """The hole of a single Polygon is filled."""
        ring = box(0, 0, 10, 10).difference(box(2, 2, 8, 8))
        filled = fill_holes(ring)
        assert isinstance(filled, Polygon)
        assert len(filled.interiors) == 0
        assert filled.area == pytest.approx(100)

    def test_each_component_closed_independently(self):
        """Every component of a MultiPolygon is filled on its own."""
        a = box(0, 0, 10, 10).difference(box(2, 2, 8, 8))
        b = box(20, 0, 30, 10).difference(box(22, 2, 28, 8))
        filled = fill_holes(MultiPolygon([a, b]))
        assert isinstance(filled, MultiPolygon)
        assert len(filled.geoms) == 2
        assert all(len(p.interiors) == 0 for p in filled.geoms)
        assert filled.area == pytest.approx(200)

    def test_island_inside_hole_is_absorbed(self):
        """An island inside a filled hole is merged into its host."""
        ring = box(0, 0, 10, 10).difference(box(2, 2, 8, 8))
        island = box(4, 4, 6, 6)
        filled = fill_holes(MultiPolygon([ring, island]))
        assert isinstance(filled, Polygon)
        assert filled.is_valid
        assert filled.area == pytest.approx(100)


class TestBufferResult:
    """Test uniform access to Polygon and MultiPolygon results."""

    def test_polygons_of_multipolygon(self):
        """Components and point tests work the same for MultiPolygons."""
        result = BufferResult(MultiPolygon([box(0, 0, 1, 1), box(2, 2, 3, 3)]), 10, False)
        assert result.geom_type == 'MultiPolygon'
        assert len(result.polygons) == 2
        assert result.contains((0.5, 0.5))
        assert not result.contains((1.5, 1.5))

    def test_ids_are_unique(self):
        """Each result gets its own id."""
        a = BufferResult(box(0, 0, 1, 1), 10, False)
        b = BufferResult(box(0, 0, 1, 1), 10, False)
        assert a.id != b.id

    def test_to_geojson(self, short_route):
        """Results convert to a GeoJSON Feature."""
        feature = build_corridor(short_route, 100).to_geojson()
        assert feature['type'] == 'Feature'
        assert feature['geometry']['type'] == 'Polygon'


class TestLogging:
    """Builder log output."""

    def test_logs_summary(self, short_route, caplog):
        """A finished corridor is logged with its id."""
        with caplog.at_level(logging.INFO, logger='route_corridor.builder'):
            result = build_corridor(short_route, 100)
        assert result.id in caplog.text
