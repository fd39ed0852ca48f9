# -*- coding: utf-8 -*-
"""
Recompute-on-change host for a map client.

Holds the three inputs a map client edits (route, offset and closed flag)
and rebuilds the corridor from scratch whenever one of them changes.
Recomputation is fail-safe: when the union fails, the previous result
stays in place instead of being replaced by nothing.
"""

from __future__ import annotations

import logging
from typing import Callable

from .builder import BufferResult, build_corridor
from .coordinates import latlng_to_lnglat, validate_lnglat
from .errors import InvalidArgument, UnionFailure
from .settings import CorridorSettings

logger = logging.getLogger(__name__)


class CorridorSession:
    """
    Corridor state for one map view.

    The route is kept in the (lat, lon) order the map client reports clicks
    in and is transposed only when the corridor is built.
    """

    def __init__(self, settings: CorridorSettings | None = None):
        self.settings = settings or CorridorSettings()
        self.route: list[tuple[float, float]] = []
        self.offset_m: float = self.settings.offset_m
        self.closed: bool = self.settings.closed
        self.result: BufferResult | None = None
        self._result_callback: Callable[[BufferResult], None] | None = None

    def set_result_callback(self, callback: Callable[[BufferResult], None] | None) -> None:
        """
        Set a function to call with every newly computed result.

        The callback is not called when a recomputation fails or when the
        route is still too short to define a corridor.
        """
        self._result_callback = callback

    def add_point(self, latlng: tuple[float, float]) -> BufferResult | None:
        """Append a clicked (lat, lon) point to the route and recompute."""
        lat, lng = self._split_latlng(latlng)
        self.route = self.route + [(lat, lng)]
        return self.recompute()

    def set_offset(self, value) -> BufferResult | None:
        """
        Set the offset from a slider value (int, float or numeric string).

        Raises:
            InvalidArgument: not a number, or outside the configured range
        """
        if isinstance(value, str):
            try:
                value = int(value.strip())
            except ValueError as e:
                raise InvalidArgument(f"Offset {value!r} is not an integer") from e
        if isinstance(value, bool) or not isinstance(value, (int, float)):
            raise InvalidArgument(f"Offset must be a number, got {value!r}")
        lo, hi = self.settings.offset_min_m, self.settings.offset_max_m
        if not lo <= value <= hi:
            raise InvalidArgument(f"Offset {value} m outside [{lo}, {hi}]")
        self.offset_m = value
        return self.recompute()

    def set_closed(self, closed: bool) -> BufferResult | None:
        self.closed = bool(closed)
        return self.recompute()

    def clear(self) -> None:
        """Forget the route and the current corridor."""
        self.route = []
        self.result = None

    def recompute(self) -> BufferResult | None:
        """
        Rebuild the corridor from the current inputs.

        Returns:
            The current result; unchanged from before if the route is too
            short or the union failed
        """
        if len(self.route) < 2:
            return self.result

        try:
            result = build_corridor(latlng_to_lnglat(self.route), self.offset_m,
                                    self.closed, self.settings.disc_steps)
        except UnionFailure as e:
            logger.warning(f"Corridor recomputation failed, keeping previous result: {e}")
            return self.result

        self.result = result
        if self._result_callback:
            self._result_callback(result)
        return result

    @staticmethod
    def _split_latlng(latlng) -> tuple[float, float]:
        try:
            lat, lng = latlng
        except (TypeError, ValueError) as e:
            raise InvalidArgument(f"Malformed map point {latlng!r}") from e
        lng, lat = validate_lnglat((lng, lat))
        return lat, lng
