"""Diagram session: the accepted route plus the visible-trip selection.

A session only ever holds route data that passed validation. Loading new
data replaces everything wholesale and recomputes the layout; a failed load
leaves the previous route, layout and selection untouched.
"""

from __future__ import annotations

import logging

from linemap.layout.constants import (
    GRID_SIZE,
    INBOUND_Y,
    LANE_HEIGHT,
    LENGTH_EPSILON,
    OUTBOUND_Y,
    STOP_SPACING,
)
from linemap.layout.engine import build_trip_paths, compute_layout
from linemap.parser.model import LayoutResult, RouteData, TripPath
from linemap.parser.route_json import parse_route_json

logger = logging.getLogger(__name__)


class DiagramSession:
    """Holds one route's layout and which of its trips are shown."""

    def __init__(
        self,
        stop_spacing: float = STOP_SPACING,
        lane_height: float = LANE_HEIGHT,
        inbound_y: float = INBOUND_Y,
        outbound_y: float = OUTBOUND_Y,
        grid_size: float = GRID_SIZE,
        straighten: bool = False,
        epsilon: float = LENGTH_EPSILON,
    ) -> None:
        self.stop_spacing = stop_spacing
        self.lane_height = lane_height
        self.inbound_y = inbound_y
        self.outbound_y = outbound_y
        self.grid_size = grid_size
        self.straighten = straighten
        self.epsilon = epsilon

        self.route = RouteData()
        self.layout = LayoutResult()
        self.paths: list[TripPath] = []
        self.visible_trip_ids: list[str] = []

    def load_text(self, text: str) -> None:
        """Parse and accept a JSON route definition.

        Raises RouteDataError on malformed input, before any state changes.
        """
        self.load(parse_route_json(text))

    def load(self, route: RouteData) -> None:
        """Accept validated route data and show all of its trips."""
        layout = compute_layout(
            route,
            stop_spacing=self.stop_spacing,
            lane_height=self.lane_height,
            inbound_y=self.inbound_y,
            outbound_y=self.outbound_y,
        )
        paths = build_trip_paths(
            route,
            layout,
            grid_size=self.grid_size,
            straighten=self.straighten,
            epsilon=self.epsilon,
        )

        self.route = route
        self.layout = layout
        self.paths = paths
        self.visible_trip_ids = [trip.id for trip in route.trips]
        logger.info(
            "Loaded route: %d trips, %d stops", len(route.trips), len(route.stops)
        )

    def toggle_trip(self, trip_id: str) -> None:
        """Show a hidden trip or hide a shown one. Unknown ids are ignored."""
        if trip_id in self.visible_trip_ids:
            self.visible_trip_ids.remove(trip_id)
        elif self.route.trip(trip_id) is not None:
            self.visible_trip_ids.append(trip_id)

    def set_visible(self, trip_ids: list[str]) -> None:
        """Show exactly the given trips. Unknown ids are ignored."""
        known = {trip.id for trip in self.route.trips}
        self.visible_trip_ids = [tid for tid in trip_ids if tid in known]

    def visible_paths(self) -> list[TripPath]:
        """Trip paths of the visible trips, in trip order."""
        visible = set(self.visible_trip_ids)
        return [tp for tp in self.paths if tp.id in visible]
