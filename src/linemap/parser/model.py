"""Data model for transit line diagrams."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum


class Direction(Enum):
    """Travel direction of a trip's stop sequence."""

    INBOUND = "inbound"
    OUTBOUND = "outbound"


Color = tuple[int, int, int]
Point3D = tuple[float, float, float]


@dataclass(frozen=True)
class Stop:
    """A stop served by the route."""

    id: str
    name: str
    lat: float | None = None
    lon: float | None = None


@dataclass(frozen=True)
class Trip:
    """One service pattern: ordered outbound and inbound stop sequences."""

    id: str
    name: str
    color: Color
    outbound: tuple[str, ...] = ()
    inbound: tuple[str, ...] = ()

    def stops_for(self, direction: Direction) -> tuple[str, ...]:
        if direction is Direction.INBOUND:
            return self.inbound
        return self.outbound


@dataclass(frozen=True)
class RouteData:
    """Complete route definition, supplied wholesale."""

    trips: tuple[Trip, ...] = ()
    stops: tuple[Stop, ...] = ()

    def stop_names(self) -> dict[str, str]:
        return {stop.id: stop.name for stop in self.stops}

    def trip(self, trip_id: str) -> Trip | None:
        for trip in self.trips:
            if trip.id == trip_id:
                return trip
        return None

    def unresolved_stop_ids(self) -> list[str]:
        """Return stop ids referenced by trips but missing from ``stops``."""
        known = {stop.id for stop in self.stops}
        missing: list[str] = []
        for trip in self.trips:
            for sid in (*trip.inbound, *trip.outbound):
                if sid not in known and sid not in missing:
                    missing.append(sid)
        return missing


# ---------------------------------------------------------------------------
# Derived layout entities (populated by the layout engine)
# ---------------------------------------------------------------------------


@dataclass
class StopLayout:
    """A stop placed in one direction of the diagram."""

    stop_id: str
    name: str
    layer: int
    lane: int
    x: float
    y: float
    direction: Direction
    is_shared: bool = False  # Appears in both inbound and outbound


@dataclass
class Connection:
    """A consecutive-stop edge of one trip in one direction."""

    source: str
    target: str
    trip_id: str
    trip_name: str
    color: Color
    direction: Direction
    is_express: bool = False  # Skips at least one layer
    is_branch: bool = False  # Not used by every trip in this direction


@dataclass
class StopPosition:
    """Merged per-stop record consumed by renderers."""

    x: float
    y: float
    level: int
    trip_ids: list[str] = field(default_factory=list)


@dataclass
class TripPath:
    """A trip with its renderable inbound and outbound polylines."""

    trip: Trip
    inbound_path: list[Point3D] = field(default_factory=list)
    outbound_path: list[Point3D] = field(default_factory=list)

    @property
    def id(self) -> str:
        return self.trip.id

    @property
    def name(self) -> str:
        return self.trip.name

    @property
    def color(self) -> Color:
        return self.trip.color


@dataclass
class LayoutResult:
    """Complete layout for both directions of a route."""

    stops: list[StopLayout] = field(default_factory=list)
    connections: list[Connection] = field(default_factory=list)
    positions: dict[str, StopPosition] = field(default_factory=dict)
    inbound_positions: dict[str, StopPosition] = field(default_factory=dict)
    outbound_positions: dict[str, StopPosition] = field(default_factory=dict)
    inbound_sequence: list[str] = field(default_factory=list)
    outbound_sequence: list[str] = field(default_factory=list)
    # Stops referenced in a direction but left unlayered (cyclic precedence)
    dropped: dict[Direction, list[str]] = field(default_factory=dict)

    def stops_in(self, direction: Direction) -> list[StopLayout]:
        return [s for s in self.stops if s.direction is direction]

    def positions_for(self, direction: Direction) -> dict[str, StopPosition]:
        if direction is Direction.INBOUND:
            return self.inbound_positions
        return self.outbound_positions
