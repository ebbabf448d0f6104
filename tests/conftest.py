"""Shared test fixtures and helpers for the linemap test suite."""

from __future__ import annotations

from pathlib import Path

import pytest

from linemap.layout.engine import build_trip_paths, compute_layout
from linemap.parser.model import LayoutResult, RouteData, Stop, Trip, TripPath
from linemap.parser.route_json import load_route

EXAMPLES_DIR = Path(__file__).resolve().parent.parent / "examples"
BRANCHING_JSON = EXAMPLES_DIR / "branching_route.json"
LOOP_JSON = EXAMPLES_DIR / "loop_route.json"


# --- Route builders ---


def make_trip(
    trip_id: str,
    inbound: str | list[str] = "",
    outbound: str | list[str] = "",
    color: tuple[int, int, int] = (255, 0, 0),
    name: str | None = None,
) -> Trip:
    """Build a trip. Sequences may be given as strings of one-letter stop ids."""
    return Trip(
        id=trip_id,
        name=name or trip_id.upper(),
        color=color,
        inbound=tuple(inbound),
        outbound=tuple(outbound),
    )


def make_route(*trips: Trip, stops: list[str] | None = None) -> RouteData:
    """Build a route; stops default to every id the trips mention."""
    if stops is None:
        stops = []
        for trip in trips:
            for sid in (*trip.inbound, *trip.outbound):
                if sid not in stops:
                    stops.append(sid)
    return RouteData(
        trips=tuple(trips),
        stops=tuple(Stop(id=sid, name=f"Stop {sid}") for sid in stops),
    )


def layout_and_paths(
    route: RouteData, **kwargs
) -> tuple[LayoutResult, list[TripPath]]:
    """Run the full pipeline on a route."""
    result = compute_layout(route, **kwargs)
    return result, build_trip_paths(route, result)


# --- Fixtures ---


@pytest.fixture
def branching_route() -> RouteData:
    return load_route(BRANCHING_JSON)


@pytest.fixture
def loop_route() -> RouteData:
    return load_route(LOOP_JSON)


@pytest.fixture
def branching_layout(branching_route) -> LayoutResult:
    return compute_layout(branching_route)


@pytest.fixture
def fork_route() -> RouteData:
    """Two trips sharing a trunk, then splitting at B."""
    return make_route(
        make_trip("t1", inbound="ABC", outbound="CBA", color=(255, 0, 0)),
        make_trip("t2", inbound="ABD", outbound="DBA", color=(0, 0, 255)),
    )
