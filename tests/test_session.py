"""Tests for the diagram session and the JSON export."""

import json

import pytest
from conftest import BRANCHING_JSON, LOOP_JSON

from linemap.export import export_layout, export_layout_json
from linemap.parser.route_json import RouteDataError
from linemap.session import DiagramSession


@pytest.fixture
def session():
    s = DiagramSession()
    s.load_text(BRANCHING_JSON.read_text())
    return s


def test_load_shows_all_trips(session):
    assert session.visible_trip_ids == ["t1", "t2", "t3"]
    assert [tp.id for tp in session.visible_paths()] == ["t1", "t2", "t3"]
    assert session.layout.positions


def test_toggle_trip(session):
    session.toggle_trip("t2")
    assert [tp.id for tp in session.visible_paths()] == ["t1", "t3"]
    session.toggle_trip("t2")
    # Paths keep trip order regardless of toggle order
    assert [tp.id for tp in session.visible_paths()] == ["t1", "t2", "t3"]


def test_toggle_unknown_trip_ignored(session):
    session.toggle_trip("nope")
    assert session.visible_trip_ids == ["t1", "t2", "t3"]


def test_set_visible(session):
    session.set_visible(["t3", "nope"])
    assert [tp.id for tp in session.visible_paths()] == ["t3"]


def test_malformed_input_keeps_state(session):
    session.toggle_trip("t1")
    route = session.route
    layout = session.layout

    with pytest.raises(RouteDataError):
        session.load_text('{"trips": []}')

    assert session.route is route
    assert session.layout is layout
    assert session.visible_trip_ids == ["t2", "t3"]


def test_new_route_resets_selection(session):
    session.toggle_trip("t1")
    session.load_text(LOOP_JSON.read_text())
    assert session.visible_trip_ids == ["loop"]
    assert set(session.layout.positions) == {"a", "b", "c", "d"}


def test_session_configuration():
    s = DiagramSession(stop_spacing=50, lane_height=20, inbound_y=10, outbound_y=500)
    s.load_text(LOOP_JSON.read_text())
    assert s.layout.inbound_positions["b"].x == 50
    assert s.layout.inbound_positions["b"].y == 10
    assert s.layout.outbound_positions["b"].y == 500


def test_export_payload(session):
    payload = export_layout(session.layout, session.paths)
    assert payload["positions"]["harbor"] == {
        "x": 0,
        "y": 240,
        "level": 4,
        "tripIds": ["t1", "t2", "t3"],
    }
    conn = payload["connections"][0]
    assert conn["from"] == "harbor" and conn["to"] == "market"
    assert conn["direction"] == "inbound"
    assert conn["color"] == [230, 25, 75]
    assert {p["id"] for p in payload["paths"]} == {"t1", "t2", "t3"}
    assert payload["paths"][0]["inboundPath"][0] == [0, 0, 0]
    assert payload["inboundSequence"][0] == "harbor"


def test_export_filters_visible_paths(session):
    session.toggle_trip("t1")
    payload = export_layout(session.layout, session.paths, session.visible_trip_ids)
    assert [p["id"] for p in payload["paths"]] == ["t2", "t3"]
    # Positions are not filtered
    assert "museum" in payload["positions"]


def test_export_json_round_trips(session):
    text = export_layout_json(session.layout, session.paths)
    assert text.endswith("\n")
    assert json.loads(text)["stops"][0]["stopId"] == "harbor"
