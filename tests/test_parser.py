"""Tests for the JSON route parser."""

import json

import pytest

from linemap.parser.route_json import (
    DEFAULT_COLOR,
    RouteDataError,
    load_route,
    parse_route_dict,
    parse_route_json,
)


def _doc(trips=None, stops=None):
    return {"trips": trips or [], "stops": stops or []}


def test_parse_full_route(branching_route):
    assert [t.id for t in branching_route.trips] == ["t1", "t2", "t3"]
    main = branching_route.trips[0]
    assert main.name == "Main Line"
    assert main.color == (230, 25, 75)
    assert main.inbound[0] == "harbor"
    assert main.outbound[-1] == "harbor"
    harbor = branching_route.stops[0]
    assert harbor.name == "Harbor"
    assert harbor.lat == pytest.approx(59.91)
    assert branching_route.stops[1].lat is None


def test_parse_defaults():
    route = parse_route_dict(_doc(trips=[{"id": "t1"}], stops=[{"id": "a"}]))
    trip = route.trips[0]
    assert trip.name == "t1"
    assert trip.color == DEFAULT_COLOR
    assert trip.inbound == () and trip.outbound == ()
    assert route.stops[0].name == "a"


def test_numeric_ids_become_strings():
    route = parse_route_dict(
        _doc(trips=[{"id": 7, "inbound": [1, 2]}], stops=[{"id": 1}])
    )
    assert route.trips[0].id == "7"
    assert route.trips[0].inbound == ("1", "2")
    assert route.stops[0].id == "1"


def test_invalid_json():
    with pytest.raises(RouteDataError, match="Invalid JSON"):
        parse_route_json("{not json")


@pytest.mark.parametrize(
    "doc",
    [
        [],
        {"trips": []},
        {"stops": []},
        {"trips": {}, "stops": []},
    ],
)
def test_missing_collections(doc):
    with pytest.raises(RouteDataError):
        parse_route_dict(doc)


@pytest.mark.parametrize(
    "color",
    [[1, 2], [1, 2, 256], [1, 2, -1], ["1", 2, 3], [1.5, 2, 3], [True, 2, 3], "red"],
)
def test_invalid_color(color):
    with pytest.raises(RouteDataError, match="color"):
        parse_route_dict(_doc(trips=[{"id": "t1", "color": color}]))


def test_invalid_sequence():
    with pytest.raises(RouteDataError, match="inbound"):
        parse_route_dict(_doc(trips=[{"id": "t1", "inbound": "abc"}]))
    with pytest.raises(RouteDataError, match="outbound"):
        parse_route_dict(_doc(trips=[{"id": "t1", "outbound": [None]}]))


def test_missing_ids():
    with pytest.raises(RouteDataError, match="Trip #0"):
        parse_route_dict(_doc(trips=[{"name": "nameless"}]))
    with pytest.raises(RouteDataError, match="Stop #1"):
        parse_route_dict(_doc(stops=[{"id": "a"}, {"id": ""}]))


def test_duplicate_ids():
    with pytest.raises(RouteDataError, match="Duplicate trip id 't1'"):
        parse_route_dict(_doc(trips=[{"id": "t1"}, {"id": "t1"}]))
    with pytest.raises(RouteDataError, match="Duplicate stop id 'a'"):
        parse_route_dict(_doc(stops=[{"id": "a"}, {"id": "a"}]))


def test_invalid_coordinates():
    with pytest.raises(RouteDataError, match="lat"):
        parse_route_dict(_doc(stops=[{"id": "a", "lat": "north"}]))


def test_load_route_from_file(tmp_path):
    path = tmp_path / "route.json"
    path.write_text(json.dumps(_doc(trips=[{"id": "t1", "inbound": ["a"]}])))
    route = load_route(path)
    assert route.trips[0].inbound == ("a",)


def test_unresolved_stop_ids():
    route = parse_route_dict(
        _doc(
            trips=[{"id": "t1", "inbound": ["a", "b"], "outbound": ["c", "b"]}],
            stops=[{"id": "a", "name": "Alpha"}],
        )
    )
    assert route.unresolved_stop_ids() == ["b", "c"]
    assert route.stop_names() == {"a": "Alpha"}
