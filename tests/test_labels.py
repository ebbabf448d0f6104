"""Tests for stop label placement."""

from linemap.layout.engine import compute_layout
from linemap.layout.labels import label_text, place_labels
from linemap.parser.model import Direction, LayoutResult, StopLayout


def _stop(stop_id, x, y, lane, direction=Direction.INBOUND):
    return StopLayout(
        stop_id=stop_id,
        name=stop_id.upper(),
        layer=0,
        lane=lane,
        x=x,
        y=y,
        direction=direction,
    )


def test_label_text(branching_layout):
    harbor = branching_layout.stops[0]
    assert label_text(harbor) == "Harbor - harbor"


def test_labels_face_away_from_other_direction(loop_route):
    result = compute_layout(loop_route)
    labels = place_labels(result)
    assert len(labels) == len(result.stops)

    stop_y = {(s.stop_id, s.direction): s.y for s in result.stops}
    for label in labels:
        y = stop_y[(label.stop_id, label.direction)]
        if label.direction is Direction.INBOUND:
            assert label.above and label.y < y
        else:
            assert not label.above and label.y > y


def test_colliding_label_pushed_further_out():
    result = LayoutResult(stops=[_stop("a", 0, 0, 0), _stop("b", 0, -10, 1)])
    a, b = place_labels(result, label_offset=25)
    assert a.y == -25
    assert b.above
    assert b.y == -55


def test_label_flips_side_when_still_colliding():
    result = LayoutResult(
        stops=[_stop("a", 0, 0, 0), _stop("b", 0, -10, 1), _stop("c", 0, -20, 2)]
    )
    labels = {p.stop_id: p for p in place_labels(result, label_offset=25)}
    assert not labels["c"].above
    assert labels["c"].y == 5
