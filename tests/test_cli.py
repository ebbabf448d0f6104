"""Tests for the CLI entry points."""

import json

import pytest
from click.testing import CliRunner
from conftest import BRANCHING_JSON

from linemap import __version__
from linemap.cli import cli


def test_render_produces_svg(tmp_path):
    """render command produces an SVG file."""
    out = tmp_path / "output.svg"
    runner = CliRunner()
    result = runner.invoke(cli, ["render", str(BRANCHING_JSON), "-o", str(out)])
    assert result.exit_code == 0, result.output
    content = out.read_text()
    assert "<svg" in content
    assert content.endswith("\n")
    assert "Rendered 7 stops" in result.output


def test_render_default_output(tmp_path):
    """render command uses input stem + .svg when no -o given."""
    route = tmp_path / "route.json"
    route.write_text(BRANCHING_JSON.read_text())
    runner = CliRunner()
    result = runner.invoke(cli, ["render", str(route)])
    assert result.exit_code == 0, result.output
    assert (tmp_path / "route.svg").exists()


def test_render_options(tmp_path):
    out = tmp_path / "output.svg"
    runner = CliRunner()
    result = runner.invoke(
        cli,
        [
            "render", str(BRANCHING_JSON), "-o", str(out),
            "--theme", "light", "--straighten", "--trip", "t1",
            "--title", "Harbour Lines",
        ],
    )
    assert result.exit_code == 0, result.output
    content = out.read_text()
    assert "Harbour Lines" in content
    assert "rgb(60,180,75)" not in content


def test_render_unknown_trip(tmp_path):
    runner = CliRunner()
    result = runner.invoke(
        cli,
        ["render", str(BRANCHING_JSON), "-o", str(tmp_path / "x.svg"), "--trip", "t9"],
    )
    assert result.exit_code == 1
    assert "t9" in result.output


def test_layout_prints_json():
    runner = CliRunner()
    result = runner.invoke(cli, ["layout", str(BRANCHING_JSON)])
    assert result.exit_code == 0, result.output
    payload = json.loads(result.output)
    assert payload["positions"]["harbor"]["tripIds"] == ["t1", "t2", "t3"]
    assert [p["id"] for p in payload["paths"]] == ["t1", "t2", "t3"]


def test_layout_writes_file(tmp_path):
    out = tmp_path / "layout.json"
    runner = CliRunner()
    result = runner.invoke(
        cli, ["layout", str(BRANCHING_JSON), "-o", str(out), "--trip", "t2"]
    )
    assert result.exit_code == 0, result.output
    payload = json.loads(out.read_text())
    assert [p["id"] for p in payload["paths"]] == ["t2"]


def test_validate_success():
    """validate command succeeds on valid input."""
    runner = CliRunner()
    result = runner.invoke(cli, ["validate", str(BRANCHING_JSON)])
    assert result.exit_code == 0
    assert "Valid: 3 trips, 7 stops" in result.output


def test_validate_reports_warnings(tmp_path):
    route = tmp_path / "route.json"
    route.write_text(json.dumps({
        "trips": [
            {"id": "t1", "inbound": ["a", "b", "c"]},
            {"id": "t2", "inbound": ["c", "b"]},
        ],
        "stops": [{"id": "a"}, {"id": "b"}],
    }))
    runner = CliRunner()
    result = runner.invoke(cli, ["validate", str(route)])
    assert result.exit_code == 0
    assert "Stop 'c' is used by a trip but not defined" in result.output
    assert "not laid out: b, c" in result.output


def test_validate_bad_file(tmp_path):
    """validate command reports parse errors."""
    bad = tmp_path / "bad.json"
    bad.write_text('{"stops": []}')
    runner = CliRunner()
    result = runner.invoke(cli, ["validate", str(bad)])
    assert result.exit_code == 1
    assert "Parse error" in result.output


@pytest.mark.parametrize("option", ["--grid-size", "--stop-spacing", "--lane-height"])
@pytest.mark.parametrize("value", ["0", "-50"])
def test_non_positive_spacing_rejected(option, value):
    """Spacing and grid options must be strictly positive."""
    runner = CliRunner()
    result = runner.invoke(cli, ["layout", str(BRANCHING_JSON), f"{option}={value}"])
    assert result.exit_code == 2
    assert f"Invalid value for '{option}'" in result.output
    assert not isinstance(result.exception, ZeroDivisionError)


def test_missing_input_file(tmp_path):
    runner = CliRunner()
    result = runner.invoke(cli, ["info", str(tmp_path / "nope.json")])
    assert result.exit_code != 0


def test_info_output():
    """info command prints route and layout metadata."""
    runner = CliRunner()
    result = runner.invoke(cli, ["info", str(BRANCHING_JSON)])
    assert result.exit_code == 0
    assert "Trips: 3" in result.output
    assert "Stops: 7" in result.output
    assert "Inbound: 7 stops, 5 layers, 2 lanes, 2 express connections" in result.output
    assert "Consensus: harbor > market > central" in result.output


def test_version():
    runner = CliRunner()
    result = runner.invoke(cli, ["--version"])
    assert result.exit_code == 0
    assert __version__ in result.output


def test_verbose_flag(tmp_path):
    runner = CliRunner()
    result = runner.invoke(cli, ["-v", "validate", str(BRANCHING_JSON)])
    assert result.exit_code == 0
