"""CLI for linemap."""

from __future__ import annotations

import logging
from pathlib import Path

import click

from linemap import __version__
from linemap.export import export_layout_json
from linemap.layout.constants import (
    GRID_SIZE,
    INBOUND_Y,
    LANE_HEIGHT,
    OUTBOUND_Y,
    STOP_SPACING,
)
from linemap.parser import Direction, RouteDataError
from linemap.render import render_svg
from linemap.session import DiagramSession
from linemap.themes import THEMES


# Spacing and grid values must be strictly positive
POSITIVE = click.FloatRange(min=0, min_open=True)


def layout_options(func):
    """Shared layout configuration options."""
    options = [
        click.option("--stop-spacing", type=POSITIVE, default=STOP_SPACING,
                     help=f"Horizontal spacing between layers (default: {STOP_SPACING:g})"),
        click.option("--lane-height", type=POSITIVE, default=LANE_HEIGHT,
                     help=f"Vertical spacing between lanes (default: {LANE_HEIGHT:g})"),
        click.option("--inbound-y", type=float, default=INBOUND_Y,
                     help=f"Y of the inbound main line (default: {INBOUND_Y:g})"),
        click.option("--outbound-y", type=float, default=OUTBOUND_Y,
                     help=f"Y of the outbound main line (default: {OUTBOUND_Y:g})"),
        click.option("--grid-size", type=POSITIVE, default=GRID_SIZE,
                     help=f"Step for diagonal interpolation (default: {GRID_SIZE:g})"),
        click.option("--straighten", is_flag=True, default=False,
                     help="Replace diagonal moves with right-angle elbows"),
        click.option("--trip", "trips", multiple=True,
                     help="Only show this trip id (repeatable; default: all trips)"),
    ]
    for option in reversed(options):
        func = option(func)
    return func


def _load_session(input_file: Path, **config) -> DiagramSession:
    session = DiagramSession(**config)
    try:
        session.load_text(input_file.read_text())
    except RouteDataError as e:
        click.echo(f"Parse error: {e}", err=True)
        raise SystemExit(1)
    return session


def _select_trips(session: DiagramSession, trips: tuple[str, ...]) -> None:
    if not trips:
        return
    unknown = [tid for tid in trips if session.route.trip(tid) is None]
    if unknown:
        click.echo(f"Unknown trip id(s): {', '.join(unknown)}", err=True)
        raise SystemExit(1)
    session.set_visible(list(trips))


@click.group()
@click.version_option(version=__version__)
@click.option("-v", "--verbose", is_flag=True, help="Log layout details to stderr.")
def cli(verbose: bool) -> None:
    """linemap: Generate schematic transit line diagrams from route JSON."""
    if verbose:
        logging.basicConfig(
            level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s"
        )


@cli.command()
@click.argument("input_file", type=click.Path(exists=True, path_type=Path))
@click.option("-o", "--output", type=click.Path(path_type=Path), default=None,
              help="Output SVG file path. Defaults to <input>.svg")
@click.option("--theme", type=click.Choice(list(THEMES.keys())), default="slate",
              help="Visual theme (default: slate)")
@click.option("--title", default="", help="Title drawn above the diagram")
@click.option("--width", type=int, default=None, help="SVG width in pixels")
@click.option("--height", type=int, default=None, help="SVG height in pixels")
@layout_options
def render(
    input_file: Path,
    output: Path | None,
    theme: str,
    title: str,
    width: int | None,
    height: int | None,
    stop_spacing: float,
    lane_height: float,
    inbound_y: float,
    outbound_y: float,
    grid_size: float,
    straighten: bool,
    trips: tuple[str, ...],
) -> None:
    """Render a JSON route definition to an SVG line diagram."""
    session = _load_session(
        input_file,
        stop_spacing=stop_spacing,
        lane_height=lane_height,
        inbound_y=inbound_y,
        outbound_y=outbound_y,
        grid_size=grid_size,
        straighten=straighten,
    )
    _select_trips(session, trips)

    svg = render_svg(
        session.route,
        session.layout,
        session.paths,
        THEMES[theme],
        visible_trip_ids=session.visible_trip_ids,
        title=title,
        width=width,
        height=height,
    )
    if not svg.endswith("\n"):
        svg += "\n"

    if output is None:
        output = input_file.with_suffix(".svg")

    output.write_text(svg)
    click.echo(f"Rendered {len(session.layout.positions)} stops, "
               f"{len(session.layout.connections)} connections, "
               f"{len(session.visible_trip_ids)} trips -> {output}")


@cli.command()
@click.argument("input_file", type=click.Path(exists=True, path_type=Path))
@click.option("-o", "--output", type=click.Path(path_type=Path), default=None,
              help="Output JSON file path. Prints to stdout when omitted")
@layout_options
def layout(
    input_file: Path,
    output: Path | None,
    stop_spacing: float,
    lane_height: float,
    inbound_y: float,
    outbound_y: float,
    grid_size: float,
    straighten: bool,
    trips: tuple[str, ...],
) -> None:
    """Compute the layout and export positions and paths as JSON."""
    session = _load_session(
        input_file,
        stop_spacing=stop_spacing,
        lane_height=lane_height,
        inbound_y=inbound_y,
        outbound_y=outbound_y,
        grid_size=grid_size,
        straighten=straighten,
    )
    _select_trips(session, trips)

    text = export_layout_json(session.layout, session.paths, session.visible_trip_ids)
    if output is None:
        click.echo(text, nl=False)
    else:
        output.write_text(text)
        click.echo(f"Wrote layout for {len(session.layout.positions)} stops -> {output}")


@cli.command()
@click.argument("input_file", type=click.Path(exists=True, path_type=Path))
def validate(input_file: Path) -> None:
    """Validate a JSON route definition."""
    session = _load_session(input_file)
    route = session.route

    warnings = []

    for sid in route.unresolved_stop_ids():
        warnings.append(f"Stop '{sid}' is used by a trip but not defined "
                        f"(shown by its id)")

    for direction, dropped in session.layout.dropped.items():
        if dropped:
            warnings.append(f"{direction.value}: conflicting stop order, "
                            f"not laid out: {', '.join(dropped)}")

    if warnings:
        click.echo("Warnings:", err=True)
        for warning in warnings:
            click.echo(f"  - {warning}", err=True)

    click.echo(f"Valid: {len(route.trips)} trips, "
               f"{len(route.stops)} stops, "
               f"{len(session.layout.connections)} connections")


@cli.command()
@click.argument("input_file", type=click.Path(exists=True, path_type=Path))
def info(input_file: Path) -> None:
    """Show information about a JSON route definition."""
    session = _load_session(input_file)
    route = session.route
    result = session.layout

    click.echo(f"Trips: {len(route.trips)}")
    for trip in route.trips:
        r, g, b = trip.color
        click.echo(f"  {trip.name} [{trip.id}] (rgb {r},{g},{b}): "
                   f"{len(trip.inbound)} inbound, {len(trip.outbound)} outbound stops")
    click.echo(f"Stops: {len(route.stops)}")

    for direction in (Direction.INBOUND, Direction.OUTBOUND):
        placed = result.stops_in(direction)
        n_layers = max((s.layer for s in placed), default=-1) + 1
        n_lanes = max((s.lane for s in placed), default=-1) + 1
        express = sum(
            1 for c in result.connections if c.direction is direction and c.is_express
        )
        sequence = (
            result.inbound_sequence
            if direction is Direction.INBOUND
            else result.outbound_sequence
        )
        click.echo(f"{direction.value.capitalize()}: {len(placed)} stops, "
                   f"{n_layers} layers, {n_lanes} lanes, "
                   f"{express} express connections")
        click.echo(f"  Consensus: {' > '.join(sequence) or '(none)'}")
        dropped = result.dropped.get(direction, [])
        if dropped:
            click.echo(f"  Dropped (cyclic order): {', '.join(dropped)}")
