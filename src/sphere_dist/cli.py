"""CLI entrypoint for sphere-dist."""

from __future__ import annotations

import logging
import os

import click
from rich.console import Console
from rich.table import Table

from sphere_dist.geo import distance
from sphere_dist.models import Coordinate
from sphere_dist.places import PLACES, get_place
from sphere_dist.validation import InvalidCoordinateError

logger = logging.getLogger(__name__)

LOG_LEVEL = os.getenv("SPHERE_DIST_LOG_LEVEL", "WARNING")
DEFAULT_PRECISION = 2

console = Console()

precision_option = click.option(
    "--precision",
    default=DEFAULT_PRECISION,
    type=click.IntRange(min=0),
    envvar="SPHERE_DIST_PRECISION",
    show_default=True,
    help="Decimals to print.",
)


def _distance_table(
    label_a: str, a: Coordinate, label_b: str, b: Coordinate, km: float, precision: int
) -> Table:
    table = Table(title="Great-circle distance")
    table.add_column("Point", style="bold")
    table.add_column("Latitude", justify="right")
    table.add_column("Longitude", justify="right")

    table.add_row(label_a, f"{a.latitude:.4f}", f"{a.longitude:.4f}")
    table.add_row(label_b, f"{b.latitude:.4f}", f"{b.longitude:.4f}")
    table.add_section()
    table.add_row("[cyan]Distance[/]", f"[cyan]{km:.{precision}f} km[/]", "")
    return table


@click.group()
def cli():
    """Sphere Dist: Haversine distance between coordinates."""
    logging.basicConfig(
        level=LOG_LEVEL,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


# Negative coordinates look like options to click; let them through as arguments.
@cli.command(context_settings={"ignore_unknown_options": True})
@click.argument("lat1", type=float)
@click.argument("lon1", type=float)
@click.argument("lat2", type=float)
@click.argument("lon2", type=float)
@precision_option
def between(lat1: float, lon1: float, lat2: float, lon2: float, precision: int):
    """Distance in km between (LAT1, LON1) and (LAT2, LON2)."""
    try:
        km = distance(lat1, lon1, lat2, lon2)
    except InvalidCoordinateError as exc:
        logger.warning("rejected input: %s", exc)
        raise click.ClickException(str(exc)) from exc

    console.print(_distance_table("A", Coordinate(lat1, lon1), "B", Coordinate(lat2, lon2), km, precision))


@cli.command()
def places():
    """List the built-in reference places."""
    table = Table(title="Reference places")
    table.add_column("Slug", style="bold")
    table.add_column("Name")
    table.add_column("Latitude", justify="right")
    table.add_column("Longitude", justify="right")

    for place in PLACES.values():
        table.add_row(
            place.slug,
            place.name,
            f"{place.coordinate.latitude:.4f}",
            f"{place.coordinate.longitude:.4f}",
        )

    console.print(table)


@cli.command()
@click.argument("origin")
@click.argument("destination")
@precision_option
def route(origin: str, destination: str, precision: int):
    """Distance in km between two reference places (see `places`)."""
    try:
        a = get_place(origin)
        b = get_place(destination)
    except KeyError as exc:
        raise click.BadParameter(exc.args[0]) from exc

    km = a.coordinate.distance_to(b.coordinate)
    console.print(_distance_table(a.name, a.coordinate, b.name, b.coordinate, km, precision))
