"""CLI entry point for lifegrid."""

from __future__ import annotations

import logging
from datetime import datetime
from pathlib import Path

import click

from lifegrid.analytics.snapshot import build_snapshot
from lifegrid.config.constants import DEFAULT_LIFE_EXPECTANCY_YEARS
from lifegrid.config.defaults import default_state
from lifegrid.config.schema import AppState
from lifegrid.core.clock import reference_now
from lifegrid.core.formatting import format_date
from lifegrid.core.life import calculate_life_progress
from lifegrid.core.year import calculate_year_progress
from lifegrid.io.serialize import dump_snapshot, load_state_file
from lifegrid.utils.exceptions import StateError

_DATE_FORMATS = ["%Y-%m-%d", "%Y-%m-%dT%H:%M:%S", "%Y-%m-%d %H:%M:%S"]

today_option = click.option(
    "--today",
    type=click.DateTime(formats=_DATE_FORMATS),
    default=None,
    help="Reference date instead of the current time.",
)


def _load_state(state_path: Path | None) -> AppState:
    if state_path is None:
        return default_state()
    try:
        return load_state_file(state_path)
    except StateError as exc:
        raise click.ClickException(str(exc)) from exc


@click.group()
@click.version_option(package_name="lifegrid")
@click.option("-v", "--verbose", is_flag=True, help="Enable debug logging.")
def cli(verbose: bool) -> None:
    """lifegrid — your year and your life, counted in days, weeks and months."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


@cli.command()
@click.option("--year", default=None, type=int, help="Calendar year (default: current).")
@today_option
def year(year: int | None, today: datetime | None) -> None:
    """Show progress through the year."""
    progress = calculate_year_progress(reference_now(today), year)
    click.echo(
        f"{progress.year}: day {progress.days_passed} of {progress.total_days} "
        f"({progress.percentage:.1f}%), {progress.days_remaining} days remaining"
    )


@cli.command()
@click.option(
    "--birthdate",
    required=True,
    type=click.DateTime(formats=_DATE_FORMATS),
    help="Birthdate, e.g. 1990-01-01.",
)
@click.option(
    "--expectancy",
    default=DEFAULT_LIFE_EXPECTANCY_YEARS,
    show_default=True,
    type=click.IntRange(min=1),
    help="Life expectancy in years.",
)
@today_option
def life(birthdate: datetime, expectancy: int, today: datetime | None) -> None:
    """Show weeks and months lived and remaining."""
    progress = calculate_life_progress(birthdate, reference_now(today), expectancy)
    click.echo(f"Born {format_date(birthdate)}, expectancy {progress.expectancy_years} years")
    for unit, figures in (("Weeks", progress.weeks), ("Months", progress.months)):
        click.echo(
            f"  {unit}: {figures.lived:,} lived / {figures.total:,} total, "
            f"{figures.remaining:,} remaining ({figures.percentage:.1f}%)"
        )


@cli.command()
@click.option(
    "--state",
    "state_path",
    required=True,
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    help="Path to a JSON or YAML state file.",
)
@today_option
def events(state_path: Path, today: datetime | None) -> None:
    """List events with countdowns and progress."""
    snapshot = build_snapshot(_load_state(state_path), today)
    if not snapshot.events:
        click.echo("No events.")
        return
    for status in snapshot.events:
        click.echo(f"{status.title}: {status.label} ({status.progress:.0f}%)")


@cli.command()
@click.option(
    "--state",
    "state_path",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    default=None,
    help="Path to a JSON or YAML state file. Uses a fresh state if not provided.",
)
@click.option(
    "--output",
    "output_path",
    type=click.Path(path_type=Path),
    default=None,
    help="Path to write the snapshot JSON.",
)
@today_option
def snapshot(state_path: Path | None, output_path: Path | None, today: datetime | None) -> None:
    """Compute every figure from one reference instant and dump it as JSON."""
    snapshot_json = dump_snapshot(build_snapshot(_load_state(state_path), today))
    if output_path is None:
        click.echo(snapshot_json)
        return
    output_path.write_text(snapshot_json)
    click.echo(f"Snapshot written to {output_path}")


if __name__ == "__main__":
    cli()
