"""Mini README: Entry point CLI for the fleet budget tracker.

This script exposes a Typer CLI that loads the fleet (from a delimited import
file when one is given, otherwise from the saved snapshot), runs the
interactive menu, and saves the snapshot on the way out. Settings come from
``FLEET_*`` environment variables; options given here take precedence.
"""

from __future__ import annotations

from pathlib import Path
from typing import Optional

import typer
from pydantic import ValidationError

from fleetbudget.configuration import get_settings
from fleetbudget.fleet import (
    DelimitedImportError,
    FleetStore,
    PersistenceError,
    SnapshotLoadStatus,
)
from fleetbudget.interface import FleetMenu
from fleetbudget.logging_utils import configure_root_logger

cli = typer.Typer(help="Track boat purchase budgets and expenses.")


def load_fleet(store: FleetStore, csv_file: Optional[Path], snapshot: Path, encoding: str) -> None:
    """Populate the store from exactly one source, reporting problems on the console."""

    if csv_file is not None:
        try:
            store.load_from_delimited(csv_file, encoding=encoding)
        except DelimitedImportError as error:
            typer.echo(f"Error reading CSV file: {error}")
        return

    try:
        status = store.load_from_snapshot(snapshot)
    except PersistenceError as error:
        typer.echo(f"Error loading data: {error}")
        return
    if status is SnapshotLoadStatus.NO_PREVIOUS_DATA:
        typer.echo("No previous data found. Starting fresh.")


@cli.command()
def run(
    csv_file: Optional[Path] = typer.Argument(
        None, help="Delimited file to import instead of loading the snapshot."
    ),
    snapshot: Optional[Path] = typer.Option(None, help="Snapshot file to load and save."),
    log_level: Optional[str] = typer.Option(None, help="Log level for diagnostics on stderr."),
) -> None:
    """Load the fleet, run the menu, then save the snapshot."""

    try:
        settings = get_settings()
    except ValidationError as error:
        typer.echo(f"Invalid configuration: {error}")
        raise typer.Exit(code=2) from error
    effective_snapshot = snapshot or settings.snapshot_path
    try:
        configure_root_logger(log_level or settings.log_level)
    except ValueError as error:
        raise typer.BadParameter(str(error), param_hint="--log-level") from error

    typer.echo("Welcome to the Fleet Management System")
    typer.echo("--------------------------------------")

    store = FleetStore()
    load_fleet(store, csv_file, effective_snapshot, settings.import_encoding)
    FleetMenu(store).run()

    try:
        store.save_to_snapshot(effective_snapshot)
    except PersistenceError as error:
        typer.echo(f"Error saving data: {error}")
        raise typer.Exit(code=1)
    finally:
        typer.echo("\nExiting the Fleet Management System")


if __name__ == "__main__":
    cli()
