"""Main CLI entry point.

This module provides the main CLI group, logging set-up and the helper
used by every command to open a map on a SQLite store.
"""

from __future__ import annotations

import logging
import sys
from contextlib import contextmanager
from typing import Any, Callable, Iterator

import click

from propmap import __version__


@click.group()
@click.version_option(version=__version__)
@click.option(
    "--verbose",
    "-v",
    is_flag=True,
    help="Log debug output to stderr.",
)
def cli(verbose: bool) -> None:
    """propmap - persistent namespaced key-value maps.

    Use 'propmap set' and 'propmap get' to write and read entries.
    Use 'propmap list' to list a map's entries.
    Use 'propmap update' to re-sync a map to its store.
    Use 'propmap export' and 'propmap import' to move snapshots.
    """
    if verbose:
        logging.basicConfig(
            level=logging.DEBUG,
            format="%(levelname)s %(name)s: %(message)s",
        )


def map_options(func: Callable[..., Any]) -> Callable[..., Any]:
    """Add the --store and --map options shared by map commands."""
    func = click.option(
        "--map",
        "-m",
        "map_id",
        required=True,
        help="Map id namespacing the keys.",
    )(func)
    func = click.option(
        "--store",
        "-s",
        "store_path",
        required=True,
        type=click.Path(dir_okay=False),
        help="Path to the SQLite property store (created if needed).",
    )(func)
    return func


@contextmanager
def opened_map(store_path: str, map_id: str) -> Iterator[Any]:
    """Open a map for a command, exiting with status 1 on failure."""
    from propmap.params import MapParams, open_map

    try:
        params = MapParams(map_id=map_id, store_path=store_path)
        db, store = open_map(params)
    except Exception as e:
        click.echo(f"Error opening map: {e}", err=True)
        sys.exit(1)

    try:
        yield db
    finally:
        store.close()


# Import and register commands
from propmap.cli.entries import (  # noqa: E402
    clear_map,
    delete_entry,
    demo,
    get_entry,
    list_entries,
    set_entry,
    update_map,
)
from propmap.cli.transfer import export_map, import_map  # noqa: E402

cli.add_command(get_entry)
cli.add_command(set_entry)
cli.add_command(delete_entry)
cli.add_command(list_entries)
cli.add_command(clear_map)
cli.add_command(update_map)
cli.add_command(export_map)
cli.add_command(import_map)
cli.add_command(demo)


def main() -> None:
    """Entry point for the CLI."""
    cli()


if __name__ == "__main__":  # pragma: no cover
    main()
