"""Map entry CLI commands.

This module provides commands operating on one map's entries:
- get / set / delete: single-entry access
- list: show all entries in insertion order
- clear: remove every entry
- update: re-sync entries that drifted from the store
- demo: walk through basic map usage on an in-memory store
"""

from __future__ import annotations

import json
import sys
from typing import Any

import click

from propmap.cli.main import map_options, opened_map


def _parse_value(raw: str) -> Any:
    """Parse a command-line value as JSON, falling back to plain text."""
    try:
        return json.loads(raw)
    except json.JSONDecodeError:
        return raw


@click.command("get")
@map_options
@click.argument("key")
def get_entry(store_path: str, map_id: str, key: str) -> None:
    """Print the value stored under KEY as JSON.

    Exits with status 1 if KEY is not present.

    Examples:

        propmap get -s ./world.db -m players player1
    """
    with opened_map(store_path, map_id) as db:
        if not db.has(key):
            click.echo(f"Key not found: {key}", err=True)
            sys.exit(1)
        click.echo(json.dumps(db.get(key)))


@click.command("set")
@map_options
@click.argument("key")
@click.argument("value")
def set_entry(store_path: str, map_id: str, key: str, value: str) -> None:
    """Store VALUE under KEY.

    VALUE is parsed as JSON; anything that is not valid JSON is stored
    as a plain string.

    Examples:

        propmap set -s ./world.db -m players player1 Steve

        propmap set -s ./world.db -m scores player1 '{"level": 3}'
    """
    with opened_map(store_path, map_id) as db:
        db.set(key, _parse_value(value))


@click.command("delete")
@map_options
@click.argument("key")
def delete_entry(store_path: str, map_id: str, key: str) -> None:
    """Remove KEY from the map.

    Examples:

        propmap delete -s ./world.db -m players player2
    """
    with opened_map(store_path, map_id) as db:
        db.delete(key)


@click.command("list")
@map_options
@click.option(
    "--json",
    "output_json",
    is_flag=True,
    help="Output entries as a JSON object.",
)
def list_entries(store_path: str, map_id: str, output_json: bool) -> None:
    """List the map's entries.

    Examples:

        propmap list -s ./world.db -m players

        propmap list -s ./world.db -m players --json
    """
    with opened_map(store_path, map_id) as db:
        if output_json:
            click.echo(json.dumps(dict(db.entries()), indent=2))
            return

        click.echo(f"\nMap: {db.id} ({db.size} entries)")
        click.echo("=" * 60)
        for key, value in db:
            click.echo(f"{key}: {json.dumps(value)}")
        click.echo()


@click.command("clear")
@map_options
@click.confirmation_option(prompt="Remove every entry from this map?")
def clear_map(store_path: str, map_id: str) -> None:
    """Remove every entry from the map.

    Examples:

        propmap clear -s ./world.db -m players --yes
    """
    with opened_map(store_path, map_id) as db:
        removed = db.size
        db.clear()
        click.echo(f"Removed {removed} entries from map '{db.id}'.")


@click.command("update")
@map_options
def update_map(store_path: str, map_id: str) -> None:
    """Write back any entries whose stored value is out of date.

    Examples:

        propmap update -s ./world.db -m players
    """
    with opened_map(store_path, map_id) as db:
        writes = db.update()
        click.echo(f"Map '{db.id}': {writes} entries written.")


@click.command("demo")
def demo() -> None:
    """Show basic map usage against an in-memory store."""
    from propmap.database_map import DatabaseMap
    from propmap.store.memory import MemoryStore

    db: DatabaseMap[str] = DatabaseMap("test", MemoryStore())

    db.set("player1", "Steve")
    db.set("player2", "Alex")

    click.echo(f"Player 1: {db.get('player1')}")
    click.echo(f"Has player2? {db.has('player2')}")
    click.echo(f"Has player3? {db.has('player3')}")

    db.delete("player2")
    click.echo(f"Has player2 after delete? {db.has('player2')}")

    click.echo("All keys:")
    for key in db.keys():
        click.echo(f"- {key}")

    click.echo(f"Number of stored players: {db.size}")

    click.echo("All entries:")
    for key, value in db:
        click.echo(f"{key}: {value}")

    db.for_each(lambda value, key: click.echo(f"for_each -> {key}: {value}"))

    writes = db.update()
    click.echo(f"Entries written by update: {writes}")
