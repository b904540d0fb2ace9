"""Snapshot CLI commands.

This module provides commands for moving a map's entries to and from
human-readable JSON files:
- export: Write all entries to a JSON object file
- import: Set entries from a JSON object file
"""

from __future__ import annotations

import json
import sys
from pathlib import Path

import click

from propmap.cli.main import map_options, opened_map


@click.command("export")
@map_options
@click.option(
    "--output",
    "-o",
    "output_path",
    required=True,
    type=click.Path(dir_okay=False),
    help="JSON file to write the entries to.",
)
def export_map(store_path: str, map_id: str, output_path: str) -> None:
    """Export the map's entries to a JSON file.

    Examples:

        propmap export -s ./world.db -m players -o players.json
    """
    from propmap.encoders.json_encoder import JsonEncoder

    path = Path(output_path)
    with opened_map(store_path, map_id) as db:
        entries = {
            key: value for key, value in db.entries() if value is not None
        }
        try:
            path.parent.mkdir(parents=True, exist_ok=True)
            JsonEncoder().export(entries, path)
        except Exception as e:
            click.echo(f"Error exporting map: {e}", err=True)
            sys.exit(1)
        click.echo(f"Exported {len(entries)} entries to {path}")


@click.command("import")
@map_options
@click.option(
    "--input",
    "-i",
    "input_path",
    required=True,
    type=click.Path(exists=True, dir_okay=False),
    help="JSON file holding an object of key to value.",
)
@click.option(
    "--json",
    "output_json",
    is_flag=True,
    help="Output result as JSON.",
)
def import_map(
    store_path: str, map_id: str, input_path: str, output_json: bool
) -> None:
    """Set entries from a JSON file written by export.

    Existing keys not in the file are left untouched.

    Examples:

        propmap import -s ./world.db -m players -i players.json
    """
    from propmap.encoders.json_encoder import JsonEncoder

    try:
        entries = JsonEncoder().import_(Path(input_path))
    except Exception as e:
        click.echo(f"Error reading {input_path}: {e}", err=True)
        sys.exit(1)

    with opened_map(store_path, map_id) as db:
        for key, value in entries.items():
            db.set(key, value)

        if output_json:
            output = {
                "map_id": db.id,
                "input_path": input_path,
                "imported": len(entries),
                "size": db.size,
            }
            click.echo(json.dumps(output, indent=2))
        else:
            click.echo(f"Imported {len(entries)} entries into '{db.id}'")
