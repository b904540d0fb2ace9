"""Functional tests for map CLI commands against SQLite files."""

import json

from click.testing import CliRunner

from propmap.cli import cli


def run(*args):
    return CliRunner().invoke(cli, list(args))


# Test set then get prints the stored JSON value.
def test_cli_set_then_get(tmp_path):
    store = str(tmp_path / "world.db")

    result = run("set", "-s", store, "-m", "players", "player1", "Steve")
    assert result.exit_code == 0

    result = run("get", "-s", store, "-m", "players", "player1")
    assert result.exit_code == 0
    assert result.output.strip() == '"Steve"'


# Test JSON values are parsed before storing.
def test_cli_set_parses_json(tmp_path):
    store = str(tmp_path / "world.db")

    run("set", "-s", store, "-m", "scores", "p1", '{"level": 3}')
    result = run("get", "-s", store, "-m", "scores", "p1")

    assert json.loads(result.output) == {"level": 3}


# Test get of a missing key exits with an error.
def test_cli_get_missing_key(tmp_path):
    store = str(tmp_path / "world.db")

    result = run("get", "-s", store, "-m", "players", "nobody")

    assert result.exit_code == 1
    assert "Key not found" in result.output


# Test delete removes the key.
def test_cli_delete(tmp_path):
    store = str(tmp_path / "world.db")
    run("set", "-s", store, "-m", "players", "player2", "Alex")

    result = run("delete", "-s", store, "-m", "players", "player2")
    assert result.exit_code == 0

    result = run("get", "-s", store, "-m", "players", "player2")
    assert result.exit_code == 1


# Test list prints entries in insertion order.
def test_cli_list(tmp_path):
    store = str(tmp_path / "world.db")
    run("set", "-s", store, "-m", "players", "player1", "Steve")
    run("set", "-s", store, "-m", "players", "player2", "Alex")

    result = run("list", "-s", store, "-m", "players")

    assert result.exit_code == 0
    assert "Map: players (2 entries)" in result.output
    assert 'player1: "Steve"' in result.output


# Test list --json prints a JSON object.
def test_cli_list_json(tmp_path):
    store = str(tmp_path / "world.db")
    run("set", "-s", store, "-m", "players", "player1", "Steve")

    result = run("list", "-s", store, "-m", "players", "--json")

    assert result.exit_code == 0
    assert json.loads(result.output) == {"player1": "Steve"}


# Test maps in the same store are listed separately.
def test_cli_maps_isolated(tmp_path):
    store = str(tmp_path / "world.db")
    run("set", "-s", store, "-m", "a", "x", "1")
    run("set", "-s", store, "-m", "b", "x", "2")

    result = run("list", "-s", store, "-m", "a", "--json")

    assert json.loads(result.output) == {"x": 1}


# Test clear with --yes empties the map.
def test_cli_clear(tmp_path):
    store = str(tmp_path / "world.db")
    run("set", "-s", store, "-m", "players", "player1", "Steve")

    result = run("clear", "-s", store, "-m", "players", "--yes")
    assert result.exit_code == 0
    assert "Removed 1 entries" in result.output

    result = run("list", "-s", store, "-m", "players", "--json")
    assert json.loads(result.output) == {}


# Test update reports zero writes on an in-sync map.
def test_cli_update(tmp_path):
    store = str(tmp_path / "world.db")
    run("set", "-s", store, "-m", "players", "player1", "Steve")

    result = run("update", "-s", store, "-m", "players")

    assert result.exit_code == 0
    assert "0 entries written" in result.output


# Test invalid map ids are reported as errors.
def test_cli_invalid_map_id(tmp_path):
    store = str(tmp_path / "world.db")

    result = run("get", "-s", store, "-m", "", "k")

    assert result.exit_code == 1
    assert "Error opening map" in result.output


# Test export then import copies entries between maps.
def test_cli_export_import(tmp_path):
    store = str(tmp_path / "world.db")
    snapshot = tmp_path / "out" / "players.json"
    run("set", "-s", store, "-m", "players", "player1", "Steve")
    run("set", "-s", store, "-m", "players", "stats", '{"hp": 20}')

    result = run("export", "-s", store, "-m", "players", "-o", str(snapshot))
    assert result.exit_code == 0
    assert "Exported 2 entries" in result.output
    assert json.loads(snapshot.read_text()) == {
        "player1": "Steve",
        "stats": {"hp": 20},
    }

    result = run(
        "import", "-s", store, "-m", "backup", "-i", str(snapshot), "--json"
    )
    assert result.exit_code == 0
    assert json.loads(result.output)["imported"] == 2

    result = run("list", "-s", store, "-m", "backup", "--json")
    assert json.loads(result.output) == {
        "player1": "Steve",
        "stats": {"hp": 20},
    }


# Test import rejects files that are not JSON objects.
def test_cli_import_invalid_file(tmp_path):
    store = str(tmp_path / "world.db")
    bad = tmp_path / "bad.json"
    bad.write_text("[1, 2, 3]")

    result = run("import", "-s", store, "-m", "players", "-i", str(bad))

    assert result.exit_code == 1
    assert "Error reading" in result.output
