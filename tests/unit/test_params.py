"""Unit tests for MapParams and open_map."""

from pathlib import Path

import pytest
from pydantic import ValidationError

from propmap import DatabaseMap, MapParams, open_map
from propmap.encoders import JsonEncoder
from propmap.params import ENCODERS, create_encoder
from propmap.store import SqliteStore


# Test defaults use an in-memory store and the JSON encoder.
def test_defaults():
    params = MapParams(map_id="players")
    assert params.store_path == ":memory:"
    assert params.encoder == "json"


# Test Path values for store_path are accepted.
def test_store_path_accepts_path():
    params = MapParams(map_id="p", store_path=Path("world.db"))
    assert params.store_path == "world.db"


# Test ids containing NUL fail validation.
def test_invalid_map_id_rejected():
    with pytest.raises(ValidationError, match="NUL"):
        MapParams(map_id="a\x00b")


# Test empty ids fail validation.
def test_empty_map_id_rejected():
    with pytest.raises(ValidationError):
        MapParams(map_id="")


# Test unknown encoders fail validation.
def test_unknown_encoder_rejected():
    with pytest.raises(ValidationError):
        MapParams(map_id="p", encoder="pickle")


# Test from_dict ignores keys that are not parameters.
def test_from_dict_ignores_unknown_keys():
    params = MapParams.from_dict({"map_id": "p", "action": "set"})
    assert params.map_id == "p"


# Test open_map returns a loaded map and an open store.
def test_open_map():
    db, store = open_map(MapParams(map_id="players"))
    try:
        assert isinstance(db, DatabaseMap)
        assert isinstance(store, SqliteStore)
        assert store.is_open
        assert db.id == "players"
        db.set("k", 1)
        assert store.key_count() == 1
    finally:
        store.close()


# Test create_encoder builds registered encoders by name.
def test_create_encoder():
    assert isinstance(create_encoder("json"), JsonEncoder)


# Test create_encoder rejects unknown names.
def test_create_encoder_unknown_name():
    with pytest.raises(ValueError, match="Unknown encoder"):
        create_encoder("pickle")


# Test open_map builds the encoder named in params.
def test_open_map_uses_params_encoder(monkeypatch):
    class TaggedEncoder(JsonEncoder):
        pass

    monkeypatch.setitem(ENCODERS, "json", TaggedEncoder)
    db, store = open_map(MapParams(map_id="players", encoder="json"))
    try:
        db.set("k", 1)
        assert isinstance(db._adapter.encoder, TaggedEncoder)
    finally:
        store.close()
