"""Unit tests for map key namespacing."""

import pytest

from propmap.keys import (
    KEY_SEPARATOR,
    key_prefix,
    namespaced_key,
    strip_prefix,
    validate_map_id,
)

# --- Prefix construction ---


# Test prefix is NUL-joined root segments, id and trailing separator.
def test_key_prefix_format():
    assert key_prefix("test") == "database\x00map\x00test\x00"


# Test separator constant is the NUL character.
def test_key_separator_is_nul():
    assert KEY_SEPARATOR == "\x00"


# Test prefix is deterministic for the same id.
def test_key_prefix_is_deterministic():
    assert key_prefix("players") == key_prefix("players")


# Test an id that prefixes another id does not share its namespace.
def test_prefix_ids_do_not_overlap():
    short = key_prefix("a")
    long = key_prefix("ab")
    assert not long.startswith(short)
    assert not short.startswith(long)


# Test keys of different maps never collide, even with crafted keys.
def test_namespaced_keys_of_different_ids_differ():
    a = namespaced_key(key_prefix("a"), "bx")
    b = namespaced_key(key_prefix("ab"), "x")
    assert a != b


# --- Id validation ---


# Test valid ids are returned unchanged.
def test_validate_map_id_returns_id():
    assert validate_map_id("world-1") == "world-1"


# Test empty id is rejected.
def test_validate_map_id_rejects_empty():
    with pytest.raises(ValueError, match="non-empty"):
        validate_map_id("")


# Test non-string id is rejected.
def test_validate_map_id_rejects_non_string():
    with pytest.raises(ValueError, match="non-empty"):
        validate_map_id(42)  # type: ignore[arg-type]


# Test id containing the separator is rejected.
def test_validate_map_id_rejects_separator():
    with pytest.raises(ValueError, match="NUL"):
        validate_map_id("bad\x00id")


# Test key_prefix validates the id.
def test_key_prefix_rejects_invalid_id():
    with pytest.raises(ValueError):
        key_prefix("")


# --- Prefix stripping ---


# Test stripping recovers the user key.
def test_strip_prefix_recovers_key():
    prefix = key_prefix("test")
    assert strip_prefix(prefix, namespaced_key(prefix, "player1")) == (
        "player1"
    )


# Test stripping a foreign key returns None.
def test_strip_prefix_foreign_key_returns_none():
    assert strip_prefix(key_prefix("test"), "unrelated") is None


# Test a key owned by another map is not stripped.
def test_strip_prefix_other_map_returns_none():
    other = namespaced_key(key_prefix("testing"), "k")
    assert strip_prefix(key_prefix("test"), other) is None


# Test empty user keys and keys containing NUL survive stripping.
@pytest.mark.parametrize("key", ["", "a\x00b", "with space"])
def test_strip_prefix_unusual_keys(key):
    prefix = key_prefix("test")
    assert strip_prefix(prefix, namespaced_key(prefix, key)) == key
