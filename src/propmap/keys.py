"""
Key namespacing for maps sharing one flat property store.

Every stored key has the form::

    "database" NUL "map" NUL <map id> NUL <user key>

Map ids may not be empty or contain NUL, so the id segment is always
terminated by the first NUL after the "map" segment. This keeps the
key-spaces of two different ids disjoint, including ids where one is a
prefix of the other ("a" and "ab").
"""

from __future__ import annotations

from typing import Optional

KEY_SEPARATOR = "\x00"
_ROOT_SEGMENTS = ("database", "map")


def validate_map_id(map_id: str) -> str:
    """Check that a map id can be used to build a key prefix.

    Args:
        map_id: Identifier of a map instance.

    Returns:
        The id, unchanged.

    Raises:
        ValueError: If the id is not a non-empty string free of NUL.
    """
    if not isinstance(map_id, str) or not map_id:
        raise ValueError("Map id must be a non-empty string")
    if KEY_SEPARATOR in map_id:
        raise ValueError(f"Map id must not contain NUL: {map_id!r}")
    return map_id


def key_prefix(map_id: str) -> str:
    """Build the store key prefix owned by a map id."""
    validate_map_id(map_id)
    return KEY_SEPARATOR.join((*_ROOT_SEGMENTS, map_id)) + KEY_SEPARATOR


def namespaced_key(prefix: str, key: str) -> str:
    """Join a map prefix and a user key into a store key."""
    return prefix + key


def strip_prefix(prefix: str, full_key: str) -> Optional[str]:
    """Recover the user key from a store key.

    Returns:
        The user key, or None if full_key is outside the namespace.
    """
    if not full_key.startswith(prefix):
        return None
    return full_key[len(prefix) :]
