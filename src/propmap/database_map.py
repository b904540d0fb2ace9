"""
DatabaseMap: in-memory map with write-through persistence.

Reads are served from an insertion-ordered dict loaded eagerly at
construction. Every mutation updates the dict first and then pushes the
matching write to the property store; persistence failures are logged
by the adapter and otherwise ignored, so the in-memory view stays
authoritative for the life of the instance.

Instances are not thread-safe and must not be mutated re-entrantly
(for example from inside a for_each() callback).
"""

from __future__ import annotations

import logging
from typing import Any, Callable, Generic, Iterator, Optional, TypeVar

from propmap.adapter import PersistenceAdapter, WriteStatus
from propmap.encoders.base import ValueEncoder
from propmap.encoders.json_encoder import JsonEncoder
from propmap.store.base import PropertyStore
from propmap.store.memory import MemoryStore

logger = logging.getLogger(__name__)

T = TypeVar("T")

_NO_RECEIVER = object()


class DatabaseMap(Generic[T]):
    """A persistent key-value map namespaced by id.

    Iterating a DatabaseMap yields (key, value) pairs in insertion
    order. A value of None stands for "absent": it is never stored, and
    setting it removes the persisted record.

    Attributes:
        id: Identifier separating this map's keys from other maps
            sharing the same store.

    Example:
        >>> db = DatabaseMap("test", MemoryStore())
        >>> db.set("player1", "Steve")
        >>> db.get("player1")
        'Steve'
        >>> list(db)
        [('player1', 'Steve')]
    """

    def __init__(
        self,
        id: str,
        store: Optional[PropertyStore] = None,
        encoder: Optional[ValueEncoder[T]] = None,
    ) -> None:
        """Create the map and load its persisted entries.

        Args:
            id: Unique map id. Must be non-empty and free of NUL.
            store: Property store to persist to. Defaults to a private
                MemoryStore.
            encoder: Value encoder. Defaults to JsonEncoder.

        Raises:
            ValueError: If id is not a valid map id.
        """
        self._adapter: PersistenceAdapter[T] = PersistenceAdapter(
            id,
            store if store is not None else MemoryStore(),
            encoder if encoder is not None else JsonEncoder(),
        )
        self._id = id
        self._map: dict[str, T] = dict(self._adapter.load_all())

    @property
    def id(self) -> str:
        """Identifier of this map instance."""
        return self._id

    @property
    def store(self) -> PropertyStore:
        """The property store backing this map."""
        return self._adapter.store

    @property
    def size(self) -> int:
        """Number of entries in the map."""
        return len(self._map)

    def __len__(self) -> int:
        return len(self._map)

    def __repr__(self) -> str:
        return f"DatabaseMap({self._id!r}, size={len(self._map)})"

    # ========================================================================
    # Lookup
    # ========================================================================

    def get(self, key: str, default: Optional[T] = None) -> Optional[T]:
        """Return the value for key, or default if key is not present."""
        return self._map.get(key, default)

    def has(self, key: str) -> bool:
        """Check if key is present."""
        return key in self._map

    def __contains__(self, key: object) -> bool:
        return key in self._map

    def __getitem__(self, key: str) -> T:
        return self._map[key]

    # ========================================================================
    # Mutation (write-through)
    # ========================================================================

    def set(self, key: str, value: T) -> None:
        """Set key to value and persist it.

        Overwriting keeps the key's original position in iteration
        order.
        """
        self._map[key] = value
        self._adapter.write(key, value)

    def delete(self, key: str) -> None:
        """Remove key from the map and from persistent storage.

        Deleting a missing key is a no-op in memory; the store record
        is still cleared.
        """
        self._map.pop(key, None)
        self._adapter.clear(key)

    def __setitem__(self, key: str, value: T) -> None:
        self.set(key, value)

    def __delitem__(self, key: str) -> None:
        if key not in self._map:
            raise KeyError(key)
        self.delete(key)

    def clear(self) -> None:
        """Remove every entry and its persisted record."""
        for key in self._map:
            self._adapter.clear(key)
        self._map.clear()

    # ========================================================================
    # Iteration
    # ========================================================================

    def __iter__(self) -> Iterator[tuple[str, T]]:
        return iter(self._map.items())

    def entries(self) -> Iterator[tuple[str, T]]:
        """Return an iterator over (key, value) pairs."""
        return iter(self._map.items())

    def keys(self) -> Iterator[str]:
        """Return an iterator over keys."""
        return iter(self._map.keys())

    def values(self) -> Iterator[T]:
        """Return an iterator over values."""
        return iter(self._map.values())

    def for_each(
        self,
        callback: Callable[..., Any],
        this_arg: Any = _NO_RECEIVER,
    ) -> None:
        """Call callback(value, key) for each entry in insertion order.

        Args:
            callback: Function called once per entry.
            this_arg: Optional receiver. When given, callback is called
                as callback(this_arg, value, key), so an unbound method
                can be applied to an object.
        """
        for key, value in list(self._map.items()):
            if this_arg is _NO_RECEIVER:
                callback(value, key)
            else:
                callback(this_arg, value, key)

    # ========================================================================
    # Reconciliation
    # ========================================================================

    def update(self) -> int:
        """Push entries whose persisted value differs from memory.

        Absent (None) values have their record cleared if one exists.
        Entries whose stored value decodes equal to the in-memory value,
        as that value reads back through the encoder, are skipped, so a
        second call with no mutation writes nothing.

        Returns:
            Number of store writes issued that succeeded.
        """
        writes = 0
        failed = 0
        for key, value in list(self._map.items()):
            if value is None:
                if not self._adapter.has_record(key):
                    continue
                status = self._adapter.clear(key)
            elif self._adapter.is_current(key, value):
                continue
            else:
                status = self._adapter.write(key, value)

            if status is WriteStatus.FAILED:
                failed += 1
            else:
                writes += 1

        logger.debug(
            f"Map '{self._id}' reconciled: {writes} written, {failed} failed"
        )
        return writes

