"""
Persistence adapter between a map's entries and a property store.

Translates (key, value) pairs into namespaced store keys and encoded
text, and back. Every operation is best-effort: failures are logged and
reported through a WriteStatus or by skipping the record, never raised.
"""

from __future__ import annotations

import logging
from enum import Enum
from typing import Any, Generic, Iterator, Optional, TypeVar

from propmap.encoders.base import ValueEncoder
from propmap.errors import DecodeError, EncodeError, StoreError
from propmap.keys import key_prefix, namespaced_key, strip_prefix
from propmap.store.base import PropertyStore

logger = logging.getLogger(__name__)

T = TypeVar("T")


class WriteStatus(str, Enum):
    """Outcome of pushing one entry to the property store."""

    WRITTEN = "written"
    CLEARED = "cleared"
    FAILED = "failed"

    @property
    def ok(self) -> bool:
        """True if the store now reflects the requested state."""
        return self is not WriteStatus.FAILED


class _Missing:
    """Sentinel type for a key with no persisted value."""

    def __repr__(self) -> str:
        return "MISSING"


MISSING: Any = _Missing()


class PersistenceAdapter(Generic[T]):
    """Reads and writes one map's entries in a shared property store.

    Attributes:
        map_id: Identifier of the owning map.
        prefix: Store key prefix owned by map_id.
        store: The shared property store.
        encoder: Encoder converting values to stored text.
    """

    def __init__(
        self,
        map_id: str,
        store: PropertyStore,
        encoder: ValueEncoder[T],
    ) -> None:
        self.map_id = map_id
        self.prefix = key_prefix(map_id)
        self.store = store
        self.encoder = encoder

    def namespaced_key(self, key: str) -> str:
        """Return the store key holding the value for key."""
        return namespaced_key(self.prefix, key)

    def load_all(self) -> Iterator[tuple[str, T]]:
        """Yield every decodable entry stored under this map's prefix.

        Records that fail to read or decode are logged and skipped so
        that one corrupt entry does not block the rest.
        """
        try:
            full_keys = list(self.store.enumerate_keys())
        except StoreError as e:
            logger.warning(
                f"Map '{self.map_id}': store rejected key listing: {e}"
            )
            return

        loaded = skipped = 0
        for full_key in full_keys:
            key = strip_prefix(self.prefix, full_key)
            if key is None:
                continue
            value = self._read_full_key(full_key, key)
            if value is MISSING:
                skipped += 1
                continue
            loaded += 1
            yield key, value

        logger.debug(
            f"Map '{self.map_id}' loaded {loaded} entries"
            f" ({skipped} skipped)"
        )

    def read(self, key: str) -> Any:
        """Return the persisted value for key, or MISSING.

        MISSING is returned when the key is unset and also when the
        stored text cannot be read or decoded.
        """
        return self._read_full_key(self.namespaced_key(key), key)

    def is_current(self, key: str, value: T) -> bool:
        """Check whether the persisted value for key already matches value.

        The comparison is made against value as it would read back
        after encoding, so values the encoder normalises (tuples to
        lists, int dict keys to strings) still compare equal.
        """
        stored = self.read(key)
        if stored is MISSING:
            return False
        try:
            canonical = self.encoder.decode(self.encoder.encode(value))
        except (EncodeError, DecodeError):
            return False
        return bool(stored == canonical)

    def has_record(self, key: str) -> bool:
        """Check whether any text is stored for key, decodable or not.

        A store that rejects the read is assumed to hold a record.
        """
        try:
            return self.store.read_raw(self.namespaced_key(key)) is not None
        except StoreError as e:
            logger.warning(
                f"Map '{self.map_id}': store rejected read of {key!r}: {e}"
            )
            return True

    def write(self, key: str, value: Optional[T]) -> WriteStatus:
        """Persist value under key, or clear the record if value is None.

        Args:
            key: User key (unprefixed).
            value: Value to store; None requests removal.

        Returns:
            WRITTEN or CLEARED on success, FAILED if encoding or the
            store rejected the write.
        """
        if value is None:
            return self.clear(key)

        try:
            text = self.encoder.encode(value)
        except EncodeError as e:
            logger.warning(
                f"Map '{self.map_id}': cannot encode value for {key!r}: {e}"
            )
            return WriteStatus.FAILED

        try:
            self.store.write_raw(self.namespaced_key(key), text)
        except StoreError as e:
            logger.warning(
                f"Map '{self.map_id}': store rejected write of {key!r}: {e}"
            )
            return WriteStatus.FAILED
        return WriteStatus.WRITTEN

    def clear(self, key: str) -> WriteStatus:
        """Remove the persisted record for key, if any."""
        try:
            self.store.write_raw(self.namespaced_key(key), None)
        except StoreError as e:
            logger.warning(
                f"Map '{self.map_id}': store rejected clear of {key!r}: {e}"
            )
            return WriteStatus.FAILED
        return WriteStatus.CLEARED

    def _read_full_key(self, full_key: str, key: str) -> Any:
        try:
            text = self.store.read_raw(full_key)
        except StoreError as e:
            logger.warning(
                f"Map '{self.map_id}': store rejected read of {key!r}: {e}"
            )
            return MISSING
        if text is None:
            return MISSING
        try:
            return self.encoder.decode(text)
        except DecodeError as e:
            logger.warning(
                f"Map '{self.map_id}': cannot decode value for {key!r}: {e}"
            )
            return MISSING
