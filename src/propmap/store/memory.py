"""
In-memory property store.

Useful for tests and for maps that only need process lifetime
durability. An optional byte quota mimics hosts that reject writes
near their storage limit.
"""

from __future__ import annotations

from typing import Iterable, Optional

from propmap.errors import StoreError
from propmap.store.base import PropertyStore


class MemoryStore(PropertyStore):
    """Dict-backed property store.

    Attributes:
        max_bytes: Optional quota on total key + value length.
        writes: Number of write_raw() calls accepted so far.

    Example:
        >>> store = MemoryStore()
        >>> store.write_raw("k", '"v"')
        >>> store.read_raw("k")
        '"v"'
    """

    def __init__(self, max_bytes: Optional[int] = None) -> None:
        self.max_bytes = max_bytes
        self.writes = 0
        self._data: dict[str, str] = {}

    def __len__(self) -> int:
        return len(self._data)

    def __contains__(self, key: object) -> bool:
        return key in self._data

    @property
    def used_bytes(self) -> int:
        """Total length of all stored keys and values."""
        return sum(len(k) + len(v) for k, v in self._data.items())

    def enumerate_keys(self) -> Iterable[str]:
        return list(self._data)

    def read_raw(self, key: str) -> Optional[str]:
        return self._data.get(key)

    def write_raw(self, key: str, value: Optional[str]) -> None:
        if value is None:
            self._data.pop(key, None)
            self.writes += 1
            return

        if self.max_bytes is not None:
            current = self._data.get(key)
            freed = len(key) + len(current) if current is not None else 0
            needed = self.used_bytes - freed + len(key) + len(value)
            if needed > self.max_bytes:
                raise StoreError(
                    f"Store quota exceeded: {needed} > {self.max_bytes} bytes"
                )

        self._data[key] = value
        self.writes += 1
