"""
Abstract base class for property stores.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Iterable, Optional


class PropertyStore(ABC):
    """A flat namespace of string keys holding string values.

    Stores are shared between unrelated consumers; map instances only
    touch keys under their own prefix.

    Implementations may raise StoreError from write_raw() when the
    write is rejected (quota exceeded, store unavailable).
    """

    @abstractmethod
    def enumerate_keys(self) -> Iterable[str]:
        """Return every key currently stored, in unspecified order."""
        ...

    @abstractmethod
    def read_raw(self, key: str) -> Optional[str]:
        """Return the stored text for key, or None if unset."""
        ...

    @abstractmethod
    def write_raw(self, key: str, value: Optional[str]) -> None:
        """Store text under key, or remove key when value is None.

        Removing a key that is not set is a no-op.
        """
        ...
