"""
Abstract base class for value encoders.

Encoders transform map values to/from the text representation stored
in the property store.
"""

from __future__ import annotations

import json
from abc import ABC, abstractmethod
from pathlib import Path
from typing import Any, Generic, TypeVar

T = TypeVar("T")


class ValueEncoder(ABC, Generic[T]):
    """Abstract base class for map value encoders.

    Encoders handle:
    - Encoding values to text for the property store
    - Decoding stored text back to values
    - Exporting a map snapshot to a human-readable file
    - Importing a map snapshot from a human-readable file

    Implementations raise EncodeError / DecodeError on failure; the
    persistence adapter catches these.

    Example:
        >>> class UpperEncoder(ValueEncoder[str]):
        ...     def encode(self, value):
        ...         return value.upper()
        ...     def decode(self, text):
        ...         return text.lower()
    """

    @property
    def default_export_format(self) -> str:
        """Default file extension for exports."""
        return "json"

    @abstractmethod
    def encode(self, value: T) -> str:
        """Encode a value to stored text.

        Args:
            value: The value to encode.

        Returns:
            Text representation for the property store.

        Raises:
            EncodeError: If the value cannot be represented.
        """
        ...

    @abstractmethod
    def decode(self, text: str) -> T:
        """Decode stored text back to a value.

        Args:
            text: Text read from the property store.

        Returns:
            The decoded value.

        Raises:
            DecodeError: If the text is not a valid encoding.
        """
        ...

    def export(self, entries: dict[str, T], path: Path) -> None:
        """Export map entries to a JSON file keyed by user key.

        Args:
            entries: Mapping of user key to value.
            path: Destination file path.
        """
        data = {
            key: json.loads(self.encode(value))
            for key, value in entries.items()
        }
        path.write_text(json.dumps(data, indent=2))

    def import_(self, path: Path) -> dict[str, T]:
        """Import map entries from a JSON file written by export().

        Args:
            path: Source file path.

        Returns:
            Mapping of user key to decoded value.
        """
        data: Any = json.loads(path.read_text())
        if not isinstance(data, dict):
            raise ValueError(f"Expected a JSON object in {path}")
        return {key: self.decode(json.dumps(raw)) for key, raw in data.items()}
