"""
Generic JSON encoder for map values.

Stores values as compact JSON text with sorted object keys, so equal
values always produce identical stored text.
"""

from __future__ import annotations

import json
from typing import Any

from propmap.encoders.base import ValueEncoder
from propmap.errors import DecodeError, EncodeError


class JsonEncoder(ValueEncoder[Any]):
    """Encoding for JSON-serialisable values.

    Accepts dicts, lists, strings, numbers, booleans and None. NaN and
    infinities are rejected since they are not valid JSON.

    Example:
        >>> encoder = JsonEncoder()
        >>> encoder.encode({"b": 1, "a": [True, None]})
        '{"a":[true,null],"b":1}'
        >>> encoder.decode('"Steve"')
        'Steve'
    """

    def encode(self, value: Any) -> str:
        """Encode a JSON-serialisable value to compact JSON text.

        Args:
            value: Any JSON-serialisable value.

        Returns:
            JSON text.

        Raises:
            EncodeError: If the value is not JSON-serialisable.
        """
        try:
            return json.dumps(
                value,
                separators=(",", ":"),
                sort_keys=True,
                ensure_ascii=False,
                allow_nan=False,
            )
        except (TypeError, ValueError) as e:
            raise EncodeError(f"Value is not JSON-serialisable: {e}") from e

    def decode(self, text: str) -> Any:
        """Decode JSON text.

        Args:
            text: Stored JSON text.

        Returns:
            Decoded JSON value.

        Raises:
            DecodeError: If text is not valid JSON.
        """
        if not isinstance(text, str):
            raise DecodeError(
                f"Expected stored text, got {type(text).__name__}"
            )
        try:
            return json.loads(text)
        except json.JSONDecodeError as e:
            raise DecodeError(f"Invalid JSON: {e}") from e
