"""
Typed encoder backed by pydantic.

Lets a map be parameterised over a concrete value type, for example a
pydantic model or a dataclass, with validation on load.
"""

from __future__ import annotations

from typing import Any, Generic, TypeVar

from pydantic import TypeAdapter, ValidationError
from pydantic_core import PydanticSerializationError

from propmap.encoders.base import ValueEncoder
from propmap.errors import DecodeError, EncodeError

T = TypeVar("T")


class ModelEncoder(ValueEncoder[T], Generic[T]):
    """Encoding for values of one declared type.

    Values are dumped to JSON by pydantic and validated against the
    declared type when decoded, so a stored record that no longer
    matches the type is reported as a decode failure.

    Attributes:
        value_type: The declared value type.

    Example:
        >>> from pydantic import BaseModel
        >>> class Player(BaseModel):
        ...     name: str
        ...     level: int = 1
        >>> encoder = ModelEncoder(Player)
        >>> encoder.decode(encoder.encode(Player(name="Steve")))
        Player(name='Steve', level=1)
    """

    def __init__(self, value_type: Any) -> None:
        self.value_type = value_type
        self._adapter: TypeAdapter[T] = TypeAdapter(value_type)

    def encode(self, value: T) -> str:
        """Encode a value of the declared type to JSON text.

        Raises:
            EncodeError: If pydantic cannot serialise the value.
        """
        try:
            return self._adapter.dump_json(value).decode("utf-8")
        except (PydanticSerializationError, TypeError, ValueError) as e:
            raise EncodeError(f"Cannot serialise value: {e}") from e

    def decode(self, text: str) -> T:
        """Decode and validate JSON text against the declared type.

        Raises:
            DecodeError: If text is not valid JSON for the declared type.
        """
        try:
            return self._adapter.validate_json(text)
        except (ValidationError, TypeError, ValueError) as e:
            raise DecodeError(
                f"Stored value does not match type: {e}"
            ) from e
