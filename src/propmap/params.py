"""Parameter models for opening a map.

This module provides a Pydantic model validating how a map is opened,
shared between the CLI commands and library callers.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any, Literal

from pydantic import BaseModel, Field, field_validator

from propmap.database_map import DatabaseMap
from propmap.encoders.base import ValueEncoder
from propmap.encoders.json_encoder import JsonEncoder
from propmap.keys import validate_map_id
from propmap.store.sqlite_store import SqliteStore


# Encoders selectable by name from MapParams.encoder
ENCODERS: dict[str, type[ValueEncoder[Any]]] = {
    "json": JsonEncoder,
}


class MapParams(BaseModel):
    """Parameters for opening a DatabaseMap on a SQLite store.

    Attributes:
        map_id: Identifier namespacing the map's keys.
        store_path: Path to the SQLite store, or ":memory:".
        encoder: Name of the value encoder.

    Example:
        >>> params = MapParams(map_id="players", store_path="world.db")
        >>> db, store = open_map(params)
    """

    map_id: str = Field(
        ...,
        description="Identifier namespacing the map's keys",
    )
    store_path: str = Field(
        default=":memory:",
        description="Path to the SQLite property store",
    )
    encoder: Literal["json"] = Field(
        default="json",
        description="Value encoder name",
    )

    @field_validator("map_id")
    @classmethod
    def check_map_id(cls, v: str) -> str:
        """Reject ids that cannot form a unique key prefix."""
        return validate_map_id(v)

    @field_validator("store_path", mode="before")
    @classmethod
    def coerce_store_path(cls, v: Any) -> Any:
        """Accept Path objects for store_path."""
        if isinstance(v, Path):
            return str(v)
        return v

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "MapParams":
        """Create params from a dictionary, ignoring unknown keys.

        Args:
            data: Dictionary of parameter values.

        Returns:
            Validated MapParams instance.
        """
        known = {k: v for k, v in data.items() if k in cls.model_fields}
        return cls(**known)


def create_encoder(name: str) -> ValueEncoder[Any]:
    """Build the value encoder registered under name.

    Raises:
        ValueError: If no encoder is registered under name.
    """
    try:
        return ENCODERS[name]()
    except KeyError:
        raise ValueError(f"Unknown encoder: {name}") from None


def open_map(params: MapParams) -> tuple[DatabaseMap[Any], SqliteStore]:
    """Open the store described by params and load the map from it.

    The caller owns the returned store and must close it.

    Args:
        params: Validated map parameters.

    Returns:
        Tuple of (loaded map, open store).
    """
    store = SqliteStore(params.store_path).open()
    encoder = create_encoder(params.encoder)
    return DatabaseMap(params.map_id, store, encoder), store
