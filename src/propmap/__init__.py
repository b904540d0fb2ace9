"""
propmap: namespaced key-value maps persisted to a flat property store.
"""

from propmap.adapter import PersistenceAdapter, WriteStatus
from propmap.database_map import DatabaseMap
from propmap.errors import DecodeError, EncodeError, PropMapError, StoreError
from propmap.params import MapParams, open_map

__version__ = "0.1.0"
__author__ = "propmap contributors"

# Package metadata
__title__ = "propmap"
__description__ = "Namespaced key-value maps with write-through persistence"

__license__ = "MIT"

# Version tuple for programmatic access (major, minor, patch)
VERSION = (0, 1, 0)

__all__ = [
    "__version__",
    "__author__",
    "VERSION",
    # Core map
    "DatabaseMap",
    "PersistenceAdapter",
    "WriteStatus",
    # Configuration
    "MapParams",
    "open_map",
    # Errors
    "PropMapError",
    "EncodeError",
    "DecodeError",
    "StoreError",
]
