from typing import Any, Dict, List, Optional

from .base import (
    DEFAULT_CONFIG,
    BitmapIndexError,
    IndexStats,
    InvalidIdError,
    KeyNotFound,
    KeyNotFoundError,
)
from .bitset import Bitset
from .builder import FlagIndexBuilder
from .engine import BitmapIndex, SetOperations, suggest_keys


__all__ = [
    "BitmapIndex",
    "Bitset",
    "SetOperations",
    "FlagIndexBuilder",
    "IndexStats",
    "BitmapIndexError",
    "KeyNotFoundError",
    "KeyNotFound",
    "InvalidIdError",
    "DEFAULT_CONFIG",
    "suggest_keys",
    "load_index"
]

__version__ = "0.1.0"


def load_index(records: Optional[List[Dict]] = None, config: Optional[Dict[str, Any]] = None) -> BitmapIndex:
    """
    Factory function for an index.

    Args:
        records: Optional records ({"id": int, "flags": [...]}) to load.
                 If not provided, an empty index is returned.
        config: Optional overrides merged onto DEFAULT_CONFIG
    """
    if records is None:
        return BitmapIndex(config)
    return FlagIndexBuilder(records, config).build()
