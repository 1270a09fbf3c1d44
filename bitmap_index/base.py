from dataclasses import dataclass
from typing import Any, Dict, List, Optional


WORD_BITS = 32
WORD_MASK = (1 << WORD_BITS) - 1
MAX_ID = WORD_MASK

DEFAULT_CONFIG: Dict[str, Any] = {
    "suggest_missing_keys": True,
    "max_suggestions": 3,
    "max_edit_distance": 2,
}


class BitmapIndexError(Exception):
    """Base class for all index errors."""


class KeyNotFoundError(BitmapIndexError, KeyError):
    """Raised when an operation requires a key that was never inserted."""

    def __init__(self, key: str, suggestions: Optional[List[str]] = None):
        self.key = key
        self.suggestions = list(suggestions or [])
        super().__init__(key)

    def __str__(self) -> str:
        message = f"Key not found: {self.key!r}"
        if self.suggestions:
            message += f" (did you mean: {', '.join(self.suggestions)}?)"
        return message


# Alias matching the name used in the operation contract
KeyNotFound = KeyNotFoundError


class InvalidIdError(BitmapIndexError, ValueError):
    """Raised when an id is not an unsigned 32-bit integer."""

    def __init__(self, value: Any):
        self.value = value
        super().__init__(f"Invalid id {value!r}: expected an integer in [0, {MAX_ID}]")


def check_id(value: Any) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise InvalidIdError(value)
    if value < 0 or value > MAX_ID:
        raise InvalidIdError(value)
    return value


def merge_config(overrides: Optional[Dict[str, Any]] = None) -> Dict[str, Any]:
    """Return DEFAULT_CONFIG updated with overrides, rejecting unknown keys."""
    config = dict(DEFAULT_CONFIG)
    if overrides:
        unknown = set(overrides) - set(DEFAULT_CONFIG)
        if unknown:
            raise ValueError(f"Unknown config option(s): {', '.join(sorted(unknown))}")
        config.update(overrides)

    max_suggestions = config["max_suggestions"]
    if isinstance(max_suggestions, bool) or not isinstance(max_suggestions, int) or max_suggestions < 1:
        raise ValueError(f"max_suggestions must be a positive integer, got {max_suggestions!r}")
    max_edit_distance = config["max_edit_distance"]
    if isinstance(max_edit_distance, bool) or not isinstance(max_edit_distance, int) or max_edit_distance < 0:
        raise ValueError(f"max_edit_distance must be a non-negative integer, got {max_edit_distance!r}")
    return config


@dataclass
class IndexStats:
    """Size summary of an index."""
    key_count: int
    word_count: int
    member_count: int

    def to_dict(self) -> Dict[str, Any]:
        return {
            "key_count": self.key_count,
            "word_count": self.word_count,
            "member_count": self.member_count
        }
