import logging
from typing import Any, Dict, Iterable, List, Optional

import Levenshtein

from .base import IndexStats, KeyNotFoundError, WORD_BITS, merge_config
from .bitset import Bitset, iter_word_bits


logger = logging.getLogger(__name__)


def suggest_keys(key: str, candidates: Iterable[str], max_distance: int = 2, limit: int = 3) -> List[str]:
    """Return up to `limit` candidates within `max_distance` edits of key, closest first."""
    scored = []
    for candidate in candidates:
        distance = Levenshtein.distance(key, candidate)
        if distance <= max_distance:
            scored.append((distance, candidate))
    scored.sort()
    return [candidate for _, candidate in scored[:limit]]


class SetOperations:
    """Pairwise set algebra evaluated word by word over the bitsets of an index."""

    def __init__(self, index_data: Dict[str, Bitset], config: Dict[str, Any]):
        self.index = index_data
        self.config = config

    def intersection(self, key1: str, key2: str) -> List[int]:
        """
        Ids present under both keys.

        Only the word range of key1 is scanned; words missing from a shorter
        key2 read as zero. Raises KeyNotFoundError if either key is absent.
        """
        first = self.require(key1)
        second = self.require(key2)

        result = []
        for word_idx in range(first.word_count):
            word = first.word(word_idx) & second.word(word_idx)
            base = word_idx * WORD_BITS
            result.extend(base + bit for bit in iter_word_bits(word))
        return result

    def union(self, key1: str, key2: str) -> List[int]:
        """Ids present under either key; empty if either key is absent."""
        first = self.index.get(key1)
        second = self.index.get(key2)
        if first is None or second is None:
            return []

        result = []
        for word_idx in range(max(first.word_count, second.word_count)):
            word = first.word(word_idx) | second.word(word_idx)
            base = word_idx * WORD_BITS
            result.extend(base + bit for bit in iter_word_bits(word))
        return result

    def require(self, key: str) -> Bitset:
        bitset = self.index.get(key)
        if bitset is not None:
            return bitset

        suggestions = []
        if self.config["suggest_missing_keys"]:
            suggestions = self.suggest(key)
        logger.debug(f"Key {key!r} not found, suggestions: {suggestions}")
        raise KeyNotFoundError(key, suggestions)

    def suggest(self, key: str) -> List[str]:
        return suggest_keys(
            key,
            self.index,
            max_distance=self.config["max_edit_distance"],
            limit=self.config["max_suggestions"]
        )


class BitmapIndex:
    """Inverted index from string keys to bitsets of integer ids."""

    def __init__(self, config: Optional[Dict[str, Any]] = None):
        self.config = merge_config(config)
        self.index: Dict[str, Bitset] = {}
        self.set_operations = SetOperations(self.index, self.config)

    def insert(self, key: str, value: int):
        bitset = self.index.get(key)
        if bitset is not None:
            bitset.insert(value)
            return

        bitset = Bitset()
        bitset.insert(value)
        self.index[key] = bitset
        logger.debug(f"Created bitset for key {key!r}")

    def batch_insert(self, key: str, values: Iterable[int]):
        for value in values:
            self.insert(key, value)

    def get(self, key: str, value: int) -> bool:
        bitset = self.index.get(key)
        if bitset is None:
            return False
        return bitset.test(value)

    def list(self, key: str) -> List[int]:
        bitset = self.index.get(key)
        if bitset is None:
            return []
        return bitset.ids()

    def list_raw_words(self, key: str) -> List[int]:
        """Raw 32-bit words backing key, for low-level inspection."""
        bitset = self.index.get(key)
        if bitset is None:
            return []
        return bitset.words()

    def get_as_binary(self, key: str) -> List[str]:
        return self.set_operations.require(key).to_binary_strings()

    def and_operation(self, key1: str, key2: str) -> List[int]:
        return self.set_operations.intersection(key1, key2)

    def or_operation(self, key1: str, key2: str) -> List[int]:
        return self.set_operations.union(key1, key2)

    def count(self, key: str) -> int:
        bitset = self.index.get(key)
        if bitset is None:
            return 0
        return bitset.count()

    def keys(self) -> List[str]:
        return sorted(self.index)

    def suggest_keys(self, key: str) -> List[str]:
        return self.set_operations.suggest(key)

    def stats(self) -> IndexStats:
        return IndexStats(
            key_count=len(self.index),
            word_count=sum(b.word_count for b in self.index.values()),
            member_count=sum(b.count() for b in self.index.values())
        )

    def __contains__(self, key: object) -> bool:
        return key in self.index

    def __len__(self) -> int:
        return len(self.index)

    def __repr__(self) -> str:
        return f"BitmapIndex(keys={self.keys()!r})"
