import array
from typing import Iterable, Iterator, List, Optional

from .base import MAX_ID, WORD_BITS, check_id


def iter_word_bits(word: int) -> Iterator[int]:
    """Yield the positions of the set bits in word, lowest first."""
    while word:
        lowest = word & -word
        yield lowest.bit_length() - 1
        word ^= lowest


class Bitset:
    """Growable set of small non-negative integers packed into 32-bit words."""

    def __init__(self, words: Optional[Iterable[int]] = None):
        self._words = array.array("I")
        if words is not None:
            self._words.extend(words)

    @property
    def word_count(self) -> int:
        return len(self._words)

    def insert(self, value: int):
        check_id(value)
        word_idx, bit_idx = divmod(value, WORD_BITS)
        if word_idx >= len(self._words):
            self._words.extend([0] * (word_idx + 1 - len(self._words)))
        self._words[word_idx] |= (1 << bit_idx)

    def test(self, value: int) -> bool:
        if isinstance(value, bool) or not isinstance(value, int):
            return False
        if value < 0 or value > MAX_ID:
            return False
        word_idx, bit_idx = divmod(value, WORD_BITS)
        if word_idx >= len(self._words):
            return False
        return bool(self._words[word_idx] & (1 << bit_idx))

    def word(self, word_idx: int) -> int:
        """Word at word_idx, reading zero past the end."""
        if word_idx < len(self._words):
            return self._words[word_idx]
        return 0

    def words(self) -> List[int]:
        return self._words.tolist()

    def ids(self) -> List[int]:
        result = []
        for word_idx, word in enumerate(self._words):
            base = word_idx * WORD_BITS
            result.extend(base + bit for bit in iter_word_bits(word))
        return result

    def to_binary_strings(self) -> List[str]:
        """Render each word as a 32-character string, most significant bit first."""
        return [f"{word:0{WORD_BITS}b}" for word in self._words]

    def count(self) -> int:
        count = 0
        for word in self._words:
            n = word
            while n:
                n &= n - 1
                count += 1
        return count

    def __contains__(self, value: int) -> bool:
        return self.test(value)

    def __repr__(self) -> str:
        return f"Bitset({self.ids()!r})"
