import unittest

from bitmap_index import Bitset, InvalidIdError
from bitmap_index.base import MAX_ID
from bitmap_index.bitset import iter_word_bits


class TestBitset(unittest.TestCase):
    def test_empty(self):
        bitset = Bitset()
        self.assertEqual(bitset.word_count, 0)
        self.assertEqual(bitset.ids(), [])
        self.assertEqual(bitset.words(), [])
        self.assertEqual(bitset.to_binary_strings(), [])
        self.assertFalse(bitset.test(0))

    def test_insert_single_word(self):
        bitset = Bitset()
        for value in [1, 3, 5, 7, 9]:
            bitset.insert(value)
        self.assertEqual(bitset.word_count, 1)
        self.assertEqual(bitset.words(), [682])
        self.assertEqual(bitset.ids(), [1, 3, 5, 7, 9])

    def test_growth_to_word_of_largest_id(self):
        bitset = Bitset()
        bitset.insert(1024)
        self.assertEqual(bitset.word_count, 33)
        self.assertEqual(bitset.words()[:32], [0] * 32)
        self.assertEqual(bitset.words()[32], 1)

    def test_growth_never_shrinks(self):
        bitset = Bitset()
        bitset.insert(100)
        bitset.insert(3)
        self.assertEqual(bitset.word_count, 4)

    def test_insert_is_idempotent(self):
        bitset = Bitset()
        bitset.insert(40)
        bitset.insert(40)
        self.assertEqual(bitset.ids(), [40])
        self.assertEqual(bitset.word_count, 2)

    def test_high_bit(self):
        bitset = Bitset()
        bitset.insert(31)
        self.assertEqual(bitset.words(), [2 ** 31])
        self.assertEqual(bitset.to_binary_strings(), ["1" + "0" * 31])

    def test_test_out_of_range_does_not_grow(self):
        bitset = Bitset()
        bitset.insert(2)
        self.assertFalse(bitset.test(64))
        self.assertFalse(bitset.test(-1))
        self.assertEqual(bitset.word_count, 1)
        self.assertTrue(2 in bitset)

    def test_binary_rendering(self):
        bitset = Bitset([682, 0])
        self.assertEqual(
            bitset.to_binary_strings(),
            ["00000000000000000000001010101010", "0" * 32]
        )

    def test_ids_strictly_ascending(self):
        bitset = Bitset()
        for value in [95, 0, 64, 31, 32, 7, 95]:
            bitset.insert(value)
        self.assertEqual(bitset.ids(), [0, 7, 31, 32, 64, 95])

    def test_count(self):
        bitset = Bitset()
        for value in [0, 31, 32, 1000]:
            bitset.insert(value)
        self.assertEqual(bitset.count(), 4)

    def test_word_reads_zero_past_end(self):
        bitset = Bitset([5])
        self.assertEqual(bitset.word(0), 5)
        self.assertEqual(bitset.word(3), 0)

    def test_words_is_a_copy(self):
        bitset = Bitset()
        bitset.insert(1)
        words = bitset.words()
        words[0] = 0
        self.assertTrue(bitset.test(1))

    def test_insert_rejects_invalid_ids(self):
        with self.assertRaises(InvalidIdError):
            Bitset().insert(-1)
        bitset = Bitset()
        bitset.insert(40)
        for value in [-1, MAX_ID + 1, 1.0, "1", True]:
            with self.assertRaises(InvalidIdError):
                bitset.insert(value)
        self.assertEqual(bitset.ids(), [40])

    def test_test_non_integer_reads_false(self):
        bitset = Bitset()
        bitset.insert(1)
        for value in [1.0, "1", True, None]:
            self.assertFalse(bitset.test(value))

    def test_test_max_id_does_not_grow(self):
        bitset = Bitset()
        bitset.insert(3)
        self.assertFalse(bitset.test(MAX_ID))
        self.assertFalse(bitset.test(MAX_ID + 1))
        self.assertEqual(bitset.word_count, 1)

    def test_iter_word_bits(self):
        self.assertEqual(list(iter_word_bits(0b1011)), [0, 1, 3])
        self.assertEqual(list(iter_word_bits(0)), [])
        self.assertEqual(list(iter_word_bits(2 ** 31)), [31])


if __name__ == "__main__":
    unittest.main()
